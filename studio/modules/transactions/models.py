from __future__ import annotations

from datetime import date
from decimal import Decimal

from sqlalchemy import Integer, String, Date, Numeric, CheckConstraint
from sqlalchemy.orm import Mapped, mapped_column

from studio.db.base import Base
from studio.utils.status import (
    TRANSACTION_TYPES as TYPE_CHOICES,
    TRANSACTION_STATUSES as STATUS_CHOICES,
    TRANSACTION_DEFAULT_STATUS as DEFAULT_STATUS,
)


class Transaction(Base):
    __tablename__ = "transactions"

    __table_args__ = (
        # guarda só valores conhecidos de tipo/status
        CheckConstraint(f"type in {TYPE_CHOICES}", name="ck_transaction_type_valido"),
        CheckConstraint(f"status in {STATUS_CHOICES}", name="ck_transaction_status_valido"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)

    description: Mapped[str] = mapped_column(String(255), nullable=False)
    # Decimal é mais seguro p/ dinheiro
    amount: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    type: Mapped[str] = mapped_column(String(16), nullable=False)
    category: Mapped[str | None] = mapped_column(String(100), nullable=True)
    due_date: Mapped[date | None] = mapped_column(Date, nullable=True, index=True)

    status: Mapped[str] = mapped_column(String(16), nullable=False, default=DEFAULT_STATUS)
