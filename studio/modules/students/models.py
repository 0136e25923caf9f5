from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import String, CheckConstraint
from studio.db.base import Base, TimestampMixin
from studio.utils.status import STUDENT_STATUSES as STATUS_CHOICES, STUDENT_DEFAULT_STATUS as DEFAULT_STATUS


class Student(Base, TimestampMixin):
    __tablename__ = "students"

    __table_args__ = (
        CheckConstraint(f"status in {STATUS_CHOICES}", name="ck_student_status_valido"),
    )

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)

    name: Mapped[str] = mapped_column(String(200), nullable=False)
    email: Mapped[str | None] = mapped_column(String(200), nullable=True, index=True)
    phone: Mapped[str | None] = mapped_column(String(40), nullable=True)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default=DEFAULT_STATUS)
    plan: Mapped[str | None] = mapped_column(String(200), nullable=True)
