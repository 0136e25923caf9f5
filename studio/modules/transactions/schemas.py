# studio/modules/transactions/schemas.py
from __future__ import annotations
from typing import Optional
from datetime import date
from decimal import Decimal
from pydantic import BaseModel, ConfigDict, field_serializer


class TransactionCreate(BaseModel):
    description: Optional[str] = None
    amount: Optional[Decimal] = None
    type: Optional[str] = None
    category: Optional[str] = None
    due_date: Optional[date] = None
    status: Optional[str] = None

class TransactionUpdate(BaseModel):
    status: Optional[str] = None

class TransactionOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    description: str
    amount: Decimal
    type: str
    category: Optional[str] = None
    due_date: Optional[date] = None
    status: str

    @field_serializer("amount")
    def _serialize_amount(self, v: Decimal, _info):
        return float(v)
