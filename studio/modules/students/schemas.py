from __future__ import annotations
from pydantic import BaseModel, ConfigDict
from datetime import datetime
from typing import Optional


class StudentBase(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    plan: Optional[str] = None

class StudentCreate(StudentBase):
    # vazio/ausente vira "Ativo" na rota; o store valida o resto
    status: Optional[str] = None

class StudentUpdate(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    status: Optional[str] = None
    plan: Optional[str] = None

class StudentOut(StudentBase):
    id: int
    status: str
    created_at: datetime
    model_config = ConfigDict(from_attributes=True)

class StudentNameOut(BaseModel):
    name: Optional[str] = None
    model_config = ConfigDict(from_attributes=True)
