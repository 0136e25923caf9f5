from typing import Literal, Optional
from pydantic import BaseModel

MessageIntent = Literal["lembrete", "boas-vindas", "cobranca"]


class ClassDescriptionIn(BaseModel):
    student_name: str
    context: Optional[str] = ""


class WhatsAppMessageIn(BaseModel):
    student_name: str
    type: MessageIntent


class GeneratedTextOut(BaseModel):
    text: str
