from __future__ import annotations
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict

from studio.modules.students.schemas import StudentNameOut


class ScheduleCreate(BaseModel):
    student_id: Optional[int] = None
    scheduled_at: Optional[datetime] = None
    duration_minutes: Optional[int] = None
    notes: Optional[str] = None


class ScheduleOut(BaseModel):
    id: int
    student_id: Optional[int] = None
    scheduled_at: Optional[datetime] = None
    duration_minutes: int
    notes: Optional[str] = None
    model_config = ConfigDict(from_attributes=True)


class ScheduleWithStudentOut(ScheduleOut):
    student: Optional[StudentNameOut] = None
