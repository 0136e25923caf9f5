from datetime import datetime

from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import Integer, Text, DateTime, ForeignKey
from studio.db.base import Base
from studio.modules.students.models import Student as StudentModel

DEFAULT_DURATION_MINUTES = 60


class Schedule(Base):
    __tablename__ = "schedules"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)

    # sem cascade: o ciclo de vida do aluno é independente
    student_id: Mapped[int | None] = mapped_column(ForeignKey(f"{StudentModel.__tablename__}.id"), index=True, nullable=True)
    scheduled_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True, index=True)
    duration_minutes: Mapped[int] = mapped_column(Integer, nullable=False, default=DEFAULT_DURATION_MINUTES)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    # relacionamento (nome do aluno na listagem)
    student = relationship(StudentModel, lazy="joined")
