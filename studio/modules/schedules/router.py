from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select

from studio.core.dependencies import get_db
from .models import Schedule, DEFAULT_DURATION_MINUTES
from .schemas import ScheduleCreate, ScheduleOut, ScheduleWithStudentOut

router = APIRouter()


@router.get("", response_model=list[ScheduleWithStudentOut])
async def list_schedules(db: AsyncSession = Depends(get_db)):
    # Schedule.student é lazy="joined": o nome do aluno vem no mesmo SELECT
    stmt = select(Schedule).order_by(Schedule.scheduled_at.asc(), Schedule.id.asc())
    res = await db.execute(stmt)
    return res.scalars().all()


@router.post("", response_model=ScheduleOut, status_code=status.HTTP_201_CREATED)
async def create_schedule(payload: ScheduleCreate, db: AsyncSession = Depends(get_db)):
    data = payload.model_dump()
    if data.get("duration_minutes") is None:
        data["duration_minutes"] = DEFAULT_DURATION_MINUTES

    obj = Schedule(**data)
    db.add(obj)
    await db.commit()
    await db.refresh(obj)
    return obj
