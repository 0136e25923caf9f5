from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, delete

from studio.core.dependencies import get_db
from studio.core.errors import RecordNotFound
from .models import Student, DEFAULT_STATUS
from .schemas import StudentOut, StudentCreate, StudentUpdate

router = APIRouter()


@router.get("", response_model=list[StudentOut])
async def list_students(db: AsyncSession = Depends(get_db)):
    # mais recentes primeiro; id desempata cadastros no mesmo instante
    stmt = select(Student).order_by(Student.created_at.desc(), Student.id.desc())
    res = await db.execute(stmt)
    return res.scalars().all()


@router.post("", response_model=StudentOut, status_code=status.HTTP_201_CREATED)
async def create_student(payload: StudentCreate, db: AsyncSession = Depends(get_db)):
    data = payload.model_dump()
    data["status"] = data.get("status") or DEFAULT_STATUS

    obj = Student(**data)
    db.add(obj)
    await db.commit()
    await db.refresh(obj)
    return obj


@router.patch("/{student_id}", response_model=StudentOut)
async def update_student(
    student_id: int,
    payload: StudentUpdate,
    db: AsyncSession = Depends(get_db),
):
    res = await db.execute(select(Student).where(Student.id == student_id))
    obj = res.scalar_one_or_none()
    if not obj:
        raise RecordNotFound(Student.__tablename__, student_id)

    # só o que veio no corpo; o resto fica como está (last write wins)
    for k, v in payload.model_dump(exclude_unset=True).items():
        setattr(obj, k, v)

    await db.commit()
    await db.refresh(obj)
    return obj


@router.delete("/{student_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_student(student_id: int, db: AsyncSession = Depends(get_db)):
    """
    Exclusão física, mantida como rota administrativa.
    O cliente desativa alunos via PATCH status="Inativo".
    """
    await db.execute(delete(Student).where(Student.id == student_id))
    await db.commit()
    return
