from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, delete

from studio.core.dependencies import get_db
from studio.core.errors import RecordNotFound
from .models import Transaction, DEFAULT_STATUS
from .schemas import TransactionCreate, TransactionUpdate, TransactionOut

router = APIRouter()


@router.get("", response_model=list[TransactionOut])
async def list_transactions(db: AsyncSession = Depends(get_db)):
    stmt = select(Transaction).order_by(Transaction.due_date.asc(), Transaction.id.asc())
    res = await db.execute(stmt)
    return res.scalars().all()


@router.post("", response_model=TransactionOut, status_code=status.HTTP_201_CREATED)
async def create_transaction(payload: TransactionCreate, db: AsyncSession = Depends(get_db)):
    data = payload.model_dump()
    data["status"] = data.get("status") or DEFAULT_STATUS

    obj = Transaction(**data)
    db.add(obj)
    await db.commit()
    await db.refresh(obj)
    return obj


@router.patch("/{transaction_id}", response_model=TransactionOut)
async def update_transaction(
    transaction_id: int,
    payload: TransactionUpdate,
    db: AsyncSession = Depends(get_db),
):
    res = await db.execute(select(Transaction).where(Transaction.id == transaction_id))
    obj = res.scalar_one_or_none()
    if not obj:
        raise RecordNotFound(Transaction.__tablename__, transaction_id)

    for k, v in payload.model_dump(exclude_unset=True).items():
        setattr(obj, k, v)

    await db.commit()
    await db.refresh(obj)
    return obj


@router.delete("/{transaction_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_transaction(transaction_id: int, db: AsyncSession = Depends(get_db)):
    await db.execute(delete(Transaction).where(Transaction.id == transaction_id))
    await db.commit()
    return
