# studio/api/router.py
from fastapi import APIRouter
from studio.modules.students.router import router as students_router
from studio.modules.schedules.router import router as schedules_router
from studio.modules.transactions.router import router as transactions_router
from studio.modules.ai.router import router as ai_router

api_router = APIRouter()

api_router.include_router(students_router,     prefix="/students",     tags=["students"])
api_router.include_router(schedules_router,    prefix="/schedules",    tags=["schedules"])
api_router.include_router(transactions_router, prefix="/transactions", tags=["transactions"])
api_router.include_router(ai_router,           prefix="/ai",           tags=["ai"])
