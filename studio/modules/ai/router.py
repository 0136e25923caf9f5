from fastapi import APIRouter
from starlette.concurrency import run_in_threadpool

from studio.integrations import gemini
from .schemas import ClassDescriptionIn, WhatsAppMessageIn, GeneratedTextOut

router = APIRouter()


@router.post("/class-description", response_model=GeneratedTextOut)
async def class_description(payload: ClassDescriptionIn):
    # o SDK do Gemini é síncrono
    text = await run_in_threadpool(
        gemini.generate_class_description, payload.student_name, payload.context or ""
    )
    return {"text": text}


@router.post("/whatsapp-message", response_model=GeneratedTextOut)
async def whatsapp_message(payload: WhatsAppMessageIn):
    text = await run_in_threadpool(
        gemini.generate_whatsapp_message, payload.student_name, payload.type
    )
    return {"text": text}
