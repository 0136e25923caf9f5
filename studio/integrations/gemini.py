# studio/integrations/gemini.py
from __future__ import annotations

import logging
from typing import Optional

import google.generativeai as genai

from studio.core.config import settings

logger = logging.getLogger(__name__)

CLASS_DESCRIPTION_ERROR = "Erro ao gerar descrição."
MESSAGE_ERROR = "Erro ao gerar mensagem."

MESSAGE_INTENTS = ("lembrete", "boas-vindas", "cobranca")

_MESSAGE_PROMPTS = {
    "lembrete": "Escreva uma mensagem amigável de WhatsApp lembrando o aluno {name} de sua aula amanhã. Inclua emojis.",
    "boas-vindas": "Escreva uma mensagem calorosa de WhatsApp dando as boas-vindas ao aluno {name} ao nosso studio de Pilates.",
    "cobranca": "Escreva uma mensagem educada e profissional de WhatsApp para o aluno {name} sobre uma mensalidade pendente.",
}


class GeminiClient:
    """Envia prompts ao Gemini e devolve o texto gerado."""

    def __init__(self, api_key: Optional[str] = None, model: Optional[str] = None):
        self.api_key = api_key if api_key is not None else settings.GEMINI_API_KEY
        self.model = model or settings.GEMINI_MODEL
        genai.configure(api_key=self.api_key or "")

    def generate(self, prompt: str) -> str:
        model_instance = genai.GenerativeModel(model_name=self.model)
        response = model_instance.generate_content(prompt)

        # resposta bloqueada ou vazia não tem parts
        if not response.parts:
            raise ValueError("Modelo de IA retornou uma resposta vazia ou bloqueada.")
        return response.text.strip()


def class_description_prompt(student_name: str, context: str = "") -> str:
    extra = f"Contexto adicional: {context}" if context else ""
    return (
        "Você é um instrutor de Pilates/Fitness. Escreva uma breve descrição técnica e motivadora "
        f"para uma aula agendada para o aluno {student_name}. {extra} "
        "Seja conciso (máximo 2 parágrafos)."
    )


def whatsapp_message_prompt(student_name: str, intent: str) -> str:
    if intent not in _MESSAGE_PROMPTS:
        raise ValueError(f"Tipo de mensagem inválido: {intent!r} (use {', '.join(MESSAGE_INTENTS)})")
    return _MESSAGE_PROMPTS[intent].format(name=student_name)


def generate_class_description(student_name: str, context: str = "",
                               client: Optional[GeminiClient] = None) -> str:
    prompt = class_description_prompt(student_name, context)
    try:
        return (client or GeminiClient()).generate(prompt)
    except Exception as e:
        logger.error("[GEMINI] Erro ao gerar descrição: %s", e)
        return CLASS_DESCRIPTION_ERROR


def generate_whatsapp_message(student_name: str, intent: str,
                              client: Optional[GeminiClient] = None) -> str:
    # intenção desconhecida é erro do chamador, não da IA
    prompt = whatsapp_message_prompt(student_name, intent)
    try:
        return (client or GeminiClient()).generate(prompt)
    except Exception as e:
        logger.error("[GEMINI] Erro ao gerar mensagem: %s", e)
        return MESSAGE_ERROR
