# studio/core/config.py
from __future__ import annotations

from typing import List, Union, Optional
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Ambiente
    ENVIRONMENT: str = "dev"                 # dev | prod
    API_PREFIX: str = "/api"
    STATIC_DIR: str = "dist"                 # build do front servido em prod

    # Banco (store remoto)
    DATABASE_URL: Optional[str] = None       # ex.: postgresql+psycopg://postgres@db.x.supabase.co:5432/postgres?sslmode=require
    DATABASE_KEY: Optional[str] = None       # senha/chave de acesso, se não estiver na URL

    # IA generativa
    GEMINI_API_KEY: Optional[str] = None
    GEMINI_MODEL: str = "gemini-1.5-flash"

    # CORS (aceita JSON ["http://...","http://..."] ou CSV "http://...,http://...")
    CORS_ORIGINS: Union[List[str], str] = []

    class Config:
        env_file = ".env"
        extra = "ignore"   # ignora envs desconhecidas para não quebrar

    @property
    def is_production(self) -> bool:
        return (self.ENVIRONMENT or "").lower().strip() == "prod"


settings = Settings()
