# studio/core/errors.py
from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import DBAPIError, SQLAlchemyError

logger = logging.getLogger(__name__)


class StoreError(RuntimeError):
    """Falha reportada pelo store remoto (ou em nome dele)."""


class StoreNotConfigured(StoreError):
    def __init__(self, message: str = "Database credentials missing on server"):
        super().__init__(message)


class RecordNotFound(StoreError):
    def __init__(self, table: str, record_id: int):
        super().__init__(f"Nenhum registro em '{table}' com id {record_id}")
        self.table = table
        self.record_id = record_id


def store_message(exc: Exception) -> str:
    # DBAPIError carrega a mensagem original do driver em .orig
    if isinstance(exc, DBAPIError) and exc.orig is not None:
        return str(exc.orig)
    return str(exc)


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


async def _store_error_handler(request: Request, exc: Exception) -> JSONResponse:
    message = store_message(exc)
    logger.warning("[STORE] %s %s falhou: %s", request.method, request.url.path, message)
    return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, message)


async def _validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
        parts.append(f"{loc}: {err.get('msg')}" if loc else str(err.get("msg")))
    return _error(422, "; ".join(parts) or "Requisição inválida")


def install_error_handlers(app: FastAPI) -> None:
    """Toda falha de store vira 500 {error}; nada é reclassificado nem repetido."""
    app.add_exception_handler(StoreError, _store_error_handler)
    app.add_exception_handler(SQLAlchemyError, _store_error_handler)
    app.add_exception_handler(RequestValidationError, _validation_error_handler)
