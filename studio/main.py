# studio/main.py
import sys
import asyncio

# Event loop compatível no Windows (safe em outros SOs também)
if sys.platform.startswith("win"):
    asyncio.set_event_loop_policy(asyncio.WindowsSelectorEventLoopPolicy())

from contextlib import asynccontextmanager
from pathlib import Path
import json
import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles

from studio.core.config import settings
from studio.core.errors import install_error_handlers
from studio.api.router import api_router
from studio.db import session as db_session
from studio.db.base import Base

# registra as tabelas no metadata
from studio.modules.students import models as _students_models  # noqa: F401
from studio.modules.schedules import models as _schedules_models  # noqa: F401
from studio.modules.transactions import models as _transactions_models  # noqa: F401

logger = logging.getLogger(__name__)


def _normalize_origins(value) -> list[str]:
    """Aceita lista, JSON string ou CSV e devolve lista de origens."""
    if not value:
        return []
    if isinstance(value, (list, tuple)):
        return [str(o).strip() for o in value if str(o).strip()]
    if isinstance(value, str):
        # tenta JSON primeiro
        try:
            as_json = json.loads(value)
            if isinstance(as_json, (list, tuple)):
                return [str(o).strip() for o in as_json if str(o).strip()]
        except ValueError:
            pass
        # fallback: CSV
        return [o.strip() for o in value.split(",") if o.strip()]
    return [str(value).strip()]


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Em desenvolvimento cria as tabelas automaticamente; em prod use scripts/create_tables.py."""
    if not settings.is_production and db_session.engine is not None:
        async with db_session.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
    yield


def mount_spa(app: FastAPI, static_dir: Path, api_prefix: str = settings.API_PREFIX) -> None:
    """Serve o build do front com fallback para index.html (rotas do SPA)."""
    index_file = static_dir / "index.html"
    if not index_file.is_file():
        logger.warning("[SPA] %s não encontrado; front não será servido", index_file)
        return

    assets_dir = static_dir / "assets"
    if assets_dir.is_dir():
        app.mount("/assets", StaticFiles(directory=str(assets_dir)), name="assets")

    prefix = api_prefix.strip("/")

    @app.get("/{full_path:path}", include_in_schema=False)
    async def spa_fallback(full_path: str):
        if full_path == prefix or full_path.startswith(prefix + "/"):
            return JSONResponse(status_code=404, content={"error": "Not Found"})
        candidate = (static_dir / full_path).resolve()
        if full_path and candidate.is_file() and static_dir.resolve() in candidate.parents:
            return FileResponse(candidate)
        return FileResponse(index_file)


# --- App ---
app = FastAPI(title="VOLL Studio", lifespan=lifespan)
install_error_handlers(app)

# --- CORS (colocado ANTES dos routers) ---
origins = _normalize_origins(getattr(settings, "CORS_ORIGINS", None))

# Defaults úteis para dev (servidor do front separado)
if not origins:
    origins = [
        "http://localhost:3000",
        "http://localhost:5173",
    ]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Healthcheck simples
@app.get("/healthz")
async def healthz():
    return {"status": "ok"}


# --- API (só depois do CORS) ---
app.include_router(api_router, prefix=settings.API_PREFIX)

# --- Front (prod): arquivos do build + catch-all para o SPA ---
if settings.is_production:
    mount_spa(app, Path(settings.STATIC_DIR).resolve())
