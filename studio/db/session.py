# studio/db/session.py
import sys, asyncio
if sys.platform.startswith("win"):
    asyncio.set_event_loop_policy(asyncio.WindowsSelectorEventLoopPolicy())

from pathlib import Path
from typing import Optional

from sqlalchemy.engine.url import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine, async_sessionmaker

from studio.core.config import Settings, settings


def resolve_database_url(cfg: Settings) -> Optional[str]:
    """
    URL do store remoto. A chave de acesso entra como senha quando a URL não traz uma.
    Sem URL: em dev cai para um SQLite local; em prod o store fica sem configuração.
    """
    if cfg.DATABASE_URL:
        url = make_url(cfg.DATABASE_URL)
        if cfg.DATABASE_KEY and not url.password:
            url = url.set(password=cfg.DATABASE_KEY)
        return url.render_as_string(hide_password=False)

    if cfg.is_production:
        return None

    data_dir = (Path(__file__).resolve().parents[2] / "data")
    data_dir.mkdir(parents=True, exist_ok=True)
    db_file = data_dir / "studio.db"
    # usar caminho POSIX para o SQLAlchemy
    return f"sqlite+aiosqlite:///{db_file.as_posix()}"


def build_engine(url: Optional[str]) -> Optional[AsyncEngine]:
    if not url:
        return None
    return create_async_engine(url, echo=False, future=True)


def build_sessionmaker(eng: Optional[AsyncEngine]):
    if eng is None:
        return None
    return async_sessionmaker(eng, expire_on_commit=False, class_=AsyncSession)


engine = build_engine(resolve_database_url(settings))
AsyncSessionLocal = build_sessionmaker(engine)
