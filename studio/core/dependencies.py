from typing import AsyncIterator

from sqlalchemy.ext.asyncio import AsyncSession

from studio.db import session as db_session
from studio.core.errors import StoreNotConfigured


async def get_db() -> AsyncIterator[AsyncSession]:
    if db_session.AsyncSessionLocal is None:
        raise StoreNotConfigured()
    async with db_session.AsyncSessionLocal() as session:
        yield session
