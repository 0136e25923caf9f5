# scripts/create_tables.py
import sys, asyncio
if sys.platform.startswith("win"):
    asyncio.set_event_loop_policy(asyncio.WindowsSelectorEventLoopPolicy())

import asyncio as _asyncio

from studio.db import session as db_session
from studio.db.base import Base
from studio.modules.students import models as _students_models  # noqa: F401
from studio.modules.schedules import models as _schedules_models  # noqa: F401
from studio.modules.transactions import models as _transactions_models  # noqa: F401


async def main():
    if db_session.engine is None:
        print("DATABASE_URL não configurada")
        return

    async with db_session.engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    print("Tabelas criadas:", ", ".join(sorted(Base.metadata.tables)))
    await db_session.engine.dispose()

if __name__ == "__main__":
    _asyncio.run(main())
