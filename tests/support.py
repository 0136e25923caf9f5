# tests/support.py
import tempfile
import unittest
from pathlib import Path

from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from studio.core.dependencies import get_db
from studio.db.base import Base
from studio.main import app


class DatabaseMixin:
    """Banco SQLite temporário por teste, com get_db apontando para ele."""

    def setUp(self):
        super().setUp()
        self._tmp = tempfile.TemporaryDirectory()
        db_file = Path(self._tmp.name) / "test.db"

        # tabelas criadas com engine síncrona para não depender de event loop
        sync_engine = create_engine(f"sqlite:///{db_file.as_posix()}")
        Base.metadata.create_all(sync_engine)
        sync_engine.dispose()

        # NullPool: cada sessão abre conexão no loop de quem chama
        self.engine = create_async_engine(f"sqlite+aiosqlite:///{db_file.as_posix()}", poolclass=NullPool)
        self.SessionLocal = async_sessionmaker(self.engine, expire_on_commit=False, class_=AsyncSession)

        async def _get_test_db():
            async with self.SessionLocal() as session:
                yield session

        app.dependency_overrides[get_db] = _get_test_db

    def tearDown(self):
        app.dependency_overrides.clear()
        self._tmp.cleanup()
        super().tearDown()


class ApiTestCase(DatabaseMixin, unittest.TestCase):
    def setUp(self):
        super().setUp()
        self.client = TestClient(app)

    # atalhos para montar cenários
    def create_student(self, **overrides):
        payload = {"name": "Ana", "email": "a@x.com", "phone": "111", "plan": "Mensal"}
        payload.update(overrides)
        r = self.client.post("/api/students", json=payload)
        self.assertEqual(r.status_code, 201, r.text)
        return r.json()

    def create_transaction(self, **overrides):
        payload = {
            "description": "Aluguel",
            "amount": 500,
            "type": "Despesa",
            "category": "Fixas",
            "due_date": "2024-01-05",
        }
        payload.update(overrides)
        r = self.client.post("/api/transactions", json=payload)
        self.assertEqual(r.status_code, 201, r.text)
        return r.json()
