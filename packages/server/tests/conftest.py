"""
Shared fixtures: ASGI client and an in-memory SQLite schema.
"""

from __future__ import annotations

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlmodel import SQLModel

import app.models  # noqa: F401  (populate metadata)
from app.core import database
from app.main import app as asgi_app

SQLITE_URL = "sqlite+aiosqlite://"


@pytest.fixture(autouse=True)
def _reset_engine(monkeypatch):
    """Never leak a cached engine between tests."""
    monkeypatch.setattr(database, "_engine", None)
    monkeypatch.setattr(database, "_session_factory", None)


@pytest.fixture
async def client():
    async with AsyncClient(transport=ASGITransport(app=asgi_app), base_url="http://test") as ac:
        yield ac


@pytest.fixture
async def sqlite_engine():
    """In-memory SQLite with foreign keys enforced, so cascades behave like PostgreSQL."""
    engine = create_async_engine(SQLITE_URL)

    @event.listens_for(engine.sync_engine, "connect")
    def _enable_foreign_keys(dbapi_conn, _record):
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
async def session(sqlite_engine):
    async with AsyncSession(sqlite_engine, expire_on_commit=False) as s:
        yield s
