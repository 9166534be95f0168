"""
Connection manager tests: engine factory and liveness check.
"""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
import sqlalchemy as sa
from sqlalchemy.ext.asyncio import async_sessionmaker
from sqlmodel import select

from app.core import database
from app.core.config import Settings
from app.core.database import (
    DatabaseNotConfiguredError,
    check_db_connection,
    dispose_engine,
    get_engine,
    get_session,
)
from app.models import User


def _fake_engine(conn: AsyncMock) -> MagicMock:
    cm = MagicMock()
    cm.__aenter__ = AsyncMock(return_value=conn)
    cm.__aexit__ = AsyncMock(return_value=False)
    engine = MagicMock()
    engine.connect.return_value = cm
    return engine


def _settings(url):
    return Settings(_env_file=None, database_url=url)


class TestGetEngine:
    def test_missing_url_raises(self):
        with patch("app.core.database.get_settings", return_value=_settings(None)):
            with pytest.raises(DatabaseNotConfiguredError, match="DATABASE_URL"):
                get_engine()

    def test_engine_is_created_once(self):
        settings = _settings("postgresql://u:p@localhost/taskflow")
        with (
            patch("app.core.database.get_settings", return_value=settings),
            patch("app.core.database.create_async_engine") as create,
        ):
            first = get_engine()
            second = get_engine()
        assert first is second
        create.assert_called_once()
        args, kwargs = create.call_args
        assert args[0] == "postgresql+asyncpg://u:p@localhost/taskflow"
        assert kwargs["pool_pre_ping"] is True
        assert kwargs["pool_size"] == settings.db_pool_size

    @pytest.mark.asyncio
    async def test_dispose_resets_engine(self):
        engine = MagicMock()
        engine.dispose = AsyncMock()
        database._engine = engine
        await dispose_engine()
        engine.dispose.assert_awaited_once()
        assert database._engine is None

    @pytest.mark.asyncio
    async def test_dispose_without_engine_is_noop(self):
        await dispose_engine()
        assert database._engine is None


class TestCheckDbConnection:
    @pytest.mark.asyncio
    async def test_success(self):
        conn = AsyncMock()
        with patch("app.core.database.get_engine", return_value=_fake_engine(conn)):
            assert await check_db_connection() is True
        conn.execute.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_query_failure_returns_false(self):
        conn = AsyncMock()
        conn.execute.side_effect = OSError("connection reset")
        with patch("app.core.database.get_engine", return_value=_fake_engine(conn)):
            assert await check_db_connection() is False

    @pytest.mark.asyncio
    async def test_connect_failure_returns_false(self):
        engine = MagicMock()
        engine.connect.side_effect = ConnectionRefusedError("refused")
        with patch("app.core.database.get_engine", return_value=engine):
            assert await check_db_connection() is False

    @pytest.mark.asyncio
    async def test_unconfigured_returns_false(self):
        with patch("app.core.database.get_settings", return_value=_settings(None)):
            assert await check_db_connection() is False

    @pytest.mark.asyncio
    async def test_real_sqlite_engine(self, sqlite_engine):
        with patch("app.core.database.get_engine", return_value=sqlite_engine):
            assert await check_db_connection() is True


class TestGetSession:
    """The FastAPI dependency commits on success and rolls back on error."""

    @pytest.fixture
    def factory(self, sqlite_engine):
        factory = async_sessionmaker(sqlite_engine, expire_on_commit=False)
        with patch("app.core.database.get_session_factory", return_value=factory):
            yield factory

    async def _user_count(self, factory) -> int:
        async with factory() as s:
            return (await s.execute(select(sa.func.count()).select_from(User))).scalar_one()

    @pytest.mark.asyncio
    async def test_commits_on_success(self, factory):
        gen = get_session()
        session = await gen.__anext__()
        session.add(User(name="Alice", email="alice@example.com"))
        with pytest.raises(StopAsyncIteration):
            await gen.__anext__()
        assert await self._user_count(factory) == 1

    @pytest.mark.asyncio
    async def test_rolls_back_on_error(self, factory):
        gen = get_session()
        session = await gen.__anext__()
        session.add(User(name="Alice", email="alice@example.com"))
        await session.flush()
        with pytest.raises(ValueError, match="boom"):
            await gen.athrow(ValueError("boom"))
        assert await self._user_count(factory) == 0
