"""
Employee List Backend — Store Handle Tests
============================================

What:  Tests for Database: configuration checks, connection states,
       degraded mode and session gating.
"""

import pytest

from employee_api.database import ConnectionState, Database
from employee_api.exceptions import StorageUnavailableError


class TestDatabaseConfiguration:

    @pytest.mark.parametrize("url", [None, "", "   "])
    def test_missing_url_is_not_configured(self, url):
        db = Database(url)

        assert db.configured is False
        assert db.disabled_reason == "DATABASE_URL not set"

    def test_placeholder_url_is_not_configured(self):
        db = Database("postgresql+asyncpg://<user>:<password>@localhost/employees")

        assert db.configured is False
        assert "placeholders" in db.disabled_reason

    def test_from_settings(self):
        from employee_api.config import Settings

        db = Database.from_settings(
            Settings(database_url="sqlite+aiosqlite:///:memory:", db_create_schema=True)
        )

        assert db.configured is True
        assert db.create_schema is True
        assert db.state == ConnectionState.DISCONNECTED


class TestDatabaseLifecycle:

    def test_connection_state_codes(self):
        assert [int(s) for s in ConnectionState] == [0, 1, 2, 3]

    @pytest.mark.asyncio
    async def test_unconfigured_connect_degrades(self):
        db = Database(None)

        assert await db.connect() is False
        assert db.state == ConnectionState.DISCONNECTED
        assert await db.ping() is False

    @pytest.mark.asyncio
    async def test_unconfigured_session_raises_unavailable(self):
        db = Database("mongodb+srv://<user>:<password>@cluster")

        with pytest.raises(StorageUnavailableError) as exc_info:
            db.session()

        assert "placeholders" in exc_info.value.reason

    @pytest.mark.asyncio
    async def test_unreachable_database_degrades(self, tmp_path):
        # Parent directory does not exist, so SQLite cannot open the file
        db = Database(f"sqlite+aiosqlite:///{tmp_path}/missing/dir/employees.db")

        assert await db.connect() is False
        assert db.state == ConnectionState.DISCONNECTED
        assert db.engine is None
        with pytest.raises(StorageUnavailableError):
            db.session()

    @pytest.mark.asyncio
    async def test_connect_ping_disconnect(self):
        db = Database("sqlite+aiosqlite:///:memory:", create_schema=True)

        assert await db.connect() is True
        assert db.state == ConnectionState.CONNECTED
        assert await db.ping() is True
        # connect() is idempotent
        assert await db.connect() is True

        await db.disconnect()
        assert db.state == ConnectionState.DISCONNECTED
        assert db.engine is None

    @pytest.mark.asyncio
    async def test_session_works_when_connected(self, database):
        from sqlalchemy import text

        session = database.session()
        try:
            result = await session.execute(text("SELECT COUNT(*) FROM employees"))
            assert result.scalar() == 0
        finally:
            await session.close()
