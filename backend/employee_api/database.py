"""
Employee List Backend — Database Handle & Session Management
==============================================================

What:  The store handle (`Database`), its connection states, the ORM base
       class, and the FastAPI session dependency.
Why:   Keeps all connection logic in one place and makes the connection an
       explicit object attached to the app, instead of a module-level engine
       that every importer shares.
How:   `Database` owns an async SQLAlchemy engine and session factory.
       `connect()` builds and verifies the engine at startup; routes receive
       a per-request AsyncSession through `get_db_session`.
Who:   Created by `create_app()` (or by tests), connected in the lifespan.
When:  Connected once per process; sessions are created per request.

Connection States (reported as `dbState` by /health):
    0 DISCONNECTED   never connected, connect failed, or disposed
    1 CONNECTED      engine verified with SELECT 1
    2 CONNECTING     connect() in progress
    3 DISCONNECTING  disconnect() in progress

Degraded mode:
    If DATABASE_URL is empty or still a template, or the first connection
    attempt fails, the handle stays DISCONNECTED and the server keeps running.
    Every data route then raises StorageUnavailableError (503).
"""

import logging
from enum import IntEnum
from typing import TYPE_CHECKING, Any, AsyncGenerator, Dict, Optional

from fastapi import Depends, Request
from sqlalchemy import text
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import StaticPool

from employee_api.config import database_disabled_reason
from employee_api.exceptions import StorageUnavailableError

if TYPE_CHECKING:
    from employee_api.config import Settings

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    Shares a single metadata object, used by Alembic for migrations and by
    `Database.connect()` when DB_CREATE_SCHEMA is enabled.
    """
    pass


class ConnectionState(IntEnum):
    """Lifecycle of the store connection; the integer value is the public dbState."""

    DISCONNECTED = 0
    CONNECTED = 1
    CONNECTING = 2
    DISCONNECTING = 3


class Database:
    """
    Explicit handle on the employee store.

    Usage:
        database = Database.from_settings(settings)
        await database.connect()          # never raises; logs and degrades
        async with database.session() as session:
            ...
        await database.disconnect()

    Attributes:
        url:              SQLAlchemy async URL (may be empty)
        disabled_reason:  Why the URL is unusable, or None
        state:            Current ConnectionState
    """

    def __init__(
        self,
        url: Optional[str],
        *,
        pool_size: int = 20,
        max_overflow: int = 10,
        pool_pre_ping: bool = True,
        create_schema: bool = False,
        echo: bool = False,
    ):
        self.url = url or ""
        self.disabled_reason = database_disabled_reason(self.url)
        self.pool_size = pool_size
        self.max_overflow = max_overflow
        self.pool_pre_ping = pool_pre_ping
        self.create_schema = create_schema
        self.echo = echo

        self.state = ConnectionState.DISCONNECTED
        self.engine: Optional[AsyncEngine] = None
        self._session_factory: Optional[async_sessionmaker[AsyncSession]] = None

    @classmethod
    def from_settings(cls, settings: "Settings") -> "Database":
        """Build a handle from application settings (does not connect)."""
        return cls(
            settings.database_url,
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
            pool_pre_ping=settings.db_pool_pre_ping,
            create_schema=settings.db_create_schema,
            echo=settings.log_level == "DEBUG",
        )

    @property
    def configured(self) -> bool:
        """True when the URL is present and not a template."""
        return self.disabled_reason is None

    @property
    def is_connected(self) -> bool:
        return self.state == ConnectionState.CONNECTED

    # ── Lifecycle ─────────────────────────────────────────────────────────

    def _engine_options(self) -> Dict[str, Any]:
        """
        Engine keyword arguments for the configured backend.

        SQLite (tests, local runs) gets a StaticPool so an in-memory database
        survives across sessions; pool sizing only applies to server databases.
        """
        if make_url(self.url).get_backend_name() == "sqlite":
            return {
                "poolclass": StaticPool,
                "connect_args": {"check_same_thread": False},
                "echo": self.echo,
            }
        return {
            "pool_size": self.pool_size,
            "max_overflow": self.max_overflow,
            "pool_pre_ping": self.pool_pre_ping,
            "pool_recycle": 3600,
            "echo": self.echo,
        }

    async def connect(self) -> bool:
        """
        Establish the store connection.

        Returns:
            True if connected, False if persistence stays disabled.

        Never raises: an unusable URL or an unreachable server is logged and
        leaves the handle DISCONNECTED so the app can still start.
        """
        if self.is_connected:
            return True

        if not self.configured:
            logger.warning(
                "%s. Skipping database connection; employee routes will return 503. "
                "Set DATABASE_URL (or create a .env file) to enable persistence.",
                self.disabled_reason,
            )
            return False

        self.state = ConnectionState.CONNECTING
        engine: Optional[AsyncEngine] = None
        try:
            engine = create_async_engine(self.url, **self._engine_options())
            async with engine.begin() as conn:
                await conn.execute(text("SELECT 1"))
                if self.create_schema:
                    # Registers the Employee table on Base.metadata
                    from employee_api.models import employee  # noqa: F401
                    await conn.run_sync(Base.metadata.create_all)
        except Exception as e:
            logger.error("Could not connect to the database: %s", str(e))
            if engine is not None:
                await engine.dispose()
            self.state = ConnectionState.DISCONNECTED
            return False

        self.engine = engine
        # expire_on_commit=False: attributes stay readable after the
        # repository commits, so responses can be built from the ORM object
        self._session_factory = async_sessionmaker(
            engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )
        self.state = ConnectionState.CONNECTED
        logger.info("Connected to database (%s)", make_url(self.url).get_backend_name())
        return True

    async def disconnect(self) -> None:
        """Dispose the engine and close all pooled connections."""
        if self.engine is None:
            self.state = ConnectionState.DISCONNECTED
            return

        self.state = ConnectionState.DISCONNECTING
        try:
            await self.engine.dispose()
        finally:
            self.engine = None
            self._session_factory = None
            self.state = ConnectionState.DISCONNECTED
        logger.info("Database connection closed")

    async def ping(self) -> bool:
        """Lightweight liveness probe (SELECT 1). False when not connected or failing."""
        if not self.is_connected or self.engine is None:
            return False
        try:
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.warning("Database ping failed: %s", str(e))
            return False

    def session(self) -> AsyncSession:
        """
        Create a new AsyncSession.

        Raises:
            StorageUnavailableError: persistence was never established (→ 503)
        """
        if not self.is_connected or self._session_factory is None:
            raise StorageUnavailableError(
                reason=self.disabled_reason or "database not connected",
            )
        return self._session_factory()


# ── FastAPI Dependencies ──────────────────────────────────────────────────

def get_database(request: Request) -> Database:
    """Return the store handle attached to the running app by create_app()."""
    return request.app.state.database


async def get_db_session(
    database: Database = Depends(get_database),
) -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides a database session per request.

    How it works:
        1. Opens a session from the store handle (503 if not connected)
        2. Yields it to the route handler
        3. On error: rolls back whatever the failed request left pending
        4. Always: closes the session (returns connection to pool)

    Writes are committed by the repository, one unit of work per operation,
    so there is nothing to commit here on success.
    """
    session = database.session()
    try:
        yield session
    except Exception:
        await session.rollback()
        raise
    finally:
        await session.close()
