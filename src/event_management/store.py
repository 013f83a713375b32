"""
event_management.store

Composition root for the data layer.

Responsibilities:
- Accept store connection options (`Settings`) at a single entry point.
- Create and dispose the engine/session factory.
- Configure the schema before any collection is used.
- Hand out `EventContext` instances exposing the five entity collections.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from event_management.db.context import EventContext
from event_management.db.registrar import configure_model, create_schema
from event_management.db.session import create_engine, create_sessionmaker
from event_management.observability.logging import configure_logging, get_logger
from event_management.settings import Settings

log = get_logger(__name__)


class EventStore:
    def __init__(self, *, settings: Settings) -> None:
        self.settings = settings
        self._engine: AsyncEngine | None = None
        self._sessionmaker: async_sessionmaker[AsyncSession] | None = None

    @property
    def engine(self) -> AsyncEngine:
        if self._engine is None:
            raise RuntimeError("EventStore.startup() has not been called")
        return self._engine

    async def startup(self) -> None:
        configure_logging(
            service_name=self.settings.service_name,
            level=self.settings.log_level,
            echo_sql=self.settings.echo_sql,
        )
        log.info("store_startup", env=self.settings.env)
        # Registration problems should fail here, not on the first query.
        configure_model()
        engine = create_engine(self.settings)
        self._engine = engine
        self._sessionmaker = create_sessionmaker(engine)
        if self.settings.env in ("dev", "test"):
            # Dev/test convenience. Prod should use Alembic migrations.
            tables = await create_schema(engine)
            log.info("schema_created", tables=tables)

    async def shutdown(self) -> None:
        if self._engine is not None:
            await self._engine.dispose()
        self._engine = None
        self._sessionmaker = None
        log.info("store_shutdown")

    @asynccontextmanager
    async def context(self) -> AsyncIterator[EventContext]:
        if self._sessionmaker is None:
            raise RuntimeError("EventStore.startup() has not been called")
        async with self._sessionmaker() as session:
            yield EventContext(session)

    async def __aenter__(self) -> EventStore:
        await self.startup()
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.shutdown()


# --- Module Notes -----------------------------------------------------------
# Leaving `context()` without committing discards pending changes (the session
# rolls back on close).
