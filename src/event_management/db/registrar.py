"""
event_management.db.registrar

Schema registration ("configure model").

Responsibilities:
- Make sure every entity is registered on the shared metadata.
- Create/drop the five tables on a live engine (dev/test bootstrap).
- Keep production migration workflow separate (Alembic).
"""

from __future__ import annotations

from sqlalchemy import MetaData
from sqlalchemy.ext.asyncio import AsyncEngine

from event_management.db import models
from event_management.db.base import Base

ENTITIES = (models.User, models.Event, models.Ticket, models.Notification, models.Feedback)


def configure_model(metadata: MetaData | None = None) -> MetaData:
    """
    Return the metadata holding the entity tables, keys, constraints and
    on-delete policies. Importing `models` above performs the registration;
    this call checks that it happened so a missing entity fails at startup.
    """

    metadata = metadata if metadata is not None else Base.metadata
    missing = [e.__tablename__ for e in ENTITIES if e.__tablename__ not in metadata.tables]
    if missing:
        raise RuntimeError(f"entities not registered on metadata: {', '.join(missing)}")
    return metadata


async def create_schema(engine: AsyncEngine) -> list[str]:
    """
    Dev/test bootstrap: create tables if they don't exist.
    Returns the table names in dependency order.
    """

    metadata = configure_model()
    async with engine.begin() as conn:
        await conn.run_sync(metadata.create_all)
    return [t.name for t in metadata.sorted_tables]


async def drop_schema(engine: AsyncEngine) -> None:
    metadata = configure_model()
    async with engine.begin() as conn:
        await conn.run_sync(metadata.drop_all)


# --- Module Notes -----------------------------------------------------------
# Constraint violations are not caught here: they surface at write time from the
# store as `sqlalchemy.exc.IntegrityError`.
