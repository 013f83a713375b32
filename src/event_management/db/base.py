"""
event_management.db.base

SQLAlchemy declarative base.

Responsibilities:
- Provide a shared DeclarativeBase for all ORM models.
- Name constraints deterministically so Alembic can address them.
- Build store-enforced max-length checks for bounded string columns.
"""

from __future__ import annotations

from sqlalchemy import CheckConstraint, MetaData
from sqlalchemy.ext.asyncio import AsyncAttrs
from sqlalchemy.orm import DeclarativeBase

NAMING_CONVENTION = {
    "ix": "ix_%(table_name)s_%(column_0_name)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


class Base(AsyncAttrs, DeclarativeBase):
    # AsyncAttrs exposes `obj.awaitable_attrs.<relationship>` for lazy loads under asyncio.
    metadata = MetaData(naming_convention=NAMING_CONVENTION)


def max_length_checks(**limits: int) -> tuple[CheckConstraint, ...]:
    """
    One `CHECK (length(col) <= n)` per column.

    SQLite ignores the length in VARCHAR(n); the check makes the store reject
    oversize values on every backend. NULLs pass, so optional columns stay optional.
    """

    return tuple(
        CheckConstraint(f"length({column}) <= {limit}", name=f"{column}_max_length")
        for column, limit in limits.items()
    )


# --- Module Notes -----------------------------------------------------------
# All ORM models should inherit from `Base` so Alembic and metadata discovery work.
