"""
tests.factories

Small builders for settings and seed rows.
"""

from __future__ import annotations

from datetime import datetime, timedelta
from pathlib import Path

from event_management.db.context import EventContext
from event_management.db.models import Event, User, UserRole
from event_management.settings import Settings


def make_settings(tmp_path: Path) -> Settings:
    return Settings(env="test", database_url=f"sqlite+aiosqlite:///{tmp_path / 'events.db'}")


async def add_user(ctx: EventContext, email: str, role: UserRole = UserRole.attendee) -> User:
    return await ctx.users.create(
        name=email.split("@")[0], email=email, password_hash="pbkdf2$x", role=role
    )


async def add_event(
    ctx: EventContext,
    organizer: User,
    *,
    days: int = 7,
    name: str = "PyCon Meetup",
    category: str = "tech",
) -> Event:
    return await ctx.events.create(
        name=name,
        category=category,
        location="Hall B",
        date=datetime(2030, 1, 1) + timedelta(days=days),
        organizer_id=organizer.user_id,
    )
