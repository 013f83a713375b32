"""
event_management.db.repositories.events

Repository for `Event` entities.

Responsibilities:
- Create events for an organizer.
- Query events by organizer, category and date.
"""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import select

from event_management.db.models import Event
from event_management.db.repositories.base import Repository


class EventRepo(Repository[Event]):
    model = Event

    async def create(
        self,
        *,
        name: str,
        category: str,
        location: str,
        date: datetime,
        organizer_id: int,
    ) -> Event:
        ev = Event(
            name=name,
            category=category,
            location=location,
            date=date,
            organizer_id=organizer_id,
        )
        return await self.add(ev)

    async def list_by_organizer(self, organizer_id: int) -> list[Event]:
        stmt = select(Event).where(Event.organizer_id == organizer_id).order_by(Event.date)
        return list((await self._session.execute(stmt)).scalars().all())

    async def list_by_category(self, category: str) -> list[Event]:
        stmt = select(Event).where(Event.category == category).order_by(Event.date)
        return list((await self._session.execute(stmt)).scalars().all())

    async def list_upcoming(self, *, after: datetime, limit: int = 50) -> list[Event]:
        # Soonest first; `after` is exclusive.
        stmt = select(Event).where(Event.date > after).order_by(Event.date).limit(limit)
        return list((await self._session.execute(stmt)).scalars().all())


# --- Module Notes -----------------------------------------------------------
# Listings are ordered by `date`, which is indexed alongside `category` and `organizer_id`.
