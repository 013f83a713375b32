"""
event_management.db.context

Session-scoped view over the five entity collections.

Responsibilities:
- Bind one repository per collection to a single `AsyncSession`.
- Expose explicit commit/rollback; nothing is committed implicitly.
"""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from event_management.db.repositories.events import EventRepo
from event_management.db.repositories.feedbacks import FeedbackRepo
from event_management.db.repositories.notifications import NotificationRepo
from event_management.db.repositories.tickets import TicketRepo
from event_management.db.repositories.users import UserRepo


class EventContext:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

        self.users = UserRepo(session)
        self.events = EventRepo(session)
        self.tickets = TicketRepo(session)
        self.notifications = NotificationRepo(session)
        self.feedbacks = FeedbackRepo(session)

    async def commit(self) -> None:
        await self.session.commit()

    async def rollback(self) -> None:
        # Required after a store error; the session refuses further work until then.
        await self.session.rollback()


# --- Module Notes -----------------------------------------------------------
# A context owns one session: do not share it between concurrent tasks.
