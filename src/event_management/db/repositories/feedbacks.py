"""
event_management.db.repositories.feedbacks

Repository for `Feedback` entities.

Responsibilities:
- Record a user's rating and optional comments for an event.
- List an event's feedback and compute its average rating.
"""

from __future__ import annotations

from sqlalchemy import func, select

from event_management.db.models import Feedback
from event_management.db.repositories.base import Repository


class FeedbackRepo(Repository[Feedback]):
    model = Feedback

    async def create(
        self,
        *,
        event_id: int,
        user_id: int,
        rating: int,
        comments: str | None = None,
    ) -> Feedback:
        fb = Feedback(event_id=event_id, user_id=user_id, rating=rating, comments=comments)
        return await self.add(fb)

    async def list_for_event(self, event_id: int) -> list[Feedback]:
        stmt = (
            select(Feedback)
            .where(Feedback.event_id == event_id)
            .order_by(Feedback.submitted_timestamp, Feedback.feedback_id)
        )
        return list((await self._session.execute(stmt)).scalars().all())

    async def average_rating(self, event_id: int) -> float | None:
        # None when the event has no feedback yet.
        stmt = select(func.avg(Feedback.rating)).where(Feedback.event_id == event_id)
        avg = (await self._session.execute(stmt)).scalar_one()
        return float(avg) if avg is not None else None


# --- Module Notes -----------------------------------------------------------
# Ratings are not range-checked; the schema only requires a value.
