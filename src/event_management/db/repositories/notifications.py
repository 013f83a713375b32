"""
event_management.db.repositories.notifications

Repository for `Notification` entities.

Responsibilities:
- Send (persist) notifications to a user, optionally about an event.
- List a user's inbox newest-first and mark entries read.
"""

from __future__ import annotations

from sqlalchemy import desc, select

from event_management.db.models import Notification
from event_management.db.repositories.base import Repository


class NotificationRepo(Repository[Notification]):
    model = Notification

    async def create(
        self,
        *,
        user_id: int,
        message: str,
        event_id: int | None = None,
    ) -> Notification:
        n = Notification(user_id=user_id, event_id=event_id, message=message, is_read=False)
        return await self.add(n)

    async def list_for_user(
        self, user_id: int, *, unread_only: bool = False, limit: int = 200
    ) -> list[Notification]:
        stmt = select(Notification).where(Notification.user_id == user_id)
        if unread_only:
            stmt = stmt.where(Notification.is_read.is_(False))
        stmt = stmt.order_by(
            desc(Notification.sent_timestamp), desc(Notification.notification_id)
        ).limit(limit)
        return list((await self._session.execute(stmt)).scalars().all())

    async def mark_read(self, notification_id: int) -> bool:
        n = await self._session.get(Notification, notification_id)
        if n is None:
            return False
        n.is_read = True
        await self._session.flush()
        return True


# --- Module Notes -----------------------------------------------------------
# `event_id` may become NULL after the event is deleted; the notification survives.
