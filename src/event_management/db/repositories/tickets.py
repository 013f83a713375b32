"""
event_management.db.repositories.tickets

Repository for `Ticket` entities.
"""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import select

from event_management.db.models import Ticket, TicketStatus
from event_management.db.repositories.base import Repository


class TicketRepo(Repository[Ticket]):
    model = Ticket

    async def create(
        self,
        *,
        event_id: int,
        user_id: int,
        status: TicketStatus = TicketStatus.booked,
        booking_date: datetime | None = None,
    ) -> Ticket:
        ticket = Ticket(event_id=event_id, user_id=user_id, status=status)
        if booking_date is not None:
            ticket.booking_date = booking_date
        return await self.add(ticket)

    async def list_for_event(self, event_id: int) -> list[Ticket]:
        stmt = select(Ticket).where(Ticket.event_id == event_id).order_by(Ticket.ticket_id)
        return list((await self._session.execute(stmt)).scalars().all())

    async def list_for_user(self, user_id: int) -> list[Ticket]:
        stmt = select(Ticket).where(Ticket.user_id == user_id).order_by(Ticket.ticket_id)
        return list((await self._session.execute(stmt)).scalars().all())

    async def set_status(self, ticket_id: int, status: TicketStatus) -> bool:
        # No transition rules: any status may replace any other.
        ticket = await self._session.get(Ticket, ticket_id)
        if ticket is None:
            return False
        ticket.status = status
        await self._session.flush()
        return True


# --- Module Notes -----------------------------------------------------------
# Tickets disappear with their event (CASCADE) but block deleting their holder (RESTRICT).
