"""
tests.test_delete_policies

Store-enforced integrity: uniqueness, foreign keys, max lengths and the
restrict / cascade / set-null delete behaviors.
"""

from __future__ import annotations

import pytest
from sqlalchemy.exc import IntegrityError

from event_management.db.models import TicketStatus, UserRole
from event_management.store import EventStore
from tests.factories import add_event, add_user


@pytest.mark.asyncio
async def test_duplicate_email_is_rejected(store: EventStore) -> None:
    async with store.context() as ctx:
        await add_user(ctx, "ada@example.org")
        await add_user(ctx, "grace@example.org")
        await ctx.commit()

        with pytest.raises(IntegrityError):
            await add_user(ctx, "ada@example.org")
        await ctx.rollback()

        assert await ctx.users.count() == 2


@pytest.mark.asyncio
async def test_deleting_an_organizer_is_restricted(store: EventStore) -> None:
    async with store.context() as ctx:
        org = await add_user(ctx, "org@example.org", UserRole.organizer)
        bystander = await add_user(ctx, "by@example.org")
        await add_event(ctx, org)
        await ctx.commit()
        org_id, bystander_id = org.user_id, bystander.user_id

        with pytest.raises(IntegrityError):
            await ctx.users.delete(org_id)
        await ctx.rollback()

        assert await ctx.users.delete(bystander_id) is True
        await ctx.commit()

    async with store.context() as ctx:
        assert await ctx.users.get(org_id) is not None
        assert await ctx.users.get(bystander_id) is None


@pytest.mark.asyncio
async def test_deleting_an_event_cascades_and_nulls_notifications(store: EventStore) -> None:
    async with store.context() as ctx:
        org = await add_user(ctx, "org@example.org", UserRole.organizer)
        guest = await add_user(ctx, "guest@example.org")
        ev = await add_event(ctx, org)
        other = await add_event(ctx, org, name="Sprint Day")
        await ctx.tickets.create(event_id=ev.event_id, user_id=guest.user_id)
        await ctx.tickets.create(event_id=other.event_id, user_id=guest.user_id)
        await ctx.feedbacks.create(event_id=ev.event_id, user_id=guest.user_id, rating=5)
        note = await ctx.notifications.create(
            user_id=guest.user_id, event_id=ev.event_id, message="Doors open at 9"
        )
        await ctx.commit()
        event_id, note_id = ev.event_id, note.notification_id

        assert await ctx.events.delete(event_id) is True
        await ctx.commit()

    async with store.context() as ctx:
        assert await ctx.tickets.list_for_event(event_id) == []
        assert await ctx.feedbacks.list_for_event(event_id) == []
        assert await ctx.tickets.count() == 1

        survivor = await ctx.notifications.get(note_id)
        assert survivor is not None
        assert survivor.event_id is None
        assert survivor.message == "Doors open at 9"


@pytest.mark.asyncio
async def test_ticket_holder_cannot_be_deleted_until_event_is_gone(store: EventStore) -> None:
    async with store.context() as ctx:
        org = await add_user(ctx, "org@example.org", UserRole.organizer)
        guest = await add_user(ctx, "guest@example.org")
        ev = await add_event(ctx, org)
        await ctx.tickets.create(event_id=ev.event_id, user_id=guest.user_id)
        await ctx.commit()
        guest_id, event_id = guest.user_id, ev.event_id

        with pytest.raises(IntegrityError):
            await ctx.users.delete(guest_id)
        await ctx.rollback()

    async with store.context() as ctx:
        assert await ctx.events.delete(event_id) is True
        assert await ctx.users.delete(guest_id) is True
        await ctx.commit()
        assert await ctx.tickets.count() == 0


@pytest.mark.asyncio
async def test_feedback_author_is_restricted(store: EventStore) -> None:
    async with store.context() as ctx:
        org = await add_user(ctx, "org@example.org", UserRole.organizer)
        critic = await add_user(ctx, "critic@example.org")
        ev = await add_event(ctx, org)
        await ctx.feedbacks.create(event_id=ev.event_id, user_id=critic.user_id, rating=2)
        await ctx.commit()

        with pytest.raises(IntegrityError):
            await ctx.users.delete(critic.user_id)
        await ctx.rollback()


@pytest.mark.asyncio
async def test_deleting_a_user_removes_their_notifications(store: EventStore) -> None:
    async with store.context() as ctx:
        user = await add_user(ctx, "quiet@example.org")
        await ctx.notifications.create(user_id=user.user_id, message="Welcome")
        await ctx.notifications.create(user_id=user.user_id, message="Reminder")
        await ctx.commit()
        user_id = user.user_id

    async with store.context() as ctx:
        assert await ctx.users.delete(user_id) is True
        await ctx.commit()
        assert await ctx.notifications.count() == 0


@pytest.mark.asyncio
async def test_feedback_for_missing_event_violates_foreign_key(store: EventStore) -> None:
    async with store.context() as ctx:
        user = await add_user(ctx, "critic@example.org")
        await ctx.commit()

        with pytest.raises(IntegrityError):
            await ctx.feedbacks.create(event_id=9999, user_id=user.user_id, rating=4)
        await ctx.rollback()

        assert await ctx.feedbacks.count() == 0


@pytest.mark.asyncio
async def test_user_name_length_is_enforced(store: EventStore) -> None:
    async with store.context() as ctx:
        ok = await ctx.users.create(name="n" * 100, email="max@example.org", password_hash="h")
        await ctx.commit()
        assert ok.user_id is not None

        with pytest.raises(IntegrityError):
            await ctx.users.create(name="n" * 101, email="long@example.org", password_hash="h")
        await ctx.rollback()


@pytest.mark.asyncio
async def test_notification_message_length_is_enforced(store: EventStore) -> None:
    async with store.context() as ctx:
        user = await add_user(ctx, "inbox@example.org")
        await ctx.commit()

        with pytest.raises(IntegrityError):
            await ctx.notifications.create(user_id=user.user_id, message="m" * 501)
        await ctx.rollback()


@pytest.mark.asyncio
async def test_event_delete_leaves_no_stale_dependents_in_the_session(store: EventStore) -> None:
    async with store.context() as ctx:
        org = await add_user(ctx, "org@example.org", UserRole.organizer)
        guest = await add_user(ctx, "guest@example.org")
        ev = await add_event(ctx, org)
        ticket = await ctx.tickets.create(event_id=ev.event_id, user_id=guest.user_id)
        review = await ctx.feedbacks.create(event_id=ev.event_id, user_id=guest.user_id, rating=3)
        note = await ctx.notifications.create(
            user_id=guest.user_id, event_id=ev.event_id, message="Venue changed"
        )
        await ctx.commit()
        ticket_id, review_id, note_id = ticket.ticket_id, review.feedback_id, note.notification_id

        assert await ctx.events.delete(ev.event_id) is True
        await ctx.commit()

        assert await ctx.tickets.get(ticket_id) is None
        assert await ctx.feedbacks.get(review_id) is None
        assert await ctx.tickets.set_status(ticket_id, TicketStatus.cancelled) is False
        assert await ctx.tickets.count() == 0

        survivor = await ctx.notifications.get(note_id)
        assert survivor is note
        assert survivor.event_id is None


@pytest.mark.asyncio
async def test_user_delete_leaves_no_stale_notifications_in_the_session(store: EventStore) -> None:
    async with store.context() as ctx:
        user = await add_user(ctx, "leaving@example.org")
        note = await ctx.notifications.create(user_id=user.user_id, message="Goodbye")
        await ctx.commit()
        user_id, note_id = user.user_id, note.notification_id

        assert await ctx.users.delete(user_id) is True
        await ctx.commit()

        assert await ctx.notifications.get(note_id) is None
        assert await ctx.notifications.mark_read(note_id) is False
