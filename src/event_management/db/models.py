"""
event_management.db.models

Core persistence schema for the event-management application.

Responsibilities:
- Define ORM models for the five record kinds:
  - User: attendees, organizers and admins (unique email)
  - Event: organized by exactly one User
  - Ticket: a User's booking for an Event
  - Notification: a message to a User, optionally about an Event
  - Feedback: a User's rating of an Event
- Declare on-delete policies at the foreign key so the store enforces them.

Delete policies (store side / ORM side):
- Event.organizer_id -> users      RESTRICT   passive_deletes="all"
- Ticket.event_id -> events        CASCADE    cascade="all, delete-orphan"
- Ticket.user_id -> users          RESTRICT   passive_deletes="all"
- Notification.user_id -> users    CASCADE    cascade="all, delete-orphan"
- Notification.event_id -> events  SET NULL   (no delete cascade)
- Feedback.event_id -> events      CASCADE    cascade="all, delete-orphan"
- Feedback.user_id -> users        RESTRICT   passive_deletes="all"

Cascade and set-null children are loaded and handled by the ORM during the
flush, so objects already in the session never outlive their rows. The FK
clauses still cover writes made outside the ORM. Restrict relationships stay
passive so the store, not the ORM, rejects the parent delete.
"""

from __future__ import annotations

import enum
from datetime import UTC, datetime

from sqlalchemy import Boolean, Enum, ForeignKey, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from event_management.db.base import Base, max_length_checks


def _utcnow() -> datetime:
    # Naive UTC: SQLite has no timezone-aware datetime storage.
    return datetime.now(UTC).replace(tzinfo=None)


class UserRole(enum.StrEnum):
    attendee = "ATTENDEE"
    organizer = "ORGANIZER"
    admin = "ADMIN"


class TicketStatus(enum.StrEnum):
    # Stored by member name; treat as a stable contract.
    booked = "BOOKED"
    cancelled = "CANCELLED"
    attended = "ATTENDED"


class User(Base):
    __tablename__ = "users"

    user_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(String(100), nullable=False, unique=True, index=True)
    password_hash: Mapped[str] = mapped_column(String(100), nullable=False)
    contact_number: Mapped[str | None] = mapped_column(String(20), nullable=True)
    role: Mapped[UserRole] = mapped_column(Enum(UserRole), nullable=False)

    # Restrict: the store refuses to delete an organizer; the ORM must not null organizer_id.
    organized_events: Mapped[list[Event]] = relationship(
        back_populates="organizer", passive_deletes="all"
    )
    tickets: Mapped[list[Ticket]] = relationship(back_populates="user", passive_deletes="all")
    notifications: Mapped[list[Notification]] = relationship(
        back_populates="user", cascade="all, delete-orphan"
    )
    feedbacks: Mapped[list[Feedback]] = relationship(
        back_populates="user", passive_deletes="all"
    )

    __table_args__ = max_length_checks(
        name=100, email=100, password_hash=100, contact_number=20
    )


class Event(Base):
    __tablename__ = "events"

    event_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    name: Mapped[str] = mapped_column(String(100), nullable=False)
    category: Mapped[str] = mapped_column(String(50), nullable=False, index=True)
    location: Mapped[str] = mapped_column(String(200), nullable=False)
    date: Mapped[datetime] = mapped_column(nullable=False, index=True)

    organizer_id: Mapped[int] = mapped_column(
        ForeignKey("users.user_id", ondelete="RESTRICT"), nullable=False, index=True
    )

    organizer: Mapped[User] = relationship(back_populates="organized_events")
    tickets: Mapped[list[Ticket]] = relationship(
        back_populates="event", cascade="all, delete-orphan"
    )
    # Set-null: the ORM loads the notifications and nulls event_id in the same flush.
    notifications: Mapped[list[Notification]] = relationship(back_populates="event")
    feedbacks: Mapped[list[Feedback]] = relationship(
        back_populates="event", cascade="all, delete-orphan"
    )

    __table_args__ = max_length_checks(name=100, category=50, location=200)


class Ticket(Base):
    __tablename__ = "tickets"

    ticket_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    event_id: Mapped[int] = mapped_column(
        ForeignKey("events.event_id", ondelete="CASCADE"), nullable=False, index=True
    )
    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.user_id", ondelete="RESTRICT"), nullable=False, index=True
    )

    booking_date: Mapped[datetime] = mapped_column(nullable=False, default=_utcnow)
    status: Mapped[TicketStatus] = mapped_column(
        Enum(TicketStatus), nullable=False, default=TicketStatus.booked
    )

    event: Mapped[Event] = relationship(back_populates="tickets")
    user: Mapped[User] = relationship(back_populates="tickets")


class Notification(Base):
    __tablename__ = "notifications"

    notification_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.user_id", ondelete="CASCADE"), nullable=False, index=True
    )
    event_id: Mapped[int | None] = mapped_column(
        ForeignKey("events.event_id", ondelete="SET NULL"), nullable=True, index=True
    )

    message: Mapped[str] = mapped_column(String(500), nullable=False)
    sent_timestamp: Mapped[datetime] = mapped_column(nullable=False, default=_utcnow)
    is_read: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    user: Mapped[User] = relationship(back_populates="notifications")
    event: Mapped[Event | None] = relationship(back_populates="notifications")

    __table_args__ = (
        *max_length_checks(message=500),
        Index("ix_notifications_user_unread", "user_id", "is_read"),
    )


class Feedback(Base):
    __tablename__ = "feedbacks"

    feedback_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    event_id: Mapped[int] = mapped_column(
        ForeignKey("events.event_id", ondelete="CASCADE"), nullable=False, index=True
    )
    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.user_id", ondelete="RESTRICT"), nullable=False, index=True
    )

    rating: Mapped[int] = mapped_column(Integer, nullable=False)
    comments: Mapped[str | None] = mapped_column(String(500), nullable=True)
    submitted_timestamp: Mapped[datetime] = mapped_column(nullable=False, default=_utcnow)

    event: Mapped[Event] = relationship(back_populates="feedbacks")
    user: Mapped[User] = relationship(back_populates="feedbacks")

    __table_args__ = max_length_checks(comments=500)


# --- Module Notes -----------------------------------------------------------
# Keys are integer surrogates generated by the store. Deleting a parent lazy-loads its
# cascade and set-null collections inside the flush; AsyncSession runs that in a greenlet.
