"""
event_management.db.repositories.users

Repository for `User` entities.

Responsibilities:
- Create users with a role and hashed password.
- Look users up by their unique email.
"""

from __future__ import annotations

from sqlalchemy import select

from event_management.db.models import User, UserRole
from event_management.db.repositories.base import Repository


class UserRepo(Repository[User]):
    model = User

    async def create(
        self,
        *,
        name: str,
        email: str,
        password_hash: str,
        role: UserRole = UserRole.attendee,
        contact_number: str | None = None,
    ) -> User:
        user = User(
            name=name,
            email=email,
            password_hash=password_hash,
            role=role,
            contact_number=contact_number,
        )
        return await self.add(user)

    async def get_by_email(self, email: str) -> User | None:
        stmt = select(User).where(User.email == email)
        return (await self._session.execute(stmt)).scalar_one_or_none()


# --- Module Notes -----------------------------------------------------------
# Email uniqueness is left to the store; a duplicate surfaces as IntegrityError on flush.
