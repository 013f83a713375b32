"""
event_management.db

Persistence package (SQLAlchemy async).

Responsibilities:
- Provide ORM models, schema registration, engine/session setup and repositories.
"""

# Package marker.
