"""
event_management.observability

Observability package.

Responsibilities:
- Structured logging configuration shared by the store and CLI bootstrap.
"""

# Package marker.
