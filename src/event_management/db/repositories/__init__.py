"""
event_management.db.repositories

Repository package.

Responsibilities:
- One typed accessor per entity collection (users, events, tickets,
  notifications, feedbacks).
"""

# Package marker; repositories are imported directly from submodules.


# --- Module Notes -----------------------------------------------------------
# Repositories flush after writes so store constraint errors surface at the call site.
