"""
tests.conftest

Shared fixtures: a file-backed SQLite store per test.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from pathlib import Path

import pytest_asyncio

from event_management.store import EventStore
from tests.factories import make_settings


@pytest_asyncio.fixture
async def store(tmp_path: Path) -> AsyncIterator[EventStore]:
    s = EventStore(settings=make_settings(tmp_path))
    await s.startup()
    try:
        yield s
    finally:
        await s.shutdown()
