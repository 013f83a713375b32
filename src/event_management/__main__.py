"""
event_management.__main__

Entrypoint for `python -m event_management`.

Responsibilities:
- Load settings and configure logging.
- Create the schema against the configured store, then exit.
"""

from __future__ import annotations

import asyncio

from sqlalchemy.engine import make_url

from event_management.db.registrar import create_schema
from event_management.db.session import create_engine
from event_management.observability.logging import configure_logging, get_logger
from event_management.settings import get_settings

log = get_logger(__name__)


async def bootstrap() -> list[str]:
    settings = get_settings()
    engine = create_engine(settings)
    try:
        tables = await create_schema(engine)
    finally:
        await engine.dispose()
    log.info("schema_created", tables=tables, database_url=_redact(settings.database_url))
    return tables


def _redact(url: str) -> str:
    # Keep credentials out of logs.
    return make_url(url).render_as_string(hide_password=True)


def main() -> None:
    settings = get_settings()
    configure_logging(
        service_name=settings.service_name, level=settings.log_level, echo_sql=settings.echo_sql
    )
    asyncio.run(bootstrap())


if __name__ == "__main__":
    main()
