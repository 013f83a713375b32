"""
event_management.settings

Central configuration model (Pydantic Settings).

Responsibilities:
- Provide strongly-typed, env-driven store connection options.
- Offer a cached settings instance for process-wide defaults.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Store connection options and runtime toggles.
    Every field can be overridden with an `EVM_`-prefixed env var.
    """

    model_config = SettingsConfigDict(env_prefix="EVM_", case_sensitive=False)

    # Environment controls toggle behavior like auto-creating tables.
    env: Literal["dev", "test", "prod"] = "dev"
    service_name: str = "event-management"
    log_level: str = "INFO"

    # Persistence
    database_url: str = "sqlite+aiosqlite:///./events.db"
    echo_sql: bool = False
    pool_pre_ping: bool = True


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


# --- Module Notes -----------------------------------------------------------
# Tests construct `Settings(...)` directly instead of going through the cache.
