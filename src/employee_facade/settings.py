"""
employee_facade.settings

Central configuration model (Pydantic Settings).

Responsibilities:
- Provide strongly-typed, env-driven settings for all layers.
- Carry the upstream base URL and retry policy so they can be injected
  into the gateway instead of living in module-level constants.
- Offer a cached settings instance for dependency injection.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    - Strict env-driven configuration (prefix `EMP_`)
    - Defaults safe for local dev against the mock employee server
    - Single settings object injected across layers
    """

    model_config = SettingsConfigDict(env_prefix="EMP_", case_sensitive=False)

    env: Literal["dev", "test", "prod"] = "dev"
    service_name: str = "employee-facade"
    log_level: str = "INFO"

    api_host: str = "0.0.0.0"
    api_port: int = 8111

    # Upstream employee-record service
    upstream_base_url: str = "http://localhost:8112/api/v1/employee"
    upstream_timeout_seconds: float = Field(default=10.0, gt=0)

    # Retry-on-429 policy
    retry_max_attempts: int = Field(default=3, ge=1)
    retry_base_delay_ms: int = Field(default=500, ge=0)
    retry_backoff_multiplier: float = Field(default=2.0, ge=1)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    # Cache avoids re-parsing env vars for each request dependency.
    return Settings()


# --- Module Notes -----------------------------------------------------------
# The upstream base URL is read once per Settings instance and handed to the
# gateway at construction; nothing else in the package hardcodes it.
