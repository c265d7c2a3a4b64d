"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - Settings are read-only after construction
    - get_settings() is cached (lru_cache) — single instance per process
    - Exactly one zero-amount policy and one token-account mode per deployment

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support (ADR: developer UX)
    - Defaults reproduce the reference live behavior: zero amounts accepted,
      token accounts passed through literally
    - Routes receive settings through Depends(get_settings) so tests override them
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from solscribe.core.domain_types import TokenAccountMode


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env", case_sensitive=False, frozen=True,
    )

    # Service
    service_name: str = "solscribe"
    greeting: str = "Hello, world!"

    # Server
    host: str = "0.0.0.0"
    port: int = 8000

    # API
    cors_origins: list[str] = ["http://localhost:5173"]

    # Request policies
    reject_zero_amounts: bool = False
    token_account_mode: TokenAccountMode = TokenAccountMode.LITERAL

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @field_validator("log_format")
    @classmethod
    def check_log_format(cls, v: str) -> str:
        v = v.lower()
        if v not in ("json", "text"):
            raise ValueError("log_format must be 'json' or 'text'")
        return v


@lru_cache
def get_settings() -> Settings:
    return Settings()
