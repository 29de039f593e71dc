"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - Settings is frozen: path_prefix and mandatory_params are read-only for the process lifetime
    - get_settings() is cached (lru_cache) — single instance per process, shared by every request
    - mandatory_params is a frozenset (order irrelevant, duplicates collapse)

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - MANDATORY_PARAMS accepts "A,B" as well as a JSON list: NoDecode hands the raw
      string to the validator instead of forcing JSON
"""

import json
from functools import lru_cache
from typing import Annotated

from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env", case_sensitive=False, frozen=True,
    )

    # Document customization
    path_prefix: str = ""
    mandatory_params: Annotated[frozenset[str], NoDecode] = frozenset()

    @field_validator("mandatory_params", mode="before")
    @classmethod
    def split_mandatory_params(cls, v):
        """Accept comma-separated names or a JSON list from the environment."""
        if isinstance(v, str):
            v = v.strip()
            if v.startswith("["):
                return json.loads(v)
            return [name.strip() for name in v.split(",") if name.strip()]
        return v

    # API
    cors_origins: list[str] = ["http://localhost:5173"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
