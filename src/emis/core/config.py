# src/emis/core/config.py
from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


PrimaryRolePolicy = Literal["ignore", "warn", "error"]


class Settings(BaseSettings):
    # ---- App ----
    APP_NAME: str = "EMIS Schemas"
    APP_VERSION: str = "0.1.0"

    # ---- Logging ----
    LOG_LEVEL: str = Field(
        default="INFO",
        validation_alias=AliasChoices("EMIS_LOG_LEVEL", "LOG_LEVEL"),
    )

    # ---- Business rules ----
    # |forward * reciprocal - 1| allowed before a ratio pair is reported
    RATIO_TOLERANCE: float = Field(
        default=1e-6,
        ge=0,
        validation_alias=AliasChoices("EMIS_RATIO_TOLERANCE", "RATIO_TOLERANCE"),
    )
    # Overlapping primary roles are not a confirmed business rule yet.
    PRIMARY_ROLE_POLICY: PrimaryRolePolicy = Field(
        default="ignore",
        validation_alias=AliasChoices("EMIS_PRIMARY_ROLE_POLICY", "PRIMARY_ROLE_POLICY"),
    )

    # ---- CLI ----
    JSON_INDENT: int = Field(
        default=2,
        ge=0,
        validation_alias=AliasChoices("EMIS_JSON_INDENT", "JSON_INDENT"),
    )

    # ---- Pydantic settings config ----
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_ignore_empty=True,
    )

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def _normalize_level(cls, v: object) -> object:
        if isinstance(v, str):
            return v.strip().upper() or "INFO"
        return v


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
__all__ = ["settings", "Settings", "get_settings", "PrimaryRolePolicy"]
