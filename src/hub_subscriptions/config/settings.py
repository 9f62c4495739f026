"""Subscriptions service configuration using pydantic-settings."""

from __future__ import annotations

from functools import lru_cache
from typing import ClassVar, Literal

from pydantic import Field, PositiveInt
from pydantic_settings import BaseSettings, SettingsConfigDict

Policy = Literal["ignore", "reject"]


class SubscriptionsApiSettings(BaseSettings):
    """Process/runtime settings for the subscriptions API server."""

    model_config: ClassVar[SettingsConfigDict] = SettingsConfigDict(
        env_prefix="HUB_SUBSCRIPTIONS_API_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    host: str = Field(default="127.0.0.1", description="Bind address for the subscriptions API.")
    port: PositiveInt = Field(default=8320, description="Port for the subscriptions API.")
    reload: bool = Field(default=False, description="Enable uvicorn auto-reload (dev only).")
    log_level: Literal["critical", "error", "warning", "info", "debug", "trace"] = Field(
        default="info",
        description="Log level for subscriptions API / uvicorn.",
    )


class SubscriptionsSettings(BaseSettings):
    """Validated settings for subscription storage and policies."""

    model_config: ClassVar[SettingsConfigDict] = SettingsConfigDict(
        env_prefix="HUB_SUBSCRIPTIONS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    database_url: str | None = Field(
        default=None,
        description="SQLAlchemy URL of the subscriptions database (defaults to a local SQLite file).",
    )
    duplicate_policy: Policy = Field(
        default="ignore",
        description="What to do when a caller adds a subscription that already exists.",
    )
    missing_policy: Policy = Field(
        default="ignore",
        description="What to do when a caller deletes a subscription that does not exist.",
    )
    auto_migrate: bool = Field(
        default=True,
        description="Apply Alembic migrations on application startup.",
    )
    seed_sample_data: bool = Field(
        default=False,
        description="Seed sample packages and a development token on startup.",
    )


@lru_cache()
def get_settings() -> SubscriptionsSettings:
    """Return memoized subscriptions settings."""

    return SubscriptionsSettings()


@lru_cache()
def get_api_settings() -> SubscriptionsApiSettings:
    """Return memoized API process settings."""

    return SubscriptionsApiSettings()
