"""Centralized application configuration."""

from __future__ import annotations

import os
from collections.abc import Mapping
from functools import lru_cache
from typing import Protocol

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from notify_relay.models.errors import ConfigurationError


class Settings(BaseSettings):
    """Server settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Single origin allowed by the CORS policy
    allowed_origins: str = ""

    port: int = 4000

    # Timeout for calls to the third-party APIs (seconds)
    outbound_timeout: float = 30.0


@lru_cache
def get_settings() -> Settings:
    """Get cached settings singleton."""
    return Settings()


class TelegramSettings(BaseSettings):
    """Bot credentials, read once at startup and never mutated."""

    model_config = SettingsConfigDict(
        env_prefix="TELEGRAM_", env_file=".env", extra="ignore", frozen=True
    )

    bot_token: str = Field(min_length=1)
    chat_id: str = Field(min_length=1)


def load_telegram_settings() -> TelegramSettings:
    """
    Build the Telegram credentials from the environment.

    Returns:
        Immutable TelegramSettings

    Raises:
        ConfigurationError: If either variable is missing or empty
    """
    try:
        return TelegramSettings()
    except ValidationError as e:
        raise ConfigurationError(
            "TELEGRAM_BOT_TOKEN and TELEGRAM_CHAT_ID environment variables are required"
        ) from e


class SecretProvider(Protocol):
    """Looks up a named secret at call time."""

    def get(self, name: str) -> str | None: ...


class EnvironmentSecrets:
    """
    Secret provider backed by a live mapping, os.environ by default.

    Values are looked up on every call so rotated secrets are picked up
    without a restart.
    """

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = os.environ if environ is None else environ

    def get(self, name: str) -> str | None:
        value = self._environ.get(name)
        return value or None
