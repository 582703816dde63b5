"""Tests for application configuration."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest
from pydantic import ValidationError

from notify_relay.core.config import (
    EnvironmentSecrets,
    Settings,
    TelegramSettings,
    get_settings,
    load_telegram_settings,
)
from notify_relay.models.errors import ConfigurationError


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Iterator[None]:
    """Run each test away from any local .env and without relay variables."""
    monkeypatch.chdir(tmp_path)
    for name in (
        "PORT",
        "ALLOWED_ORIGINS",
        "OUTBOUND_TIMEOUT",
        "TELEGRAM_BOT_TOKEN",
        "TELEGRAM_CHAT_ID",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class TestSettings:
    """Test Settings class."""

    def test_default_values(self) -> None:
        """Test that defaults are sensible."""
        settings = Settings()
        assert settings.port == 4000
        assert settings.allowed_origins == ""
        assert settings.outbound_timeout == 30.0

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that env vars override defaults."""
        monkeypatch.setenv("PORT", "8080")
        monkeypatch.setenv("ALLOWED_ORIGINS", "https://example.com")
        monkeypatch.setenv("OUTBOUND_TIMEOUT", "5")

        settings = get_settings()
        assert settings.port == 8080
        assert settings.allowed_origins == "https://example.com"
        assert settings.outbound_timeout == 5.0

    def test_reads_dotenv_file(self, tmp_path: Path) -> None:
        """Values in .env are picked up when the process env lacks them."""
        (tmp_path / ".env").write_text("PORT=9001\n")

        assert Settings().port == 9001

    def test_cached_singleton(self) -> None:
        """Test that get_settings returns cached instance."""
        assert get_settings() is get_settings()


class TestTelegramSettings:
    """Test startup loading of the bot credentials."""

    def test_loads_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TELEGRAM_BOT_TOKEN", "123:abc")
        monkeypatch.setenv("TELEGRAM_CHAT_ID", "42")

        settings = load_telegram_settings()
        assert settings.bot_token == "123:abc"
        assert settings.chat_id == "42"

    @pytest.mark.parametrize(
        "env",
        [
            {},
            {"TELEGRAM_BOT_TOKEN": "123:abc"},
            {"TELEGRAM_CHAT_ID": "42"},
            {"TELEGRAM_BOT_TOKEN": "", "TELEGRAM_CHAT_ID": "42"},
        ],
    )
    def test_missing_values_are_fatal(
        self, monkeypatch: pytest.MonkeyPatch, env: dict[str, str]
    ) -> None:
        """Either variable missing or empty raises ConfigurationError."""
        for name, value in env.items():
            monkeypatch.setenv(name, value)

        with pytest.raises(ConfigurationError, match="TELEGRAM_BOT_TOKEN"):
            load_telegram_settings()

    def test_settings_are_immutable(self) -> None:
        settings = TelegramSettings(bot_token="123:abc", chat_id="42")

        with pytest.raises(ValidationError):
            settings.chat_id = "other"  # type: ignore[misc]


class TestEnvironmentSecrets:
    """Test the call-time secret provider."""

    def test_reads_live_mapping(self) -> None:
        """Changes to the backing mapping are seen on the next lookup."""
        environ: dict[str, str] = {}
        secrets = EnvironmentSecrets(environ)

        assert secrets.get("BEEHIIV_API_KEY") is None

        environ["BEEHIIV_API_KEY"] = "key"
        assert secrets.get("BEEHIIV_API_KEY") == "key"

    def test_empty_value_is_missing(self) -> None:
        secrets = EnvironmentSecrets({"BEEHIIV_API_KEY": ""})
        assert secrets.get("BEEHIIV_API_KEY") is None

    def test_defaults_to_process_environment(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        secrets = EnvironmentSecrets()
        monkeypatch.setenv("BEEHIIV_PUBLICATION_ID", "pub_1")

        assert secrets.get("BEEHIIV_PUBLICATION_ID") == "pub_1"
