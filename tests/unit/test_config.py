"""Unit tests for configuration loading."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from graz_transit_bot.config import DEFAULT_DATABASE, SOURCE_URL, Config


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("SOURCE_URL", "DATABASE", "REQUEST_TIMEOUT", "VERBOSE"):
        monkeypatch.delenv(f"GRAZ_TRANSIT_BOT_{name}", raising=False)


class TestConfig:
    """Tests for the Config model."""

    def test_defaults(self):
        config = Config()

        assert config.source_url == SOURCE_URL
        assert config.database == DEFAULT_DATABASE == Path("graz-opnv-bot.json")
        assert config.request_timeout == 30.0
        assert config.verbose is False

    def test_config_loads_from_environment(self, monkeypatch):
        """Config should load values from environment variables."""
        monkeypatch.setenv("GRAZ_TRANSIT_BOT_DATABASE", "/tmp/db.json")
        monkeypatch.setenv("GRAZ_TRANSIT_BOT_VERBOSE", "true")
        monkeypatch.setenv("GRAZ_TRANSIT_BOT_REQUEST_TIMEOUT", "5")

        config = Config()

        assert config.database == Path("/tmp/db.json")
        assert config.verbose is True
        assert config.request_timeout == 5.0

    def test_keyword_arguments_override_environment(self, monkeypatch):
        monkeypatch.setenv("GRAZ_TRANSIT_BOT_DATABASE", "/tmp/db.json")

        config = Config(database=Path("other.json"))

        assert config.database == Path("other.json")

    def test_config_rejects_whitespace_url(self, monkeypatch):
        """Config with whitespace-only URL should raise ValidationError."""
        monkeypatch.setenv("GRAZ_TRANSIT_BOT_SOURCE_URL", "   ")

        with pytest.raises(ValidationError):
            Config()

    @pytest.mark.parametrize("timeout", ["0", "-3"])
    def test_config_rejects_non_positive_timeout(self, monkeypatch, timeout: str):
        monkeypatch.setenv("GRAZ_TRANSIT_BOT_REQUEST_TIMEOUT", timeout)

        with pytest.raises(ValidationError) as exc_info:
            Config()

        assert "request_timeout" in str(exc_info.value)
