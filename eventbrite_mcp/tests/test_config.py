"""Tests for settings and startup checks."""

import logging

import pytest

from eventbrite_mcp.config import Settings, configure_logging, get_settings, require_api_key


class TestSettings:
    """Tests for Settings loading."""

    def test_reads_primary_variable(self, monkeypatch):
        monkeypatch.setenv("EVENTBRITE_API_KEY", "primary")
        assert Settings(_env_file=None).eventbrite_api_key == "primary"

    def test_reads_legacy_alias(self, monkeypatch):
        monkeypatch.delenv("EVENTBRITE_API_KEY", raising=False)
        monkeypatch.setenv("EVENTBRITEAPIKEY", "legacy")
        assert Settings(_env_file=None).eventbrite_api_key == "legacy"

    def test_primary_wins_over_alias(self, monkeypatch):
        monkeypatch.setenv("EVENTBRITE_API_KEY", "primary")
        monkeypatch.setenv("EVENTBRITEAPIKEY", "legacy")
        assert Settings(_env_file=None).eventbrite_api_key == "primary"

    def test_reads_env_file(self, monkeypatch, tmp_path):
        monkeypatch.delenv("EVENTBRITE_API_KEY", raising=False)
        monkeypatch.delenv("EVENTBRITEAPIKEY", raising=False)
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        env_file = tmp_path / ".env"
        env_file.write_text("EVENTBRITE_API_KEY=from-file\nLOG_LEVEL=debug\n")

        settings = Settings(_env_file=env_file)
        assert settings.eventbrite_api_key == "from-file"
        assert settings.log_level == "debug"

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("EVENTBRITE_API_KEY", raising=False)
        monkeypatch.delenv("EVENTBRITEAPIKEY", raising=False)
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        settings = Settings(_env_file=None)
        assert settings.eventbrite_api_key == ""
        assert settings.log_level == "INFO"

    def test_get_settings_cached(self):
        assert get_settings() is get_settings()


class TestRequireApiKey:
    """Tests for require_api_key."""

    def test_returns_key(self, monkeypatch):
        monkeypatch.setenv("EVENTBRITE_API_KEY", "abc")
        assert require_api_key(Settings(_env_file=None)) == "abc"

    def test_exits_with_guidance(self, monkeypatch, capsys):
        monkeypatch.delenv("EVENTBRITE_API_KEY", raising=False)
        monkeypatch.delenv("EVENTBRITEAPIKEY", raising=False)

        with pytest.raises(SystemExit) as exc_info:
            require_api_key(Settings(_env_file=None))

        assert exc_info.value.code == 1
        captured = capsys.readouterr()
        assert "EVENTBRITE_API_KEY environment variable is required" in captured.err
        assert "export EVENTBRITE_API_KEY=your-api-key" in captured.err
        assert captured.out == ""


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_quiets_http_loggers(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "debug")
        configure_logging(Settings(_env_file=None))
        assert logging.getLogger("httpx").level == logging.WARNING
        assert logging.getLogger("httpcore").level == logging.WARNING
