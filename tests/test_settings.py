import os

import pytest

from config.settings import Settings, get_settings
from core.errors import ConfigurationError


def test_defaults():
    settings = Settings.from_env({})

    assert settings.tradedb_uri is None
    assert settings.tradedb_name == "trades"
    assert settings.journey_window_days == 1
    assert settings.order_window_days == 30
    assert settings.require_date_range is False
    assert settings.cors_origins == ("*",)
    assert settings.port == 5000


def test_values_from_env():
    settings = Settings.from_env({
        "TRADEDB_URI": "mongodb://db:27017",
        "TRADEDB_NAME": "journal",
        "JOURNEY_WINDOW_DAYS": "7",
        "ORDER_WINDOW_DAYS": "90",
        "REQUIRE_DATE_RANGE": "yes",
        "CORS_ORIGINS": "http://localhost:3000, https://journal.example.com",
        "LOG_LEVEL": "debug",
        "PORT": "8080",
    })

    assert settings.tradedb_uri == "mongodb://db:27017"
    assert settings.tradedb_name == "journal"
    assert settings.journey_window_days == 7
    assert settings.order_window_days == 90
    assert settings.require_date_range is True
    assert settings.cors_origins == ("http://localhost:3000", "https://journal.example.com")
    assert settings.log_level == "DEBUG"
    assert settings.port == 8080


def test_empty_uri_treated_as_missing():
    assert Settings.from_env({"TRADEDB_URI": ""}).tradedb_uri is None


@pytest.mark.parametrize("env", [
    {"ORDER_WINDOW_DAYS": "thirty"},
    {"JOURNEY_WINDOW_DAYS": "-1"},
    {"REQUIRE_DATE_RANGE": "maybe"},
    {"PORT": "0"},
])
def test_invalid_values_rejected(env):
    with pytest.raises(ConfigurationError):
        Settings.from_env(env)


def test_get_settings_reads_dotenv_from_working_directory(tmp_path, monkeypatch):
    monkeypatch.setattr(os, "environ", os.environ.copy())
    monkeypatch.delenv("TRADEDB_URI", raising=False)
    monkeypatch.delenv("ORDER_WINDOW_DAYS", raising=False)
    (tmp_path / ".env").write_text("TRADEDB_URI=mongodb://envfile:27017\nORDER_WINDOW_DAYS=45\n")
    monkeypatch.chdir(tmp_path)

    settings = get_settings()

    assert settings.tradedb_uri == "mongodb://envfile:27017"
    assert settings.order_window_days == 45


def test_process_environment_wins_over_dotenv(tmp_path, monkeypatch):
    monkeypatch.setattr(os, "environ", os.environ.copy())
    monkeypatch.setenv("TRADEDB_URI", "mongodb://from-env:27017")
    (tmp_path / ".env").write_text("TRADEDB_URI=mongodb://envfile:27017\n")
    monkeypatch.chdir(tmp_path)

    assert get_settings().tradedb_uri == "mongodb://from-env:27017"
