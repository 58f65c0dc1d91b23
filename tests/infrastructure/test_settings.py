"""Tests for infrastructure settings."""

from pathlib import Path

from rideshare_pnl.infrastructure import settings as settings_module
from rideshare_pnl.infrastructure.settings import AppSettings


def test_from_env_reads_database_url(monkeypatch) -> None:
    """An explicit database URL should be used as-is."""
    monkeypatch.setattr(settings_module.dotenv, "load_dotenv", lambda: None)
    monkeypatch.setenv("RIDESHARE_DB_URL", "sqlite:///tmp/custom.db")
    monkeypatch.setenv("RIDESHARE_CURRENCY", "usd")

    settings = AppSettings.from_env()

    assert settings.db_url == "sqlite:///tmp/custom.db"
    assert settings.currency_code == "USD"
    assert settings.currency_symbol == "$"


def test_from_env_defaults_to_project_sqlite_file(
    monkeypatch,
    tmp_path: Path,
) -> None:
    """Without a URL the store lives under the project data directory."""
    monkeypatch.setattr(settings_module.dotenv, "load_dotenv", lambda: None)
    monkeypatch.setattr(settings_module, "get_project_root", lambda: tmp_path)
    monkeypatch.delenv("RIDESHARE_DB_URL", raising=False)
    monkeypatch.delenv("RIDESHARE_CURRENCY", raising=False)

    settings = AppSettings.from_env()

    assert settings.db_url == f"sqlite:///{tmp_path / 'data' / 'rideshare.db'}"
    assert settings.currency_code == "LKR"
    assert settings.currency_symbol == "₨"


def test_unknown_currency_uses_its_code() -> None:
    """Currencies without a known symbol display their code."""
    assert AppSettings("sqlite://", "JPY").currency_symbol == "JPY"
