"""Tests for the infrastructure.db module."""

from pathlib import Path

from rideshare_pnl.infrastructure import db as db_module
from rideshare_pnl.infrastructure.settings import AppSettings


def test_create_engine_enables_health_checks(monkeypatch) -> None:
    """_create_engine should enable pre-ping on the engine."""
    captured = {}

    def fake_create_engine(db_url, **kwargs):
        captured["db_url"] = db_url
        captured["kwargs"] = kwargs
        return "engine"

    monkeypatch.setattr(db_module, "create_engine", fake_create_engine)

    engine = db_module._create_engine("sqlite://")

    assert engine == "engine"
    assert captured["db_url"] == "sqlite://"
    assert captured["kwargs"]["pool_pre_ping"] is True


def test_create_engine_creates_sqlite_parent_directory(
    monkeypatch,
    tmp_path: Path,
) -> None:
    """SQLite file URLs should get their directory created."""
    monkeypatch.setattr(db_module, "create_engine", lambda url, **_: url)
    target = tmp_path / "nested" / "store.db"

    db_module._create_engine(f"sqlite:///{target}")

    assert target.parent.is_dir()


def test_get_record_store_engine_caches_engine(monkeypatch) -> None:
    """get_record_store_engine should memoize the created engine."""
    db_module._record_store_engine = None
    created = []

    def fake_create_engine(url):
        created.append(url)
        return f"engine:{url}"

    monkeypatch.setattr(db_module, "_create_engine", fake_create_engine)
    monkeypatch.setattr(
        db_module.AppSettings,
        "from_env",
        classmethod(lambda cls: AppSettings(db_url="sqlite:///rides.db")),
    )

    engine_one = db_module.get_record_store_engine()
    engine_two = db_module.get_record_store_engine()

    assert engine_one is engine_two
    assert engine_one == "engine:sqlite:///rides.db"
    assert created == ["sqlite:///rides.db"]
    db_module._record_store_engine = None


def test_adapter_proxies_the_global_engine(monkeypatch) -> None:
    """Without a URL the adapter should use the shared engine."""
    monkeypatch.setattr(
        db_module,
        "get_record_store_engine",
        lambda: "shared_engine",
    )

    adapter = db_module.SqlAlchemyDatabaseEngineAdapter()

    assert adapter.get_record_store_engine() == "shared_engine"


def test_adapter_with_url_owns_its_engine(monkeypatch) -> None:
    """An explicit URL should create one engine per adapter."""
    created = []

    def fake_create_engine(url):
        created.append(url)
        return f"engine:{url}"

    monkeypatch.setattr(db_module, "_create_engine", fake_create_engine)
    adapter = db_module.SqlAlchemyDatabaseEngineAdapter("sqlite://")

    assert adapter.get_record_store_engine() == "engine:sqlite://"
    assert adapter.get_record_store_engine() == "engine:sqlite://"
    assert created == ["sqlite://"]
