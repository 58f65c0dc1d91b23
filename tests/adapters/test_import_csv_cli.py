"""Tests for the CSV import CLI adapter."""

from pathlib import Path
from unittest.mock import MagicMock

from rideshare_pnl.adapters import import_csv_cli


def _patch_cli(monkeypatch, store: MagicMock, logger: MagicMock) -> None:
    monkeypatch.setattr(import_csv_cli, "get_app_logger", lambda: logger)
    monkeypatch.setattr(
        import_csv_cli,
        "build_migrated_record_store",
        lambda: store,
    )


def test_main_imports_earnings(monkeypatch, tmp_path: Path, capsys) -> None:
    """A valid earnings file should be imported and reported."""
    csv_path = tmp_path / "earnings.csv"
    csv_path.write_text(
        "\ufeffDate,Ride Distance (km),Total Income\n"
        "2026-03-01,100,5000\n"
        ",0,0\n",
        encoding="utf-8",
    )
    store = MagicMock()
    _patch_cli(monkeypatch, store, MagicMock())
    monkeypatch.setenv("IMPORT_FILE", str(csv_path))
    monkeypatch.delenv("IMPORT_KIND", raising=False)

    import_csv_cli.main()

    assert store.add_earning.call_count == 1
    output = capsys.readouterr().out
    assert "Imported 1 earnings from earnings.csv (1 rows skipped)." in output


def test_main_imports_expenses(monkeypatch, tmp_path: Path) -> None:
    """IMPORT_KIND selects the expense importer."""
    csv_path = tmp_path / "expenses.csv"
    csv_path.write_text(
        "Date,Category,Amount\n2026-03-04,parking,150\n",
        encoding="utf-8",
    )
    store = MagicMock()
    _patch_cli(monkeypatch, store, MagicMock())
    monkeypatch.setenv("IMPORT_FILE", str(csv_path))
    monkeypatch.setenv("IMPORT_KIND", "Expenses")

    import_csv_cli.main()

    assert store.add_expense.call_count == 1
    store.add_earning.assert_not_called()


def test_main_logs_rejected_files(monkeypatch, tmp_path: Path) -> None:
    """Rejected headers are logged as errors without writing."""
    csv_path = tmp_path / "bad.csv"
    csv_path.write_text("Date,Income\n2026-03-01,5000\n", encoding="utf-8")
    store = MagicMock()
    logger = MagicMock()
    _patch_cli(monkeypatch, store, logger)
    monkeypatch.setenv("IMPORT_FILE", str(csv_path))
    monkeypatch.setenv("IMPORT_KIND", "earnings")

    import_csv_cli.main()

    store.add_earning.assert_not_called()
    logger.error.assert_called_once()


def test_main_warns_on_missing_configuration(
    monkeypatch,
    tmp_path: Path,
) -> None:
    """Missing files, paths or kinds should warn without building a store."""
    logger = MagicMock()
    build_store = MagicMock()
    monkeypatch.setattr(import_csv_cli, "get_app_logger", lambda: logger)
    monkeypatch.setattr(
        import_csv_cli,
        "build_migrated_record_store",
        build_store,
    )

    monkeypatch.delenv("IMPORT_FILE", raising=False)
    import_csv_cli.main()

    monkeypatch.setenv("IMPORT_FILE", str(tmp_path / "missing.csv"))
    monkeypatch.setenv("IMPORT_KIND", "earnings")
    import_csv_cli.main()

    monkeypatch.setenv("IMPORT_KIND", "mileage")
    import_csv_cli.main()

    assert logger.warning.call_count == 3
    build_store.assert_not_called()
