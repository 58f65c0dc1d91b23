"""CLI adapter importing earnings or expenses from a CSV file.

``IMPORT_FILE`` names the file and ``IMPORT_KIND`` selects ``earnings``
(the default) or ``expenses``.
"""

import os
from pathlib import Path

from rideshare_pnl.application.use_cases.csv_records import CsvImportError
from rideshare_pnl.application.use_cases.import_records import (
    ImportEarningsUseCase,
    ImportExpensesUseCase,
)
from rideshare_pnl.infrastructure.container import build_migrated_record_store
from rideshare_pnl.infrastructure.logging.logger import get_app_logger

IMPORTERS = {
    "earnings": ImportEarningsUseCase,
    "expenses": ImportExpensesUseCase,
}


def main() -> None:
    """Run the configured CSV import."""
    logger = get_app_logger()
    raw_path = os.getenv("IMPORT_FILE")
    if not raw_path:
        logger.warning("IMPORT_FILE is required to import a CSV file.")
        return
    kind = os.getenv("IMPORT_KIND", "earnings").strip().lower()
    importer_cls = IMPORTERS.get(kind)
    if importer_cls is None:
        logger.warning(
            f"Unknown IMPORT_KIND '{kind}'. Use 'earnings' or 'expenses'."
        )
        return

    path = Path(raw_path).expanduser()
    if not path.is_file():
        logger.warning(f"Import file does not exist at {path}")
        return

    store = build_migrated_record_store()
    try:
        result = importer_cls(store, logger=logger).execute(
            path.read_text(encoding="utf-8-sig")
        )
    except CsvImportError as exc:
        logger.error(f"Import rejected: {exc}")
        return

    print(
        f"Imported {result.imported_count} {kind} from {path.name} "
        f"({result.skipped_count} rows skipped)."
    )


if __name__ == "__main__":  # pragma: no cover
    main()
