"""Application use cases package."""

from .csv_records import CsvImportError
from .export_records import ExportRecordsUseCase, export_filename
from .get_profit_loss_summary import (
    GetProfitLossSummaryUseCase,
    period_label,
)
from .import_records import (
    ImportEarningsUseCase,
    ImportExpensesUseCase,
    ImportResult,
)
from .manage_records import ManageRecordsUseCase
from .migrate_record_store import (
    CURRENT_SCHEMA_VERSION,
    MigrateRecordStoreUseCase,
    MigrationResult,
)

__all__ = [
    "CURRENT_SCHEMA_VERSION",
    "CsvImportError",
    "ExportRecordsUseCase",
    "GetProfitLossSummaryUseCase",
    "ImportEarningsUseCase",
    "ImportExpensesUseCase",
    "ImportResult",
    "ManageRecordsUseCase",
    "MigrateRecordStoreUseCase",
    "MigrationResult",
    "export_filename",
    "period_label",
]
