"""Application ports package."""

from .database import DatabaseEnginePort
from .record_store import (
    EARNINGS_COLLECTION,
    EXPENSES_COLLECTION,
    MILEAGE_COLLECTION,
    RecordStoreMigrationPort,
    RecordStorePort,
)

__all__ = [
    "DatabaseEnginePort",
    "EARNINGS_COLLECTION",
    "EXPENSES_COLLECTION",
    "MILEAGE_COLLECTION",
    "RecordStoreMigrationPort",
    "RecordStorePort",
]
