"""Domain models package."""

from .finance import DailyBreakdownEntry, ProfitLossSummary
from .records import (
    CONFIG_PAYLOAD_KEYS,
    CostConfiguration,
    EarningRecord,
    ExpenseRecord,
)

__all__ = [
    "CONFIG_PAYLOAD_KEYS",
    "CostConfiguration",
    "DailyBreakdownEntry",
    "EarningRecord",
    "ExpenseRecord",
    "ProfitLossSummary",
]
