"""Domain package for business rules and core models."""

from .models import (
    CostConfiguration,
    DailyBreakdownEntry,
    EarningRecord,
    ExpenseRecord,
    ProfitLossSummary,
)
from .services import (
    calculate_metrics,
    filter_by_month,
    resolve_cost_configuration,
)

__all__ = [
    "CostConfiguration",
    "DailyBreakdownEntry",
    "EarningRecord",
    "ExpenseRecord",
    "ProfitLossSummary",
    "calculate_metrics",
    "filter_by_month",
    "resolve_cost_configuration",
]
