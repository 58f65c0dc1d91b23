"""Domain services package."""

from .configuration import (
    default_cost_configuration,
    missing_config_fields,
    resolve_cost_configuration,
)
from .periods import (
    available_months,
    filter_by_month,
    filter_by_year,
    is_in_month,
    is_in_year,
)
from .profit_loss import (
    calculate_metrics,
    group_expenses_by_category,
    group_expenses_by_type,
    safe_ratio,
)

__all__ = [
    "available_months",
    "calculate_metrics",
    "default_cost_configuration",
    "filter_by_month",
    "filter_by_year",
    "group_expenses_by_category",
    "group_expenses_by_type",
    "is_in_month",
    "is_in_year",
    "missing_config_fields",
    "resolve_cost_configuration",
    "safe_ratio",
]
