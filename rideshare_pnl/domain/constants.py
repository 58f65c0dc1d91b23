"""Domain constants for the rideshare cost model."""

from decimal import Decimal

DEFAULT_DRIVER_PASS_COST_PER_DAY = Decimal("999")
DEFAULT_FUEL_CONSUMPTION_RATE = Decimal("13")
DEFAULT_FUEL_PRICE_PER_LITER = Decimal("250")
DEFAULT_MAINTENANCE_COST_PER_KM = Decimal("10")

DEFAULT_EXPENSE_CATEGORY = "other"
DEFAULT_EXPENSE_TYPE = "variable"

EXPENSE_CATEGORY_LABELS = {
    "fuel": "Fuel",
    "parking": "Parking",
    "tolls": "Tolls",
    "carwash": "Car Wash",
    "insurance": "Insurance",
    "lease": "Lease/Loan",
    "license": "Vehicle License",
    "internet": "Internet",
    "maintenance": "Maintenance",
    "repairs": "Repairs",
    "tires": "Tires",
    "battery": "Battery",
    "engine": "Engine Work",
    "other": "Other",
}

EXPENSE_TYPES = ("fixed", "variable")


def category_label(category: str) -> str:
    """Return the display label for an expense category tag."""
    return EXPENSE_CATEGORY_LABELS.get(category, category)


__all__ = [
    "DEFAULT_DRIVER_PASS_COST_PER_DAY",
    "DEFAULT_FUEL_CONSUMPTION_RATE",
    "DEFAULT_FUEL_PRICE_PER_LITER",
    "DEFAULT_MAINTENANCE_COST_PER_KM",
    "DEFAULT_EXPENSE_CATEGORY",
    "DEFAULT_EXPENSE_TYPE",
    "EXPENSE_CATEGORY_LABELS",
    "EXPENSE_TYPES",
    "category_label",
]
