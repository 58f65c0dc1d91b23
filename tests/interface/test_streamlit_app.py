"""Tests for the Streamlit app module."""

from datetime import date
from decimal import Decimal
from types import SimpleNamespace

from rideshare_pnl.adapters.interface.streamlit import app
from rideshare_pnl.domain.models.records import (
    CostConfiguration,
    EarningRecord,
    ExpenseRecord,
)
from rideshare_pnl.domain.services.profit_loss import calculate_metrics
from rideshare_pnl.infrastructure.settings import AppSettings


def _summary():
    config = CostConfiguration(
        driver_pass_cost_per_day=Decimal("999"),
        driver_pass_activation_date="2026-02-24",
        fuel_consumption_rate=Decimal("13"),
        fuel_price_per_liter=Decimal("250"),
        maintenance_cost_per_km=Decimal("10"),
    )
    return calculate_metrics(
        [
            EarningRecord("2026-03-01", Decimal("100"), Decimal("5000"), 12),
            EarningRecord("2026-03-02", Decimal("10"), Decimal("500"), 1),
        ],
        config,
        [
            ExpenseRecord("2026-03-04", Decimal("1500"), "parking"),
            ExpenseRecord("2026-03-05", Decimal("0"), "tolls"),
        ],
    )


def test_fetch_store_builds_migrated_store(monkeypatch):
    """_fetch_store should delegate to the container."""
    monkeypatch.setattr(app, "build_migrated_record_store", lambda: "store")

    assert app._fetch_store() == "store"


def test_load_store_uses_fetch(monkeypatch):
    """The cached loader should delegate to _fetch_store."""
    app._load_store.clear()
    monkeypatch.setattr(app, "_fetch_store", lambda: "cached-store")

    assert app._load_store() == "cached-store"
    app._load_store.clear()


def test_format_currency():
    """Amounts are shown with the symbol and thousands separators."""
    assert app._format_currency(Decimal("1234.5"), "₨") == "₨ 1,234.50"
    assert app._format_currency(Decimal("-199"), "$") == "$ -199.00"


def test_month_options_include_current_month():
    """Months then years, newest first, always offering this month."""
    options = app._month_options([(2026, 1), (2025, 12)], date(2026, 3, 9))

    assert options == [
        "2026-03",
        "2026-01",
        "2025-12",
        "2026",
        "2025",
        app.ALL_TIME,
    ]
    assert app._parse_month_option("2025") == (2025, None)
    assert app._parse_month_option("2026-01") == (2026, 1)
    assert app._parse_month_option(app.ALL_TIME) == (None, None)


def test_breakdown_and_cost_rows():
    """Tables should format every reconciled amount."""
    summary = _summary()

    rows = app._breakdown_rows(summary, "₨")
    costs = app._cost_rows(summary, "₨")

    assert rows[0]["Date"] == "2026-03-01"
    assert rows[0]["Income"] == "₨ 5,000.00"
    assert rows[1]["Driver Pass"] == "₨ 999.00"
    assert costs[0] == {"Item": "Income", "Amount": "₨ 5,500.00"}
    assert costs[1]["Item"] == "Fuel (₨ 19.23/km)"
    assert costs[4]["Amount"] == "-₨ 1,500.00"
    assert costs[-1]["Item"] == "True Net Profit"


def test_cost_rows_handle_zero_distance():
    """Per-km rates are zero when nothing was driven."""
    summary = calculate_metrics(
        [],
        CostConfiguration(
            driver_pass_cost_per_day=Decimal("999"),
            driver_pass_activation_date="2026-02-24",
            fuel_consumption_rate=Decimal("13"),
            fuel_price_per_liter=Decimal("250"),
            maintenance_cost_per_km=Decimal("10"),
        ),
    )

    costs = app._cost_rows(summary, "$")

    assert costs[1]["Item"] == "Fuel ($ 0.00/km)"


def test_chart_data():
    """Chart rows flag losses and drop empty expense categories."""
    summary = _summary()

    daily = app._prepare_daily_chart_data(summary)
    expenses = app._prepare_expense_chart_data(summary)

    assert [row["result"] for row in daily] == ["Profit", "Loss"]
    assert isinstance(daily[0]["net_profit"], float)
    assert expenses == [{"category": "Parking", "amount": 1500.0}]


def test_summary_filename():
    """Summary downloads are named after the period."""
    assert app._summary_filename(2026, 3) == "Summary_March_2026.csv"
    assert app._summary_filename(None, None) == "Summary_All_Time.csv"


class _FakeSidebar:
    def __init__(self, page: str) -> None:
        self.page = page
        self.labels: list[str] = []

    def selectbox(self, label, options, **_kwargs):
        self.labels.append(label)
        assert self.page in options
        return self.page


class _FakeStreamlit:
    def __init__(self, page: str) -> None:
        self.sidebar = _FakeSidebar(page)
        self.config_kwargs = None
        self.title_text = None

    def set_page_config(self, **kwargs):
        self.config_kwargs = kwargs

    def title(self, text: str):
        self.title_text = text


def test_main_routes_to_selected_page(monkeypatch):
    """main should render the page picked in the sidebar."""
    rendered = []
    settings = AppSettings("sqlite://", "LKR")
    monkeypatch.setattr(
        app,
        "AppSettings",
        SimpleNamespace(from_env=lambda: settings),
    )
    monkeypatch.setattr(app, "_load_store", lambda: "store")
    monkeypatch.setattr(
        app,
        "_render_summary_page",
        lambda store, received: rendered.append(("Summary", store)),
    )
    monkeypatch.setattr(
        app,
        "_render_expenses_page",
        lambda store, received: rendered.append(("Expenses", store)),
    )
    monkeypatch.setattr(
        app,
        "_render_settings_page",
        lambda store: rendered.append(("Settings", store)),
    )

    for page in ("Summary", "Expenses", "Settings"):
        fake_st = _FakeStreamlit(page)
        monkeypatch.setattr(app, "st", fake_st)
        app.main()

    assert rendered == [
        ("Summary", "store"),
        ("Expenses", "store"),
        ("Settings", "store"),
    ]
    assert fake_st.title_text == "Rideshare Profit Dashboard"
    assert fake_st.config_kwargs["layout"] == "wide"
