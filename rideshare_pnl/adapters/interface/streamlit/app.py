"""Streamlit dashboard entry point."""

from collections.abc import Sequence
from datetime import date

import altair as alt
import streamlit as st

from rideshare_pnl.application.use_cases.csv_records import CsvImportError
from rideshare_pnl.application.use_cases.export_records import (
    ExportRecordsUseCase,
    export_filename,
)
from rideshare_pnl.application.use_cases.get_profit_loss_summary import (
    GetProfitLossSummaryUseCase,
    period_label,
)
from rideshare_pnl.application.use_cases.import_records import (
    ImportEarningsUseCase,
    ImportExpensesUseCase,
)
from rideshare_pnl.application.use_cases.manage_records import (
    ManageRecordsUseCase,
)
from rideshare_pnl.domain.constants import (
    EXPENSE_CATEGORY_LABELS,
    EXPENSE_TYPES,
    category_label,
)
from rideshare_pnl.domain.models.finance import ProfitLossSummary
from rideshare_pnl.domain.models.records import EarningRecord, ExpenseRecord
from rideshare_pnl.domain.policies.normalization import parse_iso_date
from rideshare_pnl.domain.services.periods import available_months
from rideshare_pnl.domain.services.profit_loss import safe_ratio
from rideshare_pnl.infrastructure.container import build_migrated_record_store
from rideshare_pnl.infrastructure.logging.logger import get_usage_logger
from rideshare_pnl.infrastructure.settings import AppSettings

ALL_TIME = "All Time"


def _fetch_store():
    """Build the migrated record store."""
    return build_migrated_record_store()


@st.cache_resource(show_spinner=False)
def _load_store():
    """Cached wrapper around _fetch_store for Streamlit sessions."""
    return _fetch_store()


def _format_currency(value, symbol: str) -> str:
    """Format currency values for display."""
    return f"{symbol} {value:,.2f}"


def _month_options(
    months: Sequence[tuple[int, int]],
    today: date,
) -> list[str]:
    """Return the period picker options.

    Months come first, newest first, then whole years, then all time. The
    current month is always offered, even before anything is logged.
    """
    pairs = set(months)
    pairs.add((today.year, today.month))
    month_options = [
        f"{year:04d}-{month:02d}"
        for year, month in sorted(pairs, reverse=True)
    ]
    year_options = [
        f"{year:04d}"
        for year in sorted({year for year, _ in pairs}, reverse=True)
    ]
    return [*month_options, *year_options, ALL_TIME]


def _parse_month_option(option: str) -> tuple[int | None, int | None]:
    """Return the (year, month) selected by a picker option."""
    if option == ALL_TIME:
        return None, None
    if "-" not in option:
        return int(option), None
    year_text, month_text = option.split("-")
    return int(year_text), int(month_text)


def _breakdown_rows(
    summary: ProfitLossSummary,
    symbol: str,
) -> list[dict[str, str | int]]:
    """Return table rows for the daily breakdown."""
    return [
        {
            "Date": entry.date or "-",
            "Distance": f"{entry.ride_distance:,.1f} km",
            "Income": _format_currency(entry.income, symbol),
            "Trips": entry.number_of_trips,
            "Fuel": _format_currency(entry.fuel_cost, symbol),
            "Maintenance": _format_currency(entry.maintenance_cost, symbol),
            "Driver Pass": _format_currency(entry.driver_pass_cost, symbol),
            "Net Profit": _format_currency(entry.daily_net_profit, symbol),
        }
        for entry in summary.daily_breakdown
    ]


def _cost_rows(
    summary: ProfitLossSummary,
    symbol: str,
) -> list[dict[str, str]]:
    """Return the income-to-profit reconciliation table."""
    fuel_rate = safe_ratio(
        summary.total_fuel_cost,
        summary.total_ride_distance,
    )
    maintenance_rate = safe_ratio(
        summary.total_maintenance_cost,
        summary.total_ride_distance,
    )
    return [
        {
            "Item": "Income",
            "Amount": _format_currency(summary.total_ride_income, symbol),
        },
        {
            "Item": f"Fuel ({_format_currency(fuel_rate, symbol)}/km)",
            "Amount": "-" + _format_currency(summary.total_fuel_cost, symbol),
        },
        {
            "Item": (
                "Maintenance "
                f"({_format_currency(maintenance_rate, symbol)}/km)"
            ),
            "Amount": "-"
            + _format_currency(summary.total_maintenance_cost, symbol),
        },
        {
            "Item": "Driver Pass",
            "Amount": "-"
            + _format_currency(summary.allocated_driver_pass_cost, symbol),
        },
        {
            "Item": "Manual Expenses",
            "Amount": "-"
            + _format_currency(summary.total_manual_expenses, symbol),
        },
        {
            "Item": "True Net Profit",
            "Amount": _format_currency(summary.true_net_profit, symbol),
        },
    ]


def _prepare_daily_chart_data(
    summary: ProfitLossSummary,
) -> list[dict[str, str | float]]:
    """Return Altair-ready rows of net profit per breakdown entry."""
    return [
        {
            "date": entry.date,
            "net_profit": float(entry.daily_net_profit),
            "result": "Profit" if entry.daily_net_profit >= 0 else "Loss",
        }
        for entry in summary.daily_breakdown
    ]


def _prepare_expense_chart_data(
    summary: ProfitLossSummary,
) -> list[dict[str, str | float]]:
    """Return Altair-ready rows of manual expenses per category."""
    return [
        {"category": category_label(category), "amount": float(amount)}
        for category, amount in summary.expenses_by_category.items()
        if amount
    ]


def _render_daily_chart(summary: ProfitLossSummary) -> None:
    """Render a bar chart of daily net profit."""
    data = _prepare_daily_chart_data(summary)
    if not data:
        st.info("No driving days recorded for this period.")
        return
    chart = alt.Chart(alt.Data(values=data)).mark_bar(
        cornerRadiusTopLeft=4,
        cornerRadiusTopRight=4,
    ).encode(
        x=alt.X("date:N", title="Date", sort=None),
        y=alt.Y("net_profit:Q", title="Net profit"),
        color=alt.Color(
            "result:N",
            scale=alt.Scale(
                domain=["Profit", "Loss"],
                range=["#2e7d32", "#e76f51"],
            ),
            legend=None,
        ),
        tooltip=[
            alt.Tooltip("date:N"),
            alt.Tooltip("net_profit:Q", format=",.2f"),
        ],
    )
    st.subheader("Daily Net Profit")
    st.altair_chart(chart, width="stretch")


def _render_expense_chart(summary: ProfitLossSummary) -> None:
    """Render a horizontal bar chart of manual expenses by category."""
    data = _prepare_expense_chart_data(summary)
    if not data:
        return
    chart = alt.Chart(alt.Data(values=data)).mark_bar().encode(
        x=alt.X("amount:Q", title="Amount"),
        y=alt.Y("category:N", title=None, sort="-x"),
        color=alt.value("#457b9d"),
        tooltip=[
            alt.Tooltip("category:N"),
            alt.Tooltip("amount:Q", format=",.2f"),
        ],
    )
    st.subheader("Manual Expenses by Category")
    st.altair_chart(chart, width="stretch")


def _render_summary_page(store, settings: AppSettings) -> None:
    """Render the period picker, metrics, charts and exports."""
    symbol = settings.currency_symbol
    months = available_months([*store.get_earnings(), *store.get_expenses()])
    option = st.sidebar.selectbox(
        "Period",
        _month_options(months, date.today()),
    )
    year, month = _parse_month_option(option)
    summary = GetProfitLossSummaryUseCase(store).execute(
        year=year,
        month=month,
    )

    st.header(period_label(year, month))
    income_col, costs_col, profit_col, margin_col = st.columns(4)
    income_col.metric(
        "Income",
        _format_currency(summary.total_ride_income, symbol),
    )
    costs_col.metric(
        "Operating Costs",
        _format_currency(summary.total_operating_cost, symbol),
    )
    profit_col.metric(
        "True Net Profit",
        _format_currency(summary.true_net_profit, symbol),
    )
    margin_col.metric("Profit Margin", f"{summary.profit_margin:.2f}%")

    km_col, cost_km_col, profit_km_col, day_col = st.columns(4)
    km_col.metric("Distance", f"{summary.total_ride_distance:,.1f} km")
    cost_km_col.metric(
        "Cost per km",
        _format_currency(summary.cost_per_km, symbol),
    )
    profit_km_col.metric(
        "Profit per km",
        _format_currency(summary.profit_per_km, symbol),
    )
    day_col.metric(
        "Profit per day",
        _format_currency(summary.profit_per_day, symbol),
        f"{summary.active_driving_days} active days",
        delta_color="off",
    )

    st.subheader("Breakdown")
    st.dataframe(
        _cost_rows(summary, symbol),
        width="stretch",
        hide_index=True,
    )
    _render_daily_chart(summary)
    _render_expense_chart(summary)
    if summary.daily_breakdown:
        st.dataframe(
            _breakdown_rows(summary, symbol),
            width="stretch",
            hide_index=True,
        )

    exporter = ExportRecordsUseCase(store)
    today = date.today()
    earnings_col, expenses_col, summary_col = st.columns(3)
    earnings_col.download_button(
        "Export earnings",
        exporter.earnings_csv(),
        file_name=export_filename("earnings", today),
        mime="text/csv",
    )
    expenses_col.download_button(
        "Export expenses",
        exporter.expenses_csv(),
        file_name=export_filename("expenses", today),
        mime="text/csv",
    )
    summary_col.download_button(
        "Export summary",
        exporter.summary_csv(year=year, month=month),
        file_name=_summary_filename(year, month),
        mime="text/csv",
    )


def _summary_filename(year: int | None, month: int | None) -> str:
    return f"Summary_{period_label(year, month).replace(' ', '_')}.csv"


def _earning_label(record: EarningRecord, symbol: str) -> str:
    return (
        f"{record.date} · {record.total_ride_distance:,.1f} km · "
        f"{_format_currency(record.total_income, symbol)}"
    )


def _expense_label(record: ExpenseRecord, symbol: str) -> str:
    return (
        f"{record.date} · {category_label(record.category)} · "
        f"{_format_currency(record.amount, symbol)}"
    )


def _earning_form(
    key: str,
    record: EarningRecord | None = None,
) -> dict[str, object] | None:
    """Render an earning form and return its payload once submitted."""
    with st.form(key, clear_on_submit=record is None):
        entry_date = st.date_input(
            "Date",
            value=(parse_iso_date(record.date) if record else None)
            or date.today(),
        )
        distance = st.number_input(
            "Ride distance (km)",
            min_value=0.0,
            step=0.1,
            value=float(record.total_ride_distance) if record else 0.0,
        )
        income = st.number_input(
            "Total income",
            min_value=0.0,
            step=100.0,
            value=float(record.total_income) if record else 0.0,
        )
        trips = st.number_input(
            "Number of trips",
            min_value=0,
            step=1,
            value=record.number_of_trips if record else 0,
        )
        submitted = st.form_submit_button("Save" if record else "Add earning")
    if not submitted:
        return None
    return {
        "date": entry_date.isoformat(),
        "totalRideDistance": distance,
        "totalIncome": income,
        "numberOfTrips": trips,
    }


def _expense_form(
    key: str,
    record: ExpenseRecord | None = None,
) -> dict[str, object] | None:
    """Render an expense form and return its payload once submitted."""
    categories = list(EXPENSE_CATEGORY_LABELS)
    types = list(EXPENSE_TYPES)
    with st.form(key, clear_on_submit=record is None):
        entry_date = st.date_input(
            "Date",
            value=(parse_iso_date(record.date) if record else None)
            or date.today(),
        )
        category = st.selectbox(
            "Category",
            categories,
            index=(
                categories.index(record.category)
                if record and record.category in categories
                else len(categories) - 1
            ),
            format_func=category_label,
        )
        amount = st.number_input(
            "Amount",
            min_value=0.0,
            step=100.0,
            value=float(record.amount) if record else 0.0,
        )
        expense_type = st.selectbox(
            "Type",
            types,
            index=(
                types.index(record.type)
                if record and record.type in types
                else types.index("variable")
            ),
        )
        odometer = st.text_input(
            "Odometer (optional)",
            value=(
                str(record.odometer)
                if record and record.odometer is not None
                else ""
            ),
        )
        notes = st.text_input("Notes", value=record.notes if record else "")
        submitted = st.form_submit_button("Save" if record else "Add expense")
    if not submitted:
        return None
    return {
        "date": entry_date.isoformat(),
        "category": category,
        "amount": amount,
        "type": expense_type,
        "odometer": odometer,
        "notes": notes,
    }


def _render_earnings_page(store, settings: AppSettings) -> None:
    """Render the earnings log with add, edit, delete and import."""
    symbol = settings.currency_symbol
    usage = get_usage_logger()
    manager = ManageRecordsUseCase(store)

    st.subheader("Add earning")
    payload = _earning_form("add_earning")
    if payload is not None:
        stored = manager.add_earning(payload)
        usage.info(f"earning added id={stored.id}")
        st.success("Earning added.")

    earnings = store.get_earnings()
    st.subheader("Earnings")
    st.caption(f"{len(earnings)} earnings recorded")
    if earnings:
        st.dataframe(
            [
                {
                    "Date": record.date,
                    "Distance (km)": f"{record.total_ride_distance:,.1f}",
                    "Income": _format_currency(record.total_income, symbol),
                    "Trips": record.number_of_trips,
                }
                for record in earnings
            ],
            width="stretch",
            hide_index=True,
        )
        by_id = {record.id: record for record in earnings}
        selected_id = st.selectbox(
            "Select an earning",
            list(by_id),
            format_func=lambda record_id: _earning_label(
                by_id[record_id],
                symbol,
            ),
        )
        with st.expander("Edit selected earning"):
            edited = _earning_form(
                f"edit_earning_{selected_id}",
                by_id[selected_id],
            )
            if edited is not None and manager.update_earning(
                selected_id,
                edited,
            ):
                usage.info(f"earning updated id={selected_id}")
                st.success("Earning updated.")
        if st.button("Delete selected earning"):
            if manager.delete_earning(selected_id):
                usage.info(f"earning deleted id={selected_id}")
                st.rerun()

    uploaded = st.file_uploader(
        "Import earnings CSV",
        type=["csv"],
        key="import_earnings",
    )
    if uploaded is not None and st.button("Import earnings"):
        try:
            result = ImportEarningsUseCase(store).execute(
                uploaded.getvalue().decode("utf-8-sig")
            )
        except CsvImportError as exc:
            st.error(f"Import rejected: {exc}")
        else:
            usage.info(f"earnings imported count={result.imported_count}")
            st.success(f"Imported {result.imported_count} earnings.")


def _render_expenses_page(store, settings: AppSettings) -> None:
    """Render the manual expense log with add, edit, delete and import."""
    symbol = settings.currency_symbol
    usage = get_usage_logger()
    manager = ManageRecordsUseCase(store)

    st.subheader("Add expense")
    payload = _expense_form("add_expense")
    if payload is not None:
        stored = manager.add_expense(payload)
        usage.info(f"expense added id={stored.id}")
        st.success("Expense added.")

    expenses = store.get_expenses()
    st.subheader("Expenses")
    st.caption(f"{len(expenses)} expenses recorded")
    if expenses:
        st.dataframe(
            [
                {
                    "Date": record.date,
                    "Category": category_label(record.category),
                    "Amount": _format_currency(record.amount, symbol),
                    "Type": record.type,
                    "Notes": record.notes,
                }
                for record in expenses
            ],
            width="stretch",
            hide_index=True,
        )
        by_id = {record.id: record for record in expenses}
        selected_id = st.selectbox(
            "Select an expense",
            list(by_id),
            format_func=lambda record_id: _expense_label(
                by_id[record_id],
                symbol,
            ),
        )
        with st.expander("Edit selected expense"):
            edited = _expense_form(
                f"edit_expense_{selected_id}",
                by_id[selected_id],
            )
            if edited is not None and manager.update_expense(
                selected_id,
                edited,
            ):
                usage.info(f"expense updated id={selected_id}")
                st.success("Expense updated.")
        if st.button("Delete selected expense"):
            if manager.delete_expense(selected_id):
                usage.info(f"expense deleted id={selected_id}")
                st.rerun()

    uploaded = st.file_uploader(
        "Import expenses CSV",
        type=["csv"],
        key="import_expenses",
    )
    if uploaded is not None and st.button("Import expenses"):
        try:
            result = ImportExpensesUseCase(store).execute(
                uploaded.getvalue().decode("utf-8-sig")
            )
        except CsvImportError as exc:
            st.error(f"Import rejected: {exc}")
        else:
            usage.info(f"expenses imported count={result.imported_count}")
            st.success(f"Imported {result.imported_count} expenses.")


def _render_settings_page(store) -> None:
    """Render the cost configuration form and the reset action."""
    usage = get_usage_logger()
    manager = ManageRecordsUseCase(store)
    config = manager.get_config()

    with st.form("cost_config"):
        pass_cost = st.number_input(
            "Driver pass cost per day",
            min_value=0.0,
            step=1.0,
            value=float(config.driver_pass_cost_per_day),
        )
        activation = st.date_input(
            "Driver pass activation date",
            value=parse_iso_date(config.driver_pass_activation_date)
            or date.today(),
        )
        consumption = st.number_input(
            "Fuel consumption (km per liter)",
            min_value=0.01,
            step=0.5,
            value=float(config.fuel_consumption_rate),
        )
        fuel_price = st.number_input(
            "Fuel price per liter",
            min_value=0.0,
            step=1.0,
            value=float(config.fuel_price_per_liter),
        )
        maintenance = st.number_input(
            "Maintenance cost per km",
            min_value=0.0,
            step=0.5,
            value=float(config.maintenance_cost_per_km),
        )
        submitted = st.form_submit_button("Save settings")
    if submitted:
        manager.save_config(
            {
                "driverPassCostPerDay": pass_cost,
                "driverPassActivationDate": activation.isoformat(),
                "fuelConsumptionRate": consumption,
                "fuelPricePerLiter": fuel_price,
                "maintenanceCostPerKm": maintenance,
            }
        )
        usage.info("cost configuration saved")
        st.success("Settings saved.")

    st.divider()
    confirm = st.checkbox("I understand this deletes every record")
    if st.button("Clear all data", disabled=not confirm):
        manager.clear_all()
        usage.warning("all data cleared")
        st.success("All data has been cleared.")


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Rideshare Profit Dashboard", layout="wide")
    st.title("Rideshare Profit Dashboard")

    settings = AppSettings.from_env()
    store = _load_store()
    page = st.sidebar.selectbox(
        "Page",
        ["Summary", "Earnings", "Expenses", "Settings"],
    )
    if page == "Summary":
        _render_summary_page(store, settings)
    elif page == "Earnings":
        _render_earnings_page(store, settings)
    elif page == "Expenses":
        _render_expenses_page(store, settings)
    else:
        _render_settings_page(store)


if __name__ == "__main__":  # pragma: no cover
    main()
