"""Text report rendering package."""

from budget_tracker.reports.formatting import (
    NO_CHART_DATA,
    NO_ENTRIES,
    NO_MONTHLY_DATA,
    render_category_chart,
    render_entry_table,
    render_financial_summary,
    render_monthly_report,
)

__all__ = [
    "NO_CHART_DATA",
    "NO_ENTRIES",
    "NO_MONTHLY_DATA",
    "render_category_chart",
    "render_entry_table",
    "render_financial_summary",
    "render_monthly_report",
]
