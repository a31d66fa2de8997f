"""
Text rendering for ledger views.

Every function here is pure: it takes already-computed entries or
report models and returns the text the shell prints verbatim.
"""

from typing import Iterable

from budget_tracker.config import ReportSettings
from budget_tracker.models.entry import Entry, EntryKind
from budget_tracker.models.money import format_currency, format_percentage
from budget_tracker.models.report import CategoryShare, FinancialSummary, MonthlySummary

NO_ENTRIES = "No transactions recorded yet."
NO_CHART_DATA = "No data available for chart."
NO_MONTHLY_DATA = "No data available for monthly report."

ENTRY_TABLE_HEADER = "Date       | Amount        | Category      | Description"

MONEY_COLUMN_WIDTH = 12


def render_entry_table(entries: Iterable[Entry], settings: ReportSettings) -> str:
    """One `str(entry)` line per entry under a column header."""
    lines = [entry.render(settings.currency_symbol) for entry in entries]
    if not lines:
        return NO_ENTRIES
    return "\n".join([ENTRY_TABLE_HEADER, "-" * len(ENTRY_TABLE_HEADER), *lines])


def render_category_chart(
    kind: EntryKind,
    shares: list[CategoryShare],
    settings: ReportSettings,
) -> str:
    """
    Render category shares as a horizontal bar chart:

        Expense Category Breakdown:
        Rent              $1,200.00 ( 75.0%) ██████████████████████████████
        Food                $400.00 ( 25.0%) ██████████
    """
    if not shares:
        return NO_CHART_DATA

    lines = [f"{kind.label} Category Breakdown:"]
    for share in shares:
        amount = format_currency(share.amount, settings.currency_symbol)
        percentage = format_percentage(share.percentage)
        bar = settings.bar_char * share.bar_length
        line = (
            f"{share.name:<{settings.category_width}} "
            f"{amount:>{MONEY_COLUMN_WIDTH}} ({percentage:>5}%) {bar}"
        )
        lines.append(line.rstrip())
    return "\n".join(lines)


def render_monthly_report(
    summaries: list[MonthlySummary],
    settings: ReportSettings,
) -> str:
    if not summaries:
        return NO_MONTHLY_DATA

    w = MONEY_COLUMN_WIDTH
    header = f"{'Month':<7} | {'Income':>{w}} | {'Expenses':>{w}} | {'Net Savings':>{w}}"
    lines = ["Monthly Summary:", header, "-" * len(header)]
    for summary in summaries:
        income = format_currency(summary.income, settings.currency_symbol)
        expenses = format_currency(summary.expenses, settings.currency_symbol)
        savings = format_currency(summary.net_savings, settings.currency_symbol)
        lines.append(f"{summary.label} | {income:>{w}} | {expenses:>{w}} | {savings:>{w}}")
    return "\n".join(lines)


def render_financial_summary(summary: FinancialSummary, settings: ReportSettings) -> str:
    symbol = settings.currency_symbol
    lines = [
        f"Total Income:   {format_currency(summary.total_income, symbol)}",
        f"Total Expenses: {format_currency(summary.total_expenses, symbol)}",
        f"Net Savings:    {format_currency(summary.net_savings, symbol)}",
    ]
    # Only meaningful when there is income to compare against
    if summary.savings_rate is not None:
        lines.append(f"Savings Rate:   {format_percentage(summary.savings_rate)}%")
    lines.append("")
    lines.append(
        f"Highest Expense Category: {summary.highest_expense_category} "
        f"({format_currency(summary.highest_expense_amount, symbol)})"
    )
    return "\n".join(lines)
