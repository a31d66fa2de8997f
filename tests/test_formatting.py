"""Tests for text rendering of ledger views."""

import pytest
from datetime import date
from decimal import Decimal

from budget_tracker.models.entry import EntryKind
from budget_tracker.models.report import CategoryShare, FinancialSummary, MonthlySummary
from budget_tracker.reports import (
    NO_CHART_DATA,
    NO_ENTRIES,
    NO_MONTHLY_DATA,
    render_category_chart,
    render_entry_table,
    render_financial_summary,
    render_monthly_report,
)
from budget_tracker.reports.formatting import ENTRY_TABLE_HEADER


class TestEntryTable:
    """Tests for the transaction listing."""

    def test_entry_table(self, report_settings, salary, groceries):
        table = render_entry_table([groceries, salary], report_settings)
        assert table.splitlines() == [
            ENTRY_TABLE_HEADER,
            "-" * len(ENTRY_TABLE_HEADER),
            "2024-01-20 | -$200.00 | Food | Groceries",
            "2024-01-15 | +$1,000.00 | Job | Salary",
        ]

    def test_entry_table_empty(self, report_settings):
        assert render_entry_table([], report_settings) == NO_ENTRIES

    def test_ledger_entry_table_uses_given_order(self, sample_ledger):
        table = sample_ledger.entry_table(sample_ledger.sorted_by_amount(ascending=True))
        assert table.index("Groceries") < table.index("Salary")


class TestCategoryChart:
    """Tests for the category bar chart."""

    def test_chart_lines(self, report_settings):
        shares = [
            CategoryShare(name="Home", amount=Decimal("300"), percentage=Decimal("75"), bar_length=30),
            CategoryShare(name="Food", amount=Decimal("100"), percentage=Decimal("25"), bar_length=10),
        ]
        chart = render_category_chart(EntryKind.EXPENSE, shares, report_settings)
        assert chart.splitlines() == [
            "Expense Category Breakdown:",
            "Home" + " " * 17 + "$300.00 ( 75.0%) " + "#" * 30,
            "Food" + " " * 17 + "$100.00 ( 25.0%) " + "#" * 10,
        ]

    def test_chart_from_ledger(self, sample_ledger):
        chart = sample_ledger.category_chart(EntryKind.INCOME)
        lines = chart.splitlines()
        assert lines[0] == "Income Category Breakdown:"
        assert lines[1].startswith("Job ")
        assert "$1,000.00" in lines[1]
        assert "(100.0%)" in lines[1]
        assert lines[1].endswith("#" * 40)

    def test_chart_percentage_one_decimal(self, ledger):
        ledger.record("Pay", Decimal("200"), EntryKind.INCOME, "Job", date(2024, 1, 1))
        ledger.record("Tips", Decimal("100"), EntryKind.INCOME, "Side", date(2024, 1, 2))

        chart = ledger.category_chart(EntryKind.INCOME)
        assert "( 66.7%)" in chart
        assert "( 33.3%)" in chart

    def test_zero_length_bar_has_no_trailing_space(self, report_settings):
        shares = [
            CategoryShare(name="Tiny", amount=Decimal("1"), percentage=Decimal("0.5"), bar_length=0),
        ]
        chart = render_category_chart(EntryKind.EXPENSE, shares, report_settings)
        assert chart.splitlines()[1].endswith("(  0.5%)")

    def test_chart_empty(self, report_settings):
        assert render_category_chart(EntryKind.INCOME, [], report_settings) == NO_CHART_DATA


class TestMonthlyReport:
    """Tests for the monthly table."""

    def test_monthly_report_layout(self, report_settings):
        summaries = [
            MonthlySummary(year=2024, month=1, income=Decimal("1000"), expenses=Decimal("200")),
            MonthlySummary(year=2024, month=2, income=Decimal("0"), expenses=Decimal("50")),
        ]
        lines = render_monthly_report(summaries, report_settings).splitlines()

        assert lines[0] == "Monthly Summary:"
        assert [column.strip() for column in lines[1].split("|")] == [
            "Month", "Income", "Expenses", "Net Savings",
        ]
        assert set(lines[2]) == {"-"}
        assert [column.strip() for column in lines[3].split("|")] == [
            "2024-01", "$1,000.00", "$200.00", "$800.00",
        ]
        assert [column.strip() for column in lines[4].split("|")] == [
            "2024-02", "$0.00", "$50.00", "-$50.00",
        ]

    def test_monthly_report_columns_align(self, report_settings):
        summaries = [
            MonthlySummary(year=2024, month=1, income=Decimal("1000"), expenses=Decimal("200")),
        ]
        lines = render_monthly_report(summaries, report_settings).splitlines()
        assert len(lines[1]) == len(lines[3])

    def test_monthly_report_empty(self, report_settings):
        assert render_monthly_report([], report_settings) == NO_MONTHLY_DATA


class TestFinancialSummary:
    """Tests for the summary block."""

    def test_summary_text(self, sample_ledger):
        assert sample_ledger.summary_report() == "\n".join([
            "Total Income:   $1,000.00",
            "Total Expenses: $200.00",
            "Net Savings:    $800.00",
            "Savings Rate:   80.0%",
            "",
            "Highest Expense Category: Food ($200.00)",
        ])

    def test_summary_without_income_skips_rate(self, report_settings):
        summary = FinancialSummary(
            total_income=Decimal("0"),
            total_expenses=Decimal("0"),
            net_savings=Decimal("0"),
            highest_expense_category="None",
            highest_expense_amount=Decimal("0"),
        )
        text = render_financial_summary(summary, report_settings)
        assert "Savings Rate" not in text
        assert text.endswith("Highest Expense Category: None ($0.00)")

    @pytest.mark.parametrize("symbol", ["€", "£"])
    def test_summary_uses_currency_symbol(self, report_settings, symbol):
        settings = report_settings.model_copy(update={"currency_symbol": symbol})
        summary = FinancialSummary(
            total_income=Decimal("10"),
            total_expenses=Decimal("20"),
            net_savings=Decimal("-10"),
            savings_rate=Decimal("-100"),
            highest_expense_category="Food",
            highest_expense_amount=Decimal("20"),
        )
        text = render_financial_summary(summary, settings)
        assert f"Net Savings:    -{symbol}10.00" in text
        assert "Savings Rate:   -100.0%" in text
