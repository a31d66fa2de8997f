"""Tests for the interactive text menu, driven by scripted input."""

import pytest
from datetime import date
from decimal import Decimal

from budget_tracker.models.entry import EntryKind
from budget_tracker.reports import NO_ENTRIES
from budget_tracker.shell import BudgetTrackerShell

TODAY = date(2024, 3, 1)


def scripted(answers):
    """Fake input() that replays answers, then behaves like a closed stdin."""
    remaining = iter(answers)

    def fake_input(prompt):
        try:
            return next(remaining)
        except StopIteration:
            raise EOFError()

    return fake_input


@pytest.fixture
def run_shell(ledger):
    """Run the shell over scripted answers; return everything it printed."""
    def run(*answers):
        output = []
        shell = BudgetTrackerShell(
            ledger,
            input_func=scripted(answers),
            output_func=output.append,
            today=lambda: TODAY,
        )
        shell.run()
        return "\n".join(output)

    return run


class TestAddEntry:
    """Tests for the add income / add expense prompts."""

    def test_add_income(self, ledger, run_shell):
        output = run_shell("1", "Salary", "1000", "Job", "2024-01-15", "7")

        assert "Income added successfully!" in output
        assert "Thank you for using Personal Budget Tracker!" in output
        [entry] = ledger.entries
        assert entry.kind == EntryKind.INCOME
        assert entry.amount == Decimal("1000")
        assert entry.entry_date == date(2024, 1, 15)

    def test_add_expense_reprompts_until_valid(self, ledger, run_shell):
        output = run_shell(
            "2",
            "", "Groceries",
            "abc", "-5", "0", "nan", "200.50",
            "  ", "Food",
            "",
            "7",
        )

        assert "Invalid: Description cannot be empty. Try again." in output
        assert output.count("Invalid amount. Please enter a positive number. Try again.") == 4
        assert "Invalid: Category cannot be empty. Try again." in output
        [entry] = ledger.entries
        assert entry.description == "Groceries"
        assert entry.amount == Decimal("200.50")
        assert entry.category == "Food"
        assert entry.entry_date == TODAY

    def test_invalid_date_then_menu_adds_nothing(self, ledger, run_shell):
        output = run_shell("2", "Rent", "500", "Home", "not-a-date", "menu", "7")

        assert "Returning to main menu..." in output
        assert len(ledger) == 0

    def test_invalid_date_then_try_again(self, ledger, run_shell):
        run_shell("2", "Rent", "500", "Home", "2024-13-01", "try", "2024-02-01", "7")

        [entry] = ledger.entries
        assert entry.entry_date == date(2024, 2, 1)

    def test_ledger_rejection_is_reported(self, ledger, run_shell):
        """Test a value the prompt accepts but the model rejects is shown, not raised."""
        output = run_shell("2", "Snack", "1.999", "Food", "", "7")

        assert "Error:" in output
        assert len(ledger) == 0


class TestViews:
    """Tests for the read-only menu options."""

    def test_view_entries_empty(self, run_shell):
        output = run_shell("3", "7")
        assert NO_ENTRIES in output

    def test_view_entries_sorted_by_amount(self, sample_ledger, run_shell):
        output = run_shell("3", "x", "3", "7")

        assert "Invalid option. Try again." in output
        assert output.index("Salary") < output.index("Groceries")

    def test_view_entries_oldest_first(self, sample_ledger, run_shell):
        output = run_shell("3", "2", "7")
        assert output.index("2024-01-15") < output.index("2024-01-20")

    def test_view_summary(self, sample_ledger, run_shell):
        output = run_shell("4", "7")
        assert "Net Savings:    $800.00" in output
        assert "Highest Expense Category: Food ($200.00)" in output

    def test_view_category_analysis(self, sample_ledger, run_shell):
        output = run_shell("5", "7")
        assert "Expense Category Breakdown:" in output
        assert "Income Category Breakdown:" in output

    def test_view_monthly_report(self, sample_ledger, run_shell):
        output = run_shell("6", "7")
        assert "Monthly Summary:" in output
        assert "2024-01" in output


class TestMenu:
    """Tests for the main loop."""

    def test_invalid_option(self, run_shell):
        output = run_shell("9", "7")
        assert "Invalid option. Please select a number between 1-7." in output

    def test_end_of_input_exits(self, run_shell):
        output = run_shell()
        assert "Personal Budget Tracker" in output
        assert "Thank you" not in output

    def test_end_of_input_mid_prompt_exits(self, ledger, run_shell):
        """Test input running out inside an add prompt ends the loop quietly."""
        output = run_shell("1", "Salary")
        assert "==== Add Income ====" in output
        assert "Thank you" not in output
        assert len(ledger) == 0

    def test_app_entry_point_runs_the_shell(self):
        from app.main import main as app_main
        from budget_tracker.shell import main as shell_main

        assert app_main is shell_main
