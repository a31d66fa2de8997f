"""
Interactive text menu for Budget Tracker.

A thin read-validate-dispatch loop: it re-prompts until each field is
acceptable, hands the values to the Ledger, and prints whatever text
the Ledger returns. It holds the one Ledger instance for the session.

Input and output functions are injectable so the loop can be driven
from tests.
"""

from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Callable

from pydantic import ValidationError

from budget_tracker.audit import configure_logging
from budget_tracker.config import get_settings
from budget_tracker.ledger import InvalidArgumentError, Ledger
from budget_tracker.models.entry import EntryKind
from budget_tracker.reports import NO_ENTRIES

MAIN_MENU = """==== Personal Budget Tracker ====
1. Add Income
2. Add Expense
3. View All Transactions
4. View Financial Summary
5. View Category Analysis
6. View Monthly Report
7. Exit"""

SORT_MENU = """Sort by:
1. Date (newest first)
2. Date (oldest first)
3. Amount (highest first)
4. Amount (lowest first)
5. Category"""


class MenuAborted(Exception):
    """User chose to return to the main menu mid-prompt."""
    pass


class BudgetTrackerShell:
    """Numbered menu around a single Ledger."""

    def __init__(
        self,
        ledger: Ledger,
        input_func: Callable[[str], str] = input,
        output_func: Callable[[str], None] = print,
        today: Callable[[], date] = date.today,
    ):
        self._ledger = ledger
        self._input = input_func
        self._output = output_func
        self._today = today
        self._actions = {
            "1": lambda: self.add_entry(EntryKind.INCOME),
            "2": lambda: self.add_entry(EntryKind.EXPENSE),
            "3": self.view_entries,
            "4": self.view_summary,
            "5": self.view_category_analysis,
            "6": self.view_monthly_report,
        }

    def run(self) -> None:
        """Loop until the user picks Exit or input runs out."""
        while True:
            self._output(MAIN_MENU)
            try:
                choice = self._input("\nSelect an option: ").strip()
            except EOFError:
                break

            if choice == "7":
                self._output("Thank you for using Personal Budget Tracker!")
                break

            action = self._actions.get(choice)
            if action is None:
                self._output("Invalid option. Please select a number between 1-7.")
                continue

            try:
                action()
            except MenuAborted:
                self._output("Returning to main menu...")
            except EOFError:
                break
            except (ValidationError, InvalidArgumentError) as e:
                self._output(f"Error: {e}")

    # =========================================================================
    # Add income / expense
    # =========================================================================

    def add_entry(self, kind: EntryKind) -> None:
        self._output(f"==== Add {kind.label} ====")
        description = self._ask_text("Description: ", "Description")
        amount = self._ask_amount()
        category = self._ask_text("Category: ", "Category")
        entry_date = self._ask_date()

        self._ledger.record(
            description=description,
            amount=amount,
            kind=kind,
            category=category,
            entry_date=entry_date,
        )
        self._output(f"\n{kind.label} added successfully!")

    def _ask_text(self, prompt: str, field: str) -> str:
        while True:
            value = self._input(prompt).strip()
            if value:
                return value
            self._output(f"Invalid: {field} cannot be empty. Try again.")

    def _ask_amount(self) -> Decimal:
        while True:
            raw = self._input("Amount: ").strip()
            try:
                amount = Decimal(raw)
            except InvalidOperation:
                amount = None
            if amount is not None and amount.is_finite() and amount > 0:
                return amount
            self._output("Invalid amount. Please enter a positive number. Try again.")

    def _ask_date(self) -> date:
        while True:
            raw = self._input("Date (YYYY-MM-DD, leave blank for today): ").strip()
            if not raw:
                return self._today()
            try:
                return date.fromisoformat(raw)
            except ValueError:
                answer = self._input(
                    "Invalid date format. Would you like to try again or return "
                    "to main menu? (try/menu): "
                )
                if answer.strip().lower() != "try":
                    raise MenuAborted()

    # =========================================================================
    # Views
    # =========================================================================

    def view_entries(self) -> None:
        self._output("==== All Transactions ====")
        if len(self._ledger) == 0:
            self._output(NO_ENTRIES)
            return

        views = {
            "1": lambda: self._ledger.sorted_by_date(ascending=False),
            "2": lambda: self._ledger.sorted_by_date(ascending=True),
            "3": lambda: self._ledger.sorted_by_amount(ascending=False),
            "4": lambda: self._ledger.sorted_by_amount(ascending=True),
            "5": self._ledger.sorted_by_category,
        }
        while True:
            self._output(SORT_MENU)
            option = self._input("\nSelect an option: ").strip()
            if option in views:
                break
            self._output("Invalid option. Try again.")

        self._output(self._ledger.entry_table(views[option]()))

    def view_summary(self) -> None:
        self._output("==== Financial Summary ====")
        self._output(self._ledger.summary_report())

    def view_category_analysis(self) -> None:
        self._output("==== Category Analysis ====")
        self._output(self._ledger.category_chart(EntryKind.EXPENSE))
        self._output("")
        self._output(self._ledger.category_chart(EntryKind.INCOME))

    def view_monthly_report(self) -> None:
        self._output("==== Monthly Report ====")
        self._output(self._ledger.monthly_report())


def main() -> None:
    """Console entry point."""
    settings = get_settings()
    configure_logging(settings.app)
    ledger = Ledger(settings=settings.reports)
    BudgetTrackerShell(ledger).run()
