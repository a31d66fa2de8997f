"""
Ledger

An append-only, in-memory collection of entries plus every derived
read-only query: totals, category breakdowns, sorted views, the
category chart and the monthly report.

DESIGN DECISION: Queries are never cached.
Each query takes a snapshot of the entry list under the lock and
computes from that copy, so a query issued after add() always sees
the new entry and a concurrent add() never changes a result mid-way.

Category matching is case-insensitive. When the same category was
entered with different casing ("Food", "food"), the first-seen casing
is the one displayed in breakdowns, charts and category lists.
"""

import threading
from datetime import date
from decimal import Decimal
from typing import Iterable, Iterator, NoReturn, Optional, Union

from pydantic import ValidationError

from budget_tracker.audit import AuditLogger
from budget_tracker.config import ReportSettings, get_settings
from budget_tracker.models.entry import Entry, EntryKind
from budget_tracker.models.money import ZERO, round_half_up
from budget_tracker.models.report import CategoryShare, FinancialSummary, MonthlySummary
from budget_tracker.reports import formatting

NO_SPENDING_CATEGORY = "None"


class InvalidArgumentError(ValueError):
    """Invalid argument passed to a ledger operation."""
    pass


# =============================================================================
# Aggregation helpers (pure functions over an entry snapshot)
# =============================================================================

def _sum_amounts(entries: Iterable[Entry]) -> Decimal:
    return sum((entry.amount for entry in entries), ZERO)


def _total_for_kind(entries: list[Entry], kind: EntryKind) -> Decimal:
    return _sum_amounts(entry for entry in entries if entry.kind == kind)


def _display_names(entries: list[Entry]) -> dict[str, str]:
    """Map each case-folded category to its first-seen casing."""
    names: dict[str, str] = {}
    for entry in entries:
        names.setdefault(entry.category_key, entry.category)
    return names


def _breakdown(entries: list[Entry], kind: EntryKind) -> dict[str, Decimal]:
    names = _display_names(entries)
    breakdown: dict[str, Decimal] = {}
    for entry in entries:
        if entry.kind != kind:
            continue
        name = names[entry.category_key]
        breakdown[name] = breakdown.get(name, ZERO) + entry.amount
    return breakdown


def _highest(breakdown: dict[str, Decimal]) -> tuple[str, Decimal]:
    if not breakdown:
        return NO_SPENDING_CATEGORY, ZERO
    # max() keeps the first of equal maxima, i.e. the first-encountered category
    name = max(breakdown, key=breakdown.__getitem__)
    return name, breakdown[name]


class Ledger:
    """
    Append-only ledger of income and expense entries.

    GUARANTEES:
    - Entries are kept in insertion order and never removed or changed
    - A failed add() leaves the ledger untouched
    - Every query reflects all entries added so far
    - Sorted views are new lists; stable for equal keys
    """

    def __init__(
        self,
        settings: Optional[ReportSettings] = None,
        audit_logger: Optional[AuditLogger] = None,
    ):
        self._entries: list[Entry] = []
        self._lock = threading.Lock()
        self._settings = settings or get_settings().reports
        self._audit_logger = audit_logger or AuditLogger()

    # =========================================================================
    # Mutation
    # =========================================================================

    def add(self, entry: Entry) -> None:
        """
        Append an entry.

        Raises:
            InvalidArgumentError: If entry is None or not an Entry
        """
        if entry is None:
            self._reject("add", "Entry cannot be None")
        if not isinstance(entry, Entry):
            self._reject("add", f"Expected an Entry, got {type(entry).__name__}")

        with self._lock:
            self._entries.append(entry)

        self._audit_logger.log_entry_added(
            entry_id=entry.id,
            kind=entry.kind.value,
            category=entry.category,
            amount=entry.amount,
            entry_date=entry.entry_date,
        )

    def record(
        self,
        description: str,
        amount: Union[Decimal, int, str],
        kind: EntryKind,
        category: str,
        entry_date: Optional[date] = None,
    ) -> Entry:
        """
        Build an Entry from raw field values and add it.

        entry_date defaults to today.

        Raises:
            ValidationError: If any field is invalid (nothing is added)
        """
        fields = {
            "description": description,
            "amount": amount,
            "kind": kind,
            "category": category,
        }
        if entry_date is not None:
            fields["entry_date"] = entry_date

        try:
            entry = Entry(**fields)
        except ValidationError as e:
            issues = [
                {
                    "field": ".".join(str(part) for part in error["loc"]),
                    "message": error["msg"],
                }
                for error in e.errors()
            ]
            self._audit_logger.log_entry_rejected(
                kind=getattr(kind, "value", str(kind)),
                issues=issues,
            )
            raise

        self.add(entry)
        return entry

    # =========================================================================
    # Snapshot access
    # =========================================================================

    def _snapshot(self) -> list[Entry]:
        with self._lock:
            return list(self._entries)

    @property
    def entries(self) -> tuple[Entry, ...]:
        """All entries in insertion order (read-only)."""
        return tuple(self._snapshot())

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __iter__(self) -> Iterator[Entry]:
        return iter(self._snapshot())

    # =========================================================================
    # Totals
    # =========================================================================

    def total_income(self) -> Decimal:
        return _total_for_kind(self._snapshot(), EntryKind.INCOME)

    def total_expenses(self) -> Decimal:
        return _total_for_kind(self._snapshot(), EntryKind.EXPENSE)

    def net_savings(self) -> Decimal:
        """Income minus expenses. May be negative."""
        entries = self._snapshot()
        return _total_for_kind(entries, EntryKind.INCOME) - _total_for_kind(entries, EntryKind.EXPENSE)

    def savings_rate(self) -> Optional[Decimal]:
        """Net savings as a percentage of income, or None without income."""
        return self.financial_summary().savings_rate

    # =========================================================================
    # Category queries
    # =========================================================================

    def _category_key(self, category: Optional[str], operation: str) -> str:
        if not isinstance(category, str) or not category.strip():
            self._reject(operation, "Category cannot be empty")
        return category.strip().casefold()

    def entries_by_category(self, category: str) -> list[Entry]:
        """
        Entries whose category matches case-insensitively, in insertion order.

        Raises:
            InvalidArgumentError: If category is empty
        """
        key = self._category_key(category, "entries_by_category")
        return [entry for entry in self._snapshot() if entry.category_key == key]

    def total_by_category(self, category: str, kind: EntryKind) -> Decimal:
        """
        Sum of amounts for one category and kind.

        Raises:
            InvalidArgumentError: If category is empty
        """
        key = self._category_key(category, "total_by_category")
        return _sum_amounts(
            entry for entry in self._snapshot()
            if entry.category_key == key and entry.kind == kind
        )

    def all_categories(self) -> list[str]:
        """Distinct categories (first-seen casing), sorted case-insensitively."""
        names = _display_names(self._snapshot())
        return sorted(names.values(), key=str.casefold)

    def category_breakdown(self, kind: EntryKind) -> dict[str, Decimal]:
        """
        Total amount per category for one kind.

        Keys are in first-encountered order among entries of that kind.
        """
        return _breakdown(self._snapshot(), kind)

    def highest_spending_category(self) -> tuple[str, Decimal]:
        """
        The expense category with the largest total.

        Ties go to the first-encountered category.
        Returns ("None", 0) when there are no expenses.
        """
        return _highest(_breakdown(self._snapshot(), EntryKind.EXPENSE))

    # =========================================================================
    # Sorted views
    # =========================================================================

    def sorted_by_date(self, ascending: bool = True) -> list[Entry]:
        return sorted(self._snapshot(), key=lambda e: e.entry_date, reverse=not ascending)

    def sorted_by_amount(self, ascending: bool = True) -> list[Entry]:
        return sorted(self._snapshot(), key=lambda e: e.amount, reverse=not ascending)

    def sorted_by_category(self) -> list[Entry]:
        return sorted(self._snapshot(), key=lambda e: e.category_key)

    # =========================================================================
    # Reports
    # =========================================================================

    def category_shares(self, kind: EntryKind) -> list[CategoryShare]:
        """
        Breakdown for one kind as chart-ready shares, largest first.

        bar_length = amount * chart_width / total, rounded half up from the
        exact amounts rather than the rounded percentage.
        """
        breakdown = self.category_breakdown(kind)
        total = sum(breakdown.values(), ZERO)
        width = self._settings.chart_width

        ordered = sorted(breakdown.items(), key=lambda item: item[1], reverse=True)
        shares = []
        for name, amount in ordered:
            percentage = amount / total * 100
            shares.append(CategoryShare(
                name=name,
                amount=amount,
                percentage=percentage,
                bar_length=round_half_up(amount * width / total),
            ))
        return shares

    def category_chart(self, kind: EntryKind) -> str:
        shares = self.category_shares(kind)
        self._audit_logger.log_report_generated(
            report=f"{kind.value}_category_chart",
            row_count=len(shares),
        )
        return formatting.render_category_chart(kind, shares, self._settings)

    def monthly_summaries(self) -> list[MonthlySummary]:
        """Per-month income and expense totals, oldest month first."""
        months: dict[tuple[int, int], dict[EntryKind, Decimal]] = {}
        for entry in self._snapshot():
            key = (entry.entry_date.year, entry.entry_date.month)
            totals = months.setdefault(key, {EntryKind.INCOME: ZERO, EntryKind.EXPENSE: ZERO})
            totals[entry.kind] += entry.amount

        return [
            MonthlySummary(
                year=year,
                month=month,
                income=totals[EntryKind.INCOME],
                expenses=totals[EntryKind.EXPENSE],
            )
            for (year, month), totals in sorted(months.items())
        ]

    def monthly_report(self) -> str:
        summaries = self.monthly_summaries()
        self._audit_logger.log_report_generated(
            report="monthly_report",
            row_count=len(summaries),
        )
        return formatting.render_monthly_report(summaries, self._settings)

    def financial_summary(self) -> FinancialSummary:
        """Headline totals computed from a single snapshot."""
        entries = self._snapshot()
        income = _total_for_kind(entries, EntryKind.INCOME)
        expenses = _total_for_kind(entries, EntryKind.EXPENSE)
        net = income - expenses
        category, amount = _highest(_breakdown(entries, EntryKind.EXPENSE))
        return FinancialSummary(
            total_income=income,
            total_expenses=expenses,
            net_savings=net,
            savings_rate=net / income * 100 if income > ZERO else None,
            highest_expense_category=category,
            highest_expense_amount=amount,
        )

    def summary_report(self) -> str:
        return formatting.render_financial_summary(self.financial_summary(), self._settings)

    def entry_table(self, entries: Optional[Iterable[Entry]] = None) -> str:
        """
        Render entries (default: all, in insertion order) as a table.

        Pass one of the sorted views to render it in that order.
        """
        if entries is None:
            entries = self._snapshot()
        return formatting.render_entry_table(entries, self._settings)

    # =========================================================================
    # Errors
    # =========================================================================

    def _reject(self, operation: str, message: str) -> NoReturn:
        self._audit_logger.log_invalid_argument(operation=operation, message=message)
        raise InvalidArgumentError(message)
