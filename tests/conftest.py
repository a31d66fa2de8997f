"""Shared fixtures for Budget Tracker tests."""

from datetime import date
from decimal import Decimal

import pytest

from budget_tracker.config import ReportSettings
from budget_tracker.ledger import Ledger
from budget_tracker.models.entry import Entry, EntryKind


@pytest.fixture
def report_settings():
    """Settings pinned so rendering does not depend on the environment."""
    return ReportSettings(
        currency_symbol="$",
        chart_width=40,
        bar_char="#",
        category_width=15,
    )


@pytest.fixture
def ledger(report_settings):
    return Ledger(settings=report_settings)


@pytest.fixture
def salary():
    return Entry(
        description="Salary",
        amount=Decimal("1000"),
        kind=EntryKind.INCOME,
        category="Job",
        entry_date=date(2024, 1, 15),
    )


@pytest.fixture
def groceries():
    return Entry(
        description="Groceries",
        amount=Decimal("200"),
        kind=EntryKind.EXPENSE,
        category="Food",
        entry_date=date(2024, 1, 20),
    )


@pytest.fixture
def sample_ledger(ledger, salary, groceries):
    """Ledger holding one salary payment and one grocery bill."""
    ledger.add(salary)
    ledger.add(groceries)
    return ledger
