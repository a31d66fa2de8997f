"""
Core Data Models for Budget Tracker

An Entry is one financial event: a salary payment, a grocery bill.
Entries are validated once, at construction, and are frozen afterwards.

DESIGN DECISION: We use Pydantic v2 for the entry model.
Invalid input fails with a pydantic ValidationError whose `loc`
names the offending field, so the shell can tell the user exactly
what to re-enter.
"""

from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Annotated, Optional
from uuid import UUID, uuid4

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationInfo,
    field_validator,
)

from budget_tracker.config import get_settings
from budget_tracker.models.money import format_currency


# =============================================================================
# ENUMS - Finite set of valid values
# =============================================================================

class EntryKind(str, Enum):
    """Whether an entry brings money in or takes it out."""
    INCOME = "income"
    EXPENSE = "expense"

    @property
    def label(self) -> str:
        """Display name, e.g. "Income"."""
        return self.value.capitalize()

    @property
    def sign(self) -> str:
        return "+" if self is EntryKind.INCOME else "-"


# =============================================================================
# ENTRY MODEL
# =============================================================================

class Entry(BaseModel):
    """
    A single recorded income or expense.

    CRITICAL: Entries are immutable. Assigning to a field after
    construction raises a ValidationError.

    Category matching is case-insensitive everywhere in the ledger,
    but the category is stored exactly as entered.
    """
    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    # Identity (never displayed)
    id: UUID = Field(
        default_factory=uuid4,
        description="Unique entry ID"
    )

    description: str = Field(
        ...,
        description="What the money was for (required)"
    )
    amount: Annotated[
        Decimal,
        Field(gt=0, decimal_places=2, description="Amount, always positive (required)")
    ]
    kind: EntryKind = Field(
        ...,
        description="Income or expense"
    )
    category: str = Field(
        ...,
        description="Free-text category, e.g. 'Food' (required)"
    )
    entry_date: date = Field(
        default_factory=date.today,
        description="Day the entry happened (defaults to today)"
    )

    @field_validator('description', 'category')
    @classmethod
    def reject_blank(cls, v: str, info: ValidationInfo) -> str:
        """Whitespace is stripped first, so this also rejects whitespace-only text."""
        if not v:
            raise ValueError(f"{info.field_name.capitalize()} cannot be empty")
        return v

    @property
    def category_key(self) -> str:
        """Case-folded category used for matching and grouping."""
        return self.category.casefold()

    @property
    def signed_amount(self) -> Decimal:
        return self.amount if self.kind is EntryKind.INCOME else -self.amount

    def render(self, currency_symbol: Optional[str] = None) -> str:
        """
        Render as a single line:

            2024-01-20 | -$200.00 | Food | Groceries
        """
        if currency_symbol is None:
            currency_symbol = get_settings().reports.currency_symbol
        amount = format_currency(self.amount, currency_symbol)
        return (
            f"{self.entry_date.isoformat()} | {self.kind.sign}{amount} | "
            f"{self.category} | {self.description}"
        )

    def __str__(self) -> str:
        return self.render()
