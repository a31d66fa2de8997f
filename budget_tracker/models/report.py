"""
Report Models

Immutable results of ledger queries. The ledger computes these;
budget_tracker.reports.formatting turns them into text.
"""

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class CategoryShare(BaseModel):
    """One category's slice of an income or expense total."""
    model_config = ConfigDict(frozen=True)

    name: str
    amount: Decimal = Field(..., gt=0)
    percentage: Decimal = Field(
        ...,
        ge=0,
        le=100,
        description="Share of the kind total, unrounded"
    )
    bar_length: int = Field(
        ...,
        ge=0,
        description="Number of bar characters in the chart"
    )


class MonthlySummary(BaseModel):
    """Income and expense totals for one calendar month."""
    model_config = ConfigDict(frozen=True)

    year: int
    month: int = Field(..., ge=1, le=12)
    income: Decimal = Field(default=Decimal("0"), ge=0)
    expenses: Decimal = Field(default=Decimal("0"), ge=0)

    @property
    def label(self) -> str:
        return f"{self.year:04d}-{self.month:02d}"

    @property
    def net_savings(self) -> Decimal:
        return self.income - self.expenses


class FinancialSummary(BaseModel):
    """
    Headline figures for the whole ledger.

    savings_rate is None when there is no income to divide by.
    """
    model_config = ConfigDict(frozen=True)

    total_income: Decimal
    total_expenses: Decimal
    net_savings: Decimal
    savings_rate: Optional[Decimal] = Field(
        default=None,
        description="Net savings as a percentage of income"
    )
    highest_expense_category: str
    highest_expense_amount: Decimal
