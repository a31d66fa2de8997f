"""
Data Models Package

This package contains all Pydantic models used in the Budget Tracker.
"""

from budget_tracker.models.entry import (
    Entry,
    EntryKind,
)
from budget_tracker.models.report import (
    CategoryShare,
    FinancialSummary,
    MonthlySummary,
)
from budget_tracker.models.audit import (
    AuditEvent,
    AuditEventBuilder,
    AuditEventType,
    AuditSeverity,
)

__all__ = [
    # Entry models
    "Entry",
    "EntryKind",
    # Report models
    "CategoryShare",
    "FinancialSummary",
    "MonthlySummary",
    # Audit models
    "AuditEvent",
    "AuditEventBuilder",
    "AuditEventType",
    "AuditSeverity",
]
