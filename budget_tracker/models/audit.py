"""
Audit Models for Budget Tracker

Every ledger mutation and every rejected input is recorded as an
audit event. This provides:
1. Traceability of what was recorded and when
2. Debugging information when input is rejected

DESIGN DECISION: Audit events are append-only. We never delete or modify them.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, Field


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class AuditEventType(str, Enum):
    """Types of events we audit."""
    # Ledger mutations
    ENTRY_ADDED = "entry_added"
    ENTRY_REJECTED = "entry_rejected"

    # Bad arguments to ledger operations
    INVALID_ARGUMENT = "invalid_argument"

    # Read side
    REPORT_GENERATED = "report_generated"


class AuditSeverity(str, Enum):
    """Severity level for audit events."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class AuditEvent(BaseModel):
    """
    A single audit event.

    This is the core unit of our audit trail.
    """

    # Identity
    event_id: UUID = Field(
        default_factory=uuid4,
        description="Unique event identifier"
    )
    timestamp: datetime = Field(
        default_factory=_utcnow,
        description="When the event occurred (UTC)"
    )

    # Event classification
    event_type: AuditEventType = Field(
        ...,
        description="Type of event"
    )
    severity: AuditSeverity = Field(
        default=AuditSeverity.INFO,
        description="Event severity"
    )

    # Context - what entity is this about?
    entity_type: Optional[str] = Field(
        default=None,
        description="Type of entity (e.g., 'entry', 'report')"
    )
    entity_id: Optional[UUID] = Field(
        default=None,
        description="ID of the entity this event relates to"
    )

    description: str = Field(
        ...,
        description="Human-readable description of what happened"
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional event-specific data"
    )
    error_message: Optional[str] = None

    is_user_action: bool = Field(
        default=False,
        description="Was this triggered by a user action?"
    )

    def to_log_dict(self) -> dict:
        """
        Convert to a dictionary suitable for structured logging.
        """
        return {
            "event_id": str(self.event_id),
            "timestamp": self.timestamp.isoformat(),
            "event_type": self.event_type.value,
            "severity": self.severity.value,
            "entity_type": self.entity_type,
            "entity_id": str(self.entity_id) if self.entity_id else None,
            "description": self.description,
            "details": self.details,
            "error_message": self.error_message,
            "is_user_action": self.is_user_action,
        }


class AuditEventBuilder:
    """
    Helper class to build audit events with common patterns.

    Usage:
        event = AuditEventBuilder.entry_added(entry_id, "expense", "Food", "200.00", "2024-01-20")
        event = AuditEventBuilder.invalid_argument("entries_by_category", "Category cannot be empty")
    """

    @staticmethod
    def entry_added(
        entry_id: UUID,
        kind: str,
        category: str,
        amount: str,
        entry_date: str,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.ENTRY_ADDED,
            entity_type="entry",
            entity_id=entry_id,
            description=f"Entry added: {kind} {amount} in {category}",
            details={
                "kind": kind,
                "category": category,
                "amount": amount,
                "entry_date": entry_date,
            },
            is_user_action=True,
        )

    @staticmethod
    def entry_rejected(
        kind: str,
        issues: list[dict],
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.ENTRY_REJECTED,
            severity=AuditSeverity.WARNING,
            entity_type="entry",
            description=f"Entry rejected with {len(issues)} issues",
            details={
                "kind": kind,
                "issues": issues,
            },
            error_message="; ".join(issue["message"] for issue in issues),
            is_user_action=True,
        )

    @staticmethod
    def invalid_argument(
        operation: str,
        message: str,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.INVALID_ARGUMENT,
            severity=AuditSeverity.WARNING,
            description=f"Invalid argument to {operation}",
            details={
                "operation": operation,
            },
            error_message=message,
        )

    @staticmethod
    def report_generated(
        report: str,
        row_count: int,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.REPORT_GENERATED,
            severity=AuditSeverity.DEBUG,
            entity_type="report",
            description=f"Report generated: {report} with {row_count} rows",
            details={
                "report": report,
                "row_count": row_count,
            },
        )
