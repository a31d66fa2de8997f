"""
Audit Logger

DESIGN DECISION: Every ledger mutation is logged.
This provides:
1. Complete traceability of what was recorded
2. Debugging capability when input is rejected

The audit logger:
- Is synchronous, like the ledger that calls it
- Writes structured events through structlog
"""

import logging
import sys
from datetime import date
from decimal import Decimal
from uuid import UUID

import structlog

from budget_tracker.config import AppSettings
from budget_tracker.models.audit import AuditEvent, AuditEventBuilder, AuditSeverity


def _processors(json_logs: bool) -> list:
    renderer = (
        structlog.processors.JSONRenderer()
        if json_logs
        else structlog.dev.ConsoleRenderer()
    )
    return [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        renderer,
    ]


# Configure structlog for local logging
structlog.configure(
    processors=_processors(json_logs=True),
    wrapper_class=structlog.stdlib.BoundLogger,
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    cache_logger_on_first_use=False,
)


def configure_logging(settings: AppSettings) -> None:
    """
    Route audit events to stderr at the configured level.

    Call once at startup. Without it, events go through the stdlib
    root logger, which stays silent below WARNING.
    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, settings.log_level),
        force=True,
    )
    structlog.configure(processors=_processors(json_logs=settings.log_json))


class AuditLogger:
    """
    Central audit logging service.

    Turns ledger activity into AuditEvents and writes them to the
    structured local log.
    """

    def __init__(self):
        self._logger = structlog.get_logger("budget_tracker.audit")

    def log(self, event: AuditEvent) -> None:
        """Log an audit event at the level matching its severity."""
        log_dict = event.to_log_dict()

        if event.severity == AuditSeverity.ERROR:
            self._logger.error("audit_event", **log_dict)
        elif event.severity == AuditSeverity.WARNING:
            self._logger.warning("audit_event", **log_dict)
        elif event.severity == AuditSeverity.DEBUG:
            self._logger.debug("audit_event", **log_dict)
        else:
            self._logger.info("audit_event", **log_dict)

    def log_entry_added(
        self,
        entry_id: UUID,
        kind: str,
        category: str,
        amount: Decimal,
        entry_date: date,
    ) -> None:
        """Log a successful append to the ledger."""
        event = AuditEventBuilder.entry_added(
            entry_id=entry_id,
            kind=kind,
            category=category,
            amount=str(amount),
            entry_date=entry_date.isoformat(),
        )
        self.log(event)

    def log_entry_rejected(
        self,
        kind: str,
        issues: list[dict],
    ) -> None:
        """Log entry construction failure."""
        event = AuditEventBuilder.entry_rejected(
            kind=kind,
            issues=issues,
        )
        self.log(event)

    def log_invalid_argument(
        self,
        operation: str,
        message: str,
    ) -> None:
        event = AuditEventBuilder.invalid_argument(
            operation=operation,
            message=message,
        )
        self.log(event)

    def log_report_generated(
        self,
        report: str,
        row_count: int,
    ) -> None:
        event = AuditEventBuilder.report_generated(
            report=report,
            row_count=row_count,
        )
        self.log(event)
