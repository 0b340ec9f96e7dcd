"""Error Hierarchy — typed, categorized exceptions for every diary contract violation.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - InvalidArgumentError is the only concrete error kind raised by the core
    - Errors are raised at the point of violation, never logged or suppressed in core/
    - to_dict() produces the structured envelope used by the console shell

Design Decisions:
    - Single hierarchy with WorkoutDiaryError base: the shell catches one type (ADR: uniform error shape)
    - InvalidArgumentError also subclasses ValueError: callers using plain `except ValueError` still work
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and shell handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    BUSINESS_RULE = "business_rule"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    field_name: str | None = None
    rejected_value: str | None = None
    debug_info: dict[str, Any] | None = None


class WorkoutDiaryError(Exception):
    """Base exception for all workout diary errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()

    def to_dict(self) -> dict:
        """Convert to the standardized error envelope."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "field": self.context.field_name,
                    "rejected_value": self.context.rejected_value,
                },
            }
        }


# ─── Domain Errors ───────────────────────────────────────────────

class InvalidArgumentError(WorkoutDiaryError, ValueError):
    """A caller passed a missing, blank, out-of-range or mismatched argument."""
    def __init__(
        self,
        message: str,
        field: str,
        category: ErrorCategory = ErrorCategory.VALIDATION,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.field_name = field
        super().__init__(
            message, "INVALID_ARGUMENT", category,
            ErrorSeverity.ERROR, ctx,
        )
        self.field = field
