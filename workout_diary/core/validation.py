"""Argument Guards — shared validation rules for entities and registers.

Invariants:
    - Every guard either returns the validated value unchanged or raises InvalidArgumentError
    - Blank means empty or whitespace-only (str.strip() is empty)
    - bool is never accepted where an int is required

Design Decisions:
    - Guards return the value so call sites read as assignments (self._x = require_...(x))
    - Message overrides per call site: the same rule reads differently for a title and a word
"""

from typing import Any

from workout_diary.core.errors import ErrorContext, InvalidArgumentError


def _reject(message: str, field: str, value: Any) -> InvalidArgumentError:
    return InvalidArgumentError(
        message, field, context=ErrorContext(rejected_value=repr(value)),
    )


def require_present(value: Any, field: str, message: str | None = None) -> Any:
    """Reject None."""
    if value is None:
        raise _reject(message or f"{field} cannot be None", field, value)
    return value


def require_non_blank(value: Any, field: str, message: str | None = None) -> str:
    """Reject None, non-str, empty and whitespace-only values."""
    if not isinstance(value, str) or not value.strip():
        raise _reject(
            message or f"{field} cannot be None or blank", field, value,
        )
    return value


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def require_positive_int(value: Any, field: str, message: str | None = None) -> int:
    """Reject anything that is not an int greater than zero."""
    if not _is_int(value) or value <= 0:
        raise _reject(message or f"{field} must be greater than 0", field, value)
    return value


def require_int_in_range(
    value: Any, field: str, low: int, high: int, message: str | None = None,
) -> int:
    """Reject anything that is not an int within [low, high]."""
    if not _is_int(value) or not low <= value <= high:
        raise _reject(
            message or f"{field} must be between {low} and {high}", field, value,
        )
    return value
