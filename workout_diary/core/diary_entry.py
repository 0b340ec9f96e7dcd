"""Diary Entry — one logged workout session, owned by exactly one Author.

Invariants:
    - entry_title, activity_type, diary_text are non-blank at all times
    - duration_minutes > 0 and MIN_INTENSITY <= intensity_level <= MAX_INTENSITY at all times
    - author and created_at never change after construction
    - last_modified >= created_at, and never moves backwards
    - A rejected mutation leaves the entry exactly as it was

Design Decisions:
    - Properties with validating setters over public attributes: every write path is guarded
    - update() validates all changes before applying any, then stamps once (ADR: no partial writes)
    - Clock injected (default: UTC now) so ordering is testable without sleeping
    - No __eq__: entries compare by identity, registers rely on that for duplicate checks
"""

from datetime import datetime, timezone
from typing import Any, Callable

from workout_diary.core.author import Author
from workout_diary.core.domain_types import (
    EntryField, MAX_INTENSITY, MIN_INTENSITY,
)
from workout_diary.core.errors import InvalidArgumentError
from workout_diary.core.validation import (
    require_int_in_range, require_non_blank, require_positive_int, require_present,
)

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _check_title(value: Any) -> str:
    return require_non_blank(
        value, EntryField.ENTRY_TITLE.value, "The title for this session cannot be empty",
    )


def _check_activity_type(value: Any) -> str:
    return require_non_blank(
        value, EntryField.ACTIVITY_TYPE.value, "Activity type cannot be blank",
    )


def _check_diary_text(value: Any) -> str:
    return require_non_blank(
        value, EntryField.DIARY_TEXT.value, "Diary text cannot be None or blank",
    )


def _check_duration(value: Any) -> int:
    return require_positive_int(
        value, EntryField.DURATION_MINUTES.value,
        "Workout must last longer than 0 minutes",
    )


def _check_intensity(value: Any) -> int:
    return require_int_in_range(
        value, EntryField.INTENSITY_LEVEL.value, MIN_INTENSITY, MAX_INTENSITY,
        f"The intensity level must be rated between {MIN_INTENSITY} and {MAX_INTENSITY}",
    )


_VALIDATORS: dict[EntryField, Callable[[Any], Any]] = {
    EntryField.ENTRY_TITLE: _check_title,
    EntryField.ACTIVITY_TYPE: _check_activity_type,
    EntryField.DIARY_TEXT: _check_diary_text,
    EntryField.DURATION_MINUTES: _check_duration,
    EntryField.INTENSITY_LEVEL: _check_intensity,
}


class DiaryEntry:
    """A workout diary entry with validated, timestamped mutations."""

    def __init__(
        self,
        author: Author,
        title: str,
        activity_type: str,
        diary_text: str,
        duration_minutes: int,
        intensity_level: int,
        *,
        clock: Clock | None = None,
    ):
        self._author = require_present(author, "author", "Author cannot be None")
        self._entry_title = _check_title(title)
        self._activity_type = _check_activity_type(activity_type)
        self._diary_text = _check_diary_text(diary_text)
        self._duration_minutes = _check_duration(duration_minutes)
        self._intensity_level = _check_intensity(intensity_level)
        self._clock = clock or utc_now
        self._created_at = self._clock()
        self._last_modified = self._created_at

    def __repr__(self) -> str:
        return (
            f"DiaryEntry(author={self._author!r}, title={self._entry_title!r}, "
            f"created_at={self._created_at.isoformat()})"
        )

    # ─── Read-only ───────────────────────────────────────────────

    @property
    def author(self) -> Author:
        return self._author

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def last_modified(self) -> datetime:
        return self._last_modified

    # ─── Mutable fields ──────────────────────────────────────────

    @property
    def entry_title(self) -> str:
        return self._entry_title

    @entry_title.setter
    def entry_title(self, value: str) -> None:
        self._apply({EntryField.ENTRY_TITLE: _check_title(value)})

    @property
    def activity_type(self) -> str:
        return self._activity_type

    @activity_type.setter
    def activity_type(self, value: str) -> None:
        self._apply({EntryField.ACTIVITY_TYPE: _check_activity_type(value)})

    @property
    def diary_text(self) -> str:
        return self._diary_text

    @diary_text.setter
    def diary_text(self, value: str) -> None:
        self._apply({EntryField.DIARY_TEXT: _check_diary_text(value)})

    @property
    def duration_minutes(self) -> int:
        return self._duration_minutes

    @duration_minutes.setter
    def duration_minutes(self, value: int) -> None:
        self._apply({EntryField.DURATION_MINUTES: _check_duration(value)})

    @property
    def intensity_level(self) -> int:
        return self._intensity_level

    @intensity_level.setter
    def intensity_level(self, value: int) -> None:
        self._apply({EntryField.INTENSITY_LEVEL: _check_intensity(value)})

    def update(self, **changes: Any) -> None:
        """Validate every change, then apply all of them with a single timestamp.

        Raises InvalidArgumentError (applying nothing) for an unknown field name
        or any invalid value.
        """
        validated: dict[EntryField, Any] = {}
        for name, value in changes.items():
            try:
                entry_field = EntryField(name)
            except ValueError:
                raise InvalidArgumentError(
                    f"'{name}' is not a mutable diary entry field", name,
                ) from None
            validated[entry_field] = _VALIDATORS[entry_field](value)
        if validated:
            self._apply(validated)

    def _apply(self, validated: dict[EntryField, Any]) -> None:
        """Write already-validated values and refresh last_modified."""
        for entry_field, value in validated.items():
            setattr(self, f"_{entry_field.value}", value)
        self._last_modified = max(self._clock(), self._last_modified)
