"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - AuthorId wraps a positive int — allocated only by IdAllocator
    - IntensityLevel is bounded MIN_INTENSITY–MAX_INTENSITY (1–10)
    - DurationMinutes is strictly positive
    - Valid output formats encoded as Enums — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: settings values parse straight from environment strings
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

AuthorId = NewType("AuthorId", int)


# ─── Value Types ─────────────────────────────────────────────────

DurationMinutes = NewType("DurationMinutes", int)   # > 0
IntensityLevel = NewType("IntensityLevel", int)     # 1–10

MIN_INTENSITY: int = 1
MAX_INTENSITY: int = 10
FIRST_AUTHOR_ID: int = 1


# ─── Enums ───────────────────────────────────────────────────────

class OutputFormat(str, Enum):
    """How the console shell renders the diary."""
    TEXT = "text"
    JSON = "json"


class EntryField(str, Enum):
    """Mutable DiaryEntry fields — the only names accepted by DiaryEntry.update()."""
    ENTRY_TITLE = "entry_title"
    ACTIVITY_TYPE = "activity_type"
    DIARY_TEXT = "diary_text"
    DURATION_MINUTES = "duration_minutes"
    INTENSITY_LEVEL = "intensity_level"
