"""Diary Schemas — Pydantic read models for the JSON output format.

Invariants:
    - Views are built from domain objects, never the other way round
    - Field constraints mirror the domain invariants (non-blank, duration > 0, intensity 1–10)
    - Views are frozen: a rendered snapshot cannot drift from what was printed

Design Decisions:
    - Separate from core entities: schemas are output contracts, entities own behaviour
    - from_domain() classmethods keep the mapping next to the field list
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from workout_diary.core.author import Author
from workout_diary.core.diary_entry import DiaryEntry
from workout_diary.core.domain_types import MAX_INTENSITY, MIN_INTENSITY


class AuthorView(BaseModel):
    """Public representation of an Author."""
    model_config = ConfigDict(frozen=True)

    id: int = Field(ge=1)
    name: str = Field(min_length=1)

    @classmethod
    def from_domain(cls, author: Author) -> "AuthorView":
        return cls(id=author.id, name=author.name)


class DiaryEntryView(BaseModel):
    """Public representation of a DiaryEntry."""
    model_config = ConfigDict(frozen=True)

    author: AuthorView
    entry_title: str = Field(min_length=1)
    activity_type: str = Field(min_length=1)
    diary_text: str = Field(min_length=1)
    duration_minutes: int = Field(gt=0)
    intensity_level: int = Field(ge=MIN_INTENSITY, le=MAX_INTENSITY)
    created_at: datetime
    last_modified: datetime

    @classmethod
    def from_domain(cls, entry: DiaryEntry) -> "DiaryEntryView":
        return cls(
            author=AuthorView.from_domain(entry.author),
            entry_title=entry.entry_title,
            activity_type=entry.activity_type,
            diary_text=entry.diary_text,
            duration_minutes=entry.duration_minutes,
            intensity_level=entry.intensity_level,
            created_at=entry.created_at,
            last_modified=entry.last_modified,
        )


class DiaryView(BaseModel):
    """The whole diary as printed by the console shell, newest entry first."""
    model_config = ConfigDict(frozen=True)

    entries: list[DiaryEntryView] = Field(default_factory=list)

    @classmethod
    def from_entries(cls, entries: list[DiaryEntry]) -> "DiaryView":
        return cls(entries=[DiaryEntryView.from_domain(e) for e in entries])
