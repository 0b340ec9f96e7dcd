"""Diary Formatting — pure functions that render entries as console text.

Invariants:
    - All functions are pure (no IO, no print)
    - One labelled line per field, in a fixed order
    - format_diary output = header line + one block per entry, each followed by SEPARATOR

Design Decisions:
    - Rendering kept out of DiaryEntry: entries hold data, the shell decides how to show it
"""

from collections.abc import Iterable

from workout_diary.core.diary_entry import DiaryEntry

DIARY_HEADER = "-WorkoutDiary-"
SEPARATOR = "**********"


def format_entry(entry: DiaryEntry) -> str:
    """Render one entry as a labelled multi-line block."""
    return "\n".join((
        f"Author: {entry.author}",
        f"Title: {entry.entry_title}",
        f"Activity: {entry.activity_type}",
        f"Duration: {entry.duration_minutes} minutes",
        f"Intensity: {entry.intensity_level}",
        f"Diary Text: {entry.diary_text}",
        f"Created at: {entry.created_at.isoformat(timespec='seconds')}",
    ))


def format_diary(entries: Iterable[DiaryEntry]) -> str:
    lines = [DIARY_HEADER]
    for entry in entries:
        lines.append(format_entry(entry))
        lines.append(SEPARATOR)
    return "\n".join(lines)
