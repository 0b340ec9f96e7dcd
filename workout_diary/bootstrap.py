"""Sample Diary Bootstrap — seeds the registers with the demo authors and workouts.

Invariants:
    - Four authors (Bjorn, Polo, olav, ola), one entry each, registered in that order
    - Every entry is added under its own author (add_diary_entry never raises here)
    - Uses the caller's allocator and clock when given, process defaults otherwise

Design Decisions:
    - Sample data as module constants, not inline calls: tests assert against the same table
"""

from workout_diary.core.author import Author
from workout_diary.core.author_register import AuthorRegister
from workout_diary.core.diary_entry import Clock, DiaryEntry
from workout_diary.core.diary_register import DiaryRegister
from workout_diary.core.id_allocator import IdAllocator

SAMPLE_AUTHORS: tuple[str, ...] = ("Bjorn", "Polo", "olav", "ola")

# (title, activity_type, diary_text, duration_minutes, intensity_level), one per author
SAMPLE_ENTRIES: tuple[tuple[str, str, str, int, int], ...] = (
    ("Jumping", "cardio", "Fun jumping day, burned the legs", 20, 4),
    ("Arm curls", "strength", "Really tough arm day, made me get a huge pump", 10, 8),
    ("evening run", "cardio", "Cold run, need to put on a jacket next time", 15, 2),
    ("morning run", "running", "Great weather really warm", 45, 7),
)


def seed_sample_diary(
    authors: AuthorRegister,
    diary: DiaryRegister,
    allocator: IdAllocator | None = None,
    clock: Clock | None = None,
) -> list[Author]:
    """Register the sample authors and their entries. Returns the new authors."""
    seeded = [Author(name, allocator) for name in SAMPLE_AUTHORS]
    for author in seeded:
        authors.add_author(author)
    for author, fields in zip(seeded, SAMPLE_ENTRIES):
        diary.add_diary_entry(author, DiaryEntry(author, *fields, clock=clock))
    return seeded
