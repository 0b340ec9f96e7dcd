"""Diary Register — per-author buckets of diary entries.

Invariants:
    - Every entry sits in the bucket of its own author (entry.author.id == bucket key id)
    - A bucket, once created by add_diary_entry, survives until clear_entries() —
      even when deletions empty it (it then counts as zero in the totals)
    - The same entry object is never stored twice in one bucket (identity check)
    - Date search is exclusive on both bounds: from_date < created_at < to_date
    - Naive datetimes (bounds or entry timestamps) are compared as UTC
    - Sorted retrieval is newest first; ties keep bucket/insertion order (stable sort)
    - Returned lists and dicts are shallow copies; entries themselves are shared

Design Decisions:
    - Author as dict key: Author hashes by id, so any Author instance with the
      same id finds the bucket
    - Identity (`is`) over equality for entries: DiaryEntry defines no value
      equality and two identical workouts are still two sessions
"""

import logging
from datetime import datetime, timezone

from workout_diary.core.author import Author
from workout_diary.core.diary_entry import DiaryEntry
from workout_diary.core.errors import ErrorCategory, InvalidArgumentError
from workout_diary.core.validation import require_non_blank, require_present

logger = logging.getLogger(__name__)


def _require_datetime(value: datetime, field: str) -> datetime:
    require_present(value, field, "from_date or to_date cannot be None")
    if not isinstance(value, datetime):
        raise InvalidArgumentError(f"{field} must be a datetime", field)
    return value


def _as_utc(moment: datetime) -> datetime:
    """Naive datetimes are read as UTC so they compare with aware ones."""
    if moment.tzinfo is None or moment.utcoffset() is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment


def _index_of(bucket: list[DiaryEntry], entry: DiaryEntry) -> int | None:
    for index, candidate in enumerate(bucket):
        if candidate is entry:
            return index
    return None


class DiaryRegister:
    """Maps each author to the list of diary entries they wrote."""

    def __init__(self) -> None:
        self._buckets: dict[Author, list[DiaryEntry]] = {}

    def _all_entries(self) -> list[DiaryEntry]:
        return [entry for bucket in self._buckets.values() for entry in bucket]

    def add_diary_entry(self, author: Author, entry: DiaryEntry) -> bool:
        """Add entry to author's bucket. False if that exact entry is already there."""
        require_present(author, "author", "Author or entry cannot be None")
        require_present(entry, "entry", "Author or entry cannot be None")
        if entry.author.id != author.id:
            raise InvalidArgumentError(
                "Diary entry author doesn't belong to this author",
                "entry", category=ErrorCategory.BUSINESS_RULE,
            )
        bucket = self._buckets.setdefault(author, [])
        if _index_of(bucket, entry) is not None:
            return False
        bucket.append(entry)
        logger.debug(
            "Diary entry added",
            extra={"author_id": author.id, "entry_count": len(bucket)},
        )
        return True

    def delete_diary_entry(self, author: Author, entry: DiaryEntry) -> bool:
        """Remove entry from author's bucket. False if author or entry is unknown."""
        require_present(author, "author", "Diary entry or author cannot be None")
        require_present(entry, "entry", "Diary entry or author cannot be None")
        bucket = self._buckets.get(author)
        if bucket is None:
            return False
        index = _index_of(bucket, entry)
        if index is None:
            return False
        del bucket[index]
        logger.debug(
            "Diary entry deleted",
            extra={"author_id": author.id, "entry_count": len(bucket)},
        )
        return True

    def search_by_date(
        self, from_date: datetime, to_date: datetime,
    ) -> list[DiaryEntry]:
        """Entries created strictly between from_date and to_date."""
        lower = _as_utc(_require_datetime(from_date, "from_date"))
        upper = _as_utc(_require_datetime(to_date, "to_date"))
        if lower > upper:
            raise InvalidArgumentError(
                "from_date cannot be after to_date", "from_date",
                category=ErrorCategory.BUSINESS_RULE,
            )
        return [
            entry for entry in self._all_entries()
            if lower < _as_utc(entry.created_at) < upper
        ]

    def get_sorted_entries(self) -> list[DiaryEntry]:
        """Every entry, newest first."""
        return sorted(
            self._all_entries(), key=lambda e: _as_utc(e.created_at), reverse=True,
        )

    def clear_entries(self) -> bool:
        """Drop every bucket. False if there was nothing to drop."""
        if not self._buckets:
            return False
        self._buckets.clear()
        logger.debug("Diary register cleared")
        return True

    def get_all_entries_by_author(self, author: Author) -> list[DiaryEntry]:
        require_present(author, "author", "Author cannot be None")
        return list(self._buckets.get(author, []))

    def get_total_entries_by_authors(self) -> dict[Author, int]:
        """Entry count per author that has a bucket (emptied buckets count 0)."""
        return {author: len(bucket) for author, bucket in self._buckets.items()}

    def search_entry_by_word(self, word: str) -> list[DiaryEntry]:
        """Entries whose diary text contains word, ignoring case."""
        require_non_blank(word, "word", "word cannot be None or blank")
        needle = word.casefold()
        return [
            entry for entry in self._all_entries()
            if needle in entry.diary_text.casefold()
        ]
