"""Author Register — ordered in-memory collection of unique authors.

Invariants:
    - Insertion order is preserved
    - No two stored authors share an id (duplicates rejected with False, not an error)
    - Returned lists are shallow copies: callers cannot mutate the register through them
    - Lookups that find nothing return None / [] — only bad arguments raise

Design Decisions:
    - Plain list with linear scans: registers hold a handful of authors (ADR: simplicity over indexing)
    - Name search is exact and case-insensitive (casefold), never substring
"""

import logging

from workout_diary.core.author import Author
from workout_diary.core.validation import (
    require_non_blank, require_positive_int, require_present,
)

logger = logging.getLogger(__name__)


class AuthorRegister:
    """Stores and manages every author of the diary."""

    def __init__(self) -> None:
        self._authors: list[Author] = []

    def __len__(self) -> int:
        return len(self._authors)

    def add_author(self, author: Author) -> bool:
        """Append author unless one with the same id is already registered."""
        require_present(author, "author", "Author cannot be None")
        if any(a.id == author.id for a in self._authors):
            return False
        self._authors.append(author)
        logger.debug("Author registered", extra={"author_id": author.id})
        return True

    def get_all_authors(self) -> list[Author]:
        return list(self._authors)

    def get_author_count(self) -> int:
        return len(self._authors)

    def search_author_by_name(self, name: str) -> list[Author]:
        """All authors whose name equals `name`, ignoring case."""
        require_non_blank(name, "name", "Author name cannot be None or blank")
        wanted = name.casefold()
        return [a for a in self._authors if a.name.casefold() == wanted]

    def get_author_by_id(self, author_id: int) -> Author | None:
        for author in self._authors:
            if author.id == author_id:
                return author
        return None

    def remove_author(self, author_id: int) -> bool:
        """Remove the first author with this id. False when none matches."""
        require_positive_int(
            author_id, "author_id", "Author ID cannot be less than 1",
        )
        for index, author in enumerate(self._authors):
            if author.id == author_id:
                del self._authors[index]
                logger.debug("Author removed", extra={"author_id": author_id})
                return True
        return False
