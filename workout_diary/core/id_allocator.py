"""Author Id Allocation — monotonically increasing identity source for Author.

Invariants:
    - Ids handed out by one allocator are strictly increasing and never reused
    - The first id is `start` (default 1); start must be a positive int
    - reset() is the only way to hand out an id twice (tests, fresh shells)

Design Decisions:
    - Explicit allocator object instead of a class-level counter on Author: identity
      allocation is injectable and resettable between test runs
    - A module-level default_allocator keeps Author(name) working without wiring
      (ADR: process-wide ids remain the default behaviour)
"""

from workout_diary.core.domain_types import AuthorId, FIRST_AUTHOR_ID
from workout_diary.core.validation import require_positive_int


class IdAllocator:
    """Hands out AuthorIds from a private counter."""

    def __init__(self, start: int = FIRST_AUTHOR_ID):
        self._next = require_positive_int(start, "start")

    @property
    def peek(self) -> AuthorId:
        """The id the next call to next_id() will return."""
        return AuthorId(self._next)

    def next_id(self) -> AuthorId:
        allocated = AuthorId(self._next)
        self._next += 1
        return allocated

    def reset(self, start: int = FIRST_AUTHOR_ID) -> None:
        self._next = require_positive_int(start, "start")


default_allocator = IdAllocator()
