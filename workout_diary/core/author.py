"""Author — immutable identity record for diary contributors.

Invariants:
    - id is allocated once at construction and is a positive int
    - name is non-blank
    - Equality and hash use id only: two authors named "Bjorn" are different authors
    - A failed construction does not consume an id

Design Decisions:
    - Frozen dataclass with name excluded from comparison: dataclass derives
      __eq__/__hash__ from id alone
    - Allocator passed as InitVar: not stored, not compared, not shown in repr
"""

from dataclasses import InitVar, dataclass, field

from workout_diary.core.domain_types import AuthorId
from workout_diary.core.id_allocator import IdAllocator, default_allocator
from workout_diary.core.validation import require_non_blank


@dataclass(frozen=True)
class Author:
    """A diary contributor, unique by allocated id."""

    name: str = field(compare=False)
    allocator: InitVar[IdAllocator | None] = None
    id: AuthorId = field(init=False)

    def __post_init__(self, allocator: IdAllocator | None) -> None:
        require_non_blank(
            self.name, "name", "Name of author cannot be None or blank",
        )
        source = allocator if allocator is not None else default_allocator
        # frozen: bypass __setattr__ for the one-time id assignment
        object.__setattr__(self, "id", source.next_id())

    def __str__(self) -> str:
        return f"{self.name} (ID: {self.id})"
