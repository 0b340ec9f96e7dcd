"""Workout Diary Console — entry point that builds the registers and prints the diary.

Invariants:
    - Settings and logging are loaded before any register is built
    - Entries are printed newest first (DiaryRegister.get_sorted_entries)
    - WorkoutDiaryError or invalid settings → logged with error_code, exit status 1;
      nothing else is caught

Design Decisions:
    - Thin shell: all rules live in core/, this module only wires and prints
      (ADR: impureim sandwich)
    - Own IdAllocator seeded from settings: the shell never touches the process default
"""

import logging
import sys

from pydantic import ValidationError

from workout_diary.bootstrap import seed_sample_diary
from workout_diary.config import Settings, get_settings
from workout_diary.core.author_register import AuthorRegister
from workout_diary.core.diary_register import DiaryRegister
from workout_diary.core.domain_types import OutputFormat
from workout_diary.core.errors import WorkoutDiaryError
from workout_diary.core.format_entries import format_diary
from workout_diary.core.id_allocator import IdAllocator
from workout_diary.infrastructure.observability import setup_logging
from workout_diary.schemas.diary import DiaryView

logger = logging.getLogger(__name__)


def render(diary: DiaryRegister, output_format: OutputFormat) -> str:
    entries = diary.get_sorted_entries()
    if output_format == OutputFormat.JSON:
        return DiaryView.from_entries(entries).model_dump_json(indent=2)
    return format_diary(entries)


def run(settings: Settings) -> str:
    """Build registers per settings and return the rendered diary."""
    authors = AuthorRegister()
    diary = DiaryRegister()
    if settings.seed_sample_data:
        seed_sample_diary(
            authors, diary, allocator=IdAllocator(settings.author_id_start),
        )
    logger.info(
        "Diary ready",
        extra={"entry_count": sum(diary.get_total_entries_by_authors().values())},
    )
    return render(diary, settings.output_format)


def main() -> int:
    try:
        settings = get_settings()
    except ValidationError as exc:
        setup_logging()
        logger.error(
            f"Invalid configuration: {exc.error_count()} error(s)",
            extra={"error_code": "INVALID_CONFIGURATION"},
        )
        for err in exc.errors():
            logger.error(
                f"{'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}",
                extra={"error_code": "INVALID_CONFIGURATION"},
            )
        return 1
    setup_logging(settings.log_level, settings.log_format.value)
    try:
        print(run(settings))
    except WorkoutDiaryError as exc:
        logger.error(
            f"WorkoutDiaryError: {exc.message}",
            extra={"error_code": exc.code, "field": exc.context.field_name},
        )
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
