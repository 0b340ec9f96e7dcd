"""Root conftest — shared test configuration.

Invariants:
    - Every test starts with the process-wide id allocator at 1
    - Settings are re-read per test (get_settings cache cleared)
    - step_clock gives deterministic, strictly increasing timestamps
"""

from datetime import datetime, timedelta, timezone

import pytest

from workout_diary.config import get_settings
from workout_diary.core.id_allocator import default_allocator


class StepClock:
    """Callable clock: each reading is `step` later than the previous one."""

    def __init__(self, start: datetime, step: timedelta):
        self.now = start
        self.step = step

    def __call__(self) -> datetime:
        reading = self.now
        self.now = self.now + self.step
        return reading


@pytest.fixture(autouse=True)
def _fresh_process_state(monkeypatch):
    for var in (
        "WORKOUT_DIARY_OUTPUT_FORMAT", "WORKOUT_DIARY_SEED_SAMPLE_DATA",
        "WORKOUT_DIARY_AUTHOR_ID_START", "WORKOUT_DIARY_LOG_LEVEL",
        "WORKOUT_DIARY_LOG_FORMAT",
    ):
        monkeypatch.delenv(var, raising=False)
    default_allocator.reset()
    get_settings.cache_clear()
    yield
    default_allocator.reset()
    get_settings.cache_clear()


@pytest.fixture
def step_clock():
    return StepClock(
        datetime(2025, 3, 1, 8, 0, tzinfo=timezone.utc), timedelta(minutes=1),
    )
