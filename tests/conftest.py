from datetime import datetime, timedelta, timezone

import pytest

from dtoken import TokenFactory

FIXED_NOW = datetime(2026, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


class SteppingClock:
    """Clock returning FIXED_NOW, then one millisecond later on each read."""

    def __init__(self) -> None:
        self.reads = 0

    def __call__(self) -> datetime:
        value = FIXED_NOW + timedelta(milliseconds=self.reads)
        self.reads += 1
        return value


@pytest.fixture
def clock() -> SteppingClock:
    return SteppingClock()


@pytest.fixture
def factory(clock: SteppingClock) -> TokenFactory:
    return TokenFactory(clock=clock)


@pytest.fixture
def fixed_now() -> datetime:
    return FIXED_NOW
