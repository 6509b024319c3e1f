from __future__ import annotations

import arrow
import pytest

from dayview import Event

DAY = "2022-10-01"


def at(hhmm: str, day: str = DAY) -> arrow.Arrow:
    return arrow.get(f"{day}T{hhmm}:00")


def next_day(day: str = DAY) -> str:
    return arrow.get(day).shift(days=1).format("YYYY-MM-DD")


@pytest.fixture
def day() -> arrow.Arrow:
    return arrow.get(DAY)


@pytest.fixture
def make_event():
    def _make(start: str, end: str, priority: int = 1, title: str = "Event", end_day: str = DAY, **kw) -> Event:
        return Event(start=at(start), end=at(end, end_day), title=title, priority=priority, **kw)

    return _make
