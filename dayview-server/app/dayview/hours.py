from __future__ import annotations

import logging
import math
from typing import Iterable, List

import arrow

from .geometry import HEIGHT_PER_HOUR
from .models import Event, HourMark, LayoutConfig
from .timefmt import format_time, fractional_hour, is_midnight

logger = logging.getLogger(__name__)

DEFAULT_FALLBACK_HOUR = LayoutConfig.fallback_hour


def hour_bounds(events: Iterable[Event], fallback_hour: int = DEFAULT_FALLBACK_HOUR):
    """
    Rounds the earliest start down and the latest end up to whole hours
    (9:30 becomes 9:00, 22:30 becomes 23:00).
    An event spanning into the next day widens the range:
    - if it ends at 00:00 the range runs until 24:00
    - if it ends at any other time the whole day is shown
    """
    events = list(events)
    if not events:
        return fallback_hour, fallback_hour + 1

    earliest = math.floor(min(fractional_hour(e.start) for e in events))
    latest = math.ceil(max(fractional_hour(e.end) for e in events))

    spanning = [e for e in events if e.end.date() > e.start.date()]
    if any(not is_midnight(e.end) for e in spanning):
        earliest, latest = 0, 24
    elif spanning:
        latest = 24

    if latest <= earliest:
        latest = earliest + 1
    return earliest, latest


def derive_axis(
    events: Iterable[Event],
    day,
    fallback_hour: int = DEFAULT_FALLBACK_HOUR,
    height_per_hour: float = HEIGHT_PER_HOUR,
    fmt: str = "HH:mm",
    locale: str = "en",
) -> List[HourMark]:
    earliest, latest = hour_bounds(events, fallback_hour)
    base = arrow.get(day).floor("day")
    logger.debug("axis for %s: %02d:00-%02d:00", base.format("YYYY-MM-DD"), earliest, latest)

    marks: List[HourMark] = []
    for idx, hour in enumerate(range(earliest, latest + 1)):
        at = base.shift(days=hour // 24).replace(hour=hour % 24)
        marks.append(
            HourMark(
                hour=hour,
                at=at,
                label=format_time(at, fmt, locale),
                offset=(idx + 0.5) * height_per_hour,
            )
        )
    return marks
