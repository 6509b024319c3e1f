from __future__ import annotations

import logging

import arrow

from .timefmt import fractional_hour

logger = logging.getLogger(__name__)

HEIGHT_PER_HOUR = 48
# labels sit in the middle of their hour row
LABEL_OFFSET = 0.5


def position_of(axis_start: arrow.Arrow, ts: arrow.Arrow, height_per_hour: float = HEIGHT_PER_HOUR) -> float:
    """
    The position is the distance in hours between the first hour of the axis
    and the given time, shifted by half a row.
    """
    hours_from_start = ts.hour - axis_start.hour + ts.minute / 60 + LABEL_OFFSET
    return hours_from_start * height_per_hour


def end_hour(start: arrow.Arrow, end: arrow.Arrow) -> float:
    # an end on a later day than the start counts as 24:00 of the start day
    if end.date() > start.date():
        return 24.0
    return fractional_hour(end)


def duration_of(start: arrow.Arrow, end: arrow.Arrow) -> float:
    duration = 0.0 if end <= start else end_hour(start, end) - fractional_hour(start)
    if duration <= 0:
        logger.warning("event ending before it starts (%s - %s), using zero height", start, end)
        return 0.0
    return duration


def height_of(start: arrow.Arrow, end: arrow.Arrow, height_per_hour: float = HEIGHT_PER_HOUR) -> float:
    """The height of an event is its length times the height of an hour."""
    return duration_of(start, end) * height_per_hour
