from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Union

import arrow

from .dayfilter import events_for_day
from .geometry import duration_of, height_of, position_of
from .hours import derive_axis
from .models import ClockState, DayLayout, Event, LayoutConfig, LayoutRect
from .timefmt import format_range, format_time, is_same_day

logger = logging.getLogger(__name__)

Now = Union[arrow.Arrow, ClockState, None]


def _resolve_now(now: Now) -> Optional[arrow.Arrow]:
    if isinstance(now, ClockState):
        return now.time if now.ready else None
    if now is None:
        return None
    return arrow.get(now)


def layout_event(event: Event, axis_start: arrow.Arrow, config: LayoutConfig) -> LayoutRect:
    """
    Boxes are indented by priority so lower priority events stack to the
    right of the ones they overlap. This is not a real packing of
    overlapping intervals.
    """
    indent = event.priority - 1
    top = position_of(axis_start, event.start, config.height_per_hour) + config.margin
    height = height_of(event.start, event.end, config.height_per_hour) - 2 * config.margin
    return LayoutRect(
        uuid=event.uuid,
        top=top,
        height=max(0.0, height),
        left_offset=config.indent_step * indent,
        width_adjust=config.width_step * indent,
        priority=event.priority,
        title=event.title,
        time_label=format_range(event.start, event.end, config.time_format, config.locale),
        short_location=event.short_location,
        show_location=duration_of(event.start, event.end) > 1,
        event=event,
    )


def compute_layout(
    day,
    events: Iterable[Event],
    now: Now = None,
    config: Optional[LayoutConfig] = None,
) -> DayLayout:
    config = config or LayoutConfig()
    day = arrow.get(day)
    events = list(events)

    # the hour range covers every event, not only the ones shown on this day
    axis = derive_axis(
        events,
        day,
        fallback_hour=config.fallback_hour,
        height_per_hour=config.height_per_hour,
        fmt=config.time_format,
        locale=config.locale,
    )
    axis_start = axis[0].at

    rects: List[LayoutRect] = [layout_event(e, axis_start, config) for e in events_for_day(events, day)]

    now_line = None
    now_label = None
    current = _resolve_now(now)
    if current is not None and is_same_day(day, current):
        now_line = position_of(axis_start, current, config.height_per_hour)
        now_label = format_time(current, config.time_format, config.locale)

    logger.debug(
        "layout for %s: %d hours, %d of %d events, now line %s",
        day.format("YYYY-MM-DD"),
        len(axis),
        len(rects),
        len(events),
        now_line,
    )
    return DayLayout(day=day, axis=axis, rects=rects, now_line=now_line, now_label=now_label)
