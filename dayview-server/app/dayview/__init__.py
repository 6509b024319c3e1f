"""
Day-view calendar geometry: hour axis, event boxes and the now-line.
"""
from .clock import ClockSubscription, LiveClock
from .dayfilter import events_for_day, is_displayed_on
from .geometry import HEIGHT_PER_HOUR, LABEL_OFFSET, duration_of, height_of, position_of
from .hours import derive_axis, hour_bounds
from .layout import compute_layout
from .models import ClockState, DayLayout, Event, HourMark, LayoutConfig, LayoutRect
from .timefmt import format_range, format_time, is_same_day

__all__ = [
    "ClockState",
    "ClockSubscription",
    "DayLayout",
    "Event",
    "HEIGHT_PER_HOUR",
    "HourMark",
    "LABEL_OFFSET",
    "LayoutConfig",
    "LayoutRect",
    "LiveClock",
    "compute_layout",
    "derive_axis",
    "duration_of",
    "events_for_day",
    "format_range",
    "format_time",
    "height_of",
    "hour_bounds",
    "is_displayed_on",
    "is_same_day",
    "position_of",
]
