from __future__ import annotations

from typing import Iterable, List

from .models import Event
from .timefmt import is_midnight, is_same_day


def is_displayed_on(event: Event, day) -> bool:
    # an event ending exactly at midnight belongs to the day it started on
    if is_same_day(event.start, day):
        return True
    return is_same_day(event.end, day) and not is_midnight(event.end)


def events_for_day(events: Iterable[Event], day) -> List[Event]:
    return [event for event in events if is_displayed_on(event, day)]
