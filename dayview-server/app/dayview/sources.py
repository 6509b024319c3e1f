from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import Dict, Iterable, List, Optional

import arrow
import recurring_ical_events
import requests
from icalendar import Calendar
from tzlocal import get_localzone

from .models import Event

logger = logging.getLogger(__name__)


@dataclass
class FeedConfig:
    name: str
    url: Optional[str] = None
    path: Optional[str] = None
    priority: int = 1

    @classmethod
    def from_dict(cls, feed: Dict) -> "FeedConfig":
        return cls(
            name=feed.get("name", "Calendar"),
            url=feed.get("url"),
            path=feed.get("file"),
            priority=max(1, int(feed.get("priority", 1))),
        )


def get_system_tz():
    try:
        return get_localzone()
    except Exception:
        return None


def short_location(location: Optional[str]) -> str:
    if not location:
        return ""
    return str(location).split(",")[0].strip()


def _read_feed(feed: FeedConfig) -> Optional[Calendar]:
    if feed.url:
        response = requests.get(feed.url, timeout=10)
        response.raise_for_status()
        return Calendar.from_ical(response.text)
    if feed.path:
        with open(feed.path, "r") as f:
            return Calendar.from_ical(f.read())
    return None


def events_from_calendar(
    ical: Calendar,
    start: arrow.Arrow,
    end: arrow.Arrow,
    priority: int = 1,
    tzinfo=None,
) -> List[Event]:
    fmt = lambda d: (d.year, d.month, d.day, d.hour, d.minute, d.second)
    events = []
    for ev in recurring_ical_events.of(ical).between(fmt(start), fmt(end)):
        dtstart = ev.get("DTSTART").dt
        dtend = ev.get("DTEND").dt if ev.get("DTEND") else dtstart
        # all-day entries have no place on the hour grid
        if isinstance(dtstart, date) and not isinstance(dtstart, datetime):
            continue
        begin = arrow.get(dtstart)
        endt = arrow.get(dtend)
        if tzinfo:
            begin = begin.to(tzinfo)
            endt = endt.to(tzinfo)
        uid = str(ev.get("UID", "")) or str(ev.get("SUMMARY", ""))
        events.append(
            Event(
                start=begin,
                end=endt,
                title=str(ev.get("SUMMARY", "")).lstrip(),
                short_location=short_location(ev.get("LOCATION")),
                priority=priority,
                uuid=f"{uid}@{begin.isoformat()}",
            )
        )
    return events


def load_events(feeds: Iterable[Dict], start, end, tzinfo=None) -> List[Event]:
    start = arrow.get(start)
    end = arrow.get(end)
    tzinfo = tzinfo or get_system_tz()
    events: List[Event] = []
    for raw in feeds:
        feed = raw if isinstance(raw, FeedConfig) else FeedConfig.from_dict(raw)
        try:
            ical = _read_feed(feed)
        except (requests.RequestException, OSError, ValueError) as exc:
            logger.warning("skipping feed %s: %s", feed.name, exc)
            continue
        if ical is None:
            logger.warning("feed %s has neither url nor file", feed.name)
            continue
        events.extend(events_from_calendar(ical, start, end, feed.priority, tzinfo))
    events.sort(key=lambda e: (e.start, e.priority))
    return events
