from __future__ import annotations

import arrow


def format_time(ts: arrow.Arrow, fmt: str = "HH:mm", locale: str = "en") -> str:
    return arrow.get(ts).format(fmt, locale=locale)


def format_range(start: arrow.Arrow, end: arrow.Arrow, fmt: str = "HH:mm", locale: str = "en") -> str:
    return f"{format_time(start, fmt, locale)} - {format_time(end, fmt, locale)}"


def is_same_day(a, b) -> bool:
    return arrow.get(a).date() == arrow.get(b).date()


def fractional_hour(ts: arrow.Arrow) -> float:
    return ts.hour + ts.minute / 60


def is_midnight(ts: arrow.Arrow) -> bool:
    return ts.hour == 0 and ts.minute == 0
