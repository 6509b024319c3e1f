from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import arrow

from .geometry import HEIGHT_PER_HOUR


@dataclass(frozen=True)
class Event:
    start: arrow.Arrow
    end: arrow.Arrow
    title: str = ""
    short_location: str = ""
    priority: int = 1
    uuid: str = ""

    def __post_init__(self):
        # no timezone conversion, only coercion to Arrow
        object.__setattr__(self, "start", arrow.get(self.start))
        object.__setattr__(self, "end", arrow.get(self.end))
        if int(self.priority) < 1:
            raise ValueError(f"priority must be >= 1, got {self.priority!r}")
        object.__setattr__(self, "priority", int(self.priority))
        if not self.uuid:
            object.__setattr__(self, "uuid", f"{self.title}@{self.start.isoformat()}")


@dataclass(frozen=True)
class HourMark:
    hour: int
    at: arrow.Arrow
    label: str
    offset: float


@dataclass(frozen=True)
class LayoutRect:
    uuid: str
    top: float
    height: float
    left_offset: float
    width_adjust: float
    priority: int
    title: str = ""
    time_label: str = ""
    short_location: str = ""
    show_location: bool = False
    event: Optional[Event] = field(default=None, compare=False, repr=False)


@dataclass(frozen=True)
class ClockState:
    ready: bool = False
    time: Optional[arrow.Arrow] = None


@dataclass
class LayoutConfig:
    height_per_hour: float = HEIGHT_PER_HOUR
    margin: float = 2
    indent_step: float = 16
    width_step: float = 8
    fallback_hour: int = 8
    time_format: str = "HH:mm"
    locale: str = "en"

    @classmethod
    def from_dict(cls, cfg: Optional[Dict]) -> "LayoutConfig":
        cfg = cfg or {}
        defaults = cls()
        return cls(
            height_per_hour=float(cfg.get("height_per_hour", defaults.height_per_hour)),
            margin=float(cfg.get("margin", defaults.margin)),
            indent_step=float(cfg.get("indent_step", defaults.indent_step)),
            width_step=float(cfg.get("width_step", defaults.width_step)),
            fallback_hour=int(cfg.get("fallback_hour", defaults.fallback_hour)),
            time_format=str(cfg.get("time_format", defaults.time_format)),
            locale=str(cfg.get("locale", defaults.locale)),
        )


@dataclass
class DayLayout:
    """Geometry for one render pass of the day view.

    ``axis`` holds the hour labels, ``rects`` one box per displayed event in
    input order, ``now_line`` the offset of the current-time indicator or
    ``None`` when it must not be drawn.
    """

    day: arrow.Arrow
    axis: List[HourMark]
    rects: List[LayoutRect]
    now_line: Optional[float] = None
    now_label: Optional[str] = None

    @property
    def axis_start(self) -> arrow.Arrow:
        return self.axis[0].at

    def total_height(self, height_per_hour: float) -> float:
        return len(self.axis) * height_per_hour

    def to_dict(self) -> Dict[str, Any]:
        return {
            "date": self.day.format("YYYY-MM-DD"),
            "axis": [
                {"hour": m.hour, "time": m.at.isoformat(), "label": m.label, "offset": m.offset}
                for m in self.axis
            ],
            "events": [
                {
                    "uuid": r.uuid,
                    "top": r.top,
                    "height": r.height,
                    "left": r.left_offset,
                    "width_adjust": r.width_adjust,
                    "priority": r.priority,
                    "title": r.title,
                    "time": r.time_label,
                    "location": r.short_location if r.show_location else None,
                }
                for r in self.rects
            ],
            "now": None if self.now_line is None else {"offset": self.now_line, "label": self.now_label},
        }
