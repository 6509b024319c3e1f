"""
Day view renderer (hour axis + event boxes + now-line).
Geometry comes from the dayview package, this module only draws it.
"""
from __future__ import annotations

import logging
import os
import re
from typing import Dict, Iterable, Tuple

import arrow
from PIL import Image, ImageDraw, ImageFont

from dayview import DayLayout, Event, LayoutConfig, compute_layout

logger = logging.getLogger(__name__)

BASE_DIR = os.path.abspath(os.path.dirname(__file__))
FONT_DIR = os.path.join(BASE_DIR, "fonts")

FONTS = {
    "regular": os.path.join(FONT_DIR, "NotoSans-SemiCondensed.ttf"),
    "semibold": os.path.join(FONT_DIR, "NotoSans-SemiCondensedSemiBold.ttf"),
}

DEFAULT_COLORS = {
    1: "#60a5fa",
    2: "#93c5fd",
}

LABEL_COLUMN_W = 56
NOW_LINE_H = 4


def _parse_color(value, default: Tuple[int, int, int] = (0, 0, 0)) -> Tuple[int, int, int]:
    if isinstance(value, (tuple, list)) and len(value) == 3:
        return tuple(int(c) for c in value)
    if not value:
        return default
    value = str(value).strip().lower()
    named = {
        "black": (0, 0, 0),
        "white": (255, 255, 255),
        "red": (248, 113, 113),
        "blue": (96, 165, 250),
        "lightblue": (147, 197, 253),
        "gray": (229, 231, 235),
        "grey": (229, 231, 235),
    }
    if value in named:
        return named[value]
    if re.fullmatch(r"#[0-9a-f]{6}", value):
        return tuple(int(value[i : i + 2], 16) for i in (1, 3, 5))
    return default


def _load_font(key_or_path: str, size: int) -> ImageFont.ImageFont:
    path = FONTS.get(key_or_path, key_or_path)
    try:
        return ImageFont.truetype(path, size)
    except Exception:
        return ImageFont.load_default()


def _text_w(font, text: str) -> int:
    box = font.getbbox(text)
    return box[2] - box[0]


def _text_h(font, text: str = "Ag") -> int:
    box = font.getbbox(text)
    return box[3] - box[1]


def _truncate_text(font, text: str, max_w: int) -> str:
    if font.getbbox(text)[2] <= max_w:
        return text
    if max_w <= 0:
        return ""
    suffix = "..."
    trimmed = text
    while trimmed and font.getbbox(trimmed + suffix)[2] > max_w:
        trimmed = trimmed[:-1]
    return (trimmed + suffix) if trimmed else ""


class DayBoard:
    def __init__(self, config: Dict):
        cfg = config.get("dayview", {})
        self.layout_config = LayoutConfig.from_dict(cfg)
        self.width = int(cfg.get("width", 480))
        self.padding_top = int(cfg.get("padding_top", 5))
        self.padding_bottom = int(cfg.get("padding_bottom", 5))
        self.fontsize = int(cfg.get("fontsize", 14))
        colors = cfg.get("colors") or DEFAULT_COLORS
        self.colors: Dict[int, Tuple[int, int, int]] = {
            int(priority): _parse_color(color) for priority, color in colors.items()
        }
        self.fallback_color = _parse_color(cfg.get("fallback_color"), (147, 197, 253))
        self.now_color = _parse_color(cfg.get("now_color"), (248, 113, 113))
        self.grid_color = _parse_color(cfg.get("grid_color"), (229, 231, 235))

    def color_for(self, priority: int) -> Tuple[int, int, int]:
        return self.colors.get(priority, self.fallback_color)

    def layout(self, day, events: Iterable[Event], now=None) -> DayLayout:
        return compute_layout(day, events, now=now, config=self.layout_config)

    # -------- Drawing --------
    def _draw_axis(self, draw: ImageDraw.ImageDraw, layout: DayLayout, y0: int):
        font = _load_font("semibold", self.fontsize)
        half = self.layout_config.height_per_hour / 2
        for mark in layout.axis:
            cy = y0 + mark.offset
            draw.line((LABEL_COLUMN_W, cy, self.width - LABEL_COLUMN_W, cy), fill=self.grid_color, width=1)
            x = LABEL_COLUMN_W - 4 - _text_w(font, mark.label)
            top = cy - min(half, _text_h(font) / 2)
            draw.rectangle((x - 2, top, LABEL_COLUMN_W - 2, top + _text_h(font) + 2), fill="white")
            draw.text((x, top), mark.label, fill="black", font=font)

    def _draw_events(self, draw: ImageDraw.ImageDraw, layout: DayLayout, y0: int):
        title_font = _load_font("regular", self.fontsize)
        meta_font = _load_font("regular", max(8, int(self.fontsize * 0.8)))
        area_x0 = LABEL_COLUMN_W
        area_w = self.width - 2 * LABEL_COLUMN_W
        line_h = _text_h(title_font) + 3
        for rect in layout.rects:
            if rect.height <= 0:
                continue
            x0 = int(area_x0 + rect.left_offset)
            x1 = max(x0 + 1, int(min(area_x0 + area_w, x0 + area_w - rect.width_adjust)))
            top = int(y0 + rect.top)
            bottom = max(top + 1, int(top + rect.height))
            draw.rounded_rectangle((x0, top, x1, bottom), radius=6, fill=self.color_for(rect.priority))

            max_w = int(x1 - x0 - 8)
            cursor_y = top + 2
            lines = [(rect.title, title_font), (rect.time_label, meta_font)]
            if rect.show_location and rect.short_location:
                lines.append((rect.short_location, meta_font))
            for text, font in lines:
                if cursor_y + _text_h(font) > bottom:
                    break
                draw.text((x0 + 6, cursor_y), _truncate_text(font, text, max_w), fill="white", font=font)
                cursor_y += line_h

    def _draw_now(self, draw: ImageDraw.ImageDraw, layout: DayLayout, y0: int):
        if layout.now_line is None:
            return
        y = y0 + layout.now_line
        draw.rectangle((0, y - NOW_LINE_H / 2, self.width, y + NOW_LINE_H / 2), fill=self.now_color)
        font = _load_font("regular", self.fontsize)
        label = layout.now_label or ""
        x = self.width - LABEL_COLUMN_W + 6
        top = y - _text_h(font) - NOW_LINE_H
        draw.rectangle((x - 2, top, x + _text_w(font, label) + 2, top + _text_h(font) + 2), fill="white")
        draw.text((x, top), label, fill=self.now_color, font=font)

    def render(self, layout: DayLayout) -> Image.Image:
        height = int(layout.total_height(self.layout_config.height_per_hour)) + self.padding_top + self.padding_bottom
        base = Image.new("RGB", (self.width, max(1, height)), "white")
        draw = ImageDraw.Draw(base)
        self._draw_axis(draw, layout, self.padding_top)
        self._draw_events(draw, layout, self.padding_top)
        self._draw_now(draw, layout, self.padding_top)
        return base

    def generate_image(self, day, events: Iterable[Event], now=None) -> Image.Image:
        day = arrow.get(day)
        layout = self.layout(day, events, now)
        logger.info("rendering day view for %s (%d events)", day.format("YYYY-MM-DD"), len(layout.rects))
        return self.render(layout)
