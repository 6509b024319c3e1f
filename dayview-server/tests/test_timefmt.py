from datetime import datetime

import arrow
import pytest

from dayview import Event, LayoutConfig, format_range, format_time, is_same_day

from conftest import at, next_day


def test_format_time():
    assert format_time(at("09:05")) == "09:05"
    assert format_time(at("21:30"), "h:mm a") == "9:30 pm"


def test_format_range():
    assert format_range(at("09:00"), at("10:15")) == "09:00 - 10:15"


def test_is_same_day():
    assert is_same_day(at("00:00"), at("23:59"))
    assert not is_same_day(at("23:59"), at("00:00", next_day()))


def test_event_coerces_datetimes():
    event = Event(start=datetime(2022, 10, 1, 9, 0), end=datetime(2022, 10, 1, 10, 0), title="Call")
    assert isinstance(event.start, arrow.Arrow)
    assert event.start.hour == 9
    assert event.uuid == "Call@" + event.start.isoformat()


def test_event_rejects_priority_below_one():
    with pytest.raises(ValueError):
        Event(start=at("09:00"), end=at("10:00"), priority=0)


def test_layout_config_from_dict():
    config = LayoutConfig.from_dict({"height_per_hour": 60, "locale": "de"})
    assert config.height_per_hour == 60
    assert config.margin == 2
    assert config.locale == "de"
    assert LayoutConfig.from_dict(None) == LayoutConfig()
