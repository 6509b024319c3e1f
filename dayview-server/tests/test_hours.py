from dayview import Event, derive_axis, hour_bounds

from conftest import next_day


def test_bounds_round_to_whole_hours(make_event):
    events = [make_event("09:30", "10:15"), make_event("13:00", "22:30")]
    assert hour_bounds(events) == (9, 23)


def test_empty_events_use_fallback_window(day):
    axis = derive_axis([], day)
    assert [m.hour for m in axis] == [8, 9]
    assert hour_bounds([], fallback_hour=12) == (12, 13)


def test_spanning_event_ending_at_midnight_extends_to_24(make_event, day):
    events = [
        make_event("09:30", "10:15"),
        make_event("22:00", "00:00", end_day=next_day()),
    ]
    axis = derive_axis(events, day)
    assert axis[0].hour == 9
    assert axis[-1].hour == 24
    assert [m.hour for m in axis] == list(range(9, 25))


def test_spanning_event_ending_after_midnight_takes_whole_day(make_event):
    events = [make_event("09:30", "10:15"), make_event("22:00", "01:30", end_day=next_day())]
    assert hour_bounds(events) == (0, 24)


def test_any_spanning_event_past_midnight_wins(make_event):
    events = [
        make_event("20:00", "00:00", end_day=next_day()),
        make_event("23:00", "02:00", end_day=next_day()),
    ]
    assert hour_bounds(events) == (0, 24)


def test_axis_always_has_two_marks(make_event, day):
    axis = derive_axis([make_event("09:00", "09:00")], day)
    assert len(axis) == 2


def test_axis_covers_every_event(make_event, day):
    events = [make_event("07:45", "08:10"), make_event("11:05", "14:59")]
    axis = derive_axis(events, day)
    assert axis[0].hour <= 7.75
    assert axis[-1].hour >= 14 + 59 / 60


def test_marks_are_contiguous_and_labelled(make_event, day):
    axis = derive_axis([make_event("09:00", "12:00")], day, height_per_hour=48)
    assert [m.label for m in axis] == ["09:00", "10:00", "11:00", "12:00"]
    assert [m.offset for m in axis] == [24, 72, 120, 168]
    for prev, cur in zip(axis, axis[1:]):
        assert (cur.at - prev.at).total_seconds() == 3600


def test_hour_24_is_next_days_midnight(make_event, day):
    axis = derive_axis([make_event("22:00", "00:00", end_day=next_day())], day)
    last = axis[-1]
    assert last.at.format("YYYY-MM-DD HH:mm") == next_day() + " 00:00"
    assert last.label == "00:00"


def test_end_on_earlier_day_does_not_widen_axis(make_event):
    event = make_event("09:00", "10:00")
    event = Event(start=event.start.shift(days=1), end=event.end, title="backwards")
    assert hour_bounds([event]) == (9, 10)
