import arrow

from dayview import Event, events_for_day, is_displayed_on

from conftest import next_day


def test_event_starting_on_day_is_shown(make_event, day):
    assert is_displayed_on(make_event("09:00", "10:00"), day)


def test_event_on_other_day_is_hidden(make_event, day):
    assert not is_displayed_on(make_event("09:00", "10:00"), day.shift(days=1))


def test_event_ending_at_midnight_is_not_shown_next_day(make_event, day):
    event = make_event("22:00", "00:00", end_day=next_day())
    assert is_displayed_on(event, day)
    assert not is_displayed_on(event, day.shift(days=1))


def test_event_running_past_midnight_is_shown_next_day(make_event, day):
    event = make_event("22:00", "01:30", end_day=next_day())
    assert is_displayed_on(event, day.shift(days=1))


def test_event_ending_at_full_hour_past_midnight_is_shown_next_day(make_event, day):
    event = make_event("22:00", "01:00", end_day=next_day())
    assert is_displayed_on(event, day.shift(days=1))


def test_events_for_day_keeps_order(make_event, day):
    a = make_event("15:00", "16:00", title="a")
    b = make_event("09:00", "10:00", title="b")
    c = make_event("09:00", "10:00", title="c")
    c = Event(start=c.start.shift(days=3), end=c.end.shift(days=3), title="c")
    assert [e.title for e in events_for_day([a, c, b], day)] == ["a", "b"]


def test_accepts_plain_dates(make_event):
    event = make_event("09:00", "10:00")
    assert is_displayed_on(event, arrow.get("2022-10-01").date())
