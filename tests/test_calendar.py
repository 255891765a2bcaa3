from datetime import date, datetime, timedelta

import pytest

from stridestat.models.activity import DateWindow
from stridestat.services import calendar


def test_week_start_wednesday():
    assert calendar.week_start(date(2025, 12, 24)) == datetime(2025, 12, 22)


def test_week_end_wednesday():
    assert calendar.week_end(date(2025, 12, 24)) == datetime(2025, 12, 28, 23, 59, 59, 999000)


def test_sunday_belongs_to_previous_monday():
    assert calendar.week_start(date(2025, 12, 28)) == datetime(2025, 12, 22)
    assert calendar.week_start(datetime(2025, 12, 28, 23, 0)) == datetime(2025, 12, 22)


def test_monday_is_its_own_week_start():
    assert calendar.week_start(datetime(2025, 12, 22, 18, 45)) == datetime(2025, 12, 22)


@pytest.mark.parametrize("offset", range(0, 21))
def test_week_bounds_for_many_days(offset):
    day = date(2025, 12, 15) + timedelta(days=offset)
    start = calendar.week_start(day)
    end = calendar.week_end(day)
    assert start.weekday() == 0
    assert end.weekday() == 6
    assert end - start == timedelta(days=6, hours=23, minutes=59, seconds=59, milliseconds=999)
    assert start <= datetime.combine(day, datetime.min.time()) <= end


def test_days_of_a_week_share_the_window():
    windows = {calendar.week_window(date(2025, 12, 22) + timedelta(days=i)) for i in range(7)}
    assert len(windows) == 1


def test_four_week_window():
    window = calendar.four_week_window(date(2025, 12, 26))
    assert window.start_date == datetime(2025, 12, 1)
    assert window.end_date == calendar.week_end(date(2025, 12, 26))
    assert (window.end_date.date() - window.start_date.date()).days + 1 == 28


def test_four_week_window_across_years():
    window = calendar.four_week_window(date(2026, 1, 2))
    assert window.start_date == datetime(2025, 12, 8)
    assert window.end_date == datetime(2026, 1, 4, 23, 59, 59, 999000)


def test_offset_date():
    assert calendar.offset_date(date(2025, 12, 24), -1) == date(2025, 12, 17)
    assert calendar.offset_date(date(2025, 12, 24), 2) == date(2026, 1, 7)
    assert calendar.offset_date(date(2025, 12, 24), 0) == date(2025, 12, 24)


def test_inclusive_day_count():
    assert calendar.inclusive_day_count(date(2025, 12, 1), datetime(2025, 12, 24, 10)) == 24
    assert calendar.inclusive_day_count(date(2025, 12, 24), date(2025, 12, 24)) == 1


def test_forward_only_from_the_past():
    assert calendar.can_go_forward(-1)
    assert not calendar.can_go_forward(0)
    assert not calendar.can_go_forward(3)


def test_backward_requires_start_after_creation():
    window = calendar.week_window(date(2025, 12, 10))
    assert calendar.can_go_backward(window, date(2025, 12, 1))
    assert not calendar.can_go_backward(window, date(2025, 12, 8))
    assert not calendar.can_go_backward(window, date(2025, 12, 9))


def test_navigation_state_in_the_past():
    window = calendar.week_window(date(2025, 12, 10))
    state = calendar.navigation_state(-2, 1, window, date(2025, 12, 1))
    assert state.can_go_backward and state.can_go_forward
    assert state.previous_offset == -3
    assert state.next_offset == -1


def test_navigation_state_at_both_bounds():
    window = DateWindow(
        start_date=datetime(2025, 12, 1), end_date=datetime(2025, 12, 28, 23, 59, 59, 999000)
    )
    state = calendar.navigation_state(0, 4, window, date(2025, 12, 1))
    assert not state.can_go_backward
    assert not state.can_go_forward
    assert state.previous_offset is None
    assert state.next_offset is None


def test_clamp_offset():
    assert calendar.clamp_offset(5) == 0
    assert calendar.clamp_offset(-4) == -4
