"""Calendar weeks, rolling windows and navigation bounds.

Weeks run from Monday 00:00:00.000 to Sunday 23:59:59.999 in local time.
Every function takes its reference date explicitly; nothing here reads the
clock.
"""

from datetime import date, datetime, time, timedelta
from typing import Union
from stridestat.models.activity import DateWindow
from stridestat.models.dashboard import NavigationState

DateLike = Union[date, datetime]

END_OF_DAY = time(23, 59, 59, 999000)
WEEKS_PER_PERIOD = 4
HEART_RATE_STEP = 1
DISTANCE_STEP = WEEKS_PER_PERIOD


def start_of_day(value: DateLike) -> datetime:
    """Midnight of the day containing ``value``."""
    if isinstance(value, datetime):
        value = value.date()
    return datetime.combine(value, time.min)


def end_of_day(value: DateLike) -> datetime:
    """Last millisecond of the day containing ``value``."""
    if isinstance(value, datetime):
        value = value.date()
    return datetime.combine(value, END_OF_DAY)


def week_start(value: DateLike) -> datetime:
    """
    Get the Monday opening the calendar week of a date.

    Args:
        value: Any date or datetime

    Returns:
        Monday of that week at 00:00:00.000
    """
    day = start_of_day(value)
    return day - timedelta(days=day.weekday())


def week_end(value: DateLike) -> datetime:
    """
    Get the Sunday closing the calendar week of a date.

    Args:
        value: Any date or datetime

    Returns:
        Sunday of that week at 23:59:59.999
    """
    return end_of_day(week_start(value) + timedelta(days=6))


def week_window(value: DateLike) -> DateWindow:
    return DateWindow(start_date=week_start(value), end_date=week_end(value))


def four_week_window(value: DateLike) -> DateWindow:
    """
    Get the four calendar weeks ending with the week of a date.

    Args:
        value: Reference date, inside the most recent week

    Returns:
        Window spanning 28 days, Monday to Sunday
    """
    end = week_end(value)
    start = start_of_day(end - timedelta(days=WEEKS_PER_PERIOD * 7 - 1))
    return DateWindow(start_date=start, end_date=end)


def offset_date(today: DateLike, week_offset: int) -> DateLike:
    """Shift a date by a signed number of weeks."""
    return today + timedelta(weeks=week_offset)


def inclusive_day_count(start: DateLike, end: DateLike) -> int:
    """Number of calendar days from ``start`` to ``end``, both included."""
    return (start_of_day(end) - start_of_day(start)).days + 1


def can_go_forward(week_offset: int) -> bool:
    """A chart may only move forward while it shows a past period."""
    return week_offset < 0


def can_go_backward(window: DateWindow, created_at: DateLike) -> bool:
    """A chart may only move backward while its window starts after account creation."""
    return window.start_date > start_of_day(created_at)


def clamp_offset(week_offset: int) -> int:
    """Offsets pointing past the current week are pulled back to it."""
    return min(week_offset, 0)


def navigation_state(
    week_offset: int, step: int, window: DateWindow, created_at: DateLike
) -> NavigationState:
    """
    Describe the navigation permitted from a displayed window.

    Args:
        week_offset: Offset in weeks of the displayed window (0 = current week)
        step: Weeks moved by a single click
        window: Window currently displayed
        created_at: Account creation date

    Returns:
        NavigationState with the offsets reachable in each direction
    """
    backward = can_go_backward(window, created_at)
    forward = can_go_forward(week_offset)
    return NavigationState(
        offset=week_offset,
        step=step,
        can_go_backward=backward,
        can_go_forward=forward,
        previous_offset=week_offset - step if backward else None,
        next_offset=min(week_offset + step, 0) if forward else None,
    )
