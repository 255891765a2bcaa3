"""Localized date labels."""

from datetime import date, datetime
from typing import Union

DateLike = Union[date, datetime]

SHORT_MONTHS = {
    "fr": ["jan", "fév", "mars", "avr", "mai", "juin", "juil", "août", "sept", "oct", "nov", "déc"],
    "en": ["Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"],
}

LONG_MONTHS = {
    "fr": [
        "janvier", "février", "mars", "avril", "mai", "juin",
        "juillet", "août", "septembre", "octobre", "novembre", "décembre",
    ],
    "en": [
        "January", "February", "March", "April", "May", "June",
        "July", "August", "September", "October", "November", "December",
    ],
}

DAY_LABELS = {
    "fr": ["Lun", "Mar", "Mer", "Jeu", "Ven", "Sam", "Dim"],
    "en": ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"],
}

WEEK_PREFIX = {"fr": "S", "en": "W"}

PERIOD_TEMPLATES = {
    "fr": "Du {start} au {end}",
    "en": "From {start} to {end}",
}


def _table(tables: dict, locale: str):
    try:
        return tables[locale]
    except KeyError:
        raise ValueError(f"Unsupported locale: {locale}")


def day_labels(locale: str = "fr") -> list[str]:
    """Weekday abbreviations, Monday first."""
    return list(_table(DAY_LABELS, locale))


def week_label(index: int, locale: str = "fr") -> str:
    """Label of the n-th week (1-based) of a period."""
    return f"{_table(WEEK_PREFIX, locale)}{index}"


def _day_month(value: DateLike, locale: str) -> str:
    return f"{value.day:02d} {_table(SHORT_MONTHS, locale)[value.month - 1]}"


def format_date_range(start: DateLike, end: DateLike, locale: str = "fr") -> str:
    """
    Format a date range for chart headers.

    Both ends carry their year when the range spans two years, e.g.
    "22 déc - 28 déc" or "29 déc 2025 - 04 jan 2026". The two ends are
    not reordered.

    Args:
        start: First day of the range
        end: Last day of the range
        locale: Locale code ("fr" or "en")

    Returns:
        Formatted range
    """
    start_text = _day_month(start, locale)
    end_text = _day_month(end, locale)
    if start.year != end.year:
        start_text = f"{start_text} {start.year}"
        end_text = f"{end_text} {end.year}"
    return f"{start_text} - {end_text}"


def format_date_long(value: DateLike, locale: str = "fr") -> str:
    """Format a date as "01 janvier 2025"."""
    month = _table(LONG_MONTHS, locale)[value.month - 1]
    return f"{value.day:02d} {month} {value.year}"


def format_date_short(value: DateLike) -> str:
    """Format a date as "01/01/2025"."""
    return value.strftime("%d/%m/%Y")


def format_period(start: DateLike, end: DateLike, locale: str = "fr") -> str:
    """Sentence describing a period, e.g. "Du 22/12/2025 au 28/12/2025"."""
    template = _table(PERIOD_TEMPLATES, locale)
    return template.format(start=format_date_short(start), end=format_date_short(end))
