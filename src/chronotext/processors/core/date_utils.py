"""Calendar arithmetic used by the temporal parsers.

Weekdays follow ``datetime.isoweekday``: Monday is 1 and Sunday is 7. Weeks
start on Monday.
"""

import calendar
from datetime import date, datetime, timedelta
from typing import Optional, Tuple

from dateutil.relativedelta import relativedelta

MIN_VALUE = datetime.min


def is_default_value(value: Optional[datetime]) -> bool:
    return value is None or value == MIN_VALUE


def to_date_start(value: datetime) -> datetime:
    """Midnight of the given day."""
    return datetime(value.year, value.month, value.day)


def normalize_month(year: int, month: int) -> Tuple[int, int]:
    """Fold an out-of-range month (0, 13, -2 ...) into the adjacent years."""
    year += (month - 1) // 12
    month = (month - 1) % 12 + 1
    return year, month


def safe_create_from_min_value(year: int, month: int, day: int,
                               hour: int = 0, minute: int = 0, second: int = 0) -> datetime:
    """Build a datetime, returning ``MIN_VALUE`` for an impossible day.

    Month overflow rolls into the year; a day past the end of the month is
    not clamped.
    """
    year, month = normalize_month(year, month)
    if not 1 <= year <= 9999:
        return MIN_VALUE
    if not 1 <= day <= calendar.monthrange(year, month)[1]:
        return MIN_VALUE
    return datetime(year, month, day, hour, minute, second)


def add_days(value: datetime, days: float) -> datetime:
    return value + timedelta(days=days)


def add_months(value: datetime, months: int) -> datetime:
    """Shift by calendar months; the day is clamped to the target month."""
    return value + relativedelta(months=months)


def add_years(value: datetime, years: int) -> datetime:
    return value + relativedelta(years=years)


def this_weekday(value: datetime, weekday: int) -> datetime:
    """The given weekday inside the Monday-based week of ``value``."""
    return add_days(value, weekday - value.isoweekday())


def next_weekday(value: datetime, weekday: int) -> datetime:
    """The given weekday inside the following week."""
    return add_days(this_weekday(value, weekday), 7)


def last_weekday(value: datetime, weekday: int) -> datetime:
    """The given weekday inside the previous week."""
    return add_days(this_weekday(value, weekday), -7)


def upcoming_weekday(value: datetime, weekday: int) -> datetime:
    """First occurrence of ``weekday`` strictly after ``value``."""
    delta = (weekday - value.isoweekday()) % 7 or 7
    return add_days(value, delta)


def previous_weekday(value: datetime, weekday: int) -> datetime:
    """Most recent occurrence of ``weekday`` strictly before ``value``."""
    delta = (value.isoweekday() - weekday) % 7 or 7
    return add_days(value, -delta)


def nearest_weekday_pair(value: datetime, weekday: int) -> Tuple[datetime, datetime]:
    """Occurrences of ``weekday`` at/after and at/before ``value``."""
    if value.isoweekday() == weekday:
        return value, value
    return upcoming_weekday(value, weekday), previous_weekday(value, weekday)


def first_weekday_of_month(year: int, month: int, weekday: int) -> datetime:
    first = datetime(year, month, 1)
    return add_days(first, (weekday - first.isoweekday()) % 7)


def iso_week(value: datetime) -> Tuple[int, int]:
    """ISO (year, week number) of the day."""
    iso = value.isocalendar()
    return iso[0], iso[1]


def monday_of_iso_week(year: int, week: int) -> datetime:
    """Monday of an ISO week, rolling a missing week 53 into the next year."""
    try:
        monday = date.fromisocalendar(year, week, 1)
    except ValueError:
        monday = date.fromisocalendar(year + 1, 1, 1)
    return datetime(monday.year, monday.month, monday.day)


def is_feb_29(value: Optional[datetime]) -> bool:
    return value is not None and value.month == 2 and value.day == 29


def resolve_two_digit_year(year: int, min_past_num: int, max_future_num: int) -> int:
    """Expand a two digit year into a four digit one.

    Values at or above ``min_past_num`` land in the 1900s, values below
    ``max_future_num`` in the 2000s. A value matching neither threshold is
    returned unchanged.
    """
    if year >= 100:
        return year
    if year >= min_past_num:
        return 1900 + year
    if year < max_future_num:
        return 2000 + year
    return year


def generate_dates(no_year: bool, reference: datetime, year: int, month: int,
                   day: int) -> Tuple[datetime, datetime]:
    """Future and past candidates for a month/day with an optional year.

    Without a year the future date is the earliest valid occurrence at or
    after the reference day and the past date the latest valid occurrence at
    or before it. Feb 29 skips non-leap years.

    Returns:
        (future_date, past_date), ``MIN_VALUE`` when no valid date exists
    """
    if not no_year:
        value = safe_create_from_min_value(year, month, day)
        return value, value

    reference_day = to_date_start(reference)
    future_date = past_date = MIN_VALUE

    for offset in range(0, 9):
        candidate = safe_create_from_min_value(reference_day.year + offset, month, day)
        if not is_default_value(candidate) and candidate >= reference_day:
            future_date = candidate
            break

    for offset in range(0, 9):
        candidate = safe_create_from_min_value(reference_day.year - offset, month, day)
        if not is_default_value(candidate) and candidate <= reference_day:
            past_date = candidate
            break

    return future_date, past_date


def generate_month_day_dates(reference: datetime, day: int,
                             collapse_current_month: bool = False) -> Tuple[datetime, datetime]:
    """Future and past candidates for a bare day of month.

    The future date is the first month at or after the reference day having
    that day, the past date the latest month at or before it. With
    ``collapse_current_month`` a day still ahead in the reference month
    resolves to that same date on both sides.
    """
    reference_day = to_date_start(reference)
    future_date = past_date = MIN_VALUE

    for offset in range(0, 13):
        candidate = safe_create_from_min_value(reference_day.year, reference_day.month + offset, day)
        if not is_default_value(candidate) and candidate >= reference_day:
            future_date = candidate
            break

    if (collapse_current_month and not is_default_value(future_date)
            and (future_date.year, future_date.month) == (reference_day.year, reference_day.month)):
        return future_date, future_date

    for offset in range(0, 13):
        candidate = safe_create_from_min_value(reference_day.year, reference_day.month - offset, day)
        if not is_default_value(candidate) and candidate <= reference_day:
            past_date = candidate
            break

    return future_date, past_date
