"""Timex and resolution string formatting.

A timex uses ``X`` for unspecified fields (``XXXX-12-25``), ``P``/``T``
prefixes for durations and times (``P3D``, ``PT2H``, ``T15:30``) and the
``(begin,end,duration)`` triple for resolved periods.
"""

from datetime import datetime
from typing import Optional, Union

from .constants import Constants
from .date_utils import is_default_value

Number = Union[int, float]

TIME_UNITS = ("H", "M", "S")


def to_string(num: int, digits: int) -> str:
    """Zero padded integer."""
    return str(num).zfill(digits)


def format_number(num: Number) -> str:
    """Integral values without a trailing ``.0``."""
    if float(num).is_integer():
        return str(int(num))
    return repr(float(num))


def luis_date(year: int, month: int, day: int) -> str:
    """Date timex where -1 marks an unspecified field."""
    year_str = Constants.TIMEX_FUZZY_YEAR if year == -1 else to_string(year, 4)
    month_str = Constants.TIMEX_FUZZY_MONTH if month == -1 else to_string(month, 2)
    day_str = Constants.TIMEX_FUZZY_DAY if day == -1 else to_string(day, 2)
    return f"{year_str}-{month_str}-{day_str}"


def luis_date_from_datetime(value: datetime) -> str:
    return luis_date(value.year, value.month, value.day)


def luis_time(hour: int, minute: int, second: int) -> str:
    return f"{to_string(hour, 2)}:{to_string(minute, 2)}:{to_string(second, 2)}"


def luis_date_time(value: datetime) -> str:
    return f"{luis_date_from_datetime(value)}T{luis_time(value.hour, value.minute, value.second)}"


def time_timex(hour: int, minute: Optional[int] = None, second: Optional[int] = None) -> str:
    """``Thh``, ``Thh:mm`` or ``Thh:mm:ss`` depending on the given parts."""
    timex = f"T{to_string(hour, 2)}"
    if minute is not None:
        timex += f":{to_string(minute, 2)}"
        if second is not None:
            timex += f":{to_string(second, 2)}"
    return timex


def short_time_timex(value: datetime) -> str:
    """Time timex keeping only the parts that are not zero."""
    if value.second:
        return time_timex(value.hour, value.minute, value.second)
    if value.minute:
        return time_timex(value.hour, value.minute)
    return time_timex(value.hour)


def format_date(value: datetime) -> str:
    return f"{to_string(value.year, 4)}-{to_string(value.month, 2)}-{to_string(value.day, 2)}"


def format_time(value: datetime) -> str:
    return luis_time(value.hour, value.minute, value.second)


def format_date_time(value: datetime) -> str:
    return f"{format_date(value)} {format_time(value)}"


def generate_duration_timex(number: Number, unit: str) -> str:
    """``P<n><unit>``, with a ``T`` before hour, minute and second units.

    ``unit`` is a unit key such as ``D``, ``W``, ``MON``, ``Y``, ``H``; only
    its first letter appears in the timex.
    """
    prefix = "PT" if unit in TIME_UNITS else "P"
    return f"{prefix}{format_number(number)}{unit[0]}"


def generate_seconds_timex(total_seconds: Number) -> str:
    """Time duration timex such as ``PT2H`` or ``PT1H30M``."""
    remaining = int(round(total_seconds))
    hours, remaining = divmod(remaining, 3600)
    minutes, seconds = divmod(remaining, 60)

    timex = "PT"
    if hours:
        timex += f"{hours}H"
    if minutes:
        timex += f"{minutes}M"
    if seconds or timex == "PT":
        timex += f"{seconds}S"
    return timex


def generate_date_period_timex(begin: datetime, end: datetime, unit: str,
                               begin_timex: Optional[str] = None,
                               end_timex: Optional[str] = None) -> str:
    """``(begin,end,P<n><unit>)`` timex for a resolved period.

    ``unit`` is ``D`` (day count), ``W`` (week count), ``MON`` (month count)
    or ``Y`` (year count). When one bound is unset the count is ``XX``.
    """
    begin_timex = begin_timex or luis_date_from_datetime(begin)
    end_timex = end_timex or luis_date_from_datetime(end)

    count = "XX"
    if not is_default_value(begin) and not is_default_value(end):
        if unit == "D":
            count = str((end.date() - begin.date()).days)
        elif unit == "W":
            count = format_number((end.date() - begin.date()).days / 7)
        elif unit == "MON":
            count = str((end.year - begin.year) * 12 + end.month - begin.month)
        else:
            count = str(end.year - begin.year)

    return f"({begin_timex},{end_timex},P{count}{unit[0]})"


def merge_timex_alternatives(first: str, second: str) -> str:
    if first == second:
        return first
    return f"{first}{Constants.TIMEX_ALTERNATIVE_SEPARATOR}{second}"
