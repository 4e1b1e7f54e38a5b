"""Relative arithmetic for "3 days ago", "in 2 weeks", "5 minutes from now"."""

from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import Enum
from typing import Mapping, Optional, Pattern

from .date_utils import add_months, add_years, to_date_start
from .regex_utils import match_begin, match_end, search
from .results import DateTimeResolutionResult
from .timex_utils import luis_date_from_datetime, luis_date_time
from .tokens import Token


class AgoLaterMode(Enum):
    """Granularity of the resolved point."""
    DATE = "date"
    DATETIME = "datetime"


@dataclass(frozen=True)
class DateTimeUtilityConfiguration:
    """Relative markers shared by the date and date-time components."""
    ago_regex: Pattern
    later_regex: Pattern
    in_connector_regex: Pattern
    time_unit_regex: Pattern
    date_unit_regex: Pattern


def extract_duration_with_before_and_after(source: str, er, config: DateTimeUtilityConfiguration
                                           ) -> Optional[Token]:
    """Grow a duration span over an "ago"/"later" suffix or an "in" prefix."""
    after_string = source[er.end:]
    before_string = source[:er.start]

    ago_match = match_begin(config.ago_regex, after_string)
    if ago_match:
        return Token(er.start, er.end + ago_match.end)

    later_match = match_begin(config.later_regex, after_string)
    if later_match:
        return Token(er.start, er.end + later_match.end)

    in_match = match_end(config.in_connector_regex, before_string)
    if in_match:
        return Token(in_match.index, er.end)

    return None


def shift_by_unit(value: datetime, unit: str, amount: float) -> datetime:
    """Move ``value`` by ``amount`` units (``Y``, ``MON``, ``W``, ``D``, ``H``, ``M``, ``S``)."""
    if unit in ("Y", "MON") and float(amount).is_integer():
        if unit == "Y":
            return add_years(value, int(amount))
        return add_months(value, int(amount))

    days_per_unit = {"Y": 365, "MON": 30, "W": 7, "D": 1}
    if unit in days_per_unit:
        return value + timedelta(days=amount * days_per_unit[unit])

    seconds_per_unit = {"H": 3600, "M": 60, "S": 1}
    return value + timedelta(seconds=amount * seconds_per_unit[unit])


def parse_duration_with_ago_and_later(source: str, reference: datetime, duration_extractor,
                                      duration_parser, unit_map: Mapping[str, str],
                                      unit_regex: Pattern, config: DateTimeUtilityConfiguration,
                                      mode: AgoLaterMode) -> Optional[DateTimeResolutionResult]:
    """Resolve a duration anchored to the reference by a relative marker."""
    durations = duration_extractor.extract(source, reference)
    if not durations:
        return None

    er = durations[-1]
    pr = duration_parser.parse(er, reference)
    if pr.value is None:
        return None

    unit_match = search(unit_regex, er.text)
    if unit_match is None:
        return None
    unit = unit_map.get(unit_match.group("unit").lower())
    if unit is None:
        return None

    after_string = source[er.end:]
    before_string = source[:er.start]

    if match_begin(config.ago_regex, after_string):
        swift = -1
    elif (match_begin(config.later_regex, after_string)
          or match_end(config.in_connector_regex, before_string)):
        swift = 1
    else:
        return None

    amount = float(pr.value.timex[1:-1].lstrip("T"))

    anchor = to_date_start(reference) if mode == AgoLaterMode.DATE else reference
    value = shift_by_unit(anchor, unit, amount * swift)

    if mode == AgoLaterMode.DATE:
        # Fractional day counts ("2.5 days ago") still name a whole day
        value = to_date_start(value)
        timex = luis_date_from_datetime(value)
    else:
        timex = luis_date_time(value)

    return DateTimeResolutionResult.resolved(timex, value, sub_date_time_entities=[pr])
