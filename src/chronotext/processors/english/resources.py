"""English resource tables: pattern strings and token maps.

Patterns target the ``regex`` engine (duplicate group names, variable width
lookbehind) and are compiled case-insensitively by the configuration module.
"""

from types import MappingProxyType

from .numbers import CARDINAL_UNITS, CARDINAL_TENS, CARDINAL_WORDS, ORDINAL_WORDS

# Building blocks

MONTH_NAMES = (r'(?:january|february|march|april|may|june|july|august|september|october'
               r'|november|december|sept|jan|feb|mar|apr|jun|jul|aug|sep|oct|nov|dec)')
MONTH_REGEX = rf'(?<month>{MONTH_NAMES})'
MONTH_NUM_REGEX = r'(?<month>1[0-2]|0?[1-9])'
DAY_REGEX = r'(?<day>(?:3[01]|[12]\d|0?[1-9])(?:st|nd|rd|th)?)\b'
DAY_NUM_REGEX = r'(?<day>3[01]|[12]\d|0?[1-9])'
ORDINAL_DAY_DIGITS = r'(?:3[01]|[12]\d|0?[1-9])(?:st|nd|rd|th)'
YEAR4_REGEX = r'(?<year>(?:1[5-9]|20)\d{2})'
YEAR_ANY_REGEX = r'(?<year>(?:1[5-9]|20)\d{2}|\d{2})'
WEEKDAY_NAMES = (r'(?:sunday|monday|tuesday|wednesday|thursday|friday|saturday'
                 r'|tues|thurs|thur|mon|tue|wed|thu|fri|sat|sun)')
WEEKDAY_REGEX = rf'(?<weekday>{WEEKDAY_NAMES})'
FULL_WEEKDAY_REGEX = r'(?<weekday>sunday|monday|tuesday|wednesday|thursday|friday|saturday)'
RELATIVE_ORDER = r'(?:following|next|upcoming|coming|this|current|last|past|previous)'
CARDINAL_ORDER = r'(?<cardinal>first|1st|second|2nd|third|3rd|fourth|4th|fifth|5th|last)'
NUMBER_OR_WORDS = rf'(?:\d+|{CARDINAL_WORDS})'
TILL = r'(?:to|till|til|until|thru|through|-|–|—|~)'
RANGE_CONNECTOR_SYMBOL = r'(?:-|–|—|~|to|till|until|through|thru)'

# Date

DATE_REGEX_LIST = (
    # Friday, March 15 2024 / July 4th / May 1, 2024
    rf'\b(?:{WEEKDAY_REGEX}\s*,?\s*)?{MONTH_REGEX}\.?\s*[/\\.\-]?\s*(?:the\s+)?{DAY_REGEX}'
    rf'(?:\s*,?\s*(?:of\s+)?{YEAR4_REGEX})?\b(?!\s*:)',
    # the 4th of July / 15 March 2024
    rf'\b(?:{WEEKDAY_REGEX}\s*,?\s*)?(?:the\s+)?{DAY_REGEX}\s*(?:of\s+|-\s*)?{MONTH_REGEX}\.?'
    rf'(?:\s*,?\s*{YEAR4_REGEX})?\b',
    # 10/1/2018
    rf'\b{MONTH_NUM_REGEX}\s*[/\\\-.]\s*{DAY_NUM_REGEX}\s*[/\\\-.]\s*{YEAR_ANY_REGEX}\b',
    # 30/4/2016
    rf'\b{DAY_NUM_REGEX}\s*[/\\\-.]\s*{MONTH_NUM_REGEX}\s*[/\\\-.]\s*{YEAR_ANY_REGEX}\b',
    # 2024-06-15
    rf'\b{YEAR4_REGEX}\s*[/\\\-.]\s*{MONTH_NUM_REGEX}\s*[/\\\-.]\s*{DAY_NUM_REGEX}\b',
    # 10/1
    rf'\b{MONTH_NUM_REGEX}\s*[/\\\-]\s*{DAY_NUM_REGEX}\b(?![/\\\-.]?\d)(?!\s*%)',
)

ON_REGEX = r'(?<=\bon\s+)(?<day>(?:3[01]|[12]\d|0?[1-9])(?:st|nd|rd|th)?)\b(?!\s*(?:%|:|\.\d))'
SPECIAL_DAY_REGEX = (r'\b(?:(?:the\s+)?day\s+(?:before\s+yesterday|after\s+tomorrow)'
                     r'|(?:the\s+)?next\s+day|today|tomorrow|tmrw|tmr|yesterday)\b')
SPECIAL_DAY_WITH_NUM_REGEX = (rf'\b(?<number>{NUMBER_OR_WORDS})\s+days?\s+from\s+'
                              r'(?<day>yesterday|tomorrow|tmrw|tmr|today)\b')
RELATIVE_WEEKDAY_REGEX = rf'\b(?<number>{NUMBER_OR_WORDS})\s+{FULL_WEEKDAY_REGEX}s?\s+(?:from\s+now|later)\b'
NEXT_REGEX = rf'\b(?:next|upcoming|coming|following)\s+(?<week>week\s+)?{WEEKDAY_REGEX}\b'
THIS_REGEX = rf'\b(?:this\s+{WEEKDAY_REGEX}|{WEEKDAY_REGEX}\s+(?:of\s+)?this\s+week)\b'
LAST_REGEX = rf'\b(?:last|past|previous)\s+(?<week>week\s+)?{WEEKDAY_REGEX}\b'
SINGLE_WEEKDAY_REGEX = rf'\b{FULL_WEEKDAY_REGEX}\b'
RELATIVE_MONTH_NAME = r'(?<relmonth>(?:this|next|last|previous|coming|following)\s+month)'
WEEKDAY_OF_MONTH_REGEX = (rf'\b(?<wom>(?:the\s+)?{CARDINAL_ORDER}\s+{WEEKDAY_REGEX}\s+(?:of|in)\s+'
                          rf'(?:(?:the\s+)?{RELATIVE_MONTH_NAME}|the\s+month|{MONTH_REGEX}))\b')
SPECIAL_DATE_REGEX = (rf'\bthe\s+(?<day>{ORDINAL_DAY_DIGITS})\b(?!\s*(?:of\b|week|day|month|year|hour|minute'
                      r'|time|floor|century|place|edition|quarter|half|row|grade|anniversary|birthday))')
DATE_IMPLICIT_LIST = (
    ON_REGEX, SPECIAL_DAY_REGEX, SPECIAL_DAY_WITH_NUM_REGEX, RELATIVE_WEEKDAY_REGEX,
    NEXT_REGEX, THIS_REGEX, LAST_REGEX, SINGLE_WEEKDAY_REGEX, WEEKDAY_OF_MONTH_REGEX,
    SPECIAL_DATE_REGEX,
)

FLEXIBLE_DAY_OF_MONTH = rf'(?<DayOfMonth>{ORDINAL_DAY_DIGITS}|{ORDINAL_WORDS})'
FOR_THE_REGEX = rf'(?:(?<=\bfor\s+)the\s+|(?<=\bon\s+)the\s+){FLEXIBLE_DAY_OF_MONTH}(?<end>\s*(?:,|\.|!|\?|$))'
WEEKDAY_AND_DAY_OF_MONTH_REGEX = (rf'\b{WEEKDAY_REGEX}\s*,?\s+(?:the\s+)?'
                                  rf'(?<DayOfMonth>{ORDINAL_DAY_DIGITS}|{ORDINAL_WORDS})\b')
MONTH_END_REGEX = rf'\b{MONTH_REGEX}\.?\s*(?:the\s+)?$'
OF_MONTH_REGEX = rf'^\s*(?:day\s+)?of\s+{MONTH_REGEX}\b'
RELATIVE_MONTH_REGEX = r'^(?:of\s+)?(?:the\s+)?(?<order>next|last|this|previous|coming|following)\s+month\b'
RELATIVE_MONTH_SEARCH_REGEX = r'\b(?<order>next|last|this|previous|coming|following)\s+month\b'
WEEKDAY_START_REGEX = rf'^{WEEKDAY_REGEX}\b'
WEEKDAY_SEARCH_REGEX = rf'\b{WEEKDAY_REGEX}\b'
MONTH_SEARCH_REGEX = rf'\b{MONTH_REGEX}\b'
STRICT_RELATIVE_REGEX = rf'\b(?<order>{RELATIVE_ORDER})\b'
INVALID_DAY_NUMBER_PREFIX = r'(?:\d\s*[.:,]\s*|[.:]\s*|[$€£¥]\s*)$'
RANGE_CONNECTOR_SYMBOL_REGEX = rf'^\s*{RANGE_CONNECTOR_SYMBOL}\s*'
DATE_UNIT_REGEX = r'\b(?<unit>years?|yrs?|months?|weeks?|days?)\b'

# Relative markers

AGO_REGEX = r'\b(?:ago|before\s+(?:now|today)|earlier)\b'
LATER_REGEX = r'\b(?:later|from\s+now|from\s+today|hence|after\s+(?:now|today))\b'
IN_CONNECTOR_REGEX = r'\bin\b'
TIME_UNIT_REGEX = r'\b(?<unit>hours?|hrs?|h|minutes?|mins?|seconds?|secs?)\b'

# Duration

DURATION_UNIT = r'(?<unit>years?|yrs?|months?|weeks?|days?|hours?|hrs?|h|minutes?|mins?|seconds?|secs?)'
DURATION_UNIT_REGEX = rf'\b{DURATION_UNIT}\b'
HALF_SUFFIX = r'and\s+(?:an?\s+)?(?<suffix_num>half|quarter)'
DURATION_FOLLOWED_UNIT = (rf'^\s*(?:-\s*)?(?:(?<suffix>{HALF_SUFFIX})\s+{DURATION_UNIT}'
                          rf'|{DURATION_UNIT}(?:\s+(?<suffix>{HALF_SUFFIX}))?)\b')
NUMBER_COMBINED_WITH_UNIT = rf'\b(?<num>\d+(?:\.\d+)?)-?{DURATION_UNIT}\b'
AN_UNIT_REGEX = rf'\b(?:(?<half>half)\s+)?(?:an?|another)\s+{DURATION_UNIT}\b'
INEXACT_NUMBER_UNIT_REGEX = (rf'\b(?:(?<NumTwoTerm>(?:a\s+)?couple(?:\s+of)?)|(?:a\s+)?few|some|several)\s+'
                             rf'{DURATION_UNIT}\b')
SUFFIX_AND_REGEX = rf'^\s*(?<suffix>{HALF_SUFFIX})\b'
ALL_REGEX = r'\b(?<all>(?:all|full|whole|entire)(?:\s+|-)(?:the\s+)?(?<unit>year|month|week|day))\b'
HALF_REGEX = r'\b(?<half>half\s+(?:an?\s+)?(?<unit>year|month|week|day|hour))\b'
RELATIVE_DURATION_UNIT_REGEX = (r'(?<=\b(?:next|last|past|previous|this|coming|upcoming|following)\s+)'
                                r'(?<unit>year|month|week|day|hour|minute|second)\b')
MORE_THAN_REGEX = r'\b(?:more|longer)\s+than\b'
LESS_THAN_REGEX = r'\b(?:less|shorter|fewer)\s+than\b'

DURATION_UNIT_FORMS = {
    "Y": ("years", "year", "yrs", "yr"),
    "MON": ("months", "month"),
    "W": ("weeks", "week"),
    "D": ("days", "day"),
    "H": ("hours", "hour", "hrs", "hr", "h"),
    "M": ("minutes", "minute", "mins", "min"),
    "S": ("seconds", "second", "secs", "sec"),
}

UNIT_SECONDS = {"Y": 31536000, "MON": 2592000, "W": 604800, "D": 86400, "H": 3600, "M": 60, "S": 1}

UNIT_MAP = MappingProxyType({form: unit for unit, forms in DURATION_UNIT_FORMS.items() for form in forms})
UNIT_VALUE_MAP = MappingProxyType({form: UNIT_SECONDS[unit] for form, unit in UNIT_MAP.items()})
DOUBLE_NUMBERS = MappingProxyType({"half": 0.5, "quarter": 0.25})

# Date maps

MONTH_OF_YEAR = MappingProxyType({
    "january": 1, "jan": 1, "february": 2, "feb": 2, "march": 3, "mar": 3,
    "april": 4, "apr": 4, "may": 5, "june": 6, "jun": 6, "july": 7, "jul": 7,
    "august": 8, "aug": 8, "september": 9, "sept": 9, "sep": 9,
    "october": 10, "oct": 10, "november": 11, "nov": 11, "december": 12, "dec": 12,
    **{str(n): n for n in range(1, 13)},
    **{f"0{n}": n for n in range(1, 10)},
})

_SUFFIXES = {1: "st", 2: "nd", 3: "rd", 21: "st", 22: "nd", 23: "rd", 31: "st"}

DAY_OF_MONTH = MappingProxyType({
    **{str(n): n for n in range(1, 32)},
    **{f"0{n}": n for n in range(1, 10)},
    **{f"{n}{_SUFFIXES.get(n, 'th')}": n for n in range(1, 32)},
    **{f"0{n}{_SUFFIXES.get(n, 'th')}": n for n in range(1, 10)},
})

DAY_OF_WEEK = MappingProxyType({
    "monday": 1, "mon": 1, "tuesday": 2, "tues": 2, "tue": 2,
    "wednesday": 3, "wed": 3, "thursday": 4, "thurs": 4, "thur": 4, "thu": 4,
    "friday": 5, "fri": 5, "saturday": 6, "sat": 6, "sunday": 7, "sun": 7,
})

CARDINAL_MAP = MappingProxyType({
    "first": 1, "1st": 1, "second": 2, "2nd": 2, "third": 3, "3rd": 3,
    "fourth": 4, "4th": 4, "fifth": 5, "5th": 5, "last": 5,
})

SEASON_MAP = MappingProxyType({"spring": "SP", "summer": "SU", "fall": "FA", "autumn": "FA", "winter": "WI"})

# Meteorological seasons as (first month, month count)
SEASON_MONTHS = MappingProxyType({"SP": (3, 3), "SU": (6, 3), "FA": (9, 3), "WI": (12, 3)})

# Date period

PAST_PREFIX_REGEX = r'\b(?:(?:in|within|over|during|for)\s+)?(?:the\s+)?(?:past|last|previous|recent|prior)\b'
FUTURE_PREFIX_REGEX = r'\b(?:(?:in|within|over|during|for)\s+)?(?:the\s+)?(?:next|coming|upcoming|following)\b'
DATE_PERIOD_TILL_REGEX = rf'^\s*{TILL}\s*$'
RANGE_CONNECTOR_REGEX = r'^\s*and\s*$'
FROM_REGEX = r'\bfrom\s*$'
BETWEEN_REGEX = r'\bbetween\s*$'
NOW_REGEX = r'\b(?:right\s+)?now\b'

_YEAR_SUFFIX = rf'(?:\s*,?\s*(?:of\s+)?{YEAR4_REGEX})?'

DATE_PERIOD_SIMPLE_CASES = (
    # May 1 to 7, 2024
    rf'\b(?:from\s+)?{MONTH_REGEX}\.?\s+(?:the\s+)?{DAY_REGEX}\s*{TILL}\s*(?:the\s+)?{DAY_REGEX}{_YEAR_SUFFIX}\b',
    # 1st to 7th of May
    rf'\b(?:from\s+)?(?:the\s+)?{DAY_REGEX}\s*{TILL}\s*(?:the\s+)?{DAY_REGEX}\s+(?:of\s+)?'
    rf'(?:{MONTH_REGEX}|(?:the\s+)?{RELATIVE_MONTH_NAME}){_YEAR_SUFFIX}\b',
    # between May 1 and 7
    rf'\bbetween\s+{MONTH_REGEX}\.?\s+(?:the\s+)?{DAY_REGEX}\s+and\s+(?:the\s+)?{DAY_REGEX}{_YEAR_SUFFIX}\b',
    # between the 1st and the 7th of May
    rf'\bbetween\s+(?:the\s+)?{DAY_REGEX}\s+and\s+(?:the\s+)?{DAY_REGEX}\s+(?:of\s+)?'
    rf'(?:{MONTH_REGEX}|(?:the\s+)?{RELATIVE_MONTH_NAME}){_YEAR_SUFFIX}\b',
)

MONTH_WITH_YEAR_REGEX = (rf'\b(?:{MONTH_REGEX}\.?(?:\s*,?\s*(?:of\s+)?|\s*[/\-.]\s*){YEAR4_REGEX}'
                         rf'|{MONTH_REGEX}\s+of\s+(?<order>this|next|last|previous|coming)\s+year'
                         rf'|(?<order>this|next|last|previous|coming)\s+year\'?s\s+{MONTH_REGEX})\b')
MONTH_NUM_WITH_YEAR_REGEX = (rf'\b(?:{YEAR4_REGEX}\s*[/\-.]\s*{MONTH_NUM_REGEX}(?![/\-.]?\d)'
                             rf'|{MONTH_NUM_REGEX}\s*/\s*{YEAR4_REGEX})\b')
# from May to June, between Jan and Mar 2024
MONTH_RANGE_REGEX = (rf'\b(?:(?:from\s+)?{MONTH_REGEX}\.?\s*{TILL}\s*{MONTH_REGEX}'
                     rf'|between\s+{MONTH_REGEX}\.?\s+and\s+{MONTH_REGEX}){_YEAR_SUFFIX}\b'
                     r'(?!\s*\d{1,2}(?:st|nd|rd|th)?\b)')

_BARE_MONTH = (r'(?:(?!may\b)' + MONTH_REGEX
               + r'|(?<=\b(?:in|of|during|since|until|till|through|for|by|from|early|late|mid)[\s-]+)'
               r'(?<month>may))')
ONE_WORD_PERIOD_REGEX = (
    r'\b(?:(?:the\s+)?(?:(?<EarlyPrefix>early|beginning\s+of|start\s+of)|(?<LatePrefix>late|end\s+of)'
    r'|(?<MidPrefix>mid|middle\s+of)|(?<RelEarly>earlier)|(?<RelLate>later))[\s-]+(?:the\s+)?)?'
    r'(?<suffix>(?:(?<order>this|next|last|past|previous|coming|upcoming|current|following)\s+'
    r'(?:(?<month>' + MONTH_NAMES + r')|(?<unit>weekend|week|month|year)))'
    r'|(?:the\s+)?month\s+to\s+date|(?:the\s+)?year\s+to\s+date|mtd|ytd|(?:the\s+)?(?<unit>weekend)|'
    + _BARE_MONTH + r')\b'
)
YEAR_TO_DATE_REGEX = r'\b(?:year\s+to\s+date|ytd)\b'
MONTH_TO_DATE_REGEX = r'\b(?:month\s+to\s+date|mtd)\b'

YEAR_REGEX = rf'\b{YEAR4_REGEX}\b'
ILLEGAL_YEAR_REGEX = r'(?:[$€£¥]\s*|\d[.,]|[.,])$'

WEEK_OF_MONTH_REGEX = (rf'\b(?<wom>(?:the\s+)?{CARDINAL_ORDER}\s+week\s+(?:of|in)\s+'
                       rf'(?:(?:the\s+)?{RELATIVE_MONTH_NAME}|{MONTH_REGEX}(?:\s*,?\s*{YEAR4_REGEX})?))\b')
WEEK_OF_YEAR_REGEX = (rf'\b(?:the\s+)?{CARDINAL_ORDER}\s+week\s+of\s+'
                      rf'(?:{YEAR4_REGEX}|(?:the\s+)?(?<order>this|next|last|previous|coming)\s+year)\b')
HALF_YEAR_REGEX = (r'\b(?:the\s+)?(?:(?<cardinal>first|second|1st|2nd)\s+half|h(?<number>[12]))\s+(?:of\s+)?'
                   rf'(?:{YEAR4_REGEX}|(?:the\s+)?(?<order>this|next|last|previous|coming)\s+year)\b')
HALF_YEAR_RELATIVE_REGEX = r'\b(?<orderHalf>this|next|last|previous|coming)\s+half(?:\s+of\s+the\s+year)?\b'
QUARTER_REGEX = (r'\b(?:the\s+)?(?:(?<cardinal>first|second|third|fourth|1st|2nd|3rd|4th)\s+quarter'
                 r'|q(?<number>[1-4]))'
                 rf'(?:\s+(?:of\s+)?(?:{YEAR4_REGEX}|(?:the\s+)?(?<order>this|next|last|previous|coming)\s+year))?\b')
QUARTER_YEAR_FRONT_REGEX = (rf'\b{YEAR4_REGEX}(?:\'s)?\s+(?:(?<cardinal>first|second|third|fourth|1st|2nd|3rd|4th)'
                            r'\s+quarter|q(?<number>[1-4]))\b')
RELATIVE_QUARTER_REGEX = r'\b(?:the\s+)?(?<orderQuarter>this|next|last|previous|coming|current)\s+quarter\b'
SEASON_REGEX = (r'\b(?:(?:the\s+)?(?<order>this|next|last|previous|coming|current)\s+)?(?:the\s+)?'
                r'(?<seas>spring|summer|fall|autumn|winter)'
                rf'(?:\s+(?:of\s+)?{YEAR4_REGEX})?\b')
WHICH_WEEK_REGEX = r'\bweek\s*(?:#|number\s+|no\.?\s*)?(?<number>5[0-3]|[1-4]\d|0?[1-9])\b(?!\s*(?:of|in)\b)'
WEEK_OF_REGEX = r'(?:the\s+)?(?:week\s+(?:of|commencing|starting|beginning)(?:\s+on)?|w/c)(?:\s+the)?'
MONTH_OF_REGEX = r'(?:the\s+)?month\s+of'
REST_OF_REGEX = r'\b(?:the\s+)?rest\s+of\s+(?:the\s+|this\s+|current\s+)?(?<duration>week|month|year)\b'
WEEK_WITH_WEEKDAY_RANGE_REGEX = (r'\b(?<week>(?:this|next|last|previous|coming)\s+week)\s+(?:from\s+)?'
                                 rf'(?:{WEEKDAY_NAMES})\s*{TILL}\s*(?:{WEEKDAY_NAMES})\b')

DATE_PERIOD_SIMPLE_CASE_LIST = (
    *DATE_PERIOD_SIMPLE_CASES, MONTH_RANGE_REGEX, MONTH_WITH_YEAR_REGEX, MONTH_NUM_WITH_YEAR_REGEX,
    ONE_WORD_PERIOD_REGEX, WEEK_OF_MONTH_REGEX, WEEK_OF_YEAR_REGEX, HALF_YEAR_REGEX,
    HALF_YEAR_RELATIVE_REGEX, QUARTER_REGEX, QUARTER_YEAR_FRONT_REGEX, RELATIVE_QUARTER_REGEX,
    SEASON_REGEX, WHICH_WEEK_REGEX, REST_OF_REGEX, WEEK_WITH_WEEKDAY_RANGE_REGEX,
)

# Time

HOUR_WORDS = r'(?:one|two|three|four|five|six|seven|eight|nine|ten|eleven|twelve)'
HOUR_NUM = r'(?<hour>2[0-4]|[01]?\d)'
HOUR_12_NUM = r'(?<hour>1[0-2]|0?\d)'
HOUR_OR_WORDS = rf'(?:{HOUR_NUM}|(?<hournum>{HOUR_WORDS}))'
DESC_RAW = r'(?:a|p)(?:\.\s?m\.?|\s?m)'
DESC = rf'(?<desc>{DESC_RAW})(?![a-z])'
TIME_SUFFIX = r'(?<suffix>in\s+the\s+(?:morning|afternoon|evening)|at\s+night|o\'?\s?clock)'
TIME_SUFFIX_OPT = rf'(?:\s+{TIME_SUFFIX}\b)?'
_MINUTE_UNITS = r'one|two|three|four|five|six|seven|eight|nine'
_MINUTE_TEENS = r'ten|eleven|twelve|thirteen|fourteen|fifteen|sixteen|seventeen|eighteen|nineteen'
MINUTE_WORDS = rf'(?:(?:twenty|thirty|forty|fifty)(?:[\s-]+(?:{_MINUTE_UNITS}))?|{_MINUTE_TEENS}|{_MINUTE_UNITS})'
MID_REGEX = (r'(?<mid>(?<midnight>mid\s*-?\s*night)|(?<midmorning>mid\s*-?\s*morning)'
             r'|(?<midafternoon>mid\s*-?\s*afternoon)|(?<midday>mid\s*-?\s*day|noon))')

TIME_REGEX_LIST = (
    # 15:30, 3:30:15 pm
    rf'\b{HOUR_NUM}:(?<min>[0-5]\d)(?::(?<sec>[0-5]\d))?(?!\d)(?:\s*{DESC})?{TIME_SUFFIX_OPT}',
    # 3pm, 10 a.m.
    rf'\b{HOUR_12_NUM}\s*{DESC}{TIME_SUFFIX_OPT}',
    # five o'clock, 3 in the morning
    rf'\b{HOUR_OR_WORDS}\s+{TIME_SUFFIX}\b',
    # seven thirty pm
    rf'\b(?<hournum>{HOUR_WORDS})[\s-]+(?:(?<tens>twenty|thirty|forty|fifty)(?:[\s-]+(?<minnum>{_MINUTE_UNITS}))?'
    rf'|(?<minnum>{_MINUTE_TEENS})|oh[\s-]+(?<minnum>{_MINUTE_UNITS}))\b(?:\s*{DESC})?{TIME_SUFFIX_OPT}',
    # noon, midnight
    rf'\b{MID_REGEX}\b',
    # half past three, quarter to 5 pm, ten past six
    r'\b(?<prefix>half\s+past|(?:a\s+)?quarter\s+(?:past|to|after|before)|three\s+quarters?\s+(?:past|to)'
    rf'|(?:(?<deltamin>[1-5]?\d)|(?<deltaminnum>{MINUTE_WORDS}))\s+(?:minutes?\s+)?(?:past|to|after|before))'
    rf'\s+{HOUR_OR_WORDS}\b(?:\s*{DESC})?{TIME_SUFFIX_OPT}',
)
AT_REGEX = rf'(?<=\b(?:at|around)\s+){HOUR_OR_WORDS}\b(?!\s*(?::|%|\.\d|(?:st|nd|rd|th)\b))'
ISH_REGEX = rf'\b(?:{HOUR_NUM}|noon)\s*-?\s*ish\b'
AM_SUFFIX_REGEX = r'\bin\s+the\s+morning\b'
PM_SUFFIX_REGEX = r'\b(?:in\s+the\s+(?:afternoon|evening)|at\s+night)\b'
TIME_TOKEN_PREFIX = "at "

TIME_NUMBERS = MappingProxyType({
    **CARDINAL_UNITS, **CARDINAL_TENS, "oh": 0,
    **{str(n): n for n in range(0, 60)}, **{f"0{n}": n for n in range(0, 10)},
})

# Time period

_NOT_A_UNIT = (r'(?!\s*(?::|%|\.\d|(?:st|nd|rd|th)\b|days?\b|weeks?\b|months?\b|years?\b|hours?\b|hrs?\b'
               r'|minutes?\b|mins?\b|seconds?\b|[/\-.]\d))')
TIME_PERIOD_SIMPLE_CASES = (
    # 3-5pm, from 9am to 11 am
    rf'\b(?:(?:from|between)\s+)?(?<hour>2[0-4]|[01]?\d)(?:\s*(?<leftDesc>{DESC_RAW}))?\s*{TILL}\s*'
    rf'(?<hour>2[0-4]|[01]?\d)\s*(?<rightDesc>{DESC_RAW})(?![a-z])',
    # from 3 to 5
    rf'\bfrom\s+(?<hour>2[0-4]|[01]?\d)\s*{TILL}\s*(?<hour>2[0-4]|[01]?\d)\b{_NOT_A_UNIT}',
    # between 3 and 5pm
    rf'\bbetween\s+(?<hour>2[0-4]|[01]?\d)(?:\s*(?<leftDesc>{DESC_RAW}))?\s+and\s+(?<hour>2[0-4]|[01]?\d)'
    rf'(?:\s*(?<rightDesc>{DESC_RAW}))?(?![a-z])\b{_NOT_A_UNIT}',
)
TIME_OF_DAY_REGEX = (r'\b(?:(?:in|during)\s+the\s+)?(?:(?<early>early)[\s-]+|(?<late>late)[\s-]+)?'
                     r'(?<timeOfDay>morning|afternoon|evening|night|daytime|business\s+hours)\b')
TIME_PERIOD_TILL_REGEX = rf'^\s*{TILL}\s*$'

# Part of day: timex code and [begin hour, end hour)
TIME_OF_DAY_MAP = MappingProxyType({
    "morning": ("TMO", 8, 12),
    "afternoon": ("TAF", 12, 16),
    "evening": ("TEV", 16, 20),
    "night": ("TNI", 20, 24),
    "daytime": ("TDT", 8, 18),
    "business hours": ("TBH", 8, 18),
})

# Date time

DATE_TIME_CONNECTOR_REGEX = r'^\s*(?:,|at|on|@|around|by|,\s*at|,\s*on)?\s*$'
NOW_TIME_REGEX = r'\b(?:right\s+now|now|as\s+soon\s+as\s+possible|asap)\b'

# Date time period

SPECIFIC_TIME_OF_DAY_REGEX = (r'\b(?:(?<tonight>tonight)|(?<order>this|last|next)\s+'
                              r'(?<timeOfDay>morning|afternoon|evening|night))\b')
DATE_TIME_PERIOD_CONNECTOR_REGEX = r'^\s*(?:,|on|in\s+the|during\s+the|,\s*in\s+the)?\s*$'
DATE_TIME_PERIOD_TILL_REGEX = rf'^\s*{TILL}\s*$'
