"""Shared constants for the temporal processors."""


class Constants:
    """Entity type names, modifiers and resolution limits."""

    SYS_DATETIME_DATE = "date"
    SYS_DATETIME_TIME = "time"
    SYS_DATETIME_DATEPERIOD = "daterange"
    SYS_DATETIME_DURATION = "duration"
    SYS_DATETIME_TIMEPERIOD = "timerange"
    SYS_DATETIME_DATETIME = "datetime"
    SYS_DATETIME_DATETIMEPERIOD = "datetimerange"

    SYS_NUM_CARDINAL = "builtin.num.cardinal"
    SYS_NUM_INTEGER = "builtin.num.integer"
    SYS_NUM_ORDINAL = "builtin.num.ordinal"
    SYS_NUM_DOUBLE = "builtin.num.double"

    # Modifiers attached to resolutions
    EARLY_MOD = "start"
    MID_MOD = "mid"
    LATE_MOD = "end"
    BEFORE_MOD = "before"
    AFTER_MOD = "after"
    MORE_THAN_MOD = "more"
    LESS_THAN_MOD = "less"
    REL_EARLY_MOD = "RelEarly"
    REL_LATE_MOD = "RelLate"

    # Comments attached to resolutions
    COMMENT_AMPM = "ampm"
    COMMENT_DOUBLE_TIMEX = "doubleTimex"
    COMMENT_WEEK_OF = "WeekOf"
    COMMENT_MONTH_OF = "MonthOf"

    TIMEX_FUZZY = "X"
    TIMEX_FUZZY_YEAR = "XXXX"
    TIMEX_FUZZY_MONTH = "XX"
    TIMEX_FUZZY_WEEK = "WXX"
    TIMEX_FUZZY_DAY = "XX"
    TIMEX_ALTERNATIVE_SEPARATOR = "|"
    TIMEX_PRESENT_REF = "PRESENT_REF"

    MIN_YEAR_NUM = 1500
    MAX_YEAR_NUM = 2100
    MAX_DURATION_UNIT_COUNT = 1000
    FOUR_DIGITS_YEAR_LENGTH = 4
    QUARTER_COUNT = 4
    TRIMESTER_MONTH_COUNT = 3
    SEMESTER_MONTH_COUNT = 6
    WEEK_DAY_COUNT = 7
    MAX_WEEK_OF_MONTH = 5


class TimeTypeConstants:
    """Keys of the future/past resolution maps."""

    DATE = "date"
    START_DATE = "startDate"
    END_DATE = "endDate"
    TIME = "time"
    START_TIME = "startTime"
    END_TIME = "endTime"
    DATETIME = "dateTime"
    START_DATETIME = "startDateTime"
    END_DATETIME = "endDateTime"
    DURATION = "duration"
    MOD = "Mod"
