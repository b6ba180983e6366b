"""Lookup tables and defaults for the rrparse package."""

from types import MappingProxyType

from dateutil import rrule

# Frequency keywords in RFC 5545 order, valued like dateutil's constants
FREQUENCY_CODES = MappingProxyType(
    {
        "YEARLY": rrule.YEARLY,
        "MONTHLY": rrule.MONTHLY,
        "WEEKLY": rrule.WEEKLY,
        "DAILY": rrule.DAILY,
        "HOURLY": rrule.HOURLY,
        "MINUTELY": rrule.MINUTELY,
        "SECONDLY": rrule.SECONDLY,
    }
)

# Monday is 0, as in datetime.weekday()
WEEKDAY_CODES = MappingProxyType(
    {"MO": 0, "TU": 1, "WE": 2, "TH": 3, "FR": 4, "SA": 5, "SU": 6}
)
WEEKDAY_NAMES = tuple(WEEKDAY_CODES)

ORDINAL_PREFIX_CHARS = "+-0123456789"

# Parse options accepted by parse(); anything else is rejected
DEFAULT_OPTIONS = MappingProxyType(
    {
        "dtstart": None,
        "cache": False,
        "unfold": False,
        "forceset": False,
        "compatible": False,
        "tzid": None,
    }
)

RULE_PROPERTIES = ("RRULE", "EXRULE")
DATE_PROPERTIES = ("RDATE", "EXDATE")
DATE_VALUE_PARAMETERS = ("VALUE=DATE-TIME", "VALUE=DATE")

# Config file settings
DEFAULT_CONFIG_FILES = ["rrparse.json", ".rrparse.json"]

# CLI settings
DEFAULT_OCCURRENCE_COUNT = 0
