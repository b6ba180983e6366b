"""Parse RFC 5545 recurrence strings into dateutil rules and rule sets."""

from .engine import Rule, RuleSet
from .errors import (
    EmptyInputError,
    InvalidConfigurationError,
    InvalidDateFormatError,
    InvalidFieldError,
    InvalidRuleError,
    InvalidUntilDateError,
    RRuleParseError,
    UnknownFrequencyError,
    UnknownParameterError,
    UnknownPropertyNameError,
    UnknownWeekdayError,
    UnsupportedParameterError,
    UnsupportedPropertyError,
)
from .options import Frequency, RuleOptions, WeekdaySpec
from .parser import RRuleStrParser, parse

__version__ = "0.1.0"

__all__ = [
    "EmptyInputError",
    "Frequency",
    "InvalidConfigurationError",
    "InvalidDateFormatError",
    "InvalidFieldError",
    "InvalidRuleError",
    "InvalidUntilDateError",
    "RRuleParseError",
    "RRuleStrParser",
    "Rule",
    "RuleOptions",
    "RuleSet",
    "UnknownFrequencyError",
    "UnknownParameterError",
    "UnknownPropertyNameError",
    "UnknownWeekdayError",
    "UnsupportedParameterError",
    "UnsupportedPropertyError",
    "WeekdaySpec",
    "parse",
]
