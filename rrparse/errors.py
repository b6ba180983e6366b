"""Exceptions raised while parsing recurrence documents."""

from typing import Any, Optional


class RRuleParseError(ValueError):
    """Base exception for every rrparse failure."""


class InvalidConfigurationError(RRuleParseError):
    """Raised when parse options contain unrecognized keys."""

    def __init__(self, keys: list[str]) -> None:
        super().__init__("Invalid options: " + ", ".join(keys))
        self.keys = keys


class EmptyInputError(RRuleParseError):
    """Raised when a document has nothing to parse."""


class UnknownPropertyNameError(RRuleParseError):
    """Raised when a rule value is prefixed with something other than RRULE."""

    def __init__(self, name: str) -> None:
        super().__init__(f"unknown parameter name {name}")
        self.name = name


class UnsupportedPropertyError(RRuleParseError):
    """Raised for document lines that are not RRULE, EXRULE, RDATE, EXDATE or DTSTART."""

    def __init__(self, name: str) -> None:
        super().__init__(f"unsupported property: {name}")
        self.name = name


class UnsupportedParameterError(RRuleParseError):
    """Raised for a property parameter that the property does not allow."""

    def __init__(self, property_name: str, parameter: str) -> None:
        super().__init__(f"unsupported {property_name} parm: {parameter}")
        self.property_name = property_name
        self.parameter = parameter


class UnknownParameterError(RRuleParseError):
    """Raised when a rule field has no registered decoder."""

    def __init__(self, name: str, value: str) -> None:
        super().__init__(f"unknown parameter '{name}':{value}")
        self.name = name
        self.value = value


class UnknownFrequencyError(RRuleParseError):
    """Raised when FREQ is missing or not one of the seven keywords."""

    def __init__(self, value: Optional[str], message: Optional[str] = None) -> None:
        super().__init__(message or f"unknown frequency: {value}")
        self.value = value


class UnknownWeekdayError(RRuleParseError):
    """Raised when a weekday code is not one of MO, TU, WE, TH, FR, SA, SU."""

    def __init__(self, value: str) -> None:
        super().__init__(f"unknown weekday: {value}")
        self.value = value


class InvalidDateFormatError(RRuleParseError):
    """Raised when a calendar timestamp cannot be decoded."""

    def __init__(self, value: Any) -> None:
        super().__init__(f"Invalid date format: {value!r}")
        self.value = value


class InvalidUntilDateError(RRuleParseError):
    """
    Raised when the UNTIL field holds a malformed timestamp.

    The underlying InvalidDateFormatError is available as ``__cause__``.
    """

    def __init__(self, value: str) -> None:
        super().__init__(f"invalid until date: {value}")
        self.value = value


class InvalidFieldError(RRuleParseError):
    """Raised when a numeric field or weekday ordinal is not a valid integer."""

    def __init__(self, name: str, value: str, reason: Optional[str] = None) -> None:
        message = f"invalid value for {name}: {value!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
        self.name = name
        self.value = value


class InvalidRuleError(RRuleParseError):
    """Raised when the decoded fields do not form a rule the engine accepts."""
