"""
Decoders turning one raw rule field value into a typed value.

Every decoder has the signature ``decoder(builder, name, value)`` and writes
exactly one field of the RuleOptionsBuilder, or raises without touching it.
Values arrive uppercased.
"""

import re

from .constants import FREQUENCY_CODES, ORDINAL_PREFIX_CHARS, WEEKDAY_CODES
from .dates import parse_timestamp
from .errors import (
    InvalidDateFormatError,
    InvalidFieldError,
    InvalidUntilDateError,
    UnknownFrequencyError,
    UnknownWeekdayError,
)
from .options import Frequency, RuleOptionsBuilder, WeekdaySpec

_INTEGER = re.compile(r"[+-]?\d+")


def parse_integer(name: str, value: str) -> int:
    """
    Parse a signed base-10 integer, rejecting anything else.

    Args:
        name: Field name, used in the error
        value: Raw text

    Returns:
        The integer value

    Raises:
        InvalidFieldError: If the text is not entirely an integer
    """
    text = value.strip()
    if not _INTEGER.fullmatch(text):
        raise InvalidFieldError(name, value)
    return int(text, 10)


def parse_integer_list(name: str, value: str) -> tuple[int, ...]:
    items = value.split(",")
    if any(not item.strip() for item in items):
        raise InvalidFieldError(name, value, "empty list element")
    return tuple(parse_integer(name, item) for item in items)


def parse_weekday_token(token: str) -> WeekdaySpec:
    """
    Parse one BYDAY token.

    Two spellings mean the same thing: ``MO(+1)`` and ``+1MO``. Without an
    ordinal (``MO``) the weekday matches every occurrence in the period.

    Args:
        token: Uppercase weekday token

    Returns:
        The decoded WeekdaySpec

    Raises:
        UnknownWeekdayError: If the weekday code is not recognized
        InvalidFieldError: If the ordinal is malformed or zero
    """
    if "(" in token:
        code, _, rest = token.partition("(")
        if not rest.endswith(")"):
            raise InvalidFieldError("BYDAY", token, "unclosed parenthesis")
        ordinal_text = rest[:-1]
        if not ordinal_text:
            raise InvalidFieldError("BYDAY", token, "empty ordinal")
    else:
        i = 0
        while i < len(token) and token[i] in ORDINAL_PREFIX_CHARS:
            i += 1
        ordinal_text, code = token[:i], token[i:]

    if code not in WEEKDAY_CODES:
        raise UnknownWeekdayError(code)

    n = None
    if ordinal_text:
        n = parse_integer("BYDAY", ordinal_text)
        if n == 0:
            raise InvalidFieldError("BYDAY", token, "ordinal cannot be zero")
    return WeekdaySpec(WEEKDAY_CODES[code], n)


def decode_int(builder: RuleOptionsBuilder, name: str, value: str) -> None:
    builder.set(name.lower(), parse_integer(name, value), name)


def decode_int_list(builder: RuleOptionsBuilder, name: str, value: str) -> None:
    builder.set(name.lower(), parse_integer_list(name, value), name)


def decode_freq(builder: RuleOptionsBuilder, name: str, value: str) -> None:
    if value not in FREQUENCY_CODES:
        raise UnknownFrequencyError(value)
    builder.set("freq", Frequency(FREQUENCY_CODES[value]), name)


def decode_until(builder: RuleOptionsBuilder, name: str, value: str) -> None:
    try:
        until = parse_timestamp(value)
    except InvalidDateFormatError as e:
        raise InvalidUntilDateError(value) from e
    builder.set("until", until, name)


def decode_wkst(builder: RuleOptionsBuilder, name: str, value: str) -> None:
    if value not in WEEKDAY_CODES:
        raise UnknownWeekdayError(value)
    builder.set("wkst", WEEKDAY_CODES[value], name)


def decode_byweekday(builder: RuleOptionsBuilder, name: str, value: str) -> None:
    weekdays = tuple(parse_weekday_token(token) for token in value.split(","))
    builder.set("byweekday", weekdays, name)
