"""Parsing of a single RRULE or EXRULE value into a Rule."""

import re
from datetime import datetime
from typing import Optional

from .dates import parse_timestamp
from .dispatch import SKIPPED_PARAMETERS, dispatch_field
from .engine import Rule, build_rule
from .errors import InvalidFieldError, UnknownPropertyNameError
from .options import RuleOptionsBuilder

_NAME_PREFIX = re.compile(r"^([A-Z]+):(.*)$", re.DOTALL)
_DTSTART_CLAUSE = re.compile(
    r"DTSTART(?:;TZID=([^:=]+))?[:=]([^;]+)", re.IGNORECASE
)


def extract_dtstart(line: str, builder: RuleOptionsBuilder) -> None:
    """
    Record an embedded ``DTSTART[;TZID=id]:value`` clause, if any.

    The timestamp is decoded from the original-case text.

    Args:
        line: The whole rule line
        builder: Options being accumulated for the rule

    Raises:
        InvalidDateFormatError: If the clause's timestamp is malformed
    """
    match = _DTSTART_CLAUSE.search(line)
    if not match:
        return
    tzid, value = match.groups()
    builder.set("dtstart", parse_timestamp(value), "DTSTART")
    if tzid:
        builder.set("tzid", tzid, "TZID")


def parse_rule_value(
    line: str,
    dtstart: Optional[datetime] = None,
    cache: bool = False,
    tzid: Optional[str] = None,
) -> Rule:
    """
    Parse one rule value such as ``FREQ=WEEKLY;COUNT=4;BYDAY=TU,TH``.

    The value may carry an ``RRULE:`` prefix and an embedded DTSTART clause.
    Fields may appear in any order.

    Args:
        line: The rule text
        dtstart: Start used when the rule has no DTSTART of its own
        cache: Let the returned rule memoize its occurrences
        tzid: Timezone identifier used when the rule has none of its own

    Returns:
        The constructed Rule

    Raises:
        UnknownPropertyNameError: If the line is prefixed with a name other
            than RRULE
        InvalidFieldError: If a segment is not a ``NAME=VALUE`` pair
        RRuleParseError: For any field that fails to decode
    """
    name_parts = _NAME_PREFIX.match(line)
    if name_parts:
        name, value = name_parts.groups()
        if name != "RRULE":
            raise UnknownPropertyNameError(name)
    else:
        value = line

    builder = RuleOptionsBuilder()
    extract_dtstart(line, builder)

    for pair in value.split(";"):
        if not pair:
            continue
        field_name, sep, field_value = pair.partition("=")
        if field_name.upper() in SKIPPED_PARAMETERS:
            continue
        if not sep:
            raise InvalidFieldError(field_name.upper(), pair, "expected NAME=VALUE")
        dispatch_field(builder, field_name, field_value)

    if not builder.has("dtstart") and dtstart is not None:
        builder.set("dtstart", dtstart)
    if not builder.has("tzid") and tzid is not None:
        builder.set("tzid", tzid)

    return build_rule(builder.build(), no_cache=not cache)
