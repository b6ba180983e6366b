"""Parsing of multi-line recurrence documents into a Rule or RuleSet."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, Union

from .config import ParseConfiguration
from .constants import DATE_PROPERTIES, DATE_VALUE_PARAMETERS, RULE_PROPERTIES
from .dates import parse_timestamp, parse_timestamp_list
from .engine import Rule, RuleSet, new_rule_set
from .errors import (
    EmptyInputError,
    UnsupportedParameterError,
    UnsupportedPropertyError,
)
from .rule_parser import parse_rule_value


@dataclass(frozen=True)
class PropertyLine:
    """
    One classified document line.

    Attributes:
        name: Uppercase property name
        value: Everything after the first colon
        parameters: ``KEY=VALUE`` segments between the name and the colon
    """

    name: str
    value: str
    parameters: tuple[str, ...] = ()


@dataclass
class DocumentAccumulator:
    """Raw values collected per property while reading a document."""

    rrule_values: list[str] = field(default_factory=list)
    exrule_values: list[str] = field(default_factory=list)
    rdate_values: list[str] = field(default_factory=list)
    exdate_values: list[str] = field(default_factory=list)
    dtstart: Optional[datetime] = None
    tzid: Optional[str] = None

    def needs_set(self) -> bool:
        return bool(
            len(self.rrule_values) > 1
            or self.exrule_values
            or self.rdate_values
            or self.exdate_values
        )


def unfold_lines(content: str) -> list[str]:
    """
    Split a document into lines, joining RFC 5545 continuation lines.

    Trailing whitespace is stripped and empty lines are dropped. A line
    starting with a space continues the previous line, with that one space
    removed.

    Args:
        content: Raw document text

    Returns:
        List of unfolded lines
    """
    lines = content.replace("\r\n", "\n").replace("\r", "\n").split("\n")
    unfolded: list[str] = []
    for line in lines:
        line = line.rstrip()
        if not line:
            continue
        if unfolded and line[0] == " ":
            unfolded[-1] += line[1:]
        else:
            unfolded.append(line)
    return unfolded


def split_lines(content: str, unfold: bool) -> list[str]:
    """
    Split a document into lines.

    Without unfolding, any whitespace character separates lines, so a rule
    and its dates may be given on one line separated by spaces.
    """
    if unfold:
        return unfold_lines(content)
    return content.split()


def parse_property_line(line: str) -> PropertyLine:
    """
    Split a line into property name, parameters and value.

    A line without a colon is a bare RRULE value.
    """
    if ":" not in line:
        return PropertyLine("RRULE", line)
    name, _, value = line.partition(":")
    name, *parameters = name.split(";")
    return PropertyLine(name.upper(), value, tuple(parameters))


def classify_lines(lines: list[str]) -> DocumentAccumulator:
    """
    Collect the raw values of every recognized property.

    DTSTART is decoded immediately; rule and date values are kept as text.

    Args:
        lines: Document lines

    Returns:
        The filled accumulator

    Raises:
        UnsupportedParameterError: For any parameter on RRULE/EXRULE, or a
            parameter other than VALUE=DATE-TIME or VALUE=DATE on
            RDATE/EXDATE
        UnsupportedPropertyError: For any other property name
        InvalidDateFormatError: If DTSTART is malformed
    """
    acc = DocumentAccumulator()
    for line in lines:
        if not line:
            continue
        prop = parse_property_line(line)

        if prop.name in RULE_PROPERTIES:
            for parm in prop.parameters:
                raise UnsupportedParameterError(prop.name, parm)
            if prop.name == "RRULE":
                acc.rrule_values.append(prop.value)
            else:
                acc.exrule_values.append(prop.value)
        elif prop.name in DATE_PROPERTIES:
            for parm in prop.parameters:
                if parm not in DATE_VALUE_PARAMETERS:
                    raise UnsupportedParameterError(prop.name, parm)
            if prop.name == "RDATE":
                acc.rdate_values.append(prop.value)
            else:
                acc.exdate_values.append(prop.value)
        elif prop.name == "DTSTART":
            acc.dtstart = parse_timestamp(prop.value)
            for parm in prop.parameters:
                key, _, tzid = parm.partition("=")
                if key == "TZID":
                    acc.tzid = tzid
        else:
            raise UnsupportedPropertyError(prop.name)
    return acc


def build_rule_set(acc: DocumentAccumulator, config: ParseConfiguration) -> RuleSet:
    """
    Assemble a RuleSet from collected values.

    Rules are added first, then inclusion dates, exclusion rules and
    exclusion dates, each in document order.
    """
    dtstart = config.dtstart or acc.dtstart
    rset = new_rule_set(no_cache=not config.cache)
    for value in acc.rrule_values:
        rset.add_rule(parse_rule_value(value, dtstart=dtstart))
    for value in acc.rdate_values:
        for dt in parse_timestamp_list(value):
            rset.add_date(dt)
    for value in acc.exrule_values:
        rset.add_exclusion_rule(parse_rule_value(value, dtstart=dtstart))
    for value in acc.exdate_values:
        for dt in parse_timestamp_list(value):
            rset.add_exclusion_date(dt)

    if config.compatible and config.dtstart and acc.dtstart is not None:
        rset.add_date(acc.dtstart)
    return rset


def parse_document(content: str, config: ParseConfiguration) -> Union[Rule, RuleSet]:
    """
    Parse a recurrence document.

    A single rule line gives a Rule. Several RRULE lines, any RDATE, EXRULE
    or EXDATE line, or ``config.forceset`` give a RuleSet.

    Args:
        content: Document text
        config: Validated parse options

    Returns:
        Rule or RuleSet

    Raises:
        EmptyInputError: If the document is blank or holds no rule
        RRuleParseError: For any malformed line or field
    """
    content = content.strip() if content else ""
    if not content:
        raise EmptyInputError("Invalid empty string")

    lines = split_lines(content, config.unfold)

    if (
        not config.forceset
        and len(lines) == 1
        and (":" not in content or content.startswith("RRULE:"))
    ):
        return parse_rule_value(
            lines[0], dtstart=config.dtstart, cache=config.cache, tzid=config.tzid
        )

    acc = classify_lines(lines)

    if config.forceset or acc.needs_set():
        return build_rule_set(acc, config)

    if not acc.rrule_values:
        raise EmptyInputError("no recurrence rule found")

    return parse_rule_value(
        acc.rrule_values[0],
        dtstart=config.dtstart or acc.dtstart,
        cache=config.cache,
        tzid=config.tzid or acc.tzid,
    )
