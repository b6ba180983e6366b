"""Typed values produced while decoding a single recurrence rule."""

import sys
from dataclasses import dataclass, fields
from datetime import datetime
from enum import IntEnum
from typing import Any, Optional

from dateutil import rrule

from .constants import WEEKDAY_NAMES


class Frequency(IntEnum):
    """Rule frequencies, valued like dateutil's frequency constants."""

    YEARLY = rrule.YEARLY
    MONTHLY = rrule.MONTHLY
    WEEKLY = rrule.WEEKLY
    DAILY = rrule.DAILY
    HOURLY = rrule.HOURLY
    MINUTELY = rrule.MINUTELY
    SECONDLY = rrule.SECONDLY


@dataclass(frozen=True)
class WeekdaySpec:
    """
    A weekday with an optional occurrence index.

    ``WeekdaySpec(1, 2)`` is the second Tuesday of the period,
    ``WeekdaySpec(4, -1)`` the last Friday and ``WeekdaySpec(0)`` every Monday.

    Attributes:
        weekday: Weekday index, 0 (Monday) to 6 (Sunday)
        n: Signed occurrence index, or None for every occurrence
    """

    weekday: int
    n: Optional[int] = None

    def to_weekday(self) -> rrule.weekday:
        return rrule.weekday(self.weekday, self.n)

    def __str__(self) -> str:
        name = WEEKDAY_NAMES[self.weekday]
        if self.n is None:
            return name
        return f"{self.n:+d}{name}"


@dataclass(frozen=True)
class RuleOptions:
    """
    Finalized fields of one RRULE or EXRULE value.

    Every field is None when the rule does not constrain it.
    """

    freq: Optional[Frequency] = None
    interval: Optional[int] = None
    count: Optional[int] = None
    until: Optional[datetime] = None
    wkst: Optional[int] = None
    byweekday: Optional[tuple[WeekdaySpec, ...]] = None
    bymonth: Optional[tuple[int, ...]] = None
    bymonthday: Optional[tuple[int, ...]] = None
    byyearday: Optional[tuple[int, ...]] = None
    byeaster: Optional[tuple[int, ...]] = None
    byweekno: Optional[tuple[int, ...]] = None
    byhour: Optional[tuple[int, ...]] = None
    byminute: Optional[tuple[int, ...]] = None
    bysecond: Optional[tuple[int, ...]] = None
    bysetpos: Optional[tuple[int, ...]] = None
    dtstart: Optional[datetime] = None
    tzid: Optional[str] = None

    def set_fields(self) -> dict[str, Any]:
        """Return only the fields that carry a value, in declaration order."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }


RULE_OPTION_FIELDS = frozenset(f.name for f in fields(RuleOptions))


class RuleOptionsBuilder:
    """
    Accumulates decoded fields in whatever order they appear in the rule.

    When the same field is assigned twice the later value wins and a
    warning is printed.
    """

    def __init__(self) -> None:
        self._values: dict[str, Any] = {}

    def set(self, field: str, value: Any, source: Optional[str] = None) -> None:
        """
        Assign a decoded value.

        Args:
            field: RuleOptions field name
            value: Decoded value
            source: Parameter name the value came from, used in the warning

        Raises:
            KeyError: If the field is not a RuleOptions field
        """
        if field not in RULE_OPTION_FIELDS:
            raise KeyError(field)
        if field in self._values:
            print(
                f"Warning: Duplicate {source or field.upper()} in RRULE, "
                "using the last value",
                file=sys.stderr,
            )
        self._values[field] = value

    def get(self, field: str) -> Any:
        return self._values.get(field)

    def has(self, field: str) -> bool:
        return field in self._values

    def build(self) -> RuleOptions:
        return RuleOptions(**self._values)
