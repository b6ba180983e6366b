"""dateutil-backed rule and rule-set objects returned by the parser."""

from datetime import datetime, timezone
from typing import Any, Optional

from dateutil import rrule

from .errors import InvalidRuleError, UnknownFrequencyError
from .options import RuleOptions


def _align_until(
    until: Optional[datetime], dtstart: Optional[datetime]
) -> Optional[datetime]:
    """Give UNTIL the same timezone awareness as DTSTART, as dateutil requires."""
    if until is None:
        return None
    dtstart_aware = dtstart is not None and dtstart.tzinfo is not None
    if until.tzinfo is not None and not dtstart_aware:
        return until.astimezone(timezone.utc).replace(tzinfo=None)
    if until.tzinfo is None and dtstart_aware:
        return until.replace(tzinfo=dtstart.tzinfo)
    return until


def _engine_kwargs(options: RuleOptions) -> dict[str, Any]:
    kwargs = options.set_fields()
    kwargs.pop("tzid", None)
    if "byweekday" in kwargs:
        kwargs["byweekday"] = [wd.to_weekday() for wd in options.byweekday]
    if "until" in kwargs:
        kwargs["until"] = _align_until(options.until, options.dtstart)
    return kwargs


class Rule(rrule.rrule):
    """
    A recurrence rule built from parsed options.

    Behaves exactly like ``dateutil.rrule.rrule`` and additionally keeps the
    options it was built from.

    Attributes:
        options: The RuleOptions the rule was built from
        tzid: Timezone identifier from the document, never resolved
    """

    def __init__(self, options: RuleOptions, no_cache: bool = True) -> None:
        if options.freq is None:
            raise UnknownFrequencyError(None, "missing FREQ parameter")
        kwargs = _engine_kwargs(options)
        freq = kwargs.pop("freq")
        try:
            super().__init__(freq, cache=not no_cache, **kwargs)
        except ValueError as e:
            raise InvalidRuleError(f"invalid rule: {e}") from e
        self.options: RuleOptions = options
        self.tzid: Optional[str] = options.tzid


class RuleSet(rrule.rruleset):
    """
    A composite schedule of inclusion and exclusion rules and dates.

    Wraps ``dateutil.rrule.rruleset`` with named builder methods and
    read-only views of what was added.
    """

    def add_rule(self, rule: Rule) -> None:
        self.rrule(rule)

    def add_exclusion_rule(self, rule: Rule) -> None:
        self.exrule(rule)

    def add_date(self, dt: datetime) -> None:
        self.rdate(dt)

    def add_exclusion_date(self, dt: datetime) -> None:
        self.exdate(dt)

    @property
    def rules(self) -> list[Rule]:
        return list(self._rrule)

    @property
    def exclusion_rules(self) -> list[Rule]:
        return list(self._exrule)

    @property
    def dates(self) -> list[datetime]:
        return list(self._rdate)

    @property
    def exclusion_dates(self) -> list[datetime]:
        return list(self._exdate)


def build_rule(options: RuleOptions, no_cache: bool = True) -> Rule:
    """
    Construct a rule from finalized options.

    Args:
        options: Finalized rule options
        no_cache: Disable dateutil's occurrence cache

    Returns:
        The constructed Rule

    Raises:
        UnknownFrequencyError: If the options have no frequency
        InvalidRuleError: If dateutil rejects the combination of fields
    """
    return Rule(options, no_cache=no_cache)


def new_rule_set(no_cache: bool = True) -> RuleSet:
    return RuleSet(cache=not no_cache)
