"""Entry point for parsing recurrence strings."""

from typing import Any, Union

from .config import ParseConfiguration
from .document import parse_document
from .engine import Rule, RuleSet


class RRuleStrParser:
    """
    Parser for RFC 5545 recurrence strings.

    Holds no state between calls; one instance may be shared freely.

    Example:
        >>> parser = RRuleStrParser()
        >>> rule = parser.parse("FREQ=DAILY;COUNT=10")
        >>> rule.options.count
        10
    """

    def parse(self, content: str, **options: Any) -> Union[Rule, RuleSet]:
        """
        Parse a recurrence string into a Rule or RuleSet.

        Args:
            content: One rule value, or a document of RRULE, RDATE, EXRULE,
                EXDATE and DTSTART lines
            **options: dtstart, cache, unfold, forceset, compatible, tzid

        Returns:
            A Rule for a single rule, otherwise a RuleSet

        Raises:
            InvalidConfigurationError: If options contain unknown keys
            RRuleParseError: If the content cannot be parsed
        """
        config = ParseConfiguration.from_options(options)
        return parse_document(content, config)


_default_parser = RRuleStrParser()


def parse(content: str, **options: Any) -> Union[Rule, RuleSet]:
    """Parse a recurrence string with a shared RRuleStrParser."""
    return _default_parser.parse(content, **options)
