import pytest
from datetime import datetime, timezone
import rrparse
from rrparse import (
    EmptyInputError,
    Frequency,
    InvalidConfigurationError,
    RRuleParseError,
    RRuleStrParser,
    Rule,
    RuleOptions,
    RuleSet,
    UnknownParameterError,
    WeekdaySpec,
)


class TestParse:
    def test_daily_count_with_defaults(self):
        rule = rrparse.parse("FREQ=DAILY;COUNT=10")

        assert isinstance(rule, Rule)
        assert rule.options.set_fields() == {"freq": Frequency.DAILY, "count": 10}

    def test_document_with_exclusion(self, sample_document):
        rset = rrparse.parse(sample_document, unfold=True)

        assert isinstance(rset, RuleSet)
        assert [r.options for r in rset.rules] == [
            RuleOptions(
                freq=Frequency.WEEKLY,
                byweekday=(WeekdaySpec(0), WeekdaySpec(2), WeekdaySpec(4)),
                dtstart=datetime(2020, 1, 1, tzinfo=timezone.utc),
            )
        ]
        assert rset.exclusion_dates == [datetime(2020, 1, 3, tzinfo=timezone.utc)]

    def test_empty_input(self):
        with pytest.raises(EmptyInputError):
            rrparse.parse("")

    def test_invalid_configuration(self):
        with pytest.raises(InvalidConfigurationError) as exc:
            rrparse.parse("FREQ=DAILY", foo=True)
        assert exc.value.keys == ["foo"]

    def test_configuration_checked_before_content(self):
        with pytest.raises(InvalidConfigurationError):
            rrparse.parse("", foo=True)

    def test_unknown_field(self):
        with pytest.raises(UnknownParameterError) as exc:
            rrparse.parse("FREQ=WEEKLY;BOGUS=1")
        assert exc.value.name == "BOGUS"

    def test_forceset(self):
        assert isinstance(rrparse.parse("RRULE:FREQ=DAILY", forceset=True), RuleSet)

    def test_errors_are_value_errors(self):
        with pytest.raises(ValueError):
            rrparse.parse("FREQ=SOMETIMES")
        with pytest.raises(RRuleParseError):
            rrparse.parse("FREQ=DAILY;BYDAY=XX")

    def test_dtstart_option(self):
        start = datetime(2025, 3, 1, 8, tzinfo=timezone.utc)
        rule = rrparse.parse("RRULE:FREQ=DAILY;COUNT=2", dtstart=start)

        assert list(rule) == [start, datetime(2025, 3, 2, 8, tzinfo=timezone.utc)]


class TestRRuleStrParser:
    def test_parser_is_reusable(self):
        parser = RRuleStrParser()

        first = parser.parse("FREQ=DAILY;COUNT=1")
        second = parser.parse("FREQ=YEARLY;COUNT=1", forceset=True)

        assert isinstance(first, Rule)
        assert isinstance(second, RuleSet)
        assert first.options.freq == Frequency.DAILY
