import pytest
from datetime import datetime, timedelta, timezone
from dateutil import rrule
from rrparse.engine import Rule, RuleSet, build_rule, new_rule_set
from rrparse.errors import InvalidRuleError, UnknownFrequencyError
from rrparse.options import Frequency, RuleOptions, WeekdaySpec


class TestBuildRule:
    def test_rule_is_a_dateutil_rule(self):
        options = RuleOptions(
            freq=Frequency.WEEKLY, count=3, dtstart=datetime(2025, 1, 6, 9)
        )

        rule = build_rule(options)

        assert isinstance(rule, rrule.rrule)
        assert rule.options is options
        assert list(rule) == [
            datetime(2025, 1, 6, 9),
            datetime(2025, 1, 13, 9),
            datetime(2025, 1, 20, 9),
        ]

    def test_weekday_specs_are_converted(self):
        options = RuleOptions(
            freq=Frequency.MONTHLY,
            count=1,
            byweekday=(WeekdaySpec(4, -1),),
            dtstart=datetime(2025, 1, 1),
        )

        assert list(build_rule(options)) == [datetime(2025, 1, 31)]

    def test_naive_until_with_aware_start(self):
        start = datetime(2025, 1, 1, tzinfo=timezone.utc)
        options = RuleOptions(
            freq=Frequency.DAILY, dtstart=start, until=datetime(2025, 1, 3)
        )

        assert len(list(build_rule(options))) == 3

    def test_aware_until_with_offset_start_is_converted(self):
        start = datetime(2025, 1, 1)
        until = datetime(2025, 1, 3, 1, tzinfo=timezone(timedelta(hours=2)))
        options = RuleOptions(freq=Frequency.DAILY, dtstart=start, until=until)

        # 01:00+02:00 is 23:00 UTC the day before
        assert list(build_rule(options))[-1] == datetime(2025, 1, 2)

    def test_missing_frequency(self):
        with pytest.raises(UnknownFrequencyError):
            build_rule(RuleOptions(count=1))

    def test_engine_rejection(self):
        options = RuleOptions(freq=Frequency.MONTHLY, bysetpos=(0,))

        with pytest.raises(InvalidRuleError):
            build_rule(options)


class TestRuleSet:
    def test_builder_methods_and_views(self):
        start = datetime(2025, 1, 1)
        rset = new_rule_set()
        daily = build_rule(RuleOptions(freq=Frequency.DAILY, count=3, dtstart=start))
        rset.add_rule(daily)
        rset.add_date(datetime(2025, 2, 1))
        rset.add_exclusion_date(datetime(2025, 1, 2))

        assert isinstance(rset, RuleSet)
        assert rset.rules == [daily]
        assert rset.dates == [datetime(2025, 2, 1)]
        assert rset.exclusion_dates == [datetime(2025, 1, 2)]
        assert rset.exclusion_rules == []
        assert list(rset) == [
            datetime(2025, 1, 1),
            datetime(2025, 1, 3),
            datetime(2025, 2, 1),
        ]

    def test_exclusion_rule(self):
        start = datetime(2025, 1, 1)
        rset = new_rule_set(no_cache=False)
        rset.add_rule(build_rule(RuleOptions(freq=Frequency.DAILY, count=4, dtstart=start)))
        rset.add_exclusion_rule(
            build_rule(RuleOptions(freq=Frequency.DAILY, interval=2, dtstart=start))
        )

        assert list(rset) == [datetime(2025, 1, 2), datetime(2025, 1, 4)]

    def test_views_are_copies(self):
        rset = new_rule_set()
        rset.dates.append(datetime(2025, 1, 1))
        assert rset.dates == []
