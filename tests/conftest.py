import pytest
from datetime import datetime, timezone


@pytest.fixture
def sample_document():
    return """DTSTART:20200101T000000Z
RRULE:FREQ=WEEKLY;BYDAY=MO,WE,FR
EXDATE:20200103T000000Z"""


@pytest.fixture
def sample_folded_document():
    return """DTSTART;TZID=America/New_York:20250106T090000
RRULE:FREQ=WEEKLY;INTERVAL=2;
 BYDAY=MO,TH;COUNT=6
RDATE;VALUE=DATE-TIME:20250110T090000,20250111T090000
EXRULE:FREQ=MONTHLY;BYDAY=+1MO;COUNT=2
"""


@pytest.fixture
def utc_start():
    return datetime(2025, 1, 1, 9, 0, 0, tzinfo=timezone.utc)
