import pytest
from hearth.parsing import parse_duration


def test_hours_and_minutes():
    assert parse_duration("PT1H30M") == 90


def test_days_and_hours():
    assert parse_duration("P1DT2H") == 1560


def test_minutes_only():
    assert parse_duration("PT45M") == 45


def test_empty_and_none_are_absent():
    assert parse_duration("") is None
    assert parse_duration(None) is None


def test_no_designator_is_absent():
    assert parse_duration("not-a-duration") is None
    assert parse_duration("20 minutes") is None


def test_matched_zero_is_not_absent():
    assert parse_duration("PT0S") == 0
    # Bare "P" matches with every group empty
    assert parse_duration("P") == 0


@pytest.mark.parametrize("iso,expected", [
    ("PT29S", 0),
    ("PT30S", 1),   # half rounds up
    ("PT89S", 1),
    ("PT90S", 2),
    ("PT10M30S", 11),
])
def test_seconds_round_to_nearest_minute(iso, expected):
    assert parse_duration(iso) == expected


def test_unanchored_search():
    # Leading junk is ignored; the first "P" starts the match
    assert parse_duration("about PT15M") == 15


def test_week_designator_not_supported():
    # "P2W" matches just the "P", so the weeks are lost
    assert parse_duration("P2W") == 0
