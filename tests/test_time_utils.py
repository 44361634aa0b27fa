"""
Unit tests for timestamp and date parsing.
"""
from datetime import date, datetime, timedelta, timezone

import pytest

from pickem.utils.time_utils import parse_calendar_date, parse_rfc3339


class TestParseRfc3339:
    def test_zulu(self):
        assert parse_rfc3339("2022-03-20T15:00:00Z") == datetime(2022, 3, 20, 15, tzinfo=timezone.utc)

    def test_offset(self):
        ts = parse_rfc3339("2022-03-20T18:00:00+03:00")
        assert ts.utcoffset() == timedelta(hours=3)
        assert ts == datetime(2022, 3, 20, 15, tzinfo=timezone.utc)

    @pytest.mark.parametrize("value,microsecond,offset", [
        ("2022-03-20T15:00:00.250Z", 250000, timedelta(0)),
        ("2022-03-20T15:00:00.5Z", 500000, timedelta(0)),
        ("2022-03-20T15:00:00.25+03:00", 250000, timedelta(hours=3)),
        ("2022-03-20T15:00:00.123456789Z", 123456, timedelta(0)),
        ("2022-03-20T15:00:00.000001-05:00", 1, timedelta(hours=-5)),
    ])
    def test_fractional_seconds(self, value, microsecond, offset):
        ts = parse_rfc3339(value)
        assert ts.microsecond == microsecond
        assert ts.utcoffset() == offset
        assert ts.second == 0

    @pytest.mark.parametrize("value", [
        "2022-03-20T15:00:00",   # no offset
        "2022-03-20T",
        "2022-03-20",
        "2022-03-20 15:00:00Z",
        "2022-03-20T15:00Z",
        "2022-03-20T15:00:00.Z",
        "2022-03-20T15:00:00,5Z",
        "2022-02-30T15:00:00Z",
        "",
    ])
    def test_rejects_incomplete_or_invalid(self, value):
        with pytest.raises(ValueError):
            parse_rfc3339(value)


class TestParseCalendarDate:
    def test_valid(self):
        assert parse_calendar_date("2022-03-20") == date(2022, 3, 20)

    @pytest.mark.parametrize("value", ["", "20220320", "2022-W12-1", "2022-13-01", "20/03/2022"])
    def test_invalid(self, value):
        with pytest.raises(ValueError):
            parse_calendar_date(value)
