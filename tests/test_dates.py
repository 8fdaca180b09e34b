"""Tests for RFC 3339 date normalization."""

from datetime import date, datetime, timedelta, timezone

import pytest

from boxview import BoxViewError
from boxview.request import INVALID_DATE_ERROR
from boxview.resources import to_rfc3339


class TestToRfc3339:
    @pytest.mark.parametrize(
        "value,expected",
        [
            ("2013-08-30T00:17:37Z", "2013-08-30T00:17:37+00:00"),
            ("2013-08-30T00:17:37.000Z", "2013-08-30T00:17:37+00:00"),
            ("2013-08-30T02:17:37+02:00", "2013-08-30T00:17:37+00:00"),
            ("Fri, 30 Aug 2013 00:17:37 -0700", "2013-08-30T07:17:37+00:00"),
            ("2013-08-30", "2013-08-30T00:00:00+00:00"),
            ("August 30, 2013 5:00 PM", "2013-08-30T17:00:00+00:00"),
        ],
    )
    def test_strings(self, value, expected):
        assert to_rfc3339(value) == expected

    def test_aware_datetime_converted_to_utc(self):
        value = datetime(2024, 11, 19, 10, 0, tzinfo=timezone(timedelta(hours=-5)))

        assert to_rfc3339(value) == "2024-11-19T15:00:00+00:00"

    def test_naive_datetime_taken_as_utc(self):
        assert to_rfc3339(datetime(2024, 11, 19, 10, 0, 5)) == "2024-11-19T10:00:05+00:00"

    def test_microseconds_dropped(self):
        value = datetime(2024, 11, 19, 10, 0, 5, 999999, tzinfo=timezone.utc)

        assert to_rfc3339(value) == "2024-11-19T10:00:05+00:00"

    def test_date(self):
        assert to_rfc3339(date(2024, 11, 19)) == "2024-11-19T00:00:00+00:00"

    @pytest.mark.parametrize(
        "value",
        [
            "2013-08-30T02:17:37+02:00",
            "30 Aug 2013",
            datetime(2024, 2, 29, 23, 59, 59, tzinfo=timezone(timedelta(hours=9))),
            date(2024, 1, 1),
        ],
    )
    def test_idempotent(self, value):
        once = to_rfc3339(value)

        assert to_rfc3339(once) == once

    @pytest.mark.parametrize("value", ["not a date", "", "2013-02-30"])
    def test_unparseable_string_fails(self, value):
        with pytest.raises(BoxViewError) as exc_info:
            to_rfc3339(value)

        assert exc_info.value.error_code == INVALID_DATE_ERROR

    def test_unsupported_type_fails(self):
        with pytest.raises(BoxViewError) as exc_info:
            to_rfc3339(1377821857)

        assert exc_info.value.error_code == INVALID_DATE_ERROR
