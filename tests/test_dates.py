"""Unit tests for date parsing."""
from datetime import date, datetime

import pytest

from aggregator.dates import parse_date
from errors import InvalidArgumentError


class TestParseDate:
    """Test cases for parse_date."""

    def test_date_passthrough(self):
        """Test that a date is returned unchanged."""
        assert parse_date(date(2018, 1, 10)) == date(2018, 1, 10)

    def test_datetime_drops_time(self):
        """Test that a datetime is reduced to its date."""
        parsed = parse_date(datetime(2018, 1, 10, 18, 30))

        assert parsed == date(2018, 1, 10)
        assert type(parsed) is date

    @pytest.mark.parametrize("value", [
        "2018-01-10",
        "01/10/2018",
        "01-10-2018",
        "January 10, 2018",
        "Jan 10, 2018",
        "2018/01/10",
        "2018-01-10T18:00:00",
        "  2018-01-10  ",
    ])
    def test_supported_string_formats(self, value):
        """Test date normalization across supported formats."""
        assert parse_date(value) == date(2018, 1, 10)

    @pytest.mark.parametrize("value", ["", "   ", "invalid-date", "2018-13-45"])
    def test_invalid_strings_rejected(self, value):
        """Test that blank or unparseable strings raise."""
        with pytest.raises(InvalidArgumentError):
            parse_date(value)

    @pytest.mark.parametrize("value", [None, 20180110, 1.5])
    def test_unsupported_types_rejected(self, value):
        """Test that non-date values raise."""
        with pytest.raises(InvalidArgumentError):
            parse_date(value)
