"""Tests for calendar helpers."""

from datetime import date, datetime

import pytest
from training_periodization.planning.dates import (
    add_months,
    add_weeks,
    parse_date,
    weeks_between,
)


class TestDates:
    """Test pure date arithmetic."""

    def test_add_weeks(self):
        """Week offsets cross month and year boundaries."""
        assert add_weeks(date(2024, 2, 26), 1) == date(2024, 3, 4)
        assert add_weeks(date(2024, 12, 30), 1) == date(2025, 1, 6)

    def test_add_months(self):
        """Months roll over years and clamp to month length."""
        assert add_months(date(2024, 1, 1), 3) == date(2024, 4, 1)
        assert add_months(date(2023, 11, 15), 3) == date(2024, 2, 15)
        assert add_months(date(2024, 1, 31), 1) == date(2024, 2, 29)
        assert add_months(date(2023, 1, 31), 1) == date(2023, 2, 28)
        assert add_months(date(2024, 1, 1), 12) == date(2025, 1, 1)

    def test_weeks_between(self):
        """Partial weeks count as a full training week."""
        assert weeks_between(date(2024, 1, 1), date(2024, 1, 29)) == 4
        assert weeks_between(date(2024, 1, 1), date(2024, 4, 1)) == 13
        assert weeks_between(date(2024, 1, 1), date(2024, 7, 1)) == 26

    def test_parse_date(self):
        """Dates, datetimes and ISO strings are accepted."""
        assert parse_date(date(2024, 1, 1)) == date(2024, 1, 1)
        assert parse_date(datetime(2024, 1, 1, 9, 30)) == date(2024, 1, 1)
        assert parse_date("2024-01-01") == date(2024, 1, 1)
        assert parse_date(" 2024-01-01T08:00:00 ") == date(2024, 1, 1)

    def test_parse_date_rejects_garbage(self):
        """Unparseable strings raise ValueError."""
        with pytest.raises(ValueError):
            parse_date("next monday")

    def test_parse_date_rejects_other_types(self):
        """Values that are neither dates nor strings raise TypeError."""
        with pytest.raises(TypeError):
            parse_date(None)
        with pytest.raises(TypeError):
            parse_date(20240101)
