"""
Unit tests for month/year date helpers.
"""
from datetime import date

import pytest

from subscription_service.errors import ValidationError
from subscription_service.utils.dates import format_month_year, next_month, parse_month_year


def test_parse_month_year_returns_first_of_month():
    """Test parsing MM-YYYY text."""
    assert parse_month_year("07-2025") == date(2025, 7, 1)
    assert parse_month_year("12-1999") == date(1999, 12, 1)


@pytest.mark.parametrize("value", [
    "", "13-2024", "00-2024", "2024-03", "03/2024", "march-2024", "1-2024", "01-24", " 01-2024", None, 32024,
])
def test_parse_month_year_rejects_invalid_text(value):
    """Test that malformed dates raise ValidationError."""
    with pytest.raises(ValidationError) as exc_info:
        parse_month_year(value, "start date")
    assert "invalid start date format" in exc_info.value.message


def test_format_month_year():
    """Test rendering a date as MM-YYYY."""
    assert format_month_year(date(2024, 3, 1)) == "03-2024"


def test_next_month_rolls_over_year():
    """Test computing the following month boundary."""
    assert next_month(date(2024, 5, 1)) == date(2024, 6, 1)
    assert next_month(date(2024, 12, 1)) == date(2025, 1, 1)


def test_next_month_after_last_representable_month():
    """Test that December 9999 has no following month."""
    with pytest.raises(OverflowError):
        next_month(date(9999, 12, 1))
