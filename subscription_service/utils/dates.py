"""
Month/year date helpers.

Subscription periods are tracked with month precision. Clients send and
receive them as ``MM-YYYY`` text; storage keeps a calendar date pinned to
the first day of the month.
"""
import re
from datetime import MAXYEAR, date, datetime

from subscription_service.errors import ValidationError

MONTH_YEAR_FORMAT = "%m-%Y"
MONTH_YEAR_PATTERN = re.compile(r"\d{2}-\d{4}")


def parse_month_year(value, field_name="date"):
    """
    Parse ``MM-YYYY`` text into the first day of that month.

    Args:
        value (str): Text such as ``"03-2024"``.
        field_name (str): Name used in the error message.

    Returns:
        date: First day of the month.

    Raises:
        ValidationError: If the value is not valid ``MM-YYYY`` text.
    """
    if not isinstance(value, str) or not MONTH_YEAR_PATTERN.fullmatch(value):
        raise ValidationError(f"invalid {field_name} format, expected MM-YYYY")
    try:
        parsed = datetime.strptime(value, MONTH_YEAR_FORMAT)
    except ValueError as e:
        raise ValidationError(f"invalid {field_name} format, expected MM-YYYY") from e
    return parsed.date().replace(day=1)


def format_month_year(value):
    """Render a date as ``MM-YYYY``."""
    return value.strftime(MONTH_YEAR_FORMAT)


def next_month(value):
    """
    Return the first day of the month following ``value``.

    Raises:
        OverflowError: If ``value`` is in December of ``datetime.MAXYEAR``.
    """
    if (value.year, value.month) == (MAXYEAR, 12):
        raise OverflowError("no month follows 12-9999")
    if value.month == 12:
        return date(value.year + 1, 1, 1)
    return date(value.year, value.month + 1, 1)
