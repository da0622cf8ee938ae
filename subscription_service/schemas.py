"""
Typed request objects and their parsing from JSON bodies and query strings.

Date fields stay as ``MM-YYYY`` text here; the service layer and the query
builder turn them into calendar dates.
"""
import uuid
from dataclasses import dataclass
from typing import Any, Optional

from subscription_service.errors import ValidationError


# Upper bound of the INTEGER price column
MAX_PRICE = 2**31 - 1


class _Unset:
    """Marker for a field that was not present in the request."""

    def __repr__(self):
        return "UNSET"


UNSET: Any = _Unset()


@dataclass
class SubscriptionCreate:
    service_name: str
    price: int
    user_id: uuid.UUID
    start_date: str
    end_date: Optional[str] = None


@dataclass
class SubscriptionUpdate:
    """
    Partial update. ``UNSET`` leaves a field unchanged; ``end_date=""``
    clears the end month.
    """
    service_name: Any = UNSET
    price: Any = UNSET
    start_date: Any = UNSET
    end_date: Any = UNSET

    def is_empty(self):
        return all(value is UNSET for value in (
            self.service_name, self.price, self.start_date, self.end_date
        ))


@dataclass
class SubscriptionFilter:
    user_id: Optional[uuid.UUID] = None
    service_name: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None


def parse_uuid(value, message):
    """Parse a canonical UUID string or raise ``ValidationError(message)``."""
    if not isinstance(value, str):
        raise ValidationError(message)
    try:
        return uuid.UUID(value)
    except ValueError as e:
        raise ValidationError(message) from e


def _require_object(payload):
    if not isinstance(payload, dict):
        raise ValidationError("request body must be a JSON object")
    return payload


def _service_name(value):
    if not isinstance(value, str) or not value.strip():
        raise ValidationError("serviceName must be a non-empty string")
    return value


def _price(value):
    # bool is an int subclass
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError("price must be an integer")
    if value <= 0:
        raise ValidationError("price must be greater than zero")
    if value > MAX_PRICE:
        raise ValidationError(f"price must not exceed {MAX_PRICE}")
    return value


def _date_text(value, field_name):
    if not isinstance(value, str):
        raise ValidationError(f"{field_name} must be a string in MM-YYYY format")
    return value


def parse_create_payload(payload):
    """
    Build a ``SubscriptionCreate`` from a decoded JSON body.

    Raises:
        ValidationError: If a required field is missing or has the wrong type.
    """
    payload = _require_object(payload)
    for field_name in ('serviceName', 'price', 'userId', 'startDate'):
        if payload.get(field_name) is None:
            raise ValidationError(f"{field_name} is required")

    end_date = payload.get('endDate')
    if end_date is not None:
        end_date = _date_text(end_date, 'endDate') or None

    return SubscriptionCreate(
        service_name=_service_name(payload['serviceName']),
        price=_price(payload['price']),
        user_id=parse_uuid(payload['userId'], "invalid user id"),
        start_date=_date_text(payload['startDate'], 'startDate'),
        end_date=end_date,
    )


def parse_update_payload(payload):
    """
    Build a ``SubscriptionUpdate`` from a decoded JSON body.

    Keys that are absent or null are left ``UNSET``.
    """
    payload = _require_object(payload)
    update = SubscriptionUpdate()
    if payload.get('serviceName') is not None:
        update.service_name = _service_name(payload['serviceName'])
    if payload.get('price') is not None:
        update.price = _price(payload['price'])
    if payload.get('startDate') is not None:
        update.start_date = _date_text(payload['startDate'], 'startDate')
    if payload.get('endDate') is not None:
        update.end_date = _date_text(payload['endDate'], 'endDate')
    return update


def parse_filter_args(args, with_period=False):
    """
    Build a ``SubscriptionFilter`` from query string arguments.

    Args:
        args: Mapping of query parameters, such as a ``RequestParser`` result.
        with_period: Also read ``start_date``/``end_date``.
    """
    subscription_filter = SubscriptionFilter()
    user_id = args.get('user_id')
    if user_id:
        subscription_filter.user_id = parse_uuid(user_id, "invalid user id")
    subscription_filter.service_name = args.get('service_name') or None
    if with_period:
        subscription_filter.start_date = args.get('start_date') or None
        subscription_filter.end_date = args.get('end_date') or None
    return subscription_filter
