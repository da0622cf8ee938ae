"""
Table-driven construction of filter clauses and update value maps.

Every optional request field maps to one row of a rule table. Only fields
that are present contribute to the statement, and values always travel as
bound parameters, never as SQL text.
"""
from sqlalchemy import or_, true

from subscription_service.models import Subscription
from subscription_service.schemas import UNSET
from subscription_service.utils.dates import next_month, parse_month_year


def _end_month(value):
    # "" clears the end month back to ongoing
    if value == "":
        return None
    return parse_month_year(value, "end date")


# (request field, converter into the column value)
UPDATE_FIELDS = (
    ("service_name", lambda value: value),
    ("price", lambda value: value),
    ("start_date", lambda value: parse_month_year(value, "start date")),
    ("end_date", _end_month),
)


def build_update_values(update):
    """
    Map the supplied fields of a ``SubscriptionUpdate`` to column values.

    Returns:
        dict: Column attribute name to new value, in table order. Empty when
        nothing was supplied.

    Raises:
        ValidationError: If a supplied date is not ``MM-YYYY`` text.
    """
    values = {}
    for field_name, convert in UPDATE_FIELDS:
        value = getattr(update, field_name)
        if value is UNSET:
            continue
        values[field_name] = convert(value)
    return values


def _active_from(value):
    window_start = parse_month_year(value, "start date")
    return or_(Subscription.end_date.is_(None), Subscription.end_date >= window_start)


def _started_by(value):
    window_end = parse_month_year(value, "end date")
    try:
        boundary = next_month(window_end)
    except OverflowError:
        # the period runs to the last representable month
        return true()
    return Subscription.start_date < boundary


# (filter field, clause factory)
LIST_FILTER_RULES = (
    ("user_id", lambda value: Subscription.user_id == value),
    ("service_name", lambda value: Subscription.service_name.icontains(value, autoescape=True)),
)

# A subscription counts towards a period when its active months overlap it;
# a missing end month means it is still active.
COST_FILTER_RULES = LIST_FILTER_RULES + (
    ("start_date", _active_from),
    ("end_date", _started_by),
)


def build_filter_clauses(subscription_filter, rules=LIST_FILTER_RULES):
    """
    Build WHERE clauses for the fields present on a ``SubscriptionFilter``.

    Args:
        subscription_filter: Filter criteria; ``None`` fields are ignored.
        rules: Rule table to apply.

    Returns:
        list: SQLAlchemy boolean clauses, empty when no field is set.

    Raises:
        ValidationError: If a date field is not ``MM-YYYY`` text.
    """
    if subscription_filter is None:
        return []
    clauses = []
    for field_name, make_clause in rules:
        value = getattr(subscription_filter, field_name, None)
        if value is None:
            continue
        clauses.append(make_clause(value))
    return clauses
