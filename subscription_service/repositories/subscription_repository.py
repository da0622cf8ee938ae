"""
SQLAlchemy-backed storage for subscription records.
"""
import logging

from sqlalchemy import delete, func, select, update
from sqlalchemy.exc import SQLAlchemyError

from subscription_service.errors import PersistenceError
from subscription_service.models import Subscription, utcnow

from .query_builder import COST_FILTER_RULES, LIST_FILTER_RULES, build_filter_clauses

logger = logging.getLogger(__name__)


class SubscriptionRepository:
    """
    Executes subscription statements against a SQLAlchemy session.

    Every write commits on success and rolls back on failure. Database
    errors are re-raised as ``PersistenceError``.
    """

    def __init__(self, session):
        self._session = session

    def _fail(self, action, error):
        self._session.rollback()
        logger.error("Failed to %s: %s", action, error)
        return PersistenceError(f"failed to {action}")

    def create(self, subscription):
        """
        Insert a fully populated subscription.

        Raises:
            PersistenceError: On constraint violation or connectivity failure.
        """
        try:
            self._session.add(subscription)
            self._session.commit()
        except SQLAlchemyError as e:
            raise self._fail("create subscription", e) from e
        return subscription

    def get_by_id(self, subscription_id):
        """
        Fetch one subscription.

        Returns:
            Subscription or None: None when no row matches.
        """
        try:
            return self._session.get(Subscription, subscription_id)
        except SQLAlchemyError as e:
            raise self._fail("get subscription by id", e) from e

    def update(self, subscription_id, values):
        """
        Apply a partial update and refresh ``updated_at``.

        Args:
            subscription_id (UUID): Row to update.
            values (dict): Column attribute name to new value. No statement is
                executed when empty.

        Returns:
            bool: Whether a row was updated.
        """
        if not values:
            return False

        statement = (
            update(Subscription)
            .where(Subscription.id == subscription_id)
            .values(**values, updated_at=utcnow())
        )
        try:
            result = self._session.execute(statement)
            self._session.commit()
        except SQLAlchemyError as e:
            raise self._fail("update subscription", e) from e
        return result.rowcount > 0

    def delete(self, subscription_id):
        """
        Delete a subscription by id.

        Returns:
            bool: Whether a row was deleted. Deleting a missing row is not an error.
        """
        statement = delete(Subscription).where(Subscription.id == subscription_id)
        try:
            result = self._session.execute(statement)
            self._session.commit()
        except SQLAlchemyError as e:
            raise self._fail("delete subscription", e) from e
        return result.rowcount > 0

    def list(self, subscription_filter=None):
        """
        List subscriptions matching the user and service name filters.

        Returns:
            list: Subscriptions, most recently created first.
        """
        statement = (
            select(Subscription)
            .where(*build_filter_clauses(subscription_filter, LIST_FILTER_RULES))
            .order_by(Subscription.created_at.desc())
        )
        try:
            return list(self._session.scalars(statement).all())
        except SQLAlchemyError as e:
            raise self._fail("list subscriptions", e) from e

    def get_total_cost(self, subscription_filter=None):
        """
        Sum the price of subscriptions matching the filter and period.

        Returns:
            int: Total price, 0 when nothing matches.
        """
        statement = (
            select(func.coalesce(func.sum(Subscription.price), 0))
            .where(*build_filter_clauses(subscription_filter, COST_FILTER_RULES))
        )
        try:
            return int(self._session.scalar(statement))
        except SQLAlchemyError as e:
            raise self._fail("calculate total cost", e) from e
