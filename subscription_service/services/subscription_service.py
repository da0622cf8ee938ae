"""
Subscription use cases: creation defaults, existence checks and delegation
of filtering and aggregation to the repository.
"""
import logging
import uuid

from subscription_service.errors import NotFoundError, ValidationError
from subscription_service.models import Subscription, utcnow
from subscription_service.repositories.query_builder import build_update_values
from subscription_service.utils.dates import parse_month_year

logger = logging.getLogger(__name__)


class SubscriptionService:
    """Orchestrates subscription operations on top of a repository."""

    def __init__(self, repository):
        self.repository = repository

    def create_subscription(self, request):
        """
        Create a subscription from a ``SubscriptionCreate`` request.

        Raises:
            ValidationError: If a date is not ``MM-YYYY`` text.
            PersistenceError: If the record cannot be stored.
        """
        start_date = parse_month_year(request.start_date, "start date")
        end_date = None
        if request.end_date:
            end_date = parse_month_year(request.end_date, "end date")

        now = utcnow()
        subscription = Subscription(
            id=uuid.uuid4(),
            service_name=request.service_name,
            price=request.price,
            user_id=request.user_id,
            start_date=start_date,
            end_date=end_date,
            created_at=now,
            updated_at=now,
        )
        self.repository.create(subscription)
        logger.info("Created subscription %s for user %s", subscription.id, subscription.user_id)
        return subscription

    def get_subscription(self, subscription_id):
        """
        Fetch a subscription.

        Raises:
            NotFoundError: If no subscription has this id.
        """
        subscription = self.repository.get_by_id(subscription_id)
        if subscription is None:
            raise NotFoundError("subscription not found")
        return subscription

    def update_subscription(self, subscription_id, request):
        """
        Apply a ``SubscriptionUpdate``; only supplied fields change.

        Raises:
            ValidationError: If no field is supplied or a date is malformed.
            NotFoundError: If the subscription does not exist.
        """
        if request.is_empty():
            raise ValidationError("no fields to update")
        values = build_update_values(request)

        self.get_subscription(subscription_id)
        # The row can disappear between the check and the write
        if not self.repository.update(subscription_id, values):
            raise NotFoundError("subscription not found")
        logger.info("Updated subscription %s fields %s", subscription_id, sorted(values))

    def delete_subscription(self, subscription_id):
        """
        Delete a subscription.

        Raises:
            NotFoundError: If the subscription does not exist.
        """
        self.get_subscription(subscription_id)
        if not self.repository.delete(subscription_id):
            raise NotFoundError("subscription not found")
        logger.info("Deleted subscription %s", subscription_id)

    def list_subscriptions(self, subscription_filter=None):
        return self.repository.list(subscription_filter)

    def get_total_cost(self, subscription_filter=None):
        return self.repository.get_total_cost(subscription_filter)
