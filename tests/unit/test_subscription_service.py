"""
Unit tests for SubscriptionService.
"""
import uuid
from datetime import date

import pytest

from subscription_service.errors import NotFoundError, ValidationError
from subscription_service.schemas import SubscriptionCreate, SubscriptionFilter, SubscriptionUpdate


class TestSubscriptionService:
    """Tests for subscription use cases against an in-memory database."""

    def test_create_subscription(self, service, user_id):
        """Test creation assigns id, timestamps and first-of-month dates."""
        subscription = service.create_subscription(SubscriptionCreate(
            service_name="Netflix",
            price=15,
            user_id=user_id,
            start_date="01-2024",
            end_date="06-2024",
        ))

        assert isinstance(subscription.id, uuid.UUID)
        assert subscription.start_date == date(2024, 1, 1)
        assert subscription.end_date == date(2024, 6, 1)
        assert subscription.created_at is not None
        assert subscription.updated_at is not None

    def test_get_after_create(self, service, make_subscription):
        """Test a created subscription can be fetched unchanged."""
        created = make_subscription(price=15)
        fetched = service.get_subscription(created.id)
        assert fetched.id == created.id
        assert fetched.price == 15
        assert fetched.end_date is None

    def test_create_with_invalid_date(self, service, user_id):
        with pytest.raises(ValidationError):
            service.create_subscription(SubscriptionCreate(
                service_name="Netflix", price=15, user_id=user_id, start_date="2024-01"
            ))
        assert service.list_subscriptions() == []

    def test_create_accepts_end_before_start(self, make_subscription):
        """End month before start month is stored as given."""
        subscription = make_subscription(start_date="05-2024", end_date="01-2024")
        assert subscription.end_date < subscription.start_date

    def test_get_missing_subscription(self, service):
        with pytest.raises(NotFoundError):
            service.get_subscription(uuid.uuid4())

    def test_delete_then_get(self, service, make_subscription):
        """Test a deleted subscription is no longer found."""
        subscription = make_subscription()
        service.delete_subscription(subscription.id)
        with pytest.raises(NotFoundError):
            service.get_subscription(subscription.id)

    def test_delete_missing_subscription(self, service):
        with pytest.raises(NotFoundError):
            service.delete_subscription(uuid.uuid4())

    def test_update_only_supplied_fields(self, service, make_subscription):
        subscription = make_subscription(service_name="Netflix", price=15, end_date="12-2024")
        subscription_id = subscription.id
        created_at = subscription.created_at

        service.update_subscription(subscription_id, SubscriptionUpdate(price=20))

        updated = service.get_subscription(subscription_id)
        assert updated.price == 20
        assert updated.service_name == "Netflix"
        assert updated.end_date == date(2024, 12, 1)
        assert updated.updated_at >= created_at

    def test_update_clears_end_date(self, service, make_subscription):
        """Test an empty end date turns the subscription ongoing."""
        subscription = make_subscription(end_date="12-2024")
        service.update_subscription(subscription.id, SubscriptionUpdate(end_date=""))
        assert service.get_subscription(subscription.id).end_date is None

    def test_update_with_no_fields_is_rejected(self, service, make_subscription):
        subscription = make_subscription()
        updated_at = service.get_subscription(subscription.id).updated_at

        with pytest.raises(ValidationError) as exc_info:
            service.update_subscription(subscription.id, SubscriptionUpdate())
        assert exc_info.value.message == "no fields to update"
        assert service.get_subscription(subscription.id).updated_at == updated_at

    def test_update_with_invalid_date(self, service, make_subscription):
        subscription = make_subscription()
        with pytest.raises(ValidationError):
            service.update_subscription(subscription.id, SubscriptionUpdate(start_date="13-2024"))
        assert service.get_subscription(subscription.id).start_date == date(2024, 1, 1)

    def test_update_missing_subscription(self, service):
        with pytest.raises(NotFoundError):
            service.update_subscription(uuid.uuid4(), SubscriptionUpdate(price=10))

    def test_update_row_deleted_after_check(self, service, make_subscription, monkeypatch):
        """A row removed between the existence check and the write is reported as not found."""
        subscription = make_subscription()
        monkeypatch.setattr(service.repository, "update", lambda subscription_id, values: False)
        with pytest.raises(NotFoundError):
            service.update_subscription(subscription.id, SubscriptionUpdate(price=10))

    def test_total_cost_without_filter(self, service, make_subscription):
        make_subscription(price=15)
        make_subscription(price=400, service_name="Yandex Plus")
        make_subscription(price=5, owner=uuid.uuid4())
        assert service.get_total_cost(SubscriptionFilter()) == 420

    def test_total_cost_empty_store(self, service):
        assert service.get_total_cost(SubscriptionFilter()) == 0
        assert service.get_total_cost(None) == 0

    def test_total_cost_for_period(self, service, make_subscription):
        """Ongoing subscriptions started before the window count; later ones do not."""
        make_subscription(price=100, start_date="02-2024")
        make_subscription(price=7, start_date="06-2024")

        period = SubscriptionFilter(start_date="03-2024", end_date="05-2024")
        assert service.get_total_cost(period) == 100

    def test_list_subscriptions_by_user(self, service, make_subscription, user_id):
        make_subscription(service_name="Netflix")
        make_subscription(service_name="Spotify", owner=uuid.uuid4())

        subscriptions = service.list_subscriptions(SubscriptionFilter(user_id=user_id))
        assert [s.service_name for s in subscriptions] == ["Netflix"]
