"""
Pytest configuration and fixtures.
"""
import uuid

import pytest

from subscription_service import SERVICE_EXTENSION_KEY, create_app
from subscription_service.config import Settings
from subscription_service.schemas import SubscriptionCreate


@pytest.fixture
def app():
    """
    Create a Flask application configured for testing.

    Each test gets its own in-memory SQLite database with fresh tables.

    Returns:
        Flask: The Flask application instance.
    """
    app = create_app('testing', settings=Settings())

    with app.app_context():
        from subscription_service import db

        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    """
    Create a test client for the Flask application.

    Returns:
        FlaskClient: A test client for the Flask application.
    """
    return app.test_client()


@pytest.fixture
def db(app):
    """
    Fixture for the SQLAlchemy database object.

    Returns:
        SQLAlchemy db: The database object for testing.
    """
    from subscription_service import db as _db
    return _db


@pytest.fixture
def service(app):
    """The SubscriptionService wired into the application."""
    return app.extensions[SERVICE_EXTENSION_KEY]


@pytest.fixture
def user_id():
    return uuid.uuid4()


@pytest.fixture
def make_subscription(service, user_id):
    """Factory creating subscriptions through the service."""

    def _make(service_name="Netflix", price=15, start_date="01-2024", end_date=None, owner=None):
        return service.create_subscription(SubscriptionCreate(
            service_name=service_name,
            price=price,
            user_id=owner or user_id,
            start_date=start_date,
            end_date=end_date,
        ))

    return _make
