"""
Testing environment configuration module.
"""
from subscription_service.config.base_config import BaseConfig


class TestingConfig(BaseConfig):
    """Testing environment configuration class."""

    TESTING = True
    DEBUG = True

    # In-memory database, one per application instance
    SQLALCHEMY_DATABASE_URI = "sqlite://"
