"""
Production environment configuration module.
"""
from subscription_service.config.base_config import BaseConfig


class ProductionConfig(BaseConfig):
    """Production environment configuration class."""

    # Production should never run in debug mode
    DEBUG = False

    # Production usually doesn't need SQL echo
    SQLALCHEMY_ECHO = False

    # Recycle pooled connections dropped by the server
    SQLALCHEMY_ENGINE_OPTIONS = {"pool_pre_ping": True}
