"""
Development environment configuration module.
"""
from subscription_service.config.base_config import BaseConfig


class DevelopmentConfig(BaseConfig):
    """Development environment configuration class."""

    DEBUG = True
    SQLALCHEMY_ECHO = True  # Log SQL queries
