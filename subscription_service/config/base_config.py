"""
Base configuration module with common settings.
"""


class BaseConfig:
    """Base configuration class with common settings."""

    DEBUG = False
    TESTING = False

    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Error payloads are always {"error": "..."}; keep flask-restx from
    # merging its own "message" key into them.
    ERROR_INCLUDE_MESSAGE = False
    RESTX_ERROR_404_HELP = False
    RESTX_MASK_SWAGGER = False

    # API settings
    API_TITLE = "Subscription Service API"
    API_VERSION = "1.0"
    API_DESCRIPTION = "REST API for managing user subscriptions"
    API_PREFIX = "/api/v1"
