"""
Error taxonomy for the subscription service and its HTTP mapping.
"""
from http import HTTPStatus


class SubscriptionServiceError(Exception):
    """Base class for errors surfaced to API clients."""

    status_code = HTTPStatus.INTERNAL_SERVER_ERROR

    def __init__(self, message):
        super().__init__(message)
        self.message = message

    def to_dict(self):
        return {"error": self.message}


class ValidationError(SubscriptionServiceError):
    """Malformed identifier, date text or request body."""

    status_code = HTTPStatus.BAD_REQUEST


class NotFoundError(SubscriptionServiceError):
    """No subscription exists for the requested identifier."""

    status_code = HTTPStatus.NOT_FOUND


class PersistenceError(SubscriptionServiceError):
    """Constraint violation, connectivity failure or unexpected query failure."""

    status_code = HTTPStatus.INTERNAL_SERVER_ERROR


class ConfigurationError(Exception):
    """Raised when the service configuration cannot be loaded."""
