"""
HTTP API package: namespaces and error handlers.
"""
import logging

from werkzeug.exceptions import HTTPException

from subscription_service.errors import PersistenceError, SubscriptionServiceError

logger = logging.getLogger(__name__)


def register_error_handlers(api):
    """
    Render errors raised inside API resources as ``{"error": "<message>"}``.

    Args:
        api (flask_restx.Api): The API to attach handlers to.
    """

    @api.errorhandler(SubscriptionServiceError)
    def handle_service_error(error):
        if isinstance(error, PersistenceError):
            logger.error("Storage error: %s", error.message, exc_info=error.__cause__)
        return error.to_dict(), int(error.status_code)

    @api.errorhandler(HTTPException)
    def handle_http_error(error):
        return {"error": error.description}, error.code
