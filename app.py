#!/usr/bin/env python
"""
Main application entry point for the Subscription Service API.
"""
import logging
import sys

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from subscription_service import create_app, db
from subscription_service.config import load_settings
from subscription_service.errors import ConfigurationError
from subscription_service.server import serve

logger = logging.getLogger(__name__)


def main():
    try:
        settings = load_settings()
        app = create_app(settings=settings)
    except ConfigurationError as e:
        logging.basicConfig(level=logging.INFO)
        logger.error("Failed to load config: %s", e)
        return 1

    try:
        with app.app_context():
            db.session.execute(text('SELECT 1'))
    except SQLAlchemyError as e:
        logger.error("Failed to connect to database: %s", e)
        return 1
    logger.info("Successfully connected to database")

    serve(app, settings.server.host, settings.server.port, settings.server.shutdown_timeout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
