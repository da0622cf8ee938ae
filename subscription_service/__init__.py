"""
Subscription Service Application Factory.
"""
import importlib
import logging
import os

from flask import Flask, jsonify
from flask_migrate import Migrate
from flask_restx import Api
from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import text

from subscription_service.config import CONFIG_CLASSES, load_settings
from subscription_service.errors import ConfigurationError
from subscription_service.utils.logging_config import setup_logging

# Initialize extensions
db = SQLAlchemy()
migrate = Migrate()

logger = logging.getLogger(__name__)

SERVICE_EXTENSION_KEY = 'subscription_service'


def create_app(config_name=None, settings=None):
    """
    Application Factory Pattern implementation.

    Args:
        config_name: Configuration name to use (development, testing, production).
            Defaults to ``$APP_ENV`` or ``development``.
        settings: Pre-loaded ``Settings``. Loaded from ``config.yaml`` and the
            environment when omitted.

    Returns:
        Flask application instance.

    Raises:
        ConfigurationError: If settings or the configuration profile cannot be loaded.
    """
    if settings is None:
        settings = load_settings()

    setup_logging(settings.logging.level)

    app_config = config_name or os.getenv("APP_ENV", "development")
    if app_config not in CONFIG_CLASSES:
        raise ConfigurationError(f"unknown configuration: {app_config}")

    app = Flask(__name__)

    module_path, class_name = CONFIG_CLASSES[app_config]
    config_class = getattr(importlib.import_module(module_path), class_name)
    app.config.from_object(config_class)
    logger.info("Loaded configuration class: %s", class_name)

    # A profile with its own database (testing) wins over the YAML settings
    if 'SQLALCHEMY_DATABASE_URI' not in app.config:
        app.config['SQLALCHEMY_DATABASE_URI'] = settings.database.uri

    app.config['APP_ENV'] = app_config
    app.config['SETTINGS'] = settings

    # Initialize extensions with app
    db.init_app(app)
    migrate.init_app(app, db)

    # Import models to ensure they're registered with SQLAlchemy
    from subscription_service.models import Subscription  # noqa: F401

    from subscription_service.repositories import SubscriptionRepository
    from subscription_service.services import SubscriptionService

    app.extensions[SERVICE_EXTENSION_KEY] = SubscriptionService(
        SubscriptionRepository(db.session)
    )

    # Create API with Swagger UI documentation. The Bearer scheme is
    # documented for clients but not enforced.
    api = Api(
        app,
        version=app.config.get("API_VERSION", "1.0"),
        title=app.config.get("API_TITLE", "Subscription Service API"),
        description=app.config.get("API_DESCRIPTION", "REST API for managing user subscriptions"),
        doc="/api/docs",
        authorizations={
            'Bearer Auth': {
                'type': 'apiKey',
                'in': 'header',
                'name': 'Authorization',
                'description': 'Enter: **Bearer &lt;token&gt;**'
            },
        },
        security='Bearer Auth'
    )

    from subscription_service.api import register_error_handlers
    from subscription_service.api.subscriptions import subscription_ns

    register_error_handlers(api)
    api.add_namespace(subscription_ns, path=f"{app.config['API_PREFIX']}/subscriptions")

    @app.route('/health')
    def health_check():
        """Health check endpoint to verify the application is running."""
        return jsonify({
            'status': 'healthy',
            'environment': app_config,
            'database_connected': check_db_connection(app)
        })

    @app.shell_context_processor
    def shell_context():
        return {"app": app, "db": db}

    return app


def check_db_connection(app):
    """Check if the database connection is working."""
    try:
        with app.app_context():
            db.session.execute(text('SELECT 1'))
            return True
    except Exception as e:
        logger.warning("Database connection error: %s", e)
        return False
