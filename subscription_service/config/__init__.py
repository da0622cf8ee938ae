"""
Configuration package: YAML settings plus per-environment Flask config classes.
"""
from .settings import DatabaseSettings, LoggingSettings, ServerSettings, Settings, load_settings

CONFIG_CLASSES = {
    'development': ('subscription_service.config.development_config', 'DevelopmentConfig'),
    'testing': ('subscription_service.config.testing_config', 'TestingConfig'),
    'production': ('subscription_service.config.production_config', 'ProductionConfig'),
}

__all__ = [
    'CONFIG_CLASSES',
    'DatabaseSettings',
    'LoggingSettings',
    'ServerSettings',
    'Settings',
    'load_settings',
]
