"""
Service settings loaded from a YAML file with environment variable overrides.

The file is read first; any of the variables listed in ``ENV_OVERRIDES``
that are set (and non-empty) replace the corresponding value. A ``.env``
file in the working directory is loaded before overrides are applied.
"""
import os
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Optional
from urllib.parse import quote_plus

import yaml
from dotenv import load_dotenv

from subscription_service.errors import ConfigurationError

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
DEFAULT_CONFIG_PATH = PROJECT_ROOT / "config.yaml"

# (section, key, environment variable)
ENV_OVERRIDES = (
    ("server", "host", "SERVER_HOST"),
    ("server", "port", "SERVER_PORT"),
    ("database", "host", "DB_HOST"),
    ("database", "port", "DB_PORT"),
    ("database", "user", "DB_USER"),
    ("database", "password", "DB_PASSWORD"),
    ("database", "name", "DB_NAME"),
    ("database", "ssl_mode", "DB_SSL_MODE"),
    ("logging", "level", "LOG_LEVEL"),
)


@dataclass
class ServerSettings:
    host: str = "0.0.0.0"
    port: int = 8080
    shutdown_timeout: float = 5.0


@dataclass
class DatabaseSettings:
    host: str = "localhost"
    port: int = 5432
    user: str = "postgres"
    password: str = "postgres"
    name: str = "subscriptions"
    ssl_mode: str = "disable"

    @property
    def uri(self) -> str:
        """SQLAlchemy URL for the PostgreSQL database."""
        return (
            f"postgresql+psycopg2://{quote_plus(self.user)}:{quote_plus(self.password)}"
            f"@{self.host}:{self.port}/{self.name}?sslmode={self.ssl_mode}"
        )


@dataclass
class LoggingSettings:
    level: str = "INFO"


@dataclass
class Settings:
    server: ServerSettings = field(default_factory=ServerSettings)
    database: DatabaseSettings = field(default_factory=DatabaseSettings)
    logging: LoggingSettings = field(default_factory=LoggingSettings)


def _build_section(section_cls, values, section_name):
    if values is None:
        values = {}
    if not isinstance(values, dict):
        raise ConfigurationError(f"config section '{section_name}' must be a mapping")

    known = {f.name: f for f in fields(section_cls)}
    kwargs = {}
    for key, value in values.items():
        if key not in known:
            raise ConfigurationError(f"unknown config key '{section_name}.{key}'")
        kwargs[key] = _coerce(known[key].type, value, f"{section_name}.{key}")
    return section_cls(**kwargs)


def _coerce(field_type, value, key):
    try:
        if field_type is int:
            return int(value)
        if field_type is float:
            return float(value)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"invalid value for '{key}': {value!r}") from e
    return str(value)


def load_settings(path: Optional[str] = None, environ=None) -> Settings:
    """
    Load settings from YAML and apply environment overrides.

    Args:
        path: YAML file to read. Defaults to ``$CONFIG_PATH`` or
            ``config.yaml`` at the project root.
        environ: Mapping used for overrides, defaults to ``os.environ``.

    Returns:
        Settings: The resolved settings.

    Raises:
        ConfigurationError: If the file is missing or malformed.
    """
    if environ is None:
        load_dotenv()
        environ = os.environ

    config_path = Path(path or environ.get("CONFIG_PATH") or DEFAULT_CONFIG_PATH)
    try:
        with open(config_path, encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}
    except OSError as e:
        raise ConfigurationError(f"failed to read config file {config_path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigurationError(f"failed to parse config file {config_path}: {e}") from e

    if not isinstance(raw, dict):
        raise ConfigurationError(f"config file {config_path} must contain a mapping")

    for section, key, variable in ENV_OVERRIDES:
        value = environ.get(variable)
        if value:
            section_values = raw.get(section) or {}
            section_values[key] = value
            raw[section] = section_values

    return Settings(
        server=_build_section(ServerSettings, raw.get("server"), "server"),
        database=_build_section(DatabaseSettings, raw.get("database"), "database"),
        logging=_build_section(LoggingSettings, raw.get("logging"), "logging"),
    )
