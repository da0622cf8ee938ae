"""
Logging configuration for the service.

``setup_logging`` attaches a single console handler to the root logger.
Calling it again is a no-op, which keeps repeated ``create_app`` calls
(tests, the CLI) from stacking handlers.
"""
import logging

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level="INFO"):
    """
    Configure the root logger.

    Args:
        level (str): Logging level name, case insensitive.
    """
    logger = logging.getLogger()
    logger.setLevel(getattr(logging, str(level).upper(), logging.INFO))
    if logger.handlers:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)
