"""Console logging setup for the inventory service."""

import logging

LOGGER_NAME = "easyinv"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str | int = "INFO") -> logging.Logger:
    """Attach a console handler to the package logger.

    Calling this more than once only updates the level; it never stacks
    handlers.

    Args:
        level: Level name or number for the package logger.

    Returns:
        The configured package logger.
    """
    package_logger = logging.getLogger(LOGGER_NAME)
    package_logger.setLevel(level)
    if not any(
        getattr(h, "_easyinv_console", False) for h in package_logger.handlers
    ):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._easyinv_console = True  # type: ignore[attr-defined]
        package_logger.addHandler(handler)
    return package_logger
