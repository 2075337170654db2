"""Logging configuration and setup for SlashVibeRepo."""

import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_LEVEL_ALIASES = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARN": logging.WARNING,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def parse_log_level(level: str | None) -> int:
    """Translate a level name into a logging level.

    Names are case-insensitive and ``warn`` is accepted as an alias for
    ``WARNING``. Unknown or empty names fall back to INFO.

    Args:
        level: Level name from configuration (e.g. "debug", "WARN").

    Returns:
        Numeric logging level.
    """
    if not level:
        return logging.INFO
    return _LEVEL_ALIASES.get(level.strip().upper(), logging.INFO)


def setup_logging(level: str | None = "INFO") -> None:
    """Configure the root logger with a console handler.

    Args:
        level: Logging level name (DEBUG, INFO, WARN/WARNING, ERROR, CRITICAL).
    """
    numeric_level = parse_log_level(level)

    # Clear any existing handlers
    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(numeric_level)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    root_logger.addHandler(console_handler)

    logging.info(f"Logging initialized: level={logging.getLevelName(numeric_level)}")
