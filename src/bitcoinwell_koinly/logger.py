"""
Logging configuration for bitcoinwell-koinly.
"""
import logging
import os
import sys

LOG_FORMAT = "%(asctime)s | %(name)s | %(levelname)s | %(message)s"
DEFAULT_LOG_LEVEL = "WARNING"


def setup_logger(name: str, level: str | None = None) -> logging.Logger:
    """
    Configure and return a logger instance.

    Args:
        name: Logger name (usually __name__)
        level: Log level (DEBUG, INFO, WARNING, ERROR). Defaults to env LOG_LEVEL or WARNING.

    Returns:
        Configured logger instance
    """
    log_level = (level or os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL)).upper()

    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, log_level, logging.WARNING))

    # Avoid duplicate handlers
    if not logger.handlers:
        # stdout may carry the CSV itself (--stdout)
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        logger.addHandler(handler)

    return logger


def set_level(level: str) -> None:
    """Apply a log level to every bitcoinwell_koinly logger."""
    numeric = getattr(logging, level.upper(), logging.WARNING)
    for name in list(logging.root.manager.loggerDict):
        if name == "bitcoinwell_koinly" or name.startswith("bitcoinwell_koinly."):
            logging.getLogger(name).setLevel(numeric)
