"""
Logging configuration for Auction Intel.

All modules log through the standard ``logging`` root logger. This module
installs the console (and optional file) handler once at startup, either
from explicit arguments or from the ``[logging]`` section of config.toml.
"""

import logging
from pathlib import Path
from typing import Optional

from .config import LoggingConfig

DEFAULT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# Third-party loggers that are too chatty at INFO (requests' connection pool)
QUIET_LOGGERS = ('urllib3',)


def _level(level: str) -> int:
    return getattr(logging, level.upper(), logging.INFO)


def _attach(handler: logging.Handler, level: int, formatter: logging.Formatter) -> None:
    handler.setLevel(level)
    handler.setFormatter(formatter)
    logging.getLogger().addHandler(handler)


def setup_logging(
    level: str = 'INFO',
    log_file: Optional[str] = None,
    log_dir: Optional[str] = None,
    format_string: Optional[str] = None
) -> None:
    """
    Replace the root logger's handlers with a console handler and, when
    ``log_file`` is given, a file handler under ``log_dir`` (default 'logs').

    Unknown level names fall back to INFO.
    """
    numeric_level = _level(level)
    formatter = logging.Formatter(format_string or DEFAULT_FORMAT)

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    _attach(logging.StreamHandler(), numeric_level, formatter)

    if log_file:
        log_path = Path(log_dir or 'logs') / log_file
        log_path.parent.mkdir(parents=True, exist_ok=True)
        _attach(logging.FileHandler(log_path, encoding='utf-8'), numeric_level, formatter)
        logging.info(f"Logging to file: {log_path}")

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(numeric_level, logging.WARNING))

    logging.info(f"Logging configured with level: {level}")


def setup_logging_from_config(log_config: LoggingConfig) -> None:
    """Apply the ``[logging]`` section of the application config."""
    setup_logging(level=log_config.level, log_file=log_config.log_file, log_dir=log_config.log_dir)


def set_log_level(level: str) -> None:
    """
    Set the log level on the root logger and all of its handlers.

    Args:
        level: Logging level ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')
    """
    numeric_level = _level(level)
    logging.getLogger().setLevel(numeric_level)

    for handler in logging.getLogger().handlers:
        handler.setLevel(numeric_level)

    logging.info(f"Log level set to: {level}")
