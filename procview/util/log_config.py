"""
Logging configuration for procview.

Every module gets its logger through setup_logger(__name__) so terminal output
stays short and uniform, while an optional log file keeps the detailed format.
"""
import logging
import sys
from pathlib import Path
from typing import Optional, Union


def resolve_level(level: Union[int, str]) -> int:
    """
    Turn a level name from a config file ('debug', 'INFO', ...) into a logging level.

    Args:
        level: logging level as int or case-insensitive name

    Returns:
        Numeric logging level
    """
    if isinstance(level, int):
        return level
    value = logging.getLevelName(level.upper())
    if not isinstance(value, int):
        raise ValueError(f"Unknown log level: {level}")
    return value


def setup_logger(
    name: str,
    level: Union[int, str] = logging.INFO,
    log_file: Optional[Path] = None
) -> logging.Logger:
    """
    Configure and return a logger with consistent formatting.

    Args:
        name: Logger name (typically __name__)
        level: Logging level or level name (default: INFO)
        log_file: Optional file path for log output

    Returns:
        Configured logger instance
    """
    level = resolve_level(level)
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Calling twice for the same name must not duplicate output
    logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(fmt='[%(levelname)s] %(message)s'))
    logger.addHandler(console_handler)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, mode='a', encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(
            fmt='%(asctime)s [%(levelname)s] %(name)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        ))
        logger.addHandler(file_handler)

    logger.propagate = False

    return logger


def configure_package_logging(level: Union[int, str], log_file: Optional[Path] = None) -> None:
    """Re-apply level and file handler to every procview logger created so far."""
    for name in list(logging.Logger.manager.loggerDict):
        if name == "procview" or name.startswith("procview."):
            setup_logger(name, level=level, log_file=log_file)
