"""Shared helpers: logging setup and display formatting."""

from .formatting import format_number, format_time
from .log_config import setup_logger

__all__ = ["format_number", "format_time", "setup_logger"]
