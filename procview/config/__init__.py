"""Configuration module for process watching."""

from .config_loader import ConfigLoader
from .watch_config import WatchConfig

__all__ = ["ConfigLoader", "WatchConfig"]
