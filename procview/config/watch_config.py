"""
Watch configuration data class.

Holds the settings of one watch session: how many samples each chart keeps,
how often the watcher ticks and where logs and charts go.
"""
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from procview.consts import DEFAULT_HISTORY_SIZE


@dataclass
class WatchConfig:

    history_size: int = DEFAULT_HISTORY_SIZE
    tick_interval: float = 1.0
    log_level: str = "INFO"
    log_file: Optional[Path] = None
    chart_dir: Optional[Path] = None
