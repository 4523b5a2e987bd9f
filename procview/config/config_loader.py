"""
Configuration loader for watch sessions.

Reads config.yaml from a configuration directory and applies the
environment-specific override config_<env>.yaml on top of it.
"""
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from procview.config.watch_config import WatchConfig
from procview.errors import ConfigError
from procview.util.log_config import resolve_level

BASE_CONFIG_NAME = "config.yaml"


class ConfigLoader:

    def __init__(self, config_path: Optional[Path] = None, env: Optional[str] = None):
        self.config_path = Path(config_path) if config_path is not None else None
        self.env = env
        self.config_data = self._load_config()

    def _read_yaml(self, path: Path) -> Dict[str, Any]:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ConfigError(path.name, "top level must be a mapping")
        return data

    def _load_config(self) -> WatchConfig:
        """
        Load and validate the watch configuration.

        A missing base file yields the defaults; a requested environment
        override must exist.

        Returns:
            WatchConfig: validated configuration
        """
        data: Dict[str, Any] = {}
        if self.config_path is not None:
            base_config_file = self.config_path / BASE_CONFIG_NAME
            if base_config_file.exists():
                data = self._read_yaml(base_config_file)

            if self.env:
                env_config_file = self.config_path / f"config_{self.env}.yaml"
                if not env_config_file.exists():
                    raise ConfigError("env", f"no override file {env_config_file}")
                # Environment values overwrite base values
                data.update(self._read_yaml(env_config_file))

        return self._parse(data)

    @staticmethod
    def _parse(data: Dict[str, Any]) -> WatchConfig:
        config = WatchConfig()

        if "history_size" in data:
            history_size = data["history_size"]
            if isinstance(history_size, bool) or not isinstance(history_size, int) or history_size < 1:
                raise ConfigError("history_size", "must be an integer >= 1")
            config.history_size = history_size

        if "tick_interval" in data:
            interval = data["tick_interval"]
            if isinstance(interval, bool) or not isinstance(interval, (int, float)) or interval <= 0:
                raise ConfigError("tick_interval", "must be a positive number of seconds")
            config.tick_interval = float(interval)

        if "log_level" in data:
            try:
                resolve_level(str(data["log_level"]))
            except ValueError as e:
                raise ConfigError("log_level", str(e)) from e
            config.log_level = str(data["log_level"]).upper()

        if data.get("log_file"):
            config.log_file = Path(data["log_file"])

        if data.get("chart_dir"):
            config.chart_dir = Path(data["chart_dir"])

        return config
