"""Constants shared across procview."""

from .MetricKind import MetricKind

DEFAULT_HISTORY_SIZE = 61
CPU_CEILING = 100.0

__all__ = ["MetricKind", "DEFAULT_HISTORY_SIZE", "CPU_CEILING"]
