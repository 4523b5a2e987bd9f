"""
MetricHistory: the series drawn together on one chart.

A history is written by the updater once per tick and read by a renderer in
between. The renderer acknowledges what it drew by clearing the dirty flag.
"""
import threading
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple, Union

from procview.history.ring_series import RingSeries
from procview.history.scale_labeler import AxisLabels, ScaleLabeler

SeriesRef = Union[int, str]


@dataclass
class SeriesEntry:
    """A named series and its optional drawing color"""
    name: str
    series: RingSeries
    color: Optional[Tuple[float, float, float]] = None


class MetricHistory:
    """Named ring series sharing one coordinate space"""

    def __init__(self, ceiling: Optional[float] = None, show_labels: bool = True):
        """
        Args:
            ceiling: fixed top of the scale (e.g. total memory); None scales on the data
            show_labels: whether a renderer should draw the series legend
        """
        self.ceiling = ceiling
        self.show_labels = show_labels
        self.labeler: Optional[ScaleLabeler] = None
        self.entries: List[SeriesEntry] = []
        self.dirty = False
        # Held by the writer for each record and by readers for each read
        self.lock = threading.RLock()

    def attach_series(
        self,
        name: str,
        initial_points: Iterable[float],
        labeler: Optional[ScaleLabeler] = None,
        color: Optional[Tuple[float, float, float]] = None,
    ) -> int:
        """
        Register a new series.

        A given labeler replaces the active one, so the last registration wins.

        Returns:
            Index of the new series, usable with record() and current()
        """
        if any(entry.name == name for entry in self.entries):
            raise ValueError(f"Series '{name}' is already attached")
        self.entries.append(SeriesEntry(name, RingSeries(initial_points), color))
        if labeler is not None:
            self.labeler = labeler
        return len(self.entries) - 1

    def series(self, ref: SeriesRef) -> RingSeries:
        """Look up a series by index or name."""
        if isinstance(ref, str):
            for entry in self.entries:
                if entry.name == ref:
                    return entry.series
            raise KeyError(f"No series named '{ref}'")
        if not 0 <= ref < len(self.entries):
            raise IndexError(f"No series at index {ref}")
        return self.entries[ref].series

    def record(self, ref: SeriesRef, value: float) -> None:
        """Rotate the series and store `value` as its newest sample."""
        with self.lock:
            self.series(ref).rotate_and_set(value)
            self.dirty = True

    def invalidate(self) -> None:
        self.dirty = True

    def acknowledge(self) -> None:
        """Called by a renderer once the current contents have been drawn."""
        self.dirty = False

    def current(self, ref: SeriesRef = 0) -> float:
        return self.series(ref).newest

    def scale_max(self) -> float:
        """Top of the chart: the ceiling, or the largest sample when there is none."""
        if self.ceiling is not None:
            return self.ceiling
        peak = max((max(entry.series) for entry in self.entries), default=0.0)
        return peak if peak > 0 else 1.0

    def axis_labels(self) -> Optional[AxisLabels]:
        if self.labeler is None:
            return None
        return self.labeler(self.scale_max())

    def __len__(self) -> int:
        return len(self.entries)
