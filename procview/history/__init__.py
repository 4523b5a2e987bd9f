"""Bounded metric history: ring series, histories, labels and the tick update."""

from .elapsed_time import compute_running_since
from .metric_history import MetricHistory, SeriesEntry
from .ring_series import RingSeries
from .sample_updater import SampleUpdater, create_process_histories
from .scale_labeler import AxisLabels, ScaleLabeler, byte_labels, kilobyte_labels, percent_labels

__all__ = [
    "AxisLabels",
    "MetricHistory",
    "RingSeries",
    "SampleUpdater",
    "ScaleLabeler",
    "SeriesEntry",
    "byte_labels",
    "compute_running_since",
    "create_process_histories",
    "kilobyte_labels",
    "percent_labels",
]
