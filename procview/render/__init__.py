"""Consumers of the histories: terminal table, PNG charts and CSV export."""

from .chart import save_history_chart
from .export import histories_to_frame, write_history_csv
from .table import render_table

__all__ = ["histories_to_frame", "render_table", "save_history_chart", "write_history_csv"]
