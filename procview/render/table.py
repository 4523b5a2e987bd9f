from typing import Dict

from tabulate import tabulate

from procview.history.metric_history import MetricHistory
from procview.monitor.process_report import ProcessReport


def render_table(report: ProcessReport, histories: Dict[str, MetricHistory]) -> str:
    """
    Format the process facts and the current chart state as text tables.

    Each history is acknowledged once its current values have been read.
    """
    info = tabulate(report.rows(), tablefmt="plain")

    chart_rows = []
    for title, history in histories.items():
        with history.lock:
            labels = history.axis_labels()
            current = history.current()
            history.acknowledge()
        if labels is None:
            chart_rows.append([title, f"{current:.1f}", "", "", "", ""])
        else:
            top, mid, bottom, unit = labels
            chart_rows.append([title, f"{current:.1f}", top, mid, bottom, unit])

    charts = tabulate(
        chart_rows,
        headers=["chart", "current", "top", "mid", "bottom", "unit"],
        tablefmt="simple",
    )
    return f"{report.title}\n\n{info}\n\n{charts}"
