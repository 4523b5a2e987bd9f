"""
PNG rendering of a MetricHistory.

The oldest sample is drawn on the left, the newest on the right, and the
y axis is labelled with the history's labeler output.
"""
from pathlib import Path

from matplotlib.backends.backend_agg import FigureCanvasAgg
from matplotlib.figure import Figure

from procview.history.metric_history import MetricHistory
from procview.util.log_config import setup_logger

logger = setup_logger(__name__)


def save_history_chart(history: MetricHistory, path: Path, title: str = "") -> Path:
    """
    Draw every series of `history` into a PNG file and acknowledge the history.

    Returns:
        The written path
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    fig = Figure(figsize=(6, 2.5), dpi=100)
    FigureCanvasAgg(fig)
    ax = fig.add_subplot(111)

    with history.lock:
        top = history.scale_max()
        for entry in history.entries:
            values = list(reversed(entry.series.values()))
            ax.plot(range(len(values)), values, label=entry.name or None, color=entry.color)
        labels = history.axis_labels()
        history.acknowledge()

    ax.set_ylim(0, top)
    ax.set_xticks([])
    if labels is not None:
        label_top, label_mid, label_bottom, unit = labels
        ax.set_yticks([0, top / 2, top])
        ax.set_yticklabels([label_bottom, label_mid, label_top])
        ax.set_ylabel(unit)
    if history.show_labels and history.entries:
        ax.legend(loc="upper left")
    if title:
        ax.set_title(title)
    ax.grid(True, alpha=0.3)

    fig.tight_layout()
    fig.savefig(path)
    logger.debug(f"Chart written to {path}")
    return path
