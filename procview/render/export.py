from pathlib import Path
from typing import Dict

import pandas as pd

from procview.history.metric_history import MetricHistory


def histories_to_frame(histories: Dict[str, MetricHistory]) -> pd.DataFrame:
    """
    One column per series ('<chart>.<series>' or '<chart>' for unnamed series),
    one row per sample, oldest first. Shorter series are padded with NaN.
    """
    columns = {}
    for title, history in histories.items():
        with history.lock:
            for entry in history.entries:
                key = f"{title}.{entry.name}" if entry.name else title
                columns[key] = pd.Series(list(reversed(entry.series.values())), dtype="float64")
    return pd.DataFrame(columns)


def write_history_csv(histories: Dict[str, MetricHistory], path: Path) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    histories_to_frame(histories).to_csv(path, index_label="sample")
    return path
