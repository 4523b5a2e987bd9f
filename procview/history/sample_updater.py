"""
Per-tick update of the process histories.

One call to SampleUpdater.update() per tick feeds the newest snapshot into the
memory and CPU histories and returns the refreshed running time.
"""
from procview.consts import CPU_CEILING, DEFAULT_HISTORY_SIZE
from procview.history.elapsed_time import compute_running_since
from procview.history.metric_history import MetricHistory
from procview.history.scale_labeler import byte_labels, percent_labels
from procview.monitor.process_snapshot import ProcessSnapshot
from procview.util.log_config import setup_logger

logger = setup_logger(__name__)


def create_process_histories(total_memory: int, history_size: int = DEFAULT_HISTORY_SIZE):
    """
    Build the memory and CPU histories shown for one process.

    Args:
        total_memory: system memory in bytes, used as the memory chart ceiling
        history_size: number of samples kept per series

    Returns:
        (memory_history, cpu_history)
    """
    cpu_history = MetricHistory(ceiling=CPU_CEILING, show_labels=False)
    cpu_history.attach_series("usage", [0.0] * history_size, percent_labels)
    cpu_history.invalidate()

    memory_history = MetricHistory(ceiling=float(total_memory), show_labels=False)
    memory_history.attach_series("rss", [0.0] * history_size, byte_labels)
    memory_history.invalidate()

    logger.debug(f"Created process histories ({history_size} samples, {total_memory} bytes ceiling)")
    return memory_history, cpu_history


class SampleUpdater:
    """Forwards each snapshot to the memory and CPU histories"""

    def __init__(self, memory_history: MetricHistory, cpu_history: MetricHistory):
        self.memory_history = memory_history
        self.cpu_history = cpu_history

    def update(
        self,
        snapshot: ProcessSnapshot,
        monitoring_epoch_start: int,
        accumulated_running_since: int,
    ) -> int:
        """
        Record one tick.

        Returns:
            Seconds the process has been running
        """
        running_since = compute_running_since(
            snapshot.process_start_time,
            monitoring_epoch_start,
            accumulated_running_since,
        )
        self.memory_history.record(0, snapshot.memory_bytes)
        self.cpu_history.record(0, snapshot.cpu_percent)
        return running_since
