"""
Process Watcher Module

Drives the history update once per tick, either in the caller's thread
(run) or in a background thread (start/stop).
"""
import threading
import time
from typing import Callable, Optional

from procview.errors import ProcessGoneError
from procview.history.sample_updater import SampleUpdater
from procview.monitor.process_report import ProcessReport
from procview.monitor.process_sampler import ProcessSampler
from procview.util.log_config import setup_logger

logger = setup_logger(__name__)


class ProcessWatcher:
    """Periodically sample a process and push the result into its histories"""

    def __init__(
        self,
        sampler: ProcessSampler,
        updater: SampleUpdater,
        interval: float = 1.0,
        monitoring_epoch_start: Optional[int] = None,
        accumulated_running_since: int = 0,
        on_tick: Optional[Callable[[ProcessReport], None]] = None,
        clock: Callable[[], float] = time.time,
    ):
        """
        Args:
            sampler: source of snapshots
            updater: updater owning the memory and CPU histories
            interval: seconds between two ticks
            monitoring_epoch_start: start of this session (default: now)
            accumulated_running_since: seconds carried over from earlier sessions
            on_tick: called with each report, in the ticking thread
            clock: wall clock returning seconds since the epoch
        """
        self.sampler = sampler
        self.updater = updater
        self.interval = interval
        self.clock = clock
        self.monitoring_epoch_start = (
            int(clock()) if monitoring_epoch_start is None else monitoring_epoch_start
        )
        self.accumulated_running_since = accumulated_running_since
        self.on_tick = on_tick
        self.last_report: Optional[ProcessReport] = None
        self.ticks = 0
        self.running = False
        self.thread: Optional[threading.Thread] = None
        self._stop_event = threading.Event()

    def session_seconds(self) -> int:
        """Seconds since the session epoch, never negative"""
        return max(0, int(self.clock()) - self.monitoring_epoch_start)

    def tick(self) -> ProcessReport:
        """
        Take one sample and update the histories.

        Raises:
            ProcessGoneError: the process exited
        """
        snapshot = self.sampler.sample()
        running_since = self.updater.update(
            snapshot,
            self.monitoring_epoch_start,
            self.accumulated_running_since + self.session_seconds(),
        )
        self.ticks += 1
        self.last_report = ProcessReport(snapshot, running_since)
        if self.on_tick is not None:
            self.on_tick(self.last_report)
        return self.last_report

    def run(self, max_ticks: Optional[int] = None) -> int:
        """
        Tick until stopped, the process exits or `max_ticks` is reached.

        Returns:
            Number of ticks performed by this call
        """
        self._stop_event.clear()
        self.running = True
        return self._loop(max_ticks)

    def _loop(self, max_ticks: Optional[int]) -> int:
        done = 0
        try:
            while self.running and (max_ticks is None or done < max_ticks):
                try:
                    self.tick()
                except ProcessGoneError as e:
                    logger.warning(str(e))
                    break
                done += 1
                if max_ticks is not None and done >= max_ticks:
                    break
                # Sleep until next tick, waking early on stop()
                if self._stop_event.wait(self.interval):
                    break
        finally:
            self.running = False
        return done

    def start(self, max_ticks: Optional[int] = None) -> None:
        """Start ticking in a background thread"""
        if self.thread is not None and self.thread.is_alive():
            return
        logger.info(f"Watching process {self.sampler.pid} every {self.interval}s")
        self._stop_event.clear()
        self.running = True
        self.thread = threading.Thread(target=self._loop, args=(max_ticks,), daemon=True)
        self.thread.start()

    def stop(self) -> Optional[ProcessReport]:
        """
        Stop the background thread.

        Returns:
            The last report, or None if no tick happened
        """
        self.running = False
        self._stop_event.set()
        if self.thread:
            self.thread.join(timeout=2.0)
            self.thread = None
        logger.info(f"Stopped watching process {self.sampler.pid} after {self.ticks} ticks")
        return self.last_report
