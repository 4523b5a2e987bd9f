"""
Process Sampler Module

Takes one ProcessSnapshot of a process per call, using psutil.
"""
import os
from typing import Callable, TypeVar

import psutil

from procview.errors import ProcessGoneError, SamplingError
from procview.monitor.process_snapshot import ProcessSnapshot
from procview.util.log_config import setup_logger

logger = setup_logger(__name__)

T = TypeVar("T")


def total_memory() -> int:
    """Total physical memory of the machine in bytes"""
    return psutil.virtual_memory().total


def _root_dir(pid: int) -> str:
    try:
        return os.readlink(f"/proc/{pid}/root")
    except OSError:
        return ""


class ProcessSampler:
    """Sample resource usage of a process"""

    def __init__(self, pid: int):
        """
        Attach to a process.

        Args:
            pid: Process ID to sample

        Raises:
            ProcessGoneError: if no process has this pid
        """
        self.pid = pid
        try:
            self.process = psutil.Process(pid)
            # Initialize CPU percent (first call returns 0.0)
            self.process.cpu_percent(interval=None)
        except psutil.NoSuchProcess as e:
            raise ProcessGoneError(pid) from e

    def _optional(self, getter: Callable[[], T], default: T) -> T:
        # Facts the OS refuses to share are shown empty
        try:
            return getter()
        except psutil.AccessDenied:
            logger.debug(f"Access denied reading {getattr(getter, '__name__', getter)} of {self.pid}")
            return default

    def sample(self) -> ProcessSnapshot:
        """
        Take a snapshot of the process.

        Raises:
            ProcessGoneError: the process exited
            SamplingError: the resource counters are not readable
        """
        try:
            with self.process.oneshot():
                memory_bytes = self.process.memory_info().rss
                cpu_percent = self.process.cpu_percent(interval=None)
                start_time = int(self.process.create_time())
                name = self._optional(self.process.name, "")
                cmdline = self._optional(self.process.cmdline, [])
                exe = self._optional(self.process.exe, "")
                cwd = self._optional(self.process.cwd, "")
                environ = self._optional(self.process.environ, {})
        except psutil.NoSuchProcess as e:
            raise ProcessGoneError(self.pid) from e
        except psutil.AccessDenied as e:
            raise SamplingError(self.pid, "access denied") from e

        return ProcessSnapshot(
            pid=self.pid,
            memory_bytes=memory_bytes,
            cpu_percent=cpu_percent,
            process_start_time=start_time,
            name=name,
            cmdline=cmdline,
            exe=exe,
            cwd=cwd,
            root=_root_dir(self.pid),
            environ=environ,
        )

    def total_memory(self) -> int:
        return total_memory()
