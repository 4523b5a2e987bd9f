"""Exception types raised by procview collaborators."""


class ProcviewError(Exception):
    """Base class for errors raised outside the numeric core"""


class SamplingError(ProcviewError):
    """A snapshot of the watched process could not be taken"""

    def __init__(self, pid: int, reason: str):
        super().__init__(f"Cannot sample process {pid}: {reason}")
        self.pid = pid
        self.reason = reason


class ProcessGoneError(SamplingError):
    """The watched process exited between two ticks"""

    def __init__(self, pid: int):
        super().__init__(pid, "process no longer exists")


class ConfigError(ProcviewError):
    """Invalid value in a watch configuration file"""

    def __init__(self, key: str, message: str):
        super().__init__(f"Invalid config value for '{key}': {message}")
        self.key = key
