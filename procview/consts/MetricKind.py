from enum import Enum


class MetricKind(Enum):
    MEMORY = "memory"
    CPU = "cpu"

    @property
    def title(self) -> str:
        return "Memory usage" if self is MetricKind.MEMORY else "Process usage"
