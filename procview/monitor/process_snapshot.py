from dataclasses import dataclass, field
from typing import Dict, List


@dataclass(frozen=True)
class ProcessSnapshot:
    """Resource usage of one process at one tick"""
    pid: int
    memory_bytes: int       # Resident Set Size
    cpu_percent: float
    process_start_time: int  # seconds since the epoch

    # Static facts, only displayed
    name: str = ""
    cmdline: List[str] = field(default_factory=list)
    exe: str = ""
    cwd: str = ""
    root: str = ""
    environ: Dict[str, str] = field(default_factory=dict)
