from dataclasses import dataclass
from typing import List, Tuple

from procview.monitor.process_snapshot import ProcessSnapshot
from procview.util.formatting import format_number, format_time


@dataclass
class ProcessReport:
    """What one tick produced for display"""
    snapshot: ProcessSnapshot
    running_since: int

    @property
    def title(self) -> str:
        return f"Information about {self.snapshot.name}"

    def rows(self) -> List[Tuple[str, str]]:
        """(title, text) pairs in display order"""
        s = self.snapshot
        environment = "".join(f"\n{key}={value}" for key, value in s.environ.items())
        return [
            ("name", s.name),
            ("pid", str(s.pid)),
            ("memory usage", format_number(s.memory_bytes)),
            ("cpu usage", f"{s.cpu_percent:.1f}%"),
            ("Running since", format_time(self.running_since)),
            ("command", repr(list(s.cmdline))),
            ("executable path", s.exe),
            ("current working directory", s.cwd),
            ("root directory", s.root),
            ("environment", environment),
        ]
