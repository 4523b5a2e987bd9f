import pytest

from procview.monitor.process_snapshot import ProcessSnapshot


@pytest.fixture
def snapshot():
    return ProcessSnapshot(
        pid=4242,
        memory_bytes=3 * 1024 * 1024,
        cpu_percent=37.5,
        process_start_time=400,
        name="worker",
        cmdline=["worker", "--fast"],
        exe="/usr/bin/worker",
        cwd="/srv",
        root="/",
        environ={"HOME": "/root"},
    )
