from dataclasses import replace

import pytest

from procview.errors import ProcessGoneError
from procview.history import SampleUpdater, create_process_histories
from procview.monitor.process_watcher import ProcessWatcher


class FakeSampler:
    def __init__(self, snapshot, alive_ticks=None):
        self.pid = snapshot.pid
        self.snapshot = snapshot
        self.alive_ticks = alive_ticks
        self.calls = 0

    def sample(self):
        if self.alive_ticks is not None and self.calls >= self.alive_ticks:
            raise ProcessGoneError(self.pid)
        self.calls += 1
        return replace(self.snapshot, cpu_percent=float(self.calls))


class FakeClock:
    def __init__(self, now):
        self.now = now

    def __call__(self):
        return self.now


@pytest.fixture
def histories():
    return create_process_histories(total_memory=1024 ** 3, history_size=4)


def make_watcher(snapshot, histories, clock, **kwargs):
    memory, cpu = histories
    return ProcessWatcher(
        FakeSampler(snapshot, kwargs.pop("alive_ticks", None)),
        SampleUpdater(memory, cpu),
        interval=0,
        clock=clock,
        **kwargs,
    )


def test_tick_updates_histories_and_report(snapshot, histories):
    clock = FakeClock(1000.0)
    watcher = make_watcher(snapshot, histories, clock)
    report = watcher.tick()
    memory, cpu = histories
    assert report.running_since == 600
    assert watcher.last_report is report
    assert memory.current() == float(snapshot.memory_bytes)
    assert cpu.current() == 1.0


def test_running_time_grows_with_session(snapshot, histories):
    clock = FakeClock(1000.0)
    watcher = make_watcher(snapshot, histories, clock, accumulated_running_since=10)
    assert watcher.tick().running_since == 610
    clock.now = 1005.0
    assert watcher.tick().running_since == 615


def test_process_started_during_session(snapshot, histories):
    clock = FakeClock(1100.0)
    late = replace(snapshot, process_start_time=1050)
    watcher = make_watcher(late, histories, clock, monitoring_epoch_start=1000)
    assert watcher.tick().running_since == 50


def test_run_stops_after_max_ticks(snapshot, histories):
    seen = []
    watcher = make_watcher(snapshot, histories, FakeClock(1000.0), on_tick=seen.append)
    assert watcher.run(max_ticks=3) == 3
    assert watcher.ticks == 3
    assert [r.snapshot.cpu_percent for r in seen] == [1.0, 2.0, 3.0]
    assert watcher.running is False
    _, cpu = histories
    assert cpu.series(0).values() == [3.0, 2.0, 1.0, 0.0]


def test_run_stops_when_process_exits(snapshot, histories):
    watcher = make_watcher(snapshot, histories, FakeClock(1000.0), alive_ticks=2)
    assert watcher.run() == 2
    assert watcher.running is False


def test_background_thread(snapshot, histories):
    watcher = make_watcher(snapshot, histories, FakeClock(1000.0))
    watcher.start(max_ticks=2)
    watcher.thread.join(timeout=5)
    report = watcher.stop()
    assert watcher.ticks == 2
    assert report is not None and report.snapshot.cpu_percent == 2.0
