import pandas as pd

from procview.history import MetricHistory, SampleUpdater, create_process_histories
from procview.monitor.process_report import ProcessReport
from procview.render import histories_to_frame, render_table, save_history_chart, write_history_csv


def recorded_histories(snapshot, size=5):
    memory, cpu = create_process_histories(total_memory=64 * 1024 ** 3, history_size=size)
    SampleUpdater(memory, cpu).update(snapshot, 1000, 0)
    return {"memory": memory, "cpu": cpu}


def test_report_rows(snapshot):
    rows = dict(ProcessReport(snapshot, 3_661).rows())
    assert rows["name"] == "worker"
    assert rows["pid"] == "4242"
    assert rows["memory usage"] == "3 MB"
    assert rows["cpu usage"] == "37.5%"
    assert rows["Running since"] == "1h 1m 1s"
    assert rows["command"] == "['worker', '--fast']"
    assert rows["environment"] == "\nHOME=/root"


def test_render_table_acknowledges(snapshot):
    histories = recorded_histories(snapshot)
    text = render_table(ProcessReport(snapshot, 600), histories)
    assert text.startswith("Information about worker")
    assert "10m 0s" in text
    assert "%" in text and "GB" in text
    assert not histories["memory"].dirty
    assert not histories["cpu"].dirty


def test_render_table_without_labeler(snapshot):
    history = MetricHistory()
    history.attach_series("x", [0.0, 0.0])
    history.record(0, 2.0)
    text = render_table(ProcessReport(snapshot, 0), {"custom": history})
    assert "custom" in text
    assert not history.dirty


def test_save_chart(tmp_path, snapshot):
    history = recorded_histories(snapshot)["cpu"]
    path = save_history_chart(history, tmp_path / "charts" / "cpu.png", "Process usage")
    assert path.exists()
    assert path.stat().st_size > 0
    assert not history.dirty


def test_save_chart_with_legend(tmp_path):
    history = MetricHistory(show_labels=True)
    history.attach_series("read", [1.0, 2.0], color=(0.1, 0.2, 0.8))
    history.attach_series("write", [3.0, 0.0])
    assert save_history_chart(history, tmp_path / "io.png").exists()


def test_frame_is_oldest_first(snapshot):
    frame = histories_to_frame(recorded_histories(snapshot, size=3))
    assert list(frame.columns) == ["memory.rss", "cpu.usage"]
    assert frame["cpu.usage"].tolist() == [0.0, 0.0, 37.5]


def test_write_csv(tmp_path, snapshot):
    path = write_history_csv(recorded_histories(snapshot, size=3), tmp_path / "h.csv")
    frame = pd.read_csv(path, index_col="sample")
    assert len(frame) == 3
    assert frame["memory.rss"].iloc[-1] == float(snapshot.memory_bytes)
