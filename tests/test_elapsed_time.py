import pytest

from procview.history import compute_running_since


def test_process_older_than_session():
    assert compute_running_since(400, 1000, 0) == 600


def test_process_started_after_session_start():
    # epoch + accumulated - start
    assert compute_running_since(1000, 400, 700) == 100


def test_process_started_after_session_never_goes_negative():
    assert compute_running_since(1000, 400, 50) == 550


def test_equal_timestamps():
    assert compute_running_since(1000, 1000, 0) == 0
    assert compute_running_since(1000, 1000, 42) == 42


def test_accumulated_time_is_added_for_older_process():
    assert compute_running_since(400, 1000, 25) == 625


@pytest.mark.parametrize("start, epoch, accumulated", [
    (0, 2 ** 64 - 1, 2 ** 64 - 1),
    (2 ** 64 - 1, 0, 0),
    (5, 3, 0),
    (3, 5, 0),
])
def test_result_is_never_negative(start, epoch, accumulated):
    assert compute_running_since(start, epoch, accumulated) >= 0
