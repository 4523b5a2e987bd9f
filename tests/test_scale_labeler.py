import pytest

from procview.history import byte_labels, kilobyte_labels, percent_labels


@pytest.mark.parametrize("value, expected", [
    (0.0, ("0", "0", "0", "kB")),
    (37.5, ("37.5", "18.75", "0", "kB")),
    (1024.0, ("1024", "512", "0", "kB")),
    (99_999.0, ("99999", "49999.5", "0", "kB")),
])
def test_kilobyte_tier(value, expected):
    assert kilobyte_labels(value) == expected


def test_boundaries_select_higher_tier():
    assert kilobyte_labels(100_000.0) == ("97.7", "48.8", "0", "MB")
    assert kilobyte_labels(10_000_000.0) == ("9.5", "4.8", "0", "GB")
    assert kilobyte_labels(10_000_000_000.0) == ("9.3", "9.3", "0", "TB")


def test_just_below_boundaries_stay_in_lower_tier():
    assert kilobyte_labels(99_999.9)[3] == "kB"
    assert kilobyte_labels(9_999_999.0)[3] == "MB"
    assert kilobyte_labels(9_999_999_999.0)[3] == "GB"


def test_tb_tier_top_and_mid_are_equal():
    top, mid, bottom, unit = kilobyte_labels(2 * 1_073_741_824 * 10.0)
    assert (top, mid, bottom, unit) == ("20.0", "20.0", "0", "TB")


def test_labels_are_deterministic():
    assert kilobyte_labels(123_456.0) == kilobyte_labels(123_456.0)


def test_byte_labels_use_kilobyte_tiers():
    assert byte_labels(2048.0 * 1024) == ("2048", "1024", "0", "kB")
    assert byte_labels(16 * 1024 ** 3)[3] == "GB"


@pytest.mark.parametrize("value", [0.0, 37.5, 100.0, 250.0])
def test_percent_labels_are_fixed(value):
    assert percent_labels(value) == ("100", "50", "0", "%")
