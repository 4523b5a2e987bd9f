"""
Axis label computation for history charts.

A labeler maps the magnitude at the top of a chart to four strings:
(top, mid, bottom, unit). Labelers are pure functions so renderers can call
them at any time.
"""
from typing import Callable, Tuple

import numpy as np

AxisLabels = Tuple[str, str, str, str]
ScaleLabeler = Callable[[float], AxisLabels]

# Tier thresholds (values are kilobytes), tested with a strict '<'
MB_THRESHOLD = 100_000
GB_THRESHOLD = 10_000_000
TB_THRESHOLD = 10_000_000_000


def _plain(value: float) -> str:
    # Shortest round-trip digits, no exponent, no trailing '.0'
    return np.format_float_positional(value, trim='-')


def kilobyte_labels(value: float) -> AxisLabels:
    """
    Label a memory axis whose top value is `value` kilobytes.

    The unit tier is picked from the magnitude; boundaries belong to the
    higher tier. At the TB tier the mid label is the same as the top label.
    """
    if value < MB_THRESHOLD:
        return _plain(value), _plain(value / 2.0), "0", "kB"
    if value < GB_THRESHOLD:
        return f"{value / 1_024:.1f}", f"{value / 2_048:.1f}", "0", "MB"
    if value < TB_THRESHOLD:
        return f"{value / 1_048_576:.1f}", f"{value / 2_097_152:.1f}", "0", "GB"
    # TODO: confirm with product whether the TB mid label should be halved like the other tiers
    return f"{value / 1_073_741_824:.1f}", f"{value / 1_073_741_824:.1f}", "0", "TB"


def byte_labels(value: float) -> AxisLabels:
    """Same tiers as kilobyte_labels, for histories fed with byte counts."""
    return kilobyte_labels(value / 1_024)


def percent_labels(value: float) -> AxisLabels:
    """Fixed 0-100 scale, whatever the current value."""
    return "100", "50", "0", "%"
