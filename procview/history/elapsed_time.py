"""Time a process has been running, measured against the monitoring epoch."""


def compute_running_since(
    process_start_time: int,
    monitoring_epoch_start: int,
    accumulated_running_since: int,
) -> int:
    """
    Seconds the process has been running.

    Args:
        process_start_time: process creation time reported by the OS
        monitoring_epoch_start: when the current monitoring session began
        accumulated_running_since: seconds carried over from earlier sessions
            (or elapsed since the epoch, for a live session)

    Returns:
        Non-negative number of seconds
    """
    if monitoring_epoch_start > process_start_time:
        # Process is older than the session
        total = monitoring_epoch_start - process_start_time + accumulated_running_since
    else:
        total = monitoring_epoch_start + accumulated_running_since - process_start_time
    # The sign only tells which timestamp is later
    return abs(total)
