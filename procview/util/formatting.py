"""Text formatting for the values shown next to the charts."""


def format_time(seconds: int) -> str:
    """
    Render a duration as '1d 2h 3m 4s'.

    Day, hour and minute parts equal to zero are left out; seconds are always shown.
    """
    days = seconds // 86_400
    hours = seconds // 3_600 % 24
    minutes = seconds // 60 % 60
    parts = []
    if days > 0:
        parts.append(f"{days}d ")
    if hours > 0:
        parts.append(f"{hours}h ")
    if minutes > 0:
        parts.append(f"{minutes}m ")
    parts.append(f"{seconds % 60}s")
    return "".join(parts)


def format_number(nb_bytes: int) -> str:
    """Render a byte count with a binary-shifted B/KB/MB/GB unit."""
    if nb_bytes < 1_000:
        return f"{nb_bytes} B"
    if nb_bytes < 1_000_000:
        return f"{nb_bytes >> 10} KB"
    if nb_bytes < 1_000_000_000:
        return f"{nb_bytes >> 20} MB"
    return f"{nb_bytes >> 30} GB"
