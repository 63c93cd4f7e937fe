"""
This module contains helper functions for formatting data into human-readable
strings for log messages.
"""

from datetime import timedelta


def format_timedelta(td_object: timedelta) -> str:
    """
    Formats a timedelta as "HH:MM:SS.mmm".

    Conversions usually take well under a second, so milliseconds are kept.
    Negative values are clamped to zero.

    Args:
        td_object: The timedelta object to format.

    Returns:
        For example, a timedelta of 7261.25 seconds becomes "02:01:01.250".
    """
    total_ms = max(0, int(td_object.total_seconds() * 1000))
    total_seconds, milliseconds = divmod(total_ms, 1000)
    hours, remainder = divmod(total_seconds, 3600)
    minutes, seconds = divmod(remainder, 60)
    return f"{hours:02}:{minutes:02}:{seconds:02}.{milliseconds:03}"


def formatted_size(size_bytes: int) -> str:
    """
    Converts a size in bytes to a human-readable string.

    Byte counts below 1 KB are shown as integers; larger sizes use two decimals
    with a trailing ".00" dropped (e.g. 1536 -> "1.50 KB", 2097152 -> "2 MB").
    """
    size = float(max(0, size_bytes))
    if size < 1024:
        return f"{int(size)} B"

    for unit in ("KB", "MB", "GB", "TB"):
        size /= 1024
        if size < 1024:
            break
    return f"{size:.2f} {unit}".replace(".00 ", " ")
