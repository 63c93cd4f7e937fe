"""
Helpers for deriving the output path of a conversion.

These functions only manipulate strings; they never touch the filesystem.
"""
import os

from ..config.audio import OUTPUT_EXTENSION


def _last_separator_index(path: str) -> int:
    """Index of the last path separator in `path`, or -1 if there is none."""
    separators = [os.sep]
    if os.altsep:
        separators.append(os.altsep)
    return max(path.rfind(sep) for sep in separators)


def remove_extension(path: str) -> str:
    """
    Strips the last dot-delimited extension from the file name in `path`.

    Only the final path component is considered, so dots in directory names
    are kept. A name without a dot is returned unchanged.

    Examples:
        "song.adf"          -> "song"
        "music/track.v2.adf" -> "music/track.v2"
        "data.d/archive"    -> "data.d/archive"
    """
    last_dot = path.rfind(".")
    if last_dot == -1 or last_dot < _last_separator_index(path):
        return path
    return path[:last_dot]


def default_output_path(input_path: str) -> str:
    """Replaces the extension of `input_path` with '.mp3' (or appends it)."""
    return remove_extension(input_path) + OUTPUT_EXTENSION
