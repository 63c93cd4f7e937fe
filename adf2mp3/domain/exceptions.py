"""
Defines custom exception types for the converter.

Each stage of a conversion raises its own exception type so callers (and
tests) can tell a missing path from an unusable input or a failed stream.
The entry point catches the common base, `Adf2Mp3Exception`, prints its
message and exits with a failure status.
"""


class Adf2Mp3Exception(Exception):
    """Base class for all custom exceptions in the converter."""

    pass


# --- Path inspection ---
class PathInspectionError(Adf2Mp3Exception):
    """
    Raised when the input path cannot be queried on the filesystem.

    The message carries the system error description (e.g. "No such file or
    directory"), and the original `OSError` is chained as the cause.
    """

    def __init__(self, path: str, strerror: str):
        super().__init__(f"Path '{path}': {strerror}")
        self.path = path
        self.strerror = strerror


# --- Input validation ---
class InvalidInputError(Adf2Mp3Exception):
    """
    Raised when the input path exists but cannot be converted.

    Used directly for special files such as FIFOs or devices.
    """

    pass


class EmptyInputError(InvalidInputError):
    """Raised when the input file has a length of zero bytes."""

    pass


class DirectoryInputError(InvalidInputError):
    """Raised when the input path points to a directory."""

    pass


# --- Streaming ---
class TranscodeIOError(Adf2Mp3Exception):
    """
    Raised when opening, reading or writing fails during the conversion.

    A partially written output file is left in place.
    """

    pass


# --- Command line ---
class InvalidArgumentsError(Adf2Mp3Exception):
    """Raised when an option is malformed, e.g. an unknown `--log-level` value."""

    pass
