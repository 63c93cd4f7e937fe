"""
Filesystem inspection of the conversion input.
"""
import os
import stat
from pathlib import Path
from typing import Union

from loguru import logger

from .exceptions import PathInspectionError


class FileStats:
    """
    The length and kind of a path, queried once before the input is opened.

    Inspecting the path up front gives a clear diagnostic for missing files
    and directories instead of a failed open halfway through the run.

    Attributes:
        path (str): The inspected path, as given.
        length (int): Size in bytes as reported by the filesystem.
        is_directory (bool): True if the path points to a directory.
        is_regular_file (bool): True if the path points to a regular file.
    """

    def __init__(self, path: str, length: int, is_directory: bool, is_regular_file: bool):
        self.path = path
        self.length = length
        self.is_directory = is_directory
        self.is_regular_file = is_regular_file

    @classmethod
    def from_path(cls, path: Union[str, Path]) -> "FileStats":
        """
        Queries the filesystem for `path`.

        Symbolic links are followed, so a link to a regular file is reported
        as a regular file.

        Raises:
            PathInspectionError: If the path does not exist or cannot be accessed.
        """
        path_str = str(path)
        try:
            st = os.stat(path_str)
        except OSError as e:
            raise PathInspectionError(path_str, e.strerror or str(e)) from e

        file_stats = cls(
            path=path_str,
            length=st.st_size,
            is_directory=stat.S_ISDIR(st.st_mode),
            is_regular_file=stat.S_ISREG(st.st_mode),
        )
        logger.debug(f"Inspected {file_stats}")
        return file_stats

    def __repr__(self) -> str:
        return (
            f"FileStats(path={self.path!r}, length={self.length}, "
            f"is_directory={self.is_directory}, is_regular_file={self.is_regular_file})"
        )
