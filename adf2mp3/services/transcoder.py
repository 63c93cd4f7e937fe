"""
This module defines the Transcoder service, which turns an obfuscated `.adf`
file back into a playable MP3.

The conversion is a single linear pass: the input is read in fixed-size
chunks into one reusable buffer, every byte of the filled region is XORed
with `GTA_MAGIC`, and the region is written to the output. Since XOR with a
constant is its own inverse, running the transcoder on its own output
restores the original file.
"""

import os
from datetime import datetime
from pathlib import Path
from typing import Union

from loguru import logger

from ..config.audio import CHUNK_SIZE, GTA_MAGIC
from ..domain.exceptions import (
    DirectoryInputError,
    EmptyInputError,
    InvalidInputError,
    TranscodeIOError,
)
from ..domain.file_stats import FileStats
from ..utils.format_utils import format_timedelta, formatted_size

# Translation table mapping every byte value to itself XOR GTA_MAGIC.
XOR_TABLE = bytes(b ^ GTA_MAGIC for b in range(256))


def xor_chunk(chunk: bytearray, num_bytes: int) -> None:
    """XORs the first `num_bytes` of `chunk` with `GTA_MAGIC`, in place."""
    chunk[:num_bytes] = chunk[:num_bytes].translate(XOR_TABLE)


def _describe_os_error(error: OSError) -> str:
    description = error.strerror or str(error)
    if error.filename:
        return f"Path '{error.filename}': {description}"
    return description


class TranscodeResult:
    """
    Summary of a successful conversion.

    Attributes:
        input_path (str): The converted file.
        output_path (str): The file that was written.
        bytes_processed (int): Bytes read from the input, equal to bytes written.
        started (datetime): When streaming began.
        ended (datetime): When the output was closed.
    """

    def __init__(self, input_path: str, output_path: str, bytes_processed: int,
                 started: datetime, ended: datetime):
        self.input_path = input_path
        self.output_path = output_path
        self.bytes_processed = bytes_processed
        self.started = started
        self.ended = ended

    @property
    def elapsed(self):
        return self.ended - self.started

    def to_log_entry(self) -> dict:
        """Returns the result as a plain dictionary for the YAML success log."""
        return {
            "input_file": str(Path(self.input_path).resolve()),
            "output_file": str(Path(self.output_path).resolve()),
            "bytes_processed": self.bytes_processed,
            "size_formatted": formatted_size(self.bytes_processed),
            "elapsed": format_timedelta(self.elapsed),
            "started_datetime": self.started.isoformat(),
            "ended_datetime": self.ended.isoformat(),
        }


class Transcoder:
    """
    Converts one obfuscated input file into one output file.

    The input is inspected before anything is opened; directories, empty files
    and other non-regular files are rejected without creating the output.
    Both file handles are closed on every exit path. A failure while
    streaming leaves whatever was already written in the output file.

    Attributes:
        input_path (str): The obfuscated source file.
        output_path (str): The destination file, created or truncated.
    """

    def __init__(self, input_path: Union[str, Path], output_path: Union[str, Path]):
        self.input_path = str(input_path)
        self.output_path = str(output_path)

    def validate_input(self) -> FileStats:
        """
        Inspects the input path and checks that it can be converted.

        Returns:
            The `FileStats` of the input, whose length drives the copy loop.

        Raises:
            PathInspectionError: If the input path cannot be queried.
            DirectoryInputError: If the input is a directory.
            EmptyInputError: If the input is a zero-length file.
            InvalidInputError: If the input is not a regular file, or if it is
                               the same file as the output.
        """
        file_stats = FileStats.from_path(self.input_path)

        if file_stats.is_directory:
            raise DirectoryInputError(f"Input file '{self.input_path}' is a directory!")
        if not file_stats.is_regular_file:
            raise InvalidInputError(f"Input file '{self.input_path}' is not a regular file!")
        if file_stats.length == 0:
            raise EmptyInputError("Input file is empty!")

        # Opening the output for writing would truncate the input before it is read.
        if os.path.exists(self.output_path) and os.path.samefile(self.input_path, self.output_path):
            raise InvalidInputError(
                f"Output file '{self.output_path}' is the same file as the input!"
            )
        return file_stats

    def run(self) -> TranscodeResult:
        """
        Performs the conversion.

        Returns:
            A `TranscodeResult` describing the finished conversion.

        Raises:
            Adf2Mp3Exception: Any subclass, see `validate_input` and `_stream`.
        """
        file_stats = self.validate_input()

        logger.debug(
            f"Converting '{self.input_path}' ({formatted_size(file_stats.length)}) "
            f"to '{self.output_path}'"
        )
        started = datetime.now()
        bytes_processed = self._stream(file_stats.length)
        result = TranscodeResult(
            self.input_path, self.output_path, bytes_processed, started, datetime.now()
        )

        logger.info(
            f"Converted '{self.input_path}' -> '{self.output_path}' "
            f"({formatted_size(bytes_processed)} in {format_timedelta(result.elapsed)})"
        )
        return result

    def _stream(self, file_length: int) -> int:
        """
        Copies `file_length` bytes from input to output through the XOR transform.

        Returns:
            The number of bytes processed, always equal to `file_length`.

        Raises:
            TranscodeIOError: If a file cannot be opened, read or written, or if
                              the input ends before `file_length` bytes were read.
        """
        chunk = bytearray(CHUNK_SIZE)
        view = memoryview(chunk)
        bytes_processed = 0

        try:
            with open(self.input_path, "rb") as in_file, open(self.output_path, "wb") as out_file:
                while bytes_processed != file_length:
                    bytes_this_iteration = min(len(chunk), file_length - bytes_processed)

                    bytes_read = in_file.readinto(view[:bytes_this_iteration])
                    if bytes_read != bytes_this_iteration:
                        raise TranscodeIOError(
                            f"Unexpected end of input file '{self.input_path}' after "
                            f"{bytes_processed + (bytes_read or 0)} of {file_length} bytes!"
                        )

                    xor_chunk(chunk, bytes_this_iteration)
                    out_file.write(view[:bytes_this_iteration])

                    bytes_processed += bytes_this_iteration
        except OSError as e:
            raise TranscodeIOError(
                f"Failed converting '{self.input_path}' to '{self.output_path}'. "
                f"{_describe_os_error(e)}"
            ) from e

        return bytes_processed
