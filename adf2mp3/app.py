"""
Program flow of the converter.

`main()` resolves the command line, configures the console logger, and either
prints the help text or runs one conversion. Every conversion failure is
printed as `ERROR: <message>` on standard error and turned into a failure
exit status.
"""

import sys
from pathlib import Path
from typing import List, Optional

from loguru import logger

from .cli import Action, CommandLine, print_help_text, resolve_arguments
from .config.common import (
    DEFAULT_LOG_LEVEL,
    EXIT_FAILURE,
    EXIT_SUCCESS,
    LOGGER_FORMAT,
    REPORT_DIR,
    USER_LOG_LEVEL,
)
from .domain.exceptions import Adf2Mp3Exception
from .services.logging_service import ErrorLog, SuccessLog
from .services.transcoder import Transcoder, TranscodeResult
from .utils.path_utils import default_output_path


def configure_logger(level: str):
    """Replaces all loguru handlers with a single stderr handler at `level`."""
    logger.remove()
    logger.add(sys.stderr, level=level, format=LOGGER_FORMAT)


def convert(input_path: str, output_path: Optional[str] = None) -> TranscodeResult:
    """
    Converts `input_path`, writing to `output_path` or to the derived '.mp3' name.

    Raises:
        Adf2Mp3Exception: If the conversion fails.
    """
    if not output_path:
        output_path = default_output_path(input_path)
        logger.debug(f"No output file given, using '{output_path}'")
    return Transcoder(input_path, output_path).run()


def _report_success(result: TranscodeResult):
    if REPORT_DIR is not None:
        SuccessLog(REPORT_DIR).write(result.to_log_entry())


def _report_failure(command_line: CommandLine, error: Adf2Mp3Exception):
    if REPORT_DIR is not None:
        ErrorLog(REPORT_DIR).write(
            f"Input: {command_line.input_path}",
            f"Output: {command_line.output_path or default_output_path(command_line.input_path)}",
            f"{type(error).__name__}: {error}",
        )


def main(argv: Optional[List[str]] = None, program_name: Optional[str] = None) -> int:
    """
    Runs the converter and returns the process exit status.

    Args:
        argv: Arguments without the program name; defaults to `sys.argv[1:]`.
        program_name: Name shown in the help text; defaults to the name the
                      program was invoked with.
    """
    if argv is None:
        argv = sys.argv[1:]
    if program_name is None:
        program_name = Path(sys.argv[0]).name if sys.argv and sys.argv[0] else "adf2mp3"

    try:
        command_line = resolve_arguments(argv)
    except Adf2Mp3Exception as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_FAILURE

    configure_logger(command_line.log_level or USER_LOG_LEVEL or DEFAULT_LOG_LEVEL)
    logger.debug(f"Resolved arguments: {command_line}")

    if command_line.action is Action.HELP:
        print_help_text(program_name)
        return EXIT_SUCCESS

    if command_line.action is Action.MISSING_ARGS:
        print("Not enough arguments!")
        print_help_text(program_name)
        return EXIT_SUCCESS

    try:
        result = convert(command_line.input_path, command_line.output_path)
    except Adf2Mp3Exception as e:
        logger.debug(f"Conversion failed with {type(e).__name__}")
        _report_failure(command_line, e)
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_FAILURE

    _report_success(result)
    return EXIT_SUCCESS
