"""
Command-Line Interface (CLI) setup for adf2mp3.

This module turns the raw argument list into a `CommandLine` describing what
the program should do. Options are picked out by name and every other
argument is taken as a path, so file names starting with '-' work without
escaping. `argparse` validates the option values. The help flag is checked
separately: it is only honored as the first argument.

Resolving arguments never touches the filesystem.
"""
import argparse
from enum import Enum
from typing import List, Optional, Tuple

from loguru import logger

from .config.audio import INPUT_EXTENSION, OUTPUT_EXTENSION
from .config.common import HELP_FLAGS, LOG_LEVELS
from .domain.exceptions import InvalidArgumentsError


class Action(Enum):
    HELP = "help"
    MISSING_ARGS = "missing_args"
    READY = "ready"


class CommandLine:
    """
    The resolved command line.

    Attributes:
        action (Action): What the program should do.
        input_path (str | None): The file to convert; set only for `Action.READY`.
        output_path (str | None): The explicit output file, or None to derive it
                                  from the input path.
        log_level (str | None): Console log level given with `--log-level`.
    """

    def __init__(self, action: Action, input_path: Optional[str] = None,
                 output_path: Optional[str] = None, log_level: Optional[str] = None):
        self.action = action
        self.input_path = input_path
        self.output_path = output_path
        self.log_level = log_level

    def __repr__(self) -> str:
        return (
            f"CommandLine(action={self.action.name}, input_path={self.input_path!r}, "
            f"output_path={self.output_path!r}, log_level={self.log_level!r})"
        )


LOG_LEVEL_OPTION = "--log-level"

# Ends option scanning; every later argument is a path.
END_OF_OPTIONS = "--"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="GTA Vice City ADF to MP3 converter.",
        add_help=False,
        allow_abbrev=False,
        exit_on_error=False,
    )
    parser.add_argument(
        LOG_LEVEL_OPTION, type=str.upper, default=None, choices=LOG_LEVELS,
        help="Set the console logging level.",
    )
    return parser


def _split_arguments(argv: List[str]) -> Tuple[List[str], List[str]]:
    """Separates `--log-level` and its value from the paths, keeping path order."""
    paths: List[str] = []
    option_args: List[str] = []
    remaining = iter(argv)
    for arg in remaining:
        if arg == END_OF_OPTIONS:
            paths.extend(remaining)
            break
        if arg == LOG_LEVEL_OPTION:
            option_args.append(arg)
            value = next(remaining, None)
            if value is not None:
                option_args.append(value)
        elif arg.startswith(LOG_LEVEL_OPTION + "="):
            option_args.append(arg)
        else:
            paths.append(arg)
    return paths, option_args


def resolve_arguments(argv: List[str]) -> CommandLine:
    """
    Resolves the argument list (without the program name).

    - A first argument of `--help` or `-h` requests help, whatever follows it.
    - `--log-level LEVEL` (or `--log-level=LEVEL`) may appear anywhere before
      `--`. Every other argument is a path, even one starting with '-'.
    - Without a path the arguments are missing.
    - Otherwise the first path is the input file and the second, if present,
      the output file. Further paths are ignored.

    Raises:
        InvalidArgumentsError: If `--log-level` has an invalid or missing value.
    """
    if argv and argv[0] in HELP_FLAGS:
        return CommandLine(Action.HELP)

    paths, option_args = _split_arguments(argv)
    try:
        args = _build_parser().parse_args(option_args)
    except argparse.ArgumentError as e:
        raise InvalidArgumentsError(str(e)) from e

    if len(paths) > 2:
        logger.debug(f"Ignoring extra arguments: {paths[2:]}")

    if not paths:
        return CommandLine(Action.MISSING_ARGS, log_level=args.log_level)

    output_path = paths[1] if len(paths) > 1 else None
    return CommandLine(Action.READY, paths[0], output_path, args.log_level)


def format_help_text(program_name: str) -> str:
    """Returns the usage text shown for `--help` and when arguments are missing."""
    return (
        "\n"
        "Usage:\n"
        f"$ {program_name} <input_file> [output_file]\n"
        "  Runs the tool normally. If the output filename is not provided\n"
        f"  the input filename is used but the extension is replaced with '{OUTPUT_EXTENSION}'.\n"
        f"  The input is usually a GTA Vice City '{INPUT_EXTENSION}' file.\n"
        "\n"
        "Usage:\n"
        f"$ {program_name} --help | -h\n"
        "  Prints this help text.\n"
        "\n"
        "Options:\n"
        f"  --log-level {{{','.join(LOG_LEVELS)}}}\n"
        "  Sets the console logging level.\n"
        "  Arguments after '--' are always treated as file names.\n"
    )


def print_help_text(program_name: str):
    print(format_help_text(program_name))
