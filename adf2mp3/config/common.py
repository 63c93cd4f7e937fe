"""
Common configuration settings used throughout the application.

This module holds the logging format, the report file names and the command
line flags. It also loads the optional user configuration from a YAML file,
which lets users pick a console log level and a directory for conversion
reports without touching the source code.
"""
import os
from pathlib import Path

import yaml
from loguru import logger

# --- User Configuration ---
# Settings are read from 'config.user.yaml' at the project root, or from the
# file named by the ADF2MP3_CONFIG environment variable.

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
_CONFIG_ENV_VAR = "ADF2MP3_CONFIG"
USER_CONFIG_PATH = Path(os.environ.get(_CONFIG_ENV_VAR, PROJECT_ROOT / "config.user.yaml"))

# Levels accepted by both the config file and `--log-level`.
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

# Console log level used when neither the config file nor the command line set one.
DEFAULT_LOG_LEVEL = "INFO"

# Console log level from 'config.user.yaml' (`logging.level`).
USER_LOG_LEVEL: str | None = None

# Directory for conversion report files (`logging.report_dir`). When None,
# no report files are written.
REPORT_DIR: Path | None = None


def load_user_config(config_path: Path, required: bool = False) -> dict:
    """
    Reads the user configuration file.

    Returns the `logging` section as a dictionary. A missing, unreadable or
    malformed file yields an empty dictionary, so the converter always runs
    with its defaults. A missing file is only reported when `required` is set,
    i.e. when the path was named explicitly.
    """
    if not config_path.is_file():
        if required:
            logger.warning(f"User config '{config_path}' not found. Using defaults.")
        return {}
    try:
        with config_path.open("r", encoding="utf-8") as f:
            user_config = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        logger.warning(f"Could not load or parse '{config_path}': {e}")
        return {}
    if not isinstance(user_config, dict):
        logger.warning(f"Ignoring '{config_path}': expected a mapping at the top level.")
        return {}
    logging_config = user_config.get("logging") or {}
    if not isinstance(logging_config, dict):
        logger.warning(f"Ignoring 'logging' section of '{config_path}': expected a mapping.")
        return {}
    return logging_config


_logging_config = load_user_config(USER_CONFIG_PATH, required=_CONFIG_ENV_VAR in os.environ)

_level = _logging_config.get("level")
if _level:
    if str(_level).upper() in LOG_LEVELS:
        USER_LOG_LEVEL = str(_level).upper()
    else:
        logger.warning(f"Unknown log level '{_level}' in '{USER_CONFIG_PATH}'. Using {DEFAULT_LOG_LEVEL}.")

_report_dir = _logging_config.get("report_dir")
if _report_dir:
    REPORT_DIR = Path(_report_dir).expanduser()


# --- Logging Configuration ---

# The format string for the Loguru console logger.
LOGGER_FORMAT = (
    "<green>{time:MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)

# YAML list of successful conversions inside REPORT_DIR.
SUCCESS_LOG_FILE_NAME = "conversion_log.yaml"

# Plain-text log of failed conversions inside REPORT_DIR.
ERROR_LOG_FILE_NAME = "error.txt"


# --- Command Line ---

# A first argument equal to one of these prints the help text and exits.
HELP_FLAGS = ("--help", "-h")

# Process exit statuses.
EXIT_SUCCESS = 0
EXIT_FAILURE = 1
