"""
This module provides classes for recording conversion outcomes in report files.

Successful conversions are appended to a machine-readable YAML list, failed
ones to a human-readable text file. Both are optional and live in the
`report_dir` configured in 'config.user.yaml'. Writing a report never changes
the outcome of a conversion: problems are logged with loguru and swallowed.
"""

from datetime import datetime
from pathlib import Path
from typing import List, Dict, Union

import yaml
from loguru import logger

from ..config.common import ERROR_LOG_FILE_NAME, SUCCESS_LOG_FILE_NAME


class Log:
    """
    Base class for report files.

    Attributes:
        log_dir (Path): Directory holding the report file. Created on first write.
        log_file_path (Path): The report file, defined by the subclass.
    """

    # Separator between entries in text-based logs.
    linesep_marker: str = "=" * 50

    def __init__(self, log_dir: Path):
        self.log_dir: Path = Path(log_dir).expanduser().resolve()
        self.log_file_path: Path  # To be defined by the subclass.

    def write(self, log_content: Union[dict, str]):
        raise NotImplementedError("Subclasses must implement the write() method.")

    def _ensure_log_dir(self) -> bool:
        try:
            self.log_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.error(f"Could not create report directory {self.log_dir}: {e}")
            return False
        return True


class ErrorLog(Log):
    """
    Appends failed conversions to a plain text file.

    Each entry is a timestamped block of message lines followed by a separator.
    """

    def __init__(self, error_log_dir: Path, filename: str = ERROR_LOG_FILE_NAME):
        super().__init__(error_log_dir)
        self.log_file_path = self.log_dir / filename

    def write(self, *error_messages: str):
        """
        Appends one entry made of `error_messages`, one per line.

        If the file cannot be written, the messages are sent to loguru instead
        so they are not lost.
        """
        if not error_messages:
            return

        timestamp = datetime.now().isoformat(timespec="seconds")
        content_to_write = (
            f"[{timestamp}]\n" + "\n".join(error_messages) + "\n" + self.linesep_marker + "\n"
        )

        if self._ensure_log_dir():
            try:
                with self.log_file_path.open("a", encoding="utf-8", errors="backslashreplace") as f:
                    f.write(content_to_write)
                return
            except (OSError, UnicodeError) as e:
                logger.error(f"Failed to write to error log {self.log_file_path}: {e}")
        for msg in error_messages:
            logger.error(f"  - {msg}")


class SuccessLog(Log):
    """
    Appends successful conversions to a YAML list.

    The file always holds a single list of mappings. Each new entry gets an
    `index` one higher than the largest index already present.
    """

    def __init__(self, success_log_dir: Path, filename: str = SUCCESS_LOG_FILE_NAME):
        super().__init__(success_log_dir)
        self.log_file_path = self.log_dir / filename
        self.log_entries: List[Dict] = []

    def load(self) -> List[Dict]:
        """
        Reads the existing entries from the report file.

        Returns an empty list when the file is missing, empty or does not hold a
        list; a damaged file is logged and then replaced on the next write.
        """
        if not self.log_file_path.is_file():
            return []
        try:
            with self.log_file_path.open("r", encoding="utf-8") as f:
                loaded_entries = yaml.safe_load(f)
        except (OSError, UnicodeError, yaml.YAMLError) as e:
            logger.error(
                f"Error reading/parsing success log {self.log_file_path}: {e}. Starting a new log."
            )
            return []

        if loaded_entries is None:
            return []
        if not isinstance(loaded_entries, list):
            logger.warning(
                f"Success log {self.log_file_path} contained unexpected data. Starting a new log."
            )
            return []
        return loaded_entries

    def write(self, new_log_entry: dict):
        """Adds `new_log_entry` to the report file, rewriting the whole list."""
        if not isinstance(new_log_entry, dict):
            logger.error("SuccessLog.write expects a dictionary as a log entry.")
            return

        self.log_entries = self.load()
        current_max_index = max(
            (
                entry.get("index", 0)
                for entry in self.log_entries
                if isinstance(entry, dict) and isinstance(entry.get("index", 0), int)
            ),
            default=0,
        )
        self.log_entries.append({"index": current_max_index + 1, **new_log_entry})

        if not self._ensure_log_dir():
            return
        try:
            with self.log_file_path.open("w", encoding="utf-8", errors="backslashreplace") as f:
                yaml.dump(
                    self.log_entries,
                    f,
                    default_flow_style=False,
                    sort_keys=False,
                    allow_unicode=True,
                    indent=4,
                    width=220,
                )
        except (OSError, UnicodeError, yaml.YAMLError) as e:
            logger.error(f"Failed to write to success log {self.log_file_path}: {e}")
