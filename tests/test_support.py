import os
import unittest
from datetime import timedelta
from pathlib import Path
from tempfile import TemporaryDirectory

import yaml
from loguru import logger

from adf2mp3.config.common import load_user_config
from adf2mp3.services.logging_service import ErrorLog, SuccessLog
from adf2mp3.utils.format_utils import format_timedelta, formatted_size
from adf2mp3.utils.path_utils import default_output_path, remove_extension


class PathUtilsTests(unittest.TestCase):
    def test_default_output_path(self) -> None:
        cases = {
            "song.adf": "song.mp3",
            "archive": "archive.mp3",
            "FLASH.ADF": "FLASH.mp3",
            "track.v2.adf": "track.v2.mp3",
            os.path.join("music", "song.adf"): os.path.join("music", "song.mp3"),
            os.path.join("data.d", "archive"): os.path.join("data.d", "archive.mp3"),
        }
        for input_path, expected in cases.items():
            with self.subTest(input_path=input_path):
                self.assertEqual(default_output_path(input_path), expected)

    def test_remove_extension(self) -> None:
        self.assertEqual(remove_extension("song.adf"), "song")
        self.assertEqual(remove_extension("song"), "song")
        self.assertEqual(remove_extension("song."), "song")


class FormatUtilsTests(unittest.TestCase):
    def test_formatted_size(self) -> None:
        self.assertEqual(formatted_size(0), "0 B")
        self.assertEqual(formatted_size(1023), "1023 B")
        self.assertEqual(formatted_size(1536), "1.50 KB")
        self.assertEqual(formatted_size(2 * 1024 * 1024), "2 MB")

    def test_format_timedelta(self) -> None:
        self.assertEqual(format_timedelta(timedelta(seconds=7261.25)), "02:01:01.250")
        self.assertEqual(format_timedelta(timedelta(seconds=-3)), "00:00:00.000")


class ReportLogTests(unittest.TestCase):
    def setUp(self) -> None:
        self.tmpdir = TemporaryDirectory()
        self.tmp_path = Path(self.tmpdir.name)
        logger.remove()

    def tearDown(self) -> None:
        self.tmpdir.cleanup()

    def test_success_log_appends_indexed_entries(self) -> None:
        report_dir = self.tmp_path / "reports"
        SuccessLog(report_dir).write({"input_file": "a.adf"})
        SuccessLog(report_dir).write({"input_file": "b.adf"})

        entries = yaml.safe_load((report_dir / "conversion_log.yaml").read_text(encoding="utf-8"))
        self.assertEqual([e["index"] for e in entries], [1, 2])
        self.assertEqual([e["input_file"] for e in entries], ["a.adf", "b.adf"])

    def test_success_log_replaces_damaged_file(self) -> None:
        log_path = self.tmp_path / "conversion_log.yaml"
        log_path.write_text("just a string", encoding="utf-8")
        SuccessLog(self.tmp_path).write({"input_file": "a.adf"})
        entries = yaml.safe_load(log_path.read_text(encoding="utf-8"))
        self.assertEqual(entries, [{"index": 1, "input_file": "a.adf"}])

    def test_error_log_appends(self) -> None:
        error_log = ErrorLog(self.tmp_path)
        error_log.write("first failure")
        error_log.write("second failure", "detail")
        content = (self.tmp_path / "error.txt").read_text(encoding="utf-8")
        self.assertIn("first failure", content)
        self.assertIn("second failure\ndetail\n", content)
        self.assertEqual(content.count(ErrorLog.linesep_marker), 2)

    def test_error_log_escapes_undecodable_file_names(self) -> None:
        ErrorLog(self.tmp_path).write("Input: caf\udce9.adf")
        content = (self.tmp_path / "error.txt").read_text(encoding="utf-8")
        self.assertIn("Input: caf\\udce9.adf", content)

    def test_success_log_accepts_undecodable_file_names(self) -> None:
        SuccessLog(self.tmp_path).write({"input_file": "caf\udce9.adf"})
        SuccessLog(self.tmp_path).write({"input_file": "b.adf"})
        entries = yaml.safe_load((self.tmp_path / "conversion_log.yaml").read_text(encoding="utf-8"))
        self.assertEqual([e["index"] for e in entries], [1, 2])


class UserConfigTests(unittest.TestCase):
    def setUp(self) -> None:
        self.tmpdir = TemporaryDirectory()
        self.tmp_path = Path(self.tmpdir.name)
        logger.remove()

    def tearDown(self) -> None:
        self.tmpdir.cleanup()

    def test_missing_file(self) -> None:
        self.assertEqual(load_user_config(self.tmp_path / "missing.yaml"), {})

    def test_logging_section(self) -> None:
        config_path = self.tmp_path / "config.user.yaml"
        config_path.write_text("logging:\n  level: debug\n  report_dir: /tmp/x\n", encoding="utf-8")
        self.assertEqual(load_user_config(config_path), {"level": "debug", "report_dir": "/tmp/x"})

    def test_malformed_file(self) -> None:
        config_path = self.tmp_path / "config.user.yaml"
        config_path.write_text("logging: [unclosed\n", encoding="utf-8")
        self.assertEqual(load_user_config(config_path), {})


if __name__ == "__main__":
    unittest.main()
