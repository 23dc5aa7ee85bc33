"""
Tests for environment configuration.

config reads the environment at import time, so each test reloads it.
"""

import importlib
import os
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from timetable import config


class TestDotenv(unittest.TestCase):
    def setUp(self) -> None:
        self._cwd = os.getcwd()
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        self.addCleanup(importlib.reload, config)
        self.addCleanup(os.chdir, self._cwd)

    def reload_in(self, directory: str) -> None:
        os.chdir(directory)
        env = {k: v for k, v in os.environ.items() if not k.startswith("TIMETABLE_")}
        with patch.dict(os.environ, env, clear=True):
            importlib.reload(config)

    def test_env_file_in_working_directory_is_read(self) -> None:
        Path(self._tmp.name, ".env").write_text("TIMETABLE_VENUE_WIDTH=123\nTIMETABLE_LOG_LEVEL=debug\n")
        self.reload_in(self._tmp.name)
        self.assertEqual(config.VENUE_WIDTH, 123)
        self.assertEqual(config.LOG_LEVEL, "DEBUG")

    def test_env_file_in_parent_directory_is_read(self) -> None:
        Path(self._tmp.name, ".env").write_text("TIMETABLE_DATA=~/events.json\n")
        sub = Path(self._tmp.name, "sub")
        sub.mkdir()
        self.reload_in(str(sub))
        self.assertEqual(config.DATA_PATH, Path("~/events.json").expanduser())


if __name__ == "__main__":
    unittest.main()
