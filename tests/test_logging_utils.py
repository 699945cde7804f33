import logging
import os
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from ui.logging_utils import setup_logging


class TestSetupLogging(unittest.TestCase):
    def setUp(self) -> None:
        self.root = logging.getLogger()
        saved_handlers = self.root.handlers[:]
        saved_level = self.root.level
        saved_urllib3 = logging.getLogger("urllib3").level
        self.root.handlers = []

        def restore() -> None:
            for handler in self.root.handlers:
                handler.close()
            self.root.handlers = saved_handlers
            self.root.setLevel(saved_level)
            logging.getLogger("urllib3").setLevel(saved_urllib3)

        self.addCleanup(restore)

    def test_console_and_file_handlers(self):
        with tempfile.TemporaryDirectory() as tmp:
            log_path = Path(tmp) / "logs" / "concierge.log"
            env = {"CONCIERGE_LOG_LEVEL": "warning", "CONCIERGE_LOG_FILE": str(log_path)}
            with patch.dict(os.environ, env):
                setup_logging()
            file_handlers = [h for h in self.root.handlers if isinstance(h, logging.FileHandler)]
            try:
                self.assertEqual(self.root.level, logging.WARNING)
                self.assertEqual(len(file_handlers), 1)
                logging.getLogger("application.use_cases.chat").warning("Generation timed out")
                file_handlers[0].flush()
                self.assertIn("Generation timed out", log_path.read_text(encoding="utf-8"))
                self.assertEqual(logging.getLogger("urllib3").level, logging.WARNING)
            finally:
                for handler in file_handlers:
                    handler.close()
                    self.root.removeHandler(handler)

    def test_console_only_without_log_file(self):
        with patch.dict(os.environ, {"CONCIERGE_LOG_LEVEL": "DEBUG"}):
            os.environ.pop("CONCIERGE_LOG_FILE", None)
            setup_logging()
        self.assertEqual(self.root.level, logging.DEBUG)
        self.assertEqual([type(h) for h in self.root.handlers], [logging.StreamHandler])

    def test_second_call_adds_nothing(self):
        with patch.dict(os.environ, {"CONCIERGE_LOG_LEVEL": "INFO"}):
            os.environ.pop("CONCIERGE_LOG_FILE", None)
            setup_logging()
            setup_logging()
        self.assertEqual(len(self.root.handlers), 1)


if __name__ == "__main__":
    unittest.main()
