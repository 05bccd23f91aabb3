from __future__ import annotations

import json
import logging
import sys
import unittest
from pathlib import Path
from unittest.mock import patch

SRC_DIR = Path(__file__).resolve().parents[1] / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from esddrop.logging.helpers import JsonLogFormatter, get_logger, json_logs_requested  # noqa: E402


class LoggerNameTests(unittest.TestCase):
    def test_namespacing(self) -> None:
        self.assertEqual(get_logger().name, "esddrop")
        self.assertEqual(get_logger("esddrop").name, "esddrop")
        self.assertEqual(get_logger("classifier").name, "esddrop.classifier")
        self.assertEqual(get_logger("esddrop.config").name, "esddrop.config")


class JsonFormatterTests(unittest.TestCase):
    def test_payload_fields(self) -> None:
        record = logging.LogRecord("esddrop.pipeline", logging.WARNING, __file__, 1, "%d group(s)", (2,), None)
        record.context = {"paths": 3}
        payload = json.loads(JsonLogFormatter().format(record))
        self.assertEqual(payload["level"], "WARNING")
        self.assertEqual(payload["module"], "esddrop.pipeline")
        self.assertEqual(payload["msg"], "2 group(s)")
        self.assertEqual(payload["ctx"], {"paths": 3})
        self.assertTrue(payload["ts"].endswith("Z"))
        self.assertIn("version", payload)

    def test_json_switch(self) -> None:
        self.assertTrue(json_logs_requested(["--json-logs", "x.py"]))
        with patch.dict("os.environ", {"ESDDROP_JSON_LOGS": "1"}):
            self.assertTrue(json_logs_requested(["x.py"]))
        with patch.dict("os.environ", {"ESDDROP_JSON_LOGS": "0"}):
            self.assertFalse(json_logs_requested(["x.py"]))


if __name__ == "__main__":
    unittest.main()
