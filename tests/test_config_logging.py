# -*- coding: utf-8 -*-

from __future__ import annotations

import json
import logging
import os
import unittest
from unittest import mock

from patient_tracker.config import Settings
from patient_tracker.logging_config import StructuredFormatter, setup_logging


class TestSettings(unittest.TestCase):
    def test_defaults(self) -> None:
        with mock.patch.dict(os.environ, {}, clear=True):
            settings = Settings()
        self.assertEqual(settings.port, 3000)
        self.assertEqual(settings.host, "127.0.0.1")
        self.assertEqual(settings.docs_url, "/api-docs")
        self.assertEqual(settings.cors_origins, ["*"])
        self.assertFalse(settings.log_json)

    def test_env_overrides(self) -> None:
        env = {
            "PATIENT_TRACKER_PORT": "8080",
            "PATIENT_TRACKER_CORS_ORIGINS": "http://a.test, http://b.test,",
            "PATIENT_TRACKER_LOG_LEVEL": "debug",
            "PATIENT_TRACKER_LOG_JSON": "1",
        }
        with mock.patch.dict(os.environ, env, clear=True):
            settings = Settings()
        self.assertEqual(settings.port, 8080)
        self.assertEqual(settings.cors_origins, ["http://a.test", "http://b.test"])
        self.assertEqual(settings.log_level, "DEBUG")
        self.assertTrue(settings.log_json)

    def test_invalid_port_falls_back(self) -> None:
        with mock.patch.dict(os.environ, {"PORT": "not-a-port"}, clear=True):
            self.assertEqual(Settings().port, 3000)


class TestLogging(unittest.TestCase):
    def setUp(self) -> None:
        self._level = logging.getLogger().level

    def tearDown(self) -> None:
        root = logging.getLogger()
        root.setLevel(self._level)
        for handler in list(root.handlers):
            if handler.get_name() == "patient_tracker":
                root.removeHandler(handler)

    def test_setup_is_idempotent(self) -> None:
        setup_logging("INFO")
        setup_logging("WARNING", json_format=True)
        root = logging.getLogger()
        ours = [h for h in root.handlers if h.get_name() == "patient_tracker"]
        self.assertEqual(len(ours), 1)
        self.assertIsInstance(ours[0].formatter, StructuredFormatter)
        self.assertEqual(root.level, logging.WARNING)

    def test_structured_formatter(self) -> None:
        record = logging.LogRecord("patient_tracker.test", logging.INFO, __file__, 1, "created %s", (7,), None)
        record.extra_fields = {"patient_id": 7}
        payload = json.loads(StructuredFormatter().format(record))
        self.assertEqual(payload["message"], "created 7")
        self.assertEqual(payload["level"], "INFO")
        self.assertEqual(payload["patient_id"], 7)


if __name__ == "__main__":
    unittest.main()
