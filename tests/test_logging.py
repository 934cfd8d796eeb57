"""
Tests for logging configuration.
"""

import json
import logging

from app.core.logging_config import CustomJsonFormatter, setup_logging


def _record(level=logging.INFO, msg="hello"):
    return logging.LogRecord(
        name="app.crud.job", level=level, pathname="/srv/app/crud/job.py",
        lineno=42, msg=msg, args=(), exc_info=None, func="create"
    )


class TestJsonFormatter:

    def test_standard_fields(self):
        formatter = CustomJsonFormatter('%(timestamp)s %(level)s %(logger)s %(message)s')
        data = json.loads(formatter.format(_record()))

        assert data["message"] == "hello"
        assert data["level"] == "INFO"
        assert data["logger"] == "app.crud.job"
        assert data["function"] == "create"
        assert data["timestamp"].endswith("Z")
        assert "line" not in data

    def test_warnings_include_location(self):
        formatter = CustomJsonFormatter('%(timestamp)s %(level)s %(logger)s %(message)s')
        data = json.loads(formatter.format(_record(level=logging.WARNING)))

        assert data["line"] == 42
        assert data["pathname"] == "/srv/app/crud/job.py"


class TestSetupLogging:

    def test_replaces_root_handlers(self):
        root = logging.getLogger()
        saved_handlers, saved_level = root.handlers[:], root.level
        try:
            setup_logging("DEBUG", json_logs=True)

            assert len(root.handlers) == 1
            assert isinstance(root.handlers[0].formatter, CustomJsonFormatter)
            assert root.level == logging.DEBUG
        finally:
            for handler in root.handlers[:]:
                root.removeHandler(handler)
            for handler in saved_handlers:
                root.addHandler(handler)
            root.setLevel(saved_level)

    def test_plain_formatter_for_development(self):
        root = logging.getLogger()
        saved_handlers, saved_level = root.handlers[:], root.level
        try:
            setup_logging("warning", json_logs=False)

            assert not isinstance(root.handlers[0].formatter, CustomJsonFormatter)
            assert root.level == logging.WARNING
        finally:
            for handler in root.handlers[:]:
                root.removeHandler(handler)
            for handler in saved_handlers:
                root.addHandler(handler)
            root.setLevel(saved_level)
