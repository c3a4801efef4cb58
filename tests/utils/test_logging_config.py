"""
Tests for logging configuration.
"""

import logging

import pytest

from saavn_client.utils import logging_config
from saavn_client.utils.logging_config import (
    SaavnLogger,
    get_logger,
    log_api_request,
    log_error,
    setup_logging,
)


@pytest.fixture(autouse=True)
def restore_logging(monkeypatch):
    """Keep the global logger and root handlers isolated per test."""
    monkeypatch.setattr(logging_config, "_logger_instance", None)
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


class TestSaavnLogger:
    """Test SaavnLogger setup."""

    def test_creates_rotating_log_files(self, tmp_path):
        setup_logging(log_dir=tmp_path / "logs", log_level="INFO", enable_console=False)

        get_logger("tests").info("hello", key="value")
        for handler in logging.getLogger().handlers:
            handler.flush()

        assert (tmp_path / "logs" / "saavn_client.log").exists()
        assert (tmp_path / "logs" / "errors.log").exists()
        assert "hello" in (tmp_path / "logs" / "saavn_client.log").read_text()

    def test_no_file_handlers_without_log_dir(self):
        SaavnLogger(log_dir=None, enable_console=False)

        assert logging.getLogger().handlers == []

    def test_http_loggers_quieted_outside_debug(self):
        SaavnLogger(log_dir=None, log_level="INFO", enable_console=False)

        assert logging.getLogger("aiohttp").level == logging.WARNING

    def test_get_logger_requires_setup(self):
        with pytest.raises(RuntimeError):
            get_logger("tests")

    def test_log_api_request_is_noop_before_setup(self):
        log_api_request("GET", "https://a.example/api/search", 200, 0.1)

    def test_errors_log_only_gets_errors(self, tmp_path):
        setup_logging(log_dir=tmp_path, log_level="INFO", enable_console=False)

        get_logger("tests").info("routine")
        log_error(ValueError("bad timeout"), {"query": "believer"})
        for handler in logging.getLogger().handlers:
            handler.flush()

        errors = (tmp_path / "errors.log").read_text()
        assert "bad timeout" in errors
        assert "routine" not in errors
        assert "routine" in (tmp_path / "saavn_client.log").read_text()

    def test_setup_logging_rejects_unknown_options(self):
        with pytest.raises(TypeError):
            setup_logging(log_dir=None, enable_console=False, max_file_size=1)
