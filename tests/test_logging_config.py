"""Tests for logging setup."""

import logging

import pytest

from quotaday_api.app.core.logging_config import (
    CONSOLE_HANDLER,
    FILE_HANDLER,
    LOG_FORMAT,
    setup_logging,
)

SERVER_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


@pytest.fixture
def clean_logging():
    """Restore the root and uvicorn loggers after a test reconfigures them."""
    root = logging.getLogger()
    saved_root = (list(root.handlers), root.level)
    saved_server = {}
    for name in SERVER_LOGGERS:
        lg = logging.getLogger(name)
        saved_server[name] = (list(lg.handlers), lg.level, lg.propagate, lg.disabled)
    yield root
    for handler in list(root.handlers):
        if handler not in saved_root[0]:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(saved_root[1])
    for name, (handlers, level, propagate, disabled) in saved_server.items():
        lg = logging.getLogger(name)
        lg.handlers[:] = handlers
        lg.setLevel(level)
        lg.propagate = propagate
        lg.disabled = disabled


def _named(root, name):
    return [h for h in root.handlers if h.get_name() == name]


class TestSetupLogging:
    def test_writes_to_log_file(self, clean_logging, tmp_path):
        logfile = tmp_path / "quotaday.log"
        setup_logging("INFO", str(logfile))
        logging.getLogger("quotaday_api.test").info("hello from the file handler")
        for handler in _named(clean_logging, FILE_HANDLER):
            handler.flush()
        content = logfile.read_text(encoding="utf-8")
        assert "[INFO] quotaday_api.test: hello from the file handler" in content

    def test_file_handler_uses_shared_format(self, clean_logging, tmp_path):
        setup_logging("INFO", str(tmp_path / "quotaday.log"))
        (handler,) = _named(clean_logging, FILE_HANDLER)
        assert handler.formatter._fmt == LOG_FORMAT

    def test_repeated_calls_do_not_duplicate_handlers(self, clean_logging, tmp_path):
        logfile = str(tmp_path / "quotaday.log")
        for _ in range(3):
            setup_logging("INFO", logfile)
        assert len(_named(clean_logging, CONSOLE_HANDLER)) == 1
        assert len(_named(clean_logging, FILE_HANDLER)) == 1

    def test_no_file_handler_without_logfile(self, clean_logging):
        before = len(_named(clean_logging, FILE_HANDLER))
        setup_logging("INFO")
        assert len(_named(clean_logging, FILE_HANDLER)) == before

    @pytest.mark.parametrize("level, expected", [("debug", logging.DEBUG), ("WARNING", logging.WARNING), ("bogus", logging.INFO)])
    def test_level(self, clean_logging, level, expected):
        setup_logging(level)
        assert clean_logging.level == expected

    def test_server_loggers_propagate_to_root(self, clean_logging):
        logging.getLogger("uvicorn.error").addHandler(logging.NullHandler())
        setup_logging("INFO")
        for name in ("uvicorn", "uvicorn.error"):
            lg = logging.getLogger(name)
            assert lg.handlers == []
            assert lg.propagate is True

    def test_uvicorn_access_log_is_muted(self, clean_logging):
        setup_logging("INFO")
        access = logging.getLogger("uvicorn.access")
        assert access.disabled is True
        assert access.propagate is False
        assert access.handlers == []
