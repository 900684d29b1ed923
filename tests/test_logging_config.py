"""Tests for the logging setup."""

import logging

from scicalc_pkg.api import evaluate_expression
from scicalc_pkg.logging_config import StructuredFormatter, get_logger, setup_logging


def _record(**extra):
    record = logging.LogRecord("scicalc.api", logging.INFO, __file__, 1, "failed %s", ("5/0",), None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestStructuredFormatter:
    def test_plain_line(self):
        line = StructuredFormatter().format(_record())
        assert line.endswith("[INFO] scicalc.api: failed 5/0")

    def test_error_code_suffix(self):
        line = StructuredFormatter().format(_record(error_code="DIVISION_BY_ZERO"))
        assert line.endswith("failed 5/0 (code=DIVISION_BY_ZERO)")


class TestSetupLogging:
    def test_module_loggers_are_children(self):
        assert get_logger("lexer").name == "scicalc.lexer"

    def test_repeated_setup_replaces_handlers(self, tmp_path):
        setup_logging("INFO")
        logger = setup_logging("DEBUG", log_file=str(tmp_path / "a.log"))
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 2
        setup_logging("WARNING")

    def test_unknown_level_falls_back_to_warning(self):
        assert setup_logging("chatty").level == logging.WARNING

    def test_failures_are_logged_with_code(self, tmp_path):
        log_file = tmp_path / "scicalc.log"
        setup_logging("INFO", log_file=str(log_file))
        try:
            evaluate_expression("sqrt(-1)")
        finally:
            for handler in logging.getLogger("scicalc").handlers:
                handler.flush()
            setup_logging("WARNING")
        assert "(code=INVALID_OPERATION)" in log_file.read_text()
