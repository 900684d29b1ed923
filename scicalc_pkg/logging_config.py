"""Logging for scicalc.

Every module logs through a child of the ``scicalc`` logger. The command line
configures that logger once with :func:`setup_logging`; library users who never
call it get the standard library's defaults.
"""

import logging
import sys
from datetime import datetime
from typing import Optional

ROOT_LOGGER = "scicalc"


class StructuredFormatter(logging.Formatter):
    """One line per record: ``<iso time> [LEVEL] scicalc.<module>: message``.

    Records logged with ``extra={"error_code": ...}`` get a ``(code=...)``
    suffix so failed evaluations can be grepped by error code.
    """

    def format(self, record: logging.LogRecord) -> str:
        stamp = datetime.fromtimestamp(record.created).isoformat()
        line = f"{stamp} [{record.levelname}] {record.name}: {record.getMessage()}"
        code = getattr(record, "error_code", None)
        if code:
            line = f"{line} (code={code})"
        if record.exc_info:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line


def setup_logging(level: str = "WARNING", log_file: Optional[str] = None) -> logging.Logger:
    """Attach stderr (and optionally file) handlers to the ``scicalc`` logger.

    Calling it again replaces the previous handlers. Unknown level names fall
    back to WARNING.
    """
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(getattr(logging, level.upper(), logging.WARNING))
    for old in logger.handlers:
        old.close()
    logger.handlers.clear()

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    for handler in handlers:
        handler.setFormatter(StructuredFormatter())
        logger.addHandler(handler)
    return logger


def get_logger(name: str) -> logging.Logger:
    """Logger for one scicalc module, e.g. ``get_logger("lexer")``."""
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")
