"""Logging setup for the ``iam-client`` logger."""

import sys
import logging
import structlog

LOGGER_NAME = "iam-client"

LOG = logging.getLogger(LOGGER_NAME)


class TerminalColorMarks:
    CYAN = "\033[96m"
    BLUE = "\033[94m"
    YELLOW = "\033[93m"
    RED = "\033[91m"
    END = "\033[0m"


class ColoredFormatter(logging.Formatter):
    """Colours the level name of each record for terminal output."""

    LEVEL_COLORS = {
        logging.DEBUG: TerminalColorMarks.CYAN,
        logging.WARNING: TerminalColorMarks.YELLOW,
        logging.ERROR: TerminalColorMarks.RED,
        logging.CRITICAL: TerminalColorMarks.RED,
    }

    def format(self, record):
        plain = record.levelname
        color = self.LEVEL_COLORS.get(record.levelno, TerminalColorMarks.BLUE)
        record.levelname = f"{color}{plain}{TerminalColorMarks.END}"
        try:
            return super().format(record)
        finally:
            record.levelname = plain


def _json_handler() -> logging.Handler:
    # Records come from the stdlib logger, so structlog only renders them.
    handler = logging.StreamHandler(stream=sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=[
                structlog.stdlib.add_logger_name,
                structlog.stdlib.add_log_level,
                structlog.processors.TimeStamper(fmt="iso"),
            ],
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                structlog.processors.JSONRenderer(),
            ],
        )
    )
    return handler


def _text_handler() -> logging.Handler:
    handler = logging.StreamHandler()
    handler.setFormatter(ColoredFormatter("%(levelname)s - %(asctime)s - %(message)s"))
    return handler


def get_logger(format: str = "text", level: str = "INFO") -> logging.Logger:
    """Attach a single text or JSON handler to the client logger and set its level."""
    handler = _json_handler() if format == "json" else _text_handler()
    LOG.handlers.clear()
    LOG.addHandler(handler)
    LOG.setLevel(level)
    return LOG
