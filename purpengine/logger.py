"""Engine, client and server console loggers."""

from __future__ import annotations

import logging
import sys
from typing import Dict

TRACE = 5
logging.addLevelName(TRACE, "TRACE")

ENGINE_LOGGER_NAME = "PURP"
CLIENT_LOGGER_NAME = "CLIENT"
SERVER_LOGGER_NAME = "SERVER"

_FORMAT = "[%(asctime)s] %(name)s: %(message)s"
_DATE_FORMAT = "%H:%M:%S"
_RESET = "\033[m"
_COLOURS = (
    (logging.CRITICAL, "\033[1m\033[41m"),
    (logging.ERROR, "\033[31m\033[1m"),
    (logging.WARNING, "\033[33m\033[1m"),
    (logging.INFO, "\033[32m"),
    (logging.DEBUG, "\033[36m"),
    (TRACE, "\033[37m"),
)

_loggers: Dict[str, logging.Logger] = {}


class _ConsoleHandler(logging.StreamHandler):
    """Writes to whatever ``sys.stdout`` currently is, coloured on a terminal."""

    def __init__(self) -> None:
        super().__init__(sys.stdout)

    def emit(self, record: logging.LogRecord) -> None:
        self.stream = sys.stdout
        super().emit(record)

    def format(self, record: logging.LogRecord) -> str:
        text = super().format(record)
        colour = next((code for level, code in _COLOURS if record.levelno >= level), None)
        isatty = getattr(self.stream, "isatty", None)
        if colour and callable(isatty) and isatty():
            return f"{colour}{text}{_RESET}"
        return text


def init() -> None:
    """Set up the three console loggers at the lowest (trace) level."""
    formatter = logging.Formatter(_FORMAT, datefmt=_DATE_FORMAT)
    for name in (ENGINE_LOGGER_NAME, CLIENT_LOGGER_NAME, SERVER_LOGGER_NAME):
        log = logging.getLogger(name)
        for handler in [h for h in log.handlers if isinstance(h, _ConsoleHandler)]:
            log.removeHandler(handler)
        handler = _ConsoleHandler()
        handler.setFormatter(formatter)
        log.addHandler(handler)
        log.setLevel(TRACE)
        log.propagate = False
        _loggers[name] = log


def _get(name: str) -> logging.Logger:
    try:
        return _loggers[name]
    except KeyError:
        raise RuntimeError("loggers are not initialised; call init() first") from None


def engine_logger() -> logging.Logger:
    """The engine's own logger."""
    return _get(ENGINE_LOGGER_NAME)


def client_logger() -> logging.Logger:
    """The logger for client code."""
    return _get(CLIENT_LOGGER_NAME)


def server_logger() -> logging.Logger:
    """The logger for server code."""
    return _get(SERVER_LOGGER_NAME)