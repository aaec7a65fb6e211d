"""Loguru-backed logger used across the logtail-sdk."""

import sys
import threading
from typing import Any, Dict, Optional

from loguru import logger as _loguru_logger

from logtail_sdk.constants import LOG_LEVEL, SERVICE_NAME

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> <blue>[{level}]</blue> "
    "<cyan>{extra[logger_name]}</cyan> - <level>{message}</level>"
)

_loggers: Dict[str, "LogtailLogger"] = {}
_configure_lock = threading.Lock()
_configured = False


def _configure_sinks() -> None:
    global _configured
    with _configure_lock:
        if _configured:
            return
        _loguru_logger.remove()
        _loguru_logger.configure(extra={"logger_name": "", "service": SERVICE_NAME})
        _loguru_logger.add(
            sys.stderr, format=LOG_FORMAT, level=LOG_LEVEL, colorize=True
        )
        _configured = True


class LogtailLogger:
    """Minimal logger that forwards to loguru. Same .info/.error/.warning/.debug/.exception API."""

    def __init__(self, name: str) -> None:
        self._name = name
        self._log = _loguru_logger.bind(logger_name=name)

    @property
    def name(self) -> str:
        return self._name

    def bind(self, **kwargs: Any) -> Any:
        """Return the underlying loguru logger with extra context bound."""
        return self._log.bind(**kwargs)

    def info(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log.info(msg, *args, **kwargs)

    def error(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log.error(msg, *args, **kwargs)

    def warning(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log.warning(msg, *args, **kwargs)

    def debug(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log.debug(msg, *args, **kwargs)

    def exception(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log.exception(msg, *args, **kwargs)

    def critical(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log.critical(msg, *args, **kwargs)


def get_logger(name: Optional[str] = None) -> LogtailLogger:
    """
    Get a cached logger with the given name.

    :param name: The name of the logger, usually ``__name__``.
    :return: The logger.

    Usage:
        >>> logger = get_logger(__name__)
        >>> logger.info("Hello, World!")
    """
    _configure_sinks()
    if name is None:
        name = "logtail_sdk.observability.logger_adaptor"
    if name not in _loggers:
        _loggers[name] = LogtailLogger(name)
    return _loggers[name]


default_logger = get_logger()
