import logging
import sys
from typing import Any

from webrev.core.ports.logger import Logger


class _ContextFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        context = getattr(record, "context", None)
        if not context:
            return message
        pairs = " ".join(
            f"{key}={value!r}" for key, value in context.items() if value is not None
        )
        return f"{message} | {pairs}" if pairs else message


class ConsoleLogger(Logger):
    """Key/value logger writing to stderr, keeping stdout for command output."""

    def __init__(self, name: str, level: str = "INFO") -> None:
        self._logger = logging.getLogger(name)
        self._logger.setLevel(level.upper())
        if not self._logger.handlers:
            handler = logging.StreamHandler(sys.stderr)
            handler.setFormatter(_ContextFormatter("%(levelname)s %(name)s: %(message)s"))
            self._logger.addHandler(handler)
        self._logger.propagate = False

    def debug(self, message: str, **kwargs: Any) -> None:
        self._logger.debug(message, extra={"context": kwargs})

    def info(self, message: str, **kwargs: Any) -> None:
        self._logger.info(message, extra={"context": kwargs})

    def warning(self, message: str, **kwargs: Any) -> None:
        self._logger.warning(message, extra={"context": kwargs})

    def error(self, message: str, **kwargs: Any) -> None:
        self._logger.error(message, extra={"context": kwargs})

    def exception(self, message: str, **kwargs: Any) -> None:
        self._logger.exception(message, extra={"context": kwargs})
