from typing import Any

from webrev.core.ports.logger import Logger


def _import_logfire():
    try:
        import logfire
    except ImportError as error:
        raise RuntimeError(
            "logfire is not installed; install webrev-cli[logfire]"
        ) from error
    return logfire


def configure_logfire(api_token: str, service_name: str) -> None:
    logfire = _import_logfire()
    logfire.configure(token=api_token, service_name=service_name)


class LogfireLogger(Logger):
    def __init__(self, name: str) -> None:
        self._logfire = _import_logfire().with_tags(name)

    def debug(self, message: str, **kwargs: Any) -> None:
        self._logfire.debug(message, **kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self._logfire.info(message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._logfire.warn(message, **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._logfire.error(message, **kwargs)

    def exception(self, message: str, **kwargs: Any) -> None:
        self._logfire.exception(message, **kwargs)
