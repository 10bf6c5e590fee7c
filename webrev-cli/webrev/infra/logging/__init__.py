from webrev.infra.logging.console import ConsoleLogger
from webrev.infra.logging.logfire import LogfireLogger, configure_logfire

__all__ = ["ConsoleLogger", "LogfireLogger", "configure_logfire"]
