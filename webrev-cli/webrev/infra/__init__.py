from webrev.infra.generator import load_generator
from webrev.infra.git import GitRepository
from webrev.infra.http import RequestsTransport
from webrev.infra.logging import ConsoleLogger, LogfireLogger, configure_logfire

__all__ = [
    "GitRepository",
    "RequestsTransport",
    "ConsoleLogger",
    "LogfireLogger",
    "configure_logfire",
    "load_generator",
]
