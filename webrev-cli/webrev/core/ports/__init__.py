from webrev.core.ports.generator import WebrevGenerator
from webrev.core.ports.logger import Logger
from webrev.core.ports.repository import ReadOnlyRepository, Repository
from webrev.core.ports.transport import Transport

__all__ = [
    "Logger",
    "ReadOnlyRepository",
    "Repository",
    "Transport",
    "WebrevGenerator",
]
