from tests.fakes.generator import FakeGenerator
from tests.fakes.logger import FakeLogger
from tests.fakes.repository import FakeRepository
from tests.fakes.transport import FakeTransport

__all__ = [
    "FakeGenerator",
    "FakeLogger",
    "FakeRepository",
    "FakeTransport",
]
