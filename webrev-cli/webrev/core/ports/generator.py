from pathlib import Path
from typing import Protocol, runtime_checkable

from webrev.core.ports.repository import ReadOnlyRepository
from webrev.core.schema.generate import GenerateOptions


@runtime_checkable
class WebrevGenerator(Protocol):
    def generate(
        self, repository: ReadOnlyRepository, options: GenerateOptions
    ) -> Path:
        ...
