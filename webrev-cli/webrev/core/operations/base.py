from abc import ABC, abstractmethod
from pathlib import Path
from typing import Generic, TypeVar, final

from webrev.core.exceptions import PatchNotFoundError, WebrevError
from webrev.core.parsing import extract_header, parse_metadata, sanitize
from webrev.core.patches import PatchRetriever
from webrev.core.ports.logger import Logger
from webrev.core.ports.transport import Transport
from webrev.core.schema.metadata import WebrevMetadata

T = TypeVar("T")


class BaseOperation(ABC, Generic[T]):
    def __init__(self, logger: Logger) -> None:
        self._logger = logger

    @final
    def run(self) -> T:
        operation = self.__class__.__name__
        self._logger.info("Operation starting", operation=operation)
        try:
            result = self.execute()
        except WebrevError as error:
            self.handle_error(error)
            raise
        finally:
            self._logger.info("Operation stopping", operation=operation)
        return result

    @abstractmethod
    def execute(self) -> T: ...

    def handle_error(self, error: WebrevError) -> None:
        self._logger.error(
            "Operation failed",
            error=str(error),
            error_type=type(error).__name__,
            operation=self.__class__.__name__,
        )


class WebrevOperation(BaseOperation[T]):
    """Operations that start from a published webrev location."""

    def __init__(self, logger: Logger, transport: Transport, location: str) -> None:
        super().__init__(logger)
        self._transport = transport
        self._location = location
        self._retriever = PatchRetriever(transport, logger)

    def load_metadata(self) -> WebrevMetadata:
        source_uri = sanitize(self._location)
        self._logger.debug("Reading webrev header", uri=source_uri)
        header = extract_header(self._transport.iter_lines(source_uri))
        metadata = parse_metadata(header, source_uri)
        self._logger.info(
            "Parsed webrev metadata",
            uri=source_uri,
            fields=sorted(header),
            patch=metadata.patch_uri,
        )
        return metadata

    def retrieve_patch(self, metadata: WebrevMetadata) -> Path:
        if metadata.patch_uri is None:
            raise PatchNotFoundError(
                "Could not find patch file in webrev", self._location
            )
        return self._retriever.fetch(metadata.patch_uri)

    def discard_patch(self, patch: Path) -> None:
        self._retriever.discard(patch)
