from webrev.core.operations.base import WebrevOperation
from webrev.core.ports.logger import Logger
from webrev.core.ports.repository import Repository
from webrev.core.ports.transport import Transport


class ApplyOperation(WebrevOperation[None]):
    """Apply the patch of a webrev to the current checkout, uncommitted."""

    def __init__(
        self,
        logger: Logger,
        transport: Transport,
        repository: Repository,
        location: str,
    ) -> None:
        super().__init__(logger, transport, location)
        self._repository = repository

    def execute(self) -> None:
        metadata = self.load_metadata()
        patch = self.retrieve_patch(metadata)
        try:
            self._repository.apply(patch, allow_partial=False)
        finally:
            self.discard_patch(patch)
        self._logger.info("Applied webrev", location=self._location)
