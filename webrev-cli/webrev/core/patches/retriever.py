import os
import tempfile
from pathlib import Path

from webrev.core.exceptions import RetrievalError
from webrev.core.ports.logger import Logger
from webrev.core.ports.transport import Transport

PATCH_PREFIX = "patch"
PATCH_SUFFIX = ".patch"


class PatchRetriever:
    def __init__(self, transport: Transport, logger: Logger) -> None:
        self._transport = transport
        self._logger = logger

    def fetch(self, patch_uri: str) -> Path:
        try:
            fd, name = tempfile.mkstemp(prefix=PATCH_PREFIX, suffix=PATCH_SUFFIX)
        except OSError as error:
            raise RetrievalError(
                f"Could not create temporary patch file: {error}", patch_uri
            ) from error

        path = Path(name)
        try:
            with os.fdopen(fd, "wb") as sink:
                size = self._transport.download(patch_uri, sink)
        except RetrievalError:
            self.discard(path)
            raise
        except OSError as error:
            self.discard(path)
            raise RetrievalError(
                f"Could not write patch file {path}: {error}", patch_uri
            ) from error

        self._logger.info("Downloaded patch", uri=patch_uri, path=str(path), size=size)
        return path

    def discard(self, path: Path) -> None:
        try:
            path.unlink(missing_ok=True)
        except OSError as error:
            self._logger.warning(
                "Could not remove patch file", path=str(path), error=str(error)
            )
