from typing import BinaryIO, Iterator

import requests

from webrev.core.exceptions import RetrievalError
from webrev.core.ports.transport import Transport

CHUNK_SIZE = 64 * 1024
DEFAULT_ENCODING = "utf-8"
LINE_DELIMITER = "\n"


class RequestsTransport(Transport):
    """Streaming HTTP GET over a shared ``requests.Session``.

    Neither a timeout nor a retry policy is configured; a failed request is
    reported once as ``RetrievalError``.
    """

    def __init__(self, session: requests.Session | None = None) -> None:
        self._session = session or requests.Session()

    def iter_lines(self, uri: str) -> Iterator[str]:
        with self._get(uri) as response:
            if response.encoding is None:
                response.encoding = DEFAULT_ENCODING
            try:
                yield from response.iter_lines(
                    decode_unicode=True, delimiter=LINE_DELIMITER
                )
            except requests.RequestException as error:
                raise RetrievalError(f"Failed to read {uri}: {error}", uri) from error

    def download(self, uri: str, sink: BinaryIO) -> int:
        written = 0
        with self._get(uri) as response:
            try:
                for chunk in response.iter_content(chunk_size=CHUNK_SIZE):
                    sink.write(chunk)
                    written += len(chunk)
            except requests.RequestException as error:
                raise RetrievalError(
                    f"Failed to download {uri}: {error}", uri
                ) from error
        return written

    def close(self) -> None:
        self._session.close()

    def __enter__(self) -> "RequestsTransport":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:  # noqa: ANN001
        self.close()

    def _get(self, uri: str) -> requests.Response:
        try:
            response = self._session.get(uri, stream=True)
        except requests.RequestException as error:
            raise RetrievalError(f"Failed to fetch {uri}: {error}", uri) from error
        if not response.ok:
            response.close()
            raise RetrievalError(
                f"Failed to fetch {uri}: HTTP {response.status_code}", uri
            )
        return response
