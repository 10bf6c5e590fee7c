from typing import BinaryIO, Iterator, Protocol, runtime_checkable


@runtime_checkable
class Transport(Protocol):
    def iter_lines(self, uri: str) -> Iterator[str]:
        ...

    def download(self, uri: str, sink: BinaryIO) -> int:
        ...
