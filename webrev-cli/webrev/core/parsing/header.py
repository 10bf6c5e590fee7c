import re
from typing import Dict, Iterable, Iterator

TABLE_START = "<table>"
TABLE_END = "</table>"

_HEADER_ROW_PATTERN = re.compile(
    r"<tr>\s*<th>\n?(?P<key>.*):\n?</th>\s*<td>\n?(?P<value>.*)\n?</td>\s*</tr>"
)


class TableCursor:
    """Forward-only view over the lines of the first ``<table>`` in a page.

    Lines before the table are consumed and discarded; iteration stops at the
    closing tag without reading further, so the rest of the document is
    never pulled from the underlying source.
    """

    def __init__(self, lines: Iterable[str]) -> None:
        self._lines = iter(lines)
        self._inside = False
        self._done = False

    def __iter__(self) -> Iterator[str]:
        return self

    def __next__(self) -> str:
        if self._done:
            raise StopIteration
        if not self._inside:
            for line in self._lines:
                line = _strip_eol(line)
                if line.startswith(TABLE_START):
                    self._inside = True
                    return self._take(line)
            self._done = True
            raise StopIteration
        for line in self._lines:
            return self._take(_strip_eol(line))
        self._done = True
        raise StopIteration

    def _take(self, line: str) -> str:
        if line.startswith(TABLE_END):
            self._done = True
            raise StopIteration
        return line


def extract_header(lines: Iterable[str]) -> Dict[str, str]:
    header: Dict[str, str] = {}
    for line in TableCursor(lines):
        match = _HEADER_ROW_PATTERN.search(line)
        if match is None:
            continue
        header[match.group("key")] = match.group("value")
    return header


def _strip_eol(line: str) -> str:
    return line.rstrip("\r\n")
