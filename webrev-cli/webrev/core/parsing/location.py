import re
from urllib.parse import urljoin, urlsplit

from webrev.core.exceptions import MalformedLocationError

INDEX_DOCUMENT = "index.html"

# Characters that may never appear unescaped in a URI reference.
_ILLEGAL_URI_CHARS = re.compile(r'[\s\x00-\x1f\x7f<>"{}|\\^`]')


def sanitize(raw_location: str) -> str:
    """Turn a user supplied webrev location into the directory URI that
    relative links in the index page are resolved against."""
    location = raw_location
    if location.endswith(INDEX_DOCUMENT):
        location = location[: -len(INDEX_DOCUMENT)]
    return parse_uri(location)


def parse_uri(value: str) -> str:
    if not value:
        raise MalformedLocationError("Location is empty", value)
    match = _ILLEGAL_URI_CHARS.search(value)
    if match is not None:
        raise MalformedLocationError(
            f"Illegal character {match.group()!r} at index {match.start()}",
            value,
        )
    try:
        parts = urlsplit(value)
        # Accessing the port validates it.
        parts.port
    except ValueError as error:
        raise MalformedLocationError(str(error), value) from error
    if parts.scheme and not (parts.netloc or parts.path):
        raise MalformedLocationError("Expected scheme-specific part", value)
    return value


def resolve_relative(base: str, name: str) -> str:
    return urljoin(base, parse_uri(name))
