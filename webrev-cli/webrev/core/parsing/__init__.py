from webrev.core.parsing.header import TableCursor, extract_header
from webrev.core.parsing.location import parse_uri, resolve_relative, sanitize
from webrev.core.parsing.metadata import parse_author, parse_metadata, parse_summary

__all__ = [
    "sanitize",
    "parse_uri",
    "resolve_relative",
    "TableCursor",
    "extract_header",
    "parse_metadata",
    "parse_summary",
    "parse_author",
]
