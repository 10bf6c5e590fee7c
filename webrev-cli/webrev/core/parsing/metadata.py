import re
from typing import Mapping, Optional

from webrev.core.exceptions import MalformedLocationError
from webrev.core.parsing.location import parse_uri, resolve_relative
from webrev.core.schema.metadata import WebrevMetadata, WebrevStats

PATCH_KEY = "Patch of changes"
CHANGESET_KEY = "Changeset"
AUTHOR_KEY = "Prepared by"
BRANCH_KEY = "Branch"
SUMMARY_KEY = "Summary of changes"
WORKSPACE_KEY = "Workspace"
REPOSITORY_KEY = "Repository"
COMPARE_AGAINST_KEY = "Compare against"
COMPARE_AGAINST_VERSION_KEY = "Compare against version"
COMPARE_AGAINST_REVISION_KEY = "Compare against revision"

_PATCH_LINK_PATTERN = re.compile(r'<a href=".*">(?P<name>.*\.patch)</a>')
_CHANGESET_LINK_PATTERN = re.compile(r'<a href=".*">(?P<name>.*\.changeset)</a>')
_SUMMARY_PATTERN = re.compile(
    r"(?P<lines_changed>\d+) lines? changed:"
    r" (?P<insertions>\d+) ins;"
    r" (?P<deletions>\d+) del;"
    r" (?P<modifications>\d+) mod;"
    r" (?P<unchanged>\d+) unchg"
)


def parse_metadata(header: Mapping[str, str], source_uri: str) -> WebrevMetadata:
    """Build the metadata record for a webrev from its header table.

    Each field is derived independently: a missing or unparseable value
    leaves that field as ``None``. The only hard failure is a ``Repository``
    value that is not a URI, which raises ``MalformedLocationError``.
    """
    repository = header.get(REPOSITORY_KEY)
    return WebrevMetadata(
        source_uri=source_uri,
        branch=header.get(BRANCH_KEY),
        author=parse_author(header.get(AUTHOR_KEY)),
        summary=_optional_summary(header.get(SUMMARY_KEY)),
        workspace=header.get(WORKSPACE_KEY),
        repository_uri=parse_uri(repository) if repository is not None else None,
        compare_against=header.get(COMPARE_AGAINST_KEY),
        compare_against_version=header.get(COMPARE_AGAINST_VERSION_KEY),
        compare_against_revision=header.get(COMPARE_AGAINST_REVISION_KEY),
        patch_uri=_linked_uri(header.get(PATCH_KEY), _PATCH_LINK_PATTERN, source_uri),
        changeset_uri=_linked_uri(
            header.get(CHANGESET_KEY), _CHANGESET_LINK_PATTERN, source_uri
        ),
    )


def parse_summary(text: str) -> Optional[WebrevStats]:
    """Parse a diff-stat sentence such as
    ``12 lines changed: 8 ins; 2 del; 2 mod; 0 unchg``.

    The reported total is kept as written, even when it disagrees with the
    individual counts.
    """
    match = _SUMMARY_PATTERN.search(text)
    if match is None:
        return None
    return WebrevStats(
        insertions=int(match.group("insertions")),
        deletions=int(match.group("deletions")),
        modifications=int(match.group("modifications")),
        lines_changed=int(match.group("lines_changed")),
    )


def parse_author(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    tokens = value.split(maxsplit=1)
    if not tokens:
        return None
    return tokens[0]


def _optional_summary(value: Optional[str]) -> Optional[WebrevStats]:
    if value is None:
        return None
    return parse_summary(value)


def _linked_uri(
    value: Optional[str], pattern: re.Pattern, source_uri: str
) -> Optional[str]:
    if value is None:
        return None
    match = pattern.search(value)
    if match is None:
        return None
    try:
        return resolve_relative(source_uri, match.group("name"))
    except MalformedLocationError:
        return None
