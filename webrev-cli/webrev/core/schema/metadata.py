from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True, slots=True)
class WebrevStats:
    insertions: int
    deletions: int
    modifications: int
    lines_changed: int


@dataclass(frozen=True, slots=True)
class WebrevMetadata:
    source_uri: str
    branch: Optional[str] = None
    author: Optional[str] = None
    summary: Optional[WebrevStats] = None
    workspace: Optional[str] = None
    repository_uri: Optional[str] = None
    compare_against: Optional[str] = None
    compare_against_version: Optional[str] = None
    compare_against_revision: Optional[str] = None
    patch_uri: Optional[str] = None
    changeset_uri: Optional[str] = None
