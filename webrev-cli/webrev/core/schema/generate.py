from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from webrev.core.schema.revision import Hash


@dataclass(frozen=True, slots=True)
class GenerateRequest:
    rev: Optional[str] = None
    output: Optional[str] = None
    username: Optional[str] = None
    repository: Optional[str] = None
    title: Optional[str] = None
    cr: Optional[str] = None
    no_outgoing: bool = False
    no_comments: bool = False


@dataclass(frozen=True, slots=True)
class GenerateOptions:
    revision: Hash
    output: Path
    title: str
    upstream: Optional[str]
    username: str
    issue: Optional[str]
    version: str
    no_comments: bool
