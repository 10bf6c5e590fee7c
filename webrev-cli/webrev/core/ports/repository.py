from pathlib import Path
from typing import List, Optional, Protocol, runtime_checkable

from webrev.core.schema.revision import Hash


@runtime_checkable
class ReadOnlyRepository(Protocol):
    def resolve(self, ref: str) -> Optional[Hash]:
        ...

    def branches(self) -> List[str]:
        ...

    def current_branch(self) -> Optional[str]:
        ...

    def config(self, key: str) -> List[str]:
        ...

    def is_clean(self) -> bool:
        ...

    def pull_path(self, remote: str) -> Optional[str]:
        ...


@runtime_checkable
class Repository(ReadOnlyRepository, Protocol):
    def create_branch(self, target: Hash, name: str) -> str:
        ...

    def checkout(self, branch: str) -> None:
        ...

    def apply(self, patch: Path, allow_partial: bool) -> None:
        ...

    def commit(self, message: str, author: str, committer_note: str) -> Hash:
        ...

    def delete_branch(self, name: str) -> None:
        ...

    def discard_changes(self) -> None:
        ...
