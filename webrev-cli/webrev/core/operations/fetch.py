from pathlib import Path
from typing import Optional

from webrev.core.exceptions import DirtyRepositoryError, WebrevError
from webrev.core.operations.base import WebrevOperation
from webrev.core.ports.logger import Logger
from webrev.core.ports.repository import Repository
from webrev.core.ports.transport import Transport
from webrev.core.resolution import resolve_target
from webrev.core.schema.metadata import WebrevMetadata
from webrev.core.schema.revision import Hash

DEFAULT_FETCH_BRANCH = "WEBREV_FETCH_HEAD"


class FetchOperation(WebrevOperation[Hash]):
    """Materialize a webrev as a commit on a new branch.

    The branch is created at the revision the webrev was made against (see
    ``resolve_target``), checked out, the patch applied and committed with
    the webrev location as message. When a step after branch creation
    fails, the previous checkout is restored and the new branch removed.
    """

    def __init__(
        self,
        logger: Logger,
        transport: Transport,
        repository: Repository,
        location: str,
        *,
        branch_name: str = DEFAULT_FETCH_BRANCH,
        override_ref: Optional[str] = None,
    ) -> None:
        super().__init__(logger, transport, location)
        self._repository = repository
        self._branch_name = branch_name
        self._override_ref = override_ref

    def execute(self) -> Hash:
        if not self._repository.is_clean():
            raise DirtyRepositoryError("Repository is not clean")

        metadata = self.load_metadata()
        patch = self.retrieve_patch(metadata)
        try:
            target = resolve_target(metadata, self._override_ref, self._repository)
            self._logger.info(
                "Resolved target revision",
                target=target.hex,
                override=self._override_ref,
            )
            commit = self._integrate(target, metadata, patch)
        finally:
            self.discard_patch(patch)

        self._logger.info(
            "Fetched webrev",
            branch=self._branch_name,
            commit=commit.hex,
            location=self._location,
        )
        return commit

    def _integrate(self, target: Hash, metadata: WebrevMetadata, patch: Path) -> Hash:
        previous = self._repository.current_branch()
        if previous is None:
            head = self._repository.resolve("HEAD")
            previous = head.hex if head is not None else None

        branch = self._repository.create_branch(target, self._branch_name)
        try:
            self._repository.checkout(branch)
            self._repository.apply(patch, allow_partial=False)
            return self._repository.commit(self._location, metadata.author or "", "")
        except WebrevError:
            self._roll_back(previous, branch)
            raise

    def _roll_back(self, previous: Optional[str], branch: str) -> None:
        self._logger.warning("Rolling back fetch", branch=branch, previous=previous)
        try:
            self._repository.discard_changes()
            if previous is not None:
                self._repository.checkout(previous)
            self._repository.delete_branch(branch)
        except WebrevError as error:
            self._logger.exception(
                "Could not restore repository", branch=branch, error=str(error)
            )
