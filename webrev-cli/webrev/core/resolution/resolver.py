from typing import Optional

from webrev.core.exceptions import (
    NoResolutionPathError,
    RepositoryError,
    UnknownBranchError,
    UnresolvableReferenceError,
)
from webrev.core.ports.repository import ReadOnlyRepository
from webrev.core.schema.metadata import WebrevMetadata
from webrev.core.schema.revision import Hash


def resolve_target(
    metadata: WebrevMetadata,
    override_ref: Optional[str],
    repository: ReadOnlyRepository,
) -> Hash:
    """Pick the commit a webrev should be applied on top of.

    The first applicable rule wins: an explicit ``override_ref``, then the
    exact revision recorded by the webrev, then the recorded branch if it
    exists locally.
    """
    if override_ref is not None:
        return resolve_ref(repository, override_ref)

    if metadata.compare_against_revision is not None:
        return Hash(metadata.compare_against_revision)

    if metadata.branch is not None:
        onto = metadata.branch
        if onto not in repository.branches():
            raise UnknownBranchError(
                f"Webrev applies to branch '{onto}', but this repository has no such branch",
                onto,
            )
        return resolve_ref(repository, onto)

    raise NoResolutionPathError(
        "Found no information indicating where to apply this webrev. "
        "Use --ref to specify ref explicitly"
    )


def resolve_ref(repository: ReadOnlyRepository, ref: str) -> Hash:
    message = f"Could not resolve reference '{ref}'"
    try:
        resolved = repository.resolve(ref)
    except RepositoryError as error:
        raise UnresolvableReferenceError(message, ref) from error
    if resolved is None:
        raise UnresolvableReferenceError(message, ref)
    return resolved
