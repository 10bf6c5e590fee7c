from webrev.core.exceptions.errors import (
    DirtyRepositoryError,
    GeneratorUnavailableError,
    MalformedLocationError,
    NoResolutionPathError,
    OutputDirectoryError,
    PatchNotFoundError,
    RepositoryError,
    ResolutionError,
    RetrievalError,
    UnknownBranchError,
    UnresolvableReferenceError,
    WebrevError,
)

__all__ = [
    "WebrevError",
    "MalformedLocationError",
    "RetrievalError",
    "PatchNotFoundError",
    "ResolutionError",
    "UnresolvableReferenceError",
    "UnknownBranchError",
    "NoResolutionPathError",
    "RepositoryError",
    "DirtyRepositoryError",
    "OutputDirectoryError",
    "GeneratorUnavailableError",
]
