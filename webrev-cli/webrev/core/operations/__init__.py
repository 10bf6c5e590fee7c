from webrev.core.operations.apply import ApplyOperation
from webrev.core.operations.base import BaseOperation, WebrevOperation
from webrev.core.operations.fetch import DEFAULT_FETCH_BRANCH, FetchOperation
from webrev.core.operations.generate import GenerateOperation

__all__ = [
    "BaseOperation",
    "WebrevOperation",
    "ApplyOperation",
    "FetchOperation",
    "GenerateOperation",
    "DEFAULT_FETCH_BRANCH",
]
