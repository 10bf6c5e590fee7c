from webrev.core.schema.generate import GenerateOptions, GenerateRequest
from webrev.core.schema.metadata import WebrevMetadata, WebrevStats
from webrev.core.schema.revision import Hash

__all__ = [
    "WebrevStats",
    "WebrevMetadata",
    "Hash",
    "GenerateRequest",
    "GenerateOptions",
]
