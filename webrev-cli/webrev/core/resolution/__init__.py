from webrev.core.resolution.options import (
    flag,
    option,
    resolve_generate_options,
)
from webrev.core.resolution.resolver import resolve_ref, resolve_target

__all__ = [
    "resolve_target",
    "resolve_ref",
    "option",
    "flag",
    "resolve_generate_options",
]
