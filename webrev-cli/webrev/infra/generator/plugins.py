from importlib.metadata import EntryPoint, entry_points
from typing import Callable, Iterable, Optional

from webrev.core.exceptions import GeneratorUnavailableError
from webrev.core.ports.generator import WebrevGenerator

ENTRY_POINT_GROUP = "webrev.generators"


def load_generator(
    name: Optional[str] = None,
    discover: Callable[[], Iterable[EntryPoint]] | None = None,
) -> WebrevGenerator:
    """Instantiate the webrev generator registered under ``webrev.generators``.

    With several generators installed, ``name`` selects one; otherwise the
    first registered entry point is used.
    """
    candidates = list(discover() if discover else entry_points(group=ENTRY_POINT_GROUP))
    if name is not None:
        candidates = [candidate for candidate in candidates if candidate.name == name]
    if not candidates:
        wanted = f"'{name}'" if name else "any"
        raise GeneratorUnavailableError(
            f"No webrev generator ({wanted}) is registered under '{ENTRY_POINT_GROUP}'"
        )
    factory = candidates[0].load()
    generator = factory()
    if not isinstance(generator, WebrevGenerator):
        raise GeneratorUnavailableError(
            f"Entry point '{candidates[0].name}' does not provide a webrev generator"
        )
    return generator
