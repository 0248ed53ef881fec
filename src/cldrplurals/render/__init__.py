"""Source renderers for compiled plural registries.

Each renderer turns the abstract decision procedures of a PluralRegistry
into source text for one target language. Renderers never evaluate rules;
the same registry renders identically every time.

Python 3.11+.
"""

from collections.abc import Callable

from cldrplurals.compiler import PluralRegistry

from .python import render_python
from .rust import render_rust

__all__ = ["RENDERERS", "render_python", "render_rust", "render_source"]

RENDERERS: dict[str, Callable[[PluralRegistry], str]] = {
    "python": render_python,
    "rust": render_rust,
}


def render_source(registry: PluralRegistry, target: str = "python") -> str:
    """Render a registry for the named target.

    Raises:
        ValueError: If target has no renderer
    """
    renderer = RENDERERS.get(target)
    if renderer is None:
        known = ", ".join(sorted(RENDERERS))
        msg = f"Unknown target '{target}' (expected one of: {known})"
        raise ValueError(msg)
    return renderer(registry)
