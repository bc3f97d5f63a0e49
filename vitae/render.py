"""Output renderer lookup.

* Pluggable renderer system keyed by output format.
* HTML and PDF rendering via HTMLRenderer
"""

from vitae.base import Renderer, get_renderer_registry
from vitae.renderers.html import HTMLRenderer


def _initialize_default_renderers():
    """Register built-in renderers with the global registry."""
    registry = get_renderer_registry()

    # One renderer class serves both formats; RenderingConfig.format selects
    registry.register('html', HTMLRenderer)
    registry.register('pdf', HTMLRenderer)


def get_renderer_for_format(format: str) -> Renderer:
    """Get renderer for specified format from the registry."""
    registry = get_renderer_registry()
    if not registry.list_formats():
        _initialize_default_renderers()
    return registry.get_renderer(format)


# Initialize renderers when module is imported
_initialize_default_renderers()
