"""
Core data structures and protocols for the vitae package.

Define:
- RenderNode: element tree produced by item renderers and the layout engine
- RenderingConfig: configuration for the output stage
- TemplateConfig / TemplateDefinition: template registrations
- Renderer: protocol for output renderers (html, pdf) and their registry
- The vitae exception hierarchy
"""

from typing import Protocol, Any, Callable, Iterator
from collections.abc import Mapping
from dataclasses import dataclass, field


# ---------------------------------------------------------------------------
# Errors


class VitaeError(Exception):
    """Base class for all errors raised by vitae."""


class TemplateNotFoundError(VitaeError, KeyError):
    """Raised when a template name has no usable registration."""

    def __init__(self, template_name: str, reason: str | None = None):
        self.template_name = template_name
        self.reason = reason or 'not registered'
        super().__init__(f'PDF template "{template_name}" not found ({self.reason})')

    def __str__(self) -> str:
        return self.args[0]


class GenerationError(VitaeError):
    """The document primitive failed to produce an artifact."""


class ExportError(GenerationError):
    """An export request failed; carries a message meant for the user."""

    def __init__(self, message: str, *, user_message: str | None = None):
        super().__init__(message)
        self.user_message = user_message or 'The document could not be exported.'


class RasterizationError(VitaeError):
    """Decoding or painting a generated artifact failed."""


class RenderCancelled(VitaeError):
    """A render was superseded by a newer request. Never shown to the user."""


# ---------------------------------------------------------------------------
# Render tree


@dataclass
class RenderNode:
    """One element of a rendered document.

    ``tag`` is an HTML element name, ``style`` holds CSS declarations,
    ``role`` names what the node is (``bullet-group``, ``section-title``...)
    so tests and templates can find structure without parsing styles.
    """

    tag: str
    children: list['RenderNode | str'] = field(default_factory=list)
    style: dict[str, str] = field(default_factory=dict)
    attrs: dict[str, str] = field(default_factory=dict)
    role: str | None = None

    def text_content(self) -> str:
        parts = []
        for child in self.children:
            if isinstance(child, RenderNode):
                parts.append(child.text_content())
            else:
                parts.append(str(child))
        return ''.join(parts)

    def iter_nodes(self) -> Iterator['RenderNode']:
        yield self
        for child in self.children:
            if isinstance(child, RenderNode):
                yield from child.iter_nodes()

    def find_all(self, role: str) -> list['RenderNode']:
        return [n for n in self.iter_nodes() if n.role == role]

    def find(self, role: str) -> 'RenderNode | None':
        return next((n for n in self.iter_nodes() if n.role == role), None)

    def element_children(self) -> list['RenderNode']:
        return [c for c in self.children if isinstance(c, RenderNode)]


def node(
    tag: str,
    *children: 'RenderNode | str | None',
    style: Mapping[str, str] | None = None,
    role: str | None = None,
    **attrs: str,
) -> RenderNode:
    """Shorthand constructor; ``None`` children are dropped."""
    return RenderNode(
        tag=tag,
        children=[c for c in children if c is not None],
        style=dict(style or {}),
        attrs={k.rstrip('_').replace('_', '-'): v for k, v in attrs.items()},
        role=role,
    )


# ---------------------------------------------------------------------------
# Templates

# (item, styles, colors, custom_renderers, overrides, translate) -> RenderNode | None
ItemRenderer = Callable[..., RenderNode | None]

# (resume, translations) -> RenderNode
RenderComponent = Callable[..., RenderNode]


@dataclass(frozen=True)
class TemplateConfig:
    """Style overrides (and optional item renderers) for the generic generator."""

    name: str
    styles: Mapping[str, Mapping[str, str]] = field(default_factory=dict)
    item_renderers: Mapping[str, ItemRenderer] = field(default_factory=dict)


@dataclass(frozen=True)
class TemplateDefinition:
    """A registered template: either a config or a full custom component."""

    name: str
    config: TemplateConfig | None = None
    component: RenderComponent | None = None


# ---------------------------------------------------------------------------
# Output renderers


@dataclass
class RenderingConfig:
    """Configuration for the output stage."""

    format: str = 'pdf'  # pdf, html
    template: str = 'modern'
    page_size: str = 'A4'


class Renderer(Protocol):
    """Protocol for output renderers."""

    def render(self, document: Any, config: RenderingConfig) -> bytes: ...


class RendererRegistry:
    """Registry for managing multiple renderer implementations."""

    def __init__(self):
        self._renderers: dict[str, type[Renderer]] = {}
        self._instances: dict[str, Renderer] = {}

    def register(self, format_name: str, renderer_class: type[Renderer]) -> None:
        """Register a renderer class for a specific format."""
        self._renderers[format_name] = renderer_class
        self._instances.pop(format_name, None)

    def get_renderer(self, format_name: str) -> Renderer:
        """Get a renderer instance for the specified format."""
        if format_name not in self._renderers:
            raise ValueError(f"No renderer registered for format: {format_name}")

        # Cache instances for reuse
        if format_name not in self._instances:
            self._instances[format_name] = self._renderers[format_name]()

        return self._instances[format_name]

    def list_formats(self) -> list[str]:
        """List all registered format names."""
        return list(self._renderers.keys())

    def is_registered(self, format_name: str) -> bool:
        """Check if a format is registered."""
        return format_name in self._renderers


# Global renderer registry instance
_renderer_registry = RendererRegistry()


def register_renderer(format_name: str):
    """Decorator for registering renderer classes."""

    def decorator(renderer_class: type[Renderer]):
        _renderer_registry.register(format_name, renderer_class)
        return renderer_class

    return decorator


def get_renderer_registry() -> RendererRegistry:
    """Get the global renderer registry."""
    return _renderer_registry
