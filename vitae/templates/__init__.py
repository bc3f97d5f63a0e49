"""
Template registry and resolution.

A template is registered once, at import, under its name. It is either a
``TemplateConfig`` (style overrides for the generic document builder) or a
full custom component that draws the whole page itself.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from functools import partial
from typing import Iterable

from vitae.base import (
    RenderComponent,
    TemplateConfig,
    TemplateDefinition,
    TemplateNotFoundError,
)
from vitae.document import build_document
from vitae.templates.classic import classic_config
from vitae.templates.modern import modern_config
from vitae.templates.sidebar import sidebar_component


class TemplateRegistry(Mapping):
    """Read-only mapping of template name to ``TemplateDefinition``."""

    def __init__(self, definitions: Iterable[TemplateDefinition] = ()):
        self._templates: dict[str, TemplateDefinition] = {}
        for definition in definitions:
            if definition.name in self._templates:
                raise ValueError(f"Template '{definition.name}' is already registered")
            self._templates[definition.name] = definition

    def __getitem__(self, name: str) -> TemplateDefinition:
        return self._templates[name]

    def __iter__(self):
        return iter(self._templates)

    def __len__(self) -> int:
        return len(self._templates)


@dataclass(frozen=True)
class ResolvedTemplate:
    """What a template name resolves to.

    ``render(resume, translations)`` returns the page tree; ``kind`` is
    ``'config'`` or ``'custom'``.
    """

    name: str
    render: RenderComponent
    kind: str


pdf_templates = TemplateRegistry(
    [
        TemplateDefinition(name='modern', config=modern_config),
        TemplateDefinition(name='classic', config=classic_config),
        TemplateDefinition(name='sidebar', component=sidebar_component),
    ]
)


def resolve_template(
    template_name: str, registry: Mapping[str, TemplateDefinition] | None = None
) -> ResolvedTemplate:
    """Resolve ``template_name`` to something that renders a resume.

    Raises:
        TemplateNotFoundError: no registration, or one with neither a
            component nor a config.
    """
    registry = pdf_templates if registry is None else registry
    definition = registry.get(template_name)
    if definition is None:
        raise TemplateNotFoundError(template_name)
    if definition.component is not None:
        return ResolvedTemplate(template_name, definition.component, 'custom')
    if definition.config is not None:
        return ResolvedTemplate(
            template_name, partial(build_document, config=definition.config), 'config'
        )
    raise TemplateNotFoundError(template_name, 'has no component or config')


def list_templates() -> list[str]:
    return list(pdf_templates)


__all__ = [
    'TemplateConfig',
    'TemplateDefinition',
    'TemplateRegistry',
    'ResolvedTemplate',
    'pdf_templates',
    'resolve_template',
    'list_templates',
]
