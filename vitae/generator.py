"""
Document generation: resume snapshot + template name -> paginated document.

This is the shared, pure step behind both the interactive preview and the
export. An unknown template never escapes as an exception: the generated
document is an error page naming the template instead.
"""

import asyncio
import time
from dataclasses import dataclass
from collections.abc import Mapping

from vitae import logger
from vitae.base import (
    RenderingConfig,
    RenderNode,
    TemplateDefinition,
    TemplateNotFoundError,
)
from vitae.document import error_document
from vitae.render import get_renderer_for_format
from vitae.resume_models import Resume
from vitae.templates import resolve_template
from vitae.translations import Translations, ensure_translator

DEFAULT_TEMPLATE = 'modern'


@dataclass(frozen=True)
class PaginatedDocument:
    """A generated document, ready to be written as HTML or PDF."""

    root: RenderNode
    template: str
    page_size: str = 'A4'
    title: str = ''
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_html(self) -> str:
        return self.write('html').decode('utf-8')

    def write(self, format: str = 'pdf') -> bytes:
        config = RenderingConfig(format=format, template=self.template, page_size=self.page_size)
        return get_renderer_for_format(format).render(self, config)

    def write_pdf(self) -> bytes:
        """Encode to PDF bytes (blocking)."""
        started = time.perf_counter()
        data = self.write('pdf')
        logger.log_generation_result(self.template, len(data), time.perf_counter() - started)
        return data

    async def render_pdf(self) -> bytes:
        """Encode to PDF bytes in a worker thread."""
        return await asyncio.to_thread(self.write_pdf)


def generate_document(
    resume: Resume,
    template_name: str = DEFAULT_TEMPLATE,
    translations: Translations = None,
    *,
    registry: Mapping[str, TemplateDefinition] | None = None,
    page_size: str = 'A4',
) -> PaginatedDocument:
    """Lay out ``resume`` with the named template.

    Returns an error page (``document.error`` set) when the template cannot
    be resolved.
    """
    title = resume.personal.full_name or resume.title or ''
    try:
        template = resolve_template(template_name, registry)
    except TemplateNotFoundError as e:
        logger.log_template_fallback(template_name, e)
        message = f'Error loading template: {template_name}'
        return PaginatedDocument(
            root=error_document(message),
            template=template_name,
            page_size=page_size,
            title=title,
            error=message,
        )
    root = template.render(resume, ensure_translator(translations))
    return PaginatedDocument(root=root, template=template_name, page_size=page_size, title=title)


async def generate_pdf(
    resume: Resume,
    template_name: str = DEFAULT_TEMPLATE,
    translations: Translations = None,
) -> bytes:
    """Generate and encode in one awaitable step (used by the preview)."""
    document = generate_document(resume, template_name, translations)
    return await document.render_pdf()
