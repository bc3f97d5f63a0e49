"""HTML and PDF output of a rendered document using Jinja2 and WeasyPrint."""

from typing import Any

from jinja2 import Environment, FileSystemLoader, select_autoescape

from vitae.base import GenerationError, RenderingConfig, RenderNode
from vitae.styles import to_css
from vitae.util import themes_files

PAGE_TEMPLATE = 'page.html'


def _themes_path() -> str:
    return str(themes_files)


def _load_weasyprint():
    """Import WeasyPrint on first PDF request; it pulls in native libraries."""
    try:
        import weasyprint
    except (ImportError, OSError) as e:
        raise GenerationError(f'WeasyPrint is unavailable: {e}') from e
    return weasyprint


class HTMLRenderer:
    """Renders a document tree to HTML or PDF.

    Process:
        * Render the node tree into the packaged page shell via Jinja2.
        * If PDF: convert the HTML with WeasyPrint.
    """

    def __init__(self, *, themes_path: str | None = None):
        self._env = Environment(
            loader=FileSystemLoader(themes_path or _themes_path()),
            autoescape=select_autoescape(['html', 'xml']),
        )
        self._env.filters['css'] = to_css

    # ------------------ Public API ------------------ #
    def render(self, document: Any, config: RenderingConfig) -> bytes:
        """``document`` is a PaginatedDocument (anything with ``root`` and ``title``)."""
        html = self.to_html(
            document.root,
            title=getattr(document, 'title', ''),
            page_size=config.page_size,
        )
        if config.format == 'pdf':
            return self._html_to_pdf(html)
        return html.encode('utf-8')

    def to_html(self, root: RenderNode, *, title: str = '', page_size: str = 'A4') -> str:
        template = self._env.get_template(PAGE_TEMPLATE)
        return template.render(
            root=root,
            title=title,
            page_size=page_size,
            background=root.style.get('background-color', '#ffffff'),
        )

    # ------------------ PDF conversion ------------------ #
    def _html_to_pdf(self, html: str) -> bytes:
        weasyprint = _load_weasyprint()
        try:
            return weasyprint.HTML(string=html).write_pdf()
        except Exception as e:
            raise GenerationError(f'PDF generation failed: {e}') from e
