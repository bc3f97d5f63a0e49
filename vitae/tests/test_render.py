"""
Unit tests for vitae.render and vitae.renderers.html
"""

import pytest

from vitae.base import (
    GenerationError,
    RendererRegistry,
    RenderingConfig,
    get_renderer_registry,
    node,
    register_renderer,
)
from vitae.generator import generate_document
from vitae.renderers import html as html_mod
from vitae.renderers.html import HTMLRenderer


class FakeHTML:
    rendered = []

    def __init__(self, string=None):
        self.string = string

    def write_pdf(self):
        FakeHTML.rendered.append(self.string)
        return b'%PDF-FAKE'


fake_weasyprint = type('W', (), {'HTML': FakeHTML})


def _weasyprint_or_skip():
    try:
        return html_mod._load_weasyprint()
    except GenerationError:
        pytest.skip('WeasyPrint not available')


def test_renderer_registry():
    registry = RendererRegistry()
    registry.register('test', HTMLRenderer)
    assert registry.is_registered('test')
    renderer = registry.get_renderer('test')
    assert isinstance(renderer, HTMLRenderer)
    assert registry.get_renderer('test') is renderer
    with pytest.raises(ValueError):
        registry.get_renderer('docx')


def test_default_renderers_available():
    registry = get_renderer_registry()
    assert {'html', 'pdf'} <= set(registry.list_formats())
    assert isinstance(registry.get_renderer('pdf'), HTMLRenderer)


def test_html_escapes_content():
    root = node('div', node('p', '<script>alert(1)</script>', role='text'), role='page')
    html = HTMLRenderer().to_html(root, title='T')
    assert '<script>' not in html
    assert '&lt;script&gt;' in html
    assert 'class="text"' in html


def test_html_inline_styles_and_attrs():
    root = node('a', 'x', style={'color': 'red'}, href='mailto:a@b.c', data_section_id='s1')
    html = HTMLRenderer().to_html(root)
    assert 'style="color: red"' in html
    assert 'href="mailto:a@b.c"' in html
    assert 'data-section-id="s1"' in html


def test_pdf_goes_through_weasyprint(monkeypatch, sample_resume):
    monkeypatch.setattr(html_mod, '_load_weasyprint', lambda: fake_weasyprint)
    document = generate_document(sample_resume, 'modern', page_size='Letter')
    pdf = HTMLRenderer().render(document, RenderingConfig(format='pdf', page_size='Letter'))
    assert pdf == b'%PDF-FAKE'
    assert 'size: Letter' in FakeHTML.rendered[-1]
    assert 'Ada Lovelace' in FakeHTML.rendered[-1]


def test_weasyprint_failure_becomes_generation_error(monkeypatch, sample_resume):
    class Broken:
        def __init__(self, string=None):
            pass

        def write_pdf(self):
            raise RuntimeError('boom')

    monkeypatch.setattr(html_mod, '_load_weasyprint', lambda: type('W', (), {'HTML': Broken}))
    document = generate_document(sample_resume, 'modern')
    with pytest.raises(GenerationError):
        document.write_pdf()


def test_real_pdf(sample_resume):
    _weasyprint_or_skip()
    pdf = generate_document(sample_resume, 'modern').write_pdf()
    assert pdf.startswith(b'%PDF')


def test_register_renderer_decorator(monkeypatch, sample_resume):
    from vitae import base

    monkeypatch.setattr(base, '_renderer_registry', RendererRegistry())

    @register_renderer('txt')
    class TextRenderer:
        def render(self, document, config):
            return document.root.text_content().encode('utf-8')

    assert get_renderer_registry().is_registered('txt')
    text = generate_document(sample_resume, 'modern').write('txt')
    assert text.startswith(b'Ada Lovelace')


def test_registered_formats_do_not_leak():
    assert not get_renderer_registry().is_registered('txt')
