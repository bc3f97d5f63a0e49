"""
Unit tests for vitae.colors and vitae.styles
"""

from vitae.colors import DEFAULT_ACCENTS, ResolvedColors, as_resolved, resolve_color_scheme
from vitae.resume_models import ColorScheme
from vitae.styles import BASE_STYLES, merge_styles, style_for, to_css


def test_missing_accents_use_defaults():
    resolved = resolve_color_scheme(ColorScheme(accents=()))
    assert (resolved.primary, resolved.secondary, resolved.border, resolved.muted) == DEFAULT_ACCENTS


def test_partial_accents():
    resolved = resolve_color_scheme(ColorScheme(accents=('#ff0000', '', '#00ff00')))
    assert resolved.primary == '#ff0000'
    assert resolved.secondary == DEFAULT_ACCENTS[1]
    assert resolved.border == '#00ff00'
    assert resolved.muted == DEFAULT_ACCENTS[3]


def test_text_and_background_pass_through():
    resolved = resolve_color_scheme(ColorScheme(text='#222222', background='#fafafa'))
    assert resolved.text == '#222222'
    assert resolved.background == '#fafafa'


def test_resolve_none_and_as_resolved():
    resolved = resolve_color_scheme(None)
    assert resolved.primary == DEFAULT_ACCENTS[0]
    assert as_resolved(resolved) is resolved
    assert isinstance(as_resolved(ColorScheme()), ResolvedColors)


def test_merge_order():
    base = {'color': 'black', 'margin': '0'}
    template = {'color': 'navy', 'padding': '2pt'}
    item_level = {'color': 'red'}
    assert merge_styles(base, template, item_level) == {
        'color': 'red',
        'margin': '0',
        'padding': '2pt',
    }
    assert merge_styles(base, None, {}) == base


def test_style_for_layers():
    overrides = {'heading': {'font-size': '20pt'}}
    style = style_for('heading', BASE_STYLES, overrides, {'color': '#123456'})
    assert style['font-size'] == '20pt'
    assert style['font-weight'] == BASE_STYLES['heading']['font-weight']
    assert style['color'] == '#123456'
    # The base set is never mutated
    assert BASE_STYLES['heading']['font-size'] == '14pt'


def test_to_css():
    assert to_css({'color': 'red', 'margin-top': '4pt'}) == 'color: red; margin-top: 4pt'
