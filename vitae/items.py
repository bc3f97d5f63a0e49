"""
Item renderer registry.

Every declared item type maps to a built-in renderer; templates may supply
their own renderers per type, which are looked up first. A renderer has the
signature::

    renderer(item, styles, colors, custom_renderers, overrides, translate) -> RenderNode | None

and builds element styles with ``style_for(key, styles, overrides, item_level)``
so the base < template < item precedence holds everywhere.
"""

from typing import Any, Mapping

from vitae import logger
from vitae.base import ItemRenderer, RenderNode, node
from vitae.colors import ResolvedColors, resolve_color_scheme
from vitae.helpers import (
    display_label,
    format_date_range,
    format_score,
    is_date_range_item,
    is_image_item,
    is_link_item,
    is_rating_item,
    is_separator_item,
    is_string_item,
)
from vitae.styles import BASE_STYLES, StyleSet, merge_styles, style_for
from vitae.translations import Translations, ensure_translator

FILLED_STAR = '★'
EMPTY_STAR = '☆'
BULLET_GLYPH = '•'


def metadata_style(item: Any) -> dict[str, str]:
    """Ad hoc style carried by the item itself."""
    meta = getattr(item, 'metadata', None)
    if meta is None:
        return {}
    style = {}
    if meta.color:
        style['color'] = meta.color
    if meta.align:
        style['text-align'] = meta.align
    return style


def render_string_item(item, styles, colors, custom_renderers, overrides, translate):
    if not is_string_item(item):
        return None

    meta = metadata_style(item)
    text_color = {'color': colors.text}
    muted = {'color': colors.muted}

    if item.type == 'heading':
        return node(
            'h3', item.value,
            style=style_for('heading', styles, overrides, text_color, meta),
            role='heading',
        )
    elif item.type == 'sub-heading':
        return node(
            'h4', item.value,
            style=style_for('sub_heading', styles, overrides, {'color': colors.secondary}, meta),
            role='sub-heading',
        )
    elif item.type == 'text':
        return node(
            'p', item.value,
            style=style_for('text', styles, overrides, text_color, meta),
            role='text',
        )
    elif item.type == 'bullet':
        return node(
            'div',
            node('span', BULLET_GLYPH, style={'color': colors.primary, 'margin-right': '4pt'}),
            node('span', item.value, style=merge_styles(text_color, {'flex': '1'}, meta)),
            style=style_for('bullet_row', styles, overrides),
            role='bullet',
        )
    elif item.type == 'number':
        # The marker comes from the enclosing ordered list
        return node(
            'span', item.value,
            style=style_for('text', styles, overrides, text_color, meta),
            role='number',
        )
    elif item.type == 'date':
        return node(
            'span', item.value,
            style=style_for('date', styles, overrides, muted, meta),
            role='date',
        )
    elif item.type == 'location':
        return node(
            'span', item.value,
            style=style_for('contact', styles, overrides, muted, meta),
            role='location', title=translate('location'),
        )
    elif item.type == 'phone':
        return node(
            'a', item.value,
            style=style_for('contact', styles, overrides, muted, meta),
            role='phone', href=f'tel:{item.value}', title=translate('phone'),
        )
    elif item.type == 'email':
        return node(
            'a', item.value,
            style=style_for('contact', styles, overrides, muted, meta),
            role='email', href=f'mailto:{item.value}', title=translate('email'),
        )
    elif item.type == 'tag':
        return node(
            'span', item.value,
            style=style_for(
                'tag', styles, overrides,
                {'background-color': colors.border, 'color': colors.text}, meta,
            ),
            role='tag',
        )
    return node('span', item.value, style=merge_styles(text_color, meta), role=item.type)


def render_date_range_item(item, styles, colors, custom_renderers, overrides, translate):
    if not is_date_range_item(item):
        return None
    return node(
        'span', format_date_range(item.value, translate),
        style=style_for('date', styles, overrides, {'color': colors.muted}, metadata_style(item)),
        role='date-range',
    )


def render_link_item(item, styles, colors, custom_renderers, overrides, translate):
    if not is_link_item(item):
        return None
    return node(
        'a', display_label(item.value),
        style=style_for('link', styles, overrides, {'color': colors.secondary}, metadata_style(item)),
        role=item.type, href=item.value.url, title=translate('website'),
    )


def _rating_label(label: str, styles, overrides) -> RenderNode:
    return node('span', label, style=style_for('rating_label', styles, overrides), role='rating-label')


def render_rating_item(item, styles, colors, custom_renderers, overrides, translate):
    if not is_rating_item(item):
        return None

    label, score, maximum = item.value.label, item.value.score, item.value.max
    row_style = style_for('rating_row', styles, overrides, metadata_style(item))

    display = item.value.display
    if display == 'stars':
        filled = int(score)
        empty = max(int(maximum) - filled, 0)
        return node(
            'div',
            _rating_label(label, styles, overrides),
            node(
                'span',
                node('span', FILLED_STAR * filled, role='stars-filled'),
                node('span', EMPTY_STAR * empty, role='stars-empty'),
                style={'color': colors.primary, 'font-size': '10pt'},
            ),
            style=row_style, role='rating',
        )
    elif display == 'dots':
        filled = int(score)
        dots = [
            node(
                'span',
                style=style_for(
                    'dot', styles, overrides,
                    {'background-color': colors.primary if i < filled else colors.border},
                ),
                role='dot-filled' if i < filled else 'dot-empty',
            )
            for i in range(int(maximum))
        ]
        return node(
            'div',
            _rating_label(label, styles, overrides),
            node('div', *dots, style=style_for('dots_container', styles, overrides)),
            style=row_style, role='rating',
        )
    elif display == 'bar':
        ratio = score / maximum if maximum > 0 else 0
        return node(
            'div',
            _rating_label(label, styles, overrides),
            node(
                'div',
                node(
                    'div',
                    style=style_for(
                        'bar_fill', styles, overrides,
                        {'width': f'{ratio * 100:g}%', 'background-color': colors.primary},
                    ),
                    role='bar-fill',
                ),
                style=style_for('bar_container', styles, overrides),
            ),
            style=row_style, role='rating',
        )
    return node(
        'div',
        _rating_label(label, styles, overrides),
        node('span', format_score(score, maximum), style=style_for('rating_label', styles, overrides)),
        style=row_style, role='rating',
    )


def render_image_item(item, styles, colors, custom_renderers, overrides, translate):
    if not is_image_item(item):
        return None
    frame = {
        'border': f'1pt solid {colors.border}',
        'border-radius': '50%' if item.value.shape == 'circle' else '0',
        'padding': '6pt',
    }
    return node(
        'div',
        node(
            'span', f"{translate('image')}: {item.value.alt or 'Untitled'}",
            style={'font-size': '10pt', 'color': colors.muted, 'display': 'block'},
        ),
        node(
            'span', item.value.url,
            style={'font-size': '8pt', 'font-style': 'italic', 'color': colors.text},
        ),
        style=style_for('image', styles, overrides, frame, metadata_style(item)),
        role='image',
    )


def render_separator_item(item, styles, colors, custom_renderers, overrides, translate):
    if not is_separator_item(item):
        return None
    return node(
        'div',
        style=style_for('separator', styles, overrides, {'background-color': colors.border}),
        role='separator',
    )


BASE_ITEM_RENDERERS: dict[str, ItemRenderer] = {
    'heading': render_string_item,
    'sub-heading': render_string_item,
    'text': render_string_item,
    'bullet': render_string_item,
    'number': render_string_item,
    'date': render_string_item,
    'location': render_string_item,
    'phone': render_string_item,
    'email': render_string_item,
    'tag': render_string_item,
    'date-range': render_date_range_item,
    'link': render_link_item,
    'social': render_link_item,
    'rating': render_rating_item,
    'image': render_image_item,
    'separator': render_separator_item,
}


def render_item(
    item: Any,
    styles: StyleSet = BASE_STYLES,
    colors: ResolvedColors | None = None,
    *,
    custom_renderers: Mapping[str, ItemRenderer] | None = None,
    overrides: StyleSet | None = None,
    translations: Translations = None,
) -> RenderNode | None:
    """Render one item, or return None when there is nothing to draw.

    Hidden items and item types with no custom or built-in renderer both
    produce None; the latter is logged, never raised.
    """
    if not item.visible:
        return None
    renderer = (custom_renderers or {}).get(item.type) or BASE_ITEM_RENDERERS.get(item.type)
    if renderer is None:
        logger.log_render_dispatch_miss(str(item.type), item.id)
        return None
    return renderer(
        item,
        styles,
        colors or resolve_color_scheme(None),
        custom_renderers,
        overrides,
        ensure_translator(translations),
    )
