"""
Section content layout.

Arrange a section's rendered items according to its layout directive:

* ``list``: top to bottom; consecutive bullet items (or consecutive number
  items) are grouped into one ``ul`` (or ``ol``) so the exported document keeps
  real list structure.
* ``grid``: equal-width column tracks, one cell per item, row-major.
* ``inline``: a horizontally wrapping row.
"""

from itertools import groupby
from typing import Any, Iterable, Iterator, Mapping

from vitae.base import ItemRenderer, RenderNode, node
from vitae.colors import ResolvedColors, as_resolved
from vitae.items import render_item
from vitae.resume_models import LIST_ITEM_TYPES, ColorScheme, SectionContent
from vitae.styles import BASE_STYLES, StyleSet, style_for
from vitae.translations import Translations, ensure_translator


def group_items(items: Iterable[Any]) -> Iterator[tuple[str | None, list[Any]]]:
    """Partition items into runs, preserving order.

    Yields ``('bullet', run)`` / ``('number', run)`` for maximal runs of
    consecutive same-type list items and ``(None, [item])`` for every other item.
    Anything that is not a bullet or number (a separator included) ends a run.

    >>> from types import SimpleNamespace as I
    >>> kinds = [I(type=t) for t in ['text', 'bullet', 'bullet', 'number', 'text']]
    >>> [(k, len(run)) for k, run in group_items(kinds)]
    [(None, 1), ('bullet', 2), ('number', 1), (None, 1)]
    """
    for kind, run in groupby(
        items, key=lambda item: item.type if item.type in LIST_ITEM_TYPES else None
    ):
        if kind is None:
            for item in run:
                yield None, [item]
        else:
            yield kind, list(run)


def render_section_content(
    content: SectionContent,
    colors: ResolvedColors | ColorScheme | None,
    translations: Translations = None,
    *,
    styles: StyleSet = BASE_STYLES,
    overrides: StyleSet | None = None,
    custom_renderers: Mapping[str, ItemRenderer] | None = None,
) -> list[RenderNode]:
    """Render a section's items into its top-level nodes."""
    colors = as_resolved(colors)
    translate = ensure_translator(translations)
    items = [item for item in content.items if item.visible]

    def render(item):
        return render_item(
            item,
            styles,
            colors,
            custom_renderers=custom_renderers,
            overrides=overrides,
            translations=translate,
        )

    if content.layout == 'grid':
        return [_grid(items, content.effective_columns, render, styles, overrides)]
    if content.layout == 'inline':
        return [_inline(items, render, styles, overrides)]
    return _list(items, render, styles, overrides)


def _list(items, render, styles, overrides) -> list[RenderNode]:
    nodes = []
    for kind, run in group_items(items):
        if kind is None:
            rendered = render(run[0])
            if rendered is not None:
                nodes.append(
                    node('div', rendered, style=style_for('list_item', styles, overrides), role='list-item')
                )
            continue
        entries = [
            node('li', rendered, style=style_for('group_item', styles, overrides), role='group-item')
            for rendered in map(render, run)
            if rendered is not None
        ]
        if entries:
            nodes.append(
                node(
                    'ul' if kind == 'bullet' else 'ol',
                    *entries,
                    style=style_for(f'{kind}_group', styles, overrides),
                    role=f'{kind}-group',
                )
            )
    return nodes


def _grid(items, columns: int, render, styles, overrides) -> RenderNode:
    cells = []
    for item in items:
        rendered = render(item)
        if rendered is None:
            continue
        span = getattr(item.metadata, 'col_span', None) if item.metadata else None
        extra = {'grid-column': f'span {min(span, columns)}'} if span else None
        cells.append(
            node('div', rendered, style=style_for('grid_item', styles, overrides, extra), role='grid-cell')
        )
    track = {'grid-template-columns': f'repeat({columns}, 1fr)'}
    return node('div', *cells, style=style_for('grid', styles, overrides, track), role='grid')


def _inline(items, render, styles, overrides) -> RenderNode:
    children = [
        node('div', rendered, role='inline-item')
        for rendered in map(render, items)
        if rendered is not None
    ]
    return node('div', *children, style=style_for('inline', styles, overrides), role='inline')
