"""Base style set and the ordered style-layer merge.

Styles are plain mappings of CSS declarations. A rendered element's style is
built from layers in a fixed order: base < template override < item-level,
later layers winning on conflicting properties.
"""

from typing import Mapping, Optional

Style = Mapping[str, str]
StyleSet = Mapping[str, Style]

BASE_STYLES: dict[str, dict[str, str]] = {
    'page': {
        'padding': '32pt',
        'font-family': 'Helvetica, Arial, sans-serif',
        'font-size': '12pt',
        'line-height': '1.4',
        'background-color': '#ffffff',
    },
    'name': {'font-size': '24pt', 'font-weight': 'bold', 'margin-bottom': '4pt'},
    'job_title': {'font-size': '16pt', 'margin-bottom': '16pt'},
    'header': {'display': 'flex', 'flex-direction': 'column', 'margin-bottom': '20pt'},
    'contact_row': {
        'display': 'flex',
        'flex-direction': 'row',
        'flex-wrap': 'wrap',
        'justify-content': 'center',
        'gap': '16pt',
        'margin-bottom': '8pt',
    },
    'contact_item': {'display': 'flex', 'align-items': 'center', 'gap': '4pt'},
    'section': {'margin-bottom': '24pt'},
    'section_title': {
        'font-size': '10pt',
        'font-weight': 'bold',
        'text-transform': 'uppercase',
        'margin-bottom': '12pt',
        'padding-bottom': '4pt',
        'border-bottom-width': '2pt',
        'border-bottom-style': 'solid',
    },
    'section_content': {'margin-top': '4pt'},
    'heading': {'font-size': '14pt', 'font-weight': 'bold', 'margin': '0'},
    'sub_heading': {'font-size': '12pt', 'font-weight': '500', 'margin': '0'},
    'text': {'font-size': '11pt', 'margin': '0'},
    'date': {'font-style': 'italic'},
    'contact': {'font-size': '10pt', 'text-decoration': 'none'},
    'link': {'text-decoration': 'underline'},
    'list_item': {'margin-bottom': '8pt'},
    'bullet_group': {'margin': '0 0 8pt 0', 'padding-left': '0', 'list-style-type': 'none'},
    'number_group': {'margin': '0 0 8pt 0', 'padding-left': '16pt', 'list-style-type': 'decimal'},
    'group_item': {'margin-bottom': '4pt'},
    'bullet_row': {'display': 'flex', 'align-items': 'flex-start', 'gap': '4pt'},
    'rating_row': {'display': 'flex', 'align-items': 'center', 'gap': '8pt'},
    'rating_label': {'font-size': '11pt', 'margin-right': '8pt'},
    'bar_container': {
        'width': '60pt',
        'height': '6pt',
        'background-color': '#e5e7eb',
        'border-radius': '3pt',
    },
    'bar_fill': {'height': '100%', 'border-radius': '3pt'},
    'dots_container': {'display': 'flex', 'gap': '3pt'},
    'dot': {'width': '6pt', 'height': '6pt', 'border-radius': '3pt'},
    'grid': {'display': 'grid', 'gap': '8pt'},
    'grid_item': {'min-width': '0'},
    'inline': {'display': 'flex', 'flex-direction': 'row', 'flex-wrap': 'wrap', 'gap': '6pt'},
    'tag': {
        'padding': '2pt 8pt',
        'border-radius': '4pt',
        'font-size': '10pt',
    },
    'separator': {'height': '1pt', 'margin': '8pt 0'},
    'image': {'text-align': 'center', 'margin-bottom': '8pt'},
    'error': {'padding': '40pt', 'color': 'red', 'font-size': '16pt'},
}

FONT_SIZES = {'sm': '10.5pt', 'md': '12pt', 'lg': '13.5pt'}


def merge_styles(*layers: Optional[Style]) -> dict[str, str]:
    """Merge style layers in order; later layers win, ``None`` layers are skipped.

    >>> merge_styles({'color': 'red', 'margin': '0'}, None, {'color': 'blue'})
    {'color': 'blue', 'margin': '0'}
    """
    merged: dict[str, str] = {}
    for layer in layers:
        if layer:
            merged.update(layer)
    return merged


def style_for(
    key: str,
    base: StyleSet,
    overrides: Optional[StyleSet] = None,
    *extra: Optional[Style],
) -> dict[str, str]:
    """Style of element ``key``: base, then the template override, then ``extra``."""
    return merge_styles(base.get(key), (overrides or {}).get(key), *extra)


def to_css(style: Style) -> str:
    return '; '.join(f'{prop}: {value}' for prop, value in style.items())
