"""A serif, left-aligned template that prints skill tags as plain text."""

from vitae.base import TemplateConfig, node
from vitae.items import metadata_style
from vitae.styles import style_for


def render_plain_tag(item, styles, colors, custom_renderers, overrides, translate):
    """Tags without the chip background, separated by a middle dot."""
    return node(
        'span',
        item.value,
        node('span', ' ·', style={'color': colors.border}),
        style=style_for('tag', styles, overrides, {'color': colors.text}, metadata_style(item)),
        role='tag',
    )


classic_config = TemplateConfig(
    name='Classic',
    styles={
        'page': {'padding': '40pt'},
        'header': {'align-items': 'flex-start', 'margin-bottom': '16pt'},
        'name': {
            'font-family': 'Georgia, "Times New Roman", serif',
            'font-size': '26pt', 'font-weight': 'normal',
            'letter-spacing': '1pt',
        },
        'job_title': {'font-size': '13pt', 'font-style': 'italic', 'margin-bottom': '8pt'},
        'contact_row': {'justify-content': 'flex-start', 'gap': '12pt'},
        'section_title': {
            'font-family': 'Georgia, "Times New Roman", serif',
            'font-size': '11pt',
            'letter-spacing': '2pt',
            'border-bottom-width': '0.75pt',
            'margin-bottom': '8pt',
        },
        'section': {'margin-bottom': '18pt'},
        'tag': {'padding': '0', 'border-radius': '0', 'font-size': '10.5pt'},
    },
    item_renderers={'tag': render_plain_tag},
)
