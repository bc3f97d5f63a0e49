"""The default template: centered header, accent-underlined section titles."""

from vitae.base import TemplateConfig

modern_config = TemplateConfig(
    name='Modern',
    styles={
        'section_title': {
            'font-size': '10pt',
            'text-transform': 'uppercase',
            'border-bottom-width': '2pt',
            'border-bottom-style': 'solid',
            'margin-bottom': '12pt',
            'padding-bottom': '4pt',
        },
        'header': {'align-items': 'center', 'margin-bottom': '20pt'},
        'name': {'font-size': '24pt', 'font-weight': 'bold', 'margin-bottom': '4pt'},
        'job_title': {'font-size': '14pt', 'margin-bottom': '8pt'},
        'contact_row': {'justify-content': 'center'},
    },
)
