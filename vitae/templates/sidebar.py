"""A two-column template drawn by its own component.

The left column carries the name, job title and contact details on the
primary color; sections run down the right column.
"""

from dataclasses import replace

from vitae.base import RenderNode, node
from vitae.colors import resolve_color_scheme
from vitae.document import page_style, render_section
from vitae.items import render_item
from vitae.resume_models import Resume
from vitae.styles import BASE_STYLES
from vitae.translations import Translations, ensure_translator

SIDEBAR_WIDTH = '30%'

SIDEBAR_STYLES = {
    'name': {'font-size': '20pt', 'font-weight': 'bold', 'margin-bottom': '4pt'},
    'job_title': {'font-size': '12pt', 'margin-bottom': '16pt'},
    'contact': {'font-size': '9.5pt', 'text-decoration': 'none'},
    'section_title': {'font-size': '10pt', 'border-bottom-width': '1pt'},
}


def sidebar_component(resume: Resume, translations: Translations = None) -> RenderNode:
    colors = resolve_color_scheme(resume.metadata.colors)
    translate = ensure_translator(translations)
    on_primary = {'color': colors.background}
    # Contact items draw in muted or secondary; both sit on the primary fill here
    aside_colors = replace(colors, muted=colors.background, secondary=colors.background)

    details = [
        node('div', rendered, style={'margin-bottom': '6pt'}, role='contact-item')
        for rendered in (
            render_item(
                item,
                BASE_STYLES,
                aside_colors,
                overrides={'contact': SIDEBAR_STYLES['contact']},
                translations=translate,
            )
            for item in resume.personal.details
        )
        if rendered is not None
    ]

    aside = node(
        'aside',
        node('h1', resume.personal.full_name, style={**SIDEBAR_STYLES['name'], **on_primary}, role='name'),
        (
            node('p', resume.personal.job_title, style={**SIDEBAR_STYLES['job_title'], **on_primary}, role='job-title')
            if resume.personal.job_title
            else None
        ),
        node('div', *details, role='contact-row'),
        style={
            'width': SIDEBAR_WIDTH,
            'padding': '24pt 16pt',
            'background-color': colors.primary,
        },
        role='header',
    )

    main = node(
        'main',
        *[
            render_section(section, colors, translate, overrides=SIDEBAR_STYLES)
            for section in resume.sections
            if section.visible
        ],
        style={'flex': '1', 'padding': '24pt'},
    )

    style = page_style(resume, colors)
    style.update({'padding': '0', 'display': 'flex', 'flex-direction': 'row'})
    return node('div', aside, main, style=style, role='page')
