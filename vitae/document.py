"""
Generic, config-driven document builder.

Lay out the header (name, job title, contact details) followed by one block
per visible section. Templates that only restyle the document pass a
``TemplateConfig`` whose ``styles`` override the base style set and whose
``item_renderers`` replace built-in item renderers.
"""

from vitae.base import RenderNode, TemplateConfig, node
from vitae.colors import ResolvedColors, resolve_color_scheme
from vitae.items import render_item
from vitae.layout import render_section_content
from vitae.resume_models import Resume, Section
from vitae.styles import BASE_STYLES, FONT_SIZES, style_for
from vitae.translations import Translations, ensure_translator


def page_style(resume: Resume, colors: ResolvedColors, overrides=None) -> dict[str, str]:
    typography = resume.metadata.typography
    return style_for(
        'page',
        BASE_STYLES,
        overrides,
        {
            'background-color': colors.background,
            'color': colors.text,
            'font-family': f'{typography.font_family}, Helvetica, Arial, sans-serif',
            'font-size': FONT_SIZES.get(typography.font_size, FONT_SIZES['md']),
            '--accent-primary': colors.primary,
        },
    )


def build_document(
    resume: Resume,
    translations: Translations = None,
    *,
    config: TemplateConfig | None = None,
) -> RenderNode:
    """Build the page tree of ``resume`` styled by ``config``."""
    config = config or TemplateConfig(name='base')
    overrides = config.styles
    custom_renderers = config.item_renderers
    colors = resolve_color_scheme(resume.metadata.colors)
    translate = ensure_translator(translations)

    def s(key, *extra):
        return style_for(key, BASE_STYLES, overrides, *extra)

    personal = resume.personal
    contacts = []
    for item in personal.details:
        rendered = render_item(
            item,
            BASE_STYLES,
            colors,
            custom_renderers=custom_renderers,
            overrides=overrides,
            translations=translate,
        )
        if rendered is not None:
            contacts.append(node('div', rendered, style=s('contact_item'), role='contact-item'))

    header = node(
        'header',
        node('h1', personal.full_name, style=s('name', {'color': colors.primary}), role='name'),
        (
            node('p', personal.job_title, style=s('job_title', {'color': colors.secondary}), role='job-title')
            if personal.job_title
            else None
        ),
        node('div', *contacts, style=s('contact_row'), role='contact-row'),
        style=s('header'),
        role='header',
    )

    sections = [
        render_section(section, colors, translate, overrides=overrides, custom_renderers=custom_renderers)
        for section in resume.sections
        if section.visible
    ]
    return node(
        'div', header, *sections,
        style=page_style(resume, colors, overrides),
        role='page',
    )


def render_section(
    section: Section,
    colors: ResolvedColors,
    translations: Translations = None,
    *,
    overrides=None,
    custom_renderers=None,
) -> RenderNode:
    """One titled section block: uppercased title over the laid out content."""
    title_color = {'color': colors.primary, 'border-bottom-color': colors.primary}
    return node(
        'section',
        node(
            'h2', section.title.upper(),
            style=style_for('section_title', BASE_STYLES, overrides, title_color),
            role='section-title',
        ),
        node(
            'div',
            *render_section_content(
                section.content,
                colors,
                translations,
                overrides=overrides,
                custom_renderers=custom_renderers,
            ),
            style=style_for('section_content', BASE_STYLES, overrides),
            role='section-content',
        ),
        style=style_for('section', BASE_STYLES, overrides),
        role='section',
        data_section_id=section.id,
    )


def error_document(message: str) -> RenderNode:
    """A single page showing ``message``; used when a template cannot be loaded."""
    return node(
        'div',
        node('p', message, style=BASE_STYLES['error'], role='error-message'),
        style={'background-color': '#ffffff'},
        role='page',
    )
