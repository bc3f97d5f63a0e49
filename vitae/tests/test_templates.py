"""
Unit tests for vitae.templates and vitae.document
"""

import pytest

from vitae.base import TemplateDefinition, TemplateNotFoundError
from vitae.document import build_document
from vitae.templates import TemplateRegistry, list_templates, resolve_template
from vitae.templates.classic import classic_config
from vitae.templates.modern import modern_config


def test_registered_templates():
    assert set(list_templates()) >= {'modern', 'classic', 'sidebar'}


@pytest.mark.parametrize('name, config', [('modern', modern_config), ('classic', classic_config)])
def test_config_template_matches_direct_build(name, config, build_resume, build_section):
    resume = build_resume(
        build_section([{'id': 'b', 'type': 'bullet', 'value': 'x'}, {'id': 't', 'type': 'tag', 'value': 'y'}])
    )
    resolved = resolve_template(name)
    assert resolved.kind == 'config'
    assert resolved.render(resume, None) == build_document(resume, config=config)


def test_unknown_template_raises():
    with pytest.raises(TemplateNotFoundError) as excinfo:
        resolve_template('nonexistent')
    assert excinfo.value.template_name == 'nonexistent'
    assert 'nonexistent' in str(excinfo.value)
    # Still a KeyError for callers treating the registry as a mapping
    assert isinstance(excinfo.value, KeyError)


def test_empty_definition_raises():
    registry = TemplateRegistry([TemplateDefinition(name='hollow')])
    with pytest.raises(TemplateNotFoundError):
        resolve_template('hollow', registry)


def test_duplicate_registration_rejected():
    with pytest.raises(ValueError):
        TemplateRegistry([TemplateDefinition(name='a'), TemplateDefinition(name='a')])


def test_custom_component_template(build_resume, build_section):
    resume = build_resume(build_section([{'id': 't', 'type': 'text', 'value': 'body'}]))
    resolved = resolve_template('sidebar')
    assert resolved.kind == 'custom'
    page = resolved.render(resume, None)
    assert page.role == 'page'
    assert page.find('name').text_content() == 'Ada Lovelace'
    assert page.find('section-title').text_content() == 'EXPERIENCE'


def test_classic_tags_use_template_renderer(build_resume, build_section):
    resume = build_resume(
        build_section([{'id': 't', 'type': 'tag', 'value': 'Python'}], layout='inline')
    )
    modern_tag = resolve_template('modern').render(resume, None).find('tag')
    classic_tag = resolve_template('classic').render(resume, None).find('tag')
    assert 'background-color' in modern_tag.style
    assert 'background-color' not in classic_tag.style


def test_document_header_and_sections(sample_resume):
    page = build_document(sample_resume, config=modern_config)
    assert page.find('name').text_content() == 'Ada Lovelace'
    assert page.find('name').style['color'] == '#1d4ed8'
    assert page.find('job-title').style['color'] == '#475569'
    contacts = page.find('contact-row').element_children()
    assert len(contacts) == 4
    # The hidden "Drafts" section is skipped
    titles = [n.text_content() for n in page.find_all('section-title')]
    assert titles == ['EXPERIENCE', 'SKILLS', 'TOOLS']
    assert page.find('section-title').style['border-bottom-color'] == '#1d4ed8'


def test_job_title_is_optional(build_resume):
    page = build_document(build_resume())
    assert page.find('job-title') is None


def test_typography(build_resume):
    page = build_document(build_resume(typography={'fontFamily': 'Georgia', 'fontSize': 'sm'}))
    assert page.style['font-family'].startswith('Georgia')
    assert page.style['font-size'] == '10.5pt'


def test_classic_tag_keeps_item_metadata_and_template_style(build_resume, build_section):
    resume = build_resume(
        build_section(
            [{'id': 't', 'type': 'tag', 'value': 'Python', 'metadata': {'color': '#ff0000', 'align': 'center'}}],
            layout='inline',
        )
    )
    tag = resolve_template('classic').render(resume, None).find('tag')
    assert tag.style['color'] == '#ff0000'
    assert tag.style['text-align'] == 'center'
    assert tag.style['padding'] == '0'
    assert tag.style['font-size'] == '10.5pt'
