"""
Unit tests for vitae.generator
"""

from vitae.generator import PaginatedDocument, generate_document


def test_jane_doe_experience(build_resume, build_section):
    resume = build_resume(
        build_section(
            [
                {'id': 'b1', 'type': 'bullet', 'value': 'Shipped X'},
                {'id': 'b2', 'type': 'bullet', 'value': 'Shipped Y'},
            ],
            title='Experience',
        ),
        full_name='Jane Doe',
    )
    document = generate_document(resume, 'modern')
    assert document.ok
    (section,) = document.root.find_all('section')
    assert section.find('section-title').text_content() == 'EXPERIENCE'
    content = section.find('section-content')
    (group,) = content.element_children()
    assert group.role == 'bullet-group'
    assert [li.text_content() for li in group.element_children()] == ['•Shipped X', '•Shipped Y']


def test_unknown_template_yields_error_page(sample_resume):
    document = generate_document(sample_resume, 'nonexistent')
    assert isinstance(document, PaginatedDocument)
    assert not document.ok
    assert document.error == 'Error loading template: nonexistent'
    assert document.root.find('error-message').text_content() == 'Error loading template: nonexistent'
    assert document.root.find('section') is None


def test_every_template_generates(sample_resume):
    for name in ('modern', 'classic', 'sidebar'):
        document = generate_document(sample_resume, name)
        assert document.ok, name
        assert document.template == name
        assert document.title == 'Ada Lovelace'


def test_generation_does_not_mutate_snapshot(sample_resume):
    before = sample_resume.model_dump()
    generate_document(sample_resume, 'modern', {'present': 'Heute'})
    assert sample_resume.model_dump() == before


def test_to_html(sample_resume):
    html = generate_document(sample_resume, 'modern').to_html()
    assert html.startswith('<!DOCTYPE html>')
    assert 'EXPERIENCE' in html
    assert 'class="bullet-group"' in html
    assert 'size: A4' in html
