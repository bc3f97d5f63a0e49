"""
Unit tests for vitae.layout
"""

from vitae.layout import group_items, render_section_content
from vitae.resume_models import SectionContent


def mk_content(types, *, layout='list', columns=None, hidden=(), **item_extra):
    items = []
    for i, t in enumerate(types):
        value = None if t == 'separator' else f'{t} {i}'
        item = {'id': f'i{i}', 'type': t, 'value': value, 'visible': i not in hidden}
        item.update(item_extra.get(f'i{i}', {}))
        items.append(item)
    data = {'id': 'c', 'layout': layout, 'items': items}
    if columns is not None:
        data['columns'] = columns
    return SectionContent.model_validate(data)


def roles(nodes):
    return [n.role for n in nodes]


def test_list_grouping_at_type_transitions():
    content = mk_content(['text', 'bullet', 'bullet', 'number', 'number', 'text'])
    nodes = render_section_content(content, None)
    assert roles(nodes) == ['list-item', 'bullet-group', 'number-group', 'list-item']
    bullets, numbers = nodes[1], nodes[2]
    assert bullets.tag == 'ul' and numbers.tag == 'ol'
    assert [li.text_content() for li in bullets.element_children()] == ['bullet 1', 'bullet 2']
    assert [li.text_content() for li in numbers.element_children()] == ['number 3', 'number 4']


def test_separator_breaks_a_run():
    content = mk_content(['bullet', 'separator', 'bullet'])
    nodes = render_section_content(content, None)
    assert roles(nodes) == ['bullet-group', 'list-item', 'bullet-group']
    assert nodes[1].element_children()[0].role == 'separator'


def test_hidden_items_do_not_break_runs():
    content = mk_content(['bullet', 'text', 'bullet'], hidden={1})
    nodes = render_section_content(content, None)
    assert roles(nodes) == ['bullet-group']
    assert len(nodes[0].element_children()) == 2


def test_unknown_items_render_nothing():
    content = SectionContent.model_validate(
        {
            'id': 'c',
            'items': [
                {'id': 'a', 'type': 'text', 'value': 'a'},
                {'id': 'b', 'type': 'hologram', 'value': 'b'},
            ],
        }
    )
    assert roles(render_section_content(content, None)) == ['list-item']


def test_group_items_is_pure_partition():
    content = mk_content(['bullet', 'bullet', 'text', 'number'])
    groups = list(group_items(content.items))
    assert [(kind, [i.id for i in run]) for kind, run in groups] == [
        ('bullet', ['i0', 'i1']),
        (None, ['i2']),
        ('number', ['i3']),
    ]


def test_grid_tracks_and_cells():
    content = mk_content(['text'] * 5, layout='grid', columns=2)
    (grid,) = render_section_content(content, None)
    assert grid.role == 'grid'
    assert grid.style['grid-template-columns'] == 'repeat(2, 1fr)'
    cells = grid.element_children()
    assert [c.text_content() for c in cells] == [f'text {i}' for i in range(5)]


def test_grid_defaults_to_three_columns():
    (grid,) = render_section_content(mk_content(['text'], layout='grid'), None)
    assert grid.style['grid-template-columns'] == 'repeat(3, 1fr)'


def test_grid_column_span_is_clamped():
    content = mk_content(
        ['text', 'text'], layout='grid', columns=2, i0={'metadata': {'colSpan': 4}}
    )
    (grid,) = render_section_content(content, None)
    first, second = grid.element_children()
    assert first.style['grid-column'] == 'span 2'
    assert 'grid-column' not in second.style


def test_inline_does_not_group():
    content = mk_content(['tag', 'bullet', 'bullet'], layout='inline')
    (row,) = render_section_content(content, None)
    assert row.role == 'inline'
    assert row.style['flex-wrap'] == 'wrap'
    assert roles(row.element_children()) == ['inline-item'] * 3
    assert row.find('bullet-group') is None
