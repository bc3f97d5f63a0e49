import pytest

from vitae.content import ensure_resume
from vitae.resume_models import Resume
from vitae.util import sample_resume_json


def _build_resume(*sections, full_name='Ada Lovelace', details=(), **metadata) -> Resume:
    return Resume.model_validate(
        {
            'metadata': metadata,
            'personal': {'fullName': full_name, 'details': list(details)},
            'sections': list(sections),
        }
    )


def _build_section(items, *, layout='list', columns=None, title='Experience', id='s1', visible=True):
    content = {'id': f'{id}-content', 'layout': layout, 'items': list(items)}
    if columns is not None:
        content['columns'] = columns
    return {'id': id, 'title': title, 'visible': visible, 'content': content}


@pytest.fixture
def build_resume():
    """``build_resume(*section_dicts, full_name=..., details=..., **metadata)``"""
    return _build_resume


@pytest.fixture
def build_section():
    """``build_section(item_dicts, layout=..., columns=..., title=...)``"""
    return _build_section


@pytest.fixture
def sample_resume() -> Resume:
    return ensure_resume(str(sample_resume_json))
