"""
Unit tests for vitae.content and vitae.util
"""

import json

import pytest
from pydantic import ValidationError

from vitae.content import FileResumeSource, ResumeStore, ensure_resume
from vitae.resume_models import Resume
from vitae.util import load_resume_dict, validation_friendly_errors_string

MINIMAL = {'personal': {'fullName': 'Ada', 'details': []}, 'sections': []}


def test_ensure_resume_sources(tmp_path):
    assert ensure_resume(MINIMAL).personal.full_name == 'Ada'
    assert ensure_resume(json.dumps(MINIMAL)).personal.full_name == 'Ada'
    path = tmp_path / 'r.json'
    path.write_text(json.dumps(MINIMAL))
    assert ensure_resume(path).personal.full_name == 'Ada'
    assert ensure_resume(str(path)).personal.full_name == 'Ada'
    resume = Resume()
    assert ensure_resume(resume) is resume


def test_yaml_source(tmp_path):
    path = tmp_path / 'r.yaml'
    path.write_text('personal:\n  fullName: Grace\n  jobTitle: null\n')
    resume = ensure_resume(str(path))
    assert resume.personal.full_name == 'Grace'
    assert resume.personal.job_title is None


def test_null_fields_fall_back_to_defaults():
    raw = load_resume_dict({'title': None, 'personal': {'fullName': 'A'}})
    assert 'title' not in raw
    # A separator's value is None on purpose and survives pruning
    raw = load_resume_dict({'items': [{'id': 's', 'type': 'separator', 'value': None}]})
    assert raw['items'][0] == {'id': 's', 'type': 'separator', 'value': None}


def test_invalid_sources():
    with pytest.raises(ValueError):
        load_resume_dict('{not json')
    with pytest.raises(TypeError):
        load_resume_dict(42)


def test_validation_errors_are_reported():
    bad = {'sections': [{'id': 's', 'content': {'id': 'c', 'layout': 'spiral'}}]}
    with pytest.raises(ValidationError) as excinfo:
        ensure_resume(bad)
    message = validation_friendly_errors_string(excinfo.value)
    assert 'sections.0.content.layout' in message


def test_resume_store_notifies():
    store = ResumeStore(MINIMAL)
    seen = []
    unsubscribe = store.subscribe(seen.append)
    store.edit(lambda r: r.model_copy(update={'title': 'v2'}))
    assert store.get().title == 'v2'
    assert [r.title for r in seen] == ['v2']
    unsubscribe()
    store.set({**MINIMAL, 'title': 'v3'})
    assert len(seen) == 1
    assert store.get().title == 'v3'


def test_file_source_reload(tmp_path):
    path = tmp_path / 'r.json'
    path.write_text(json.dumps(MINIMAL))
    source = FileResumeSource(path)
    seen = []
    source.subscribe(seen.append)
    path.write_text(json.dumps({**MINIMAL, 'title': 'edited'}))
    assert source.reload().title == 'edited'
    assert seen[0].title == 'edited'
