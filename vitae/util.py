"""
Utilities for external dependencies and general helpers.
"""

import json
from importlib.resources import files
import os
from typing import Mapping, Union
from pathlib import Path

import yaml  # pip install PyYAML
from pydantic import ValidationError

data_files = files('vitae') / 'data'
themes_files = files('vitae') / 'themes'

sample_resume_json = data_files / 'sample_resume.json'

JsonContentStr = str  # JSON string
PathStr = str  # filesystem path
ResumeSource = Union[PathStr, JsonContentStr, Path, Mapping]


def _load_json_file(path: str) -> dict:
    """Load a JSON file from the given path."""
    with open(path, 'r', encoding='utf-8') as f:
        return json.load(f)


def load_yaml(yaml_path: str):
    """
    Loads a YAML file using PyYAML.
    This works in Python 3.7+ because dicts preserve insertion order.
    """
    with open(yaml_path, 'r', encoding='utf-8') as file:
        # Use safe_load for security reasons.
        return yaml.safe_load(file)


def _merge_dicts(base: dict, override: dict) -> dict:
    """Merge two dicts shallowly, with override taking precedence."""
    result = dict(base)
    result.update(override)
    return result


def _prune_none(obj):
    """Recursively remove keys that are None so optional fields fall back to their defaults.

    List entries are kept as they are: a separator item's ``value`` is None on purpose.
    """
    if isinstance(obj, dict):
        return {k: _prune_none(v) for k, v in obj.items() if v is not None or k == 'value'}
    if isinstance(obj, list):
        return [_prune_none(x) for x in obj]
    return obj


def load_resume_dict(content_src: ResumeSource) -> dict:
    """
    Get a resume dict from various sources
    (json file, yaml file, json string, dict, ...)
    """
    if isinstance(content_src, Path):
        content_src = str(content_src.expanduser())
    if isinstance(content_src, str):
        if os.path.exists(content_src):
            if content_src.endswith(('.yaml', '.yml')):
                content = load_yaml(content_src)
            else:
                content = _load_json_file(content_src)
        else:
            try:
                content = json.loads(content_src)
            except json.JSONDecodeError as e:
                raise ValueError(f"Invalid JSON content provided: {e}")
    elif isinstance(content_src, Mapping):
        content = dict(content_src)
    else:
        raise TypeError(
            f"Content source must be a dict or a valid JSON string/filename: {content_src}"
        )
    return _prune_none(content)


def validation_friendly_errors_string(error_obj: ValidationError) -> str:
    return '\n'.join(
        f"Error in field '{'.'.join(str(p) for p in error['loc'])}': {error['msg']}"
        for error in error_obj.errors()
    )
