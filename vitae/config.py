"""
Configuration management using Mapping interfaces.

Implement:
- ConfigStore: MutableMapping for configuration management
- Default configurations
- PreviewSettings: the explicit, passed-down settings of a preview pipeline
"""

from typing import Any
from collections.abc import Mapping, MutableMapping
from dataclasses import dataclass

from vitae.base import RenderingConfig
from vitae.util import _merge_dicts, _load_json_file, load_yaml

DEFAULT_CONFIG = {
    'format': 'pdf',
    'template': 'modern',
    'page_size': 'A4',
    # Preview pipeline
    'preview_debounce': 0.5,  # seconds between last edit and regeneration
    'resize_debounce': 0.05,
    'resize_threshold': 5,  # px
    'preview_padding': 32,  # px, 16 on each side
}


class ConfigStore(MutableMapping):
    """Configuration store with cascading defaults."""

    def __init__(self, base_config: dict | None = None):
        self._config = base_config or {}

    def __getitem__(self, key: str) -> Any:
        return self._config[key]

    def __setitem__(self, key: str, value: Any) -> None:
        self._config[key] = value

    def __delitem__(self, key: str) -> None:
        del self._config[key]

    def __iter__(self):
        return iter(self._config)

    def __len__(self) -> int:
        return len(self._config)

    def rendering_config(self) -> RenderingConfig:
        return RenderingConfig(
            format=self.get('format', DEFAULT_CONFIG['format']),
            template=self.get('template', DEFAULT_CONFIG['template']),
            page_size=self.get('page_size', DEFAULT_CONFIG['page_size']),
        )


def get_default_config() -> ConfigStore:
    return ConfigStore(dict(DEFAULT_CONFIG))


def load_config(path: str) -> ConfigStore:
    """Load a JSON or YAML config file on top of the defaults."""
    path = str(path)
    if path.endswith(('.yaml', '.yml')):
        loaded = load_yaml(path) or {}
    else:
        loaded = _load_json_file(path)
    return ConfigStore(_merge_dicts(DEFAULT_CONFIG, loaded))


@dataclass(frozen=True)
class PreviewSettings:
    """Timing and geometry knobs of the interactive preview."""

    debounce: float = DEFAULT_CONFIG['preview_debounce']
    resize_debounce: float = DEFAULT_CONFIG['resize_debounce']
    resize_threshold: float = DEFAULT_CONFIG['resize_threshold']
    padding: float = DEFAULT_CONFIG['preview_padding']

    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> 'PreviewSettings':
        merged = _merge_dicts(DEFAULT_CONFIG, dict(config))
        return cls(
            debounce=float(merged['preview_debounce']),
            resize_debounce=float(merged['resize_debounce']),
            resize_threshold=float(merged['resize_threshold']),
            padding=float(merged['preview_padding']),
        )
