"""Translation lookup consumed by the renderers.

The string catalog itself lives with the caller; vitae only needs
``translate(key) -> str`` for a handful of keys.
"""

from typing import Callable, Union
from collections.abc import Mapping

Translator = Callable[[str], str]
Translations = Union[Mapping[str, str], Translator, None]

DEFAULT_TRANSLATIONS = {
    'present': 'Present',
    'phone': 'Phone',
    'email': 'Email',
    'image': 'Image',
    'location': 'Location',
    'website': 'Website',
}


def ensure_translator(translations: Translations = None) -> Translator:
    """Normalize a mapping, a callable or None into a ``translate`` callable.

    Missing or empty entries fall back to the English defaults, then to the key.
    """
    if callable(translations):
        lookup = translations

        def translate(key: str) -> str:
            return lookup(key) or DEFAULT_TRANSLATIONS.get(key, key)

        return translate

    table = dict(translations or {})

    def translate(key: str) -> str:
        return table.get(key) or DEFAULT_TRANSLATIONS.get(key, key)

    return translate
