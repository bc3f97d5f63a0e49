"""
High-level orchestration functions - the main API.

These are the primary user-facing functions that coordinate
the entire pipeline.
"""

from typing import Union

from vitae.base import RenderingConfig
from vitae.config import ConfigStore
from vitae.content import ensure_resume
from vitae.generator import generate_document
from vitae.resume_models import Resume
from vitae.translations import Translations
from vitae.util import ResumeSource


def mk_document(
    content: Union[Resume, ResumeSource],
    rendering: Union[RenderingConfig, ConfigStore, dict, None] = None,
    *,
    translations: Translations = None,
    output_path: Union[str, None] = None,
) -> bytes:
    """
    Render resume content to its final format.

    Args:
        content: Resume model, dict, JSON string, or JSON/YAML file path
        rendering: Output format, template and page size
        translations: Mapping or callable for the localized labels
        output_path: If given, also write the result there

    Examples:
        >>> html = mk_document({'personal': {'fullName': 'Ada'}}, {'format': 'html'})
        >>> b'Ada' in html
        True
    """
    resume = ensure_resume(content)

    if rendering is None:
        rendering = RenderingConfig(template=resume.metadata.template)
    elif isinstance(rendering, ConfigStore):
        rendering = rendering.rendering_config()
    elif isinstance(rendering, dict):
        rendering = RenderingConfig(**rendering)

    document = generate_document(
        resume, rendering.template, translations, page_size=rendering.page_size
    )
    result = document.write(rendering.format)
    if output_path:
        with open(output_path, 'wb') as f:
            f.write(result)
    return result
