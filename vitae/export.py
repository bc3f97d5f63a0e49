"""
Export pipeline: generate a downloadable artifact on demand.

Single shot and awaited by the caller. Unlike the preview, a failure is
never swallowed: it is logged and re-raised as ``ExportError`` carrying a
message the caller can show.
"""

import asyncio
from dataclasses import dataclass
from pathlib import Path

from vitae import logger
from vitae.base import ExportError
from vitae.generator import DEFAULT_TEMPLATE, generate_document
from vitae.helpers import suggested_filename
from vitae.resume_models import Resume
from vitae.translations import Translations

MEDIA_TYPES = {'pdf': 'application/pdf', 'html': 'text/html'}


@dataclass(frozen=True)
class ExportArtifact:
    data: bytes
    filename: str
    media_type: str = MEDIA_TYPES['pdf']

    def save(self, directory: str | Path = '.') -> Path:
        path = Path(directory) / self.filename
        path.write_bytes(self.data)
        return path


async def export_document(
    resume: Resume,
    template_name: str = DEFAULT_TEMPLATE,
    translations: Translations = None,
    *,
    format: str = 'pdf',
) -> ExportArtifact:
    """Generate ``resume`` as a downloadable file.

    Raises:
        ExportError: generation or encoding failed.
    """
    filename = suggested_filename(resume, extension=format)
    logger.info(f"Exporting '{filename}' with template '{template_name}'")
    try:
        document = generate_document(resume, template_name, translations)
        data = await asyncio.to_thread(document.write, format)
    except Exception as e:
        logger.error(f"Export of '{filename}' failed: {e!r}")
        raise ExportError(
            f'Export failed: {e}',
            user_message=f'Could not generate {filename}. Please try again.',
        ) from e
    logger.success(f"Exported '{filename}' ({len(data)} bytes)")
    return ExportArtifact(data=data, filename=filename, media_type=MEDIA_TYPES.get(format, 'application/octet-stream'))


def export_document_sync(
    resume: Resume,
    template_name: str = DEFAULT_TEMPLATE,
    translations: Translations = None,
    *,
    format: str = 'pdf',
) -> ExportArtifact:
    """Blocking variant of ``export_document`` for callers without an event loop."""
    return asyncio.run(export_document(resume, template_name, translations, format=format))
