"""
Public API for the vitae package.
Import the main user-facing functions and classes.
"""

from vitae.tools import mk_document
from vitae.config import load_config, get_default_config, PreviewSettings
from vitae.base import (
    RenderingConfig,
    RenderNode,
    TemplateConfig,
    TemplateDefinition,
    VitaeError,
    TemplateNotFoundError,
    GenerationError,
    ExportError,
    RasterizationError,
)
from vitae.resume_models import (
    Resume,
    ResumeMetadata,
    PersonalInfo,
    Section,
    SectionContent,
    ColorScheme,
    Typography,
    ItemType,
)

# Rendering
from vitae.items import render_item
from vitae.layout import render_section_content
from vitae.templates import resolve_template, list_templates, pdf_templates
from vitae.generator import generate_document, PaginatedDocument

# Document sources, preview and export
from vitae.content import ResumeStore, FileResumeSource, ensure_resume
from vitae.preview import PreviewPipeline, PreviewState, ContainerGeometry
from vitae.export import export_document, export_document_sync, ExportArtifact

__all__ = [
    # Generation
    'mk_document',
    'generate_document',
    'PaginatedDocument',
    'load_config',
    'get_default_config',
    'RenderingConfig',
    'PreviewSettings',
    # Models
    'Resume',
    'ResumeMetadata',
    'PersonalInfo',
    'Section',
    'SectionContent',
    'ColorScheme',
    'Typography',
    'ItemType',
    # Rendering
    'RenderNode',
    'render_item',
    'render_section_content',
    'TemplateConfig',
    'TemplateDefinition',
    'resolve_template',
    'list_templates',
    'pdf_templates',
    # Sources, preview, export
    'ResumeStore',
    'FileResumeSource',
    'ensure_resume',
    'PreviewPipeline',
    'PreviewState',
    'ContainerGeometry',
    'export_document',
    'export_document_sync',
    'ExportArtifact',
    # Errors
    'VitaeError',
    'TemplateNotFoundError',
    'GenerationError',
    'ExportError',
    'RasterizationError',
]
