"""
Renderer implementations package.
Contains the output backends for rendered documents.
"""

from .html import HTMLRenderer

__all__ = ['HTMLRenderer']
