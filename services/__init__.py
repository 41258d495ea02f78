"""
Services wrapping the calculator for the web, API and desktop views
"""

from .layout_service import LayoutService
from .preview_service import PreviewRenderer, preview_details
from .pdf_service import LayoutPDFExporter

__all__ = [
    'LayoutService',
    'PreviewRenderer',
    'preview_details',
    'LayoutPDFExporter'
]
