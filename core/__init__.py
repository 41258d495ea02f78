"""
Core module of the sheet yield calculator
"""

from .models import (
    Orientation, GripperSide, LayoutStatus,
    SheetFormat, MarginConfig, Product, LayoutResult, CalculationResult
)
from .exceptions import (
    SheetCalcException, ValidationError, InvalidProductDimension,
    CatalogError, PersistedCatalogCorrupt, LayoutCalculationError, PreviewError,
    PDFGenerationError
)
from .layout_calculator import LayoutCalculator
from .format_catalog import FormatCatalog
from .settings_store import SettingsStore

__all__ = [
    'Orientation',
    'GripperSide',
    'LayoutStatus',
    'SheetFormat',
    'MarginConfig',
    'Product',
    'LayoutResult',
    'CalculationResult',
    'SheetCalcException',
    'ValidationError',
    'InvalidProductDimension',
    'CatalogError',
    'PersistedCatalogCorrupt',
    'LayoutCalculationError',
    'PreviewError',
    'PDFGenerationError',
    'LayoutCalculator',
    'FormatCatalog',
    'SettingsStore'
]
