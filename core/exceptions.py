# -*- coding: utf-8 -*-
# core/exceptions.py
class SheetCalcException(Exception):
    """Base exception of the sheet yield calculator"""
    pass

class ValidationError(SheetCalcException):
    """Invalid user input"""
    pass

class InvalidProductDimension(ValidationError):
    """Product width or height missing, non-numeric or not positive"""
    pass

class CatalogError(SheetCalcException):
    """Sheet catalog could not be read or written"""
    pass

class PersistedCatalogCorrupt(CatalogError):
    """Stored custom formats are unparsable"""
    pass

class LayoutCalculationError(SheetCalcException):
    """Layout could not be derived"""
    pass

class PreviewError(LayoutCalculationError):
    """Preview requested for a format without usable area"""
    pass

class PDFGenerationError(SheetCalcException):
    """Layout sheet PDF could not be written"""
    pass
