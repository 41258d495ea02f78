# utils/formatting.py
import math
from typing import Optional

from core.models import LayoutResult, LayoutStatus, Orientation

DASH = "–"

ORIENTATION_LABELS = {
    Orientation.NORMAL: "horizontal (nicht gedreht)",
    Orientation.ROTATED: "vertikal (gedreht)",
}

STATUS_TEXTS = {
    LayoutStatus.NO_FIT: "Passt nicht auf den Bogen",
    LayoutStatus.INSUFFICIENT_MARGIN: "Zu viel Rand, kein Platz",
}

PLACEHOLDER_TEXT = "Bitte Produktmaße eingeben"


def format_number(value: float, decimals: int = 1) -> str:
    """German notation with at most `decimals` fraction digits: 1234.5 -> 1.234,5"""
    text = f"{value:,.{decimals}f}"
    if decimals:
        text = text.rstrip('0').rstrip('.')
    return text.replace(',', ' ').replace('.', ',').replace(' ', '.')


def format_percent(value: Optional[float]) -> str:
    if value is None or not math.isfinite(value) or value < 0:
        return DASH
    return f"{format_number(value)} %"


def format_pieces(pieces: int, quantity: Optional[int] = None) -> str:
    text = f"{pieces} Nutzen"
    if quantity and quantity > 0 and pieces > 0:
        text += f" (ca. {math.ceil(quantity / pieces)} Bogen)"
    return text


def format_layout(columns: int, rows: int) -> str:
    return f"{columns} nebeneinander × {rows} Reihen"


def orientation_label(orientation: Orientation) -> str:
    return ORIENTATION_LABELS[orientation]


def pieces_text(result: LayoutResult, quantity: Optional[int] = None) -> str:
    if not result.fits:
        return STATUS_TEXTS[result.status]
    return format_pieces(result.pieces, quantity)


def layout_text(result: LayoutResult) -> str:
    return format_layout(result.columns, result.rows) if result.fits else DASH


def efficiency_text(result: LayoutResult) -> str:
    return format_percent(result.efficiency_percent) if result.fits else DASH
