# -*- coding: utf-8 -*-
# core/input_parser.py
import logging
import math
import re
from typing import Optional, Union

from .exceptions import InvalidProductDimension, ValidationError
from .models import GripperSide, MarginConfig, Orientation, Product

logger = logging.getLogger(__name__)

RawNumber = Union[str, int, float, None]

_DECIMAL_RE = re.compile(r'^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?')
_INTEGER_RE = re.compile(r'^[+-]?\d+')

# Labels of the German form are accepted next to the English values
GRIPPER_SIDE_ALIASES = {
    'oben': GripperSide.TOP,
    'unten': GripperSide.BOTTOM,
    'links': GripperSide.LEFT,
    'rechts': GripperSide.RIGHT,
    'keine': GripperSide.NONE,
}

PRODUCT_ERROR = "Produktbreite und -höhe müssen > 0 sein."


def _normalize(raw: RawNumber) -> str:
    if raw is None:
        return ''
    return str(raw).strip().replace(',', '.', 1)


def parse_decimal(raw: RawNumber) -> Optional[float]:
    """Parse "12,5" or "12.5" (leading number only); None if empty, invalid or not finite"""
    if isinstance(raw, (int, float)) and not isinstance(raw, bool):
        return float(raw) if math.isfinite(raw) else None

    match = _DECIMAL_RE.match(_normalize(raw))
    if not match:
        return None
    value = float(match.group(0))
    return value if math.isfinite(value) else None


def parse_quantity(raw: RawNumber) -> Optional[int]:
    if isinstance(raw, (int, float)) and not isinstance(raw, bool):
        if not math.isfinite(raw):
            return None
        value = int(raw)
    else:
        match = _INTEGER_RE.match(_normalize(raw))
        if not match:
            return None
        value = int(match.group(0))
    return value if value > 0 else None


def is_blank(raw: RawNumber) -> bool:
    return _normalize(raw) == ''


def is_blank_product(width: RawNumber, height: RawNumber) -> bool:
    """Both product fields empty: nothing entered yet, not an error"""
    return is_blank(width) and is_blank(height)


def parse_product(width: RawNumber, height: RawNumber) -> Product:
    product_width = parse_decimal(width)
    product_height = parse_decimal(height)

    if product_width is None or product_width <= 0 or product_height is None or product_height <= 0:
        logger.debug(f"Rejected product dimensions: {width!r} x {height!r}")
        raise InvalidProductDimension(PRODUCT_ERROR)
    return Product(product_width, product_height)


def _non_negative(raw: RawNumber) -> float:
    value = parse_decimal(raw)
    if value is None or value < 0:
        return 0.0
    return value


def parse_gripper_side(raw: Union[str, GripperSide, None]) -> GripperSide:
    if isinstance(raw, GripperSide):
        return raw
    key = str(raw or '').strip().lower()
    if not key:
        return GripperSide.NONE
    if key in GRIPPER_SIDE_ALIASES:
        return GRIPPER_SIDE_ALIASES[key]
    try:
        return GripperSide(key)
    except ValueError:
        logger.warning(f"Unknown gripper side {raw!r}, using none")
        return GripperSide.NONE


def parse_orientation(raw: Union[str, Orientation, None]) -> Orientation:
    if isinstance(raw, Orientation):
        return raw
    key = str(raw or '').strip().lower()
    if key in ('h', 'normal', 'horizontal'):
        return Orientation.NORMAL
    if key in ('v', 'rotated', 'vertikal', 'vertical'):
        return Orientation.ROTATED
    raise ValidationError(f"Unbekannte Ausrichtung: {raw}")


def parse_margins(registration: RawNumber, gripper_width: RawNumber,
                  gripper_side: Union[str, GripperSide, None]) -> MarginConfig:
    """Negative, missing or non-finite margins count as 0"""
    return MarginConfig(
        registration=_non_negative(registration),
        gripper_width=_non_negative(gripper_width),
        gripper_side=parse_gripper_side(gripper_side),
    )
