"""
Geometry of one sheet layout for preview drawing and PDF export.

Column/row counts and fit status are taken from the LayoutResult produced by
LayoutCalculator; this module only places and scales rectangles. Coordinates
grow to the right and downwards, like SVG.
"""
import logging
from dataclasses import dataclass, field
from typing import List, Optional

from .exceptions import PreviewError
from .models import GripperSide, LayoutResult, LayoutStatus, MarginConfig, Product

logger = logging.getLogger(__name__)

NO_USABLE_AREA = ("Mit den aktuellen Rand-Einstellungen bleibt keine nutzbare "
                  "Fläche für dieses Format.")


@dataclass(frozen=True)
class Rect:
    x: float
    y: float
    width: float
    height: float


@dataclass
class PreviewGeometry:
    view_width: float
    view_height: float
    scale: float
    sheet: Rect
    usable: Rect
    gripper: Optional[Rect] = None
    gripper_side: GripperSide = GripperSide.NONE
    cells: List[Rect] = field(default_factory=list)
    result: Optional[LayoutResult] = None


def _gripper_band(sheet: Rect, side: GripperSide, size: float) -> Rect:
    if side is GripperSide.TOP:
        return Rect(sheet.x, sheet.y, sheet.width, size)
    if side is GripperSide.BOTTOM:
        return Rect(sheet.x, sheet.y + sheet.height - size, sheet.width, size)
    if side is GripperSide.LEFT:
        return Rect(sheet.x, sheet.y, size, sheet.height)
    return Rect(sheet.x + sheet.width - size, sheet.y, size, sheet.height)


def build_geometry(result: LayoutResult, product: Product, margins: MarginConfig,
                   scale: float = 1.0, origin_x: float = 0.0, origin_y: float = 0.0,
                   view_width: Optional[float] = None,
                   view_height: Optional[float] = None) -> PreviewGeometry:
    if result.status is LayoutStatus.INSUFFICIENT_MARGIN:
        raise PreviewError(NO_USABLE_AREA)

    sheet_format = result.sheet_format
    sheet = Rect(origin_x, origin_y, sheet_format.width * scale, sheet_format.height * scale)

    usable_x, usable_y = sheet.x, sheet.y
    gripper = None
    if margins.gripper_applies:
        band = margins.gripper_width * scale
        gripper = _gripper_band(sheet, margins.gripper_side, band)
        if margins.gripper_side is GripperSide.TOP:
            usable_y += band
        elif margins.gripper_side is GripperSide.LEFT:
            usable_x += band

    registration = margins.registration * scale
    usable = Rect(
        usable_x + registration,
        usable_y + registration,
        result.usable_width * scale,
        result.usable_height * scale,
    )

    product_w, product_h = product.oriented(result.orientation)
    cell_w, cell_h = product_w * scale, product_h * scale
    cells = [
        Rect(usable.x + ix * cell_w, usable.y + iy * cell_h, cell_w, cell_h)
        for ix in range(result.columns)
        for iy in range(result.rows)
    ]

    return PreviewGeometry(
        view_width=view_width if view_width is not None else sheet.width,
        view_height=view_height if view_height is not None else sheet.height,
        scale=scale,
        sheet=sheet,
        usable=usable,
        gripper=gripper,
        gripper_side=margins.gripper_side if gripper else GripperSide.NONE,
        cells=cells,
        result=result,
    )


def build_preview(result: LayoutResult, product: Product, margins: MarginConfig,
                  view_width: float = 400, view_height: float = 300,
                  padding: float = 40) -> PreviewGeometry:
    """Fit the sheet into a view box, centered, keeping the aspect ratio"""
    sheet_format = result.sheet_format
    scale = min((view_width - padding) / sheet_format.width,
                (view_height - padding) / sheet_format.height)
    origin_x = (view_width - sheet_format.width * scale) / 2
    origin_y = (view_height - sheet_format.height * scale) / 2

    geometry = build_geometry(result, product, margins, scale, origin_x, origin_y,
                              view_width, view_height)
    logger.debug(f"Preview {sheet_format.name}/{result.orientation.value}: "
                 f"scale {scale:.4f}, {len(geometry.cells)} cells")
    return geometry
