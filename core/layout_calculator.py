"""
Layout of uniform product grids on press sheets
"""
import logging
import math
from typing import Iterable, List, Optional, Tuple

from .config import EFFICIENCY_TOLERANCE
from .exceptions import InvalidProductDimension
from .models import (
    CalculationResult, LayoutResult, LayoutStatus, MarginConfig,
    Orientation, Product, SheetFormat
)

logger = logging.getLogger(__name__)


class LayoutCalculator:
    ORIENTATIONS = (Orientation.NORMAL, Orientation.ROTATED)

    @staticmethod
    def resolve_margins(sheet: SheetFormat, margins: MarginConfig) -> Tuple[float, float]:
        """Usable width/height of a sheet after gripper and registration borders"""
        usable_width = sheet.width
        usable_height = sheet.height

        if margins.gripper_applies:
            if margins.gripper_side.is_horizontal:
                usable_width -= margins.gripper_width
            else:
                usable_height -= margins.gripper_width

        usable_width -= 2 * margins.registration
        usable_height -= 2 * margins.registration
        return usable_width, usable_height

    @staticmethod
    def calculate_orientation(sheet: SheetFormat, usable_width: float, usable_height: float,
                              product: Product, orientation: Orientation,
                              quantity: Optional[int] = None) -> LayoutResult:
        product_w, product_h = product.oriented(orientation)

        columns = max(math.floor(usable_width / product_w), 0)
        rows = max(math.floor(usable_height / product_h), 0)
        pieces = columns * rows

        result = LayoutResult(
            sheet_format=sheet,
            orientation=orientation,
            usable_width=usable_width,
            usable_height=usable_height,
            columns=columns,
            rows=rows,
            pieces=pieces,
        )

        if pieces == 0:
            result.status = LayoutStatus.NO_FIT
            return result

        result.efficiency_percent = pieces * product.area / (usable_width * usable_height) * 100
        if quantity and quantity > 0:
            result.required_sheets = math.ceil(quantity / pieces)
        return result

    @staticmethod
    def calculate_format(sheet: SheetFormat, product: Product, margins: MarginConfig,
                         quantity: Optional[int] = None) -> List[LayoutResult]:
        """Both orientations of one sheet format, rotated one flagged if it repeats the normal one"""
        usable_width, usable_height = LayoutCalculator.resolve_margins(sheet, margins)

        if not (math.isfinite(usable_width) and math.isfinite(usable_height)) \
                or usable_width <= 0 or usable_height <= 0:
            logger.debug(f"{sheet.name}: insufficient margin, usable {usable_width}x{usable_height}")
            return [
                LayoutResult(
                    sheet_format=sheet,
                    orientation=orientation,
                    usable_width=usable_width,
                    usable_height=usable_height,
                    status=LayoutStatus.INSUFFICIENT_MARGIN,
                )
                for orientation in LayoutCalculator.ORIENTATIONS
            ]

        normal, rotated = (
            LayoutCalculator.calculate_orientation(
                sheet, usable_width, usable_height, product, orientation, quantity
            )
            for orientation in LayoutCalculator.ORIENTATIONS
        )

        if normal.fits and rotated.fits and LayoutCalculator.same_score(normal, rotated):
            rotated.duplicate = True

        logger.debug(f"{sheet.name}: normal {normal.columns}x{normal.rows}={normal.pieces}, "
                     f"rotated {rotated.columns}x{rotated.rows}={rotated.pieces}"
                     f"{' (duplicate)' if rotated.duplicate else ''}")
        return [normal, rotated]

    @staticmethod
    def same_score(a: LayoutResult, b: LayoutResult) -> bool:
        return (a.pieces == b.pieces and
                abs(a.efficiency_percent - b.efficiency_percent) < EFFICIENCY_TOLERANCE)

    @staticmethod
    def rank(results: Iterable[LayoutResult]) -> List[LayoutResult]:
        """Sort fitting, non-duplicate results best first and flag the joint winners"""
        candidates = [r for r in results if r.pieces > 0 and not r.duplicate]
        candidates.sort(key=lambda r: (-r.pieces, -r.efficiency_percent))

        if candidates:
            best = candidates[0]
            for candidate in candidates:
                candidate.recommended = LayoutCalculator.same_score(candidate, best)
        return candidates

    @staticmethod
    def compute(product: Product, formats: Iterable[SheetFormat], margins: MarginConfig,
                quantity: Optional[int] = None) -> CalculationResult:
        if not (product.width > 0 and product.height > 0):
            raise InvalidProductDimension(
                f"Product dimensions must be positive: {product.width}x{product.height}"
            )

        calculation = CalculationResult(product=product, margins=margins, quantity=quantity)
        for sheet in formats:
            calculation.results.extend(
                LayoutCalculator.calculate_format(sheet, product, margins, quantity)
            )
        calculation.candidates = LayoutCalculator.rank(calculation.results)

        best = calculation.best
        if best:
            logger.info(f"Best layout for {product.width}x{product.height}: {best.sheet_format.name} "
                        f"{best.orientation.name.lower()} {best.columns}x{best.rows} = {best.pieces} "
                        f"({best.efficiency_percent:.1f}%), {len(calculation.recommended)} recommended")
        else:
            logger.info(f"No sheet format fits product {product.width}x{product.height}")
        return calculation
