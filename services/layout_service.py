# -*- coding: utf-8 -*-
# services/layout_service.py
import logging
from typing import List, Optional

from core.exceptions import ValidationError
from core.format_catalog import FormatCatalog
from core.input_parser import (
    is_blank_product, parse_margins, parse_product, parse_quantity
)
from core.layout_calculator import LayoutCalculator
from core.models import CalculationResult, LayoutResult, Orientation, SheetFormat
from utils.formatting import (
    DASH, PLACEHOLDER_TEXT, efficiency_text, layout_text,
    orientation_label, pieces_text
)

logger = logging.getLogger(__name__)


class LayoutService:
    """Turns raw form values into table rows for the web, API and desktop views"""

    def __init__(self, catalog: FormatCatalog):
        self.catalog = catalog

    def compute(self, data: dict) -> CalculationResult:
        """Parse a form/JSON payload and run the calculator; raises ValidationError"""
        product = parse_product(data.get('product_width'), data.get('product_height'))
        margins = parse_margins(
            data.get('registration'), data.get('gripper_width'), data.get('gripper_side')
        )
        quantity = parse_quantity(data.get('quantity'))
        return LayoutCalculator.compute(product, self.catalog.formats, margins, quantity)

    def calculate(self, data: dict) -> dict:
        if is_blank_product(data.get('product_width'), data.get('product_height')):
            return {
                'success': True,
                'error': None,
                'rows': self.placeholder_rows(),
                'recommended': [],
            }

        try:
            calculation = self.compute(data)
        except ValidationError as e:
            logger.info(f"Calculation rejected: {e}")
            return {'success': False, 'error': str(e), 'rows': [], 'recommended': []}

        rows = self.build_rows(calculation, self.catalog.formats)
        return {
            'success': True,
            'error': None,
            'rows': rows,
            'recommended': [i for i, row in enumerate(rows) if row['recommended']],
        }

    @staticmethod
    def build_rows(calculation: CalculationResult, formats: List[SheetFormat]) -> List[dict]:
        rows = []
        for index in range(len(formats)):
            for orientation in LayoutCalculator.ORIENTATIONS:
                result = calculation.get(index, orientation)
                rows.append(LayoutService.build_row(index, result, calculation.quantity))
        return rows

    @staticmethod
    def build_row(index: int, result: LayoutResult, quantity: Optional[int]) -> dict:
        row = result.to_dict()
        row.update({
            'format_index': index,
            'orientation_label': orientation_label(result.orientation),
            'pieces_text': pieces_text(result, quantity),
            'layout_text': layout_text(result),
            'efficiency_text': efficiency_text(result),
            'hidden': result.duplicate,
        })
        return row

    def placeholder_rows(self) -> List[dict]:
        rows = []
        for index, sheet in enumerate(self.catalog.formats):
            for orientation in LayoutCalculator.ORIENTATIONS:
                rows.append({
                    'format_index': index,
                    'format': sheet.name,
                    'orientation': orientation.value,
                    'orientation_label': orientation_label(orientation),
                    'pieces_text': PLACEHOLDER_TEXT,
                    'layout_text': DASH,
                    'efficiency_text': DASH,
                    'status': None,
                    'fits': False,
                    'hidden': False,
                    'recommended': False,
                })
        return rows

    def result_for(self, data: dict, format_index: int, orientation: Orientation):
        """Calculation and the single result a preview/export was requested for"""
        sheet = self.catalog.get(format_index)
        product = parse_product(data.get('product_width'), data.get('product_height'))
        margins = parse_margins(
            data.get('registration'), data.get('gripper_width'), data.get('gripper_side')
        )
        calculation = LayoutCalculator.compute(product, [sheet], margins)
        return calculation, calculation.get(0, orientation)
