"""
Layout sheet as PDF at 1:1 scale
"""
import logging
from pathlib import Path
from typing import Union

from reportlab.pdfgen import canvas
from reportlab.lib.units import mm

from core.exceptions import PDFGenerationError
from core.models import LayoutResult, MarginConfig, Product
from core.preview import Rect, build_geometry
from utils.formatting import format_layout, format_percent, orientation_label

logger = logging.getLogger(__name__)


class LayoutPDFExporter:
    def __init__(self, crop_marks: bool = True, mark_length: float = 3.0):
        self.crop_marks = crop_marks
        self.mark_length = mark_length

    def export(self, result: LayoutResult, product: Product, margins: MarginConfig,
               output: Union[str, Path, object]) -> int:
        """Write one page the size of the sheet; returns the number of placed pieces"""
        geometry = build_geometry(result, product, margins)
        page_width = result.sheet_format.width * mm
        page_height = result.sheet_format.height * mm

        logger.info(f"Exporting layout PDF: {result.sheet_format.name}, "
                    f"{result.orientation.value}, {result.pieces} pieces")
        try:
            target = str(output) if isinstance(output, (str, Path)) else output
            c = canvas.Canvas(target, pagesize=(page_width, page_height))
            c.setTitle(f"{result.sheet_format.name} – {orientation_label(result.orientation)}")

            if geometry.gripper:
                c.setFillColorRGB(0.996, 0.792, 0.792)
                c.setStrokeColorRGB(0.725, 0.110, 0.110)
                self._rect(c, geometry.gripper, page_height, fill=1)

            c.setDash(4, 3)
            c.setStrokeColorRGB(0.420, 0.447, 0.502)
            self._rect(c, geometry.usable, page_height, fill=0)
            c.setDash()

            c.setStrokeColorRGB(0, 0, 0)
            c.setLineWidth(0.25)
            for cell in geometry.cells:
                self._rect(c, cell, page_height, fill=0)
                if self.crop_marks:
                    self._draw_crop_marks(c, cell, page_height)

            self._draw_caption(c, result, product)
            c.showPage()
            c.save()
        except OSError as e:
            logger.error(f"Error writing layout PDF: {e}")
            raise PDFGenerationError(str(e)) from e

        return len(geometry.cells)

    @staticmethod
    def _rect(c: canvas.Canvas, rect: Rect, page_height: float, fill: int):
        # geometry is y-down, PDF is y-up
        c.rect(rect.x * mm, page_height - (rect.y + rect.height) * mm,
               rect.width * mm, rect.height * mm, stroke=1, fill=fill)

    def _draw_crop_marks(self, c: canvas.Canvas, cell: Rect, page_height: float):
        mark = self.mark_length * mm
        left = cell.x * mm
        right = (cell.x + cell.width) * mm
        top = page_height - cell.y * mm
        bottom = page_height - (cell.y + cell.height) * mm

        for x, y in ((left, top), (right, top), (left, bottom), (right, bottom)):
            c.line(x - mark / 2, y, x + mark / 2, y)
            c.line(x, y - mark / 2, x, y + mark / 2)

    @staticmethod
    def _draw_caption(c: canvas.Canvas, result: LayoutResult, product: Product):
        c.setFillColorRGB(0, 0, 0)
        c.setFont("Helvetica", 7)
        caption = (f"{result.sheet_format.name} | Produkt {product.width:g} × {product.height:g} mm | "
                   f"{result.pieces} Nutzen | {format_layout(result.columns, result.rows)} | "
                   f"Flächenausnutzung {format_percent(result.efficiency_percent)}")
        c.drawString(2 * mm, 2 * mm, caption)
