# -*- coding: utf-8 -*-
# services/preview_service.py
import logging
from io import BytesIO

from matplotlib.figure import Figure
from matplotlib.patches import Rectangle

from core.preview import PreviewGeometry
from utils.formatting import format_layout, format_percent, orientation_label

logger = logging.getLogger(__name__)

SHEET_STYLE = dict(facecolor='#dbeafe', edgecolor='#1d4ed8', linewidth=1.5)
GRIPPER_STYLE = dict(facecolor='#fecaca', edgecolor='#b91c1c', linewidth=1.0, alpha=0.7)
USABLE_STYLE = dict(facecolor='#e5e7eb', edgecolor='#6b7280', linewidth=1.0, linestyle=(0, (4, 3)))
CELL_STYLE = dict(facecolor=(0.114, 0.306, 0.847, 0.6), edgecolor='#1e3a8a', linewidth=0.5)

DARK_BACKGROUND = '#111827'


class PreviewRenderer:
    def __init__(self, dpi: int = 100, dark_mode: bool = False):
        self.dpi = dpi
        self.dark_mode = dark_mode

    def draw(self, ax, geometry: PreviewGeometry):
        """Draw sheet, gripper band, usable area and product grid onto an Axes"""
        ax.clear()
        ax.set_xlim(0, geometry.view_width)
        ax.set_ylim(geometry.view_height, 0)
        ax.set_aspect('equal')
        ax.axis('off')
        ax.figure.patch.set_facecolor(DARK_BACKGROUND if self.dark_mode else 'white')

        sheet = geometry.sheet
        ax.add_patch(Rectangle((sheet.x, sheet.y), sheet.width, sheet.height, **SHEET_STYLE))

        if geometry.gripper:
            band = geometry.gripper
            ax.add_patch(Rectangle((band.x, band.y), band.width, band.height, **GRIPPER_STYLE))

        usable = geometry.usable
        if usable.width > 0 and usable.height > 0:
            ax.add_patch(Rectangle((usable.x, usable.y), usable.width, usable.height, **USABLE_STYLE))

        # half-pixel inset keeps neighbouring cells visually apart
        for cell in geometry.cells:
            ax.add_patch(Rectangle((cell.x + 0.5, cell.y + 0.5),
                                   max(cell.width - 1, 0), max(cell.height - 1, 0),
                                   **CELL_STYLE))

    def create_figure(self, geometry: PreviewGeometry) -> Figure:
        fig = Figure(figsize=(geometry.view_width / self.dpi, geometry.view_height / self.dpi),
                     dpi=self.dpi)
        ax = fig.add_axes([0, 0, 1, 1])
        self.draw(ax, geometry)
        return fig

    def render(self, geometry: PreviewGeometry, image_format: str = 'svg') -> bytes:
        if image_format not in ('svg', 'png'):
            raise ValueError(f"Unsupported preview format: {image_format}")

        fig = self.create_figure(geometry)
        buffer = BytesIO()
        fig.savefig(buffer, format=image_format, facecolor=fig.get_facecolor())
        logger.debug(f"Preview rendered as {image_format}, {buffer.tell()} bytes")
        return buffer.getvalue()


def preview_title(geometry: PreviewGeometry) -> str:
    result = geometry.result
    return f"{result.sheet_format.name} – {orientation_label(result.orientation)}"


def preview_details(geometry: PreviewGeometry) -> dict:
    """Caption shown under the preview"""
    result = geometry.result
    return {
        'title': preview_title(geometry),
        'pieces_text': f"{result.pieces} Nutzen",
        'layout_text': format_layout(result.columns, result.rows),
        'efficiency_text': format_percent(result.efficiency_percent),
    }
