# tests/test_preview.py
import shutil
import tempfile
import unittest
import sys
import os
from pathlib import Path

sys.path.append(os.path.join(os.path.dirname(__file__), '..'))

from core.exceptions import PreviewError
from core.layout_calculator import LayoutCalculator
from core.models import GripperSide, MarginConfig, Orientation, Product, SheetFormat
from core.preview import NO_USABLE_AREA, build_geometry, build_preview
from services.pdf_service import LayoutPDFExporter
from services.preview_service import PreviewRenderer, preview_details

SHEET_1000 = SheetFormat("1000 × 700 mm", 1000, 700)
PRODUCT = Product(100, 70)


def layout(margins, orientation=Orientation.ROTATED, sheet=SHEET_1000, product=PRODUCT):
    return LayoutCalculator.compute(product, [sheet], margins).get(0, orientation)


class TestPreviewGeometry(unittest.TestCase):

    def test_scaled_geometry(self):
        margins = MarginConfig(registration=5, gripper_width=10, gripper_side=GripperSide.LEFT)
        result = layout(margins)
        geometry = build_preview(result, PRODUCT, margins)

        self.assertAlmostEqual(geometry.scale, 0.36)
        self.assertAlmostEqual(geometry.sheet.x, 20)
        self.assertAlmostEqual(geometry.sheet.y, 24)
        self.assertAlmostEqual(geometry.gripper.width, 3.6)
        self.assertAlmostEqual(geometry.gripper.height, 252)
        self.assertAlmostEqual(geometry.usable.x, 25.4)
        self.assertAlmostEqual(geometry.usable.y, 25.8)
        self.assertAlmostEqual(geometry.usable.width, 352.8)
        self.assertAlmostEqual(geometry.usable.height, 248.4)

    def test_cells_follow_calculator(self):
        margins = MarginConfig(registration=5, gripper_width=10, gripper_side=GripperSide.LEFT)
        for orientation in LayoutCalculator.ORIENTATIONS:
            with self.subTest(orientation=orientation):
                result = layout(margins, orientation)
                geometry = build_preview(result, PRODUCT, margins)
                self.assertEqual(len(geometry.cells), result.pieces)

    def test_gripper_sides(self):
        for side in (GripperSide.TOP, GripperSide.BOTTOM, GripperSide.RIGHT):
            with self.subTest(side=side):
                margins = MarginConfig(gripper_width=20, gripper_side=side)
                geometry = build_geometry(layout(margins), PRODUCT, margins)
                band = geometry.gripper
                if side is GripperSide.TOP:
                    self.assertEqual((band.x, band.y, band.width, band.height), (0, 0, 1000, 20))
                    self.assertEqual(geometry.usable.y, 20)
                elif side is GripperSide.BOTTOM:
                    self.assertEqual((band.x, band.y, band.width, band.height), (0, 680, 1000, 20))
                    self.assertEqual(geometry.usable.y, 0)
                else:
                    self.assertEqual((band.x, band.y, band.width, band.height), (980, 0, 20, 700))
                    self.assertEqual(geometry.usable.x, 0)

    def test_no_gripper_band(self):
        geometry = build_geometry(layout(MarginConfig(registration=3)), PRODUCT, MarginConfig(registration=3))
        self.assertIsNone(geometry.gripper)
        self.assertEqual((geometry.usable.x, geometry.usable.y), (3, 3))

    def test_insufficient_margin(self):
        margins = MarginConfig(registration=600)
        with self.assertRaises(PreviewError) as ctx:
            build_preview(layout(margins), PRODUCT, margins)
        self.assertEqual(str(ctx.exception), NO_USABLE_AREA)

    def test_details(self):
        margins = MarginConfig(registration=5, gripper_width=10, gripper_side=GripperSide.LEFT)
        details = preview_details(build_preview(layout(margins), PRODUCT, margins))
        self.assertEqual(details['title'], "1000 × 700 mm – vertikal (gedreht)")
        self.assertEqual(details['pieces_text'], "84 Nutzen")
        self.assertEqual(details['layout_text'], "14 nebeneinander × 6 Reihen")
        self.assertEqual(details['efficiency_text'], "87 %")


class TestRendering(unittest.TestCase):

    def setUp(self):
        self.temp_dir = tempfile.mkdtemp()
        self.margins = MarginConfig(registration=5, gripper_width=10, gripper_side=GripperSide.TOP)
        self.result = layout(self.margins)

    def tearDown(self):
        shutil.rmtree(self.temp_dir, ignore_errors=True)

    def test_render_svg(self):
        geometry = build_preview(self.result, PRODUCT, self.margins)
        payload = PreviewRenderer().render(geometry, 'svg')
        self.assertIn(b'<svg', payload)

    def test_render_png_dark(self):
        geometry = build_preview(self.result, PRODUCT, self.margins)
        payload = PreviewRenderer(dark_mode=True).render(geometry, 'png')
        self.assertTrue(payload.startswith(b'\x89PNG'))

    def test_render_unknown_format(self):
        geometry = build_preview(self.result, PRODUCT, self.margins)
        with self.assertRaises(ValueError):
            PreviewRenderer().render(geometry, 'gif')

    def test_export_pdf(self):
        output = Path(self.temp_dir) / 'layout.pdf'
        placed = LayoutPDFExporter().export(self.result, PRODUCT, self.margins, output)

        self.assertEqual(placed, self.result.pieces)
        self.assertTrue(output.exists())
        with open(output, 'rb') as f:
            self.assertEqual(f.read(4), b'%PDF')

    def test_export_insufficient_margin(self):
        margins = MarginConfig(registration=600)
        with self.assertRaises(PreviewError):
            LayoutPDFExporter().export(layout(margins), PRODUCT, margins, Path(self.temp_dir) / 'x.pdf')


if __name__ == '__main__':
    unittest.main()
