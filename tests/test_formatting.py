# tests/test_formatting.py
import unittest
import sys
import os

sys.path.append(os.path.join(os.path.dirname(__file__), '..'))

from core.layout_calculator import LayoutCalculator
from core.models import MarginConfig, Orientation, Product, SheetFormat
from utils.formatting import (
    efficiency_text, format_layout, format_percent, format_pieces,
    layout_text, orientation_label, pieces_text
)
from utils.helpers import sanitize_filename


class TestFormatting(unittest.TestCase):

    def test_format_percent(self):
        self.assertEqual(format_percent(83.846), "83,8 %")
        self.assertEqual(format_percent(100.0), "100 %")
        self.assertEqual(format_percent(0), "0 %")
        self.assertEqual(format_percent(1234.56), "1.234,6 %")

    def test_format_percent_invalid(self):
        for value in (-1, float('nan'), float('inf'), None):
            with self.subTest(value=value):
                self.assertEqual(format_percent(value), "–")

    def test_format_pieces(self):
        self.assertEqual(format_pieces(81), "81 Nutzen")
        self.assertEqual(format_pieces(81, 500), "81 Nutzen (ca. 7 Bogen)")
        self.assertEqual(format_pieces(81, 0), "81 Nutzen")

    def test_format_layout(self):
        self.assertEqual(format_layout(9, 9), "9 nebeneinander × 9 Reihen")

    def test_orientation_label(self):
        self.assertEqual(orientation_label(Orientation.NORMAL), "horizontal (nicht gedreht)")
        self.assertEqual(orientation_label(Orientation.ROTATED), "vertikal (gedreht)")

    def test_status_texts(self):
        sheet = SheetFormat("300 × 100", 300, 100)
        calculation = LayoutCalculator.compute(Product(200, 90), [sheet], MarginConfig())
        rotated = calculation.get(0, Orientation.ROTATED)
        self.assertEqual(pieces_text(rotated), "Passt nicht auf den Bogen")
        self.assertEqual(layout_text(rotated), "–")
        self.assertEqual(efficiency_text(rotated), "–")

        squeezed = LayoutCalculator.compute(Product(10, 10), [sheet],
                                            MarginConfig(registration=60)).get(0, Orientation.NORMAL)
        self.assertEqual(pieces_text(squeezed), "Zu viel Rand, kein Platz")

    def test_sanitize_filename(self):
        self.assertEqual(sanitize_filename("1000 × 700 mm"), "1000_x_700_mm")
        self.assertEqual(sanitize_filename("700 × 500 mm (Eigenes)"), "700_x_500_mm_Eigenes")


if __name__ == '__main__':
    unittest.main()
