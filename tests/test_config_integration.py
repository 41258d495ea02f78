# tests/test_config_integration.py
import logging
import shutil
import tempfile
import unittest
import sys
import os
from pathlib import Path

sys.path.append(os.path.join(os.path.dirname(__file__), '..'))

from core.config import AppConfig, SHEET_SIZES
from core.format_catalog import FormatCatalog
from core.models import Orientation
from core.preview import build_preview
from services.layout_service import LayoutService
from utils.helpers import ensure_directory, sanitize_filename
from utils.logger import setup_logging


class TestConfigIntegration(unittest.TestCase):

    def setUp(self):
        self.temp_dir = tempfile.mkdtemp()

    def tearDown(self):
        shutil.rmtree(self.temp_dir, ignore_errors=True)

    def test_default_app_config(self):
        config = AppConfig()
        self.assertEqual(config.default_gripper_side, 'none')
        self.assertIn(config.default_gripper_side, config.gripper_sides)
        self.assertEqual((config.preview_width, config.preview_height), (400, 300))

    def test_defaults_with_layout_service(self):
        """Default margins from AppConfig give the plain floor layout"""
        config = AppConfig()
        service = LayoutService(FormatCatalog())
        response = service.calculate({
            'product_width': '90',
            'product_height': '50',
            'registration': config.default_registration,
            'gripper_width': config.default_gripper_width,
            'gripper_side': config.default_gripper_side,
        })

        self.assertTrue(response['success'])
        self.assertEqual(len(response['rows']), 2 * len(SHEET_SIZES))
        first = response['rows'][0]
        self.assertEqual((first['columns'], first['rows']), (1030 // 90, 540 // 50))
        self.assertEqual(first['pieces_text'], f"{(1030 // 90) * (540 // 50)} Nutzen")

    def test_custom_format_reaches_preview(self):
        catalog = FormatCatalog(Path(self.temp_dir) / 'custom_formats.json')
        catalog.add_custom_format('320', '450')
        config = AppConfig()

        data = {'product_width': '105', 'product_height': '148', 'gripper_width': '10',
                'gripper_side': 'top'}
        calculation, result = LayoutService(catalog).result_for(data, len(SHEET_SIZES), Orientation.NORMAL)
        geometry = build_preview(result, calculation.product, calculation.margins,
                                 config.preview_width, config.preview_height, config.preview_padding)

        self.assertEqual(result.sheet_format.name, "450 × 320 mm (Eigenes)")
        self.assertEqual((result.columns, result.rows), (4, 2))
        self.assertEqual(len(geometry.cells), 8)

    def test_setup_logging_writes_file(self):
        log_dir = os.path.join(self.temp_dir, 'logs')
        root = logging.getLogger()
        previous = list(root.handlers)
        root.handlers = []
        try:
            setup_logging(log_dir)
            logging.getLogger('tests').info("hello")
            for handler in root.handlers:
                handler.flush()
            self.assertEqual(len(os.listdir(log_dir)), 1)
        finally:
            for handler in root.handlers:
                handler.close()
            root.handlers = previous

    def test_helpers(self):
        target = os.path.join(self.temp_dir, 'a', 'b')
        ensure_directory(target)
        self.assertTrue(os.path.isdir(target))
        self.assertEqual(sanitize_filename("640 × 450 mm (Eigenes)"), "640_x_450_mm_Eigenes")


if __name__ == '__main__':
    unittest.main()
