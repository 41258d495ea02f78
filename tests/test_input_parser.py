# tests/test_input_parser.py
import unittest
import sys
import os

sys.path.append(os.path.join(os.path.dirname(__file__), '..'))

from core.exceptions import InvalidProductDimension, ValidationError
from core.input_parser import (
    is_blank_product, parse_decimal, parse_gripper_side, parse_margins,
    parse_orientation, parse_product, parse_quantity
)
from core.models import GripperSide, Orientation


class TestParseDecimal(unittest.TestCase):

    def test_comma_and_point(self):
        self.assertEqual(parse_decimal("12,5"), 12.5)
        self.assertEqual(parse_decimal("12.5"), 12.5)
        self.assertEqual(parse_decimal(" 7 "), 7.0)

    def test_numbers_pass_through(self):
        self.assertEqual(parse_decimal(3), 3.0)
        self.assertEqual(parse_decimal(2.25), 2.25)

    def test_leading_number_only(self):
        self.assertEqual(parse_decimal("12mm"), 12.0)

    def test_invalid(self):
        for raw in ("", None, "abc", "inf", "1e400", float('nan'), float('inf')):
            with self.subTest(raw=raw):
                self.assertIsNone(parse_decimal(raw))


class TestParseQuantity(unittest.TestCase):

    def test_integer_prefix(self):
        self.assertEqual(parse_quantity("500"), 500)
        self.assertEqual(parse_quantity("12,7"), 12)
        self.assertEqual(parse_quantity(40), 40)

    def test_missing_or_not_positive(self):
        for raw in ("", None, "0", "-5", "viele"):
            with self.subTest(raw=raw):
                self.assertIsNone(parse_quantity(raw))


class TestParseProduct(unittest.TestCase):

    def test_valid(self):
        product = parse_product("100", "70,5")
        self.assertEqual((product.width, product.height), (100.0, 70.5))

    def test_rejected(self):
        for width, height in (("0", "10"), ("10", "-1"), ("abc", "10"), ("10", "")):
            with self.subTest(width=width, height=height):
                with self.assertRaises(InvalidProductDimension):
                    parse_product(width, height)

    def test_blank_product(self):
        self.assertTrue(is_blank_product("", " "))
        self.assertTrue(is_blank_product(None, None))
        self.assertFalse(is_blank_product("10", ""))


class TestParseMargins(unittest.TestCase):

    def test_clamped_to_zero(self):
        margins = parse_margins("-3", "abc", "links")
        self.assertEqual(margins.registration, 0)
        self.assertEqual(margins.gripper_width, 0)
        self.assertEqual(margins.gripper_side, GripperSide.LEFT)
        self.assertFalse(margins.gripper_applies)

    def test_values(self):
        margins = parse_margins("2,5", "10", "top")
        self.assertEqual(margins.registration, 2.5)
        self.assertEqual(margins.gripper_width, 10)
        self.assertTrue(margins.gripper_applies)

    def test_gripper_sides(self):
        self.assertEqual(parse_gripper_side("rechts"), GripperSide.RIGHT)
        self.assertEqual(parse_gripper_side("Bottom"), GripperSide.BOTTOM)
        self.assertEqual(parse_gripper_side(""), GripperSide.NONE)
        self.assertEqual(parse_gripper_side(GripperSide.TOP), GripperSide.TOP)

    def test_unknown_side_warns(self):
        with self.assertLogs('core.input_parser', level='WARNING'):
            self.assertEqual(parse_gripper_side("diagonal"), GripperSide.NONE)


class TestParseOrientation(unittest.TestCase):

    def test_codes(self):
        self.assertEqual(parse_orientation("h"), Orientation.NORMAL)
        self.assertEqual(parse_orientation("v"), Orientation.ROTATED)
        self.assertEqual(parse_orientation("rotated"), Orientation.ROTATED)

    def test_unknown(self):
        with self.assertRaises(ValidationError):
            parse_orientation("x")


if __name__ == '__main__':
    unittest.main()
