import unittest
from core.converters import parse_system, parse_ground_wire, parse_size, parse_quantity, format_size, circle_area
from core.errors import NotFound, OutOfRange
from core.models import GroundWire, System

class TestConverters(unittest.TestCase):

    def test_parse_system(self):
        for val in ["1Φ", "1P", "1ph", "1", "single", " Single-Phase "]:
            self.assertEqual(parse_system(val), System.SINGLE_PHASE, val)
        for val in ["3Φ", "3P", "3PH", "3", "three", "3Ø"]:
            self.assertEqual(parse_system(val), System.THREE_PHASE, val)
        self.assertEqual(parse_system(System.THREE_PHASE), System.THREE_PHASE)
        with self.assertRaises(NotFound):
            parse_system("DC")

    def test_parse_ground_wire(self):
        self.assertEqual(parse_ground_wire(None), GroundWire.NONE)
        self.assertEqual(parse_ground_wire(""), GroundWire.NONE)
        self.assertEqual(parse_ground_wire("same"), GroundWire.SAME_SIZE)
        self.assertEqual(parse_ground_wire("HFIX"), GroundWire.REDUCED_SIZE)
        with self.assertRaises(NotFound):
            parse_ground_wire("bare")

    def test_parse_size(self):
        self.assertEqual(parse_size("95"), 95.0)
        self.assertEqual(parse_size("2.5 mm²"), 2.5)
        self.assertEqual(parse_size(16), 16.0)
        with self.assertRaises(OutOfRange):
            parse_size("abc")
        with self.assertRaises(OutOfRange):
            parse_size("-4")

    def test_parse_quantity(self):
        self.assertEqual(parse_quantity(None), 1)
        self.assertEqual(parse_quantity(" 3 "), 3)
        with self.assertRaises(OutOfRange):
            parse_quantity("0")
        with self.assertRaises(OutOfRange):
            parse_quantity("two")

    def test_format_and_area(self):
        self.assertEqual(format_size(95.0), "95")
        self.assertEqual(format_size(2.5), "2.5")
        self.assertAlmostEqual(circle_area(2.0), 3.14159265, places=6)

if __name__ == '__main__':
    unittest.main()
