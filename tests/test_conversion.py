"""
Tests for converting values between units.
"""

import unittest

import numpy as np

from measurekit.catalog import non_si, si
from measurekit.errors import ConversionError, UnsupportedOperationError
from measurekit.unit import IDENTITY, ONE, UnitConverter, convert, get_converter, is_compatible


class TestGetConverter(unittest.TestCase):
    """Test get_converter."""

    def test_equal_units(self):
        """Test that equal units convert with IDENTITY."""
        self.assertIs(get_converter(si.METRE, si.METRE), IDENTITY)

    def test_prefix_to_prefix_is_exact(self):
        """Test that km to mm is exactly one million."""
        self.assertEqual(get_converter(si.KILOMETRE, si.MILLIMETRE), UnitConverter.rational(10**6))

    def test_method_matches_function(self):
        """Test Unit.get_converter_to."""
        self.assertEqual(si.KILOMETRE.get_converter_to(si.METRE), get_converter(si.KILOMETRE, si.METRE))

    def test_different_standard_units(self):
        """Test that units with different standard units do not convert."""
        with self.assertRaises(ConversionError):
            get_converter(si.METRE, si.SECOND)

    def test_same_dimension_is_not_enough(self):
        """Test that hertz and becquerel stay unconvertible."""
        with self.assertRaises(ConversionError) as ctx:
            get_converter(si.HERTZ, si.BECQUEREL)
        self.assertIsInstance(ctx.exception, UnsupportedOperationError)


class TestConvert(unittest.TestCase):
    """Test convert."""

    def test_length(self):
        """Test imperial to metric length."""
        self.assertAlmostEqual(convert(1.0, non_si.MILE, si.KILOMETRE), 1.609344)
        self.assertAlmostEqual(convert(12.0, non_si.INCH, non_si.FOOT), 1.0)

    def test_temperature(self):
        """Test offset conversions between temperature scales."""
        self.assertAlmostEqual(convert(100.0, si.CELSIUS, si.KELVIN), 373.15)
        self.assertAlmostEqual(convert(212.0, non_si.FAHRENHEIT, si.CELSIUS), 100.0)
        self.assertAlmostEqual(convert(0.0, si.KELVIN, non_si.FAHRENHEIT), -459.67)

    def test_velocity(self):
        """Test product unit conversion."""
        self.assertAlmostEqual(convert(36.0, non_si.KILOMETRES_PER_HOUR, si.METRE_PER_SECOND), 10.0)
        self.assertAlmostEqual(convert(1.0, non_si.KNOT, non_si.KILOMETRES_PER_HOUR), 1.852)

    def test_volume(self):
        """Test volume units defined through different products."""
        self.assertAlmostEqual(convert(1.0, non_si.GALLON_LIQUID_US, non_si.LITRE), 3.785411784)

    def test_decibel(self):
        """Test the logarithmic decibel."""
        self.assertAlmostEqual(convert(20.0, non_si.DECIBEL, ONE), 100.0)
        self.assertAlmostEqual(convert(1000.0, ONE, non_si.DECIBEL), 30.0)

    def test_arrays(self):
        """Test converting NumPy arrays."""
        np.testing.assert_allclose(
            convert(np.array([0.0, 1.5, 3.0]), si.KILOMETRE, si.METRE),
            [0.0, 1500.0, 3000.0],
        )

    def test_offset_in_product_fails(self):
        """Test that per-degree-Celsius products cannot be converted."""
        with self.assertRaises(UnsupportedOperationError):
            convert(1.0, si.JOULE / si.CELSIUS, si.JOULE / si.KELVIN)


class TestIsCompatible(unittest.TestCase):
    """Test is_compatible."""

    def test_compatible(self):
        """Test compatible pairs."""
        self.assertTrue(is_compatible(non_si.FOOT, si.METRE))
        self.assertTrue(is_compatible(si.HERTZ, si.BECQUEREL))

    def test_incompatible(self):
        """Test incompatible pairs."""
        self.assertFalse(is_compatible(si.KILOGRAM, si.METRE))


if __name__ == '__main__':
    unittest.main()
