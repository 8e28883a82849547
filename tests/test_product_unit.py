"""
Tests for product units and the normalizer.
"""

import unittest

from measurekit.catalog import TORQUE_UNIT, non_si, si
from measurekit.errors import UnsupportedOperationError
from measurekit.unit import (
    IDENTITY,
    ONE,
    ProductUnit,
    RationalNumber,
    RationalPower,
    UnitConverter,
    deep_simplify,
    normalize,
)


class TestNormalize(unittest.TestCase):
    """Test the normalize function."""

    def test_empty_product_is_one(self):
        """Test that no factors give the dimensionless unit."""
        self.assertEqual(normalize(()), ONE)

    def test_single_factor_unwrapped(self):
        """Test that a lone factor with exponent one is returned bare."""
        self.assertIs(normalize((RationalPower(si.METRE),)), si.METRE)

    def test_merges_equal_bases(self):
        """Test that exponents of equal bases add up."""
        unit = normalize((RationalPower(si.METRE), RationalPower(si.SECOND, -1), RationalPower(si.METRE)))
        self.assertIsInstance(unit, ProductUnit)
        self.assertEqual(len(unit.elements), 2)
        self.assertEqual(unit, si.METRE.pow(2) / si.SECOND)

    def test_zero_exponents_dropped(self):
        """Test that cancelled factors disappear."""
        self.assertEqual(si.METRE * si.SECOND / si.SECOND, si.METRE)
        self.assertEqual((si.METRE / si.SECOND) / (si.METRE / si.SECOND), ONE)

    def test_nested_products_flattened(self):
        """Test that products of products are flattened."""
        unit = normalize((RationalPower(si.METRE / si.SECOND, 2), RationalPower(si.SECOND, 2)))
        self.assertEqual(unit, si.METRE.pow(2))
        for element in unit.elements:
            self.assertNotIsInstance(element.base, ProductUnit)

    def test_one_is_dropped(self):
        """Test that ONE does not show up as a factor."""
        self.assertEqual(si.METRE * ONE, si.METRE)

    def test_idempotent(self):
        """Test that normalizing a normalized product changes nothing."""
        unit = si.KILOGRAM * si.METRE.pow(2) / si.SECOND.pow(2)
        self.assertEqual(normalize(unit.elements), unit)

    def test_order_independent_equality(self):
        """Test that factor order does not matter."""
        a = si.METRE * si.SECOND
        b = si.SECOND * si.METRE
        self.assertEqual(a, b)
        self.assertEqual(hash(a), hash(b))

    def test_rational_exponents(self):
        """Test that fractional exponents are kept exactly."""
        unit = si.METRE.pow(RationalNumber(1, 2)) * si.METRE.pow(RationalNumber(1, 3))
        self.assertEqual(unit.elements[0].exponent, RationalNumber(5, 6))

    def test_quantity_wrapper_unwrapped(self):
        """Test that multiplying a quantity wrapper unwraps it."""
        self.assertEqual(TORQUE_UNIT / si.METRE, si.NEWTON)


class TestProductStandardUnit(unittest.TestCase):
    """Test standard units and converters of products."""

    def test_standard_product(self):
        """Test that a product of standard units is standard."""
        velocity = si.METRE / si.SECOND
        self.assertTrue(velocity.is_standard_unit)
        self.assertIs(velocity.to_standard_unit(), IDENTITY)

    def test_scaled_factors(self):
        """Test the converter of a product of prefixed units."""
        unit = si.KILOMETRE / non_si.HOUR
        self.assertEqual(unit.standard_unit, si.METRE / si.SECOND)
        self.assertEqual(unit.to_standard_unit(), UnitConverter.rational(5, 18))

    def test_powers_repeat_the_converter(self):
        """Test that a squared prefix squares the factor."""
        unit = si.KILOMETRE.pow(2)
        self.assertEqual(unit.to_standard_unit(), UnitConverter.rational(10**6))

    def test_non_linear_factor_rejected(self):
        """Test that offset units cannot be converted inside a product."""
        with self.assertRaises(UnsupportedOperationError):
            (si.CELSIUS / si.SECOND).to_standard_unit()

    def test_fractional_power_of_scaled_unit_rejected(self):
        """Test that a root of a prefixed unit has no converter."""
        with self.assertRaises(UnsupportedOperationError):
            si.KILOMETRE.pow(RationalNumber(1, 2)).to_standard_unit()

    def test_base_unit_expansion(self):
        """Test expanding alternates into base units."""
        self.assertEqual(
            (si.WATT / si.AMPERE).base_unit,
            si.KILOGRAM * si.METRE.pow(2) / si.SECOND.pow(3) / si.AMPERE,
        )


class TestDeepSimplify(unittest.TestCase):
    """Test deep_simplify."""

    def test_expands_transformed_products(self):
        """Test that factors over a product standard unit are expanded."""
        self.assertEqual(deep_simplify(non_si.LITRE / si.SECOND), si.METRE.pow(3) / si.SECOND)

    def test_unwraps_quantity_unit(self):
        """Test that the wrapper is removed."""
        self.assertEqual(deep_simplify(TORQUE_UNIT), si.NEWTON * si.METRE)

    def test_keeps_named_units(self):
        """Test that alternates are not expanded."""
        self.assertIs(deep_simplify(si.JOULE), si.JOULE)


if __name__ == '__main__':
    unittest.main()
