"""
Tests for named and transformed units and the unit operators.
"""

import unittest

from measurekit.catalog import si
from measurekit.unit import (
    IDENTITY,
    ONE,
    STANDARD_MODEL,
    AlternateUnit,
    BaseUnit,
    Dimension,
    ProductUnit,
    RationalNumber,
    TransformedUnit,
    UnitConverter,
)
from measurekit.unit.dimension import LENGTH, MASS, TIME


class TestBaseUnit(unittest.TestCase):
    """Test BaseUnit class."""

    def test_identity_by_symbol(self):
        """Test that base units are equal when their symbols are."""
        self.assertEqual(BaseUnit("m"), BaseUnit("m", "length"))
        self.assertEqual(hash(BaseUnit("m")), hash(BaseUnit("m", "length")))
        self.assertNotEqual(BaseUnit("m"), BaseUnit("s"))

    def test_own_standard_unit(self):
        """Test that a base unit is its own standard and base unit."""
        metre = BaseUnit("m")
        self.assertIs(metre.standard_unit, metre)
        self.assertIs(metre.to_standard_unit(), IDENTITY)
        self.assertIs(metre.base_unit, metre)
        self.assertTrue(metre.is_standard_unit)

    def test_dimension(self):
        """Test the dimensions of known and unknown base units."""
        self.assertEqual(si.METRE.dimension, LENGTH)
        self.assertEqual(BaseUnit("px").dimension, Dimension.base("px"))


class TestAlternateUnit(unittest.TestCase):
    """Test AlternateUnit class."""

    def test_parent_must_be_standard(self):
        """Test that an alternate of a scaled unit is rejected."""
        with self.assertRaises(ValueError):
            AlternateUnit("x", si.KILOMETRE)

    def test_distinct_from_parent(self):
        """Test that an alternate unit does not equal its parent."""
        self.assertNotEqual(si.HERTZ, si.SECOND.inverse())
        self.assertNotEqual(si.HERTZ, si.BECQUEREL)
        self.assertTrue(si.HERTZ.is_standard_unit)

    def test_base_unit_and_dimension_follow_parent(self):
        """Test that the base expansion goes through the parent."""
        self.assertEqual(si.JOULE.base_unit, si.KILOGRAM * si.METRE.pow(2) / si.SECOND.pow(2))
        self.assertEqual(si.JOULE.dimension, MASS * LENGTH.pow(2) / TIME.pow(2))
        self.assertEqual(si.RADIAN.base_unit, ONE)


class TestTransformedUnit(unittest.TestCase):
    """Test TransformedUnit class and the transform combinators."""

    def test_identity_transform_returns_self(self):
        """Test that transforming by IDENTITY is a no-op."""
        self.assertIs(si.METRE.transform(IDENTITY), si.METRE)

    def test_no_nesting(self):
        """Test that transforms compose onto the original parent."""
        mm = si.KILOMETRE.transform(UnitConverter.rational(1, 10**6))
        self.assertIsInstance(mm, TransformedUnit)
        self.assertEqual(mm.parent, si.METRE)
        self.assertEqual(mm, si.MILLIMETRE)

    def test_transform_back_to_parent(self):
        """Test that undoing a transform gives back the parent."""
        self.assertEqual(si.KILOMETRE.transform(UnitConverter.rational(1, 1000)), si.METRE)

    def test_constructor_guards(self):
        """Test that identity and nested transforms are rejected."""
        with self.assertRaises(ValueError):
            TransformedUnit(si.METRE, IDENTITY)
        with self.assertRaises(ValueError):
            TransformedUnit(si.KILOMETRE, UnitConverter.rational(2))

    def test_standard_unit(self):
        """Test the standard unit and converter of a prefixed unit."""
        self.assertEqual(si.KILOMETRE.standard_unit, si.METRE)
        self.assertEqual(si.KILOMETRE.to_standard_unit(), UnitConverter.rational(1000))
        self.assertFalse(si.KILOMETRE.is_standard_unit)

    def test_exact_and_float_scale_are_equal(self):
        """Test that m*1000 and m*1000.0 are the same unit."""
        self.assertEqual(si.METRE.scaled(1000), si.METRE.scaled(1000.0))
        self.assertEqual(hash(si.METRE.scaled(1000)), hash(si.METRE.scaled(1000.0)))

    def test_offset_unit(self):
        """Test that Celsius is an offset kelvin."""
        self.assertIsInstance(si.CELSIUS, TransformedUnit)
        self.assertEqual(si.CELSIUS.standard_unit, si.KELVIN)
        self.assertAlmostEqual(si.CELSIUS.to_standard_unit().convert(25.0), 298.15)


class TestOperators(unittest.TestCase):
    """Test the Python operators on units."""

    def test_product_and_quotient(self):
        """Test that multiplication and division build products."""
        velocity = si.METRE / si.SECOND
        self.assertIsInstance(velocity, ProductUnit)
        self.assertEqual(velocity * si.SECOND, si.METRE)
        self.assertEqual(si.METRE / si.METRE, ONE)

    def test_power_and_root(self):
        """Test integer and rational powers."""
        self.assertEqual(si.METRE ** 2, si.METRE * si.METRE)
        self.assertEqual(si.METRE.pow(RationalNumber(1, 2)).pow(2), si.METRE)
        self.assertEqual(si.CUBIC_METRE.root(3), si.METRE)
        self.assertEqual(si.SECOND.inverse().inverse(), si.SECOND)

    def test_numeric_scaling(self):
        """Test scaling by numbers with * and /."""
        self.assertEqual(si.METRE * 1000, si.KILOMETRE)
        self.assertEqual(1000 * si.METRE, si.KILOMETRE)
        self.assertEqual(si.METRE / 1000, si.MILLIMETRE)
        self.assertEqual(si.METRE / RationalNumber(100), si.CENTIMETRE)

    def test_reciprocal(self):
        """Test number divided by a unit."""
        self.assertEqual(1 / si.SECOND, si.SECOND.inverse())

    def test_offset(self):
        """Test the + operator for offset units."""
        self.assertEqual(si.KELVIN + 273.15, si.CELSIUS)

    def test_unsupported_operands(self):
        """Test that unrelated operands raise TypeError."""
        with self.assertRaises(TypeError):
            si.METRE * "m"
        with self.assertRaises(TypeError):
            si.METRE ** 0.5


class TestCompatibility(unittest.TestCase):
    """Test Unit.is_compatible."""

    def test_same_standard_unit(self):
        """Test that prefixed units are compatible with their parent."""
        self.assertTrue(si.KILOMETRE.is_compatible(si.METRE))
        self.assertTrue(si.CELSIUS.is_compatible(si.KELVIN))

    def test_same_dimension(self):
        """Test that alternates sharing a dimension are compatible."""
        self.assertTrue(si.HERTZ.is_compatible(si.BECQUEREL))
        self.assertTrue(si.JOULE.is_compatible(si.NEWTON * si.METRE))

    def test_incompatible(self):
        """Test that different dimensions are not compatible."""
        self.assertFalse(si.METRE.is_compatible(si.SECOND))

    def test_standard_model_fallback(self):
        """Test that the model invents dimensions for unknown symbols."""
        self.assertEqual(STANDARD_MODEL.dimension_of("kg"), MASS)
        self.assertEqual(STANDARD_MODEL.dimension_of("apple"), Dimension.base("apple"))


if __name__ == '__main__':
    unittest.main()
