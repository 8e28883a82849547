"""
Tests for the quantity catalog and resolver.
"""

import unittest

from measurekit.catalog import QUANTITIES, TORQUE_UNIT, non_si, si
from measurekit.errors import AmbiguousQuantityError, QuantityLookupError, UnknownQuantityError
from measurekit.quantity import Quantity, QuantityCatalog
from measurekit.unit import ONE, BaseUnit


class TestQuantityCatalog(unittest.TestCase):
    """Test QuantityCatalog class."""

    def test_lookup_by_name(self):
        """Test get, membership and length."""
        self.assertIn("length", QUANTITIES)
        self.assertEqual(QUANTITIES.get("length").si_unit, si.METRE)
        self.assertIsNone(QUANTITIES.get("happiness"))
        self.assertGreater(len(QUANTITIES), 40)

    def test_duplicate_names_rejected(self):
        """Test that two quantities cannot share a name."""
        with self.assertRaises(ValueError):
            QuantityCatalog([Quantity("length", si.METRE), Quantity("length", non_si.FOOT)])

    def test_missing_dimensionless(self):
        """Test a catalog without the dimensionless quantity."""
        catalog = QuantityCatalog([Quantity("length", si.METRE)])
        with self.assertRaises(UnknownQuantityError):
            catalog.dimensionless

    def test_equality_by_name(self):
        """Test that quantities compare by name only."""
        self.assertEqual(Quantity("length", si.METRE), Quantity("length", non_si.FOOT, "feet"))


class TestQuantityOf(unittest.TestCase):
    """Test QuantityCatalog.quantity_of."""

    def test_tagged_units(self):
        """Test that tagged base and alternate units resolve directly."""
        self.assertEqual(QUANTITIES.quantity_of(si.METRE).name, "length")
        self.assertEqual(QUANTITIES.quantity_of(si.JOULE).name, "energy")
        self.assertEqual(QUANTITIES.quantity_of(si.HERTZ).name, "frequency")

    def test_transformed_units(self):
        """Test that prefixed and offset units resolve through their standard unit."""
        self.assertEqual(QUANTITIES.quantity_of(si.KILOMETRE).name, "length")
        self.assertEqual(QUANTITIES.quantity_of(si.CELSIUS).name, "temperature")
        self.assertEqual(QUANTITIES.quantity_of(non_si.KILOMETRES_PER_HOUR).name, "velocity")
        self.assertEqual(QUANTITIES.quantity_of(non_si.LITRE).name, "volume")

    def test_dimensionless(self):
        """Test that ONE and percent are dimensionless."""
        self.assertEqual(QUANTITIES.quantity_of(ONE).name, "dimensionless")
        self.assertEqual(QUANTITIES.quantity_of(non_si.PERCENT).name, "dimensionless")

    def test_exact_product_match(self):
        """Test products matching a catalogued unit exactly."""
        self.assertEqual(QUANTITIES.quantity_of(si.METRE * si.METRE).name, "area")
        self.assertEqual(QUANTITIES.quantity_of(si.METRE / si.SECOND).name, "velocity")
        self.assertEqual(QUANTITIES.quantity_of(si.NEWTON * si.METRE).name, "torque")
        self.assertEqual(QUANTITIES.quantity_of(TORQUE_UNIT).name, "torque")

    def test_base_unit_match(self):
        """Test a product that only matches after base expansion."""
        quantity = QUANTITIES.quantity_of(si.KILOGRAM * si.METRE / si.SECOND.pow(2))
        self.assertEqual(quantity.name, "force")

    def test_ambiguous(self):
        """Test that energy and torque cannot be told apart in base units."""
        with self.assertRaises(AmbiguousQuantityError) as ctx:
            QUANTITIES.quantity_of(si.KILOGRAM * si.METRE.pow(2) / si.SECOND.pow(2))
        names = {q.name for q in ctx.exception.candidates}
        self.assertEqual(names, {"energy", "torque"})

    def test_unknown(self):
        """Test a unit no quantity matches."""
        with self.assertRaises(UnknownQuantityError):
            QUANTITIES.quantity_of(BaseUnit("apple"))
        with self.assertRaises(QuantityLookupError):
            QUANTITIES.quantity_of(si.METRE.pow(5))


if __name__ == '__main__':
    unittest.main()
