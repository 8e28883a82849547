"""
Tests for the rich renderables.
"""

import io
import unittest
from unittest import mock

from rich.console import Console
from rich.table import Table
from rich.tree import Tree

from measurekit import display
from measurekit.catalog import QUANTITIES, SI, TORQUE_UNIT, non_si, si
from measurekit.display import registry_table, unit_tree
from measurekit.format import UnitFormat


def render(renderable):
    console = Console(file=io.StringIO(), width=200, color_system=None)
    console.print(renderable)
    return console.file.getvalue()


class TestUnitTree(unittest.TestCase):
    """Test unit_tree."""

    def setUp(self):
        self.fmt = UnitFormat([SI])

    def test_product_branches(self):
        """Test that a product has one branch per factor."""
        tree = unit_tree(si.METRE / si.SECOND.pow(2), self.fmt)
        self.assertIsInstance(tree, Tree)
        self.assertEqual(len(tree.children), 2)
        text = render(tree)
        self.assertIn("m/s²", text)
        self.assertIn("^-2", text)

    def test_transformed_unit(self):
        """Test that a transformed unit shows its converter and parent."""
        text = render(unit_tree(si.KELVIN.plus(273.15), self.fmt))
        self.assertIn("K+273.15", text)
        self.assertIn("AddConverter(273.15)", text)
        self.assertIn("BaseUnit", text)

    def test_alternate_and_quantity_units(self):
        """Test that named and wrapper units branch to their parent."""
        tree = unit_tree(TORQUE_UNIT, self.fmt)
        self.assertEqual(len(tree.children), 2)
        self.assertIn("torque", render(tree))
        self.assertIn("N·m", render(unit_tree(si.JOULE, self.fmt)))

    def test_brackets_are_not_markup(self):
        """Test that names with brackets are printed literally."""
        text = render(unit_tree(non_si.DECIBEL, self.fmt))
        self.assertIn("[1?]", text)


class TestRegistryTable(unittest.TestCase):
    """Test registry_table and print_registry."""

    def setUp(self):
        self.fmt = UnitFormat([SI])
        self.fmt.label(si.KILOMETRE, "km")
        self.fmt.label(si.CELSIUS, "degC")
        self.fmt.alias(si.HERTZ, "hertz")

    def test_rows_and_columns(self):
        """Test one row per registered name."""
        table = registry_table(self.fmt)
        self.assertIsInstance(table, Table)
        self.assertEqual(len(table.columns), 4)
        self.assertEqual(table.row_count, 3)

    def test_quantity_column(self):
        """Test the resolved quantity column."""
        table = registry_table(self.fmt, QUANTITIES)
        self.assertEqual(len(table.columns), 5)
        text = render(table)
        self.assertIn("length", text)
        self.assertIn("temperature", text)
        self.assertIn("1000", text)

    def test_ambiguous_and_unknown_quantities(self):
        """Test rows whose quantity cannot be resolved."""
        self.fmt.label(si.SECOND.inverse().scaled(60), "rpm")
        self.fmt.label(si.METRE.pow(5), "quint")
        text = render(registry_table(self.fmt, QUANTITIES))
        self.assertIn("ambiguous", text)

    def test_print_registry(self):
        """Test printing to the shared console."""
        console = Console(file=io.StringIO(), width=200, color_system=None)
        with mock.patch.object(display, "CONSOLE", console):
            display.print_registry(self.fmt)
        self.assertIn("Unit registry", console.file.getvalue())


if __name__ == '__main__':
    unittest.main()
