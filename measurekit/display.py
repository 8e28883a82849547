"""Terminal rendering of units and registries with ``rich``.

Two renderables are provided:

* :func:`unit_tree` draws the term graph of a unit, annotating every node
  with its standard unit and the converter to it.
* :func:`registry_table` lists the labels of a :class:`UnitFormat` together
  with the standard unit, the conversion factor and the quantity of each.

Both return plain ``rich`` objects; print them with any console, or use
:func:`print_registry` which writes to the shared :data:`CONSOLE`.

Example:
    >>> from measurekit.format import StandardUnitFormat
    >>> fmt = StandardUnitFormat()
    >>> CONSOLE.print(unit_tree(fmt.parse("km/h"), fmt))  # doctest: +SKIP
"""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.tree import Tree

from measurekit.errors import AmbiguousQuantityError, UnknownQuantityError
from measurekit.format.unit_format import UnitFormat
from measurekit.quantity import QuantityCatalog
from measurekit.unit import AlternateUnit, ProductUnit, QuantityUnit, TransformedUnit, Unit

CONSOLE = Console()


def _node_label(unit: Unit, fmt: UnitFormat) -> str:
    kind = type(unit).__name__
    text = f"[b]{escape(fmt.format(unit))}[/b] [dim]{kind}[/dim]"
    if not unit.is_standard_unit:
        text += f" -> {escape(fmt.format(unit.standard_unit))} via {escape(repr(unit.to_standard_unit()))}"
    return text


def _add_children(tree: Tree, unit: Unit, fmt: UnitFormat) -> None:
    if isinstance(unit, ProductUnit):
        for element in unit.elements:
            branch = tree.add(f"^{element.exponent} " + _node_label(element.base, fmt))
            _add_children(branch, element.base, fmt)
    elif isinstance(unit, TransformedUnit):
        branch = tree.add(_node_label(unit.parent, fmt))
        _add_children(branch, unit.parent, fmt)
    elif isinstance(unit, QuantityUnit):
        tree.add(f"[i]{unit.quantity}[/i]")
        branch = tree.add(_node_label(unit.parent, fmt))
        _add_children(branch, unit.parent, fmt)
    elif isinstance(unit, AlternateUnit):
        branch = tree.add(_node_label(unit.parent, fmt))
        _add_children(branch, unit.parent, fmt)


def unit_tree(unit: Unit, fmt: UnitFormat) -> Tree:
    """Build a tree of ``unit`` and the units it is made of.

    Args:
        unit: Unit to draw.
        fmt: Format used to name every node.

    Returns:
        Tree: Root labelled with ``unit``; products branch per factor with
        its exponent, transformed and alternate units branch to their parent.
    """
    tree = Tree(_node_label(unit, fmt))
    _add_children(tree, unit, fmt)
    return tree


def _quantity_name(unit: Unit, quantities: QuantityCatalog) -> str:
    try:
        return quantities.quantity_of(unit).name
    except UnknownQuantityError:
        return "-"
    except AmbiguousQuantityError as e:
        return "ambiguous: " + ", ".join(q.name for q in e.candidates)


def _factor(unit: Unit) -> str:
    converter = unit.to_standard_unit()
    if converter.is_linear:
        return f"{float(converter.convert(1.0)):.6g}"
    return repr(converter)


def registry_table(fmt: UnitFormat, quantities: QuantityCatalog | None = None) -> Table:
    """Tabulate every label and alias of ``fmt``.

    Args:
        fmt: Registry to list.
        quantities: When given, a column with the resolved quantity is added.

    Returns:
        Table: One row per registered name, sorted by name.
    """
    table = Table(title="Unit registry")
    table.add_column("Name", style="bold")
    table.add_column("Unit")
    table.add_column("Standard unit")
    table.add_column("Factor", justify="right")
    if quantities is not None:
        table.add_column("Quantity")

    for name, unit in sorted(fmt.labels().items()):
        row = [
            escape(name),
            escape(fmt.format(unit)),
            escape(fmt.format(unit.standard_unit)),
            escape(_factor(unit)),
        ]
        if quantities is not None:
            row.append(_quantity_name(unit, quantities))
        table.add_row(*row)
    return table


def print_registry(fmt: UnitFormat, quantities: QuantityCatalog | None = None) -> None:
    CONSOLE.print(registry_table(fmt, quantities))
