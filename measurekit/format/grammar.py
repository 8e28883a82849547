"""Grammar and transformer for textual unit expressions.

The notation accepted here is the one produced by the formatter::

    expression := term ( "+" ["-"] number )?
    term       := factor ( ("*" | "·") factor )*
    factor     := element ( "/" element )*
    element    := base exponent?
    base       := "(" term ( "+" ["-"] number )? ")" | identifier | ["-"] number
    exponent   := ("^" | "**")? ["-"] integer ( ":" integer )? | superscript

Elements after the first ``/`` of a factor are inverted, so ``J/kg/K`` is
``J·kg⁻¹·K⁻¹``. Numbers fold into a single scale factor applied to the
product of the units: ``m/1000`` is the metre scaled by ``1/1000``, exactly.
A parenthesized group that carries its own scale or offset stays one factor,
so ``(m*1000)/s`` is the kilometre per second and ``(K+273.15)/s`` the degree
Celsius per second.
Identifiers are any run of characters outside the reserved set and are
resolved through a caller supplied lookup.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from functools import lru_cache

from lark import Lark, Token, Transformer
from lark.exceptions import UnexpectedCharacters, UnexpectedInput, UnexpectedToken, VisitError

from measurekit.config import RESERVED_CHARACTERS, SUPERSCRIPT_DIGITS
from measurekit.errors import UnitParseError
from measurekit.unit import Unit, normalize
from measurekit.unit.rational import ONE, RationalNumber, RationalPower

logger = logging.getLogger(__name__)

UnitLookup = Callable[[str], Unit | None]


def _character_class(characters: str) -> str:
    return "".join("\\" + c if c.isascii() else c for c in characters)


IDENTIFIER_PATTERN = rf"[^\s0-9{_character_class(RESERVED_CHARACTERS)}]+"
SUPERSCRIPT_PATTERN = "[" + "".join(SUPERSCRIPT_DIGITS) + "]+"

GRAMMAR = rf"""
start: term offset?

offset: PLUS MINUS? NUMBER

term: factor (MUL factor)*
factor: element (DIV element)*
element: base exponent?

base: LPAR term offset? RPAR    -> group
    | IDENTIFIER                -> named
    | MINUS? NUMBER             -> scalar

exponent: POW? MINUS? NUMBER ratio?    -> integer_exponent
        | SUPERSCRIPT                  -> superscript_exponent
ratio: COLON NUMBER

POW.2: "**" | "^"
MUL: "*" | "·"
DIV: "/"
PLUS: "+"
MINUS: "-"
COLON: ":"
LPAR: "("
RPAR: ")"
NUMBER: /[0-9]+(\.[0-9]+)?([eE][+-]?[0-9]+)?/
SUPERSCRIPT: /{SUPERSCRIPT_PATTERN}/
IDENTIFIER: /{IDENTIFIER_PATTERN}/

%import common.WS_INLINE
%ignore WS_INLINE
"""


@lru_cache(maxsize=1)
def get_parser() -> Lark:
    """Return the shared LALR parser for unit expressions."""
    return Lark(GRAMMAR, start="start", parser="lalr")


def _multiply(a: RationalNumber | float, b: RationalNumber | float) -> RationalNumber | float:
    if isinstance(a, RationalNumber) and isinstance(b, RationalNumber):
        return a.times(b)
    return float(a) * float(b)


def _power(scale: RationalNumber | float, exponent: RationalNumber) -> RationalNumber | float:
    if isinstance(scale, RationalNumber) and exponent.is_integer:
        n = exponent.numerator
        raised = RationalNumber(scale.numerator ** abs(n), scale.denominator ** abs(n))
        return raised if n >= 0 else raised.inverse()
    return float(scale) ** float(exponent)


@dataclass(frozen=True)
class _Term:
    """Product of unit powers together with a numeric scale."""

    powers: tuple[RationalPower[Unit], ...] = ()
    scale: RationalNumber | float = ONE

    def times(self, other: _Term) -> _Term:
        return _Term(self.powers + other.powers, _multiply(self.scale, other.scale))

    def power(self, exponent: RationalNumber) -> _Term:
        powers = tuple(RationalPower(p.base, p.exponent.times(exponent)) for p in self.powers)
        return _Term(powers, _power(self.scale, exponent))

    def to_unit(self) -> Unit:
        return normalize(self.powers).scaled(self.scale)


class UnitExpressionTransformer(Transformer):
    """Turns a parse tree into a :class:`Unit`.

    Args:
        text: The parsed input, used in error messages.
        unit_for: Resolves identifiers to units; returns ``None`` when unknown.
    """

    def __init__(self, text: str, unit_for: UnitLookup):
        super().__init__()
        self._text = text
        self._unit_for = unit_for

    def _error(self, token: Token, reason: str) -> UnitParseError:
        return UnitParseError(self._text, str(token), token.start_pos, reason)

    def _integer(self, token: Token) -> int:
        if not str(token).isdigit():
            raise self._error(token, "exponent must be an integer")
        return int(token)

    def start(self, items):
        unit = items[0].to_unit()
        if len(items) > 1:
            unit = unit.plus(items[1])
        return unit

    def offset(self, items):
        number = float(items[-1])
        negative = any(isinstance(t, Token) and t.type == "MINUS" for t in items)
        return -number if negative else number

    def term(self, items):
        result = _Term()
        for item in items:
            if isinstance(item, _Term):
                result = result.times(item)
        return result

    def factor(self, items):
        elements = [item for item in items if isinstance(item, _Term)]
        result = elements[0]
        for divisor in elements[1:]:
            result = result.times(divisor.power(RationalNumber(-1)))
        return result

    def element(self, items):
        if len(items) == 1:
            return items[0]
        return items[0].power(items[1])

    def group(self, items):
        inner = items[1]
        offsets = [item for item in items if isinstance(item, float)]
        if offsets:
            return _Term((RationalPower(inner.to_unit().plus(offsets[0])),))
        # a scaled group is one factor; its number must not join the outer scale
        if inner.powers and inner.scale != ONE:
            return _Term((RationalPower(inner.to_unit()),))
        return inner

    def named(self, items):
        token = items[0]
        unit = self._unit_for(str(token))
        if unit is None:
            raise self._error(token, "unknown unit")
        return _Term((RationalPower(unit),))

    def scalar(self, items):
        token = items[-1]
        text = str(token)
        value = RationalNumber(int(text)) if text.isdigit() else float(text)
        if value == 0:
            raise self._error(token, "zero is not a valid scale factor")
        if len(items) > 1:
            value = value.negate() if isinstance(value, RationalNumber) else -value
        return _Term((), value)

    def integer_exponent(self, items):
        sign = 1
        numbers = []
        root = 1
        for item in items:
            if isinstance(item, int):
                root = item
            elif item.type == "MINUS":
                sign = -1
            elif item.type == "NUMBER":
                numbers.append(self._integer(item))
        return RationalNumber(sign * numbers[0], root)

    def ratio(self, items):
        token = items[-1]
        root = self._integer(token)
        if root == 0:
            raise self._error(token, "root must not be zero")
        return root

    def superscript_exponent(self, items):
        digits = "".join(str(SUPERSCRIPT_DIGITS[c]) for c in str(items[0]))
        return RationalNumber(int(digits))


def parse_expression(text: str, unit_for: UnitLookup) -> Unit:
    """Parse ``text`` into a unit, resolving identifiers with ``unit_for``.

    Raises:
        UnitParseError: On malformed input or an unknown identifier.
    """
    try:
        tree = get_parser().parse(text)
    except UnexpectedCharacters as e:
        raise UnitParseError(text, e.char, e.pos_in_stream, "unexpected character") from e
    except UnexpectedToken as e:
        if e.token.type == "$END":
            raise UnitParseError(text, "end of input", len(text), "unexpected end of input") from e
        raise UnitParseError(text, str(e.token), e.token.start_pos, "unexpected token") from e
    except UnexpectedInput as e:
        raise UnitParseError(text, text, e.pos_in_stream or 0, "malformed expression") from e
    try:
        unit = UnitExpressionTransformer(text, unit_for).transform(tree)
    except VisitError as e:
        if isinstance(e.orig_exc, UnitParseError):
            raise e.orig_exc from None
        raise
    logger.debug("parsed %r as %r", text, unit)
    return unit
