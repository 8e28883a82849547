"""Global configuration and type definitions for the unit algebra.

This module centralizes the numeric types and the lexical constants shared by
the unit algebra, the formatter and the expression grammar. Keeping them in a
single place guarantees that label validation and parsing agree on what an
identifier is.

Type Definitions:
    BASE_TYPE: Union type of values accepted by unit converters. Supports
               Python native numbers and NumPy arrays so that a converter can
               be applied to a whole column of measurements at once.

Lexical Constants:
    PRODUCT_SEPARATOR: Character placed between factors of a formatted product.
    SUPERSCRIPT_DIGITS: Superscript exponents understood by the parser.
    RESERVED_CHARACTERS: Structural characters that can never appear inside
                         a unit identifier.

Example:
    >>> from measurekit.config import BASE_TYPE
    >>> import numpy as np
    >>> scalar: BASE_TYPE = 3.5
    >>> column: BASE_TYPE = np.array([1.0, 2.0, 3.0])
"""

from numpy import ndarray

BASE_TYPE = int | float | ndarray

PRODUCT_SEPARATOR = "·"

SUPERSCRIPT_DIGITS = {"¹": 1, "²": 2, "³": 3}

RESERVED_CHARACTERS = "·*/()[]¹²³^+-;<>{}|&!?=:,"

# Characters that force a parenthesized name when a unit appears as a factor.
COMPOSITE_MARKERS = "·*/+^:"
