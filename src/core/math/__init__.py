"""
Core math modules

Разбор и запись чисел в позиционных системах счисления на точной арифметике.
"""

# Numeral Parser
from src.core.math.numeral_parser import (
    EmptyInput,
    HexPrefixPolicy,
    InvalidDigit,
    MultipleDecimalPoints,
    ParseError,
    normalize_numeral,
    parse,
)

# Numeral Renderer
from src.core.math.numeral_renderer import (
    DEFAULT_PRECISION,
    render,
    render_fraction_digits,
    render_integer,
    validate_precision,
)

__all__ = [
    # Numeral Parser — Exceptions
    "ParseError",
    "EmptyInput",
    "MultipleDecimalPoints",
    "InvalidDigit",
    # Numeral Parser — Types
    "HexPrefixPolicy",
    # Numeral Parser — Functions
    "normalize_numeral",
    "parse",
    # Numeral Renderer — Constants
    "DEFAULT_PRECISION",
    # Numeral Renderer — Functions
    "render",
    "render_fraction_digits",
    "render_integer",
    "validate_precision",
]
