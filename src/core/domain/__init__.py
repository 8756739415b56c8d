"""
Domain models and value objects.

Contains the digit alphabet and radix rules, ExactRational and ConversionResult.
"""

from src.core.domain.conversion import CONVERSION_RESULT_SCHEMA_VERSION, ConversionResult
from src.core.domain.digits import (
    DIGIT_ALPHABET,
    HEX_PREFIX,
    MAX_RADIX,
    MIN_RADIX,
    RADIX_POINT,
    SUPPORTED_RADICES,
    allowed_digits,
    digit_char,
    digit_value,
    is_valid_digit,
    sanitize_numeral,
    validate_radix,
)
from src.core.domain.rational import ExactRational

__all__ = [
    # Digits module
    "DIGIT_ALPHABET",
    "HEX_PREFIX",
    "MAX_RADIX",
    "MIN_RADIX",
    "RADIX_POINT",
    "SUPPORTED_RADICES",
    "allowed_digits",
    "digit_char",
    "digit_value",
    "is_valid_digit",
    "sanitize_numeral",
    "validate_radix",
    # Rational model
    "ExactRational",
    # Conversion result model
    "ConversionResult",
    "CONVERSION_RESULT_SCHEMA_VERSION",
]
