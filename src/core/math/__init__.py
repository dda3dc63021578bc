"""
Core math modules для BigNum

Беззнаковая арифметика над десятичными цифрами и разбор литералов.
"""

# Digits (magnitude primitives)
from src.core.math.digits import (
    # Constants
    BASE,
    DIGIT_MAX,
    DIGIT_MIN,
    INT64_MAX,
    INT64_MIN,
    ZERO_DIGITS,
    # Types
    Digits,
    # Normalization
    is_zero_digits,
    normalize_digits,
    strip_high_zeros,
    # Conversions
    digits_from_int,
    digits_to_int,
    render_digits,
    # Magnitude arithmetic
    add_magnitudes,
    compare_magnitudes,
    multiply_magnitudes,
    subtract_magnitudes,
)

# Parsing
from src.core.math.parsing import (
    ASCII_DIGITS,
    SIGN_MINUS,
    SIGN_PLUS,
    FormatViolation,
    InvalidFormatError,
    parse_decimal,
)

__all__ = [
    # Digits: Constants
    "BASE",
    "DIGIT_MAX",
    "DIGIT_MIN",
    "INT64_MAX",
    "INT64_MIN",
    "ZERO_DIGITS",
    # Digits: Types
    "Digits",
    # Digits: Normalization
    "is_zero_digits",
    "normalize_digits",
    "strip_high_zeros",
    # Digits: Conversions
    "digits_from_int",
    "digits_to_int",
    "render_digits",
    # Digits: Magnitude arithmetic
    "add_magnitudes",
    "compare_magnitudes",
    "multiply_magnitudes",
    "subtract_magnitudes",
    # Parsing: Constants
    "ASCII_DIGITS",
    "SIGN_MINUS",
    "SIGN_PLUS",
    # Parsing: Exceptions
    "FormatViolation",
    "InvalidFormatError",
    # Parsing: Functions
    "parse_decimal",
]
