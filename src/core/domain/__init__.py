"""
Domain models and value objects.

Contains the BigNum value type and its free-function operators.
"""

from src.core.domain.bignum import (
    BigNum,
    ParseResult,
    add,
    equals,
    greater_or_equal,
    greater_than,
    identity,
    less_or_equal,
    less_than,
    multiply,
    negate,
    not_equals,
    subtract,
    to_decimal_string,
    try_parse,
)

__all__ = [
    # BigNum model
    "BigNum",
    "ParseResult",
    "try_parse",
    # Arithmetic
    "add",
    "subtract",
    "multiply",
    "negate",
    "identity",
    # Comparison
    "equals",
    "not_equals",
    "less_than",
    "greater_than",
    "less_or_equal",
    "greater_or_equal",
    # Rendering
    "to_decimal_string",
]
