"""
Contract Validation Module

Модуль для валидации сериализованных форм BigNum против JSON Schema.
"""

from .validators import (
    BIGNUM_SCHEMA,
    DECIMAL_STRING_SCHEMA,
    SCHEMA_DIR,
    BigNumPayloadValidator,
    ContractValidator,
    DecimalStringValidator,
    load_bignum_payload,
    load_decimal_string,
    load_schema,
    validate_bignum_payload,
    validate_decimal_string,
)

__all__ = [
    # Constants
    "BIGNUM_SCHEMA",
    "DECIMAL_STRING_SCHEMA",
    "SCHEMA_DIR",
    # Classes
    "ContractValidator",
    "BigNumPayloadValidator",
    "DecimalStringValidator",
    # Functions
    "load_schema",
    "validate_bignum_payload",
    "validate_decimal_string",
    "load_bignum_payload",
    "load_decimal_string",
]
