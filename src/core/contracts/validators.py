"""
BigNum Contract Validators

Проверка сериализованных форм BigNum против JSON Schema контрактов и
обратная загрузка BigNum из проверенных данных.

Контракты (лежат рядом с модулем, в schema/):
- bignum.json: структурный payload {"digits": [...], "negative": bool}
- decimal_string.json: каноническая строка to_decimal_string

Валидаторы принимают как сырые данные, так и сам BigNum: экземпляр
сериализуется в форму соответствующего контракта перед проверкой.
Схемы загружаются лениво при первом обращении.
"""

import json
from pathlib import Path
from typing import Any, Final, Iterator, Union

import jsonschema
from jsonschema import Draft202012Validator

from src.core.domain.bignum import BigNum

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Схемы поставляются как package data
SCHEMA_DIR: Final[Path] = Path(__file__).parent / "schema"

BIGNUM_SCHEMA: Final[str] = "bignum"
DECIMAL_STRING_SCHEMA: Final[str] = "decimal_string"

PayloadLike = Union[BigNum, dict[str, Any]]
DecimalLike = Union[BigNum, str]


# =============================================================================
# SCHEMA LOADING
# =============================================================================

_SCHEMA_CACHE: dict[str, dict[str, Any]] = {}


def load_schema(schema_name: str) -> dict[str, Any]:
    """
    Загрузка и meta-валидация контракта из SCHEMA_DIR.

    Args:
        schema_name: BIGNUM_SCHEMA или DECIMAL_STRING_SCHEMA

    Returns:
        Схема как dict (повторные вызовы возвращают тот же объект)

    Raises:
        FileNotFoundError: Если файла схемы нет
        ValueError: Если файл не является валидной JSON Schema
    """
    cached = _SCHEMA_CACHE.get(schema_name)
    if cached is not None:
        return cached

    schema_path = SCHEMA_DIR / f"{schema_name}.json"
    if not schema_path.is_file():
        raise FileNotFoundError(f"Schema not found: {schema_path}")

    schema = json.loads(schema_path.read_text(encoding="utf-8"))

    try:
        Draft202012Validator.check_schema(schema)
    except jsonschema.SchemaError as e:
        raise ValueError(f"Invalid JSON Schema in {schema_path.name}: {e.message}") from e

    _SCHEMA_CACHE[schema_name] = schema
    return schema


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Проверка одной сериализованной формы BigNum.

    Подкласс задаёт schema_name, сериализацию BigNum в форму контракта
    (_serialize) и обратную загрузку (_deserialize).
    """

    schema_name: str = ""

    def __init__(self):
        self.schema = load_schema(self.schema_name)
        self._validator = Draft202012Validator(self.schema)

    def _serialize(self, value: BigNum) -> Any:
        raise NotImplementedError

    def _deserialize(self, data: Any) -> BigNum:
        raise NotImplementedError

    def _instance(self, data: Any) -> Any:
        if isinstance(data, BigNum):
            return self._serialize(data)
        return data

    def validate(self, data: Any) -> None:
        """
        Raises:
            jsonschema.ValidationError: Первое найденное нарушение контракта
        """
        self._validator.validate(self._instance(data))

    def is_valid(self, data: Any) -> bool:
        return self._validator.is_valid(self._instance(data))

    def iter_errors(self, data: Any) -> Iterator[jsonschema.ValidationError]:
        return self._validator.iter_errors(self._instance(data))

    def load(self, data: Any) -> BigNum:
        """
        Проверка контракта, затем сборка BigNum.

        Raises:
            jsonschema.ValidationError: Если данные нарушают контракт
        """
        self.validate(data)
        return self._deserialize(data)


class BigNumPayloadValidator(ContractValidator):
    """bignum.json: BigNum ↔ model_dump(mode="json")."""

    schema_name = BIGNUM_SCHEMA

    def _serialize(self, value: BigNum) -> dict[str, Any]:
        return value.model_dump(mode="json")

    def _deserialize(self, data: dict[str, Any]) -> BigNum:
        return BigNum.model_validate(data)


class DecimalStringValidator(ContractValidator):
    """
    decimal_string.json: BigNum ↔ to_decimal_string.

    Контракт строже формата from_string: без '+' и без старших нулей.
    """

    schema_name = DECIMAL_STRING_SCHEMA

    def _serialize(self, value: BigNum) -> str:
        return value.to_decimal_string()

    def _deserialize(self, data: str) -> BigNum:
        return BigNum.from_string(data)


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_bignum_payload(data: PayloadLike) -> None:
    """
    Raises:
        jsonschema.ValidationError: Если payload нарушает bignum.json
    """
    BigNumPayloadValidator().validate(data)


def validate_decimal_string(data: DecimalLike) -> None:
    """
    Raises:
        jsonschema.ValidationError: Если строка не в канонической форме
    """
    DecimalStringValidator().validate(data)


def load_bignum_payload(data: dict[str, Any]) -> BigNum:
    """BigNum из payload, прошедшего bignum.json."""
    return BigNumPayloadValidator().load(data)


def load_decimal_string(text: str) -> BigNum:
    """BigNum из канонической строки, прошедшей decimal_string.json."""
    return DecimalStringValidator().load(text)
