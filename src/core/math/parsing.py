"""
Parsing: Разбор десятичных литералов

Формат: необязательный знак ('+' или '-'), затем одна или больше ASCII
цифр 0-9. Старшие нули допускаются и удаляются нормализацией
("007" → 7).

Отклоняется (InvalidFormatError):
- пустая строка
- строка только из знака
- любой не-ASCII-цифровой символ после знака (пробелы, '_', unicode digits)
- отрицательный ноль ("-0", "-000")

Цифры читаются справа налево сразу в порядке least-significant first,
разворот не нужен.
"""

import logging
from enum import Enum
from typing import Final

from src.core.math.digits import Digits, is_zero_digits, strip_high_zeros

logger = logging.getLogger(__name__)


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

SIGN_PLUS: Final[str] = "+"
SIGN_MINUS: Final[str] = "-"

# Только ASCII: str.isdigit() принимает '²' и '٣'
ASCII_DIGITS: Final[str] = "0123456789"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class FormatViolation(str, Enum):
    """Какое правило формата нарушено."""

    EMPTY = "EMPTY"
    SIGN_ONLY = "SIGN_ONLY"
    NON_DIGIT = "NON_DIGIT"
    NEGATIVE_ZERO = "NEGATIVE_ZERO"


class InvalidFormatError(ValueError):
    """
    Строка не может быть преобразована в BigNum.

    Attributes:
        violation: Нарушенное правило
        text: Исходная строка
    """

    def __init__(self, violation: FormatViolation, text: str, message: str):
        super().__init__(message)
        self.violation = violation
        self.text = text


# =============================================================================
# PARSER
# =============================================================================


def _reject(violation: FormatViolation, text: str, message: str) -> InvalidFormatError:
    logger.debug("rejected decimal literal %r: %s", text, violation.value)
    return InvalidFormatError(violation, text, message)


def parse_decimal(text: str) -> tuple[Digits, bool]:
    """
    Разбор десятичной строки в (magnitude, sign).

    Args:
        text: Десятичный литерал, например "-00123"

    Returns:
        (digits, negative): нормализованные цифры least-significant first
        и знак

    Raises:
        InvalidFormatError: Если строка нарушает формат

    Examples:
        >>> parse_decimal("007")
        ((7,), False)
        >>> parse_decimal("-120")
        ((0, 2, 1), True)
        >>> parse_decimal("+0")
        ((0,), False)
    """
    if not text:
        raise _reject(
            FormatViolation.EMPTY,
            text,
            "Empty string cannot be converted to BigNum",
        )

    has_sign = text[0] in (SIGN_PLUS, SIGN_MINUS)
    negative = text[0] == SIGN_MINUS
    start = 1 if has_sign else 0

    if has_sign and len(text) == 1:
        raise _reject(
            FormatViolation.SIGN_ONLY,
            text,
            f"Sign without digits cannot be converted to BigNum: {text!r}",
        )

    digits = []
    for position in range(len(text) - 1, start - 1, -1):
        char = text[position]
        if char not in ASCII_DIGITS:
            raise _reject(
                FormatViolation.NON_DIGIT,
                text,
                f"Non-digit character {char!r} at position {position} "
                f"cannot be converted to BigNum: {text!r}",
            )
        digits.append(ord(char) - ord("0"))

    magnitude = strip_high_zeros(digits)

    if negative and is_zero_digits(magnitude):
        raise _reject(
            FormatViolation.NEGATIVE_ZERO,
            text,
            f"Negative zero is not accepted: {text!r}",
        )

    return magnitude, negative
