"""
BigNum: Знаковое целое произвольной точности

Pydantic модель: знак + последовательность десятичных цифр
(least-significant first). Сериализуется в контракт
src/core/contracts/schema/bignum.json.

Публичные операции:
- Конструкторы: BigNum(), BigNum.from_int, BigNum.from_string, try_parse
- Арифметика: add, subtract, multiply, negate, identity
- Сравнение: equals, not_equals, less_than, greater_than,
  less_or_equal, greater_or_equal
- Рендеринг: to_decimal_string
- In-place: add_assign, subtract_assign, multiply_assign (+=, -=, *=)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. digits никогда не пустой, ноль = (0,)
2. Нет лишних старших нулей
3. Ноль никогда не отрицательный
4. Любой BigNum создаётся через нормализацию (model_validator или _build)

Бинарные функции чистые. In-place формы вычисляют результат бинарной
функцией и заменяют им состояние получателя, поэтому BigNum не hashable.
Параллельная мутация одного экземпляра не синхронизирована.
"""

from dataclasses import dataclass
from typing import Annotated, Any, Mapping, Optional

from pydantic import BaseModel, Field, model_validator

from src.core.math.digits import (
    DIGIT_MAX,
    DIGIT_MIN,
    ZERO_DIGITS,
    Digits,
    add_magnitudes,
    compare_magnitudes,
    digits_from_int,
    digits_to_int,
    multiply_magnitudes,
    normalize_digits,
    render_digits,
    subtract_magnitudes,
)
from src.core.math.parsing import FormatViolation, InvalidFormatError, parse_decimal

# strict: "7", True и 2.0 не являются цифрами (как и в bignum.json)
Digit = Annotated[int, Field(ge=DIGIT_MIN, le=DIGIT_MAX, strict=True)]


# =============================================================================
# BIGNUM MODEL
# =============================================================================


class BigNum(BaseModel):
    """
    Знаковое десятичное целое неограниченной величины.

    Прямое создание (BigNum(digits=..., negative=...), model_validate)
    валидирует цифры и нормализует результат. Для чисел удобнее
    from_int / from_string.
    """

    digits: tuple[Digit, ...] = Field(
        default=ZERO_DIGITS,
        min_length=1,
        description="Цифры magnitude, least-significant first",
    )
    negative: bool = Field(default=False, strict=True, description="Знак (ноль всегда False)")

    model_config = {"extra": "forbid"}

    @model_validator(mode="after")
    def normalize(self) -> "BigNum":
        """Удаление старших нулей и снятие знака с нуля."""
        digits, negative = normalize_digits(self.digits, self.negative)
        self.digits = digits
        self.negative = negative
        return self

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def _build(cls, digits: Digits, negative: bool) -> "BigNum":
        # Внутренние результаты уже состоят из цифр 0-9, валидация не нужна
        normalized, sign = normalize_digits(digits, negative)
        return cls.model_construct(digits=normalized, negative=sign)

    @classmethod
    def from_int(cls, value: int) -> "BigNum":
        """
        Создание из нативного int.

        Принимает любой int (включая значения за пределами signed 64-bit).

        Raises:
            TypeError: Если value не int (bool тоже отклоняется)
        """
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"BigNum.from_int expects int, got {type(value).__name__}")
        digits, negative = digits_from_int(value)
        return cls._build(digits, negative)

    @classmethod
    def from_string(cls, text: str) -> "BigNum":
        """
        Создание из десятичной строки.

        Args:
            text: Необязательный знак и ASCII цифры, например "-007"

        Returns:
            Нормализованный BigNum

        Raises:
            InvalidFormatError: Пустая строка, только знак, не-цифра,
                отрицательный ноль
            TypeError: Если text не str
        """
        if not isinstance(text, str):
            raise TypeError(f"BigNum.from_string expects str, got {type(text).__name__}")
        digits, negative = parse_decimal(text)
        return cls._build(digits, negative)

    # -------------------------------------------------------------------------
    # In-place формы
    # -------------------------------------------------------------------------

    def _replace(self, result: "BigNum") -> "BigNum":
        self.digits = result.digits
        self.negative = result.negative
        return self

    def add_assign(self, other: "BigNum") -> "BigNum":
        """self = self + other. Возвращает self."""
        return self._replace(add(self, other))

    def subtract_assign(self, other: "BigNum") -> "BigNum":
        """self = self - other. Возвращает self."""
        return self._replace(subtract(self, other))

    def multiply_assign(self, other: "BigNum") -> "BigNum":
        """self = self * other. Возвращает self."""
        return self._replace(multiply(self, other))

    def model_copy(self, *, update: Optional[Mapping[str, Any]] = None, deep: bool = False) -> "BigNum":
        """
        Копия; с update результат заново валидируется и нормализуется.

        Raises:
            ValidationError: Если update содержит недопустимые цифры или поля
        """
        if not update:
            return super().model_copy(deep=deep)
        data: dict[str, Any] = {"digits": self.digits, "negative": self.negative}
        data.update(update)
        return type(self).model_validate(data)

    # -------------------------------------------------------------------------
    # Конверсии
    # -------------------------------------------------------------------------

    def to_decimal_string(self) -> str:
        return to_decimal_string(self)

    def to_int(self) -> int:
        """Точное нативное значение."""
        return digits_to_int(self.digits, self.negative)

    def is_zero(self) -> bool:
        return self.digits == ZERO_DIGITS

    def __str__(self) -> str:
        return to_decimal_string(self)

    def __repr__(self) -> str:
        return f"BigNum({to_decimal_string(self)!r})"

    def __int__(self) -> int:
        return self.to_int()

    # -------------------------------------------------------------------------
    # Операторы
    # -------------------------------------------------------------------------

    def __pos__(self) -> "BigNum":
        return identity(self)

    def __neg__(self) -> "BigNum":
        return negate(self)

    def __add__(self, other):
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return add(self, rhs)

    def __radd__(self, other):
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return add(lhs, self)

    def __sub__(self, other):
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return subtract(self, rhs)

    def __rsub__(self, other):
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return subtract(lhs, self)

    def __mul__(self, other):
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return multiply(self, rhs)

    def __rmul__(self, other):
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return multiply(lhs, self)

    def __iadd__(self, other):
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self.add_assign(rhs)

    def __isub__(self, other):
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self.subtract_assign(rhs)

    def __imul__(self, other):
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self.multiply_assign(rhs)

    def __eq__(self, other) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return equals(self, rhs)

    def __ne__(self, other) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return not_equals(self, rhs)

    def __lt__(self, other) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return less_than(self, rhs)

    def __gt__(self, other) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return greater_than(self, rhs)

    def __le__(self, other) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return less_or_equal(self, rhs)

    def __ge__(self, other) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return greater_or_equal(self, rhs)


def _coerce(value) -> Optional[BigNum]:
    if isinstance(value, BigNum):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return BigNum.from_int(value)
    return None


# =============================================================================
# PARSE RESULT
# =============================================================================


@dataclass(frozen=True)
class ParseResult:
    """Результат разбора строки без exception."""

    ok: bool
    value: Optional[BigNum]
    violation: Optional[FormatViolation]
    message: str


def try_parse(text: str) -> ParseResult:
    """
    Разбор десятичной строки с результатом вместо exception.

    Returns:
        ParseResult(ok=True, value=...) или
        ParseResult(ok=False, violation=..., message=...)

    Examples:
        >>> try_parse("-12").value
        BigNum('-12')
        >>> try_parse("-0").violation
        <FormatViolation.NEGATIVE_ZERO: 'NEGATIVE_ZERO'>
    """
    try:
        value = BigNum.from_string(text)
    except InvalidFormatError as e:
        return ParseResult(ok=False, value=None, violation=e.violation, message=str(e))
    return ParseResult(ok=True, value=value, violation=None, message="")


# =============================================================================
# УНАРНЫЕ ОПЕРАЦИИ
# =============================================================================


def identity(value: BigNum) -> BigNum:
    """Унарный плюс: то же значение (новый экземпляр)."""
    return BigNum._build(value.digits, value.negative)


def negate(value: BigNum) -> BigNum:
    """Унарный минус: та же magnitude, противоположный знак; -0 == 0."""
    return BigNum._build(value.digits, not value.negative)


# =============================================================================
# АРИФМЕТИКА
# =============================================================================


def add(lhs: BigNum, rhs: BigNum) -> BigNum:
    """
    Сумма lhs + rhs.

    При разных знаках сводится к вычитанию magnitude:
        (-a) + b = b - a
        a + (-b) = a - b
    При одинаковых знаках magnitude складываются, знак общий.
    """
    if lhs.negative != rhs.negative:
        if lhs.negative:
            return subtract(rhs, negate(lhs))
        return subtract(lhs, negate(rhs))

    return BigNum._build(add_magnitudes(lhs.digits, rhs.digits), lhs.negative)


def subtract(lhs: BigNum, rhs: BigNum) -> BigNum:
    """
    Разность lhs - rhs.

    Разные знаки сводятся к сложению magnitude:
        (+a) - (-b) = a + b
        (-a) - (+b) = -(a + b)

    Одинаковые знаки: большая magnitude становится уменьшаемым.

    Таблица знака результата:
        lhs, rhs >= 0:  отрицательный iff |lhs| <  |rhs|
        lhs, rhs <  0:  отрицательный iff |lhs| >= |rhs|  (-a - (-b) = b - a)
    При |lhs| == |rhs| результат ноль, нормализация делает его
    неотрицательным.
    """
    if lhs.negative != rhs.negative:
        return BigNum._build(add_magnitudes(lhs.digits, rhs.digits), lhs.negative)

    order = compare_magnitudes(lhs.digits, rhs.digits)

    if not lhs.negative:
        if order < 0:
            return BigNum._build(subtract_magnitudes(rhs.digits, lhs.digits), True)
        return BigNum._build(subtract_magnitudes(lhs.digits, rhs.digits), False)

    if order >= 0:
        return BigNum._build(subtract_magnitudes(lhs.digits, rhs.digits), True)
    return BigNum._build(subtract_magnitudes(rhs.digits, lhs.digits), False)


def multiply(lhs: BigNum, rhs: BigNum) -> BigNum:
    """
    Произведение lhs * rhs.

    Знак отрицательный iff знаки операндов различны и результат не ноль.
    """
    return BigNum._build(
        multiply_magnitudes(lhs.digits, rhs.digits),
        lhs.negative != rhs.negative,
    )


# =============================================================================
# СРАВНЕНИЕ
# =============================================================================


def equals(lhs: BigNum, rhs: BigNum) -> bool:
    """Одинаковый знак и идентичные цифры."""
    return lhs.negative == rhs.negative and lhs.digits == rhs.digits


def not_equals(lhs: BigNum, rhs: BigNum) -> bool:
    return not equals(lhs, rhs)


def less_than(lhs: BigNum, rhs: BigNum) -> bool:
    """
    lhs < rhs.

    Разные знаки: отрицательный меньше. Одинаковые знаки: сравнение
    magnitude (длина, затем цифры от старшей), для отрицательных
    результат инвертируется.
    """
    if lhs.negative != rhs.negative:
        return lhs.negative

    order = compare_magnitudes(lhs.digits, rhs.digits)
    if lhs.negative:
        return order > 0
    return order < 0


def greater_than(lhs: BigNum, rhs: BigNum) -> bool:
    return not equals(lhs, rhs) and not less_than(lhs, rhs)


def less_or_equal(lhs: BigNum, rhs: BigNum) -> bool:
    return not greater_than(lhs, rhs)


def greater_or_equal(lhs: BigNum, rhs: BigNum) -> bool:
    return not less_than(lhs, rhs)


# =============================================================================
# РЕНДЕРИНГ
# =============================================================================


def to_decimal_string(value: BigNum) -> str:
    """
    Каноническая десятичная строка.

    Examples:
        >>> to_decimal_string(BigNum.from_string("-007"))
        '-7'
        >>> to_decimal_string(BigNum.from_int(0))
        '0'
    """
    return render_digits(value.digits, value.negative)
