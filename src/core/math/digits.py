"""
Digits: Примитивы над десятичными magnitude

Модуль содержит беззнаковую арифметику над последовательностями десятичных
цифр. Последовательность хранится как tuple[int, ...] в порядке
least-significant first: число 1024 хранится как (4, 2, 0, 1).

Знак здесь не участвует. Разрешение знака выполняет вызывающая сторона
(src.core.domain.bignum).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Каждая цифра в диапазоне [DIGIT_MIN, DIGIT_MAX]
2. Последовательность никогда не пустая, ноль хранится как (0,)
3. Нет лишних старших нулей (кроме канонического (0,))
4. Все функции, возвращающие magnitude, проходят через strip_high_zeros
"""

from typing import Final, Iterable, Sequence

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Основание системы счисления
BASE: Final[int] = 10

# Диапазон одной цифры
DIGIT_MIN: Final[int] = 0
DIGIT_MAX: Final[int] = BASE - 1

# Каноническое представление нуля
ZERO_DIGITS: Final[tuple[int, ...]] = (0,)

# Границы signed 64-bit (используются для cross-check с нативной арифметикой)
INT64_MIN: Final[int] = -(2**63)
INT64_MAX: Final[int] = 2**63 - 1

Digits = tuple[int, ...]


# =============================================================================
# НОРМАЛИЗАЦИЯ
# =============================================================================


def strip_high_zeros(digits: Iterable[int]) -> Digits:
    """
    Удаление лишних старших нулей.

    Args:
        digits: Цифры в порядке least-significant first (могут быть пустыми)

    Returns:
        Непустой tuple без старших нулей; пустой вход и одни нули → (0,)

    Examples:
        >>> strip_high_zeros([7, 0, 0])
        (7,)
        >>> strip_high_zeros([0, 0, 0])
        (0,)
        >>> strip_high_zeros([])
        (0,)
    """
    result = list(digits)
    while result and result[-1] == 0:
        result.pop()
    if not result:
        return ZERO_DIGITS
    return tuple(result)


def is_zero_digits(digits: Sequence[int]) -> bool:
    """True если magnitude равна нулю (в нормализованной форме)."""
    return len(digits) == 1 and digits[0] == 0


def normalize_digits(digits: Iterable[int], negative: bool) -> tuple[Digits, bool]:
    """
    Нормализация пары (magnitude, sign).

    Единственная точка, через которую проходит любой результат:
    - старшие нули удаляются до непустой последовательности
    - ноль всегда неотрицательный

    Args:
        digits: Цифры в порядке least-significant first
        negative: Исходный знак

    Returns:
        (normalized_digits, normalized_negative)

    Examples:
        >>> normalize_digits([0, 0], True)
        ((0,), False)
        >>> normalize_digits([3, 2, 0], True)
        ((3, 2), True)
    """
    stripped = strip_high_zeros(digits)
    if is_zero_digits(stripped):
        return stripped, False
    return stripped, negative


# =============================================================================
# КОНВЕРСИИ
# =============================================================================


def digits_from_int(value: int) -> tuple[Digits, bool]:
    """
    Разложение нативного int на (magnitude, sign).

    Знак фиксируется до взятия модуля. Python int не переполняется,
    поэтому INT64_MIN обрабатывается так же, как любое другое значение.

    Args:
        value: Целое число любого размера

    Returns:
        (digits, negative), уже нормализованные

    Examples:
        >>> digits_from_int(0)
        ((0,), False)
        >>> digits_from_int(-120)
        ((0, 2, 1), True)
    """
    negative = value < 0
    remaining = -value if negative else value

    if remaining == 0:
        return ZERO_DIGITS, False

    result = []
    while remaining > 0:
        remaining, digit = divmod(remaining, BASE)
        result.append(digit)

    return normalize_digits(result, negative)


def digits_to_int(digits: Sequence[int], negative: bool = False) -> int:
    """
    Сборка нативного int из (magnitude, sign).

    Args:
        digits: Цифры в порядке least-significant first
        negative: Знак результата

    Returns:
        Точное целое значение
    """
    value = 0
    for digit in reversed(digits):
        value = value * BASE + digit
    return -value if negative else value


def render_digits(digits: Sequence[int], negative: bool) -> str:
    """
    Рендеринг в десятичную строку.

    Старшая цифра первой, '-' только для отрицательных. Без локали,
    без разделителей.

    Examples:
        >>> render_digits((9, 9, 8), True)
        '-899'
        >>> render_digits((0,), False)
        '0'
    """
    body = "".join(str(digit) for digit in reversed(digits))
    if negative:
        return "-" + body
    return body


# =============================================================================
# СРАВНЕНИЕ MAGNITUDE
# =============================================================================


def compare_magnitudes(lhs: Sequence[int], rhs: Sequence[int]) -> int:
    """
    Беззнаковое сравнение двух нормализованных magnitude.

    Сначала по длине (больше цифр → больше), затем поцифрово от старшего
    разряда.

    Returns:
        -1 если lhs < rhs
         0 если lhs == rhs
        +1 если lhs > rhs

    Examples:
        >>> compare_magnitudes((9, 9), (0, 0, 1))
        -1
        >>> compare_magnitudes((1, 2), (1, 2))
        0
        >>> compare_magnitudes((0, 3), (9, 2))
        1
    """
    if len(lhs) != len(rhs):
        return -1 if len(lhs) < len(rhs) else 1

    for position in range(len(lhs) - 1, -1, -1):
        if lhs[position] != rhs[position]:
            return -1 if lhs[position] < rhs[position] else 1

    return 0


# =============================================================================
# АРИФМЕТИКА MAGNITUDE
# =============================================================================


def add_magnitudes(lhs: Sequence[int], rhs: Sequence[int]) -> Digits:
    """
    Поразрядное сложение с переносом.

    Цикл идёт, пока есть цифра в любом из операндов или ненулевой перенос.

    Examples:
        >>> add_magnitudes((9, 9, 9), (1,))
        (0, 0, 0, 1)
    """
    result = []
    carry = 0
    position = 0

    while carry > 0 or position < len(lhs) or position < len(rhs):
        lhs_digit = lhs[position] if position < len(lhs) else 0
        rhs_digit = rhs[position] if position < len(rhs) else 0
        carry, digit = divmod(lhs_digit + rhs_digit + carry, BASE)
        result.append(digit)
        position += 1

    return strip_high_zeros(result)


def subtract_magnitudes(minuend: Sequence[int], subtrahend: Sequence[int]) -> Digits:
    """
    Поразрядное вычитание с заёмом: minuend - subtrahend.

    Требует minuend >= subtrahend (по magnitude). Выбор порядка операндов
    и знак результата определяет вызывающая сторона через
    compare_magnitudes.

    Args:
        minuend: Уменьшаемое (большая magnitude)
        subtrahend: Вычитаемое (меньшая или равная magnitude)

    Returns:
        Нормализованная разность

    Raises:
        ValueError: Если minuend < subtrahend

    Examples:
        >>> subtract_magnitudes((0, 0, 1), (9, 9))
        (1,)
        >>> subtract_magnitudes((5,), (5,))
        (0,)
    """
    if compare_magnitudes(minuend, subtrahend) < 0:
        raise ValueError(
            f"minuend {render_digits(minuend, False)} is smaller than "
            f"subtrahend {render_digits(subtrahend, False)}"
        )

    result = []
    borrow = 0

    for position in range(len(minuend)):
        minuend_digit = minuend[position]
        subtrahend_digit = (subtrahend[position] if position < len(subtrahend) else 0) + borrow

        if minuend_digit < subtrahend_digit:
            minuend_digit += BASE
            borrow = 1
        else:
            borrow = 0

        result.append(minuend_digit - subtrahend_digit)

    return strip_high_zeros(result)


def multiply_magnitudes(lhs: Sequence[int], rhs: Sequence[int]) -> Digits:
    """
    Умножение в столбик (schoolbook).

    Для каждого выходного разряда column суммируются все произведения
    lhs[i] * rhs[j] с i + j == column плюс перенос из предыдущего разряда.
    В разряд пишется total % BASE, в следующий переносится total // BASE.

    Результат занимает не больше len(lhs) + len(rhs) разрядов, поэтому
    после последнего столбца перенос всегда нулевой.

    Examples:
        >>> multiply_magnitudes((2, 1), (4, 3))
        (8, 0, 4)
        >>> multiply_magnitudes((9, 9, 9), (0,))
        (0,)
    """
    width = len(lhs) + len(rhs)
    result = []
    carry = 0

    for column in range(width):
        total = carry
        first = max(0, column - len(rhs) + 1)
        last = min(column, len(lhs) - 1)
        for lhs_pos in range(first, last + 1):
            total += lhs[lhs_pos] * rhs[column - lhs_pos]
        carry, digit = divmod(total, BASE)
        result.append(digit)

    return strip_high_zeros(result)
