"""
Property-тесты для BigNum

Детерминированные выборки (random.Random с фиксированным seed) покрывают:
1. Нормализацию результатов всех операций
2. Round trip через десятичную строку
3. Алгебраические свойства (identity, inverse, коммутативность,
   ассоциативность, дистрибутивность, согласованность вычитания)
4. Полноту порядка
5. Cross-check с нативной арифметикой (signed 64-bit и за его пределами)
"""

import random

import pytest

from src.core.domain import (
    BigNum,
    add,
    equals,
    less_than,
    multiply,
    negate,
    subtract,
    to_decimal_string,
)
from src.core.math.digits import INT64_MAX, INT64_MIN

SAMPLE_SIZE = 200


def random_int(rng: random.Random) -> int:
    """Значение со случайной длиной (1..40 цифр) и знаком, с частыми краевыми."""
    roll = rng.random()
    if roll < 0.05:
        return 0
    if roll < 0.10:
        return rng.choice([INT64_MIN, INT64_MAX, -1, 1, 9, -9, 10, -10])
    length = rng.randint(1, 40)
    value = rng.randrange(10 ** (length - 1), 10**length)
    return -value if rng.random() < 0.5 else value


def random_int64(rng: random.Random) -> int:
    return rng.randint(INT64_MIN, INT64_MAX)


def samples(seed: int, arity: int, generator=random_int) -> list[tuple[int, ...]]:
    rng = random.Random(seed)
    return [tuple(generator(rng) for _ in range(arity)) for _ in range(SAMPLE_SIZE)]


def assert_normalized(value: BigNum) -> None:
    assert len(value.digits) >= 1
    assert all(0 <= digit <= 9 for digit in value.digits)
    if len(value.digits) > 1:
        assert value.digits[-1] != 0
    if value.digits == (0,):
        assert value.negative is False


# =============================================================================
# НОРМАЛИЗАЦИЯ И ROUND TRIP
# =============================================================================


class TestNormalizationProperty:
    """Любой результат нормализован"""

    def test_all_operations_normalized(self) -> None:
        for a, b in samples(1, 2):
            x, y = BigNum.from_int(a), BigNum.from_int(b)
            for result in (x, y, add(x, y), subtract(x, y), multiply(x, y), negate(x)):
                assert_normalized(result)

    def test_cancellation_normalized(self) -> None:
        """x - x и x + (-x) дают канонический ноль"""
        for (a,) in samples(2, 1):
            x = BigNum.from_int(a)
            for result in (subtract(x, x), add(x, negate(x))):
                assert result.digits == (0,)
                assert result.negative is False

    def test_padded_strings_normalized(self) -> None:
        rng = random.Random(3)
        for (a,) in samples(3, 1):
            padding = "0" * rng.randint(0, 5)
            body = str(abs(a))
            text = ("-" if a < 0 else rng.choice(["", "+"])) + padding + body
            value = BigNum.from_string(text)
            assert_normalized(value)
            assert to_decimal_string(value) == str(a)


class TestRoundTrip:
    """from_string(to_decimal_string(x)) == x"""

    def test_string_round_trip(self) -> None:
        for (a,) in samples(4, 1):
            x = BigNum.from_int(a)
            assert equals(BigNum.from_string(to_decimal_string(x)), x)

    def test_rendering_matches_native(self) -> None:
        for (a,) in samples(5, 1):
            assert to_decimal_string(BigNum.from_int(a)) == str(a)

    def test_int_round_trip(self) -> None:
        for (a,) in samples(6, 1):
            assert int(BigNum.from_int(a)) == a


# =============================================================================
# АЛГЕБРАИЧЕСКИЕ СВОЙСТВА
# =============================================================================


class TestAlgebraicProperties:
    """Identity, inverse, коммутативность, ассоциативность, дистрибутивность"""

    def test_additive_identity(self) -> None:
        zero = BigNum.from_int(0)
        for (a,) in samples(10, 1):
            x = BigNum.from_int(a)
            assert equals(add(x, zero), x)
            assert equals(add(zero, x), x)

    def test_additive_inverse(self) -> None:
        zero = BigNum.from_int(0)
        for (a,) in samples(11, 1):
            x = BigNum.from_int(a)
            assert equals(add(x, negate(x)), zero)

    def test_commutativity(self) -> None:
        for a, b in samples(12, 2):
            x, y = BigNum.from_int(a), BigNum.from_int(b)
            assert equals(add(x, y), add(y, x))
            assert equals(multiply(x, y), multiply(y, x))

    def test_associativity_of_addition(self) -> None:
        for a, b, c in samples(13, 3):
            x, y, z = BigNum.from_int(a), BigNum.from_int(b), BigNum.from_int(c)
            assert equals(add(add(x, y), z), add(x, add(y, z)))

    def test_distributivity(self) -> None:
        for a, b, c in samples(14, 3):
            x, y, z = BigNum.from_int(a), BigNum.from_int(b), BigNum.from_int(c)
            assert equals(multiply(x, add(y, z)), add(multiply(x, y), multiply(x, z)))

    def test_subtraction_consistent_with_addition(self) -> None:
        for a, b in samples(15, 2):
            x, y = BigNum.from_int(a), BigNum.from_int(b)
            assert equals(subtract(x, y), add(x, negate(y)))


# =============================================================================
# ПОРЯДОК
# =============================================================================


class TestTotalOrder:
    """Ровно одно из a < b, a == b, b < a"""

    def test_trichotomy(self) -> None:
        for a, b in samples(20, 2):
            x, y = BigNum.from_int(a), BigNum.from_int(b)
            outcomes = [less_than(x, y), equals(x, y), less_than(y, x)]
            assert outcomes.count(True) == 1

    def test_trichotomy_with_equal_operands(self) -> None:
        for (a,) in samples(21, 1):
            x, y = BigNum.from_int(a), BigNum.from_int(a)
            assert equals(x, y)
            assert not less_than(x, y)
            assert not less_than(y, x)

    def test_order_matches_native(self) -> None:
        for a, b in samples(22, 2):
            x, y = BigNum.from_int(a), BigNum.from_int(b)
            assert less_than(x, y) == (a < b)
            assert (x > y) == (a > b)
            assert (x <= y) == (a <= b)
            assert (x >= y) == (a >= b)
            assert (x != y) == (a != b)

    def test_same_length_negatives(self) -> None:
        """Отрицательные одинаковой длины: инверсия поцифрового сравнения"""
        rng = random.Random(23)
        for _ in range(SAMPLE_SIZE):
            length = rng.randint(1, 20)
            a = -rng.randrange(10 ** (length - 1), 10**length)
            b = -rng.randrange(10 ** (length - 1), 10**length)
            assert less_than(BigNum.from_int(a), BigNum.from_int(b)) == (a < b)


# =============================================================================
# CROSS-CHECK С НАТИВНОЙ АРИФМЕТИКОЙ
# =============================================================================


class TestNativeCrossCheck:
    """Результаты совпадают с int, отрендеренным в строку"""

    @pytest.mark.parametrize("generator", [random_int64, random_int], ids=["int64", "wide"])
    def test_add(self, generator) -> None:
        for a, b in samples(30, 2, generator):
            assert to_decimal_string(add(BigNum.from_int(a), BigNum.from_int(b))) == str(a + b)

    @pytest.mark.parametrize("generator", [random_int64, random_int], ids=["int64", "wide"])
    def test_subtract(self, generator) -> None:
        for a, b in samples(31, 2, generator):
            assert to_decimal_string(subtract(BigNum.from_int(a), BigNum.from_int(b))) == str(a - b)

    @pytest.mark.parametrize("generator", [random_int64, random_int], ids=["int64", "wide"])
    def test_multiply(self, generator) -> None:
        for a, b in samples(32, 2, generator):
            assert to_decimal_string(multiply(BigNum.from_int(a), BigNum.from_int(b))) == str(a * b)

    def test_in_place_matches_native(self) -> None:
        for a, b, c in samples(33, 3):
            value = BigNum.from_int(a)
            value += BigNum.from_int(b)
            value *= BigNum.from_int(c)
            value -= BigNum.from_int(a)
            assert int(value) == (a + b) * c - a


class TestSubtractionSignTable:
    """Все комбинации знаков × все упорядочения magnitude"""

    @pytest.mark.parametrize("lhs_sign", [1, -1])
    @pytest.mark.parametrize("rhs_sign", [1, -1])
    @pytest.mark.parametrize("ordering", ["smaller", "equal", "larger"])
    def test_sign_combinations(self, lhs_sign: int, rhs_sign: int, ordering: str) -> None:
        rng = random.Random(f"{lhs_sign}:{rhs_sign}:{ordering}")
        for _ in range(50):
            small = rng.randrange(1, 10**rng.randint(1, 25))
            large = small + rng.randrange(1, 10**rng.randint(1, 25))
            lhs_mag, rhs_mag = {
                "smaller": (small, large),
                "equal": (small, small),
                "larger": (large, small),
            }[ordering]
            a, b = lhs_sign * lhs_mag, rhs_sign * rhs_mag

            result = subtract(BigNum.from_int(a), BigNum.from_int(b))
            assert int(result) == a - b
            assert result.negative == (a - b < 0)
