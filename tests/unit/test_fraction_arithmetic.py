"""
Тесты для Fraction — арифметика

Проверяет:
1. add / subtract / multiply / divide и операторы + - * /
2. Операнды int и numbers.Rational с обеих сторон
3. negate / reciprocal / abs / power
4. DivisionByZero для деления на ноль, reciprocal(0), 0 ** -n
5. Результат всегда нормализован
"""

import pytest

from fractionkit import DivisionByZero, Fraction
from fractionkit.core.math.integer_arithmetic import gcd


def assert_normalized(f: Fraction) -> None:
    assert f.denominator > 0
    assert gcd(f.numerator, f.denominator) == 1


# =============================================================================
# ТЕСТЫ: сложение и вычитание
# =============================================================================


class TestAddition:
    """Сложение"""

    def test_same_denominator(self) -> None:
        assert Fraction(1, 4).add(Fraction(1, 4)) == Fraction(1, 2)

    def test_cross_multiplication(self) -> None:
        assert Fraction(1, 2).add(Fraction(1, 3)) == Fraction(5, 6)
        assert Fraction(1, 2) + Fraction(3, 4) == Fraction(5, 4)

    def test_negative_signs(self) -> None:
        assert Fraction(-1, 2) + Fraction(1, -3) == Fraction(-5, 6)
        assert Fraction(-1, -2) + Fraction(-1, 2) == Fraction.ZERO

    def test_with_int(self) -> None:
        assert Fraction(1, 2) + 1 == Fraction(3, 2)
        assert 1 + Fraction(1, 2) == Fraction(3, 2)
        assert Fraction(1, 2).add(2) == Fraction(5, 2)

    def test_result_normalized(self) -> None:
        result = Fraction(1, 6) + Fraction(1, 3)
        assert (result.numerator, result.denominator) == (1, 2)
        assert_normalized(result)

    def test_operands_unchanged(self) -> None:
        a = Fraction(1, 2)
        b = Fraction(1, 3)
        _ = a + b
        assert a == Fraction(1, 2)
        assert b == Fraction(1, 3)

    def test_augmented_assignment(self) -> None:
        """+= создаёт новый объект"""
        a = Fraction(1, 2)
        original = a
        a += Fraction(1, 2)
        assert a == Fraction.ONE
        assert original == Fraction(1, 2)


class TestSubtraction:
    """Вычитание"""

    def test_basic(self) -> None:
        assert Fraction(3, 4).subtract(Fraction(1, 4)) == Fraction(1, 2)
        assert Fraction(1, 2) - Fraction(1, 3) == Fraction(1, 6)

    def test_negative_result(self) -> None:
        assert Fraction(1, 3) - Fraction(1, 2) == Fraction(-1, 6)

    def test_with_int(self) -> None:
        assert Fraction(5, 2) - 2 == Fraction(1, 2)
        assert 2 - Fraction(1, 2) == Fraction(3, 2)

    def test_self_subtraction_is_zero(self) -> None:
        result = Fraction(7, 9) - Fraction(7, 9)
        assert (result.numerator, result.denominator) == (0, 1)


# =============================================================================
# ТЕСТЫ: умножение и деление
# =============================================================================


class TestMultiplication:
    """Умножение"""

    def test_basic(self) -> None:
        assert Fraction(2, 3).multiply(Fraction(3, 4)) == Fraction(1, 2)
        assert Fraction(-2, 3) * Fraction(3, -4) == Fraction(1, 2)

    def test_with_int(self) -> None:
        assert Fraction(1, 3) * 3 == Fraction.ONE
        assert 4 * Fraction(1, 8) == Fraction(1, 2)

    def test_by_zero(self) -> None:
        result = Fraction(5, 7) * 0
        assert (result.numerator, result.denominator) == (0, 1)


class TestDivision:
    """Деление"""

    def test_basic(self) -> None:
        assert Fraction(1, 2).divide(Fraction(1, 4)) == Fraction(2)
        assert Fraction(3, 4) / Fraction(-3, 8) == Fraction(-2)

    def test_with_int(self) -> None:
        assert Fraction(1, 2) / 2 == Fraction(1, 4)
        assert 1 / Fraction(1, 3) == Fraction(3)

    def test_sign_moved_to_numerator(self) -> None:
        result = Fraction(1, 2) / Fraction(-1, 3)
        assert (result.numerator, result.denominator) == (-3, 2)

    def test_divide_by_zero_fraction(self) -> None:
        with pytest.raises(DivisionByZero):
            Fraction(1, 2).divide(Fraction.ZERO)

        with pytest.raises(DivisionByZero):
            Fraction(1, 2) / 0

        with pytest.raises(ZeroDivisionError):
            5 / Fraction.ZERO

    def test_zero_divided(self) -> None:
        assert Fraction.ZERO / Fraction(3, 4) == Fraction.ZERO


# =============================================================================
# ТЕСТЫ: унарные операции
# =============================================================================


class TestUnary:
    """negate, reciprocal, abs, +"""

    def test_negate(self) -> None:
        assert Fraction(1, 2).negate() == Fraction(-1, 2)
        assert -Fraction(-3, 4) == Fraction(3, 4)
        assert -Fraction.ZERO == Fraction.ZERO

    def test_reciprocal(self) -> None:
        assert Fraction(2, 3).reciprocal() == Fraction(3, 2)
        assert Fraction(7).reciprocal() == Fraction(1, 7)

    def test_reciprocal_keeps_positive_denominator(self) -> None:
        result = Fraction(-2, 3).reciprocal()
        assert (result.numerator, result.denominator) == (-3, 2)

    def test_reciprocal_of_zero(self) -> None:
        with pytest.raises(DivisionByZero, match="reciprocal"):
            Fraction(0, 1).reciprocal()

    def test_abs(self) -> None:
        assert abs(Fraction(-1, 2)) == Fraction(1, 2)
        assert abs(Fraction(1, 2)) == Fraction(1, 2)

    def test_pos(self) -> None:
        f = Fraction(1, 2)
        assert +f is f


# =============================================================================
# ТЕСТЫ: степени
# =============================================================================


class TestPower:
    """power / **"""

    @pytest.mark.parametrize(
        "base, exponent, expected",
        [
            (Fraction(2), 0, Fraction(1)),
            (Fraction(2), 5, Fraction(32)),
            (Fraction(2), -1, Fraction(1, 2)),
            (Fraction(2), -3, Fraction(1, 8)),
            (Fraction(3), -2, Fraction(1, 9)),
            (Fraction(-2), 3, Fraction(-8)),
            (Fraction(-2), -1, Fraction(-1, 2)),
            (Fraction(-3), -3, Fraction(-1, 27)),
            (Fraction(-1), 2, Fraction(1)),
            (Fraction(2, 3), 2, Fraction(4, 9)),
            (Fraction.ZERO, 0, Fraction.ONE),
            (Fraction.ZERO, 3, Fraction.ZERO),
            (Fraction.ONE, -3, Fraction.ONE),
        ],
    )
    def test_power(self, base: Fraction, exponent: int, expected: Fraction) -> None:
        assert base.power(exponent) == expected
        assert base**exponent == expected

    def test_zero_negative_power(self) -> None:
        with pytest.raises(DivisionByZero):
            Fraction.ZERO.power(-1)

    def test_non_int_exponent(self) -> None:
        with pytest.raises(TypeError):
            Fraction(2).power(0.5)  # type: ignore[arg-type]

        with pytest.raises(TypeError):
            Fraction(2) ** 0.5


# =============================================================================
# ТЕСТЫ: неподдерживаемые операнды
# =============================================================================


class TestUnsupportedOperands:
    """float, str, bool не являются операндами"""

    @pytest.mark.parametrize("other", [0.5, "1/2", True, None])
    def test_operators_raise_type_error(self, other: object) -> None:
        f = Fraction(1, 2)
        with pytest.raises(TypeError):
            f + other  # type: ignore[operator]
        with pytest.raises(TypeError):
            other * f  # type: ignore[operator]

    def test_methods_raise_type_error(self) -> None:
        with pytest.raises(TypeError, match="unsupported operand"):
            Fraction(1, 2).add(0.5)  # type: ignore[arg-type]


# =============================================================================
# ПРАКТИЧЕСКИЙ ПРИМЕР: нотные точки
# =============================================================================


def dot_factor(dots: int) -> Fraction:
    """Длительность ноты с dots точками относительно длительности без точек."""
    if dots == 0:
        return Fraction.ONE
    squared = 2 << (dots - 1)
    return 1 + Fraction(1, squared) * (squared - 1)


class TestDotFactor:
    """Каждая точка добавляет половину предыдущей добавки"""

    def test_matches_float_formula(self) -> None:
        for dots in range(0, 9):
            expected = 1.0 if dots == 0 else 1 + (1 / 2.0**dots) * (2.0**dots - 1)
            assert dot_factor(dots).to_float() == expected

    def test_exact_values(self) -> None:
        assert dot_factor(1) == Fraction(3, 2)
        assert dot_factor(2) == Fraction(7, 4)
        assert dot_factor(3) == Fraction(15, 8)
