"""
Fraction — точное рациональное число

Immutable Pydantic модель: пара numerator/denominator, всегда хранимая
в несократимой форме с положительным знаменателем.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. denominator > 0 (знак дроби несёт числитель)
2. gcd(|numerator|, denominator) == 1 после любой публичной операции
3. Ноль представлен как 0/1
4. Нулевой знаменатель → DivisionByZero, никогда не усечение
5. Экземпляр никогда не изменяется: все операции возвращают новый Fraction

Арифметика: cross-multiplication с последующей нормализацией
    a/b + c/d = (ad + bc) / bd
    a/b - c/d = (ad - bc) / bd
    a/b * c/d = ac / bd
    a/b / c/d = ad / bc
    a/b < c/d  ⇔  ad < cb   (b, d > 0)

Переполнение: по умолчанию Python int (произвольная точность). В режиме
local_config(int_bits=N) входы, промежуточные произведения и результаты
проверяются на диапазон N-битного целого (IntegerOverflow).
"""

import math
import numbers
import sys
from decimal import Decimal
from enum import Enum
from typing import Any, ClassVar, Optional, Union

from pydantic import BaseModel, Field, model_validator

from fractionkit.core.errors import DivisionByZero
from fractionkit.core.math.context import get_config
from fractionkit.core.math.integer_arithmetic import (
    check_int,
    checked_add,
    checked_mul,
    checked_neg,
    checked_sub,
    div_round_half_even,
    div_round_half_up,
    int_digits,
    reduce_pair,
)
from fractionkit.core.domain.text_format import format_fraction, parse_fraction


# =============================================================================
# ENUMS
# =============================================================================


class Ordering(str, Enum):
    """Результат сравнения двух дробей."""

    LESS = "less"
    EQUAL = "equal"
    GREATER = "greater"

    @classmethod
    def from_difference(cls, difference: int) -> "Ordering":
        if difference < 0:
            return cls.LESS
        if difference > 0:
            return cls.GREATER
        return cls.EQUAL


# =============================================================================
# HELPERS
# =============================================================================

RationalLike = Union["Fraction", int, numbers.Rational]

# Параметры числового хэша CPython (совместимость hash с int и fractions.Fraction)
_HASH_MODULUS = sys.hash_info.modulus
_HASH_INF = sys.hash_info.inf

# Порядок полей для позиционного вызова Fraction(n, d)
_POSITIONAL_FIELDS = ("numerator", "denominator")


def _is_plain_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _coerce(value: Any) -> Optional["Fraction"]:
    """Приведение операнда к Fraction; None если тип не поддерживается."""
    if isinstance(value, Fraction):
        return value
    if isinstance(value, bool):
        return None
    if isinstance(value, numbers.Rational):
        return Fraction(int(value.numerator), int(value.denominator))
    return None


def _decimal_literal_pair(value: float, digits: int) -> tuple[int, int]:
    """
    Пара (numerator, 10**digits) для десятичной записи float.

    Используется кратчайшее repr-представление float, а не его двоичное
    значение: 0.1 → 1/10, а не 3602879701896397/36028797018963968.
    Округление half away from zero.
    """
    exact_numerator, exact_denominator = Decimal(repr(value)).as_integer_ratio()
    scale = 10**digits
    return div_round_half_up(exact_numerator * scale, exact_denominator), scale


# =============================================================================
# FRACTION MODEL
# =============================================================================


class Fraction(BaseModel):
    """
    Точная дробь numerator/denominator.

    Создание:
        Fraction(1, 2)                       # 1/2
        Fraction(3)                          # 3/1
        Fraction(2, -4)                      # -1/2 (нормализовано)
        Fraction.parse("-3/4")
        Fraction.from_float(0.333333)        # 3333/10000
        Fraction.from_mixed(1000, 1, 2)      # 2001/2
        Fraction.model_validate_json('{"numerator": 3, "denominator": -4}')

    Арифметика доступна через методы (add, subtract, multiply, divide,
    negate, reciprocal, power) и через операторы (+ - * / ** унарный -).
    Операндом может быть Fraction, int или любой numbers.Rational.
    """

    numerator: int = Field(..., description="Числитель (несёт знак дроби)")
    denominator: int = Field(..., gt=0, description="Знаменатель (всегда > 0)")

    model_config = {"frozen": True, "strict": True, "extra": "forbid"}  # Immutable

    ZERO: ClassVar["Fraction"]
    ONE: ClassVar["Fraction"]

    def __init__(self, *args: int, **data: Any) -> None:
        """
        Fraction(numerator, denominator=1) или Fraction(numerator=..., denominator=...).

        Позиционная форма подставляет denominator=1. Keyword-форма (ей же
        пользуются model_validate / model_validate_json) требует оба поля.
        """
        if len(args) > 2:
            raise TypeError(f"Fraction takes at most 2 positional arguments, got {len(args)}")
        if args:
            for name, value in zip(_POSITIONAL_FIELDS, args):
                if name in data:
                    raise TypeError(f"Fraction got multiple values for argument '{name}'")
                data[name] = value
            data.setdefault("denominator", 1)
        super().__init__(**data)

    @model_validator(mode="before")
    @classmethod
    def normalize_input(cls, data: Any) -> Any:
        """
        Нормализация входа до проверки типов.

        Принимает dict {numerator, denominator}, int, float (через
        from_float) и строку (через parse_fraction). Нецелые поля
        пропускаются без изменений и отвергаются strict-валидацией.
        """
        if isinstance(data, (Fraction, bool)):
            return data

        if isinstance(data, int):
            data = {"numerator": data, "denominator": 1}
        elif isinstance(data, float):
            numerator, denominator = cls._float_pair(data, None)
            data = {"numerator": numerator, "denominator": denominator}
        elif isinstance(data, str):
            numerator, denominator = parse_fraction(data)
            data = {"numerator": numerator, "denominator": denominator}

        if isinstance(data, dict):
            numerator = data.get("numerator")
            denominator = data.get("denominator")
            if _is_plain_int(numerator) and _is_plain_int(denominator):
                bits = get_config().int_bits
                check_int(numerator, bits, "numerator")
                check_int(denominator, bits, "denominator")
                numerator, denominator = reduce_pair(numerator, denominator)
                return {**data, "numerator": numerator, "denominator": denominator}

        return data

    # -------------------------------------------------------------------------
    # Альтернативные конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def parse(cls, text: str) -> "Fraction":
        """
        Разбор строки "n" или "n/d".

        Raises:
            InvalidFormat: Некорректный текст
            DivisionByZero: Нулевой знаменатель
        """
        numerator, denominator = parse_fraction(text)
        return cls(numerator, denominator)

    @classmethod
    def from_float(cls, value: float, digits: Optional[int] = None) -> "Fraction":
        """
        Конверсия float с округлением до digits десятичных знаков.

        Args:
            value: Конечное значение float
            digits: Число десятичных знаков (default: ArithmeticConfig.float_digits)

        Raises:
            ValueError: Если value NaN/Inf или digits < 0

        Examples:
            >>> Fraction.from_float(0.5)
            Fraction(numerator=1, denominator=2)
            >>> str(Fraction.from_float(0.123456789))
            '247/2000'
        """
        if _is_plain_int(value):
            return cls(value)
        numerator, denominator = cls._float_pair(value, digits)
        return cls(numerator, denominator)

    @classmethod
    def _float_pair(cls, value: float, digits: Optional[int]) -> tuple[int, int]:
        if not math.isfinite(value):
            raise ValueError(f"value must be a valid float (not NaN/Inf), got {value}")
        if digits is None:
            digits = get_config().float_digits
        if digits < 0:
            raise ValueError(f"digits must be non-negative, got {digits}")
        return _decimal_literal_pair(value, digits)

    @classmethod
    def from_mixed(cls, wholes: int, numerator: int, denominator: int) -> "Fraction":
        """
        Смешанное число "wholes numerator/denominator".

        Знак wholes относится ко всему значению: from_mixed(-1, 1, 2) == -3/2.

        Raises:
            ValueError: Если numerator или denominator отрицательны
            DivisionByZero: Если denominator == 0
        """
        if numerator < 0 or denominator < 0:
            raise ValueError(
                f"mixed number parts must be non-negative, got {numerator}/{denominator}"
            )
        part = cls(numerator, denominator)
        if wholes < 0:
            return cls(wholes).subtract(part)
        return part.add(wholes)

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    @staticmethod
    def _operand(other: RationalLike) -> "Fraction":
        rhs = _coerce(other)
        if rhs is None:
            raise TypeError(f"unsupported operand type for Fraction: {type(other).__name__}")
        return rhs

    def add(self, other: RationalLike) -> "Fraction":
        """Сумма self + other."""
        rhs = self._operand(other)
        bits = get_config().int_bits

        if self.denominator == rhs.denominator:
            numerator = checked_add(self.numerator, rhs.numerator, bits)
            return Fraction(numerator, self.denominator)

        numerator = checked_add(
            checked_mul(self.numerator, rhs.denominator, bits),
            checked_mul(rhs.numerator, self.denominator, bits),
            bits,
        )
        denominator = checked_mul(self.denominator, rhs.denominator, bits)
        return Fraction(numerator, denominator)

    def subtract(self, other: RationalLike) -> "Fraction":
        """Разность self - other."""
        rhs = self._operand(other)
        bits = get_config().int_bits

        if self.denominator == rhs.denominator:
            numerator = checked_sub(self.numerator, rhs.numerator, bits)
            return Fraction(numerator, self.denominator)

        numerator = checked_sub(
            checked_mul(self.numerator, rhs.denominator, bits),
            checked_mul(rhs.numerator, self.denominator, bits),
            bits,
        )
        denominator = checked_mul(self.denominator, rhs.denominator, bits)
        return Fraction(numerator, denominator)

    def multiply(self, other: RationalLike) -> "Fraction":
        """Произведение self * other."""
        rhs = self._operand(other)
        bits = get_config().int_bits
        return Fraction(
            checked_mul(self.numerator, rhs.numerator, bits),
            checked_mul(self.denominator, rhs.denominator, bits),
        )

    def divide(self, other: RationalLike) -> "Fraction":
        """
        Частное self / other.

        Raises:
            DivisionByZero: Если other равен нулю
        """
        rhs = self._operand(other)
        if rhs.numerator == 0:
            raise DivisionByZero(f"cannot divide {self} by zero")

        bits = get_config().int_bits
        return Fraction(
            checked_mul(self.numerator, rhs.denominator, bits),
            checked_mul(self.denominator, rhs.numerator, bits),
        )

    def negate(self) -> "Fraction":
        return Fraction(checked_neg(self.numerator, get_config().int_bits), self.denominator)

    def reciprocal(self) -> "Fraction":
        """
        Обратная дробь d/n.

        Raises:
            DivisionByZero: Если self равен нулю
        """
        if self.numerator == 0:
            raise DivisionByZero("zero has no reciprocal")
        return Fraction(self.denominator, self.numerator)

    def power(self, exponent: int) -> "Fraction":
        """
        Целая степень.

        Отрицательная степень вычисляется через reciprocal, поэтому
        ноль в отрицательной степени поднимает DivisionByZero.
        x ** 0 == 1 для любого x, включая ноль.
        """
        if not _is_plain_int(exponent):
            raise TypeError(f"exponent must be int, got {type(exponent).__name__}")
        if exponent < 0:
            return self.reciprocal().power(-exponent)

        bits = get_config().int_bits
        return Fraction(
            check_int(self.numerator**exponent, bits, "numerator"),
            check_int(self.denominator**exponent, bits, "denominator"),
        )

    # -------------------------------------------------------------------------
    # Сравнение
    # -------------------------------------------------------------------------

    def compare(self, other: RationalLike) -> Ordering:
        """Сравнение через cross-multiplication (знаменатели положительны)."""
        rhs = self._operand(other)
        bits = get_config().int_bits
        lhs_product = checked_mul(self.numerator, rhs.denominator, bits)
        rhs_product = checked_mul(rhs.numerator, self.denominator, bits)
        return Ordering.from_difference(lhs_product - rhs_product)

    def equals(self, other: RationalLike) -> bool:
        """Структурное равенство нормализованных значений."""
        rhs = self._operand(other)
        return self.numerator == rhs.numerator and self.denominator == rhs.denominator

    # -------------------------------------------------------------------------
    # Предикаты
    # -------------------------------------------------------------------------

    def is_zero(self) -> bool:
        return self.numerator == 0

    def is_integer(self) -> bool:
        return self.denominator == 1

    def sign(self) -> int:
        """-1, 0 или 1."""
        return (self.numerator > 0) - (self.numerator < 0)

    # -------------------------------------------------------------------------
    # Конверсии
    # -------------------------------------------------------------------------

    def to_float(self) -> float:
        """
        Ближайший float (correctly rounded).

        Никогда не падает: значения вне диапазона float насыщаются до ±inf,
        слишком малые дают 0.0.
        """
        try:
            return self.numerator / self.denominator
        except OverflowError:
            return math.inf if self.numerator > 0 else -math.inf

    def to_decimal(self, precision: Optional[int] = None) -> Decimal:
        """
        Decimal с precision знаками после запятой (round half even).

        Вычисляется точно в целых числах, не зависит от decimal-контекста.

        Args:
            precision: Знаки после запятой (default: ArithmeticConfig.decimal_precision)

        Raises:
            ValueError: Если precision < 0

        Examples:
            >>> Fraction(1, 3).to_decimal(4)
            Decimal('0.3333')
            >>> Fraction(-5, 8).to_decimal(2)
            Decimal('-0.62')
        """
        if precision is None:
            precision = get_config().decimal_precision
        if precision < 0:
            raise ValueError(f"precision must be non-negative, got {precision}")

        scaled = div_round_half_even(self.numerator * 10**precision, self.denominator)
        return Decimal((1 if scaled < 0 else 0, int_digits(scaled), -precision))

    def to_mixed(self) -> tuple[int, "Fraction"]:
        """
        Разложение на целую часть и остаток (усечение к нулю).

        wholes + remainder == self, |remainder| < 1, знак remainder совпадает
        со знаком self.
        """
        wholes = int(self)
        return wholes, self.subtract(wholes)

    def to_string(self) -> str:
        """Каноническая форма: "n/d" или "n" при d == 1."""
        return format_fraction(self.numerator, self.denominator)

    # -------------------------------------------------------------------------
    # Python protocol
    # -------------------------------------------------------------------------

    def __str__(self) -> str:
        return self.to_string()

    def __float__(self) -> float:
        return self.to_float()

    def __int__(self) -> int:
        if self.numerator < 0:
            return -(-self.numerator // self.denominator)
        return self.numerator // self.denominator

    def __floor__(self) -> int:
        return self.numerator // self.denominator

    def __ceil__(self) -> int:
        return -(-self.numerator // self.denominator)

    def __bool__(self) -> bool:
        return self.numerator != 0

    def __hash__(self) -> int:
        # Тот же алгоритм, что у fractions.Fraction: hash(Fraction(n)) == hash(n)
        try:
            inverse = pow(self.denominator, -1, _HASH_MODULUS)
        except ValueError:
            hash_ = _HASH_INF
        else:
            hash_ = hash(hash(abs(self.numerator)) * inverse)
        result = hash_ if self.numerator >= 0 else -hash_
        return -2 if result == -1 else result

    def __eq__(self, other: object) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self.equals(rhs)

    def __lt__(self, other: object) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self.compare(rhs) is Ordering.LESS

    def __le__(self, other: object) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self.compare(rhs) is not Ordering.GREATER

    def __gt__(self, other: object) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self.compare(rhs) is Ordering.GREATER

    def __ge__(self, other: object) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self.compare(rhs) is not Ordering.LESS

    def __add__(self, other: Any) -> "Fraction":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self.add(rhs)

    def __radd__(self, other: Any) -> "Fraction":
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs.add(self)

    def __sub__(self, other: Any) -> "Fraction":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self.subtract(rhs)

    def __rsub__(self, other: Any) -> "Fraction":
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs.subtract(self)

    def __mul__(self, other: Any) -> "Fraction":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self.multiply(rhs)

    def __rmul__(self, other: Any) -> "Fraction":
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs.multiply(self)

    def __truediv__(self, other: Any) -> "Fraction":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self.divide(rhs)

    def __rtruediv__(self, other: Any) -> "Fraction":
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs.divide(self)

    def __pow__(self, exponent: Any) -> "Fraction":
        if not _is_plain_int(exponent):
            return NotImplemented
        return self.power(exponent)

    def __neg__(self) -> "Fraction":
        return self.negate()

    def __pos__(self) -> "Fraction":
        return self

    def __abs__(self) -> "Fraction":
        if self.numerator < 0:
            return self.negate()
        return self


Fraction.ZERO = Fraction(0, 1)
Fraction.ONE = Fraction(1, 1)
