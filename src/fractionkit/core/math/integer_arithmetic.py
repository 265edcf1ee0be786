"""
Integer Arithmetic — целочисленные примитивы для рациональной арифметики

Модуль обеспечивает:
- Алгоритм Евклида для НОД
- Нормализацию пары (numerator, denominator): несократимость и положительный знаменатель
- Checked-операции для fixed-width режима (переполнение поднимает IntegerOverflow)
- Точное целочисленное деление с округлением (half-even, half-up)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. reduce_pair никогда не возвращает знаменатель <= 0
2. gcd(|numerator|, denominator) == 1 для любого результата reduce_pair
3. При bits=None (по умолчанию) переполнение невозможно: Python int неограничен
4. В fixed-width режиме переполнение никогда не "заворачивается" молча
"""

from decimal import Decimal
from typing import Final, Optional

from fractionkit.core.errors import DivisionByZero, IntegerOverflow
from fractionkit.observability import get_logger

logger = get_logger(__name__)

# =============================================================================
# РАЗРЯДНОСТИ
# =============================================================================

# Разрядность нативного Int исходной реализации
INT64_BITS: Final[int] = 64

# Минимальная осмысленная разрядность: знак + хотя бы один бит значения
MIN_INT_BITS: Final[int] = 2


# =============================================================================
# НОД И НОРМАЛИЗАЦИЯ
# =============================================================================


def gcd(a: int, b: int) -> int:
    """
    Наибольший общий делитель по алгоритму Евклида.

    Работает с абсолютными значениями, результат всегда >= 0.

    Examples:
        >>> gcd(12, 18)
        6
        >>> gcd(-4, 6)
        2
        >>> gcd(0, 5)
        5
        >>> gcd(0, 0)
        0
    """
    u, v = abs(a), abs(b)
    while v != 0:
        u, v = v, u % v
    return u


def reduce_pair(numerator: int, denominator: int) -> tuple[int, int]:
    """
    Нормализация пары numerator/denominator.

    Делит оба поля на НОД и переносит знак в числитель.

    Args:
        numerator: Числитель (любой знак)
        denominator: Знаменатель (любой знак, кроме 0)

    Returns:
        (numerator, denominator) в несократимой форме, denominator > 0.
        Ноль всегда представлен как (0, 1).

    Raises:
        DivisionByZero: Если denominator == 0

    Examples:
        >>> reduce_pair(2, 4)
        (1, 2)
        >>> reduce_pair(3, -4)
        (-3, 4)
        >>> reduce_pair(0, -7)
        (0, 1)
    """
    if denominator == 0:
        raise DivisionByZero(
            f"denominator must be nonzero (numerator={int_to_text(numerator)})"
        )

    divisor = gcd(numerator, denominator)
    numerator //= divisor
    denominator //= divisor

    if denominator < 0:
        numerator, denominator = -numerator, -denominator

    return numerator, denominator


# =============================================================================
# ДЕСЯТИЧНАЯ ЗАПИСЬ
# =============================================================================

# str(int) и int(str) ограничены sys.get_int_max_str_digits() (4300 цифр);
# конверсия int <-> Decimal этому ограничению не подлежит.


def int_to_text(value: int) -> str:
    """
    Десятичная запись целого любой длины.

    Examples:
        >>> int_to_text(-42)
        '-42'
        >>> len(int_to_text(10**5000))
        5001
    """
    return str(Decimal(value))


def text_to_int(digits: str) -> int:
    """
    Целое из строки ASCII-цифр с необязательным "-" (формат уже проверен).

    Examples:
        >>> text_to_int("007")
        7
        >>> text_to_int("-0")
        0
    """
    return int(Decimal(digits))


def int_digits(value: int) -> tuple[int, ...]:
    """Десятичные цифры |value| для конструктора Decimal((sign, digits, exp))."""
    return Decimal(abs(value)).as_tuple().digits


# =============================================================================
# FIXED-WIDTH ДИАПАЗОН
# =============================================================================


def int_bounds(bits: int) -> tuple[int, int]:
    """
    Допустимый диапазон значений для разрядности bits.

    Нижняя граница -(2**(bits-1)) исключена: её нельзя сменить на
    положительную, а нормализация знака требует именно этого.

    Examples:
        >>> int_bounds(8)
        (-127, 127)
    """
    if bits < MIN_INT_BITS:
        raise ValueError(f"bits must be >= {MIN_INT_BITS}, got {bits}")

    limit = (1 << (bits - 1)) - 1
    return -limit, limit


def check_int(value: int, bits: Optional[int], name: str = "value") -> int:
    """
    Проверка, что значение помещается в разрядность.

    Args:
        value: Проверяемое значение
        bits: Разрядность или None (неограниченно)
        name: Имя операнда (для сообщения об ошибке)

    Returns:
        value без изменений

    Raises:
        IntegerOverflow: Если value вне int_bounds(bits)
    """
    if bits is None:
        return value

    low, high = int_bounds(bits)
    if value < low or value > high:
        logger.debug("integer overflow", value_name=name, bits=bits)
        raise IntegerOverflow(
            f"{name} {int_to_text(value)} does not fit in {bits}-bit range "
            f"[{int_to_text(low)}, {int_to_text(high)}]",
            value=value,
            bits=bits,
        )
    return value


def checked_add(a: int, b: int, bits: Optional[int] = None) -> int:
    """Сложение с проверкой переполнения."""
    return check_int(a + b, bits, "sum")


def checked_sub(a: int, b: int, bits: Optional[int] = None) -> int:
    """Вычитание с проверкой переполнения."""
    return check_int(a - b, bits, "difference")


def checked_mul(a: int, b: int, bits: Optional[int] = None) -> int:
    """Умножение с проверкой переполнения."""
    return check_int(a * b, bits, "product")


def checked_neg(a: int, bits: Optional[int] = None) -> int:
    return check_int(-a, bits, "negation")


# =============================================================================
# ДЕЛЕНИЕ С ОКРУГЛЕНИЕМ
# =============================================================================


def div_round_half_even(numerator: int, denominator: int) -> int:
    """
    Точное numerator / denominator, округлённое до целого (banker's rounding).

    Args:
        numerator: Делимое
        denominator: Делитель (> 0)

    Examples:
        >>> div_round_half_even(5, 2)
        2
        >>> div_round_half_even(7, 2)
        4
        >>> div_round_half_even(-5, 2)
        -2
    """
    if denominator <= 0:
        raise ValueError(f"denominator must be positive, got {denominator}")

    quotient, remainder = divmod(numerator, denominator)
    twice = 2 * remainder
    if twice > denominator or (twice == denominator and quotient % 2 == 1):
        quotient += 1
    return quotient


def div_round_half_up(numerator: int, denominator: int) -> int:
    """
    Точное numerator / denominator, округлённое до целого (half away from zero).

    Examples:
        >>> div_round_half_up(5, 2)
        3
        >>> div_round_half_up(-5, 2)
        -3
        >>> div_round_half_up(4, 3)
        1
    """
    if denominator <= 0:
        raise ValueError(f"denominator must be positive, got {denominator}")

    quotient, remainder = divmod(abs(numerator), denominator)
    if 2 * remainder >= denominator:
        quotient += 1
    return quotient if numerator >= 0 else -quotient
