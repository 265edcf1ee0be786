"""
Arithmetic Context — конфигурация рациональной арифметики

Активная конфигурация хранится в ContextVar: каждый поток и каждая
asyncio-задача видят собственное значение, синхронизация не требуется.

Параметры:
- int_bits: None (произвольная точность, по умолчанию) или разрядность
  fixed-width режима, в котором переполнение поднимает IntegerOverflow
- float_digits: число десятичных знаков для Fraction.from_float
- decimal_precision: число знаков после запятой для Fraction.to_decimal
"""

from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, replace
from typing import Any, Final, Iterator, Optional

from fractionkit.core.math.integer_arithmetic import MIN_INT_BITS

# =============================================================================
# ЗНАЧЕНИЯ ПО УМОЛЧАНИЮ
# =============================================================================

# Десятичные знаки при конверсии float → Fraction (0.333333 → 3333/10000)
FLOAT_DIGITS_DEFAULT: Final[int] = 4

# Знаки после запятой для to_decimal() без явного precision
DECIMAL_PRECISION_DEFAULT: Final[int] = 16


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class ArithmeticConfig:
    """Конфигурация арифметики.

    int_bits=None означает Python int без ограничений. При int_bits=64
    поведение соответствует нативному Int: входы, промежуточные
    cross-products и результаты проверяются на диапазон.
    """

    int_bits: Optional[int] = None
    float_digits: int = FLOAT_DIGITS_DEFAULT
    decimal_precision: int = DECIMAL_PRECISION_DEFAULT

    def __post_init__(self) -> None:
        if self.int_bits is not None and self.int_bits < MIN_INT_BITS:
            raise ValueError(f"int_bits must be >= {MIN_INT_BITS} or None, got {self.int_bits}")
        if self.float_digits < 0:
            raise ValueError(f"float_digits must be non-negative, got {self.float_digits}")
        if self.decimal_precision < 0:
            raise ValueError(
                f"decimal_precision must be non-negative, got {self.decimal_precision}"
            )


DEFAULT_CONFIG: Final[ArithmeticConfig] = ArithmeticConfig()

_config: ContextVar[ArithmeticConfig] = ContextVar("fractionkit_config", default=DEFAULT_CONFIG)


# =============================================================================
# ДОСТУП К АКТИВНОЙ КОНФИГУРАЦИИ
# =============================================================================


def get_config() -> ArithmeticConfig:
    """Активная конфигурация текущего контекста."""
    return _config.get()


def set_config(config: ArithmeticConfig) -> Token[ArithmeticConfig]:
    """
    Установка конфигурации для текущего контекста.

    Returns:
        Token для восстановления предыдущего значения через reset_config
    """
    return _config.set(config)


def reset_config(token: Token[ArithmeticConfig]) -> None:
    _config.reset(token)


@contextmanager
def local_config(**overrides: Any) -> Iterator[ArithmeticConfig]:
    """
    Временная конфигурация на время блока with.

    Examples:
        >>> with local_config(int_bits=64):
        ...     Fraction(2**62, 1) * 4  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        IntegerOverflow: ...
    """
    config = replace(get_config(), **overrides)
    token = _config.set(config)
    try:
        yield config
    finally:
        _config.reset(token)
