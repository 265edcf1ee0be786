"""
fractionkit — exact rational number arithmetic.

    >>> from fractionkit import Fraction
    >>> Fraction(1, 2) + Fraction(1, 3)
    Fraction(numerator=5, denominator=6)
"""

from fractionkit.core.domain import Fraction, Ordering, format_fraction, parse_fraction
from fractionkit.core.errors import (
    DivisionByZero,
    FractionError,
    IntegerOverflow,
    InvalidFormat,
)
from fractionkit.core.math import ArithmeticConfig, get_config, local_config, set_config

__version__ = "1.0.0"

__all__ = [
    "__version__",
    # Value type
    "Fraction",
    "Ordering",
    "format_fraction",
    "parse_fraction",
    # Errors
    "FractionError",
    "DivisionByZero",
    "InvalidFormat",
    "IntegerOverflow",
    # Configuration
    "ArithmeticConfig",
    "get_config",
    "local_config",
    "set_config",
]
