"""
Core math modules для fractionkit

Целочисленные примитивы и конфигурация арифметики.
"""

# Integer Arithmetic
from fractionkit.core.math.integer_arithmetic import (
    # Constants
    INT64_BITS,
    MIN_INT_BITS,
    # GCD / normalization
    gcd,
    reduce_pair,
    # Fixed-width checks
    check_int,
    checked_add,
    checked_mul,
    checked_neg,
    checked_sub,
    int_bounds,
    # Rounding division
    div_round_half_even,
    div_round_half_up,
    # Decimal text
    int_digits,
    int_to_text,
    text_to_int,
)

# Arithmetic Context
from fractionkit.core.math.context import (
    DECIMAL_PRECISION_DEFAULT,
    DEFAULT_CONFIG,
    FLOAT_DIGITS_DEFAULT,
    ArithmeticConfig,
    get_config,
    local_config,
    reset_config,
    set_config,
)

__all__ = [
    # Integer Arithmetic — Constants
    "INT64_BITS",
    "MIN_INT_BITS",
    # Integer Arithmetic — GCD / normalization
    "gcd",
    "reduce_pair",
    # Integer Arithmetic — Fixed-width checks
    "check_int",
    "checked_add",
    "checked_mul",
    "checked_neg",
    "checked_sub",
    "int_bounds",
    # Integer Arithmetic — Rounding division
    "div_round_half_even",
    "div_round_half_up",
    # Integer Arithmetic — Decimal text
    "int_digits",
    "int_to_text",
    "text_to_int",
    # Arithmetic Context — Constants
    "DECIMAL_PRECISION_DEFAULT",
    "DEFAULT_CONFIG",
    "FLOAT_DIGITS_DEFAULT",
    # Arithmetic Context — Types
    "ArithmeticConfig",
    # Arithmetic Context — Functions
    "get_config",
    "local_config",
    "reset_config",
    "set_config",
]
