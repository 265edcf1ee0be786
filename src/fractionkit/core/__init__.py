"""
Core value types, integer primitives, and contracts.

This module contains the foundational building blocks of fractionkit;
none of them perform I/O apart from reading bundled schema files.
"""

from fractionkit.core.errors import (
    DivisionByZero,
    FractionError,
    IntegerOverflow,
    InvalidFormat,
)

__all__ = [
    "FractionError",
    "DivisionByZero",
    "InvalidFormat",
    "IntegerOverflow",
]
