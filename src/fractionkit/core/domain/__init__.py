"""
Domain models and value objects.

Contains the Fraction value type and its textual interchange format.
"""

from fractionkit.core.domain.fraction import Fraction, Ordering, RationalLike
from fractionkit.core.domain.text_format import (
    FRACTION_PATTERN,
    format_fraction,
    parse_fraction,
)

__all__ = [
    # Fraction model
    "Fraction",
    "Ordering",
    "RationalLike",
    # Text format
    "FRACTION_PATTERN",
    "format_fraction",
    "parse_fraction",
]
