"""
Text Format — каноническое текстовое представление дроби

Формат обмена (ASCII):
    "<integer>"                      например "3", "-7", "0"
    "<integer>/<positive integer>"   например "1/2", "-3/4"

Знак "-" допускается только перед числителем. Пробелы, "+", разделители
разрядов и не-ASCII цифры не допускаются.
"""

import re
from typing import Final

from fractionkit.core.errors import InvalidFormat
from fractionkit.core.math.integer_arithmetic import int_to_text, reduce_pair, text_to_int
from fractionkit.observability import get_logger

logger = get_logger(__name__)

FRACTION_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"(?P<numerator>-?[0-9]+)(?:/(?P<denominator>[0-9]+))?",
    re.ASCII,
)

# Разделитель числителя и знаменателя
SEPARATOR: Final[str] = "/"


def format_fraction(numerator: int, denominator: int) -> str:
    """
    Форматирование нормализованной пары.

    Examples:
        >>> format_fraction(1, 2)
        '1/2'
        >>> format_fraction(-3, 1)
        '-3'
    """
    if denominator == 1:
        return int_to_text(numerator)
    return f"{int_to_text(numerator)}{SEPARATOR}{int_to_text(denominator)}"


def parse_fraction(text: str) -> tuple[int, int]:
    """
    Разбор текстового представления.

    Args:
        text: Строка формата "n" или "n/d"

    Returns:
        Нормализованная пара (numerator, denominator)

    Raises:
        InvalidFormat: Если text не строка или не соответствует формату
        DivisionByZero: Если разобранный знаменатель равен 0

    Examples:
        >>> parse_fraction("2/4")
        (1, 2)
        >>> parse_fraction("-6")
        (-6, 1)
    """
    if not isinstance(text, str):
        raise InvalidFormat(f"expected str, got {type(text).__name__}", text=text)

    match = FRACTION_PATTERN.fullmatch(text)
    if match is None:
        logger.debug("rejected fraction text", text=text[:64])
        raise InvalidFormat(f"invalid fraction literal: {text!r}", text=text)

    numerator = text_to_int(match.group("numerator"))
    denominator_text = match.group("denominator")
    denominator = 1 if denominator_text is None else text_to_int(denominator_text)

    return reduce_pair(numerator, denominator)
