"""
Errors — иерархия исключений fractionkit

Все ошибки наследуются от FractionError и одновременно от стандартного
исключения Python соответствующего рода, чтобы вызывающий код мог ловить
их как `ZeroDivisionError`, `ValueError` или `OverflowError`.

Виды ошибок:
- DivisionByZero: нулевой знаменатель (конструктор, reciprocal, деление)
- InvalidFormat: текст не соответствует формату "n" / "n/d"
- IntegerOverflow: выход за диапазон fixed-width режима
"""

from typing import Optional


class FractionError(Exception):
    """Базовое исключение fractionkit."""


class DivisionByZero(FractionError, ZeroDivisionError):
    """
    Деление на ноль.

    Возникает при:
    1. Конструировании дроби с denominator == 0
    2. reciprocal() от нулевой дроби
    3. Делении на нулевую дробь (или возведении нуля в отрицательную степень)
    """


class InvalidFormat(FractionError, ValueError):
    """Текстовое представление дроби не распознано."""

    def __init__(self, message: str, *, text: object = None):
        super().__init__(message)
        self.text = text


class IntegerOverflow(FractionError, OverflowError):
    """
    Результат не помещается в выбранную разрядность (ArithmeticConfig.int_bits).

    Поднимается только в fixed-width режиме; в режиме по умолчанию
    (произвольная точность) не возникает.
    """

    def __init__(self, message: str, *, value: int, bits: Optional[int]):
        super().__init__(message)
        self.value = value
        self.bits = bits
