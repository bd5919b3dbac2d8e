"""
Errors — иерархия исключений BigInt engine

Две категории ошибок:
- Невалидный литерал: восстанавливаемая ошибка (fallback на канонический ноль),
  исключение поднимается только по явному запросу вызывающего кода
- Деление на ноль: невосстанавливаемая для операции ошибка
"""


class BigIntError(Exception):
    """Базовое исключение для всех ошибок BigInt engine."""
    pass


class InvalidLiteralError(BigIntError, ValueError):
    """
    Литерал не соответствует грамматике ['-'] digit+.

    Поднимается только из ParseResult.unwrap(); обычная конструкция
    из текста возвращает ноль и диагностику.
    """

    def __init__(self, message: str, text: str | None = None):
        super().__init__(message)
        self.text = text


class DivisionByZeroError(BigIntError, ZeroDivisionError):
    """
    Деление на ноль.

    Числовой результат не формируется ни для какого делимого, включая 0 / 0.
    Подкласс ZeroDivisionError, чтобы стандартные обработчики его ловили.
    """

    def __init__(self, dividend: str):
        super().__init__(f"Cannot divide {dividend} by zero")
        self.dividend = dividend
