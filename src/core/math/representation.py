"""
Representation & Normalization — каноническая форма десятичного целого

Модуль описывает внутреннее представление значения BigInt:
- Пара (sign, digits): знак и строка десятичных цифр, старшая цифра первой
- Нормализация: удаление ведущих нулей и запрет отрицательного нуля
- Проверка текстового литерала по грамматике ['-'] digit+
- Извлечение magnitude (цифр без знака)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. digits содержит только '0'..'9', без знака и разделителей
2. Нет ведущих нулей, кроме значения ровно "0"
3. Ноль никогда не отрицательный ("-0" непредставим)
4. digits никогда не пустая строка
"""

from dataclasses import dataclass
from enum import Enum
from typing import Final, NamedTuple, Optional

# =============================================================================
# КОНСТАНТЫ ПРЕДСТАВЛЕНИЯ
# =============================================================================

# Основание системы счисления (только десятичная)
RADIX: Final[int] = 10

# Каноническая запись нуля
ZERO_DIGITS: Final[str] = "0"

# Символ знака в литерале и в выводе
NEGATIVE_SIGN: Final[str] = "-"

# Допустимые символы цифр
DIGIT_CHARS: Final[frozenset[str]] = frozenset("0123456789")


# =============================================================================
# ТИПЫ
# =============================================================================


class SignedDigits(NamedTuple):
    """
    Внутренняя пара (знак, цифры), общая для всех арифметических слоёв.

    sign=True означает строго отрицательное значение.
    """

    sign: bool
    digits: str


ZERO: Final[SignedDigits] = SignedDigits(False, ZERO_DIGITS)


class LiteralError(str, Enum):
    """Причина отклонения текстового литерала"""

    EMPTY = "empty"
    LONE_SIGN = "lone_sign"
    NON_DIGIT = "non_digit"


@dataclass(frozen=True)
class LiteralDiagnostic:
    """Диагностика отклонённого литерала."""

    reason: LiteralError
    text: Optional[str]
    position: Optional[int] = None  # Индекс первого недопустимого символа

    @property
    def message(self) -> str:
        if self.reason is LiteralError.EMPTY:
            return "Invalid number: empty literal"
        if self.reason is LiteralError.LONE_SIGN:
            return f"Invalid number: sign without digits in {self.text!r}"
        return (
            f"Invalid number: non-digit character {self.text[self.position]!r} "
            f"at position {self.position} in {self.text!r}"
        )


# =============================================================================
# НОРМАЛИЗАЦИЯ
# =============================================================================


def normalize(sign: bool, raw_digits: str) -> SignedDigits:
    """
    Приведение пары (sign, raw_digits) к канонической форме.

    Ведущие '0' снимаются, пока не встретится ненулевая цифра или не
    останется ровно одна цифра. Для "0" знак сбрасывается.

    Args:
        sign: Знак (True — отрицательное)
        raw_digits: Непустая строка цифр, возможно с ведущими нулями

    Returns:
        Каноническая SignedDigits

    Examples:
        >>> normalize(False, "007")
        SignedDigits(sign=False, digits='7')
        >>> normalize(True, "000")
        SignedDigits(sign=False, digits='0')
    """
    if not raw_digits:
        raise ValueError("raw_digits must not be empty")

    start = 0
    last = len(raw_digits) - 1
    while start < last and raw_digits[start] == "0":
        start += 1

    digits = raw_digits[start:]
    if digits == ZERO_DIGITS:
        return ZERO
    return SignedDigits(sign, digits)


def magnitude(value: SignedDigits) -> str:
    """Цифры значения без знака."""
    return value.digits


def is_zero(value: SignedDigits) -> bool:
    return value.digits == ZERO_DIGITS


def negate(value: SignedDigits) -> SignedDigits:
    """Смена знака; ноль остаётся неотрицательным."""
    if is_zero(value):
        return ZERO
    return SignedDigits(not value.sign, value.digits)


def with_sign(negative: bool, digits: str) -> SignedDigits:
    """Сборка результата из уже вычисленных цифр и желаемого знака."""
    return normalize(negative, digits)


# =============================================================================
# ЛИТЕРАЛЫ
# =============================================================================


def check_literal(text: Optional[str]) -> Optional[LiteralDiagnostic]:
    """
    Проверка литерала по грамматике ['-'] digit+.

    Args:
        text: Исходный литерал (может быть None)

    Returns:
        None если литерал валиден, иначе LiteralDiagnostic с причиной
    """
    if not text:
        return LiteralDiagnostic(reason=LiteralError.EMPTY, text=text)

    start = 1 if text[0] == NEGATIVE_SIGN else 0
    if start == len(text):
        return LiteralDiagnostic(reason=LiteralError.LONE_SIGN, text=text)

    for position in range(start, len(text)):
        if text[position] not in DIGIT_CHARS:
            return LiteralDiagnostic(
                reason=LiteralError.NON_DIGIT, text=text, position=position
            )

    return None


def parse_digits(text: Optional[str]) -> tuple[SignedDigits, Optional[LiteralDiagnostic]]:
    """
    Разбор литерала в каноническую пару.

    Returns:
        (value, diagnostic):
            - value: каноническое значение (ZERO при ошибке)
            - diagnostic: None при успехе, иначе причина отклонения
    """
    diagnostic = check_literal(text)
    if diagnostic is not None:
        return (ZERO, diagnostic)

    negative = text[0] == NEGATIVE_SIGN
    return (normalize(negative, text[1:] if negative else text), None)


def render(value: SignedDigits) -> str:
    """Каноническая текстовая запись: знак только для отрицательных."""
    if value.sign:
        return NEGATIVE_SIGN + value.digits
    return value.digits
