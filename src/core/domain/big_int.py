"""
BigInt — знаковое десятичное целое произвольной точности

Immutable Pydantic модель: знак + каноническая строка десятичных цифр.
Все арифметические операции возвращают новый экземпляр; составные
операторы (+=, -=, *=, /=) перепривязывают имя к новому значению,
исходный экземпляр не изменяется.

Конструирование:
- BigInt.from_text("-123") — литерал; при ошибке пишет диагностику в лог
  и возвращает канонический ноль
- parse_literal("-123") — явный двухисходный API (значение + диагностика)
- BigInt(sign=..., digits=...) — прямое создание, только канонические данные

Деление:
- divide(a, b) возвращает DivisionResult (частное или ошибка)
- a / b и a // b поднимают DivisionByZeroError при b == 0
"""

import logging
from dataclasses import dataclass
from typing import Optional, Union

from pydantic import BaseModel, Field, field_validator, model_validator

from src.core.math import additive, comparator, multiplicative
from src.core.math.errors import DivisionByZeroError, InvalidLiteralError
from src.core.math.representation import (
    ZERO_DIGITS,
    LiteralDiagnostic,
    SignedDigits,
    negate,
    parse_digits,
    render,
)

logger = logging.getLogger(__name__)


# =============================================================================
# КОНФИГУРАЦИЯ
# =============================================================================


@dataclass(frozen=True)
class LiteralPolicy:
    """Поведение BigInt.from_text при отклонённом литерале."""

    log_rejections: bool = True
    log_level: int = logging.WARNING


DEFAULT_LITERAL_POLICY = LiteralPolicy()


# =============================================================================
# BIGINT MODEL
# =============================================================================


class BigInt(BaseModel):
    """
    Каноническое знаковое десятичное целое.

    Инварианты проверяются валидаторами: только цифры, нет ведущих нулей,
    нет отрицательного нуля. BigInt() без аргументов — ноль.
    """

    sign: bool = Field(
        default=False, strict=True, description="True если значение строго отрицательное"
    )
    digits: str = Field(
        default=ZERO_DIGITS,
        min_length=1,
        pattern=r"^[0-9]+$",
        description="Цифры модуля, старшая первой",
    )

    model_config = {"frozen": True}  # Immutable

    @field_validator("digits")
    @classmethod
    def validate_no_leading_zero(cls, v: str) -> str:
        if len(v) > 1 and v[0] == "0":
            raise ValueError(f"digits {v!r} has leading zeros")
        return v

    @model_validator(mode="after")
    def validate_zero_not_negative(self) -> "BigInt":
        if self.sign and self.digits == ZERO_DIGITS:
            raise ValueError("zero cannot be negative")
        return self

    # -------------------------------------------------------------------------
    # Конструирование
    # -------------------------------------------------------------------------

    @classmethod
    def from_signed_digits(cls, value: SignedDigits) -> "BigInt":
        # Результаты арифметики уже канонические
        return cls.model_construct(sign=value.sign, digits=value.digits)

    @classmethod
    def from_text(
        cls, text: Optional[str], policy: LiteralPolicy = DEFAULT_LITERAL_POLICY
    ) -> "BigInt":
        """
        Создание из литерала ['-'] digit+.

        Невалидный литерал не прерывает вычисления: диагностика пишется
        в лог (если разрешено политикой), возвращается канонический ноль.

        Examples:
            >>> str(BigInt.from_text("-007"))
            '-7'
            >>> str(BigInt.from_text("12a"))
            '0'
        """
        result = parse_literal(text)
        if result.diagnostic is not None and policy.log_rejections:
            logger.log(
                policy.log_level,
                "%s; falling back to 0",
                result.diagnostic.message,
                extra={"literal_error": result.diagnostic.reason.value},
            )
        return result.value

    @classmethod
    def zero(cls) -> "BigInt":
        return cls()

    def model_copy(self, *, update: Optional[dict] = None, deep: bool = False) -> "BigInt":
        """
        Копия значения.

        update проходит те же валидаторы, что и прямое создание:
        неканоническая пара (например, отрицательный ноль) отклоняется.
        """
        if update:
            return BigInt.model_validate({"sign": self.sign, "digits": self.digits, **update})
        return super().model_copy(deep=deep)

    # -------------------------------------------------------------------------
    # Свойства
    # -------------------------------------------------------------------------

    @property
    def signed_digits(self) -> SignedDigits:
        return SignedDigits(self.sign, self.digits)

    @property
    def magnitude(self) -> str:
        """Цифры без знака."""
        return self.digits

    @property
    def is_negative(self) -> bool:
        return self.sign

    @property
    def is_zero(self) -> bool:
        return self.digits == ZERO_DIGITS

    def to_text(self) -> str:
        """Каноническая запись: '-' только для отрицательных."""
        return render(self.signed_digits)

    def __str__(self) -> str:
        return self.to_text()

    def __repr__(self) -> str:
        return f"BigInt({self.to_text()!r})"

    def __bool__(self) -> bool:
        return not self.is_zero

    # -------------------------------------------------------------------------
    # Сравнение
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        # Только BigInt: иначе hash расходился бы с равенством для str
        if not isinstance(other, BigInt):
            return NotImplemented
        return comparator.equals(self.signed_digits, other.signed_digits)

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __hash__(self) -> int:
        return hash((self.sign, self.digits))

    def __lt__(self, other: "Operand") -> bool:
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return comparator.less_than(self.signed_digits, other.signed_digits)

    def __le__(self, other: "Operand") -> bool:
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self < other or self == other

    def __gt__(self, other: "Operand") -> bool:
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return not self <= other

    def __ge__(self, other: "Operand") -> bool:
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return not self < other

    def compare(self, other: "Operand") -> comparator.Ordering:
        """Трёхстороннее сравнение: Ordering.LESS / EQUAL / GREATER."""
        return comparator.compare(self.signed_digits, _require(other).signed_digits)

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def __neg__(self) -> "BigInt":
        return BigInt.from_signed_digits(negate(self.signed_digits))

    def __abs__(self) -> "BigInt":
        return BigInt.from_signed_digits(SignedDigits(False, self.digits))

    def __add__(self, other: "Operand") -> "BigInt":
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return BigInt.from_signed_digits(additive.add(self.signed_digits, other.signed_digits))

    def __radd__(self, other: "Operand") -> "BigInt":
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return other + self

    def __sub__(self, other: "Operand") -> "BigInt":
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return BigInt.from_signed_digits(additive.subtract(self.signed_digits, other.signed_digits))

    def __rsub__(self, other: "Operand") -> "BigInt":
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return other - self

    def __mul__(self, other: "Operand") -> "BigInt":
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return BigInt.from_signed_digits(multiplicative.multiply(self.signed_digits, other.signed_digits))

    def __rmul__(self, other: "Operand") -> "BigInt":
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return other * self

    def __truediv__(self, other: "Operand") -> "BigInt":
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return divide(self, other).unwrap()

    def __rtruediv__(self, other: "Operand") -> "BigInt":
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return divide(other, self).unwrap()

    # Целочисленное деление совпадает с /: результат всегда усечён к нулю
    __floordiv__ = __truediv__
    __rfloordiv__ = __rtruediv__

    # -------------------------------------------------------------------------
    # Составное присваивание: self = self <op> other
    # -------------------------------------------------------------------------

    def __iadd__(self, other: "Operand") -> "BigInt":
        return self + other

    def __isub__(self, other: "Operand") -> "BigInt":
        return self - other

    def __imul__(self, other: "Operand") -> "BigInt":
        return self * other

    def __itruediv__(self, other: "Operand") -> "BigInt":
        return self / other

    def __ifloordiv__(self, other: "Operand") -> "BigInt":
        return self // other


Operand = Union[BigInt, str]


def _coerce(value: object):
    if isinstance(value, BigInt):
        return value
    if isinstance(value, str):
        return BigInt.from_text(value)
    return NotImplemented


def _require(value: object) -> BigInt:
    coerced = _coerce(value)
    if coerced is NotImplemented:
        raise TypeError(f"Expected BigInt or str literal, got {type(value).__name__}")
    return coerced


# =============================================================================
# ДВУХИСХОДНЫЕ РЕЗУЛЬТАТЫ
# =============================================================================


@dataclass(frozen=True)
class ParseResult:
    """
    Результат разбора литерала.

    value всегда валидный BigInt (ноль при отклонении); diagnostic
    заполнен только при отклонении.
    """

    value: BigInt
    diagnostic: Optional[LiteralDiagnostic] = None

    @property
    def ok(self) -> bool:
        return self.diagnostic is None

    def unwrap(self) -> BigInt:
        """
        Значение при успешном разборе.

        Raises:
            InvalidLiteralError: если литерал был отклонён
        """
        if self.diagnostic is not None:
            raise InvalidLiteralError(self.diagnostic.message, text=self.diagnostic.text)
        return self.value


@dataclass(frozen=True)
class DivisionResult:
    """Результат деления: либо quotient, либо error."""

    quotient: Optional[BigInt]
    error: Optional[DivisionByZeroError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> BigInt:
        """
        Raises:
            DivisionByZeroError: если делитель был нулём
        """
        if self.error is not None:
            raise self.error
        return self.quotient


def parse_literal(text: Optional[str]) -> ParseResult:
    """
    Разбор литерала без записи в лог.

    Examples:
        >>> parse_literal("-0").value.to_text()
        '0'
        >>> parse_literal("-").diagnostic.reason.value
        'lone_sign'
    """
    value, diagnostic = parse_digits(text)
    return ParseResult(value=BigInt.from_signed_digits(value), diagnostic=diagnostic)


def divide(dividend: BigInt, divisor: BigInt) -> DivisionResult:
    """
    Целочисленное деление с усечением к нулю.

    Args:
        dividend: Делимое
        divisor: Делитель

    Returns:
        DivisionResult с частным, либо с DivisionByZeroError при divisor == 0
    """
    try:
        quotient = multiplicative.divide(dividend.signed_digits, divisor.signed_digits)
    except DivisionByZeroError as exc:
        return DivisionResult(quotient=None, error=exc)
    return DivisionResult(quotient=BigInt.from_signed_digits(quotient))
