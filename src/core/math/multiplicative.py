"""
Multiplicative Core — умножение и целочисленное деление

Модуль реализует:
- Школьное умножение с накоплением по позициям i + j (справа)
- Деление с усечением к нулю методом chunked subtraction:
  из остатка вычитается наибольшее кратное делителя вида divisor * 10^k,
  а 10^k добавляется к частному

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Знак результата = XOR знаков операндов (для нулевого результата сбрасывается)
2. Деление на ноль → DivisionByZeroError, числовой результат не формируется
3. Остаток вычисляется внутри деления, но наружу не возвращается
"""

import logging

from src.core.math.additive import add_magnitudes, subtract_magnitudes
from src.core.math.comparator import Ordering, compare_magnitude
from src.core.math.errors import DivisionByZeroError
from src.core.math.representation import (
    RADIX,
    ZERO,
    ZERO_DIGITS,
    SignedDigits,
    is_zero,
    normalize,
    render,
    with_sign,
)

logger = logging.getLogger(__name__)

_TEN = str(RADIX)


# =============================================================================
# УМНОЖЕНИЕ
# =============================================================================


def multiply_magnitudes(lhs: str, rhs: str) -> str:
    """
    Школьное умножение двух беззнаковых строк цифр.

    Буфер результата имеет размер len(lhs) + len(rhs) и может содержать
    ведущий ноль, вызывающий код нормализует результат.

    Examples:
        >>> multiply_magnitudes("123", "456")
        '056088'
    """
    lhs_len = len(lhs)
    rhs_len = len(rhs)
    size = lhs_len + rhs_len
    result = [0] * size

    for i in range(lhs_len - 1, -1, -1):
        carry = 0
        lhs_digit = int(lhs[i])
        shift = lhs_len - 1 - i

        for j in range(rhs_len - 1, -1, -1):
            index = size - 1 - (shift + (rhs_len - 1 - j))
            current = result[index] + lhs_digit * int(rhs[j]) + carry
            result[index] = current % RADIX
            carry = current // RADIX

        if carry > 0:
            # Позиция сразу за текущим проходом ещё не заполнена
            result[size - 1 - (shift + rhs_len)] += carry

    return "".join(str(digit) for digit in result)


def multiply(lhs: SignedDigits, rhs: SignedDigits) -> SignedDigits:
    """
    Знаковое умножение.

    Returns:
        Каноническое произведение
    """
    if is_zero(lhs) or is_zero(rhs):
        return ZERO

    negative = lhs.sign != rhs.sign
    return with_sign(negative, multiply_magnitudes(lhs.digits, rhs.digits))


# =============================================================================
# ДЕЛЕНИЕ
# =============================================================================


def _times_ten(digits: str) -> str:
    return normalize(False, multiply_magnitudes(digits, _TEN)).digits


def divide_magnitudes(dividend: str, divisor: str) -> str:
    """
    Частное двух беззнаковых строк цифр методом chunked subtraction.

    Пример для 216 / 6: 6 → 60 (следующий шаг 600 > 216), вычитаем 60
    трижды, затем 6 шесть раз; частное 10+10+10+1+1+1+1+1+1 = 36.

    Args:
        dividend: Канонические цифры делимого
        divisor: Канонические цифры делителя, не "0"

    Returns:
        Канонические цифры частного (усечение)
    """
    left = dividend
    quotient = ZERO_DIGITS

    while compare_magnitude(left, divisor) is not Ordering.LESS:
        current_divisor = divisor
        multiple = "1"

        # Масштабируем делитель на 10, пока следующий шаг не превысит остаток
        while True:
            candidate = _times_ten(current_divisor)
            if compare_magnitude(candidate, left) is Ordering.GREATER:
                break
            current_divisor = candidate
            multiple = _times_ten(multiple)

        left = normalize(False, subtract_magnitudes(left, current_divisor)).digits
        quotient = normalize(False, add_magnitudes(quotient, multiple)).digits

    return quotient


def divide(lhs: SignedDigits, rhs: SignedDigits) -> SignedDigits:
    """
    Знаковое целочисленное деление с усечением к нулю.

    Returns:
        Каноническое частное

    Raises:
        DivisionByZeroError: если rhs == 0 (включая 0 / 0)

    Examples:
        >>> render(divide(SignedDigits(True, "100"), SignedDigits(False, "7")))
        '-14'
    """
    if is_zero(rhs):
        logger.debug("Division by zero rejected, dividend=%s", render(lhs))
        raise DivisionByZeroError(render(lhs))

    if is_zero(lhs):
        return ZERO

    negative = lhs.sign != rhs.sign
    return with_sign(negative, divide_magnitudes(lhs.digits, rhs.digits))
