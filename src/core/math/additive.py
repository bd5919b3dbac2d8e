"""
Additive Core — сложение и вычитание

Модуль реализует знаковое сложение/вычитание через явную таблицу диспетчеризации
по паре знаков (sign(a), sign(b)) и школьные алгоритмы над модулями:
- Сложение с переносом (carry), справа налево
- Вычитание с заёмом (borrow), справа налево

АЛГЕБРАИЧЕСКИЕ ТОЖДЕСТВА:
    (-x) + y = y - x
    x + (-y) = x - y
    (-x) - y = -(x + y)
    x - (-y) = x + y
    (-x) - (-y) = y - x = -(x - y)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Операнды не изменяются, результат — новое каноническое значение
2. Алгоритмы над модулями никогда не рассматривают знак
"""

from typing import Callable

from src.core.math.comparator import Ordering, compare_magnitude
from src.core.math.representation import (
    RADIX,
    ZERO,
    SignedDigits,
    negate,
    with_sign,
)

# =============================================================================
# АЛГОРИТМЫ НАД МОДУЛЯМИ
# =============================================================================


def add_magnitudes(lhs: str, rhs: str) -> str:
    """
    Школьное сложение двух беззнаковых строк цифр.

    Буфер результата имеет размер max(len) + 1 под возможный перенос;
    неиспользованный ведущий ноль снимает normalize.

    Examples:
        >>> add_magnitudes("999", "1")
        '1000'
        >>> add_magnitudes("12", "30")
        '042'
    """
    size = max(len(lhs), len(rhs)) + 1
    result = ["0"] * size

    lhs_pos = len(lhs) - 1
    rhs_pos = len(rhs) - 1
    carry = 0

    for res_pos in range(size - 1, -1, -1):
        # Недостающие цифры короткого операнда считаются нулями
        lhs_digit = int(lhs[lhs_pos]) if lhs_pos >= 0 else 0
        rhs_digit = int(rhs[rhs_pos]) if rhs_pos >= 0 else 0

        total = lhs_digit + rhs_digit + carry
        carry = total // RADIX
        result[res_pos] = str(total % RADIX)

        lhs_pos -= 1
        rhs_pos -= 1

    return "".join(result)


def subtract_magnitudes(big: str, small: str) -> str:
    """
    Школьное вычитание с заёмом: big - small, требуется |big| >= |small|.

    Examples:
        >>> subtract_magnitudes("1000", "1")
        '0999'
    """
    result = ["0"] * len(big)

    small_pos = len(small) - 1
    borrow = 0

    for pos in range(len(big) - 1, -1, -1):
        big_digit = int(big[pos]) - borrow
        small_digit = int(small[small_pos]) if small_pos >= 0 else 0

        if big_digit < small_digit:
            big_digit += RADIX
            borrow = 1
        else:
            borrow = 0

        result[pos] = str(big_digit - small_digit)
        small_pos -= 1

    if borrow:
        raise ValueError(f"Minuend {big} is smaller than subtrahend {small}")

    return "".join(result)


# =============================================================================
# СЛОЖЕНИЕ
# =============================================================================


def _add_both_positive(lhs: SignedDigits, rhs: SignedDigits) -> SignedDigits:
    return with_sign(False, add_magnitudes(lhs.digits, rhs.digits))


def _add_both_negative(lhs: SignedDigits, rhs: SignedDigits) -> SignedDigits:
    return with_sign(True, add_magnitudes(lhs.digits, rhs.digits))


def _add_negative_positive(lhs: SignedDigits, rhs: SignedDigits) -> SignedDigits:
    # (-x) + y = y - x
    return subtract(rhs, SignedDigits(False, lhs.digits))


def _add_positive_negative(lhs: SignedDigits, rhs: SignedDigits) -> SignedDigits:
    # x + (-y) = x - y
    return subtract(lhs, SignedDigits(False, rhs.digits))


_ADD_DISPATCH: dict[tuple[bool, bool], Callable[[SignedDigits, SignedDigits], SignedDigits]] = {
    (False, False): _add_both_positive,
    (True, True): _add_both_negative,
    (True, False): _add_negative_positive,
    (False, True): _add_positive_negative,
}


def add(lhs: SignedDigits, rhs: SignedDigits) -> SignedDigits:
    """
    Знаковое сложение.

    Args:
        lhs: Каноническое левое слагаемое
        rhs: Каноническое правое слагаемое

    Returns:
        Каноническая сумма
    """
    return _ADD_DISPATCH[(lhs.sign, rhs.sign)](lhs, rhs)


# =============================================================================
# ВЫЧИТАНИЕ
# =============================================================================


def _subtract_same_sign(lhs: SignedDigits, rhs: SignedDigits) -> SignedDigits:
    cmp = compare_magnitude(lhs.digits, rhs.digits)
    if cmp is Ordering.EQUAL:
        # a - a = 0 и (-a) - (-a) = 0
        return ZERO

    if cmp is Ordering.LESS:
        negative = True
        digits = subtract_magnitudes(rhs.digits, lhs.digits)
    else:
        negative = False
        digits = subtract_magnitudes(lhs.digits, rhs.digits)

    if lhs.sign:
        # (-a) - (-b) = -(a - b)
        negative = not negative

    return with_sign(negative, digits)


def _subtract_negative_positive(lhs: SignedDigits, rhs: SignedDigits) -> SignedDigits:
    # (-x) - y = -(x + y)
    return negate(add(SignedDigits(False, lhs.digits), rhs))


def _subtract_positive_negative(lhs: SignedDigits, rhs: SignedDigits) -> SignedDigits:
    # x - (-y) = x + y
    return add(lhs, SignedDigits(False, rhs.digits))


_SUBTRACT_DISPATCH: dict[tuple[bool, bool], Callable[[SignedDigits, SignedDigits], SignedDigits]] = {
    (False, False): _subtract_same_sign,
    (True, True): _subtract_same_sign,
    (True, False): _subtract_negative_positive,
    (False, True): _subtract_positive_negative,
}


def subtract(lhs: SignedDigits, rhs: SignedDigits) -> SignedDigits:
    """
    Знаковое вычитание lhs - rhs.

    Returns:
        Каноническая разность
    """
    return _SUBTRACT_DISPATCH[(lhs.sign, rhs.sign)](lhs, rhs)
