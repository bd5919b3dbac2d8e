"""
Comparator — сравнение по модулю и знаковое упорядочивание

Сравнение опирается на каноническую форму: без ведущих нулей более длинная
строка цифр всегда больше, а строки равной длины сравниваются
лексикографически.
"""

from enum import IntEnum

from src.core.math.representation import SignedDigits


class Ordering(IntEnum):
    """Результат трёхстороннего сравнения"""

    LESS = -1
    EQUAL = 0
    GREATER = 1


def compare_magnitude(lhs: str, rhs: str) -> Ordering:
    """
    Сравнение двух беззнаковых строк цифр.

    Args:
        lhs: Канонические цифры левого операнда
        rhs: Канонические цифры правого операнда

    Returns:
        Ordering.LESS / EQUAL / GREATER

    Examples:
        >>> compare_magnitude("9", "10")
        <Ordering.LESS: -1>
        >>> compare_magnitude("123", "123")
        <Ordering.EQUAL: 0>
    """
    # "9" > "10" лексикографически, поэтому сначала длина
    if len(lhs) != len(rhs):
        return Ordering.LESS if len(lhs) < len(rhs) else Ordering.GREATER
    if lhs == rhs:
        return Ordering.EQUAL
    return Ordering.LESS if lhs < rhs else Ordering.GREATER


def equals(lhs: SignedDigits, rhs: SignedDigits) -> bool:
    return lhs.sign == rhs.sign and lhs.digits == rhs.digits


def less_than(lhs: SignedDigits, rhs: SignedDigits) -> bool:
    """
    Строгое знаковое lhs < rhs.

    При разных знаках отрицательное меньше. При одинаковых сравнение
    по модулю, инвертированное для двух отрицательных (|-5| > |-3|, но -5 < -3).
    """
    if lhs.sign != rhs.sign:
        return lhs.sign

    cmp = compare_magnitude(lhs.digits, rhs.digits)
    if lhs.sign:
        return cmp is Ordering.GREATER
    return cmp is Ordering.LESS


def compare(lhs: SignedDigits, rhs: SignedDigits) -> Ordering:
    """Знаковое трёхстороннее сравнение, выведенное из < и ==."""
    if equals(lhs, rhs):
        return Ordering.EQUAL
    return Ordering.LESS if less_than(lhs, rhs) else Ordering.GREATER
