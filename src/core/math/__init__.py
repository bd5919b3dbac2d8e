"""
Core math modules для BigInt engine

Арифметика над каноническими парами (sign, digits): представление,
сравнение, сложение/вычитание, умножение/деление.
"""

# Errors
from src.core.math.errors import (
    BigIntError,
    DivisionByZeroError,
    InvalidLiteralError,
)

# Representation & Normalization
from src.core.math.representation import (
    DIGIT_CHARS,
    NEGATIVE_SIGN,
    RADIX,
    ZERO,
    ZERO_DIGITS,
    LiteralDiagnostic,
    LiteralError,
    SignedDigits,
    check_literal,
    is_zero,
    magnitude,
    negate,
    normalize,
    parse_digits,
    render,
)

# Comparator
from src.core.math.comparator import (
    Ordering,
    compare,
    compare_magnitude,
    equals,
    less_than,
)

# Additive core
from src.core.math.additive import (
    add,
    add_magnitudes,
    subtract,
    subtract_magnitudes,
)

# Multiplicative core
from src.core.math.multiplicative import (
    divide,
    divide_magnitudes,
    multiply,
    multiply_magnitudes,
)

__all__ = [
    # Errors
    "BigIntError",
    "DivisionByZeroError",
    "InvalidLiteralError",
    # Representation — Constants
    "DIGIT_CHARS",
    "NEGATIVE_SIGN",
    "RADIX",
    "ZERO",
    "ZERO_DIGITS",
    # Representation — Types
    "LiteralDiagnostic",
    "LiteralError",
    "SignedDigits",
    # Representation — Functions
    "check_literal",
    "is_zero",
    "magnitude",
    "negate",
    "normalize",
    "parse_digits",
    "render",
    # Comparator
    "Ordering",
    "compare",
    "compare_magnitude",
    "equals",
    "less_than",
    # Additive core
    "add",
    "add_magnitudes",
    "subtract",
    "subtract_magnitudes",
    # Multiplicative core
    "divide",
    "divide_magnitudes",
    "multiply",
    "multiply_magnitudes",
]
