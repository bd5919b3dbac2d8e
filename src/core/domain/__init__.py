"""
Domain models and value objects.

Contains the BigInt value type and its two-outcome construction/division results.
"""

from src.core.domain.big_int import (
    DEFAULT_LITERAL_POLICY,
    BigInt,
    DivisionResult,
    LiteralPolicy,
    Operand,
    ParseResult,
    divide,
    parse_literal,
)

__all__ = [
    # Config
    "DEFAULT_LITERAL_POLICY",
    "LiteralPolicy",
    # BigInt model
    "BigInt",
    "Operand",
    # Results
    "DivisionResult",
    "ParseResult",
    # Functions
    "divide",
    "parse_literal",
]
