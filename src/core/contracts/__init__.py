"""
Contract Validation Module

Модуль для валидации текстовых контрактов BigInt (JSON Schema).
"""

from .validators import (
    CANONICAL_SCHEMA,
    LITERAL_SCHEMA,
    SCHEMA_DIR,
    BigIntCanonicalValidator,
    BigIntLiteralValidator,
    ContractValidator,
    SchemaLoader,
    validate_big_int_canonical,
    validate_big_int_literal,
)

__all__ = [
    # Schemas
    "SCHEMA_DIR",
    "LITERAL_SCHEMA",
    "CANONICAL_SCHEMA",
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "BigIntLiteralValidator",
    "BigIntCanonicalValidator",
    # Functions
    "validate_big_int_literal",
    "validate_big_int_canonical",
]
