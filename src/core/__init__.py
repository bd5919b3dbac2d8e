"""
Core domain models, mathematical primitives, and invariants.

This module contains the arbitrary-precision decimal integer engine:
digit-level arithmetic, the BigInt value type and its text contracts.
"""
