"""
arbint — arbitrary-precision integer arithmetic

Magnitude: беззнаковое целое (little-endian слова по 64 бита).
SignedInteger: знаковое целое в sign-magnitude представлении.
"""

from arbint.core.domain import EuclideanDomain, Magnitude, Ring, SignedInteger
from arbint.core.errors import (
    ArbitraryPrecisionError,
    ArithmeticInvariantViolation,
    DivisionByZero,
    MagnitudeUnderflow,
    MalformedInput,
    NegativeToUnsignedCoercion,
    UnsupportedOperation,
)

__version__ = "0.1.0"

__all__ = [
    # Value types
    "Magnitude",
    "SignedInteger",
    # Algebra
    "Ring",
    "EuclideanDomain",
    # Errors
    "ArbitraryPrecisionError",
    "ArithmeticInvariantViolation",
    "DivisionByZero",
    "MagnitudeUnderflow",
    "MalformedInput",
    "NegativeToUnsignedCoercion",
    "UnsupportedOperation",
]
