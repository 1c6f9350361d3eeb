"""
Domain models and value objects.

Contains the arbitrary-precision value types (Magnitude, SignedInteger),
the algebraic protocols they implement and the hex text format.
"""

from arbint.core.domain.algebra import EuclideanDomain, Ring
from arbint.core.domain.hex_format import (
    format_compact,
    format_debug,
    parse_hex_words,
    strip_hex_prefix,
)
from arbint.core.domain.magnitude import Magnitude
from arbint.core.domain.signed import SignedInteger

__all__ = [
    # Algebra
    "Ring",
    "EuclideanDomain",
    # Hex format
    "format_compact",
    "format_debug",
    "parse_hex_words",
    "strip_hex_prefix",
    # Value types
    "Magnitude",
    "SignedInteger",
]
