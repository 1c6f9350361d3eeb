"""
Contract Validation Module

JSON interchange контракты для значений arbint.
"""

from .validators import (
    ContractValidator,
    MagnitudeValidator,
    SchemaLoader,
    SignedIntegerValidator,
    magnitude_from_contract,
    magnitude_to_contract,
    signed_integer_from_contract,
    signed_integer_to_contract,
    validate_magnitude,
    validate_signed_integer,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "MagnitudeValidator",
    "SignedIntegerValidator",
    # Functions
    "validate_magnitude",
    "validate_signed_integer",
    "magnitude_to_contract",
    "magnitude_from_contract",
    "signed_integer_to_contract",
    "signed_integer_from_contract",
]
