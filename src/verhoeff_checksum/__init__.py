"""
verhoeff_checksum - контрольная цифра Верхуффа (группа диэдра D5).

Обнаруживает все одиночные замены цифр и все перестановки соседних цифр.

Usage:
    from verhoeff_checksum import append_checksum, validate, validate_identifier

    append_checksum("12345")            # '123451'
    validate("123451")                  # True
    validate_identifier("123456789010") # True
"""

from verhoeff_checksum.api import (
    append_checksum,
    calculate_checksum,
    validate,
    validate_result,
)
from verhoeff_checksum.core.errors import (
    EmptyInputError,
    InvalidCharacterError,
    InvalidLengthError,
    VerhoeffError,
)
from verhoeff_checksum.domain import (
    IDENTIFIER_LENGTH,
    OutcomeStatus,
    ValidationOutcome,
    check_identifier,
    check_number,
    complete_identifier,
    validate_identifier,
)

__version__ = "0.1.0"
__all__ = [
    # Public API
    "append_checksum",
    "calculate_checksum",
    "validate",
    "validate_result",
    # Identifier
    "IDENTIFIER_LENGTH",
    "complete_identifier",
    "validate_identifier",
    # Outcome
    "OutcomeStatus",
    "ValidationOutcome",
    "check_identifier",
    "check_number",
    # Errors
    "EmptyInputError",
    "InvalidCharacterError",
    "InvalidLengthError",
    "VerhoeffError",
]
