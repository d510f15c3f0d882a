"""
Domain layer.

Проверка идентификаторов фиксированной длины и структурированный результат.
"""

from verhoeff_checksum.domain.identifier import (
    IDENTIFIER_BASE_LENGTH,
    IDENTIFIER_LENGTH,
    complete_identifier,
    validate_identifier,
)
from verhoeff_checksum.domain.outcome import (
    OutcomeStatus,
    ValidationOutcome,
    check_identifier,
    check_number,
)

__all__ = [
    # Identifier
    "IDENTIFIER_BASE_LENGTH",
    "IDENTIFIER_LENGTH",
    "complete_identifier",
    "validate_identifier",
    # Outcome
    "OutcomeStatus",
    "ValidationOutcome",
    "check_identifier",
    "check_number",
]
