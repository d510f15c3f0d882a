"""
Contract Validation Module

Валидация JSON представлений результатов verhoeff_checksum.
"""

from .validators import (
    ContractValidator,
    SchemaLoader,
    ValidationOutcomeValidator,
    validate_validation_outcome,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "ValidationOutcomeValidator",
    # Functions
    "validate_validation_outcome",
]
