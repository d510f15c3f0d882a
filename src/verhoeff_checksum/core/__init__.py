"""
Core модули verhoeff_checksum

Таблицы, разбор цифр, таксономия ошибок и движок свёртки.
Не зависят от доменного слоя и внешних библиотек.
"""

# Tables
from verhoeff_checksum.core.tables import (
    DIGIT_BASE,
    GROUP_IDENTITY,
    INVERSE_TABLE,
    MULTIPLICATION_TABLE,
    PERMUTATION_CYCLE,
    PERMUTATION_TABLE,
    VERHOEFF_TABLES,
    ChecksumTables,
)

# Errors
from verhoeff_checksum.core.errors import (
    EmptyInputError,
    InvalidCharacterError,
    InvalidLengthError,
    VerhoeffError,
)

# Digit Parser
from verhoeff_checksum.core.digits import ASCII_DIGITS, parse_digits

# Engine
from verhoeff_checksum.core.engine import (
    GENERATION_OFFSET,
    VALIDATION_OFFSET,
    checksum_digit,
    fold,
    is_valid_fold,
)

__all__ = [
    # Tables - Constants
    "DIGIT_BASE",
    "GROUP_IDENTITY",
    "PERMUTATION_CYCLE",
    # Tables - Data
    "INVERSE_TABLE",
    "MULTIPLICATION_TABLE",
    "PERMUTATION_TABLE",
    "VERHOEFF_TABLES",
    "ChecksumTables",
    # Errors
    "EmptyInputError",
    "InvalidCharacterError",
    "InvalidLengthError",
    "VerhoeffError",
    # Digit Parser
    "ASCII_DIGITS",
    "parse_digits",
    # Engine
    "GENERATION_OFFSET",
    "VALIDATION_OFFSET",
    "checksum_digit",
    "fold",
    "is_valid_fold",
]
