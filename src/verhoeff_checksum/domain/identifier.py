"""
Identifier Validator - Проверка идентификаторов фиксированной длины

Идентификатор: ровно IDENTIFIER_LENGTH (12) ASCII цифр, последняя из
которых - контрольная цифра Верхуффа (формат национальных ID).

Порядок проверок:
1. Разбор цифр (EmptyInputError, InvalidCharacterError)
2. Длина (InvalidLengthError), без обрезки и дополнения
3. Свёртка в режиме проверки

Проверка чисто арифметическая: True НЕ означает, что идентификатор
действительно выдан.

Значения идентификаторов в лог не пишутся, только длина и результат.
"""

import logging
from typing import Final

from verhoeff_checksum.core.digits import parse_digits
from verhoeff_checksum.core.engine import checksum_digit, is_valid_fold
from verhoeff_checksum.core.errors import InvalidLengthError

logger = logging.getLogger(__name__)

# Длина идентификатора, включая контрольную цифру
IDENTIFIER_LENGTH: Final[int] = 12

# Длина основы идентификатора без контрольной цифры
IDENTIFIER_BASE_LENGTH: Final[int] = IDENTIFIER_LENGTH - 1


def validate_identifier(text: str) -> bool:
    """
    Проверка 12-значного идентификатора.

    Args:
        text: Идентификатор (ровно 12 ASCII цифр)

    Returns:
        True если контрольная цифра верна, False иначе

    Raises:
        EmptyInputError: Если строка пустая
        InvalidCharacterError: Если встречен не-цифровой символ
        InvalidLengthError: Если цифр не 12 (actual = фактическая длина)
    """
    digits = parse_digits(text)

    if len(digits) != IDENTIFIER_LENGTH:
        logger.debug(
            "Identifier rejected: length %d (expected %d)", len(digits), IDENTIFIER_LENGTH
        )
        raise InvalidLengthError(len(digits), IDENTIFIER_LENGTH)

    is_valid = is_valid_fold(digits)
    logger.debug("Identifier checksum %s", "passed" if is_valid else "failed")
    return is_valid


def complete_identifier(base: str) -> str:
    """
    Построение идентификатора из 11-значной основы.

    Args:
        base: Основа идентификатора (ровно 11 ASCII цифр)

    Returns:
        12-значный идентификатор: base + контрольная цифра

    Raises:
        EmptyInputError: Если строка пустая
        InvalidCharacterError: Если встречен не-цифровой символ
        InvalidLengthError: Если цифр не 11

    Examples:
        >>> complete_identifier("12345678901")
        '123456789010'
    """
    digits = parse_digits(base)

    if len(digits) != IDENTIFIER_BASE_LENGTH:
        raise InvalidLengthError(len(digits), IDENTIFIER_BASE_LENGTH)

    return f"{base}{checksum_digit(digits)}"
