"""
Public API - Контрольная цифра Верхуффа для произвольных строк цифр

Операции:
- calculate_checksum: контрольная цифра для строки без неё
- validate_result: проверка строки с контрольной цифрой (исключение при
  некорректном входе)
- validate: то же, но некорректный вход → False
- append_checksum: строка + контрольная цифра

Политика ошибок: основная поверхность бросает VerhoeffError
(EmptyInputError / InvalidCharacterError). Только validate сводит
некорректный вход к False; различить "битый вход" и "неверная цифра"
через validate нельзя, для этого есть validate_result.
"""

from verhoeff_checksum.core.digits import parse_digits
from verhoeff_checksum.core.engine import checksum_digit, is_valid_fold
from verhoeff_checksum.core.errors import VerhoeffError


def calculate_checksum(text: str) -> int:
    """
    Контрольная цифра Верхуффа.

    Args:
        text: Строка ASCII цифр без контрольной цифры

    Returns:
        Цифра 0-9 для добавления в конец

    Raises:
        EmptyInputError: Если строка пустая
        InvalidCharacterError: Если встречен не-цифровой символ

    Examples:
        >>> calculate_checksum("236")
        3
        >>> calculate_checksum("12345678901")
        0
    """
    return checksum_digit(parse_digits(text))


def validate_result(text: str) -> bool:
    """
    Проверка строки, последний символ которой - контрольная цифра.

    Args:
        text: Строка ASCII цифр, включая контрольную цифру

    Returns:
        True если свёртка равна нейтральному элементу, False при несовпадении

    Raises:
        EmptyInputError: Если строка пустая
        InvalidCharacterError: Если встречен не-цифровой символ
    """
    return is_valid_fold(parse_digits(text))


def validate(text: str) -> bool:
    """
    Упрощённая проверка без исключений.

    ВАЖНО: некорректный вход (пустая строка, не-цифры) возвращает False,
    так же как неверная контрольная цифра. Чтобы различать эти случаи,
    используйте validate_result.

    Examples:
        >>> validate("2363")
        True
        >>> validate("2364")
        False
        >>> validate("23a3")
        False
    """
    try:
        return validate_result(text)
    except VerhoeffError:
        return False


def append_checksum(text: str) -> str:
    """
    Добавление контрольной цифры.

    Raises:
        EmptyInputError: Если строка пустая
        InvalidCharacterError: Если встречен не-цифровой символ

    Examples:
        >>> append_checksum("12345")
        '123451'
    """
    return f"{text}{calculate_checksum(text)}"
