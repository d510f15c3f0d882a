"""
Digit Parser - Преобразование текста в последовательность цифр

Правила:
- Пустая строка → EmptyInputError
- Первый символ вне ASCII '0'-'9' → InvalidCharacterError (без частичных
  результатов и без пропуска символов)
- Порядок цифр совпадает с порядком во входной строке; разворот для
  обработки выполняет engine

Unicode-цифры (деванагари, арабо-индийские, тамильские и т.п.) НЕ
принимаются, хотя str.isdigit() для них возвращает True.
"""

from typing import Final

from verhoeff_checksum.core.errors import EmptyInputError, InvalidCharacterError

ASCII_DIGITS: Final[str] = "0123456789"


def parse_digits(text: str) -> tuple[int, ...]:
    """
    Разбор строки десятичных цифр.

    Args:
        text: Входная строка (только ASCII цифры)

    Returns:
        Кортеж цифр 0-9 в исходном порядке

    Raises:
        TypeError: Если text не str
        EmptyInputError: Если строка пустая
        InvalidCharacterError: Если встречен символ, не являющийся ASCII цифрой

    Examples:
        >>> parse_digits("0123")
        (0, 1, 2, 3)
        >>> parse_digits("12a45")  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        InvalidCharacterError: Invalid character 'a' at position 2 - only digits allowed
    """
    if not isinstance(text, str):
        raise TypeError(f"text must be str, got {type(text).__name__}")

    if not text:
        raise EmptyInputError()

    digits = []
    for position, char in enumerate(text):
        if char not in ASCII_DIGITS:
            raise InvalidCharacterError(char, position)
        digits.append(ord(char) - ord("0"))

    return tuple(digits)
