"""
Errors - Таксономия ошибок входных данных

Закрытый набор исключений вместо строковых ошибок:
- EmptyInputError: пустая строка
- InvalidCharacterError: символ вне ASCII '0'-'9' (с символом и позицией)
- InvalidLengthError: неверная длина для идентификатора фиксированной длины

Несовпадение контрольной цифры ошибкой НЕ является: это обычный
отрицательный результат проверки (False).

Все исключения наследуют ValueError, поэтому вызывающий код может ловить
их как ошибки значения, а при необходимости ветвиться по kind.
"""

from typing import Final

# Значения kind совпадают со статусами ValidationOutcome
KIND_EMPTY_INPUT: Final[str] = "EMPTY_INPUT"
KIND_INVALID_CHARACTER: Final[str] = "INVALID_CHARACTER"
KIND_INVALID_LENGTH: Final[str] = "INVALID_LENGTH"


class VerhoeffError(ValueError):
    """Базовое исключение для некорректного входа."""

    kind: str = ""


class EmptyInputError(VerhoeffError):
    """Входная строка пустая."""

    kind = KIND_EMPTY_INPUT

    def __init__(self) -> None:
        super().__init__("Input cannot be empty")


class InvalidCharacterError(VerhoeffError):
    """
    Входная строка содержит символ, не являющийся ASCII цифрой.

    Attributes:
        char: Первый недопустимый символ
        position: Индекс символа во входной строке (0-based)
    """

    kind = KIND_INVALID_CHARACTER

    def __init__(self, char: str, position: int) -> None:
        self.char = char
        self.position = position
        super().__init__(
            f"Invalid character {char!r} at position {position} - only digits allowed"
        )


class InvalidLengthError(VerhoeffError):
    """
    Строка из цифр имеет длину, отличную от требуемой.

    Attributes:
        actual: Фактическая длина
        expected: Требуемая длина
    """

    kind = KIND_INVALID_LENGTH

    def __init__(self, actual: int, expected: int) -> None:
        self.actual = actual
        self.expected = expected
        super().__init__(f"Identifier must be {expected} digits, got {actual} digits")
