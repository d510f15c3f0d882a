"""
ValidationOutcome - Структурированный результат проверки

Immutable Pydantic модель, объединяющая три вида результата:
- вердикт (VALID / CHECKSUM_MISMATCH)
- ошибку разбора (EMPTY_INPUT / INVALID_CHARACTER)
- ошибку длины (INVALID_LENGTH)

Полная совместимость с JSON Schema (contracts/schema/validation_outcome.json).

check_number / check_identifier никогда не бросают VerhoeffError: ошибка
входа превращается в статус, по которому вызывающий код может ветвиться.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from verhoeff_checksum.api import validate_result
from verhoeff_checksum.core.errors import (
    InvalidCharacterError,
    InvalidLengthError,
    VerhoeffError,
)
from verhoeff_checksum.domain.identifier import validate_identifier

# Замена для одиночных суррогатов (surrogateescape), которые не кодируются в UTF-8
REPLACEMENT_CHAR = "\ufffd"


def _printable_char(char: str) -> str:
    if "\ud800" <= char <= "\udfff":
        return REPLACEMENT_CHAR
    return char


# =============================================================================
# ENUMS
# =============================================================================


class OutcomeStatus(str, Enum):
    """Вид результата проверки."""

    VALID = "VALID"
    CHECKSUM_MISMATCH = "CHECKSUM_MISMATCH"
    EMPTY_INPUT = "EMPTY_INPUT"
    INVALID_CHARACTER = "INVALID_CHARACTER"
    INVALID_LENGTH = "INVALID_LENGTH"


# =============================================================================
# VALIDATION OUTCOME MODEL
# =============================================================================


class ValidationOutcome(BaseModel):
    """
    Результат проверки строки цифр.

    Immutable модель (frozen=True). Содержит:
    - Статус и вердикт (status, is_valid)
    - Диагностику входа (length, offending_char, position, expected_length)
    - Человекочитаемое сообщение (message)

    Значение проверяемой строки в модель НЕ входит.
    """

    status: OutcomeStatus = Field(..., description="Вид результата")
    length: int = Field(..., ge=0, description="Количество символов во входе")
    offending_char: Optional[str] = Field(
        None,
        min_length=1,
        max_length=1,
        description="Первый недопустимый символ (только INVALID_CHARACTER)",
    )
    position: Optional[int] = Field(
        None, ge=0, description="Позиция недопустимого символа (только INVALID_CHARACTER)"
    )
    expected_length: Optional[int] = Field(
        None, gt=0, description="Требуемая длина (только INVALID_LENGTH)"
    )
    message: str = Field("", description="Описание результата")
    is_valid: bool = Field(..., description="True только для статуса VALID")

    model_config = {"frozen": True}

    @field_validator("is_valid")
    @classmethod
    def validate_status_consistency(cls, v: bool, info) -> bool:
        """
        Проверка согласованности полей со статусом.

        - is_valid == (status == VALID)
        - INVALID_CHARACTER требует offending_char и position
        - INVALID_LENGTH требует expected_length
        """
        if "status" not in info.data:
            return v

        status = info.data["status"]

        if v != (status == OutcomeStatus.VALID):
            raise ValueError(f"is_valid={v} contradicts status {status.value}")

        if status == OutcomeStatus.INVALID_CHARACTER:
            if info.data.get("offending_char") is None or info.data.get("position") is None:
                raise ValueError("INVALID_CHARACTER requires offending_char and position")

        if status == OutcomeStatus.INVALID_LENGTH:
            if info.data.get("expected_length") is None:
                raise ValueError("INVALID_LENGTH requires expected_length")

        return v

    @classmethod
    def from_verdict(cls, is_valid: bool, length: int) -> "ValidationOutcome":
        """Результат для корректно сформированного входа."""
        if is_valid:
            return cls(
                status=OutcomeStatus.VALID,
                length=length,
                message="Checksum is valid",
                is_valid=True,
            )
        return cls(
            status=OutcomeStatus.CHECKSUM_MISMATCH,
            length=length,
            message="Checksum does not match",
            is_valid=False,
        )

    @classmethod
    def from_error(cls, error: VerhoeffError, length: int) -> "ValidationOutcome":
        """
        Результат для некорректного входа.

        Args:
            error: Исключение из таксономии VerhoeffError
            length: Количество символов во входе

        Returns:
            ValidationOutcome со статусом error.kind
        """
        offending_char = None
        position = None
        expected_length = None

        if isinstance(error, InvalidCharacterError):
            offending_char = _printable_char(error.char)
            position = error.position
        elif isinstance(error, InvalidLengthError):
            expected_length = error.expected

        return cls(
            status=OutcomeStatus(error.kind),
            length=length,
            offending_char=offending_char,
            position=position,
            expected_length=expected_length,
            message=str(error),
            is_valid=False,
        )


# =============================================================================
# NON-RAISING SURFACES
# =============================================================================


def check_number(text: str) -> ValidationOutcome:
    """
    Проверка строки цифр произвольной длины с контрольной цифрой.

    Args:
        text: Строка, включая контрольную цифру

    Returns:
        ValidationOutcome (VALID, CHECKSUM_MISMATCH, EMPTY_INPUT,
        INVALID_CHARACTER)
    """
    try:
        is_valid = validate_result(text)
    except VerhoeffError as e:
        return ValidationOutcome.from_error(e, len(text))
    return ValidationOutcome.from_verdict(is_valid, len(text))


def check_identifier(text: str) -> ValidationOutcome:
    """
    Проверка 12-значного идентификатора.

    Args:
        text: Идентификатор, включая контрольную цифру

    Returns:
        ValidationOutcome (любой статус, включая INVALID_LENGTH)
    """
    try:
        is_valid = validate_identifier(text)
    except VerhoeffError as e:
        return ValidationOutcome.from_error(e, len(text))
    return ValidationOutcome.from_verdict(is_valid, len(text))
