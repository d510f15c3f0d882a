"""
Checksum Engine - Свёртка последовательности цифр по таблицам Верхуффа

Алгоритм (одинаковый для проверки и генерации):
    c = 0
    для каждой цифры справа налево (обратная позиция i, последняя цифра i=0):
        c = d[c][p[(i + offset) mod 8][digit]]

Два режима:
- Проверка (offset = 0): вход включает контрольную цифру, валидно iff c == 0
- Генерация (offset = 1): вход без контрольной цифры, цифра = inv[c]

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Смещение 1 при генерации учитывает позицию будущей контрольной цифры;
   перестановка смещений даёт цифру, которую проверка отвергнет
2. Промежуточные значения всегда в [0, 9]: нет переполнения на любой длине
3. Функции чистые: нет состояния между вызовами
"""

from typing import Final, Sequence

from verhoeff_checksum.core.tables import (
    DIGIT_BASE,
    GROUP_IDENTITY,
    PERMUTATION_CYCLE,
    VERHOEFF_TABLES,
    ChecksumTables,
)

# =============================================================================
# СМЕЩЕНИЯ РЕЖИМОВ
# =============================================================================

# Режим проверки: последовательность уже содержит контрольную цифру
VALIDATION_OFFSET: Final[int] = 0

# Режим генерации: контрольная цифра займёт обратную позицию 0
GENERATION_OFFSET: Final[int] = 1


# =============================================================================
# FOLD
# =============================================================================


def fold(
    digits: Sequence[int],
    permutation_offset: int,
    tables: ChecksumTables = VERHOEFF_TABLES,
) -> int:
    """
    Свёртка цифр в элемент группы.

    Args:
        digits: Цифры 0-9 в исходном (слева направо) порядке
        permutation_offset: VALIDATION_OFFSET (0) или GENERATION_OFFSET (1)
        tables: Набор таблиц (default: VERHOEFF_TABLES)

    Returns:
        Элемент группы 0-9. Для пустой последовательности: GROUP_IDENTITY

    Raises:
        ValueError: Если offset не 0/1 или цифра вне [0, 9]

    Examples:
        >>> fold((2, 3, 6, 3), VALIDATION_OFFSET)
        0
        >>> fold((2, 3, 6), GENERATION_OFFSET)
        2
    """
    if permutation_offset not in (VALIDATION_OFFSET, GENERATION_OFFSET):
        raise ValueError(f"permutation_offset must be 0 or 1, got {permutation_offset}")

    multiplication = tables.multiplication
    permutation = tables.permutation

    c = GROUP_IDENTITY
    for i, digit in enumerate(reversed(digits)):
        if not 0 <= digit < DIGIT_BASE:
            raise ValueError(f"digit must be in [0, 9], got {digit}")
        permuted = permutation[(i + permutation_offset) % PERMUTATION_CYCLE][digit]
        c = multiplication[c][permuted]

    return c


# =============================================================================
# РЕЖИМЫ
# =============================================================================


def is_valid_fold(digits: Sequence[int], tables: ChecksumTables = VERHOEFF_TABLES) -> bool:
    """
    Режим проверки: последовательность с контрольной цифрой валидна,
    если свёртка равна нейтральному элементу.
    """
    return fold(digits, VALIDATION_OFFSET, tables) == GROUP_IDENTITY


def checksum_digit(digits: Sequence[int], tables: ChecksumTables = VERHOEFF_TABLES) -> int:
    """
    Режим генерации: контрольная цифра для последовательности без неё.

    Returns:
        inv[fold(digits, GENERATION_OFFSET)]
    """
    return tables.inverse[fold(digits, GENERATION_OFFSET, tables)]
