"""
Verhoeff Tables - Таблицы группы диэдра D5

Три фиксированные таблицы алгоритма Верхуффа:
- MULTIPLICATION_TABLE (d): операция группы D5 над цифрами 0-9
- PERMUTATION_TABLE (p): позиционные перестановки, цикл из 8 строк
- INVERSE_TABLE (inv): обратный элемент для каждой цифры

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Каждая строка d и p является перестановкой {0..9}
2. d[x][inv[x]] == 0 для всех x (0 - нейтральный элемент группы)
3. Таблицы неизменяемы (tuple) и никогда не вычисляются в runtime

Любое отклонение значений от канонических молча ломает детекцию ошибок,
поэтому таблицы - это фиксированные данные, а не параметры.
"""

from typing import Final, NamedTuple

# =============================================================================
# КОНСТАНТЫ ГРУППЫ
# =============================================================================

# Нейтральный элемент группы D5
GROUP_IDENTITY: Final[int] = 0

# Количество строк таблицы перестановок (период позиционного цикла)
PERMUTATION_CYCLE: Final[int] = 8

# Мощность алфавита (десятичные цифры)
DIGIT_BASE: Final[int] = 10


# =============================================================================
# ТАБЛИЦЫ
# =============================================================================

MULTIPLICATION_TABLE: Final[tuple[tuple[int, ...], ...]] = (
    (0, 1, 2, 3, 4, 5, 6, 7, 8, 9),
    (1, 2, 3, 4, 0, 6, 7, 8, 9, 5),
    (2, 3, 4, 0, 1, 7, 8, 9, 5, 6),
    (3, 4, 0, 1, 2, 8, 9, 5, 6, 7),
    (4, 0, 1, 2, 3, 9, 5, 6, 7, 8),
    (5, 9, 8, 7, 6, 0, 4, 3, 2, 1),
    (6, 5, 9, 8, 7, 1, 0, 4, 3, 2),
    (7, 6, 5, 9, 8, 2, 1, 0, 4, 3),
    (8, 7, 6, 5, 9, 3, 2, 1, 0, 4),
    (9, 8, 7, 6, 5, 4, 3, 2, 1, 0),
)

# Строка i применяется к цифре на обратной позиции, сравнимой с i по модулю 8
PERMUTATION_TABLE: Final[tuple[tuple[int, ...], ...]] = (
    (0, 1, 2, 3, 4, 5, 6, 7, 8, 9),
    (1, 5, 7, 6, 2, 8, 3, 0, 9, 4),
    (5, 8, 0, 3, 7, 9, 6, 1, 4, 2),
    (8, 9, 1, 6, 0, 4, 3, 5, 2, 7),
    (9, 4, 5, 3, 1, 2, 6, 8, 7, 0),
    (4, 2, 8, 6, 5, 7, 3, 9, 0, 1),
    (2, 7, 9, 3, 8, 0, 6, 4, 1, 5),
    (7, 0, 4, 6, 9, 1, 3, 2, 5, 8),
)

INVERSE_TABLE: Final[tuple[int, ...]] = (0, 4, 3, 2, 1, 5, 6, 7, 8, 9)


# =============================================================================
# НАБОР ТАБЛИЦ
# =============================================================================


class ChecksumTables(NamedTuple):
    """
    Набор таблиц для табличного алгоритма контрольной цифры.

    Движок (engine.fold) работает с любым набором такой формы, поэтому
    другой табличный алгоритм подключается новым экземпляром ChecksumTables.
    """

    multiplication: tuple[tuple[int, ...], ...]
    permutation: tuple[tuple[int, ...], ...]
    inverse: tuple[int, ...]


VERHOEFF_TABLES: Final[ChecksumTables] = ChecksumTables(
    multiplication=MULTIPLICATION_TABLE,
    permutation=PERMUTATION_TABLE,
    inverse=INVERSE_TABLE,
)
