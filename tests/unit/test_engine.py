"""
Тесты для Checksum Engine

Проверяет:
1. Свёртку в режимах проверки и генерации
2. Асимметрию смещений (1 для генерации, 0 для проверки)
3. Валидацию параметров (offset, диапазон цифр)
4. Подключаемый набор таблиц
5. Устойчивость на длинных последовательностях
"""

import pytest

from verhoeff_checksum.core.engine import (
    GENERATION_OFFSET,
    VALIDATION_OFFSET,
    checksum_digit,
    fold,
    is_valid_fold,
)
from verhoeff_checksum.core.tables import (
    GROUP_IDENTITY,
    INVERSE_TABLE,
    MULTIPLICATION_TABLE,
    PERMUTATION_TABLE,
    ChecksumTables,
)


class TestFold:
    """Базовая свёртка"""

    def test_offsets(self) -> None:
        assert VALIDATION_OFFSET == 0
        assert GENERATION_OFFSET == 1

    def test_empty_sequence_is_identity(self) -> None:
        assert fold((), VALIDATION_OFFSET) == GROUP_IDENTITY
        assert fold((), GENERATION_OFFSET) == GROUP_IDENTITY

    def test_single_digit_folds_once(self) -> None:
        """Одна цифра: c = d[0][p[offset][digit]] = p[offset][digit]"""
        for digit in range(10):
            assert fold((digit,), VALIDATION_OFFSET) == PERMUTATION_TABLE[0][digit]
            assert fold((digit,), GENERATION_OFFSET) == PERMUTATION_TABLE[1][digit]

    def test_known_validation_folds(self) -> None:
        assert fold((2, 3, 6, 3), VALIDATION_OFFSET) == 0
        assert fold((1, 2, 3, 4, 5, 1), VALIDATION_OFFSET) == 0
        assert fold((1, 2, 3, 4, 6, 1), VALIDATION_OFFSET) == 8

    def test_known_generation_folds(self) -> None:
        """inv[fold] даёт опубликованные контрольные цифры"""
        assert fold((2, 3, 6), GENERATION_OFFSET) == 2
        assert INVERSE_TABLE[2] == 3
        assert fold((1, 2, 3, 4, 5), GENERATION_OFFSET) == 4
        assert INVERSE_TABLE[4] == 1

    def test_result_always_in_group(self) -> None:
        for n in range(1, 30):
            digits = tuple((i * 7 + 3) % 10 for i in range(n))
            assert 0 <= fold(digits, VALIDATION_OFFSET) <= 9
            assert 0 <= fold(digits, GENERATION_OFFSET) <= 9

    def test_accepts_list(self) -> None:
        assert fold([2, 3, 6, 3], VALIDATION_OFFSET) == fold((2, 3, 6, 3), VALIDATION_OFFSET)

    def test_very_long_sequence(self) -> None:
        """Нет переполнения: значения всегда в [0, 9]"""
        digits = tuple(i % 10 for i in range(100_000))
        check = checksum_digit(digits)
        assert is_valid_fold(digits + (check,))


class TestFoldParameterValidation:
    """Невалидные параметры"""

    @pytest.mark.parametrize("offset", [-1, 2, 8])
    def test_invalid_offset_raises(self, offset: int) -> None:
        with pytest.raises(ValueError, match="permutation_offset must be 0 or 1"):
            fold((1, 2, 3), offset)

    @pytest.mark.parametrize("digit", [-1, 10, 42])
    def test_out_of_range_digit_raises(self, digit: int) -> None:
        with pytest.raises(ValueError, match=r"digit must be in \[0, 9\]"):
            fold((1, digit, 3), VALIDATION_OFFSET)


class TestModes:
    """Режимы проверки и генерации"""

    def test_generated_digit_validates(self) -> None:
        for digits in [(2, 3, 6), (1, 4, 2, 8, 5, 7), (0,), (9, 9, 9, 9)]:
            check = checksum_digit(digits)
            assert is_valid_fold(digits + (check,))

    def test_exactly_one_check_digit_validates(self) -> None:
        """Для любой основы ровно одна цифра 0-9 даёт валидную строку"""
        for digits in [(2, 3, 6), (1, 2, 3, 4, 5), (0, 0, 0)]:
            valid = [c for c in range(10) if is_valid_fold(digits + (c,))]
            assert valid == [checksum_digit(digits)]

    def test_swapped_offsets_break_round_trip(self) -> None:
        """Генерация со смещением 0 даёт цифру, которую проверка отвергает"""
        digits = (2, 3, 6)
        wrong = INVERSE_TABLE[fold(digits, VALIDATION_OFFSET)]
        assert wrong != checksum_digit(digits)
        assert not is_valid_fold(digits + (wrong,))


class TestPluggableTables:
    """Движок работает с любым набором таблиц той же формы"""

    def test_explicit_verhoeff_tables(self) -> None:
        tables = ChecksumTables(
            multiplication=MULTIPLICATION_TABLE,
            permutation=PERMUTATION_TABLE,
            inverse=INVERSE_TABLE,
        )
        assert checksum_digit((2, 3, 6), tables) == 3
        assert is_valid_fold((2, 3, 6, 3), tables)

    def test_trivial_table_set(self) -> None:
        """Сложение по модулю 10 без перестановок: контрольная цифра дополняет сумму"""
        addition = tuple(tuple((a + b) % 10 for b in range(10)) for a in range(10))
        identity_rows = tuple(tuple(range(10)) for _ in range(8))
        negation = tuple((10 - x) % 10 for x in range(10))
        tables = ChecksumTables(addition, identity_rows, negation)

        assert fold((1, 2, 3), GENERATION_OFFSET, tables) == 6
        assert checksum_digit((1, 2, 3), tables) == 4
        assert is_valid_fold((1, 2, 3, 4), tables)
