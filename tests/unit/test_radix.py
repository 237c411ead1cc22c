"""
Тесты для модуля RadixConverter

Проверяет:
1. from_base для одного и нескольких байт
2. to_base: минимальная и зарезервированная ширина
3. Отказ при нехватке ширины (пустой результат)
4. Точность за пределами 2^53
5. Round-trip для случайных последовательностей
"""

import random

import pytest

from src.core.codec.buffer_ops import buffer_to_hex
from src.core.codec.radix import (
    MAX_RADIX_DIGITS,
    from_base,
    to_base,
    to_base_checked,
)


# =============================================================================
# ТЕСТЫ FROM_BASE
# =============================================================================


class TestFromBase:
    """Тесты для from_base"""

    @pytest.mark.parametrize(
        "digits,expected",
        [
            (b"\x01", 1),
            (b"\x01\x01", 129),
            (b"\x01\x01\x01", 16513),
        ],
    )
    def test_base_7(self, digits: bytes, expected: int) -> None:
        """Основание 2^7"""
        assert from_base(digits, 7) == expected

    def test_single_byte_returned_as_is(self) -> None:
        """Один байт возвращается напрямую, независимо от основания"""
        assert from_base(b"\xff", 3) == 255
        assert from_base(b"\xff", 8) == 255

    def test_empty_input(self) -> None:
        """Пустой вход → 0"""
        assert from_base(b"", 8) == 0

    def test_base_8_big_endian(self) -> None:
        """Основание 2^8 — обычное big-endian число"""
        assert from_base(b"\x01\x00", 8) == 256
        assert from_base(b"\x12\x34\x56", 8) == 0x123456

    def test_exact_beyond_float_range(self) -> None:
        """Нет потери точности за пределами 2^53"""
        assert from_base(b"\xff" * 10, 8) == 2**80 - 1
        assert from_base(b"\x00\x20\x00\x00\x00\x00\x00\x01", 8) == 2**53 + 1


# =============================================================================
# ТЕСТЫ TO_BASE
# =============================================================================


class TestToBase:
    """Тесты для to_base"""

    @pytest.mark.parametrize(
        "value,expected_hex",
        [
            (1, "01"),
            (129, "0101"),
            (16513, "010101"),
        ],
    )
    def test_minimal_width_base_7(self, value: int, expected_hex: str) -> None:
        """Минимальная ширина для основания 2^7"""
        assert buffer_to_hex(to_base(value, 7)) == expected_hex

    def test_reserved_width_pads_with_zeros(self) -> None:
        """Зарезервированная ширина дополняется ведущими нулями"""
        assert buffer_to_hex(to_base(16513, 7, 4)) == "00010101"

    def test_reserved_too_small_fails(self) -> None:
        """Зарезервированная ширина меньше требуемой → пустой результат"""
        assert to_base(16513, 7, 0) == b""
        assert to_base(16513, 7, 2) == b""

    def test_reserved_exact_width(self) -> None:
        """Зарезервированная ширина равна требуемой"""
        assert buffer_to_hex(to_base(16513, 7, 3)) == "010101"

    def test_value_too_large_fails(self) -> None:
        """Значение не помещается в 7 цифр → пустой результат"""
        assert to_base(16777218, 3) == b""

    def test_zero(self) -> None:
        """Ноль кодируется одним нулевым байтом"""
        assert to_base(0, 8) == b"\x00"
        assert to_base(0, 8, 3) == b"\x00\x00\x00"

    def test_upper_limit_base_8(self) -> None:
        """Граница 7 байт для основания 2^8"""
        assert to_base(2**56 - 1, 8) == b"\xff" * MAX_RADIX_DIGITS
        assert to_base(2**56, 8) == b""

    def test_width_boundaries_base_8(self) -> None:
        """Переход ширины на степенях 256"""
        assert to_base(255, 8) == b"\xff"
        assert to_base(256, 8) == b"\x01\x00"
        assert to_base(65535, 8) == b"\xff\xff"
        assert to_base(65536, 8) == b"\x01\x00\x00"

    def test_negative_parameters_fail_soft(self) -> None:
        """Отрицательные value или base → пустой результат без исключения"""
        assert to_base(-1, 8) == b""
        assert to_base(1, -1) == b""
        assert to_base(0, -3, 2) == b""

    def test_zero_base(self) -> None:
        """При base == 0 кодируется только ноль"""
        assert to_base(0, 0) == b"\x00"
        assert to_base(0, 0, 3) == b"\x00\x00\x00"
        assert to_base(5, 0) == b""


class TestToBaseChecked:
    """Тесты для to_base_checked"""

    def test_success(self) -> None:
        """Успешное кодирование"""
        result = to_base_checked(129, 7)

        assert result.success is True
        assert result.value == b"\x01\x01"
        assert result.reason == ""
        assert bool(result) is True

    def test_failure_has_reason(self) -> None:
        """Отказ с причиной"""
        result = to_base_checked(16777218, 3)

        assert result.success is False
        assert result.value == b""
        assert result.reason == "radix_width_exceeded"
        assert "16777218" in result.details
        assert bool(result) is False

    def test_zero_base_fails_soft(self) -> None:
        """base == 0 и ненулевое значение → явный отказ, без исключения"""
        result = to_base_checked(5, 0)

        assert result.success is False
        assert result.reason == "radix_width_exceeded"

    def test_same_truth_conditions(self) -> None:
        """Те же условия отказа, что и у to_base"""
        for value, base, reserved in [(16513, 7, 0), (16513, 7, 4), (2**56, 8, -1), (0, 1, -1), (0, 0, -1), (5, 0, -1), (-1, 8, -1)]:
            assert to_base_checked(value, base, reserved).success == (len(to_base(value, base, reserved)) > 0)


# =============================================================================
# ROUND-TRIP
# =============================================================================


class TestRoundTrip:
    """Свойство to_base(from_base(b, base), base, len(b)) == b"""

    @pytest.mark.parametrize("base", [7, 8])
    @pytest.mark.parametrize("length", range(1, MAX_RADIX_DIGITS + 1))
    def test_random_sequences(self, base: int, length: int) -> None:
        """Случайные последовательности допустимых цифр"""
        rng = random.Random(base * 100 + length)
        digit_limit = (1 << base) - 1

        for _ in range(50):
            digits = bytes(rng.randint(0, digit_limit) for _ in range(length))

            assert to_base(from_base(digits, base), base, length) == digits

    @pytest.mark.parametrize("base", [7, 8])
    def test_leading_zeros_restored(self, base: int) -> None:
        """Ведущие нули восстанавливаются за счёт reserved"""
        digits = b"\x00\x00\x05"

        assert to_base(from_base(digits, base), base, len(digits)) == digits
