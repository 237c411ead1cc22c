"""
RadixConverter — позиционное преобразование по основанию 2^base

Байтовая последовательность (big-endian) трактуется как число,
каждый байт которого несёт base бит величины:

- from_base: байты → неотрицательное целое
- to_base: неотрицательное целое → байты минимальной (или заданной) ширины

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Арифметика точная (int), потолка 2^53 нет
2. to_base выдаёт не более MAX_RADIX_DIGITS цифр: значение обязано быть < 2^(base * 7)
3. Отказ to_base — только пустой результат, исключение не бросается
4. from_base(to_base(v, base, width), base) == v при достаточной ширине
"""

import logging
from typing import Final

from src.core.codec.buffer_ops import BytesLike
from src.core.domain.codec_result import CodecResult

logger = logging.getLogger(__name__)


# =============================================================================
# ПАРАМЕТРЫ
# =============================================================================

# Максимальное число цифр (байт) в результате to_base
MAX_RADIX_DIGITS: Final[int] = 7

# Значение reserved, означающее "ширину выбирает сама функция"
AUTO_WIDTH: Final[int] = -1


# =============================================================================
# ПРЕОБРАЗОВАНИЯ
# =============================================================================


def from_base(digits: BytesLike, base: int) -> int:
    """
    Преобразование последовательности цифр по основанию 2^base в целое.

    Args:
        digits: Цифры, старшая первой
        base: Число бит на цифру

    Returns:
        Σ digit[i] * 2^(base * (N - 1 - i)); для одного байта — сам байт,
        для пустого входа — 0

    Examples:
        >>> from_base(b"\\x01\\x01", 7)
        129
        >>> from_base(b"\\x01\\x01\\x01", 7)
        16513
    """
    if len(digits) == 1:
        return digits[0]

    result = 0

    for digit in digits:
        result = (result << base) + digit

    return result


def _smallest_width(value: int, base: int) -> int:
    """Минимальная ширина 1..MAX_RADIX_DIGITS либо 0, если значение не помещается."""
    biggest = 1 << base

    for width in range(1, MAX_RADIX_DIGITS + 1):
        if value < biggest:
            return width
        biggest <<= base

    return 0


def to_base(value: int, base: int, reserved: int = AUTO_WIDTH) -> bytes:
    """
    Преобразование целого в цифры по основанию 2^base.

    Ширина — наименьшее i в 1..7 с value < 2^(base * i). При reserved >= 0
    результат имеет ровно reserved байт (ведущие нули), но если reserved < i,
    кодирование не выполняется. Отрицательные value или base также дают
    отказ; при base == 0 кодируется только ноль.

    Args:
        value: Неотрицательное целое
        base: Число бит на цифру
        reserved: Требуемая длина результата (default: AUTO_WIDTH)

    Returns:
        Цифры (big-endian) либо b"" при отказе (исключение не бросается)

    Examples:
        >>> to_base(129, 7).hex()
        '0101'
        >>> to_base(16513, 7, 4).hex()
        '00010101'
        >>> to_base(16777218, 3)
        b''
    """
    if base < 0 or value < 0:
        logger.debug("to_base: negative value %d or base %d", value, base)
        return b""

    width = _smallest_width(value, base)

    if width == 0:
        logger.debug("to_base: %d does not fit in %d digits of %d bits", value, MAX_RADIX_DIGITS, base)
        return b""

    if reserved < 0:
        length = width
    else:
        if reserved < width:
            logger.debug("to_base: reserved width %d is less than required %d", reserved, width)
            return b""
        length = reserved

    output = bytearray(length)
    remainder = value

    for j in range(width - 1, -1, -1):
        basis = 1 << (j * base)
        digit, remainder = divmod(remainder, basis)

        # Хранение в байте: цифры шире 8 бит усекаются
        output[length - j - 1] = digit & 0xFF

    return bytes(output)


def to_base_checked(value: int, base: int, reserved: int = AUTO_WIDTH) -> CodecResult:
    """
    to_base с явным результатом.

    Условия отказа те же, что у to_base.
    """
    encoded = to_base(value, base, reserved)

    return CodecResult.from_encoded(
        encoded,
        reason="radix_width_exceeded",
        details=f"value={value} does not fit base=2^{base} (reserved={reserved})",
    )
