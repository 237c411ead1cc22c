"""
TwosComplementCodec — целые в дополнительном коде

Кодирование и декодирование знаковых целых поверх RadixConverter (base = 8).
Знак определяется старшим битом первого байта.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Кодирование минимальной длины; единственный ведущий 0x00 добавляется
   только если старший бит положительного значения читался бы как знак
2. Отрицательные значения: 2^(8 * width - 1) - |value| с установленным знаковым битом
3. |value| > 2^55 → пустой результат (ширина больше 7 байт)
4. Избыточный ведущий байт при декодировании — предупреждение, не ошибка
"""

import logging
from typing import Final

from src.core.codec.radix import MAX_RADIX_DIGITS, from_base, to_base
from src.core.domain.codec_context import TwosComplementContext
from src.core.domain.codec_result import CodecResult

logger = logging.getLogger(__name__)


# =============================================================================
# ПАРАМЕТРЫ
# =============================================================================

BYTE_BITS: Final[int] = 8

# Знаковый бит первого байта
SIGN_BIT_MASK: Final[int] = 0x80

NEEDLESSLY_LONG_WARNING: Final[str] = "Needlessly long format"


# =============================================================================
# DECODE
# =============================================================================


def is_needlessly_long(value_hex: bytes) -> bool:
    """
    Проверка избыточного ведущего байта.

    0xFF перед байтом с установленным старшим битом или 0x00 перед байтом
    со сброшенным старшим битом ничего не добавляют к значению.
    """
    if len(value_hex) < 2:
        return False

    first, second = value_hex[0], value_hex[1]

    redundant_ones = first == 0xFF and (second & SIGN_BIT_MASK) != 0
    redundant_zeros = first == 0x00 and (second & SIGN_BIT_MASK) == 0

    return redundant_ones or redundant_zeros


def decode_twos_complement(context: TwosComplementContext) -> int:
    """
    Декодирование целого в дополнительном коде.

    Значение = величина (все байты, старший бит первого сброшен)
    минус вклад знака (только старший бит первого байта на своей позиции).

    Args:
        context: Байты значения и список предупреждений

    Returns:
        Знаковое целое; пустой вход даёт 0

    Examples:
        >>> decode_twos_complement(TwosComplementContext(value_hex=b"\\x80\\x81"))
        -32639
    """
    value_hex = context.value_hex

    if is_needlessly_long(value_hex):
        logger.debug("Redundant leading byte in %s", value_hex.hex().upper())
        context.warnings.append(NEEDLESSLY_LONG_WARNING)

    if len(value_hex) == 0:
        return 0

    sign_part = bytearray(len(value_hex))
    sign_part[0] = value_hex[0] & SIGN_BIT_MASK

    magnitude_part = bytearray(value_hex)
    magnitude_part[0] &= 0x7F

    sign_value = from_base(sign_part, BYTE_BITS)
    magnitude = from_base(magnitude_part, BYTE_BITS)

    return magnitude - sign_value


# =============================================================================
# ENCODE
# =============================================================================


def encode_twos_complement(value: int) -> bytes:
    """
    Кодирование целого в дополнительный код минимальной длины.

    Перебор ширины 1..7 байт с границей 2^(8 * width - 1): выбирается
    первая ширина, где |value| <= граница.

    Args:
        value: Знаковое целое

    Returns:
        Байты (big-endian) либо b"", если |value| > 2^55

    Examples:
        >>> encode_twos_complement(-128).hex()
        '80'
        >>> encode_twos_complement(128).hex()
        '0080'
    """
    magnitude = abs(value)
    bound = SIGN_BIT_MASK

    for width in range(1, MAX_RADIX_DIGITS + 1):
        if magnitude <= bound:
            if value < 0:
                encoded = bytearray(to_base(bound - magnitude, BYTE_BITS, width))
                encoded[0] |= SIGN_BIT_MASK
                return bytes(encoded)

            encoded = to_base(magnitude, BYTE_BITS, width)

            # Старший бит положительного значения читался бы как знак
            if encoded[0] & SIGN_BIT_MASK:
                encoded = b"\x00" + encoded

            return encoded

        bound <<= BYTE_BITS

    logger.debug("encode_twos_complement: %d exceeds %d bytes", value, MAX_RADIX_DIGITS)
    return b""


def encode_twos_complement_checked(value: int) -> CodecResult:
    """encode_twos_complement с явным результатом."""
    encoded = encode_twos_complement(value)

    return CodecResult.from_encoded(
        encoded,
        reason="twos_complement_out_of_range",
        details=f"|{value}| exceeds 2^{BYTE_BITS * MAX_RADIX_DIGITS - 1}",
    )
