"""
Core codec modules

Примитивы кодирования: буферы, radix-преобразование, дополнительный код, BASE64.
"""

# BufferOps
from src.core.codec.buffer_ops import (
    BytesLike,
    buffer_to_hex,
    byte_view,
    concat,
    is_equal_buffer,
    nearest_power_of_2,
)

# RadixConverter
from src.core.codec.radix import (
    AUTO_WIDTH,
    MAX_RADIX_DIGITS,
    from_base,
    to_base,
    to_base_checked,
)

# TwosComplementCodec
from src.core.codec.twos_complement import (
    BYTE_BITS,
    NEEDLESSLY_LONG_WARNING,
    SIGN_BIT_MASK,
    decode_twos_complement,
    encode_twos_complement,
    encode_twos_complement_checked,
    is_needlessly_long,
)

# Base64Codec
from src.core.codec.base64_codec import from_base64, to_base64

# Text ↔ bytes
from src.core.codec.text_bytes import bytes_to_string, pad_number, string_to_bytes

__all__ = [
    # BufferOps
    "BytesLike",
    "buffer_to_hex",
    "byte_view",
    "concat",
    "is_equal_buffer",
    "nearest_power_of_2",
    # RadixConverter — Constants
    "AUTO_WIDTH",
    "MAX_RADIX_DIGITS",
    # RadixConverter — Functions
    "from_base",
    "to_base",
    "to_base_checked",
    # TwosComplementCodec — Constants
    "BYTE_BITS",
    "NEEDLESSLY_LONG_WARNING",
    "SIGN_BIT_MASK",
    # TwosComplementCodec — Functions
    "decode_twos_complement",
    "encode_twos_complement",
    "encode_twos_complement_checked",
    "is_needlessly_long",
    # Base64Codec
    "from_base64",
    "to_base64",
    # Text ↔ bytes
    "bytes_to_string",
    "pad_number",
    "string_to_bytes",
]
