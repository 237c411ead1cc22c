"""
Domain models and value objects.

Contains the codec context, result and alphabet types shared by the codecs.
"""

from src.core.domain.alphabet import BASE64_PAD_INDEX, Base64Alphabet
from src.core.domain.codec_context import TwosComplementContext
from src.core.domain.codec_result import CodecResult

__all__ = [
    # Alphabet
    "BASE64_PAD_INDEX",
    "Base64Alphabet",
    # Two's complement context
    "TwosComplementContext",
    # Result
    "CodecResult",
]
