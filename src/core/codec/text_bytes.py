"""
Преобразования строка ↔ байты и форматирование чисел

Строка трактуется как последовательность байт: код символа = значение байта
(тождественное отображение latin-1). Коды > 255 — ответственность вызывающего:
string_to_bytes их не подменяет, а пробрасывает ошибку кодека.
"""

from typing import Final

from src.core.codec.buffer_ops import BytesLike

# Кодировка, отображающая коды 0..255 в байты один к одному
_BYTE_CHARSET: Final[str] = "latin-1"


def string_to_bytes(text: str) -> bytes:
    """
    Строка → байты, символ = байт.

    Raises:
        UnicodeEncodeError: Если в строке есть символ с кодом > 255
    """
    return text.encode(_BYTE_CHARSET)


def bytes_to_string(buffer: BytesLike) -> str:
    """Байты → строка, байт = символ."""
    return bytes(buffer).decode(_BYTE_CHARSET)


def pad_number(number: int, full_length: int) -> str:
    """
    Дополнение десятичной записи числа ведущими нулями до full_length.

    Если запись длиннее full_length, возвращается "".

    Examples:
        >>> pad_number(1, 2)
        '01'
        >>> pad_number(123, 2)
        ''
    """
    digits = str(number)

    if full_length < len(digits):
        return ""

    return "0" * (full_length - len(digits)) + digits
