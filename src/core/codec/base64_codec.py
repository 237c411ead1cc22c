"""
Base64Codec — посимвольный BASE64 / base64url

Строка трактуется как последовательность байт: один символ = одно значение
0..255 (для бинарных данных см. bytes_to_string). Кодек не зависит от
RadixConverter и TwosComplementCodec.

- 3 входных символа → 4 символа BASE64 (срезы 6/2+4/4+2/6 бит)
- Неполная последняя группа дополняется символом "=" (или без него)
- Декодирование не завершается ошибкой: неизвестные символы и позиции
  за концом входа считаются символом дополнения (0 для битовой арифметики)
"""

from src.core.domain.alphabet import BASE64_PAD_INDEX, Base64Alphabet


# =============================================================================
# ENCODE
# =============================================================================


def to_base64(
    text: str,
    use_url: bool = False,
    skip_padding: bool = False,
    skip_leading_zeros: bool = False,
) -> str:
    """
    Кодирование строки в BASE64 (или base64url).

    Args:
        text: Строка, символ = байт
        use_url: Использовать таблицу base64url (default: False)
        skip_padding: Не выводить символы дополнения (default: False)
        skip_leading_zeros: Отбросить ведущие "\\x00" (default: False);
            строка, целиком состоящая из нулей, не укорачивается

    Returns:
        Строка BASE64

    Examples:
        >>> to_base64("\\x01\\x02\\x03\\x04\\x05\\x06\\x07\\x08\\xff\\xff")
        'AQIDBAUGBwj//w=='
        >>> to_base64("\\x01\\x02\\x03\\x04\\x05\\x06\\x07\\x08\\xff\\xff", True, True)
        'AQIDBAUGBwj__w'
    """
    alphabet = Base64Alphabet.select(use_url)

    if skip_leading_zeros:
        stripped = text.lstrip("\x00")
        if stripped:
            text = stripped

    output = []

    for start in range(0, len(text), 3):
        group = text[start:start + 3]
        chr1, chr2, chr3 = (ord(char) for char in group.ljust(3, "\x00"))

        enc1 = chr1 >> 2
        enc2 = ((chr1 & 0x03) << 4) | (chr2 >> 4)
        enc3 = ((chr2 & 0x0F) << 2) | (chr3 >> 6)
        enc4 = chr3 & 0x3F

        if len(group) == 1:
            enc3 = enc4 = BASE64_PAD_INDEX
        elif len(group) == 2:
            enc4 = BASE64_PAD_INDEX

        symbols = [enc1, enc2, enc3, enc4]
        if skip_padding:
            symbols = [enc for enc in symbols if enc != BASE64_PAD_INDEX]

        output.extend(alphabet.symbol(enc) for enc in symbols)

    return "".join(output)


# =============================================================================
# DECODE
# =============================================================================


def _bits(index: int) -> int:
    # Символ дополнения участвует в битовой арифметике как 0
    return 0 if index == BASE64_PAD_INDEX else index


def from_base64(text: str, use_url: bool = False, trim_trailing_zeros: bool = False) -> str:
    """
    Декодирование строки из BASE64 (или base64url).

    Каждая группа из 4 символов даёт 1-3 символа: второй выводится,
    если третий символ группы не дополнение, третий — если четвёртый
    символ группы не дополнение.

    Args:
        text: Строка BASE64
        use_url: Использовать таблицу base64url (default: False)
        trim_trailing_zeros: Отбросить хвостовые "\\x00" (default: False);
            результат из одних нулей становится ""

    Returns:
        Декодированная строка, символ = байт

    Examples:
        >>> from_base64("AQIDBAUGBwj__wAA", True, True) == "\\x01\\x02\\x03\\x04\\x05\\x06\\x07\\x08\\xff\\xff"
        True
    """
    alphabet = Base64Alphabet.select(use_url)

    output = []

    for start in range(0, len(text), 4):
        enc1, enc2, enc3, enc4 = (
            alphabet.index_of(char) for char in text[start:start + 4].ljust(4, alphabet.pad_char)
        )

        chr1 = (_bits(enc1) << 2) | (_bits(enc2) >> 4)
        chr2 = ((_bits(enc2) & 0x0F) << 4) | (_bits(enc3) >> 2)
        chr3 = ((_bits(enc3) & 0x03) << 6) | _bits(enc4)

        output.append(chr(chr1))

        if enc3 != BASE64_PAD_INDEX:
            output.append(chr(chr2))

        if enc4 != BASE64_PAD_INDEX:
            output.append(chr(chr3))

    result = "".join(output)

    if trim_trailing_zeros:
        result = result.rstrip("\x00")

    return result
