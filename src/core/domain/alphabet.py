"""
Base64Alphabet — таблицы символов BASE64

Две фиксированные таблицы по 65 символов: 64 символа данных
и символ дополнения ("=") на позиции 64.

- STANDARD: классический base64 ("+" и "/")
- URL: base64url ("-" и "_")
"""

from enum import Enum
from typing import Final


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Индекс символа дополнения в таблице (он же маркер "нет символа")
BASE64_PAD_INDEX: Final[int] = 64

_DATA_SYMBOLS: Final[str] = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789"


# =============================================================================
# ENUMS
# =============================================================================


class Base64Alphabet(str, Enum):
    """Таблица символов BASE64 (64 символа данных + символ дополнения)."""

    STANDARD = _DATA_SYMBOLS + "+/="
    URL = _DATA_SYMBOLS + "-_="

    @classmethod
    def select(cls, use_url: bool) -> "Base64Alphabet":
        """Выбор таблицы по флагу use_url."""
        return cls.URL if use_url else cls.STANDARD

    @property
    def pad_char(self) -> str:
        return self.value[BASE64_PAD_INDEX]

    def symbol(self, index: int) -> str:
        """Символ по 6-битному индексу (64 → символ дополнения)."""
        return self.value[index]

    def index_of(self, char: str) -> int:
        """
        Обратный поиск символа в таблице.

        Символ дополнения и любой символ вне таблицы дают BASE64_PAD_INDEX.

        Args:
            char: Один символ входной строки

        Returns:
            Индекс 0..63 либо BASE64_PAD_INDEX
        """
        return _INVERSE_TABLES[self].get(char, BASE64_PAD_INDEX)


# Обратные таблицы строятся один раз и далее только читаются
_INVERSE_TABLES: Final[dict] = {
    alphabet: {char: index for index, char in enumerate(alphabet.value[:BASE64_PAD_INDEX])}
    for alphabet in Base64Alphabet
}
