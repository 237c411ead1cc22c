"""
CodecResult — явный результат кодирования

Кодеры radix/дополнительного кода сигнализируют об ошибке пустым
результатом. CodecResult выносит это на границу API в явном виде.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class CodecResult:
    """Результат кодирования с явным признаком успеха."""

    success: bool
    value: bytes

    # Машинно-читаемая причина отказа ("" при успехе)
    reason: str

    # Детали
    details: str

    def __bool__(self) -> bool:
        return self.success

    @classmethod
    def from_encoded(cls, encoded: bytes, reason: str, details: str) -> "CodecResult":
        """
        Упаковка результата "мягкого" кодера.

        Пустой результат означает отказ: тогда reason/details описывают его.
        """
        if len(encoded) == 0:
            return cls(success=False, value=b"", reason=reason, details=details)
        return cls(success=True, value=encoded, reason="", details=f"PASS: {len(encoded)} byte(s)")
