"""
TwosComplementContext — контекст декодирования дополнительного кода

Явный контекст вызова для decode_twos_complement: закодированные байты
и список предупреждений, в который декодер дописывает нефатальные замечания.
"""

from typing import Any

from pydantic import BaseModel, Field, field_validator


class TwosComplementContext(BaseModel):
    """
    Контекст декодирования целого в дополнительном коде.

    Модель frozen: заменить байты или список нельзя,
    но сам список warnings пополняется декодером.
    """

    value_hex: bytes = Field(default=b"", description="Байты значения (big-endian)")
    warnings: list[str] = Field(
        default_factory=list, description="Нефатальные предупреждения декодера"
    )

    model_config = {"frozen": True}  # Immutable

    @field_validator("value_hex", mode="before")
    @classmethod
    def validate_bytes_like(cls, v: Any) -> bytes:
        """
        Приведение bytes-like входа к bytes.

        memoryview (в том числе срез чужого буфера) копируется побайтово.
        Строка отклоняется: перекодирование в UTF-8 исказило бы значения.
        """
        if isinstance(v, (bytes, bytearray)):
            return bytes(v)

        if isinstance(v, memoryview):
            return v.tobytes()

        raise ValueError(
            f"value_hex must be bytes, bytearray or memoryview, got {type(v).__name__}"
        )
