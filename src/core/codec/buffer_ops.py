"""
BufferOps — базовые операции над байтовыми буферами

Листовой модуль, от которого зависят остальные кодеки:
- Конкатенация произвольного числа буферов
- Побайтовое сравнение
- Шестнадцатеричное представление (верхний регистр, по 2 цифры на байт)
- Ближайшая степень двойки для длины

Все функции принимают любые bytes-like объекты (bytes, bytearray,
memoryview) и возвращают новые, независимые объекты.
"""

import math
from typing import Optional, Union

BytesLike = Union[bytes, bytearray, memoryview]


def byte_view(buffer: BytesLike) -> memoryview:
    """
    Плоское побайтовое окно на буфер.

    memoryview любого формата приводится к формату "B"; несмежное окно
    копируется.
    """
    view = memoryview(buffer)

    if not view.c_contiguous:
        view = memoryview(view.tobytes())

    return view.cast("B")


# =============================================================================
# КОНКАТЕНАЦИЯ И СРАВНЕНИЕ
# =============================================================================


def concat(*buffers: BytesLike) -> bytes:
    """
    Конкатенация буферов в порядке аргументов.

    Длина результата равна сумме длин входов.

    Examples:
        >>> concat(b"\\x01\\x02", bytearray(b"\\x03"))
        b'\\x01\\x02\\x03'
        >>> concat()
        b''
    """
    output = bytearray()

    for buffer in buffers:
        output += byte_view(buffer)

    return bytes(output)


def is_equal_buffer(buffer1: BytesLike, buffer2: BytesLike) -> bool:
    """
    Побайтовое сравнение двух буферов.

    Разная длина → False сразу, иначе сравнение до первого различия.
    """
    view1 = byte_view(buffer1)
    view2 = byte_view(buffer2)

    # Длина в байтах, а не в элементах формата
    if view1.nbytes != view2.nbytes:
        return False

    for byte1, byte2 in zip(view1, view2):
        if byte1 != byte2:
            return False

    return True


# =============================================================================
# HEX
# =============================================================================


def buffer_to_hex(
    buffer: BytesLike,
    offset: int = 0,
    length: Optional[int] = None,
    insert_space: bool = False,
) -> str:
    """
    Шестнадцатеричное представление участка буфера.

    Args:
        buffer: Исходный буфер
        offset: Смещение начала участка (default: 0)
        length: Длина участка (default: всё после offset)
        insert_space: Пробел после каждого байта (default: False)

    Returns:
        Строка из пар цифр в верхнем регистре; хвостовой пробел обрезан

    Raises:
        ValueError: Если offset/length отрицательные или выходят за буфер

    Examples:
        >>> buffer_to_hex(b"\\x01\\x02\\x0a")
        '01020A'
        >>> buffer_to_hex(b"\\x01\\x02\\x0a", 1, insert_space=True)
        '02 0A'
    """
    if offset < 0:
        raise ValueError(f"offset must be non-negative, got {offset}")

    view = byte_view(buffer)

    if length is None:
        length = view.nbytes - offset

    if length < 0:
        raise ValueError(f"length must be non-negative, got {length}")

    if offset + length > view.nbytes:
        raise ValueError(
            f"offset + length ({offset} + {length}) exceeds buffer length {view.nbytes}"
        )

    separator = " " if insert_space else ""

    return "".join(f"{item:02X}{separator}" for item in view[offset:offset + length]).rstrip()


# =============================================================================
# УТИЛИТЫ
# =============================================================================


def nearest_power_of_2(length: int) -> int:
    """
    Ближайшая к длине степень двойки (показатель).

    round(log2(length)), но если floor(log2(length)) уже совпадает
    с округлённым значением, возвращается floor. Округление half-up.

    Raises:
        ValueError: Если length <= 0 (логарифм не определён)

    Examples:
        >>> nearest_power_of_2(7)
        3
        >>> nearest_power_of_2(5)
        2
    """
    if length <= 0:
        raise ValueError(f"length must be positive, got {length}")

    base = math.log(length) / math.log(2)

    floor = math.floor(base)
    rounded = math.floor(base + 0.5)

    return floor if floor == rounded else rounded
