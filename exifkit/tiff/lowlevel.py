"""Endianness-aware fixed-width reads and writes on byte slices.

Every reader returns None instead of raising when the slice is too short.
"""

import struct
from typing import List, Optional

from exifkit.rational import IRational, URational


def _endian(le: bool) -> str:
    return '<' if le else '>'


def _unpack(fmt: str, raw: bytes, size: int):
    if len(raw) < size:
        return None
    return struct.unpack(fmt, raw[:size])[0]


def read_u16(le: bool, raw: bytes) -> Optional[int]:
    return _unpack(_endian(le) + 'H', raw, 2)


def read_i16(le: bool, raw: bytes) -> Optional[int]:
    return _unpack(_endian(le) + 'h', raw, 2)


def read_u32(le: bool, raw: bytes) -> Optional[int]:
    return _unpack(_endian(le) + 'I', raw, 4)


def read_i32(le: bool, raw: bytes) -> Optional[int]:
    return _unpack(_endian(le) + 'i', raw, 4)


# IEEE-754 values are always stored little-endian here, whatever the
# directory's byte order says.
def read_f32(raw: bytes) -> Optional[float]:
    return _unpack('<f', raw, 4)


def read_f64(raw: bytes) -> Optional[float]:
    return _unpack('<d', raw, 8)


def read_urational(le: bool, raw: bytes) -> Optional[URational]:
    if len(raw) < 8:
        return None
    n, d = struct.unpack(_endian(le) + 'II', raw[:8])
    return URational(n, d)


def read_irational(le: bool, raw: bytes) -> Optional[IRational]:
    if len(raw) < 8:
        return None
    n, d = struct.unpack(_endian(le) + 'ii', raw[:8])
    return IRational(n, d)


def _read_array(fmt: str, elem_size: int, count: int, raw: bytes) -> Optional[list]:
    """Unpack ``count`` elements of ``fmt``, or None if ``raw`` is short."""
    size = elem_size * count
    if len(raw) < size:
        return None
    return list(struct.unpack(f'{fmt[0]}{count}{fmt[1:]}', raw[:size]))


def read_u8_array(count: int, raw: bytes) -> Optional[List[int]]:
    if len(raw) < count:
        return None
    return list(raw[:count])


def read_i8_array(count: int, raw: bytes) -> Optional[List[int]]:
    return _read_array('<b', 1, count, raw)


def read_u16_array(le: bool, count: int, raw: bytes) -> Optional[List[int]]:
    return _read_array(_endian(le) + 'H', 2, count, raw)


def read_i16_array(le: bool, count: int, raw: bytes) -> Optional[List[int]]:
    return _read_array(_endian(le) + 'h', 2, count, raw)


def read_u32_array(le: bool, count: int, raw: bytes) -> Optional[List[int]]:
    return _read_array(_endian(le) + 'I', 4, count, raw)


def read_i32_array(le: bool, count: int, raw: bytes) -> Optional[List[int]]:
    return _read_array(_endian(le) + 'i', 4, count, raw)


def read_f32_array(count: int, raw: bytes) -> Optional[List[float]]:
    return _read_array('<f', 4, count, raw)


def read_f64_array(count: int, raw: bytes) -> Optional[List[float]]:
    return _read_array('<d', 8, count, raw)


def read_urational_array(le: bool, count: int, raw: bytes) -> Optional[List[URational]]:
    pairs = _read_array(_endian(le) + 'I', 4, count * 2, raw)
    if pairs is None:
        return None
    return [URational(pairs[i], pairs[i + 1]) for i in range(0, len(pairs), 2)]


def read_irational_array(le: bool, count: int, raw: bytes) -> Optional[List[IRational]]:
    pairs = _read_array(_endian(le) + 'i', 4, count * 2, raw)
    if pairs is None:
        return None
    return [IRational(pairs[i], pairs[i + 1]) for i in range(0, len(pairs), 2)]


def write_u16(le: bool, value: int) -> bytes:
    return struct.pack(_endian(le) + 'H', value)


def write_u32(le: bool, value: int) -> bytes:
    return struct.pack(_endian(le) + 'I', value)
