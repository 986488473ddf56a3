"""Decoded tag values.

A TagValue is a closed variant: ``kind`` says which payload shape is held.
Numeric kinds always carry a list, even for single-valued tags.

    ValueKind.U8 / U16 / U32 / I8 / I16 / I32   list of int
    ValueKind.F32 / F64                         list of float
    ValueKind.URATIONAL / IRATIONAL             list of URational / IRational
    ValueKind.ASCII                             str (trailing NULs removed)
    ValueKind.UNDEFINED / UNKNOWN               bytes, plus the byte order
    ValueKind.INVALID                           bytes, byte order, format code, count
"""

import math
from enum import Enum
from typing import List, Optional, Union

from exifkit.tiff.entry import IfdEntry, IfdFormat
from exifkit.tiff.lowlevel import (
    read_f32_array,
    read_f64_array,
    read_i8_array,
    read_i16_array,
    read_i32_array,
    read_irational_array,
    read_u8_array,
    read_u16_array,
    read_u32_array,
    read_urational_array,
)


class ValueKind(Enum):
    U8 = 'U8'
    ASCII = 'Ascii'
    U16 = 'U16'
    U32 = 'U32'
    URATIONAL = 'URational'
    I8 = 'I8'
    UNDEFINED = 'Undefined'
    I16 = 'I16'
    I32 = 'I32'
    IRATIONAL = 'IRational'
    F32 = 'F32'
    F64 = 'F64'
    UNKNOWN = 'Unknown'
    INVALID = 'Invalid'


_INT_KINDS = frozenset({ValueKind.U8, ValueKind.U16, ValueKind.U32,
                        ValueKind.I8, ValueKind.I16, ValueKind.I32})
_FLOAT_KINDS = frozenset({ValueKind.F32, ValueKind.F64})
_RATIONAL_KINDS = frozenset({ValueKind.URATIONAL, ValueKind.IRATIONAL})
_BLOB_KINDS = frozenset({ValueKind.UNDEFINED, ValueKind.UNKNOWN, ValueKind.INVALID})


class TagValue:
    """Variant value of an EXIF tag."""
    __slots__ = ('kind', 'data', 'le', 'format_code', 'count')

    def __init__(self, kind: ValueKind, data: Union[list, str, bytes],
                 le: Optional[bool] = None, format_code: Optional[int] = None,
                 count: Optional[int] = None):
        self.kind = kind
        self.data = data
        # Only meaningful for UNDEFINED, UNKNOWN and INVALID
        self.le = le
        # Only meaningful for INVALID
        self.format_code = format_code
        self.count = count

    @classmethod
    def invalid(cls, entry: IfdEntry) -> 'TagValue':
        return cls(ValueKind.INVALID, entry.data, entry.le,
                   int(entry.format), entry.count)

    def __len__(self) -> int:
        return len(self.data)

    def __getitem__(self, index):
        return self.data[index]

    def to_int(self, index: int) -> Optional[int]:
        """Integer at ``index``; None for other kinds or out of range."""
        if self.kind not in _INT_KINDS or not 0 <= index < len(self.data):
            return None
        return self.data[index]

    def to_float(self, index: int) -> Optional[float]:
        """Float at ``index``; rationals are divided out."""
        if not 0 <= index < len(self.data):
            return None
        if self.kind in _INT_KINDS or self.kind in _FLOAT_KINDS:
            return float(self.data[index])
        if self.kind in _RATIONAL_KINDS:
            return self.data[index].value()
        return None

    def __eq__(self, other):
        if not isinstance(other, TagValue):
            return NotImplemented
        return tag_value_eq(self, other)

    __hash__ = None

    def __str__(self) -> str:
        if self.kind is ValueKind.ASCII:
            return self.data
        if self.kind is ValueKind.UNKNOWN:
            return '<unknown blob>'
        if self.kind is ValueKind.INVALID:
            return 'Invalid'
        return num_array(self.data)

    def __repr__(self):
        if self.kind in _BLOB_KINDS:
            return f'TagValue({self.kind.name}, {len(self.data)} bytes, le={self.le})'
        return f'TagValue({self.kind.name}, {self.data!r})'


def num_array(values) -> str:
    """Comma-separated rendering of a sequence of numbers."""
    return ', '.join(str(v) for v in values)


def tag_value_new(entry: IfdEntry) -> TagValue:
    """Decode the resolved data of ``entry`` according to its format.

    A buffer too short for the declared count gives an INVALID value rather
    than an error, so one bad tag never aborts the rest of the image.
    """
    fmt = entry.format
    data = entry.data
    le = entry.le
    count = entry.count

    if fmt == IfdFormat.Ascii:
        # There may be more than one trailing NUL. In theory this is pure
        # ASCII but UTF-8 is admitted.
        return TagValue(ValueKind.ASCII,
                        data.rstrip(b'\x00').decode('utf-8', errors='replace'))
    if fmt == IfdFormat.Undefined:
        return TagValue(ValueKind.UNDEFINED, data, le)

    if fmt == IfdFormat.U8:
        values, kind = read_u8_array(count, data), ValueKind.U8
    elif fmt == IfdFormat.I8:
        values, kind = read_i8_array(count, data), ValueKind.I8
    elif fmt == IfdFormat.U16:
        values, kind = read_u16_array(le, count, data), ValueKind.U16
    elif fmt == IfdFormat.I16:
        values, kind = read_i16_array(le, count, data), ValueKind.I16
    elif fmt == IfdFormat.U32:
        values, kind = read_u32_array(le, count, data), ValueKind.U32
    elif fmt == IfdFormat.I32:
        values, kind = read_i32_array(le, count, data), ValueKind.I32
    elif fmt == IfdFormat.F32:
        values, kind = read_f32_array(count, data), ValueKind.F32
    elif fmt == IfdFormat.F64:
        values, kind = read_f64_array(count, data), ValueKind.F64
    elif fmt == IfdFormat.URational:
        values, kind = read_urational_array(le, count, data), ValueKind.URATIONAL
    elif fmt == IfdFormat.IRational:
        values, kind = read_irational_array(le, count, data), ValueKind.IRATIONAL
    else:
        return TagValue(ValueKind.UNKNOWN, data, le)

    if values is None:
        return TagValue.invalid(entry)
    return TagValue(kind, values)


def _float_list_eq(a: List[float], b: List[float]) -> bool:
    return len(a) == len(b) and all(
        (math.isnan(x) and math.isnan(y)) or x == y for x, y in zip(a, b))


def tag_value_eq(left: TagValue, right: TagValue) -> bool:
    """Structural equality, except that float vectors treat NaN == NaN at
    matching positions."""
    if left.kind is not right.kind:
        return False
    if left.kind in _FLOAT_KINDS:
        return _float_list_eq(left.data, right.data)
    return (left.data == right.data and left.le == right.le
            and left.format_code == right.format_code
            and left.count == right.count)
