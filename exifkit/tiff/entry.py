"""Raw IFD entry: tag, format, count and inline-or-offset data."""

from enum import IntEnum
from typing import List, Optional

from exifkit.errors import UnsupportedNamespace
from exifkit.tiff.lowlevel import read_u32, write_u16, write_u32

# Size of the data/offset field of a 12-byte directory record
DATA_WIDTH = 4

EXIF_IFD_POINTER_TAG = 0x8769
GPS_IFD_POINTER_TAG = 0x8825


class IfdFormat(IntEnum):
    """TIFF field types. The integer value is the on-disk format code."""
    Unknown = 0
    U8 = 1
    Ascii = 2
    U16 = 3
    U32 = 4
    URational = 5
    I8 = 6
    Undefined = 7
    I16 = 8
    I32 = 9
    IRational = 10
    F32 = 11
    F64 = 12

    @classmethod
    def new(cls, code: int) -> 'IfdFormat':
        """Map a raw format code, falling back to Unknown."""
        try:
            return cls(code)
        except ValueError:
            return cls.Unknown


# Element size in bytes per format
FORMAT_SIZES = {
    IfdFormat.Unknown: 1,
    IfdFormat.U8: 1,
    IfdFormat.Ascii: 1,
    IfdFormat.U16: 2,
    IfdFormat.U32: 4,
    IfdFormat.URational: 8,
    IfdFormat.I8: 1,
    IfdFormat.Undefined: 1,
    IfdFormat.I16: 2,
    IfdFormat.I32: 4,
    IfdFormat.IRational: 8,
    IfdFormat.F32: 4,
    IfdFormat.F64: 8,
}


class Namespace(IntEnum):
    """Tag namespaces. Only Standard is parsed; the others are reserved for
    manufacturer-specific MakerNote tags."""
    Standard = 0x0000
    Nikon = 0x0001
    Canon = 0x0002


class Patch:
    """Deferred write: ``data`` is appended later and its final offset is
    written at ``offset_pos``."""
    __slots__ = ('offset_pos', 'data')

    def __init__(self, offset_pos: int, data: bytes):
        self.offset_pos = offset_pos
        self.data = bytes(data)

    def __repr__(self):
        return f'Patch(offset_pos={self.offset_pos}, len={len(self.data)})'


class IfdEntry:
    """A single 12-byte directory record plus its resolved data.

    ``ifd_data`` is the raw 4-byte field of the record: the value itself when
    it fits, otherwise an offset. ``data`` holds the resolved value bytes once
    :meth:`copy_data` has run; ``ext_data`` the out-of-line copy, if any.
    """
    __slots__ = ('namespace', 'tag', 'format', 'count', 'ifd_data',
                 'ext_data', 'data', 'le')

    def __init__(self, tag: int, format: IfdFormat, count: int,
                 ifd_data: bytes, le: bool,
                 namespace: Namespace = Namespace.Standard,
                 data: bytes = b'', ext_data: bytes = b''):
        self.namespace = namespace
        self.tag = tag
        self.format = format
        self.count = count
        self.ifd_data = bytes(ifd_data)
        self.ext_data = bytes(ext_data)
        self.data = bytes(data)
        self.le = le

    @property
    def size(self) -> int:
        """Size of a single element, not of the whole entry."""
        return FORMAT_SIZES[self.format]

    @property
    def length(self) -> int:
        return self.size * self.count

    @property
    def in_ifd(self) -> bool:
        """True when the value lives in the record itself."""
        return self.length <= DATA_WIDTH

    @property
    def is_sub_ifd_pointer(self) -> bool:
        return self.tag in (EXIF_IFD_POINTER_TAG, GPS_IFD_POINTER_TAG)

    def data_as_offset(self) -> int:
        """Read the record's data field as an offset.

        Only meaningful for pointer tags or out-of-line entries.
        """
        return read_u32(self.le, self.ifd_data)

    def try_data_as_offset(self) -> Optional[int]:
        if len(self.ifd_data) < DATA_WIDTH:
            return None
        return self.data_as_offset()

    def copy_data(self, contents: bytes) -> bool:
        """Resolve ``data`` from the record or from ``contents``.

        Returns False when an out-of-line range falls outside ``contents``;
        the caller drops the entry.
        """
        if self.in_ifd:
            self.data = self.ifd_data
            return True

        offset = self.data_as_offset()
        end = offset + self.length
        if end > len(contents):
            return False
        self.ext_data = bytes(contents[offset:end])
        self.data = self.ext_data
        return True

    def serialize(self, serialized: bytearray, data_patches: List[Patch]) -> None:
        """Append this record to ``serialized``.

        Out-of-line values get a zero placeholder and a :class:`Patch`
        recording where their final offset must be written.
        """
        if self.namespace != Namespace.Standard:
            raise UnsupportedNamespace()

        serialized += write_u16(self.le, self.tag)
        serialized += write_u16(self.le, int(self.format))
        serialized += write_u32(self.le, self.count)

        if self.in_ifd:
            serialized += self.data[:DATA_WIDTH].ljust(DATA_WIDTH, b'\x00')
        else:
            data_patches.append(Patch(len(serialized), self.data))
            serialized += b'\x00' * DATA_WIDTH

    def __eq__(self, other):
        if not isinstance(other, IfdEntry):
            return NotImplemented
        # Pointer values are file offsets, not content
        data_eq = self.is_sub_ifd_pointer or self.data == other.data
        return (self.namespace == other.namespace and self.tag == other.tag
                and self.format == other.format and self.count == other.count
                and self.le == other.le and data_eq)

    def __repr__(self):
        return (f'IfdEntry(tag=0x{self.tag:04x}, format={self.format.name}, '
                f'count={self.count}, le={self.le})')
