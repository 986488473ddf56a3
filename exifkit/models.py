"""Data models for decoded EXIF metadata."""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from exifkit.tags import ExifTag
from exifkit.tiff.entry import IfdEntry, Namespace
from exifkit.values import TagValue, tag_value_eq


class IfdKind(Enum):
    """Directory an entry was found in."""
    Ifd0 = 'IFD-0'
    Ifd1 = 'IFD-1'
    Exif = 'Exif'
    Gps = 'GPS'
    Makernote = 'Makernote'
    Interoperability = 'Interoperability'


_POINTER_TAGS = (ExifTag.ExifOffset, ExifTag.GPSOffset)


@dataclass(eq=False)
class ExifEntry:
    """A decoded tag.

    ``ifd`` keeps the raw directory record, so entries whose ``tag`` is
    ``ExifTag.UnknownToMe`` can still be inspected by code.
    """
    namespace: Namespace
    ifd: IfdEntry
    tag: ExifTag
    value: TagValue
    unit: str
    value_more_readable: str
    kind: IfdKind

    def __eq__(self, other):
        if not isinstance(other, ExifEntry):
            return NotImplemented
        if (self.namespace != other.namespace or self.ifd != other.ifd
                or self.tag != other.tag or self.unit != other.unit
                or self.kind != other.kind):
            return False
        # Offsets of sub-IFD pointers depend on layout, not content
        if self.tag in _POINTER_TAGS:
            return True
        return (tag_value_eq(self.value, other.value)
                and self.value_more_readable == other.value_more_readable)

    __hash__ = None

    @property
    def code(self) -> int:
        """Raw tag code as stored in the file."""
        return self.ifd.tag


@dataclass
class ExifData:
    """Decoded metadata of one image.

    ``mime`` is ``image/jpeg`` or ``image/tiff``; serializing a JPEG-typed
    value prefixes the stream with the ``Exif\\0\\0`` signature.
    """
    mime: str
    entries: List[ExifEntry] = field(default_factory=list)
    le: bool = True

    def serialize(self) -> bytes:
        from exifkit.tiff.writer import serialize_exif
        return serialize_exif(self)

    def find(self, tag: ExifTag, kind: Optional[IfdKind] = None):
        """First entry with ``tag`` (optionally restricted to ``kind``)."""
        for entry in self.entries:
            if entry.tag == tag and (kind is None or entry.kind == kind):
                return entry
        return None
