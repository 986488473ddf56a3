"""TIFF stream writer for decoded EXIF metadata.

Layout produced::

    header | IFD-0 | IFD-0 data | Exif IFD | Exif data | GPS IFD | GPS data

Values that do not fit in a record are written after their directory. Each
record first gets a zero placeholder; once the directory is complete the
payloads are appended and the placeholders backfilled with their offsets.
"""

from typing import Dict, List

from exifkit.errors import MissingExifOffset, ThumbnailNotSupported
from exifkit.image import EXIF_HEADER, INTEL_PREAMBLE, MOTOROLA_PREAMBLE
from exifkit.models import ExifData, ExifEntry, IfdKind
from exifkit.tiff.entry import (
    DATA_WIDTH,
    EXIF_IFD_POINTER_TAG,
    GPS_IFD_POINTER_TAG,
    Patch,
)
from exifkit.tiff.lowlevel import write_u16, write_u32

JPEG_MIME = 'image/jpeg'

_HEADER_SIZE = 8


def _backfill(serialized: bytearray, pos: int, le: bool, value: int) -> None:
    serialized[pos:pos + DATA_WIDTH] = write_u32(le, value)


def _apply_patches(serialized: bytearray, patches: List[Patch], le: bool) -> None:
    for patch in patches:
        _backfill(serialized, patch.offset_pos, le, len(serialized))
        serialized += patch.data


def _serialize_ifd(serialized: bytearray, entries: List[ExifEntry],
                   le: bool) -> Dict[int, List[int]]:
    """Write one directory plus its out-of-line data.

    Returns the positions of the data fields of every sub-IFD pointer record,
    keyed by pointer tag. A tag repeated in the directory has several.
    """
    serialized += write_u16(le, len(entries))
    patches: List[Patch] = []
    pointers: Dict[int, List[int]] = {}
    for entry in entries:
        entry.ifd.serialize(serialized, patches)
        if entry.ifd.is_sub_ifd_pointer:
            pointers.setdefault(entry.ifd.tag, []).append(len(serialized) - DATA_WIDTH)
    # No chained directory
    serialized += write_u32(le, 0)
    _apply_patches(serialized, patches, le)
    return pointers


def _serialize_sub_ifd(serialized: bytearray, entries: List[ExifEntry],
                       le: bool, pointer_positions: List[int]) -> None:
    if not pointer_positions:
        raise MissingExifOffset()
    for pos in pointer_positions:
        _backfill(serialized, pos, le, len(serialized))
    _serialize_ifd(serialized, entries, le)


def serialize_exif(exif: ExifData) -> bytes:
    """Encode ``exif`` as a TIFF stream.

    Decoding the result yields metadata equal to ``exif``, and encoding that
    again is byte-identical.

    Raises:
        ThumbnailNotSupported: ``exif`` holds IFD-1 entries.
        MissingExifOffset: Exif or GPS entries without a pointer in IFD-0.
        UnsupportedNamespace: an entry outside the standard namespace.
    """
    le = exif.le
    serialized = bytearray(INTEL_PREAMBLE if le else MOTOROLA_PREAMBLE)
    serialized += write_u32(le, _HEADER_SIZE)

    by_kind = {kind: [] for kind in IfdKind}
    for entry in exif.entries:
        by_kind[entry.kind].append(entry)
    # Makernote and Interoperability entries are not written back

    if by_kind[IfdKind.Ifd1]:
        raise ThumbnailNotSupported()

    pointers = _serialize_ifd(serialized, by_kind[IfdKind.Ifd0], le)

    # Every pointer in IFD-0 is backfilled, with an empty directory if needed
    for tag, kind in ((EXIF_IFD_POINTER_TAG, IfdKind.Exif),
                      (GPS_IFD_POINTER_TAG, IfdKind.Gps)):
        if by_kind[kind] or tag in pointers:
            _serialize_sub_ifd(serialized, by_kind[kind], le, pointers.get(tag, []))

    if exif.mime == JPEG_MIME:
        return EXIF_HEADER + bytes(serialized)
    return bytes(serialized)
