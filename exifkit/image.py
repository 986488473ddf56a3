"""Container sniffing and JPEG APP1 segment handling."""

import struct
from enum import Enum
from typing import Tuple

from exifkit.errors import FileTypeUnknown, JpegWithoutExif

# Signature opening the TIFF stream inside a JPEG APP1 segment
EXIF_HEADER = b'Exif\x00\x00'

INTEL_PREAMBLE = b'II*\x00'
MOTOROLA_PREAMBLE = b'MM\x00*'

_SOI = b'\xff\xd8'
_APP1 = 0xe1
_SOS = 0xda
_EOI = 0xd9

# Largest payload a single segment can carry (length field includes itself)
MAX_SEGMENT_PAYLOAD = 0xffff - 2


class FileType(Enum):
    TIFF = 'image/tiff'
    JPEG = 'image/jpeg'
    UNKNOWN = 'unknown'

    @property
    def mime(self) -> str:
        return self.value


def detect_type(contents: bytes) -> FileType:
    """Identify the container by its leading bytes."""
    if contents[:3] == b'\xff\xd8\xff':
        return FileType.JPEG
    if contents[:4] in (INTEL_PREAMBLE, MOTOROLA_PREAMBLE):
        return FileType.TIFF
    return FileType.UNKNOWN


def find_embedded_tiff_in_jpeg(contents: bytes) -> Tuple[int, int]:
    """Locate the TIFF stream of the first Exif APP1 segment.

    Walks the marker segments after SOI and stops at the first scan or at
    EOI. Returns ``(offset, size)`` of the TIFF bytes, without the Exif
    signature.

    Raises:
        JpegWithoutExif: a segment length runs past the end of the buffer.
        FileTypeUnknown: no Exif APP1 segment before image data.
    """
    offset = 2
    while offset + 4 <= len(contents):
        if contents[offset] != 0xff:
            raise JpegWithoutExif(f'Expected marker at offset {offset}')
        marker = contents[offset + 1]
        # Fill bytes
        if marker == 0xff:
            offset += 1
            continue
        if marker in (_SOS, _EOI):
            break
        (length,) = struct.unpack('>H', contents[offset + 2:offset + 4])
        if length < 2 or offset + 2 + length > len(contents):
            raise JpegWithoutExif(
                f'Segment at offset {offset} has length {length}, '
                f'buffer has {len(contents) - offset - 2} bytes left')
        payload_start = offset + 4
        if (marker == _APP1 and length - 2 >= len(EXIF_HEADER)
                and contents[payload_start:payload_start + 6] == EXIF_HEADER):
            return payload_start + len(EXIF_HEADER), length - 2 - len(EXIF_HEADER)
        offset += 2 + length
    raise FileTypeUnknown()


def build_app1_segment(payload: bytes) -> bytes:
    """Frame an ``Exif\\0\\0``-prefixed payload as a minimal JPEG.

    The result is SOI followed by one APP1 segment, which is enough for
    :func:`find_embedded_tiff_in_jpeg` to locate the metadata again.
    """
    if len(payload) > MAX_SEGMENT_PAYLOAD:
        raise ValueError(
            f'APP1 payload of {len(payload)} bytes exceeds {MAX_SEGMENT_PAYLOAD}')
    return _SOI + bytes([0xff, _APP1]) + struct.pack('>H', len(payload) + 2) + payload
