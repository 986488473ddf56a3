"""Shared test fixtures -- synthetic TIFF and JPEG/Exif byte stream generators."""

import struct
import pytest

# TIFF field types
BYTE = 1
ASCII = 2
SHORT = 3
LONG = 4
RATIONAL = 5
SBYTE = 6
UNDEFINED = 7
SSHORT = 8
SLONG = 9
SRATIONAL = 10
FLOAT = 11
DOUBLE = 12

EXIF_POINTER = 0x8769
GPS_POINTER = 0x8825

_INT_FORMATS = {BYTE: 'B', SHORT: 'H', LONG: 'I', SBYTE: 'b', SSHORT: 'h', SLONG: 'i'}


def rationals(pairs, endian='<', signed=False):
    """Pack (numerator, denominator) pairs as RATIONAL/SRATIONAL bytes."""
    fmt = 'ii' if signed else 'II'
    return b''.join(struct.pack(endian + fmt, n, d) for n, d in pairs)


def _value_bytes(type_id, value, endian):
    if isinstance(value, bytes):
        return value
    return struct.pack(endian + _INT_FORMATS[type_id], value)


def _build_ifd(entries, start, endian, chained):
    """Serialize one directory located at ``start``, followed by its data.

    Args:
        entries: List of (tag_id, type_id, count, value) tuples. ``value`` is
            raw bytes, or an int packed according to ``type_id``. Values of up
            to 4 bytes are stored inline, left-justified; longer ones go to
            the data area after the directory.
        chained: Write the 4-byte next-IFD pointer (IFD-0 only).
    """
    table_size = 2 + 12 * len(entries) + (4 if chained else 0)
    data_offset = start + table_size
    table = struct.pack(endian + 'H', len(entries))
    data = b''
    for tag_id, type_id, count, value in entries:
        raw = _value_bytes(type_id, value, endian)
        table += struct.pack(endian + 'HHI', tag_id, type_id, count)
        if len(raw) <= 4:
            table += raw.ljust(4, b'\x00')
        else:
            table += struct.pack(endian + 'I', data_offset + len(data))
            data += raw
    if chained:
        table += struct.pack(endian + 'I', 0)
    return table + data


def build_tiff(entries, endian='<', exif_entries=None, gps_entries=None):
    """Build a TIFF stream with IFD-0 and optional Exif/GPS sub-IFDs.

    Pointer entries for the sub-IFDs are appended to IFD-0 automatically
    when ``exif_entries`` or ``gps_entries`` is given (an empty list still
    produces an empty sub-IFD).

    Returns:
        bytes: Complete TIFF content.
    """
    bo = b'II' if endian == '<' else b'MM'
    header = bo + struct.pack(endian + 'HI', 42, 8)

    ifd0 = list(entries)
    pointers = []
    if exif_entries is not None:
        pointers.append((EXIF_POINTER, exif_entries))
    if gps_entries is not None:
        pointers.append((GPS_POINTER, gps_entries))

    # Sizes don't depend on pointer values, so lay out with placeholders first
    placeholder = ifd0 + [(tag, LONG, 1, 0) for tag, _ in pointers]
    offset = 8 + len(_build_ifd(placeholder, 8, endian, True))

    subs = b''
    for tag, sub_entries in pointers:
        ifd0.append((tag, LONG, 1, offset + len(subs)))
        subs += _build_ifd(sub_entries, offset + len(subs), endian, False)

    return header + _build_ifd(ifd0, 8, endian, True) + subs


def build_jpeg(tiff, segments_before=()):
    """Wrap a TIFF stream in a minimal JPEG: SOI, APP1 Exif, SOS, EOI.

    ``segments_before`` are (marker, payload) pairs written between SOI and
    the Exif segment.
    """
    out = b'\xff\xd8'
    for marker, payload in segments_before:
        out += bytes([0xff, marker]) + struct.pack('>H', len(payload) + 2) + payload
    payload = b'Exif\x00\x00' + tiff
    out += b'\xff\xe1' + struct.pack('>H', len(payload) + 2) + payload
    out += b'\xff\xda' + struct.pack('>H', 2) + b'\xff\xd9'
    return out


EMPTY_BE_TIFF = b'MM\x00*\x00\x00\x00\x08' + b'\x00\x00' + b'\x00\x00\x00\x00'


def camera_tiff(endian='<'):
    """IFD-0 with the usual camera tags plus Exif and GPS sub-IFDs."""
    ifd0 = [
        (0x010f, ASCII, 6, b'Canon\x00'),
        (0x0110, ASCII, 12, b'EOS 5D Mk4\x00\x00'),
        (0x0112, SHORT, 1, 1),
        (0x011a, RATIONAL, 1, rationals([(72, 1)], endian)),
        (0x011b, RATIONAL, 1, rationals([(72, 1)], endian)),
        (0x0128, SHORT, 1, 2),
    ]
    exif = [
        (0x829a, RATIONAL, 1, rationals([(1, 250)], endian)),
        (0x829d, RATIONAL, 1, rationals([(28, 10)], endian)),
        (0x8827, SHORT, 1, 400),
        (0x9000, UNDEFINED, 4, b'0230'),
        (0x9003, ASCII, 20, b'2024:05:01 12:34:56\x00'),
        (0x920a, RATIONAL, 1, rationals([(50, 1)], endian)),
    ]
    gps = [
        (0x0001, ASCII, 2, b'N\x00'),
        (0x0002, RATIONAL, 3, rationals([(51, 1), (30, 1), (1234, 100)], endian)),
        (0x0003, ASCII, 2, b'W\x00'),
        (0x0004, RATIONAL, 3, rationals([(0, 1), (7, 1), (3960, 100)], endian)),
        (0x0005, BYTE, 1, 0),
        (0x0006, RATIONAL, 1, rationals([(35, 1)], endian)),
    ]
    return build_tiff(ifd0, endian=endian, exif_entries=exif, gps_entries=gps)


# ---------------------------------------------------------------------------
# File fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def tmp_tiff(tmp_path):
    """Little-endian camera TIFF on disk."""
    filepath = tmp_path / 'camera.tif'
    filepath.write_bytes(camera_tiff('<'))
    return filepath


@pytest.fixture
def tmp_tiff_be(tmp_path):
    filepath = tmp_path / 'camera_be.tif'
    filepath.write_bytes(camera_tiff('>'))
    return filepath


@pytest.fixture
def tmp_jpeg(tmp_path):
    """JPEG whose Exif segment holds a single Orientation tag."""
    filepath = tmp_path / 'photo.jpg'
    tiff = build_tiff([(0x0112, SHORT, 1, 1)], endian='>')
    filepath.write_bytes(build_jpeg(tiff, segments_before=[(0xe0, b'JFIF\x00\x01\x01')]))
    return filepath


@pytest.fixture
def tmp_not_an_image(tmp_path):
    filepath = tmp_path / 'notes.txt'
    filepath.write_bytes(b'This is not an image at all')
    return filepath
