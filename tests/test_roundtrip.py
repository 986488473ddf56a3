"""Round-trip tests: decode, encode, decode again, encode again.

For every input that decodes, the re-decoded metadata must compare equal to
the first decode and the second encoding must match the first byte for byte.
"""

import math
import struct

import pytest

from exifkit.image import build_app1_segment
from exifkit.models import ExifData
from exifkit.reader import parse_buffer_quiet
from exifkit.tags import ExifTag
from tests.conftest import (
    ASCII, BYTE, DOUBLE, FLOAT, LONG, RATIONAL, SHORT, SRATIONAL, UNDEFINED,
    EMPTY_BE_TIFF, build_jpeg, build_tiff, camera_tiff, rationals,
)


def _reparse(exif: ExifData, encoded: bytes) -> ExifData:
    if exif.mime == 'image/jpeg':
        encoded = build_app1_segment(encoded)
    return parse_buffer_quiet(encoded)[0]


def assert_roundtrip(contents):
    first, _ = parse_buffer_quiet(contents)
    encoded = first.serialize()
    second = _reparse(first, encoded)
    assert second.entries == first.entries
    assert second.le == first.le
    assert second.mime == first.mime
    assert second.serialize() == encoded
    return first, second, encoded


class TestFixtures:
    def test_empty(self):
        _, _, encoded = assert_roundtrip(EMPTY_BE_TIFF)
        assert encoded == EMPTY_BE_TIFF

    @pytest.mark.parametrize('endian', ['<', '>'])
    def test_camera_tiff(self, endian):
        first, _, _ = assert_roundtrip(camera_tiff(endian))
        assert len(first.entries) == 20

    def test_jpeg(self):
        tiff = build_tiff([(0x0112, SHORT, 1, 1)], endian='>')
        first, _, encoded = assert_roundtrip(build_jpeg(tiff))
        assert encoded.startswith(b'Exif\x00\x00MM')

    def test_camera_jpeg(self):
        assert_roundtrip(build_jpeg(camera_tiff('<')))


class TestOffsetInsensitivity:
    def test_sub_ifd_moved(self):
        """The writer chains every sub-IFD with a next pointer, so the GPS
        directory lands 4 bytes later than in the source file."""
        first, _ = parse_buffer_quiet(camera_tiff('<'))
        second, _ = parse_buffer_quiet(first.serialize())
        a = first.find(ExifTag.GPSOffset)
        b = second.find(ExifTag.GPSOffset)
        assert a.value.data[0] + 4 == b.value.data[0]
        assert a == b
        assert first.entries == second.entries

    def test_gps_before_exif_pointer(self):
        gps = [(0x0001, ASCII, 2, b'S\x00')]
        exif = [(0xa405, SHORT, 1, 35)]
        tiff = build_tiff([], exif_entries=exif, gps_entries=gps)
        # Swap the two pointer records so GPS is listed first
        data = bytearray(tiff)
        first_rec, second_rec = data[10:22], data[22:34]
        data[10:22], data[22:34] = second_rec, first_rec
        first, _, _ = assert_roundtrip(bytes(data))
        assert [e.tag for e in first.entries] == [
            ExifTag.GPSOffset, ExifTag.ExifOffset,
            ExifTag.GPSLatitudeRef, ExifTag.FocalLengthIn35mmFilm]


class TestValueShapes:
    def test_floats_with_nan(self):
        values = struct.pack('<ff', 1.5, math.nan)
        assert_roundtrip(build_tiff([(0xc000, FLOAT, 2, values)], endian='>'))

    def test_double(self):
        assert_roundtrip(build_tiff([(0xc001, DOUBLE, 1, struct.pack('<d', 0.1))]))

    def test_zero_denominator_rationals(self):
        tiff = build_tiff([], exif_entries=[
            (0x9203, SRATIONAL, 1, rationals([(0, 0)], signed=True)),
            (0x829a, RATIONAL, 1, rationals([(1, 0)])),
        ])
        assert_roundtrip(tiff)

    def test_unknown_format_code(self):
        tiff = build_tiff([(0xc002, 13, 1, b'\x01\x02\x03\x04')])
        first, _, _ = assert_roundtrip(tiff)
        assert first.entries[0].value.kind.name == 'UNKNOWN'

    def test_wrong_format_and_count(self):
        tiff = build_tiff([(0x0112, LONG, 2, struct.pack('<II', 1, 3))])
        assert_roundtrip(tiff)

    def test_undefined_and_bytes(self):
        tiff = build_tiff([(0x0000, BYTE, 4, b'\x02\x03\x00\x00')], gps_entries=[
            (0x001b, UNDEFINED, 12, b'ASCII\x00\x00\x00GPS!'),
        ])
        assert_roundtrip(tiff)

    def test_dropped_entry_stays_dropped(self):
        tiff = bytearray(build_tiff([
            (0x010f, ASCII, 6, b'Canon\x00'),
            (0x0112, SHORT, 1, 1),
        ]))
        tiff[18:22] = struct.pack('<I', 10000)
        first, _, _ = assert_roundtrip(bytes(tiff))
        assert len(first.entries) == 1


def _duplicated_exif_pointer_tiff():
    """IFD-0 [Orientation, ExifOffset, ExifOffset], both pointers aimed at one
    Exif directory holding ISOSpeedRatings."""
    sub_offset = 8 + 2 + 3 * 12 + 4
    ifd0 = struct.pack('<H', 3)
    ifd0 += struct.pack('<HHI', 0x0112, SHORT, 1) + b'\x01\x00\x00\x00'
    ifd0 += struct.pack('<HHII', 0x8769, LONG, 1, sub_offset) * 2
    ifd0 += struct.pack('<I', 0)
    exif = struct.pack('<H', 1) + struct.pack('<HHI', 0x8827, SHORT, 1) + b'\x90\x01\x00\x00'
    return b'II*\x00' + struct.pack('<I', 8) + ifd0 + exif


class TestRepeatedPointers:
    def test_sub_ifd_read_once(self):
        first, _ = parse_buffer_quiet(_duplicated_exif_pointer_tiff())
        assert [e.tag for e in first.entries] == [
            ExifTag.Orientation, ExifTag.ExifOffset, ExifTag.ExifOffset,
            ExifTag.ISOSpeedRatings]

    def test_roundtrip(self):
        first, second, encoded = assert_roundtrip(_duplicated_exif_pointer_tiff())
        assert len(second.entries) == 4
        # Both pointer records are backfilled with the new directory offset
        pointers = [e.value.data[0] for e in second.entries
                    if e.tag is ExifTag.ExifOffset]
        assert len(pointers) == 2
        assert pointers[0] == pointers[1]
        count = struct.unpack('<H', encoded[pointers[0]:pointers[0] + 2])[0]
        assert count == 1
