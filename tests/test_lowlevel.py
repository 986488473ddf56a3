"""Tests for the fixed-width byte readers and writers."""

import math
import struct

from exifkit.rational import IRational, URational
from exifkit.tiff.lowlevel import (
    read_f32, read_f64, read_f32_array, read_i8_array, read_i16, read_i32,
    read_irational, read_irational_array, read_u8_array, read_u16,
    read_u16_array, read_u32, read_u32_array, read_urational,
    read_urational_array, write_u16, write_u32,
)


class TestScalarReads:
    def test_u16_little_endian(self):
        assert read_u16(True, b'\x01\x02') == 0x0201

    def test_u16_big_endian(self):
        assert read_u16(False, b'\x01\x02') == 0x0102

    def test_signed_values(self):
        assert read_i16(True, b'\xff\xff') == -1
        assert read_i32(False, b'\xff\xff\xff\xfe') == -2

    def test_u32_ignores_trailing_bytes(self):
        assert read_u32(False, b'\x00\x00\x00\x08\xaa\xbb') == 8

    def test_short_slices_return_none(self):
        assert read_u16(True, b'\x01') is None
        assert read_u32(True, b'\x01\x02\x03') is None
        assert read_i32(False, b'') is None
        assert read_urational(True, b'\x00' * 7) is None
        assert read_f64(b'\x00' * 4) is None

    def test_rationals(self):
        raw = struct.pack('>II', 72, 1)
        assert read_urational(False, raw) == URational(72, 1)
        raw = struct.pack('<ii', -1, 3)
        assert read_irational(True, raw) == IRational(-1, 3)


class TestFloatByteOrder:
    """Floats are decoded little-endian whatever the directory says."""

    def test_f32_little_endian(self):
        assert read_f32(struct.pack('<f', 1.5)) == 1.5

    def test_f64_little_endian(self):
        assert read_f64(struct.pack('<d', -2.25)) == -2.25

    def test_big_endian_bytes_are_not_swapped(self):
        raw = struct.pack('>f', 1.5)
        assert read_f32(raw) != 1.5

    def test_f32_array_nan(self):
        values = read_f32_array(2, struct.pack('<ff', 1.0, math.nan))
        assert values[0] == 1.0
        assert math.isnan(values[1])


class TestArrayReads:
    def test_u8_array(self):
        assert read_u8_array(3, b'\x01\x02\x03\x04') == [1, 2, 3]

    def test_i8_array(self):
        assert read_i8_array(2, b'\xff\x01') == [-1, 1]

    def test_u16_array_both_orders(self):
        assert read_u16_array(True, 2, b'\x01\x00\x02\x00') == [1, 2]
        assert read_u16_array(False, 2, b'\x00\x01\x00\x02') == [1, 2]

    def test_zero_count(self):
        assert read_u32_array(True, 0, b'') == []

    def test_count_larger_than_buffer(self):
        assert read_u16_array(True, 3, b'\x01\x00\x02\x00') is None
        assert read_u8_array(5, b'\x00' * 4) is None

    def test_hostile_count(self):
        assert read_u32_array(False, 0xffffffff, b'\x00' * 16) is None

    def test_urational_array(self):
        raw = struct.pack('<6I', 51, 1, 30, 1, 1234, 100)
        assert read_urational_array(True, 3, raw) == [
            URational(51, 1), URational(30, 1), URational(1234, 100)]

    def test_irational_array_short(self):
        assert read_irational_array(True, 2, b'\x00' * 12) is None


class TestWrites:
    def test_write_u16(self):
        assert write_u16(True, 0x0112) == b'\x12\x01'
        assert write_u16(False, 0x0112) == b'\x01\x12'

    def test_write_u32(self):
        assert write_u32(False, 8) == b'\x00\x00\x00\x08'
        assert write_u32(True, 8) == b'\x08\x00\x00\x00'
