"""Tests for the raw directory record model."""

import struct

import pytest

from exifkit.errors import UnsupportedNamespace
from exifkit.tiff.entry import IfdEntry, IfdFormat, Namespace, Patch


class TestIfdFormat:
    def test_known_codes(self):
        assert IfdFormat.new(5) is IfdFormat.URational
        assert IfdFormat.new(12) is IfdFormat.F64

    def test_unknown_codes(self):
        assert IfdFormat.new(0) is IfdFormat.Unknown
        assert IfdFormat.new(13) is IfdFormat.Unknown
        assert IfdFormat.new(0xffff) is IfdFormat.Unknown


class TestLength:
    def test_inline_threshold(self):
        assert IfdEntry(0x0112, IfdFormat.U16, 2, b'\x00' * 4, True).in_ifd
        assert not IfdEntry(0x0112, IfdFormat.U16, 3, b'\x00' * 4, True).in_ifd
        assert not IfdEntry(0x011a, IfdFormat.URational, 1, b'\x00' * 4, True).in_ifd

    def test_length(self):
        entry = IfdEntry(0x0002, IfdFormat.URational, 3, b'\x00' * 4, True)
        assert entry.size == 8
        assert entry.length == 24


class TestCopyData:
    def test_inline(self):
        entry = IfdEntry(0x0112, IfdFormat.U16, 1, b'\x01\x00\x00\x00', True)
        assert entry.copy_data(b'')
        assert entry.data == b'\x01\x00\x00\x00'

    def test_out_of_line(self):
        contents = b'\x00' * 16 + b'Canon EOS\x00'
        entry = IfdEntry(0x010f, IfdFormat.Ascii, 10, struct.pack('>I', 16), False)
        assert entry.copy_data(contents)
        assert entry.data == b'Canon EOS\x00'
        assert entry.ext_data == entry.data

    def test_out_of_bounds(self):
        entry = IfdEntry(0x010f, IfdFormat.Ascii, 10, struct.pack('<I', 12), True)
        assert not entry.copy_data(b'\x00' * 20)

    def test_offset_past_end(self):
        entry = IfdEntry(0x010f, IfdFormat.Ascii, 10, b'\xff\xff\xff\xff', True)
        assert not entry.copy_data(b'\x00' * 20)


class TestSerialize:
    def test_inline_record(self):
        entry = IfdEntry(0x0112, IfdFormat.U16, 1, b'\x00\x01\x00\x00', False,
                         data=b'\x00\x01\x00\x00')
        out = bytearray()
        patches = []
        entry.serialize(out, patches)
        assert bytes(out) == b'\x01\x12\x00\x03\x00\x00\x00\x01\x00\x01\x00\x00'
        assert patches == []

    def test_out_of_line_record_queues_patch(self):
        entry = IfdEntry(0x010f, IfdFormat.Ascii, 6, b'\x00' * 4, True,
                         data=b'Canon\x00')
        out = bytearray(b'HEADER')
        patches = []
        entry.serialize(out, patches)
        assert len(out) == 6 + 12
        assert out[-4:] == b'\x00\x00\x00\x00'
        assert len(patches) == 1
        assert patches[0].offset_pos == 6 + 8
        assert patches[0].data == b'Canon\x00'

    def test_unsupported_namespace(self):
        entry = IfdEntry(0x0001, IfdFormat.U16, 1, b'\x00' * 4, True,
                         namespace=Namespace.Nikon)
        with pytest.raises(UnsupportedNamespace):
            entry.serialize(bytearray(), [])


class TestEquality:
    def test_pointer_offsets_are_ignored(self):
        a = IfdEntry(0x8769, IfdFormat.U32, 1, struct.pack('<I', 100), True,
                     data=struct.pack('<I', 100))
        b = IfdEntry(0x8769, IfdFormat.U32, 1, struct.pack('<I', 900), True,
                     data=struct.pack('<I', 900))
        assert a == b

    def test_data_compared_for_other_tags(self):
        a = IfdEntry(0x0112, IfdFormat.U16, 1, b'\x01\x00\x00\x00', True,
                     data=b'\x01\x00\x00\x00')
        b = IfdEntry(0x0112, IfdFormat.U16, 1, b'\x03\x00\x00\x00', True,
                     data=b'\x03\x00\x00\x00')
        assert a != b

    def test_byte_order_compared(self):
        a = IfdEntry(0x0112, IfdFormat.U16, 1, b'\x00' * 4, True)
        b = IfdEntry(0x0112, IfdFormat.U16, 1, b'\x00' * 4, False)
        assert a != b


class TestPatch:
    def test_repr(self):
        assert 'offset_pos=4' in repr(Patch(4, b'abc'))
