"""exifkit -- EXIF metadata reader and writer for TIFF and JPEG images."""

__version__ = "1.0.0"

from exifkit.config import DecodeConfig
from exifkit.errors import (
    ExifError,
    ExifIfdEntryNotFound,
    ExifIfdTruncated,
    ExifIoError,
    FileTypeUnknown,
    IfdTruncated,
    JpegWithoutExif,
    MissingExifOffset,
    ThumbnailNotSupported,
    TiffBadPreamble,
    TiffTruncated,
    UnsupportedNamespace,
)
from exifkit.models import ExifData, ExifEntry, IfdKind
from exifkit.rational import IRational, URational
from exifkit.tags import ExifTag, tag_to_exif
from exifkit.values import TagValue, ValueKind
from exifkit.reader import parse_buffer, parse_buffer_quiet, parse_file, read_file
from exifkit.tiff.writer import serialize_exif

__all__ = [
    "__version__",
    "DecodeConfig",
    "ExifData",
    "ExifEntry",
    "ExifTag",
    "IfdKind",
    "TagValue",
    "ValueKind",
    "URational",
    "IRational",
    "tag_to_exif",
    "parse_buffer",
    "parse_buffer_quiet",
    "parse_file",
    "read_file",
    "serialize_exif",
    "ExifError",
    "ExifIoError",
    "FileTypeUnknown",
    "JpegWithoutExif",
    "TiffTruncated",
    "TiffBadPreamble",
    "IfdTruncated",
    "ExifIfdTruncated",
    "ExifIfdEntryNotFound",
    "UnsupportedNamespace",
    "MissingExifOffset",
    "ThumbnailNotSupported",
]
