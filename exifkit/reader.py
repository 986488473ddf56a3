"""Entry points: decode EXIF metadata from a buffer, file object or path."""

import logging
from pathlib import Path
from typing import BinaryIO, List, Optional, Tuple, Union

from exifkit.config import DecodeConfig
from exifkit.errors import ExifError, ExifIoError, FileTypeUnknown
from exifkit.image import FileType, detect_type, find_embedded_tiff_in_jpeg
from exifkit.models import ExifData
from exifkit.tiff.parser import parse_tiff

logger = logging.getLogger(__name__)


def _parse(contents: bytes, warnings: List[str],
           config: Optional[DecodeConfig]) -> ExifData:
    file_type = detect_type(contents)
    if file_type is FileType.JPEG:
        offset, size = find_embedded_tiff_in_jpeg(contents)
        contents = contents[offset:offset + size]
    elif file_type is not FileType.TIFF:
        raise FileTypeUnknown()

    entries, le = parse_tiff(contents, warnings, config)
    return ExifData(mime=file_type.mime, entries=entries, le=le)


def parse_buffer_quiet(contents: bytes,
                       config: Optional[DecodeConfig] = None) -> Tuple[ExifData, List[str]]:
    """Decode a TIFF or JPEG image held in memory.

    Returns ``(exif, warnings)``. Warnings describe tags that disagree with
    the tag dictionary; such tags are still decoded.

    Raises:
        ExifError: structural failure. ``.warnings`` holds the warnings
            collected before it.
    """
    warnings: List[str] = []
    try:
        exif = _parse(bytes(contents), warnings, config)
    except ExifError as e:
        e.warnings = list(warnings)
        raise
    return exif, warnings


def parse_buffer(contents: bytes,
                 config: Optional[DecodeConfig] = None) -> ExifData:
    """Like :func:`parse_buffer_quiet`, logging each warning instead."""
    exif, warnings = parse_buffer_quiet(contents, config)
    for warning in warnings:
        logger.warning(warning)
    return exif


def read_file(fileobj: BinaryIO,
              config: Optional[DecodeConfig] = None) -> Tuple[ExifData, List[str]]:
    """Read a whole binary file object and decode it."""
    try:
        contents = fileobj.read()
    except OSError as e:
        raise ExifIoError(e) from e
    return parse_buffer_quiet(contents, config)


def parse_file(path: Union[str, Path],
               config: Optional[DecodeConfig] = None) -> Tuple[ExifData, List[str]]:
    """Open ``path`` and decode it. OS errors become :class:`ExifIoError`."""
    try:
        with open(str(path), 'rb') as f:
            contents = f.read()
    except OSError as e:
        raise ExifIoError(e) from e
    return parse_buffer_quiet(contents, config)
