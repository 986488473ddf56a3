"""Exception hierarchy for fatal parse and serialization errors.

Per-tag anomalies are not errors: they degrade to an Invalid/Unknown value
or a warning string. Everything here aborts the whole operation.
"""

from typing import List, Optional


class ExifError(Exception):
    """Base class for every error raised by exifkit.

    ``warnings`` holds the non-fatal warnings collected before the failure.
    """

    def __init__(self, message: str = '', warnings: Optional[List[str]] = None):
        self.message = message
        self.warnings = list(warnings or [])
        super().__init__(message)


class ExifIoError(ExifError):
    """The underlying file could not be read."""

    def __init__(self, error: OSError):
        self.error = error
        super().__init__(str(error))


class FileTypeUnknown(ExifError):
    def __init__(self):
        super().__init__('File type unknown')


class JpegWithoutExif(ExifError):
    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f'JPEG without EXIF section: {detail}')


class TiffTruncated(ExifError):
    def __init__(self):
        super().__init__('TIFF truncated at start')


class TiffBadPreamble(ExifError):
    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f'TIFF with bad preamble: {detail}')


class IfdTruncated(ExifError):
    def __init__(self):
        super().__init__('TIFF IFD truncated')


class ExifIfdTruncated(ExifError):
    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f'TIFF Exif IFD truncated: {detail}')


class ExifIfdEntryNotFound(ExifError):
    def __init__(self):
        super().__init__('TIFF Exif IFD not found')


class UnsupportedNamespace(ExifError):
    def __init__(self):
        super().__init__('Only standard namespace can be serialized')


class MissingExifOffset(ExifError):
    def __init__(self):
        super().__init__('Expected to have seen ExifOffset tag in IFD0')


class ThumbnailNotSupported(ExifError):
    """IFD-1 entries were handed to the serializer."""

    def __init__(self):
        super().__init__('IFD-1 (thumbnail) serialization is not implemented')
