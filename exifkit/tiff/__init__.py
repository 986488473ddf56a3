"""TIFF directory primitives, walker and writer.

The walker and writer depend on the decoded-metadata models; import them
from ``exifkit.tiff.parser`` and ``exifkit.tiff.writer``.
"""

# --- lowlevel.py: fixed-width readers and writers ---
from exifkit.tiff.lowlevel import (  # noqa: F401
    read_u16,
    read_i16,
    read_u32,
    read_i32,
    read_f32,
    read_f64,
    read_urational,
    read_irational,
    write_u16,
    write_u32,
)

# --- entry.py: directory record model ---
from exifkit.tiff.entry import (  # noqa: F401
    DATA_WIDTH,
    EXIF_IFD_POINTER_TAG,
    GPS_IFD_POINTER_TAG,
    FORMAT_SIZES,
    IfdEntry,
    IfdFormat,
    Namespace,
    Patch,
)
