"""Directory walker: TIFF header, IFD-0 and its Exif/GPS sub-IFDs."""

import logging
from typing import List, Optional, Tuple

from exifkit.config import DecodeConfig
from exifkit.errors import (
    ExifIfdEntryNotFound,
    ExifIfdTruncated,
    IfdTruncated,
    TiffBadPreamble,
    TiffTruncated,
)
from exifkit.image import INTEL_PREAMBLE, MOTOROLA_PREAMBLE
from exifkit.models import ExifEntry, IfdKind
from exifkit.postprocess import exif_postprocessing, first_by_tag
from exifkit.tags import ExifTag, tag_to_exif
from exifkit.tiff.entry import (
    DATA_WIDTH,
    EXIF_IFD_POINTER_TAG,
    GPS_IFD_POINTER_TAG,
    IfdEntry,
    IfdFormat,
)
from exifkit.tiff.lowlevel import read_u16, read_u32
from exifkit.values import tag_value_new

logger = logging.getLogger(__name__)

# Directory record size: tag(2) format(2) count(4) data-or-offset(4)
IFD_ENTRY_SIZE = 12

_SUB_IFDS = {
    EXIF_IFD_POINTER_TAG: IfdKind.Exif,
    GPS_IFD_POINTER_TAG: IfdKind.Gps,
}


def parse_ifd(subifd: bool, le: bool, count: int,
              contents: bytes) -> Optional[Tuple[List[IfdEntry], int]]:
    """Decode ``count`` directory records from the start of ``contents``.

    Top-level directories are followed by a 4-byte next-IFD offset; sub-IFDs
    are not chained. Returns ``(entries, next_ifd)`` or None when
    ``contents`` is too short.
    """
    needed = count * IFD_ENTRY_SIZE + (0 if subifd else 4)
    if len(contents) < needed:
        return None

    entries = []
    for i in range(count):
        pos = i * IFD_ENTRY_SIZE
        record = contents[pos:pos + IFD_ENTRY_SIZE]
        tag = read_u16(le, record[0:2])
        fmt = read_u16(le, record[2:4])
        n = read_u32(le, record[4:8])
        entries.append(IfdEntry(tag, IfdFormat.new(fmt), n,
                                record[8:8 + DATA_WIDTH], le))

    next_ifd = 0
    if not subifd:
        next_ifd = read_u32(le, contents[count * IFD_ENTRY_SIZE:])
    return entries, next_ifd


def parse_exif_entry(ifd: IfdEntry, warnings: List[str], kind: IfdKind,
                     config: Optional[DecodeConfig] = None) -> ExifEntry:
    """Resolve a raw record against the tag dictionary.

    Format and count mismatches are appended to ``warnings``; the entry is
    kept with whatever value it actually holds.
    """
    config = config or DecodeConfig.default()
    info = tag_to_exif(ifd.tag)
    value = tag_value_new(ifd)
    readable = info.readable(value)

    entry = ExifEntry(
        namespace=ifd.namespace,
        ifd=ifd,
        tag=info.tag,
        value=value,
        unit=info.unit,
        value_more_readable=readable if readable is not None else '',
        kind=kind,
    )

    if info.tag == ExifTag.UnknownToMe:
        return entry

    if config.check_formats and ifd.format != info.format:
        warnings.append(
            f'EXIF tag {ifd.tag:x} {ifd.tag} ({info.tag.description}), expected format '
            f'{int(info.format)} ({info.format.name}), found '
            f'{int(ifd.format)} ({ifd.format.name})')

    if (config.check_counts and info.min_count != -1
            and not info.min_count <= ifd.count <= info.max_count):
        warnings.append(
            f'EXIF tag {ifd.tag:x} {ifd.tag} ({info.tag.description}), format '
            f'{int(info.format)}, expected count {info.min_count}..'
            f'{info.max_count} found {ifd.count}')

    return entry


def parse_exif_ifd(le: bool, contents: bytes, offset: int,
                   exif_entries: List[ExifEntry], warnings: List[str],
                   kind: IfdKind, config: Optional[DecodeConfig] = None) -> None:
    """Decode the directory at ``offset`` into ``exif_entries``.

    Records whose out-of-line data falls outside ``contents`` are dropped.
    """
    if len(contents) < offset + 2:
        raise ExifIfdTruncated(
            f'Truncated {kind.value} at dir entry count '
            f'({len(contents)} < {offset + 2})')

    count = read_u16(le, contents[offset:offset + 2])
    ifd_length = count * IFD_ENTRY_SIZE
    offset += 2

    if len(contents) < offset + ifd_length:
        raise ExifIfdTruncated(
            f'Truncated {kind.value} at dir listing at {offset}: '
            f'need {ifd_length}, have {len(contents) - offset}')

    result = parse_ifd(True, le, count, contents[offset:offset + ifd_length])
    if result is None:
        raise IfdTruncated()
    ifd, _ = result

    for entry in ifd:
        if not entry.copy_data(contents):
            continue
        exif_entries.append(parse_exif_entry(entry, warnings, kind, config))


def parse_ifds(le: bool, ifd0_offset: int, contents: bytes,
               warnings: List[str],
               config: Optional[DecodeConfig] = None) -> List[ExifEntry]:
    """Walk IFD-0, then every Exif/GPS sub-IFD it points to, in pointer
    order. A sub-IFD is followed only at the first pointer of its kind.
    Postprocessing runs once the full entry list is known."""
    exif_entries: List[ExifEntry] = []

    parse_exif_ifd(le, contents, ifd0_offset, exif_entries, warnings,
                   IfdKind.Ifd0, config)

    # Re-read IFD-0 as a chained directory to find the sub-IFD pointers
    count = read_u16(le, contents[ifd0_offset:ifd0_offset + 2])
    ifd_length = count * IFD_ENTRY_SIZE + 4
    offset = ifd0_offset + 2
    result = parse_ifd(False, le, count, contents[offset:offset + ifd_length])
    if result is None:
        raise IfdTruncated()
    ifd, next_ifd = result
    if next_ifd:
        logger.debug('Ignoring IFD-1 at offset %d', next_ifd)

    seen = set()
    for entry in ifd:
        kind = _SUB_IFDS.get(entry.tag)
        if kind is None:
            continue
        if not entry.in_ifd:
            raise ExifIfdEntryNotFound()
        sub_offset = entry.try_data_as_offset()
        if sub_offset is None:
            raise ExifIfdEntryNotFound()
        if kind in seen:
            logger.debug('Ignoring repeated %s pointer', kind.value)
            continue
        seen.add(kind)
        if len(contents) < sub_offset:
            raise ExifIfdTruncated('Exif SubIFD goes past EOF')
        logger.debug('%s sub-IFD at offset %d', kind.value, sub_offset)
        parse_exif_ifd(le, contents, sub_offset, exif_entries, warnings,
                       kind, config)

    siblings = first_by_tag(exif_entries)
    for entry in exif_entries:
        exif_postprocessing(entry, siblings)

    return exif_entries


def parse_tiff(contents: bytes, warnings: List[str],
               config: Optional[DecodeConfig] = None) -> Tuple[List[ExifEntry], bool]:
    """Validate the TIFF header and walk the directory tree.

    Returns ``(entries, le)``.
    """
    if len(contents) < 8:
        raise TiffTruncated()

    preamble = contents[:4]
    if preamble == INTEL_PREAMBLE:
        le = True
    elif preamble == MOTOROLA_PREAMBLE:
        le = False
    else:
        raise TiffBadPreamble('Preamble is {:x} {:x} {:x} {:x}'.format(*preamble))

    offset = read_u32(le, contents[4:8])
    entries = parse_ifds(le, offset, contents, warnings, config)
    return entries, le
