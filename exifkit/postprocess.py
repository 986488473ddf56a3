"""Cross-tag postprocessing.

Some readable values only make sense together with a sibling tag: a
resolution needs its unit, a latitude needs its N/S reference. This pass
runs once per entry after the whole directory tree is decoded and only
touches ``unit`` and ``value_more_readable``.
"""

from typing import Dict, Iterable, Mapping

from exifkit.models import ExifEntry
from exifkit.tags import ExifTag
from exifkit.values import ValueKind

_UNIT_TAGS = {
    ExifTag.XResolution: ExifTag.ResolutionUnit,
    ExifTag.YResolution: ExifTag.ResolutionUnit,
    ExifTag.FocalPlaneXResolution: ExifTag.FocalPlaneResolutionUnit,
    ExifTag.FocalPlaneYResolution: ExifTag.FocalPlaneResolutionUnit,
}

_REF_TAGS = {
    ExifTag.GPSLatitude: ExifTag.GPSLatitudeRef,
    ExifTag.GPSLongitude: ExifTag.GPSLongitudeRef,
    ExifTag.GPSDestLatitude: ExifTag.GPSDestLatitudeRef,
    ExifTag.GPSDestLongitude: ExifTag.GPSDestLongitudeRef,
}

_UNIT_REF_TAGS = {
    ExifTag.GPSDestDistance: ExifTag.GPSDestDistanceRef,
    ExifTag.GPSSpeed: ExifTag.GPSSpeedRef,
}


def first_by_tag(entries: Iterable[ExifEntry]) -> Dict[ExifTag, ExifEntry]:
    """Index ``entries`` by tag, keeping the first entry of each tag."""
    index: Dict[ExifTag, ExifEntry] = {}
    for entry in entries:
        index.setdefault(entry.tag, entry)
    return index


def exif_postprocessing(entry: ExifEntry, others: Mapping[ExifTag, ExifEntry]) -> None:
    """Fold sibling information into ``entry``'s readable value.

    ``others`` maps a tag to its first entry (see :func:`first_by_tag`). An
    entry never looks up its own tag, so the index may include ``entry``.
    """
    tag = entry.tag

    if tag in _UNIT_TAGS:
        unit = others.get(_UNIT_TAGS[tag])
        if unit is not None:
            entry.unit = unit.value_more_readable
            entry.value_more_readable += ' pixels per ' + unit.value_more_readable

    elif tag in _REF_TAGS:
        ref = others.get(_REF_TAGS[tag])
        if ref is not None:
            entry.value_more_readable += ' ' + ref.value_more_readable

    elif tag == ExifTag.GPSAltitude:
        ref = others.get(ExifTag.GPSAltitudeRef)
        if (ref is not None and ref.value.kind is ValueKind.U8
                and len(ref.value) > 0 and ref.value[0] != 0):
            entry.value_more_readable += ' below sea level'

    elif tag in _UNIT_REF_TAGS:
        ref = others.get(_UNIT_REF_TAGS[tag])
        if ref is not None:
            entry.unit = ref.value_more_readable
            entry.value_more_readable += ' ' + ref.value_more_readable
