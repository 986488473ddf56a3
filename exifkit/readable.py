"""Human-readable renderings of tag values.

Each function takes a TagValue and returns a display string, or None when the
value does not have the shape the tag calls for (wrong kind, too few items).
The tag dictionary in :mod:`exifkit.tags` picks one function per tag.
"""

import math
from typing import Dict, Optional

from exifkit.values import TagValue, ValueKind, num_array


def _num(x: float) -> str:
    """Render a float without a trailing '.0' for integral values."""
    if math.isfinite(x) and x == int(x):
        return str(int(x))
    return str(x)


def _first(e: TagValue, kind: ValueKind):
    if e.kind is not kind or not e.data:
        return None
    return e.data[0]


def _lookup(e: TagValue, kind: ValueKind, names: Dict[int, str]) -> Optional[str]:
    n = _first(e, kind)
    if n is None:
        return None
    return names.get(n, f'Unknown ({n})')


def _ascii_lookup(e: TagValue, names: Dict[str, str]) -> Optional[str]:
    if e.kind is not ValueKind.ASCII:
        return None
    return names.get(e.data, f'Unknown ({e.data})')


def nop(e: TagValue) -> Optional[str]:
    """Default rendering, used for tags missing from the dictionary."""
    return str(e)


def strpass(e: TagValue) -> Optional[str]:
    """ASCII tags, or tags whose default rendering is good enough."""
    return str(e)


def sensitivity_type(e: TagValue) -> Optional[str]:
    return _lookup(e, ValueKind.U16, {
        0: 'Unknown',
        1: 'Standard output sensitivity (SOS)',
        2: 'Recommended exposure index (REI)',
        3: 'ISO speed',
        4: 'Standard output sensitivity (SOS) and recommended exposure index (REI)',
        5: 'Standard output sensitivity (SOS) and ISO speed',
        6: 'Recommended exposure index (REI) and ISO speed',
        7: 'Standard output sensitivity (SOS) and recommended exposure index (REI) and ISO speed',
    })


def orientation(e: TagValue) -> Optional[str]:
    return _lookup(e, ValueKind.U16, {
        1: 'Straight',
        3: 'Upside down',
        6: 'Rotated to left',
        8: 'Rotated to right',
        9: 'Undefined',
    })


def rational_value(e: TagValue) -> Optional[str]:
    if e.kind not in (ValueKind.URATIONAL, ValueKind.IRATIONAL) or not e.data:
        return None
    return _num(e.data[0].value())


def rational_values(e: TagValue) -> Optional[str]:
    if e.kind is not ValueKind.URATIONAL:
        return None
    return num_array(_num(r.value()) for r in e.data)


def resolution_unit(e: TagValue) -> Optional[str]:
    return _lookup(e, ValueKind.U16, {1: 'Unitless', 2: 'in', 3: 'cm'})


def exposure_time(e: TagValue) -> Optional[str]:
    r = _first(e, ValueKind.URATIONAL)
    if r is None:
        return None
    v = r.value()
    if r.numerator == 1 and r.denominator > 1:
        # traditional 1/x exposure time
        return f'{r} s'
    if v < 0.1:
        return f'1/{1.0 / v:.0f} s' if v else '1/inf s'
    if v < 1.0:
        return f'1/{1.0 / v:.1f} s'
    return f'{v:.1f} s'


def f_number(e: TagValue) -> Optional[str]:
    r = _first(e, ValueKind.URATIONAL)
    if r is None:
        return None
    return f'f/{r.value():.1f}'


def exposure_program(e: TagValue) -> Optional[str]:
    return _lookup(e, ValueKind.U16, {
        1: 'Manual control',
        2: 'Program control',
        3: 'Aperture priority',
        4: 'Shutter priority',
        5: 'Program creative (slow program)',
        6: 'Program creative (high-speed program)',
        7: 'Portrait mode',
        8: 'Landscape mode',
    })


def focal_length(e: TagValue) -> Optional[str]:
    r = _first(e, ValueKind.URATIONAL)
    if r is None:
        return None
    return f'{_num(r.value())} mm'


def focal_length_35(e: TagValue) -> Optional[str]:
    n = _first(e, ValueKind.U16)
    if n is None:
        return None
    return f'{n} mm'


def meters(e: TagValue) -> Optional[str]:
    r = _first(e, ValueKind.URATIONAL)
    if r is None:
        return None
    return f'{r.value():.1f} m'


def iso_speeds(e: TagValue) -> Optional[str]:
    if e.kind is not ValueKind.U16:
        return None
    v = e.data
    if len(v) == 1:
        return f'ISO {v[0]}'
    if len(v) in (2, 3):
        return f'ISO {v[0]} latitude {v[1]}'
    return f'Unknown ({num_array(v)})'


def dms(e: TagValue) -> Optional[str]:
    """Degrees/minutes/seconds triplet, e.g. GPS latitude."""
    if e.kind is not ValueKind.URATIONAL or len(e.data) < 3:
        return None
    deg, mins, sec = e.data[:3]
    if deg.denominator == 1 and mins.denominator == 1:
        return f"{_num(deg.value())}°{_num(mins.value())}'{sec.value():.2f}\""
    if deg.denominator == 1:
        return f"{_num(deg.value())}°{mins.value() + sec.value() / 60.0:.4f}'"
    # untypical format
    return f'{deg.value() + mins.value() / 60.0 + sec.value() / 3600.0:.7f}°'


def gps_alt_ref(e: TagValue) -> Optional[str]:
    n = _first(e, ValueKind.U8)
    if n is None:
        return None
    if n == 0:
        return 'Above sea level'
    if n == 1:
        return 'Below sea level'
    return f'Unknown, assumed below sea level ({n})'


def gpsdestdistanceref(e: TagValue) -> Optional[str]:
    return _ascii_lookup(e, {'N': 'kn', 'K': 'km', 'M': 'mi'})


def gpsdestdistance(e: TagValue) -> Optional[str]:
    r = _first(e, ValueKind.URATIONAL)
    if r is None:
        return None
    return f'{r.value():.3f}'


def gpsspeedref(e: TagValue) -> Optional[str]:
    return _ascii_lookup(e, {'N': 'kn', 'K': 'km/h', 'M': 'mi/h'})


def gpsspeed(e: TagValue) -> Optional[str]:
    r = _first(e, ValueKind.URATIONAL)
    if r is None:
        return None
    return f'{r.value():.1f}'


def gpsbearingref(e: TagValue) -> Optional[str]:
    return _ascii_lookup(e, {'T': 'True bearing', 'M': 'Magnetic bearing'})


def gpsbearing(e: TagValue) -> Optional[str]:
    r = _first(e, ValueKind.URATIONAL)
    if r is None:
        return None
    return f'{r.value():.2f}°'


def gpstimestamp(e: TagValue) -> Optional[str]:
    if e.kind is not ValueKind.URATIONAL or len(e.data) < 3:
        return None
    hour, mins, sec = (r.value() for r in e.data[:3])
    return f'{hour:02.0f}:{mins:02.0f}:{sec:04.1f} UTC'


def gpsdiff(e: TagValue) -> Optional[str]:
    return _lookup(e, ValueKind.U16, {
        0: 'Measurement without differential correction',
        1: 'Differential correction applied',
    })


def gpsstatus(e: TagValue) -> Optional[str]:
    return _ascii_lookup(e, {'A': 'Measurement in progress',
                             'V': 'Measurement is interoperability'})


def gpsmeasuremode(e: TagValue) -> Optional[str]:
    return _ascii_lookup(e, {'2': '2-dimension', '3': '3-dimension'})


def undefined_as_ascii(e: TagValue) -> Optional[str]:
    """Undefined tags that the standard guarantees to be ASCII-compatible."""
    if e.kind is not ValueKind.UNDEFINED:
        return None
    return e.data.decode('utf-8', errors='replace')


def undefined_as_u8(e: TagValue) -> Optional[str]:
    """Small opaque Undefined tags, shown byte by byte."""
    if e.kind is not ValueKind.UNDEFINED:
        return None
    return num_array(e.data)


_ASCII_PREAMBLE = b'ASCII\x00\x00\x00'
_JIS_PREAMBLE = b'JIS\x00\x00\x00\x00\x00'
_UNICODE_PREAMBLE = b'UNICODE\x00'


def undefined_as_encoded_string(e: TagValue) -> Optional[str]:
    """Undefined tags whose first 8 bytes name the string encoding."""
    if e.kind is not ValueKind.UNDEFINED:
        return None
    v = e.data
    if len(v) < 8:
        return f'String w/ truncated preamble {num_array(v)}'
    preamble, body = v[:8], v[8:]
    if preamble == _ASCII_PREAMBLE:
        return body.decode('utf-8', errors='replace')
    if preamble == _JIS_PREAMBLE:
        return f'JIS string {num_array(body)}'
    if preamble == _UNICODE_PREAMBLE:
        body = body[:len(body) - len(body) % 2]
        return body.decode('utf-16-le' if e.le else 'utf-16-be', errors='replace')
    return f'String w/ undefined encoding {num_array(v)}'


def undefined_as_blob(e: TagValue) -> Optional[str]:
    """Long opaque Undefined tags: only the length is shown."""
    if e.kind is not ValueKind.UNDEFINED:
        return None
    return f'Blob of {len(e.data)} bytes'


def apex_tv(e: TagValue) -> Optional[str]:
    r = _first(e, ValueKind.IRATIONAL)
    if r is None:
        return None
    return f'{r.value():.1f} Tv APEX'


def apex_av(e: TagValue) -> Optional[str]:
    r = _first(e, ValueKind.URATIONAL)
    if r is None:
        return None
    return f'{r.value():.1f} Av APEX'


def apex_brightness(e: TagValue) -> Optional[str]:
    r = _first(e, ValueKind.IRATIONAL)
    if r is None:
        return None
    # numerator 0xffffffff = unknown
    if r.numerator == -1:
        return 'Unknown'
    return f'{r.value():.1f} APEX'


def apex_ev(e: TagValue) -> Optional[str]:
    r = _first(e, ValueKind.IRATIONAL)
    if r is None:
        return None
    return f'{r.value():.2f} EV APEX'


def file_source(e: TagValue) -> Optional[str]:
    if e.kind is not ValueKind.UNDEFINED:
        return None
    return 'DSC' if e.data[:1] == b'\x03' else 'Unknown'


def flash_energy(e: TagValue) -> Optional[str]:
    r = _first(e, ValueKind.URATIONAL)
    if r is None:
        return None
    return f'{_num(r.value())} BCPS'


def metering_mode(e: TagValue) -> Optional[str]:
    return _lookup(e, ValueKind.U16, {
        0: 'Unknown',
        1: 'Average',
        2: 'Center-weighted average',
        3: 'Spot',
        4: 'Multi-spot',
        5: 'Pattern',
        6: 'Partial',
        255: 'Other',
    })


def light_source(e: TagValue) -> Optional[str]:
    return _lookup(e, ValueKind.U16, {
        0: 'Unknown',
        1: 'Daylight',
        2: 'Fluorescent',
        3: 'Tungsten',
        4: 'Flash',
        9: 'Fine weather',
        10: 'Cloudy weather',
        11: 'Shade',
        12: 'Daylight fluorescent (D)',
        13: 'Day white fluorescent (N)',
        14: 'Cool white fluorescent (W)',
        15: 'White fluorescent (WW)',
        17: 'Standard light A',
        18: 'Standard light B',
        19: 'Standard light C',
        20: 'D55',
        21: 'D65',
        22: 'D75',
        23: 'D50',
        24: 'ISO studio tungsten',
        255: 'Other',
    })


def color_space(e: TagValue) -> Optional[str]:
    return _lookup(e, ValueKind.U16, {1: 'sRGB', 65535: 'Uncalibrated'})


def flash(e: TagValue) -> Optional[str]:
    n = _first(e, ValueKind.U16)
    if n is None:
        return None
    if n & (1 << 5):
        return 'Does not have a flash.'

    b0, b12, b34, b6 = 'Did not fire. ', '', '', ''
    if n & 1:
        b0 = 'Fired. '
        b6 = 'Redeye reduction. ' if n & (1 << 6) else 'No redeye reduction. '
        # bits 1 and 2
        m = (n >> 1) & 3
        if m == 2:
            b12 = 'Strobe ret not detected. '
        elif m == 3:
            b12 = 'Strobe ret detected. '

    # bits 3 and 4
    m = (n >> 3) & 3
    if m == 1:
        b34 = 'Forced fire. '
    elif m == 2:
        b34 = 'Forced suppression. '
    elif m == 3:
        b12 = 'Auto mode. '
    return f'{b0}{b12}{b34}{b6}'


def subject_area(e: TagValue) -> Optional[str]:
    if e.kind is not ValueKind.U16:
        return None
    v = e.data
    if len(v) == 2:
        return f'at pixel {v[0]},{v[1]}'
    if len(v) == 3:
        return f'at center {v[0]},{v[1]} radius {v[2]}'
    if len(v) == 4:
        return f'at rectangle {v[0]},{v[1]} width {v[2]} height {v[3]}'
    return f'Unknown ({num_array(v)}) '


def subject_location(e: TagValue) -> Optional[str]:
    if e.kind is not ValueKind.U16 or len(e.data) < 2:
        return None
    return f'at pixel {e.data[0]},{e.data[1]}'


def sharpness(e: TagValue) -> Optional[str]:
    return _lookup(e, ValueKind.U16, {0: 'Normal', 1: 'Soft', 2: 'Hard'})


def saturation(e: TagValue) -> Optional[str]:
    return _lookup(e, ValueKind.U16, {0: 'Normal', 1: 'Low', 2: 'High'})


def contrast(e: TagValue) -> Optional[str]:
    return _lookup(e, ValueKind.U16, {0: 'Normal', 1: 'Soft', 2: 'Hard'})


def gain_control(e: TagValue) -> Optional[str]:
    return _lookup(e, ValueKind.U16, {
        0: 'None',
        1: 'Low gain up',
        2: 'High gain up',
        3: 'Low gain down',
        4: 'High gain down',
    })


def exposure_mode(e: TagValue) -> Optional[str]:
    return _lookup(e, ValueKind.U16, {
        0: 'Auto exposure', 1: 'Manual exposure', 2: 'Auto bracket'})


def scene_capture_type(e: TagValue) -> Optional[str]:
    return _lookup(e, ValueKind.U16, {
        0: 'Standard', 1: 'Landscape', 2: 'Portrait', 3: 'Night scene'})


def scene_type(e: TagValue) -> Optional[str]:
    if e.kind is not ValueKind.UNDEFINED or not e.data:
        return None
    n = e.data[0]
    return 'Directly photographed image' if n == 1 else f'Unknown ({n})'


def white_balance_mode(e: TagValue) -> Optional[str]:
    return _lookup(e, ValueKind.U16, {0: 'Auto', 1: 'Manual'})


def sensing_method(e: TagValue) -> Optional[str]:
    return _lookup(e, ValueKind.U16, {
        1: 'Not defined',
        2: 'One-chip color area sensor',
        3: 'Two-chip color area sensor',
        4: 'Three-chip color area sensor',
        5: 'Color sequential area sensor',
        7: 'Trilinear sensor',
        8: 'Color sequential linear sensor',
    })


def custom_rendered(e: TagValue) -> Optional[str]:
    return _lookup(e, ValueKind.U16, {0: 'Normal', 1: 'Custom'})


def subject_distance_range(e: TagValue) -> Optional[str]:
    return _lookup(e, ValueKind.U16, {
        0: 'Unknown', 1: 'Macro', 2: 'Close view', 3: 'Distant view'})


def lens_spec(e: TagValue) -> Optional[str]:
    if e.kind is not ValueKind.URATIONAL or len(e.data) < 4:
        return None
    v = e.data
    f0, f1, a0, a1 = (r.value() for r in v[:4])
    if v[0] == v[1]:
        if math.isfinite(a0):
            return f'{_num(f0)} mm f/{a0:.1f}'
        return f'{_num(f0)} mm f/unknown'
    if math.isfinite(a0) and math.isfinite(a1):
        return f'{_num(f0)}-{_num(f1)} mm f/{a0:.1f}-{a1:.1f}'
    return f'{_num(f0)}-{_num(f1)} mm f/unknown'
