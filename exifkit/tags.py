"""Static EXIF tag dictionary.

Maps a numeric tag code to its semantic tag, unit label, expected format,
expected count range and readable-value function. A ``min_count`` of -1
means "any count" and is only used with Ascii, Undefined and Unknown formats.
"""

from enum import IntEnum
from typing import Callable, Dict, NamedTuple, Optional

from exifkit import readable as r
from exifkit.tiff.entry import IfdFormat
from exifkit.values import TagValue


class ExifTag(IntEnum):
    """Recognized EXIF tags.

    The value is the tag code in the standard namespace. Tags missing from
    the dictionary decode as ``UnknownToMe``; their raw IFD entry is kept.
    """
    UnknownToMe = 0xffff
    ImageDescription = 0x010e
    Make = 0x010f
    Model = 0x0110
    Orientation = 0x0112
    XResolution = 0x011a
    YResolution = 0x011b
    ResolutionUnit = 0x0128
    Software = 0x0131
    DateTime = 0x0132
    HostComputer = 0x013c
    WhitePoint = 0x013e
    PrimaryChromaticities = 0x013f
    YCbCrCoefficients = 0x0211
    ReferenceBlackWhite = 0x0214
    Copyright = 0x8298
    ExifOffset = 0x8769
    GPSOffset = 0x8825

    ExposureTime = 0x829a
    FNumber = 0x829d
    ExposureProgram = 0x8822
    SpectralSensitivity = 0x8824
    ISOSpeedRatings = 0x8827
    OECF = 0x8828
    SensitivityType = 0x8830
    ExifVersion = 0x9000
    DateTimeOriginal = 0x9003
    DateTimeDigitized = 0x9004
    ShutterSpeedValue = 0x9201
    ApertureValue = 0x9202
    BrightnessValue = 0x9203
    ExposureBiasValue = 0x9204
    MaxApertureValue = 0x9205
    SubjectDistance = 0x9206
    MeteringMode = 0x9207
    LightSource = 0x9208
    Flash = 0x9209
    FocalLength = 0x920a
    SubjectArea = 0x9214
    MakerNote = 0x927c
    UserComment = 0x9286
    FlashPixVersion = 0xa000
    ColorSpace = 0xa001
    RelatedSoundFile = 0xa004
    FlashEnergy = 0xa20b
    FocalPlaneXResolution = 0xa20e
    FocalPlaneYResolution = 0xa20f
    FocalPlaneResolutionUnit = 0xa210
    SubjectLocation = 0xa214
    ExposureIndex = 0xa215
    SensingMethod = 0xa217
    FileSource = 0xa300
    SceneType = 0xa301
    CFAPattern = 0xa302
    CustomRendered = 0xa401
    ExposureMode = 0xa402
    WhiteBalanceMode = 0xa403
    DigitalZoomRatio = 0xa404
    FocalLengthIn35mmFilm = 0xa405
    SceneCaptureType = 0xa406
    GainControl = 0xa407
    Contrast = 0xa408
    Saturation = 0xa409
    Sharpness = 0xa40a
    DeviceSettingDescription = 0xa40b
    SubjectDistanceRange = 0xa40c
    ImageUniqueID = 0xa420
    LensSpecification = 0xa432
    LensMake = 0xa433
    LensModel = 0xa434
    Gamma = 0xa500

    GPSVersionID = 0x0000
    GPSLatitudeRef = 0x0001
    GPSLatitude = 0x0002
    GPSLongitudeRef = 0x0003
    GPSLongitude = 0x0004
    GPSAltitudeRef = 0x0005
    GPSAltitude = 0x0006
    GPSTimeStamp = 0x0007
    GPSSatellites = 0x0008
    GPSStatus = 0x0009
    GPSMeasureMode = 0x000a
    GPSDOP = 0x000b
    GPSSpeedRef = 0x000c
    GPSSpeed = 0x000d
    GPSTrackRef = 0x000e
    GPSTrack = 0x000f
    GPSImgDirectionRef = 0x0010
    GPSImgDirection = 0x0011
    GPSMapDatum = 0x0012
    GPSDestLatitudeRef = 0x0013
    GPSDestLatitude = 0x0014
    GPSDestLongitudeRef = 0x0015
    GPSDestLongitude = 0x0016
    GPSDestBearingRef = 0x0017
    GPSDestBearing = 0x0018
    GPSDestDistanceRef = 0x0019
    GPSDestDistance = 0x001a
    GPSProcessingMethod = 0x001b
    GPSAreaInformation = 0x001c
    GPSDateStamp = 0x001d
    GPSDifferential = 0x001e

    @property
    def code(self) -> int:
        """Raw 16-bit tag code."""
        return int(self) & 0xffff

    @property
    def description(self) -> str:
        return TAG_DESCRIPTIONS.get(self, self.name)

    def __str__(self) -> str:
        return self.description


Readable = Callable[[TagValue], Optional[str]]


class TagInfo(NamedTuple):
    tag: ExifTag
    unit: str
    format: IfdFormat
    min_count: int
    max_count: int
    readable: Readable


TAG_DESCRIPTIONS: Dict[ExifTag, str] = {
    ExifTag.ImageDescription: 'Image Description',
    ExifTag.Make: 'Manufacturer',
    ExifTag.HostComputer: 'Host computer',
    ExifTag.Model: 'Model',
    ExifTag.Orientation: 'Orientation',
    ExifTag.XResolution: 'X Resolution',
    ExifTag.YResolution: 'Y Resolution',
    ExifTag.ResolutionUnit: 'Resolution Unit',
    ExifTag.Software: 'Software',
    ExifTag.DateTime: 'Image date',
    ExifTag.WhitePoint: 'White Point',
    ExifTag.PrimaryChromaticities: 'Primary Chromaticities',
    ExifTag.YCbCrCoefficients: 'YCbCr Coefficients',
    ExifTag.ReferenceBlackWhite: 'Reference Black/White',
    ExifTag.Copyright: 'Copyright',
    ExifTag.ExifOffset: 'This image has an Exif SubIFD',
    ExifTag.GPSOffset: 'This image has a GPS SubIFD',
    ExifTag.ExposureTime: 'Exposure time',
    ExifTag.SensitivityType: 'Sensitivity type',
    ExifTag.FNumber: 'Aperture',
    ExifTag.ExposureProgram: 'Exposure program',
    ExifTag.SpectralSensitivity: 'Spectral sensitivity',
    ExifTag.ISOSpeedRatings: 'ISO speed ratings',
    ExifTag.OECF: 'OECF',
    ExifTag.ExifVersion: 'Exif version',
    ExifTag.DateTimeOriginal: 'Date of original image',
    ExifTag.DateTimeDigitized: 'Date of image digitalization',
    ExifTag.ShutterSpeedValue: 'Shutter speed',
    ExifTag.ApertureValue: 'Aperture value',
    ExifTag.BrightnessValue: 'Brightness value',
    ExifTag.ExposureBiasValue: 'Exposure bias value',
    ExifTag.MaxApertureValue: 'Maximum aperture value',
    ExifTag.SubjectDistance: 'Subject distance',
    ExifTag.MeteringMode: 'Metering mode',
    ExifTag.LightSource: 'Light source',
    ExifTag.Flash: 'Flash',
    ExifTag.FocalLength: 'Focal length',
    ExifTag.SubjectArea: 'Subject area',
    ExifTag.MakerNote: 'Maker note',
    ExifTag.UserComment: 'User comment',
    ExifTag.FlashPixVersion: 'Flashpix version',
    ExifTag.ColorSpace: 'Color space',
    ExifTag.FlashEnergy: 'Flash energy',
    ExifTag.RelatedSoundFile: 'Related sound file',
    ExifTag.FocalPlaneXResolution: 'Focal plane X resolution',
    ExifTag.FocalPlaneYResolution: 'Focal plane Y resolution',
    ExifTag.FocalPlaneResolutionUnit: 'Focal plane resolution unit',
    ExifTag.SubjectLocation: 'Subject location',
    ExifTag.ExposureIndex: 'Exposure index',
    ExifTag.SensingMethod: 'Sensing method',
    ExifTag.FileSource: 'File source',
    ExifTag.SceneType: 'Scene type',
    ExifTag.CFAPattern: 'CFA Pattern',
    ExifTag.CustomRendered: 'Custom rendered',
    ExifTag.ExposureMode: 'Exposure mode',
    ExifTag.WhiteBalanceMode: 'White balance mode',
    ExifTag.DigitalZoomRatio: 'Digital zoom ratio',
    ExifTag.FocalLengthIn35mmFilm: 'Equivalent focal length in 35mm',
    ExifTag.SceneCaptureType: 'Scene capture type',
    ExifTag.GainControl: 'Gain control',
    ExifTag.Contrast: 'Contrast',
    ExifTag.Saturation: 'Saturation',
    ExifTag.Sharpness: 'Sharpness',
    ExifTag.LensSpecification: 'Lens specification',
    ExifTag.LensMake: 'Lens manufacturer',
    ExifTag.LensModel: 'Lens model',
    ExifTag.Gamma: 'Gamma',
    ExifTag.DeviceSettingDescription: 'Device setting description',
    ExifTag.SubjectDistanceRange: 'Subject distance range',
    ExifTag.ImageUniqueID: 'Image unique ID',
    ExifTag.GPSVersionID: 'GPS version ID',
    ExifTag.GPSLatitudeRef: 'GPS latitude ref',
    ExifTag.GPSLatitude: 'GPS latitude',
    ExifTag.GPSLongitudeRef: 'GPS longitude ref',
    ExifTag.GPSLongitude: 'GPS longitude',
    ExifTag.GPSAltitudeRef: 'GPS altitude ref',
    ExifTag.GPSAltitude: 'GPS altitude',
    ExifTag.GPSTimeStamp: 'GPS timestamp',
    ExifTag.GPSSatellites: 'GPS satellites',
    ExifTag.GPSStatus: 'GPS status',
    ExifTag.GPSMeasureMode: 'GPS measure mode',
    ExifTag.GPSDOP: 'GPS Data Degree of Precision (DOP)',
    ExifTag.GPSSpeedRef: 'GPS speed ref',
    ExifTag.GPSSpeed: 'GPS speed',
    ExifTag.GPSTrackRef: 'GPS track ref',
    ExifTag.GPSTrack: 'GPS track',
    ExifTag.GPSImgDirectionRef: 'GPS image direction ref',
    ExifTag.GPSImgDirection: 'GPS image direction',
    ExifTag.GPSMapDatum: 'GPS map datum',
    ExifTag.GPSDestLatitudeRef: 'GPS destination latitude ref',
    ExifTag.GPSDestLatitude: 'GPS destination latitude',
    ExifTag.GPSDestLongitudeRef: 'GPS destination longitude ref',
    ExifTag.GPSDestLongitude: 'GPS destination longitude',
    ExifTag.GPSDestBearingRef: 'GPS destination bearing ref',
    ExifTag.GPSDestBearing: 'GPS destination bearing',
    ExifTag.GPSDestDistanceRef: 'GPS destination distance ref',
    ExifTag.GPSDestDistance: 'GPS destination distance',
    ExifTag.GPSProcessingMethod: 'GPS processing method',
    ExifTag.GPSAreaInformation: 'GPS area information',
    ExifTag.GPSDateStamp: 'GPS date stamp',
    ExifTag.GPSDifferential: 'GPS differential',
    ExifTag.UnknownToMe: 'Unknown to this library, or manufacturer-specific',
}


_ASC = IfdFormat.Ascii
_UND = IfdFormat.Undefined
_U8 = IfdFormat.U8
_U16 = IfdFormat.U16
_U32 = IfdFormat.U32
_URAT = IfdFormat.URational
_IRAT = IfdFormat.IRational

# (tag, unit, format, min_count, max_count, readable)
_TAG_TABLE = [
    (ExifTag.ImageDescription, 'none', _ASC, -1, -1, r.strpass),
    (ExifTag.Make, 'none', _ASC, -1, -1, r.strpass),
    (ExifTag.HostComputer, 'none', _ASC, -1, -1, r.strpass),
    (ExifTag.Model, 'none', _ASC, -1, -1, r.strpass),
    (ExifTag.Orientation, 'none', _U16, 1, 1, r.orientation),
    (ExifTag.XResolution, 'pixels per res unit', _URAT, 1, 1, r.rational_value),
    (ExifTag.YResolution, 'pixels per res unit', _URAT, 1, 1, r.rational_value),
    (ExifTag.ResolutionUnit, 'none', _U16, 1, 1, r.resolution_unit),
    (ExifTag.Software, 'none', _ASC, -1, -1, r.strpass),
    (ExifTag.DateTime, 'none', _ASC, -1, -1, r.strpass),
    (ExifTag.WhitePoint, 'CIE 1931 coordinates', _URAT, 2, 2, r.rational_values),
    (ExifTag.PrimaryChromaticities, 'CIE 1931 coordinates', _URAT, 6, 6, r.rational_values),
    (ExifTag.YCbCrCoefficients, 'none', _URAT, 3, 3, r.rational_values),
    (ExifTag.ReferenceBlackWhite, 'RGB or YCbCr', _URAT, 6, 6, r.rational_values),
    (ExifTag.Copyright, 'none', _ASC, -1, -1, r.strpass),
    (ExifTag.ExifOffset, 'byte offset', _U32, 1, 1, r.strpass),
    (ExifTag.GPSOffset, 'byte offset', _U32, 1, 1, r.strpass),

    (ExifTag.ExposureTime, 's', _URAT, 1, 1, r.exposure_time),
    (ExifTag.FNumber, 'f-number', _URAT, 1, 1, r.f_number),
    (ExifTag.ExposureProgram, 'none', _U16, 1, 1, r.exposure_program),
    (ExifTag.SpectralSensitivity, 'ASTM string', _ASC, -1, -1, r.strpass),
    (ExifTag.ISOSpeedRatings, 'ISO', _U16, 1, 3, r.iso_speeds),
    (ExifTag.OECF, 'none', _UND, -1, -1, r.undefined_as_blob),
    (ExifTag.SensitivityType, 'none', _U16, 1, 1, r.sensitivity_type),
    (ExifTag.ExifVersion, 'none', _UND, -1, -1, r.undefined_as_ascii),
    (ExifTag.DateTimeOriginal, 'none', _ASC, -1, -1, r.strpass),
    (ExifTag.DateTimeDigitized, 'none', _ASC, -1, -1, r.strpass),
    (ExifTag.ShutterSpeedValue, 'APEX', _IRAT, 1, 1, r.apex_tv),
    (ExifTag.ApertureValue, 'APEX', _URAT, 1, 1, r.apex_av),
    (ExifTag.BrightnessValue, 'APEX', _IRAT, 1, 1, r.apex_brightness),
    (ExifTag.ExposureBiasValue, 'APEX', _IRAT, 1, 1, r.apex_ev),
    (ExifTag.MaxApertureValue, 'APEX', _URAT, 1, 1, r.apex_av),
    (ExifTag.SubjectDistance, 'm', _URAT, 1, 1, r.meters),
    (ExifTag.MeteringMode, 'none', _U16, 1, 1, r.metering_mode),
    (ExifTag.LightSource, 'none', _U16, 1, 1, r.light_source),
    (ExifTag.Flash, 'none', _U16, 1, 1, r.flash),
    (ExifTag.FocalLength, 'mm', _URAT, 1, 1, r.focal_length),
    (ExifTag.SubjectArea, 'px', _U16, 2, 4, r.subject_area),
    (ExifTag.MakerNote, 'none', _UND, -1, -1, r.undefined_as_blob),
    (ExifTag.UserComment, 'none', _UND, -1, -1, r.undefined_as_encoded_string),
    (ExifTag.FlashPixVersion, 'none', _UND, -1, -1, r.undefined_as_ascii),
    (ExifTag.ColorSpace, 'none', _U16, 1, 1, r.color_space),
    (ExifTag.RelatedSoundFile, 'none', _ASC, -1, -1, r.strpass),
    (ExifTag.FlashEnergy, 'BCPS', _URAT, 1, 1, r.flash_energy),
    (ExifTag.FocalPlaneXResolution, '@FocalPlaneResolutionUnit', _URAT, 1, 1, r.rational_value),
    (ExifTag.FocalPlaneYResolution, '@FocalPlaneResolutionUnit', _URAT, 1, 1, r.rational_value),
    (ExifTag.FocalPlaneResolutionUnit, 'none', _U16, 1, 1, r.resolution_unit),
    (ExifTag.SubjectLocation, 'X,Y', _U16, 2, 2, r.subject_location),
    (ExifTag.ExposureIndex, 'EI', _URAT, 1, 1, r.rational_value),
    (ExifTag.SensingMethod, 'none', _U16, 1, 1, r.sensing_method),
    (ExifTag.FileSource, 'none', _UND, -1, -1, r.file_source),
    (ExifTag.SceneType, 'none', _UND, -1, -1, r.scene_type),
    (ExifTag.CFAPattern, 'none', _UND, -1, -1, r.undefined_as_u8),
    (ExifTag.CustomRendered, 'none', _U16, 1, 1, r.custom_rendered),
    (ExifTag.ExposureMode, 'none', _U16, 1, 1, r.exposure_mode),
    (ExifTag.WhiteBalanceMode, 'none', _U16, 1, 1, r.white_balance_mode),
    (ExifTag.DigitalZoomRatio, 'none', _URAT, 1, 1, r.rational_value),
    (ExifTag.FocalLengthIn35mmFilm, 'mm', _U16, 1, 1, r.focal_length_35),
    (ExifTag.SceneCaptureType, 'none', _U16, 1, 1, r.scene_capture_type),
    (ExifTag.GainControl, 'none', _U16, 1, 1, r.gain_control),
    (ExifTag.Contrast, 'none', _U16, 1, 1, r.contrast),
    (ExifTag.Saturation, 'none', _U16, 1, 1, r.saturation),
    (ExifTag.Sharpness, 'none', _U16, 1, 1, r.sharpness),
    (ExifTag.DeviceSettingDescription, 'none', _UND, -1, -1, r.undefined_as_blob),
    (ExifTag.SubjectDistanceRange, 'none', _U16, 1, 1, r.subject_distance_range),
    (ExifTag.ImageUniqueID, 'none', _ASC, -1, -1, r.strpass),
    (ExifTag.LensSpecification, 'none', _URAT, 4, 4, r.lens_spec),
    (ExifTag.LensMake, 'none', _ASC, -1, -1, r.strpass),
    (ExifTag.LensModel, 'none', _ASC, -1, -1, r.strpass),
    (ExifTag.Gamma, 'none', _URAT, 1, 1, r.rational_value),

    (ExifTag.GPSVersionID, 'none', _U8, 4, 4, r.strpass),
    (ExifTag.GPSLatitudeRef, 'none', _ASC, -1, -1, r.strpass),
    (ExifTag.GPSLatitude, 'D/M/S', _URAT, 3, 3, r.dms),
    (ExifTag.GPSLongitudeRef, 'none', _ASC, -1, -1, r.strpass),
    (ExifTag.GPSLongitude, 'D/M/S', _URAT, 3, 3, r.dms),
    (ExifTag.GPSAltitudeRef, 'none', _U8, 1, 1, r.gps_alt_ref),
    (ExifTag.GPSAltitude, 'm', _URAT, 1, 1, r.meters),
    (ExifTag.GPSTimeStamp, 'UTC time', _URAT, 3, 3, r.gpstimestamp),
    (ExifTag.GPSSatellites, 'none', _ASC, -1, -1, r.strpass),
    (ExifTag.GPSStatus, 'none', _ASC, -1, -1, r.gpsstatus),
    (ExifTag.GPSMeasureMode, 'none', _ASC, -1, -1, r.gpsmeasuremode),
    (ExifTag.GPSDOP, 'none', _URAT, 1, 1, r.rational_value),
    (ExifTag.GPSSpeedRef, 'none', _ASC, -1, -1, r.gpsspeedref),
    (ExifTag.GPSSpeed, '@GPSSpeedRef', _URAT, 1, 1, r.gpsspeed),
    (ExifTag.GPSTrackRef, 'none', _ASC, -1, -1, r.gpsbearingref),
    (ExifTag.GPSTrack, 'deg', _URAT, 1, 1, r.gpsbearing),
    (ExifTag.GPSImgDirectionRef, 'none', _ASC, -1, -1, r.gpsbearingref),
    (ExifTag.GPSImgDirection, 'deg', _URAT, 1, 1, r.gpsbearing),
    (ExifTag.GPSMapDatum, 'none', _ASC, -1, -1, r.strpass),
    (ExifTag.GPSDestLatitudeRef, 'none', _ASC, -1, -1, r.strpass),
    (ExifTag.GPSDestLatitude, 'D/M/S', _URAT, 3, 3, r.dms),
    (ExifTag.GPSDestLongitudeRef, 'none', _ASC, -1, -1, r.strpass),
    (ExifTag.GPSDestLongitude, 'D/M/S', _URAT, 3, 3, r.dms),
    (ExifTag.GPSDestBearingRef, 'none', _ASC, -1, -1, r.gpsbearingref),
    (ExifTag.GPSDestBearing, 'deg', _URAT, 1, 1, r.gpsbearing),
    (ExifTag.GPSDestDistanceRef, 'none', _ASC, -1, -1, r.gpsdestdistanceref),
    (ExifTag.GPSDestDistance, '@GPSDestDistanceRef', _URAT, 1, 1, r.gpsdestdistance),
    (ExifTag.GPSProcessingMethod, 'none', _UND, -1, -1, r.undefined_as_encoded_string),
    (ExifTag.GPSAreaInformation, 'none', _UND, -1, -1, r.undefined_as_encoded_string),
    (ExifTag.GPSDateStamp, 'none', _ASC, -1, -1, r.strpass),
    (ExifTag.GPSDifferential, 'none', _U16, 1, 1, r.gpsdiff),
]

TAG_DICTIONARY: Dict[int, TagInfo] = {
    row[0].code: TagInfo(*row) for row in _TAG_TABLE
}

_UNKNOWN = TagInfo(ExifTag.UnknownToMe, '', IfdFormat.Unknown, -1, -1, r.nop)


def tag_to_exif(code: int) -> TagInfo:
    """Look up a raw tag code. Unlisted codes map to ``UnknownToMe``."""
    return TAG_DICTIONARY.get(code, _UNKNOWN)
