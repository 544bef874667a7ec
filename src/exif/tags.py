"""EXIF tag identifiers and their canonical data types."""

from enum import IntEnum
from typing import Union

from .exceptions import UnknownTagError


class ExifType(IntEnum):
    """TIFF/EXIF field data types"""
    UNKNOWN = 0
    BYTE = 1
    ASCII = 2
    SHORT = 3
    LONG = 4
    RATIONAL = 5
    SBYTE = 6
    UNDEFINED = 7
    SSHORT = 8
    SLONG = 9
    SRATIONAL = 10
    FLOAT = 11
    DOUBLE = 12


class ExifTag(IntEnum):
    """Recognized EXIF tag identifiers."""
    # IFD0 (image)
    IMAGE_WIDTH = 0x0100
    IMAGE_LENGTH = 0x0101
    BITS_PER_SAMPLE = 0x0102
    COMPRESSION = 0x0103
    PHOTOMETRIC_INTERPRETATION = 0x0106
    IMAGE_DESCRIPTION = 0x010E
    MAKE = 0x010F
    MODEL = 0x0110
    ORIENTATION = 0x0112
    SAMPLES_PER_PIXEL = 0x0115
    X_RESOLUTION = 0x011A
    Y_RESOLUTION = 0x011B
    PLANAR_CONFIGURATION = 0x011C
    RESOLUTION_UNIT = 0x0128
    TRANSFER_FUNCTION = 0x012D
    SOFTWARE = 0x0131
    DATE_TIME = 0x0132
    ARTIST = 0x013B
    WHITE_POINT = 0x013E
    PRIMARY_CHROMATICITIES = 0x013F
    Y_CB_CR_COEFFICIENTS = 0x0211
    Y_CB_CR_POSITIONING = 0x0213
    REFERENCE_BLACK_WHITE = 0x0214
    RATING = 0x4746
    RATING_PERCENT = 0x4749
    COPYRIGHT = 0x8298
    EXIF_IFD_POINTER = 0x8769
    GPS_IFD_POINTER = 0x8825
    XP_TITLE = 0x9C9B
    XP_COMMENT = 0x9C9C
    XP_AUTHOR = 0x9C9D
    XP_KEYWORDS = 0x9C9E
    XP_SUBJECT = 0x9C9F

    # Exif sub-IFD
    EXPOSURE_TIME = 0x829A
    F_NUMBER = 0x829D
    EXPOSURE_PROGRAM = 0x8822
    SPECTRAL_SENSITIVITY = 0x8824
    ISO_SPEED_RATINGS = 0x8827
    EXIF_VERSION = 0x9000
    DATE_TIME_ORIGINAL = 0x9003
    DATE_TIME_DIGITIZED = 0x9004
    OFFSET_TIME = 0x9010
    OFFSET_TIME_ORIGINAL = 0x9011
    OFFSET_TIME_DIGITIZED = 0x9012
    COMPONENTS_CONFIGURATION = 0x9101
    COMPRESSED_BITS_PER_PIXEL = 0x9102
    SHUTTER_SPEED_VALUE = 0x9201
    APERTURE_VALUE = 0x9202
    BRIGHTNESS_VALUE = 0x9203
    EXPOSURE_BIAS_VALUE = 0x9204
    MAX_APERTURE_VALUE = 0x9205
    SUBJECT_DISTANCE = 0x9206
    METERING_MODE = 0x9207
    LIGHT_SOURCE = 0x9208
    FLASH = 0x9209
    FOCAL_LENGTH = 0x920A
    SUBJECT_AREA = 0x9214
    MAKER_NOTE = 0x927C
    USER_COMMENT = 0x9286
    SUB_SEC_TIME = 0x9290
    SUB_SEC_TIME_ORIGINAL = 0x9291
    SUB_SEC_TIME_DIGITIZED = 0x9292
    FLASHPIX_VERSION = 0xA000
    COLOR_SPACE = 0xA001
    PIXEL_X_DIMENSION = 0xA002
    PIXEL_Y_DIMENSION = 0xA003
    RELATED_SOUND_FILE = 0xA004
    INTEROPERABILITY_IFD_POINTER = 0xA005
    FLASH_ENERGY = 0xA20B
    FOCAL_PLANE_X_RESOLUTION = 0xA20E
    FOCAL_PLANE_Y_RESOLUTION = 0xA20F
    FOCAL_PLANE_RESOLUTION_UNIT = 0xA210
    SUBJECT_LOCATION = 0xA214
    EXPOSURE_INDEX = 0xA215
    SENSING_METHOD = 0xA217
    FILE_SOURCE = 0xA300
    SCENE_TYPE = 0xA301
    CFA_PATTERN = 0xA302
    CUSTOM_RENDERED = 0xA401
    EXPOSURE_MODE = 0xA402
    WHITE_BALANCE = 0xA403
    DIGITAL_ZOOM_RATIO = 0xA404
    FOCAL_LENGTH_IN_35MM_FILM = 0xA405
    SCENE_CAPTURE_TYPE = 0xA406
    GAIN_CONTROL = 0xA407
    CONTRAST = 0xA408
    SATURATION = 0xA409
    SHARPNESS = 0xA40A
    SUBJECT_DISTANCE_RANGE = 0xA40C
    IMAGE_UNIQUE_ID = 0xA420
    CAMERA_OWNER_NAME = 0xA430
    BODY_SERIAL_NUMBER = 0xA431
    LENS_SPECIFICATION = 0xA432
    LENS_MAKE = 0xA433
    LENS_MODEL = 0xA434
    LENS_SERIAL_NUMBER = 0xA435

    # GPS sub-IFD. The low GPS ids overlap nothing in IFD0/Exif, so they
    # share the identifier space.
    GPS_VERSION_ID = 0x0000
    GPS_LATITUDE_REF = 0x0001
    GPS_LATITUDE = 0x0002
    GPS_LONGITUDE_REF = 0x0003
    GPS_LONGITUDE = 0x0004
    GPS_ALTITUDE_REF = 0x0005
    GPS_ALTITUDE = 0x0006
    GPS_TIME_STAMP = 0x0007
    GPS_SATELLITES = 0x0008
    GPS_STATUS = 0x0009
    GPS_MEASURE_MODE = 0x000A
    GPS_DOP = 0x000B
    GPS_SPEED_REF = 0x000C
    GPS_SPEED = 0x000D
    GPS_TRACK_REF = 0x000E
    GPS_TRACK = 0x000F
    GPS_IMG_DIRECTION_REF = 0x0010
    GPS_IMG_DIRECTION = 0x0011
    GPS_MAP_DATUM = 0x0012
    GPS_DEST_LATITUDE_REF = 0x0013
    GPS_DEST_LATITUDE = 0x0014
    GPS_DEST_LONGITUDE_REF = 0x0015
    GPS_DEST_LONGITUDE = 0x0016
    GPS_DEST_BEARING_REF = 0x0017
    GPS_DEST_BEARING = 0x0018
    GPS_DEST_DISTANCE_REF = 0x0019
    GPS_DEST_DISTANCE = 0x001A
    GPS_PROCESSING_METHOD = 0x001B
    GPS_AREA_INFORMATION = 0x001C
    GPS_DATE_STAMP = 0x001D
    GPS_DIFFERENTIAL = 0x001E


# Canonical data type per tag (EXIF 2.32 / TIFF 6.0)
TAG_TYPES = {
    ExifTag.IMAGE_WIDTH: ExifType.LONG,
    ExifTag.IMAGE_LENGTH: ExifType.LONG,
    ExifTag.BITS_PER_SAMPLE: ExifType.SHORT,
    ExifTag.COMPRESSION: ExifType.SHORT,
    ExifTag.PHOTOMETRIC_INTERPRETATION: ExifType.SHORT,
    ExifTag.IMAGE_DESCRIPTION: ExifType.ASCII,
    ExifTag.MAKE: ExifType.ASCII,
    ExifTag.MODEL: ExifType.ASCII,
    ExifTag.ORIENTATION: ExifType.SHORT,
    ExifTag.SAMPLES_PER_PIXEL: ExifType.SHORT,
    ExifTag.X_RESOLUTION: ExifType.RATIONAL,
    ExifTag.Y_RESOLUTION: ExifType.RATIONAL,
    ExifTag.PLANAR_CONFIGURATION: ExifType.SHORT,
    ExifTag.RESOLUTION_UNIT: ExifType.SHORT,
    ExifTag.TRANSFER_FUNCTION: ExifType.SHORT,
    ExifTag.SOFTWARE: ExifType.ASCII,
    ExifTag.DATE_TIME: ExifType.ASCII,
    ExifTag.ARTIST: ExifType.ASCII,
    ExifTag.WHITE_POINT: ExifType.RATIONAL,
    ExifTag.PRIMARY_CHROMATICITIES: ExifType.RATIONAL,
    ExifTag.Y_CB_CR_COEFFICIENTS: ExifType.RATIONAL,
    ExifTag.Y_CB_CR_POSITIONING: ExifType.SHORT,
    ExifTag.REFERENCE_BLACK_WHITE: ExifType.RATIONAL,
    ExifTag.RATING: ExifType.SHORT,
    ExifTag.RATING_PERCENT: ExifType.SHORT,
    ExifTag.COPYRIGHT: ExifType.ASCII,
    ExifTag.EXIF_IFD_POINTER: ExifType.LONG,
    ExifTag.GPS_IFD_POINTER: ExifType.LONG,
    ExifTag.XP_TITLE: ExifType.BYTE,
    ExifTag.XP_COMMENT: ExifType.BYTE,
    ExifTag.XP_AUTHOR: ExifType.BYTE,
    ExifTag.XP_KEYWORDS: ExifType.BYTE,
    ExifTag.XP_SUBJECT: ExifType.BYTE,

    ExifTag.EXPOSURE_TIME: ExifType.RATIONAL,
    ExifTag.F_NUMBER: ExifType.RATIONAL,
    ExifTag.EXPOSURE_PROGRAM: ExifType.SHORT,
    ExifTag.SPECTRAL_SENSITIVITY: ExifType.ASCII,
    ExifTag.ISO_SPEED_RATINGS: ExifType.SHORT,
    ExifTag.EXIF_VERSION: ExifType.UNDEFINED,
    ExifTag.DATE_TIME_ORIGINAL: ExifType.ASCII,
    ExifTag.DATE_TIME_DIGITIZED: ExifType.ASCII,
    ExifTag.OFFSET_TIME: ExifType.ASCII,
    ExifTag.OFFSET_TIME_ORIGINAL: ExifType.ASCII,
    ExifTag.OFFSET_TIME_DIGITIZED: ExifType.ASCII,
    ExifTag.COMPONENTS_CONFIGURATION: ExifType.UNDEFINED,
    ExifTag.COMPRESSED_BITS_PER_PIXEL: ExifType.RATIONAL,
    ExifTag.SHUTTER_SPEED_VALUE: ExifType.SRATIONAL,
    ExifTag.APERTURE_VALUE: ExifType.RATIONAL,
    ExifTag.BRIGHTNESS_VALUE: ExifType.SRATIONAL,
    ExifTag.EXPOSURE_BIAS_VALUE: ExifType.SRATIONAL,
    ExifTag.MAX_APERTURE_VALUE: ExifType.RATIONAL,
    ExifTag.SUBJECT_DISTANCE: ExifType.RATIONAL,
    ExifTag.METERING_MODE: ExifType.SHORT,
    ExifTag.LIGHT_SOURCE: ExifType.SHORT,
    ExifTag.FLASH: ExifType.SHORT,
    ExifTag.FOCAL_LENGTH: ExifType.RATIONAL,
    ExifTag.SUBJECT_AREA: ExifType.SHORT,
    ExifTag.MAKER_NOTE: ExifType.UNDEFINED,
    ExifTag.USER_COMMENT: ExifType.UNDEFINED,
    ExifTag.SUB_SEC_TIME: ExifType.ASCII,
    ExifTag.SUB_SEC_TIME_ORIGINAL: ExifType.ASCII,
    ExifTag.SUB_SEC_TIME_DIGITIZED: ExifType.ASCII,
    ExifTag.FLASHPIX_VERSION: ExifType.UNDEFINED,
    ExifTag.COLOR_SPACE: ExifType.SHORT,
    ExifTag.PIXEL_X_DIMENSION: ExifType.LONG,
    ExifTag.PIXEL_Y_DIMENSION: ExifType.LONG,
    ExifTag.RELATED_SOUND_FILE: ExifType.ASCII,
    ExifTag.INTEROPERABILITY_IFD_POINTER: ExifType.LONG,
    ExifTag.FLASH_ENERGY: ExifType.RATIONAL,
    ExifTag.FOCAL_PLANE_X_RESOLUTION: ExifType.RATIONAL,
    ExifTag.FOCAL_PLANE_Y_RESOLUTION: ExifType.RATIONAL,
    ExifTag.FOCAL_PLANE_RESOLUTION_UNIT: ExifType.SHORT,
    ExifTag.SUBJECT_LOCATION: ExifType.SHORT,
    ExifTag.EXPOSURE_INDEX: ExifType.RATIONAL,
    ExifTag.SENSING_METHOD: ExifType.SHORT,
    ExifTag.FILE_SOURCE: ExifType.UNDEFINED,
    ExifTag.SCENE_TYPE: ExifType.UNDEFINED,
    ExifTag.CFA_PATTERN: ExifType.UNDEFINED,
    ExifTag.CUSTOM_RENDERED: ExifType.SHORT,
    ExifTag.EXPOSURE_MODE: ExifType.SHORT,
    ExifTag.WHITE_BALANCE: ExifType.SHORT,
    ExifTag.DIGITAL_ZOOM_RATIO: ExifType.RATIONAL,
    ExifTag.FOCAL_LENGTH_IN_35MM_FILM: ExifType.SHORT,
    ExifTag.SCENE_CAPTURE_TYPE: ExifType.SHORT,
    ExifTag.GAIN_CONTROL: ExifType.SHORT,
    ExifTag.CONTRAST: ExifType.SHORT,
    ExifTag.SATURATION: ExifType.SHORT,
    ExifTag.SHARPNESS: ExifType.SHORT,
    ExifTag.SUBJECT_DISTANCE_RANGE: ExifType.SHORT,
    ExifTag.IMAGE_UNIQUE_ID: ExifType.ASCII,
    ExifTag.CAMERA_OWNER_NAME: ExifType.ASCII,
    ExifTag.BODY_SERIAL_NUMBER: ExifType.ASCII,
    ExifTag.LENS_SPECIFICATION: ExifType.RATIONAL,
    ExifTag.LENS_MAKE: ExifType.ASCII,
    ExifTag.LENS_MODEL: ExifType.ASCII,
    ExifTag.LENS_SERIAL_NUMBER: ExifType.ASCII,

    ExifTag.GPS_VERSION_ID: ExifType.BYTE,
    ExifTag.GPS_LATITUDE_REF: ExifType.ASCII,
    ExifTag.GPS_LATITUDE: ExifType.RATIONAL,
    ExifTag.GPS_LONGITUDE_REF: ExifType.ASCII,
    ExifTag.GPS_LONGITUDE: ExifType.RATIONAL,
    ExifTag.GPS_ALTITUDE_REF: ExifType.BYTE,
    ExifTag.GPS_ALTITUDE: ExifType.RATIONAL,
    ExifTag.GPS_TIME_STAMP: ExifType.RATIONAL,
    ExifTag.GPS_SATELLITES: ExifType.ASCII,
    ExifTag.GPS_STATUS: ExifType.ASCII,
    ExifTag.GPS_MEASURE_MODE: ExifType.ASCII,
    ExifTag.GPS_DOP: ExifType.RATIONAL,
    ExifTag.GPS_SPEED_REF: ExifType.ASCII,
    ExifTag.GPS_SPEED: ExifType.RATIONAL,
    ExifTag.GPS_TRACK_REF: ExifType.ASCII,
    ExifTag.GPS_TRACK: ExifType.RATIONAL,
    ExifTag.GPS_IMG_DIRECTION_REF: ExifType.ASCII,
    ExifTag.GPS_IMG_DIRECTION: ExifType.RATIONAL,
    ExifTag.GPS_MAP_DATUM: ExifType.ASCII,
    ExifTag.GPS_DEST_LATITUDE_REF: ExifType.ASCII,
    ExifTag.GPS_DEST_LATITUDE: ExifType.RATIONAL,
    ExifTag.GPS_DEST_LONGITUDE_REF: ExifType.ASCII,
    ExifTag.GPS_DEST_LONGITUDE: ExifType.RATIONAL,
    ExifTag.GPS_DEST_BEARING_REF: ExifType.ASCII,
    ExifTag.GPS_DEST_BEARING: ExifType.RATIONAL,
    ExifTag.GPS_DEST_DISTANCE_REF: ExifType.ASCII,
    ExifTag.GPS_DEST_DISTANCE: ExifType.RATIONAL,
    ExifTag.GPS_PROCESSING_METHOD: ExifType.UNDEFINED,
    ExifTag.GPS_AREA_INFORMATION: ExifType.UNDEFINED,
    ExifTag.GPS_DATE_STAMP: ExifType.ASCII,
    ExifTag.GPS_DIFFERENTIAL: ExifType.SHORT,
}

# Sub-IFD pointers are structure, not metadata values
IFD_POINTER_TAGS = frozenset({
    ExifTag.EXIF_IFD_POINTER,
    ExifTag.GPS_IFD_POINTER,
    ExifTag.INTEROPERABILITY_IFD_POINTER,
})

GPS_TAGS = frozenset(tag for tag in ExifTag if tag.name.startswith('GPS_') and tag != ExifTag.GPS_IFD_POINTER)

_RECOGNIZED_IDS = frozenset(int(tag) for tag in ExifTag)

# Names that do not follow from the member name (ExifTool spelling)
_NAME_OVERRIDES = {
    ExifTag.IMAGE_LENGTH: 'ImageHeight',
    ExifTag.EXIF_IFD_POINTER: 'ExifOffset',
    ExifTag.GPS_IFD_POINTER: 'GPSInfo',
    ExifTag.INTEROPERABILITY_IFD_POINTER: 'InteropOffset',
    ExifTag.ISO_SPEED_RATINGS: 'ISO',
    ExifTag.PIXEL_X_DIMENSION: 'ExifImageWidth',
    ExifTag.PIXEL_Y_DIMENSION: 'ExifImageHeight',
    ExifTag.FOCAL_LENGTH_IN_35MM_FILM: 'FocalLengthIn35mmFormat',
    ExifTag.CAMERA_OWNER_NAME: 'OwnerName',
    ExifTag.BODY_SERIAL_NUMBER: 'SerialNumber',
    ExifTag.LENS_SPECIFICATION: 'LensInfo',
}

_UPPERCASE_WORDS = {'GPS', 'XP', 'ID', 'DOP', 'CFA'}

TagLike = Union[int, str, ExifTag]


def is_recognized(tag_id: int) -> bool:
    """Check whether an identifier belongs to the canonical tag space.

    Args:
        tag_id: Numeric tag identifier

    Returns:
        True if the identifier is an ExifTag member
    """
    try:
        return int(tag_id) in _RECOGNIZED_IDS
    except (TypeError, ValueError):
        return False


def to_tag(tag_id: int) -> Union[ExifTag, int]:
    """Return the ExifTag member for an identifier, or the plain int if unknown."""
    tag_id = int(tag_id)
    if tag_id in _RECOGNIZED_IDS:
        return ExifTag(tag_id)
    return tag_id


def canonical_type_for(tag_id: int) -> ExifType:
    """Get the declared data type for a tag.

    Args:
        tag_id: Numeric tag identifier

    Returns:
        Registered ExifType, or ExifType.UNKNOWN for unrecognized tags
    """
    if not is_recognized(tag_id):
        return ExifType.UNKNOWN
    return TAG_TYPES.get(ExifTag(int(tag_id)), ExifType.UNKNOWN)


def tag_name(tag_id: int) -> str:
    """Get the ExifTool-style name for a tag: ``ORIENTATION -> Orientation``.

    Unrecognized identifiers are rendered as hex (``0xABCD``).
    """
    if not is_recognized(tag_id):
        return f"0x{int(tag_id):04X}"
    tag = ExifTag(int(tag_id))
    if tag in _NAME_OVERRIDES:
        return _NAME_OVERRIDES[tag]
    return ''.join(word if word in _UPPERCASE_WORDS else word.title() for word in tag.name.split('_'))


def parse_tag(value: TagLike) -> int:
    """Resolve a tag from an int, a numeric string or a name.

    Accepts ``274``, ``"274"``, ``"0x0112"``, ``"Orientation"`` and
    ``"ORIENTATION"``.

    Args:
        value: Tag reference

    Returns:
        Numeric tag identifier

    Raises:
        UnknownTagError: If a name does not match any registered tag
    """
    if isinstance(value, int):
        return int(value)

    text = str(value).strip()
    try:
        return int(text, 0)
    except ValueError:
        pass

    normalized = text.replace('_', '').replace(' ', '').lower()
    for tag in ExifTag:
        if tag.name.replace('_', '').lower() == normalized:
            return int(tag)
        if tag in _NAME_OVERRIDES and _NAME_OVERRIDES[tag].lower() == normalized:
            return int(tag)

    raise UnknownTagError(f"Unknown EXIF tag: {value}")
