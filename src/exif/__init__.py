"""EXIF property collection and its reader, writer and serializer."""

from .collection import ExifPropertyCollection
from .exceptions import ExifError, UnknownTagError, UnsupportedOperation
from .property import ExifProperty, PropertyItem
from .tags import ExifTag, ExifType, canonical_type_for, is_recognized, parse_tag, tag_name

__all__ = [
    'ExifPropertyCollection',
    'ExifProperty',
    'PropertyItem',
    'ExifTag',
    'ExifType',
    'ExifError',
    'UnknownTagError',
    'UnsupportedOperation',
    'canonical_type_for',
    'is_recognized',
    'parse_tag',
    'tag_name'
]
