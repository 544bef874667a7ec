"""Exceptions raised by the EXIF property modules."""


class ExifError(Exception):
    """Base class for EXIF metadata errors."""


class UnsupportedOperation(ExifError):
    """Raised when an operation is not supported by a collection."""


class UnknownTagError(ExifError, KeyError):
    """Raised when a tag name or identifier is not in the tag registry."""
