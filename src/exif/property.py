"""EXIF property records and raw interchange items."""

from typing import Any, Optional, Union

from .tags import ExifTag, ExifType, canonical_type_for, tag_name, to_tag


class PropertyItem:
    """Raw (tag, value) entry as produced by an image metadata decoder.

    The value is kept exactly as the decoder delivered it: raw bytes, an
    already-decoded Python value, or None when the decoder had nothing.
    """

    def __init__(self, id: int, value: Any = None, type: int = 0, len: Optional[int] = None):
        """Initialize interchange item.

        Args:
            id: Numeric tag identifier
            value: Raw or decoded value, None if absent
            type: TIFF data type code (0 if unknown)
            len: Payload length in bytes (derived from value when omitted)
        """
        self.id = int(id)
        self.value = value
        self.type = int(type)
        if len is None:
            len = _payload_length(value)
        self.len = len

    def __repr__(self):
        return f"PropertyItem(id=0x{self.id:04X}, type={self.type}, len={self.len})"


def _payload_length(value: Any) -> int:
    if isinstance(value, (bytes, bytearray, str)):
        return len(value)
    return 0


class ExifProperty:
    """A single EXIF tag with its typed value."""

    def __init__(self, tag: Union[int, ExifTag], value: Any = None, type: Optional[ExifType] = None):
        """Initialize property.

        Args:
            tag: Tag identifier
            value: Tag value, None when absent
            type: Declared data type (defaults to the registered type of the tag)
        """
        self.tag = to_tag(tag)
        self.value = value
        self.type = canonical_type_for(self.tag) if type is None else _to_type(type)

    @classmethod
    def from_property_item(cls, item: PropertyItem) -> 'ExifProperty':
        """Wrap a raw interchange item without decoding its value.

        Args:
            item: Decoder-produced item

        Returns:
            ExifProperty carrying the item's tag, value and type code
        """
        return cls(item.id, item.value, _to_type(item.type))

    @property
    def id(self) -> int:
        """Integer tag identifier."""
        return int(self.tag)

    @property
    def name(self) -> str:
        """Display name of the tag."""
        return tag_name(self.tag)

    def __eq__(self, other):
        if not isinstance(other, ExifProperty):
            return NotImplemented
        return (self.id, self.type, self.value) == (other.id, other.type, other.value)

    # Mutable record
    __hash__ = None

    def __repr__(self):
        return f"ExifProperty({self.name}, value={self.value!r}, type={self.type.name})"


def _to_type(code: int) -> ExifType:
    try:
        return ExifType(int(code))
    except ValueError:
        return ExifType.UNKNOWN
