"""Unit tests for the EXIF tag registry."""

import pytest
from src.exif.exceptions import UnknownTagError
from src.exif.tags import (
    ExifTag,
    ExifType,
    GPS_TAGS,
    TAG_TYPES,
    canonical_type_for,
    is_recognized,
    parse_tag,
    tag_name,
    to_tag,
)


class TestRegistry:
    """Test cases for recognition and canonical types."""

    def test_every_tag_has_a_type(self):
        """Test all ExifTag members are registered with a type."""
        missing = [tag.name for tag in ExifTag if tag not in TAG_TYPES]
        assert missing == []

    def test_is_recognized(self):
        """Test recognition of known, unknown and invalid identifiers."""
        assert is_recognized(0x0112) is True
        assert is_recognized(ExifTag.GPS_LATITUDE) is True
        assert is_recognized(0xBEEF) is False
        assert is_recognized(None) is False

    def test_canonical_type_for(self):
        """Test registered types for a sample of tags."""
        assert canonical_type_for(ExifTag.ORIENTATION) == ExifType.SHORT
        assert canonical_type_for(ExifTag.MAKE) == ExifType.ASCII
        assert canonical_type_for(ExifTag.EXPOSURE_TIME) == ExifType.RATIONAL
        assert canonical_type_for(ExifTag.EXPOSURE_BIAS_VALUE) == ExifType.SRATIONAL
        assert canonical_type_for(0xBEEF) == ExifType.UNKNOWN

    def test_to_tag(self):
        """Test identifiers become ExifTag members only when recognized."""
        assert to_tag(0x0112) is ExifTag.ORIENTATION
        assert to_tag(0xBEEF) == 0xBEEF
        assert not isinstance(to_tag(0xBEEF), ExifTag)

    def test_gps_tags(self):
        """Test GPS set excludes the IFD pointer."""
        assert ExifTag.GPS_LATITUDE in GPS_TAGS
        assert ExifTag.GPS_IFD_POINTER not in GPS_TAGS
        assert ExifTag.MAKE not in GPS_TAGS


class TestNames:
    """Test cases for tag naming and parsing."""

    def test_tag_name(self):
        """Test ExifTool-style names."""
        assert tag_name(ExifTag.ORIENTATION) == 'Orientation'
        assert tag_name(ExifTag.DATE_TIME_ORIGINAL) == 'DateTimeOriginal'
        assert tag_name(ExifTag.F_NUMBER) == 'FNumber'
        assert tag_name(ExifTag.GPS_LATITUDE_REF) == 'GPSLatitudeRef'
        assert tag_name(ExifTag.X_RESOLUTION) == 'XResolution'
        assert tag_name(ExifTag.ISO_SPEED_RATINGS) == 'ISO'
        assert tag_name(ExifTag.CFA_PATTERN) == 'CFAPattern'

    def test_tag_name_unknown(self):
        """Test unknown tags render as hex."""
        assert tag_name(0xBEEF) == '0xBEEF'

    @pytest.mark.parametrize('value,expected', [
        (274, 0x0112),
        ('274', 0x0112),
        ('0x0112', 0x0112),
        ('Orientation', 0x0112),
        ('ORIENTATION', 0x0112),
        ('date_time_original', 0x9003),
        ('GPSLatitude', 0x0002),
        ('ISO', 0x8827),
        (ExifTag.MAKE, 0x010F),
    ])
    def test_parse_tag(self, value, expected):
        """Test resolving tags from ints, numeric strings and names."""
        assert parse_tag(value) == expected

    def test_parse_tag_unknown_name(self):
        """Test unknown names raise UnknownTagError."""
        with pytest.raises(UnknownTagError):
            parse_tag('NotARealTag')

    def test_unknown_tag_error_is_key_error(self):
        """Test UnknownTagError can be caught as KeyError."""
        with pytest.raises(KeyError):
            parse_tag('NotARealTag')
