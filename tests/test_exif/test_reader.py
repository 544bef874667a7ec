"""Unit tests for the Pillow-based EXIF reader."""

import pytest
from src.exif.exceptions import ExifError
from src.exif.reader import _items_from_ifd, _type_code, read_collection, read_property_items
from src.exif.tags import ExifTag, ExifType


class TestReadPropertyItems:
    """Test cases for reading raw entries from files."""

    def test_reads_ifd0_entries(self, exif_jpeg):
        """Test IFD0 entries come back with values and type codes."""
        items = {item.id: item for item in read_property_items(exif_jpeg)}

        assert items[0x010F].value == 'Canon'
        assert items[0x010F].type == ExifType.ASCII
        assert items[0x0112].value == 6
        assert items[0x0112].type == ExifType.SHORT

    def test_image_without_exif(self, tmp_path):
        """Test an image without EXIF yields no entries."""
        from PIL import Image

        path = tmp_path / 'plain.png'
        Image.new('RGB', (4, 4)).save(path)

        assert read_property_items(path) == []

    def test_not_an_image(self, tmp_path):
        """Test unreadable files raise ExifError."""
        path = tmp_path / 'fake.jpg'
        path.write_bytes(b'not an image')

        with pytest.raises(ExifError):
            read_property_items(path)

    def test_missing_file(self, tmp_path):
        """Test missing files raise ExifError."""
        with pytest.raises(ExifError):
            read_property_items(tmp_path / 'missing.jpg')


class TestHelpers:
    """Test cases for IFD walking helpers."""

    def test_pointer_tags_skipped(self):
        """Test sub-IFD pointers are not emitted as entries."""
        entries = [(0x010F, 'Canon'), (0x8769, 1234), (0x8825, 5678)]

        items = _items_from_ifd(entries, gps=False)

        assert [item.id for item in items] == [0x010F]

    def test_gps_type_codes_from_registry(self):
        """Test GPS ids use the registry since they overlap Pillow's IFD0 table."""
        assert _type_code(ExifTag.GPS_LATITUDE_REF, gps=True) == ExifType.ASCII
        assert _type_code(ExifTag.GPS_LATITUDE, gps=True) == ExifType.RATIONAL

    def test_unknown_tag_type_code(self):
        """Test tags unknown to Pillow and the registry get type 0."""
        assert _type_code(0xBEEF, gps=False) == ExifType.UNKNOWN


class TestReadCollection:
    """Test cases for reading into a collection."""

    def test_read_all(self, exif_jpeg):
        """Test every entry is ingested in tag order."""
        collection = read_collection(exif_jpeg)

        assert collection.tags()[:4] == [0x010F, 0x0110, 0x0112, 0x0132]
        assert collection.try_get(ExifTag.MODEL).value == 'EOS R5'

    def test_read_filtered(self, exif_jpeg):
        """Test the allow-set limits ingested tags."""
        collection = read_collection(exif_jpeg, {ExifTag.MAKE, ExifTag.ORIENTATION})

        assert collection.tags() == [ExifTag.MAKE, ExifTag.ORIENTATION]
