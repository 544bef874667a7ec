"""Pytest configuration and shared fixtures."""

import pytest
import tempfile
from pathlib import Path

from PIL import Image

from src.exif.property import ExifProperty, PropertyItem
from src.exif.tags import ExifTag, ExifType


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sample_config():
    """Provide a sample configuration for testing."""
    return {
        'exif': {
            'allowed_tags': ['Make', 'Model', 'Orientation', '0x0132']
        },
        'exiftool': {
            'path': ''
        },
        'logging': {
            'level': 'INFO',
            'file': '',
            'console_output': False
        }
    }


@pytest.fixture
def sample_properties():
    """Provide properties in non-sorted order."""
    return [
        ExifProperty(ExifTag.MODEL, 'EOS R5', ExifType.ASCII),
        ExifProperty(ExifTag.MAKE, 'Canon', ExifType.ASCII),
        ExifProperty(ExifTag.ORIENTATION, 6, ExifType.SHORT),
    ]


@pytest.fixture
def sample_property_items():
    """Provide raw decoder items: recognized, valueless and unknown tags."""
    return [
        PropertyItem(0x0112, 1, 3),                      # Orientation
        PropertyItem(0x010F, 'Nikon', 2),                # Make
        PropertyItem(0x0110, None, 2),                   # Model, no value
        PropertyItem(0xC4A5, b'\x01\x02\x03', 7),        # PrintIM, not registered
        PropertyItem(0x9003, '2024:05:01 10:00:00', 2),  # DateTimeOriginal
    ]


@pytest.fixture
def exif_jpeg(tmp_path):
    """Write a small JPEG with IFD0 EXIF entries."""
    exif = Image.Exif()
    exif[0x010F] = 'Canon'
    exif[0x0110] = 'EOS R5'
    exif[0x0112] = 6
    exif[0x0132] = '2024:01:02 03:04:05'

    path = tmp_path / 'photo.jpg'
    Image.new('RGB', (16, 16), color=(200, 100, 50)).save(path, exif=exif)
    return path
