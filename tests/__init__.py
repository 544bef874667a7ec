"""Test suite for the EXIF property tool."""
