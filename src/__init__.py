"""EXIF metadata tools."""
