"""ExifTool wrapper for writing EXIF property collections back to images."""

import exiftool
from exiftool.exceptions import ExifToolException
from fractions import Fraction
from pathlib import Path
from typing import Any, Dict, Iterable, Optional
import logging

from PIL.TiffImagePlugin import IFDRational

from .collection import ExifPropertyCollection
from .tags import GPS_TAGS, IFD_POINTER_TAGS, is_recognized, tag_name

logger = logging.getLogger(__name__)


class ExifToolWriter:
    """Wrapper for ExifTool with stay_open mode for batch writes."""

    def __init__(self, exiftool_path: Optional[str] = None):
        """Initialize ExifTool writer.

        Args:
            exiftool_path: Path to exiftool executable. If None, searches PATH.
        """
        self.exiftool_path = exiftool_path
        self.et = None
        self._verify_exiftool()

    def _verify_exiftool(self):
        """Verify ExifTool is available and compatible version."""
        try:
            with exiftool.ExifTool(executable=self.exiftool_path) as et:
                version = et.execute('-ver').strip()
                logger.info(f"ExifTool version: {version}")

                try:
                    version_num = float(version.split('.')[0])
                    if version_num < 11:
                        logger.warning(f"ExifTool {version} may be outdated. Recommend 11.0+")
                except ValueError:
                    logger.warning(f"Could not parse ExifTool version: {version}")

        except FileNotFoundError:
            raise RuntimeError(
                "ExifTool not found. Please install ExifTool and ensure it's in PATH, "
                "or specify the path in configuration."
            )
        except Exception as e:
            raise RuntimeError(f"ExifTool verification failed: {e}")

    def __enter__(self):
        """Start ExifTool in stay_open mode."""
        self.start()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Stop ExifTool process."""
        self.stop()

    def start(self):
        """Start ExifTool process (if not using context manager)."""
        if not self.et:
            self.et = exiftool.ExifToolHelper(executable=self.exiftool_path)
            self.et.run()
            logger.info("ExifTool started")

    def stop(self):
        """Stop ExifTool process (if not using context manager)."""
        if self.et:
            self.et.terminate()
            self.et = None
            logger.info("ExifTool stopped")

    @staticmethod
    def build_tag_arguments(
        collection: ExifPropertyCollection,
        removed_tags: Optional[Iterable[int]] = None
    ) -> Dict[str, Any]:
        """Map a collection to ExifTool tag assignments.

        Properties without a value, with binary values, with unknown tags
        or for sub-IFD pointers are skipped. Each removed tag that the
        collection does not hold gets an empty assignment, which makes
        ExifTool delete it.

        Args:
            collection: Properties to write
            removed_tags: Tag identifiers to delete from the image

        Returns:
            Dict of 'GROUP:Name' -> value, writes in tag order, then deletions
        """
        tags = {}
        for prop in collection:
            if prop.value is None:
                continue

            if not is_recognized(prop.id) or prop.tag in IFD_POINTER_TAGS:
                logger.debug(f"Skipping non-writable tag {prop.name}")
                continue

            if isinstance(prop.value, (bytes, bytearray)):
                logger.debug(f"Skipping binary value for {prop.name}")
                continue

            tags[ExifToolWriter._qualified_name(prop.tag)] = ExifToolWriter._format_value(prop.value)

        for tag in sorted(int(t) for t in (removed_tags or ())):
            if collection.contains_tag(tag) or not is_recognized(tag) or tag in IFD_POINTER_TAGS:
                continue
            tags[ExifToolWriter._qualified_name(tag)] = ''

        return tags

    @staticmethod
    def _qualified_name(tag: int) -> str:
        group = 'GPS' if tag in GPS_TAGS else 'EXIF'
        return f"{group}:{tag_name(tag)}"

    @staticmethod
    def _format_value(value: Any) -> Any:
        """Render a value the way ExifTool expects it in numeric (-n) mode.

        Args:
            value: Property value

        Returns:
            str, int or float accepted by ExifTool
        """
        if isinstance(value, (IFDRational, Fraction)):
            if not value.denominator:
                return 0
            return float(value.numerator) / float(value.denominator)

        if isinstance(value, (tuple, list)):
            return ' '.join(str(ExifToolWriter._format_value(v)) for v in value)

        if isinstance(value, str):
            # Remove control characters except tabs
            return ''.join(char for char in value if ord(char) >= 32 or char == '\t').strip()

        return value

    def write_collection(
        self,
        image_path: Path,
        collection: ExifPropertyCollection,
        removed_tags: Optional[Iterable[int]] = None
    ) -> bool:
        """Write a collection into an image file in place.

        Args:
            image_path: Path to image file
            collection: Properties to write
            removed_tags: Tag identifiers to delete from the image

        Returns:
            True if successful, False otherwise
        """
        if not self.et:
            logger.error("ExifTool not started. Use context manager or call start()")
            return False

        tags = self.build_tag_arguments(collection, removed_tags)
        if not tags:
            logger.info(f"No writable EXIF properties for {Path(image_path).name}")
            return True

        try:
            self.et.set_tags(
                str(image_path),
                tags,
                params=['-overwrite_original', '-n']
            )
            logger.debug(f"Wrote {len(tags)} EXIF tags to {Path(image_path).name}")
            return True

        except ExifToolException as e:
            logger.error(f"Failed to write EXIF for {Path(image_path).name}: {e}", exc_info=True)
            return False
