"""Read raw EXIF entries from image files using Pillow."""

from pathlib import Path
from typing import Iterable, List, Optional, Union
import logging

from PIL import Image, TiffTags, UnidentifiedImageError

from .collection import ExifPropertyCollection
from .exceptions import ExifError
from .property import PropertyItem
from .tags import IFD_POINTER_TAGS, ExifTag, canonical_type_for

logger = logging.getLogger(__name__)

# Sub-IFDs walked in addition to IFD0
SUB_IFDS = (ExifTag.EXIF_IFD_POINTER, ExifTag.GPS_IFD_POINTER)


def read_property_items(image_path: Path) -> List[PropertyItem]:
    """Extract raw EXIF entries from an image.

    Walks IFD0 plus the Exif and GPS sub-IFDs. Sub-IFD pointer tags are
    not returned as entries.

    Args:
        image_path: Path to image file

    Returns:
        List of PropertyItem in file order

    Raises:
        ExifError: If the image cannot be opened
    """
    image_path = Path(image_path)

    try:
        with Image.open(image_path) as img:
            exif = img.getexif()
            items = _items_from_ifd(exif.items(), gps=False)

            for pointer in SUB_IFDS:
                ifd = exif.get_ifd(pointer)
                if ifd:
                    items.extend(_items_from_ifd(ifd.items(), gps=pointer == ExifTag.GPS_IFD_POINTER))

    except (OSError, UnidentifiedImageError) as e:
        raise ExifError(f"Cannot read EXIF from {image_path}: {e}") from e

    logger.debug(f"Read {len(items)} EXIF entries from {image_path.name}")

    return items


def _items_from_ifd(entries: Iterable, gps: bool) -> List[PropertyItem]:
    items = []
    for tag_id, value in entries:
        if tag_id in IFD_POINTER_TAGS:
            continue
        items.append(PropertyItem(tag_id, value, _type_code(tag_id, gps)))
    return items


def _type_code(tag_id: int, gps: bool) -> int:
    """Look up the TIFF type code Pillow knows for a tag, else the registry's."""
    if gps:
        # Pillow's table is keyed by IFD0 ids; low GPS ids would collide
        return int(canonical_type_for(tag_id))

    info = TiffTags.lookup(tag_id)
    if info.type:
        return int(info.type)
    return int(canonical_type_for(tag_id))


def read_collection(
    image_path: Path,
    allowed_tags: Optional[Iterable[Union[int, ExifTag]]] = None
) -> ExifPropertyCollection:
    """Read an image's EXIF block into a collection.

    Args:
        image_path: Path to image file
        allowed_tags: Optional allow-set of tag identifiers

    Returns:
        ExifPropertyCollection of the image's properties
    """
    items = read_property_items(image_path)
    return ExifPropertyCollection.from_property_items(items, allowed_tags)
