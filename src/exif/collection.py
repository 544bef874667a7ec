"""Ordered collection of EXIF properties keyed by tag identifier."""

from typing import Any, Dict, Iterable, Iterator, List, Optional, Union
import logging

from .exceptions import UnsupportedOperation
from .property import ExifProperty, PropertyItem
from .tags import ExifTag, canonical_type_for, is_recognized

logger = logging.getLogger(__name__)


class ExifPropertyCollection:
    """Collection of ExifProperty items, one per tag, ordered by tag id.

    Iteration always follows ascending numeric tag order regardless of the
    order in which properties were added.

    Adding a property whose value is None removes the tag instead of storing
    it. ``set_raw`` and ``get_or_insert_default`` are the only paths that can
    leave a valueless property in the collection.

    Not thread-safe: concurrent mutation needs external locking.
    """

    def __init__(self, properties: Optional[Iterable[ExifProperty]] = None):
        """Create a collection, optionally from existing properties.

        Also works as a copy constructor when given another collection.
        Properties go through ``add``, so a copy leaves out any valueless
        property stored by ``get_or_insert_default`` or ``set_raw``.

        Args:
            properties: Trusted properties to add (None for an empty collection)
        """
        self._items: Dict[int, ExifProperty] = {}

        if properties is None:
            return

        for prop in properties:
            self.add(prop)

    @classmethod
    def from_property_items(
        cls,
        items: Optional[Iterable[PropertyItem]],
        allowed_tags: Optional[Iterable[Union[int, ExifTag]]] = None
    ) -> 'ExifPropertyCollection':
        """Create a collection from raw decoder items.

        Items without a value are skipped. When ``allowed_tags`` is given,
        items whose id is not a recognized ExifTag or not in the allow-set
        are skipped before they are converted.

        Args:
            items: Raw interchange items (None for an empty collection)
            allowed_tags: Optional allow-set of tag identifiers

        Returns:
            New ExifPropertyCollection
        """
        collection = cls()
        if items is None:
            return collection

        allowed = None
        if allowed_tags is not None:
            allowed = {int(tag) for tag in allowed_tags}

        skipped = 0
        for item in items:
            if allowed is not None and (not is_recognized(item.id) or item.id not in allowed):
                skipped += 1
                continue

            if item.value is None:
                skipped += 1
                continue

            collection.add(ExifProperty.from_property_item(item))

        logger.debug(f"Ingested {len(collection)} EXIF properties ({skipped} skipped)")

        return collection

    # -- keyed access --------------------------------------------------

    def get_or_insert_default(self, tag: Union[int, ExifTag]) -> ExifProperty:
        """Get the property for a tag, creating an empty one if missing.

        This mutates the collection: a missing tag is materialized with no
        value and the tag's registered type, stored, and returned. Later
        calls return the same instance. Use ``try_get`` for a plain lookup.

        Args:
            tag: Tag identifier

        Returns:
            Stored ExifProperty for the tag
        """
        key = int(tag)
        if key not in self._items:
            self._items[key] = ExifProperty(key, None, canonical_type_for(key))
        return self._items[key]

    def try_get(self, tag: Union[int, ExifTag], default: Any = None) -> Optional[ExifProperty]:
        """Get the property for a tag without creating it."""
        return self._items.get(int(tag), default)

    def set_raw(self, tag: Union[int, ExifTag], prop: ExifProperty) -> None:
        """Store a property under a tag, bypassing the None-removes rule.

        Unlike ``add``, a property with a None value is stored as-is.

        Args:
            tag: Tag identifier
            prop: Property to store

        Raises:
            ValueError: If the property belongs to a different tag
        """
        key = int(tag)
        if prop.id != key:
            raise ValueError(f"Property tag 0x{prop.id:04X} does not match key 0x{key:04X}")
        self._items[key] = prop

    # -- positional access ---------------------------------------------

    def property_at(self, index: int) -> ExifProperty:
        """Get the property at a position in tag order.

        Warning: inefficient (sorts the keys on every call). Intended only
        for index-based serializers, not for iteration.

        Args:
            index: Zero-based position

        Returns:
            ExifProperty at that position

        Raises:
            IndexError: If index is out of range
        """
        keys = sorted(self._items)
        return self._items[keys[index]]

    def set_property_at(self, index: int, prop: ExifProperty) -> None:
        """Positional assignment is not supported."""
        raise UnsupportedOperation("This operation is not supported.")

    # -- mutation ------------------------------------------------------

    def add(self, prop: Optional[ExifProperty]) -> None:
        """Add or replace a property.

        A property with a None value removes its tag from the collection.

        Args:
            prop: Property to add (None is ignored)
        """
        if prop is None:
            return

        if prop.value is None:
            if self.contains_tag(prop.id):
                self.remove_tag(prop.id)
            return

        self._items[prop.id] = prop

    def remove(self, item: Union[int, ExifTag, ExifProperty]) -> bool:
        """Remove by tag identifier or by property.

        Returns:
            True if a property was removed
        """
        if isinstance(item, ExifProperty):
            return self.remove_property(item)
        return self.remove_tag(item)

    def remove_tag(self, tag: Union[int, ExifTag]) -> bool:
        """Remove the property stored under a tag.

        Args:
            tag: Tag identifier

        Returns:
            True if a property was removed, False if the tag was absent
        """
        key = int(tag)
        if key not in self._items:
            return False

        del self._items[key]
        return True

    def remove_property(self, prop: ExifProperty) -> bool:
        """Remove whatever property is stored under ``prop``'s tag."""
        return self.remove_tag(prop.id)

    def clear(self) -> None:
        self._items.clear()

    # -- queries -------------------------------------------------------

    def contains_tag(self, tag: Union[int, ExifTag]) -> bool:
        return int(tag) in self._items

    def contains_property(self, prop: ExifProperty) -> bool:
        """Check whether an equal property is stored.

        Compares values, not identity, and scans every stored property.
        """
        return any(stored == prop for stored in self._items.values())

    def __contains__(self, item) -> bool:
        if isinstance(item, ExifProperty):
            return self.contains_property(item)
        try:
            return self.contains_tag(item)
        except (TypeError, ValueError):
            return False

    def __len__(self) -> int:
        return len(self._items)

    @property
    def count(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[ExifProperty]:
        for key in sorted(self._items):
            # Tolerate removals made while iterating
            prop = self._items.get(key)
            if prop is not None:
                yield prop

    def tags(self) -> List[int]:
        """Stored tag identifiers in ascending order."""
        return sorted(self._items)

    def copy(self) -> 'ExifPropertyCollection':
        """Shallow copy with its own mapping.

        Valueless properties are not copied, same as the copy constructor.
        """
        return ExifPropertyCollection(self)

    def copy_to(self, array: List[Any], index: int = 0) -> None:
        """Copy properties into a list, in tag order, starting at ``index``.

        Args:
            array: Destination list, already sized
            index: Start position in the destination

        Raises:
            ValueError: If index is negative or the destination is too small
        """
        if index < 0:
            raise ValueError(f"index must be non-negative, got {index}")
        if len(array) - index < len(self._items):
            raise ValueError(
                f"Destination too small: need {len(self._items)} slots from index {index}, "
                f"have {max(len(array) - index, 0)}"
            )

        for offset, prop in enumerate(self):
            array[index + offset] = prop

    def to_dict(self) -> Dict[int, Any]:
        """Untyped ``{tag_id: value}`` view for reflective consumers."""
        return {key: self._items[key].value for key in sorted(self._items)}

    @property
    def is_synchronized(self) -> bool:
        return False

    @property
    def is_read_only(self) -> bool:
        return False

    def __repr__(self):
        return f"ExifPropertyCollection({len(self._items)} properties)"
