"""JSON export and import of EXIF property collections."""

import base64
import binascii
import json
from fractions import Fraction
from pathlib import Path
from typing import Any, Dict, List, Optional
import logging

import jsonschema
from PIL.TiffImagePlugin import IFDRational

from .collection import ExifPropertyCollection
from .exceptions import ExifError
from .property import ExifProperty
from .tags import ExifType

logger = logging.getLogger(__name__)

RECORD_SCHEMA = {
    'type': 'array',
    'items': {
        'type': 'object',
        'required': ['tag', 'type', 'value'],
        'properties': {
            'tag': {'type': 'integer', 'minimum': 0, 'maximum': 0xFFFF},
            'name': {'type': 'string'},
            'type': {'type': 'string', 'enum': [t.name for t in ExifType]},
            'value': {},
            'encoding': {'type': 'string', 'enum': ['base64']},
        },
        # Encoded values are base64 text, or sequences of it
        'if': {'required': ['encoding']},
        'then': {
            'properties': {
                'value': {'type': ['string', 'array', 'null'], 'items': {'type': 'string'}},
            },
        },
    },
}


def collection_to_records(collection: ExifPropertyCollection) -> List[Dict[str, Any]]:
    """Convert a collection to JSON-ready records in tag order.

    Args:
        collection: Collection to export

    Returns:
        List of dicts with 'tag', 'name', 'type', 'value' (and 'encoding'
        for binary values)

    Raises:
        ExifError: If a sequence value mixes bytes with other values
    """
    records = []
    for prop in collection:
        if _is_binary(prop.value) is None:
            raise ExifError(f"Cannot export {prop.name}: sequence mixes bytes with other values")
        record = {
            'tag': prop.id,
            'name': prop.name,
            'type': prop.type.name,
            'value': _encode_value(prop.value),
        }
        if _is_binary(prop.value):
            record['encoding'] = 'base64'
        records.append(record)
    return records


def _is_binary(value: Any) -> Optional[bool]:
    """True for bytes or a sequence of bytes, None for a mixed sequence."""
    if isinstance(value, (bytes, bytearray)):
        return True
    if isinstance(value, (tuple, list)) and value:
        binary = [isinstance(v, (bytes, bytearray)) for v in value]
        if all(binary):
            return True
        if any(binary):
            return None
    return False


def _encode_value(value: Any) -> Any:
    if isinstance(value, (bytes, bytearray)):
        return base64.b64encode(bytes(value)).decode('ascii')
    if isinstance(value, (tuple, list)):
        return [_encode_value(v) for v in value]
    if isinstance(value, (Fraction, IFDRational)):
        return f"{value.numerator}/{value.denominator}"
    return value


def records_to_collection(records: List[Dict[str, Any]]) -> ExifPropertyCollection:
    """Build a collection from exported records.

    Records go through ``ExifPropertyCollection.add``, so an entry with a
    null value is a deletion and is never stored.

    Args:
        records: Records as produced by collection_to_records()

    Returns:
        New ExifPropertyCollection

    Raises:
        ExifError: If the records do not match RECORD_SCHEMA or carry
            invalid base64
    """
    try:
        jsonschema.validate(records, RECORD_SCHEMA)
    except jsonschema.ValidationError as e:
        raise ExifError(f"Invalid EXIF records: {e.message}") from e

    properties = []
    for record in records:
        value = record['value']
        if record.get('encoding') == 'base64' and value is not None:
            value = _decode_base64(record['tag'], value)
        elif isinstance(value, list):
            value = _to_tuple(value)

        exif_type = ExifType[record['type']]
        if exif_type in (ExifType.RATIONAL, ExifType.SRATIONAL):
            value = _decode_rationals(value)

        properties.append(ExifProperty(record['tag'], value, exif_type))

    return ExifPropertyCollection(properties)


def _decode_base64(tag: int, value: Any) -> Any:
    if isinstance(value, list):
        return tuple(_decode_base64(tag, v) for v in value)
    try:
        return base64.b64decode(value, validate=True)
    except (binascii.Error, ValueError) as e:
        raise ExifError(f"Invalid base64 value for tag 0x{tag:04X}: {e}") from e


def _to_tuple(value: list) -> tuple:
    return tuple(_to_tuple(v) if isinstance(v, list) else v for v in value)


def _decode_rationals(value: Any) -> Any:
    """Turn "n/d" strings back into Fractions; other values pass through."""
    if isinstance(value, tuple):
        return tuple(_decode_rationals(v) for v in value)
    if isinstance(value, str) and '/' in value:
        try:
            return Fraction(value)
        except (ValueError, ZeroDivisionError):
            return value
    return value


def dump_json(collection: ExifPropertyCollection, path: Path) -> None:
    """Write a collection to a JSON file.

    Args:
        collection: Collection to write
        path: Output file path
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, 'w', encoding='utf-8') as f:
        json.dump(collection_to_records(collection), f, indent=2)

    logger.info(f"Exported {len(collection)} EXIF properties to {path}")


def load_json(path: Path) -> ExifPropertyCollection:
    """Read a collection from a JSON file written by dump_json().

    Raises:
        ExifError: If the file is not valid JSON or not valid records
    """
    path = Path(path)

    try:
        with open(path, 'r', encoding='utf-8') as f:
            records = json.load(f)
    except json.JSONDecodeError as e:
        raise ExifError(f"JSON parse error in {path}: {e}") from e

    collection = records_to_collection(records)
    logger.debug(f"Loaded {len(collection)} EXIF properties from {path.name}")
    return collection
