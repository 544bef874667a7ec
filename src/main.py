"""Main entry point for the EXIF property tool."""

import argparse
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.utils.config_loader import load_config, resolve_allowed_tags
from src.utils.logger import get_logger, setup_logger

logger = None


def main(argv=None):
    """Main entry point."""
    global logger

    parser = argparse.ArgumentParser(
        description="Read, filter, edit and write EXIF properties"
    )
    parser.add_argument(
        '--config',
        default='config/config.yaml',
        help='Path to configuration file'
    )
    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Enable debug logging'
    )

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # Dump command
    dump_parser = subparsers.add_parser(
        'dump',
        help='Print EXIF properties of images in tag order'
    )
    dump_parser.add_argument('images', nargs='+', help='Image files')
    dump_parser.add_argument(
        '--all',
        action='store_true',
        help='Ignore the configured allow-list and show every tag'
    )

    # Export command
    export_parser = subparsers.add_parser(
        'export',
        help='Export EXIF properties of an image to JSON'
    )
    export_parser.add_argument('image', help='Image file')
    export_parser.add_argument('output', help='Output JSON file path')
    export_parser.add_argument(
        '--all',
        action='store_true',
        help='Ignore the configured allow-list and export every tag'
    )

    # Edit command
    edit_parser = subparsers.add_parser(
        'edit',
        help='Set or remove properties in an exported JSON file'
    )
    edit_parser.add_argument('records', help='JSON file written by export')
    edit_parser.add_argument(
        '--set',
        action='append',
        default=[],
        metavar='TAG=VALUE',
        help='Set a tag value (repeatable)'
    )
    edit_parser.add_argument(
        '--remove',
        action='append',
        default=[],
        metavar='TAG',
        help='Remove a tag (repeatable)'
    )

    # Apply command
    apply_parser = subparsers.add_parser(
        'apply',
        help='Write properties from a JSON file into an image'
    )
    apply_parser.add_argument('records', help='JSON file written by export')
    apply_parser.add_argument('image', help='Image file to update in place')
    apply_parser.add_argument(
        '--all',
        action='store_true',
        help='Delete any tag missing from the JSON file, not only allowed ones'
    )

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    try:
        config = load_config(args.config)
        setup_logger(config, 'DEBUG' if args.verbose else None)
        logger = get_logger(__name__)

        if args.command == 'dump':
            return cmd_dump(config, args)
        elif args.command == 'export':
            return cmd_export(config, args)
        elif args.command == 'edit':
            return cmd_edit(config, args)
        elif args.command == 'apply':
            return cmd_apply(config, args)

    except KeyboardInterrupt:
        if logger:
            logger.info("Operation cancelled by user")
        print("\nOperation cancelled.")
        return 130
    except Exception as e:
        if logger:
            logger.error(f"Fatal error: {e}", exc_info=True)
        print(f"Error: {e}")
        return 1

    return 0


def cmd_dump(config, args):
    """Print properties of each image."""
    from src.exif.reader import read_collection

    allowed = None if args.all else resolve_allowed_tags(config)

    for image in args.images:
        collection = read_collection(Path(image), allowed)

        print(f"{image}: {len(collection)} properties")
        for prop in collection:
            print(f"  0x{prop.id:04X} {prop.name:<28} {prop.type.name:<10} {_format_for_display(prop.value)}")

    return 0


def _format_for_display(value, limit=60):
    if isinstance(value, (bytes, bytearray)):
        return f"<{len(value)} bytes>"
    text = str(value)
    if len(text) > limit:
        return text[:limit - 3] + '...'
    return text


def cmd_export(config, args):
    """Export an image's properties to JSON."""
    from src.exif.reader import read_collection
    from src.exif.serializer import dump_json

    allowed = None if args.all else resolve_allowed_tags(config)
    collection = read_collection(Path(args.image), allowed)

    dump_json(collection, Path(args.output))
    print(f"Exported {len(collection)} properties to {args.output}")

    return 0


def cmd_edit(config, args):
    """Apply --set / --remove edits to a JSON record file."""
    from src.exif.property import ExifProperty
    from src.exif.serializer import dump_json, load_json
    from src.exif.tags import parse_tag

    path = Path(args.records)
    collection = load_json(path)

    for assignment in args.set:
        if '=' not in assignment:
            print(f"Error: expected TAG=VALUE, got {assignment}")
            return 1
        name, raw_value = assignment.split('=', 1)
        prop = collection.get_or_insert_default(parse_tag(name))
        prop.value = parse_value(prop.type, raw_value)
        logger.info(f"Set {prop.name} = {prop.value!r}")

    for name in args.remove:
        # A property without a value removes the tag
        collection.add(ExifProperty(parse_tag(name), None))
        logger.info(f"Removed {name}")

    dump_json(collection, path)
    print(f"Saved {len(collection)} properties to {path}")

    return 0


def parse_value(exif_type, text):
    """Convert command-line text to a value of the given EXIF type."""
    from fractions import Fraction
    from src.exif.tags import ExifType

    if exif_type in (ExifType.BYTE, ExifType.SHORT, ExifType.LONG,
                     ExifType.SBYTE, ExifType.SSHORT, ExifType.SLONG):
        return int(text, 0)
    if exif_type in (ExifType.RATIONAL, ExifType.SRATIONAL):
        return Fraction(text).limit_denominator(1000000)
    if exif_type in (ExifType.FLOAT, ExifType.DOUBLE):
        return float(text)
    return text


def cmd_apply(config, args):
    """Write a JSON record file into an image.

    Tags the image holds but the record file lacks are deleted, limited to
    the configured allow-list unless --all is given.
    """
    from src.exif.reader import read_collection
    from src.exif.serializer import load_json
    from src.exif.writer import ExifToolWriter

    image = Path(args.image)
    collection = load_json(Path(args.records))
    exiftool_path = (config.get('exiftool') or {}).get('path') or None

    allowed = None if args.all else resolve_allowed_tags(config)
    removed = set(read_collection(image, allowed).tags()) - set(collection.tags())
    if removed:
        logger.info(f"Deleting {len(removed)} tags missing from {args.records}")

    with ExifToolWriter(exiftool_path) as writer:
        ok = writer.write_collection(image, collection, removed)

    if ok:
        print(f"Wrote {len(collection)} properties to {args.image}")
        return 0
    print(f"Failed to write properties to {args.image}")
    return 1


if __name__ == '__main__':
    sys.exit(main())
