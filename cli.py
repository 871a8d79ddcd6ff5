#!/usr/bin/env python3
"""
Catalyst Screen Collator - Command Line Interface
"""

import sys
import argparse
from pathlib import Path

from screen_collator.collator import ScreenCollator
from screen_collator.errors import ScreenCollatorError


def main(argv=None):
    parser = argparse.ArgumentParser(
        description='Collate Catalyst course XML into a screen CSV and folder ZIP',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog='''
Examples:
  # CSV and ZIP
  python cli.py Course.xml output/

  # Spreadsheet only
  python cli.py Course.xml output/ --csv-only

  # Quiet mode
  python cli.py Course.xml output/ --quiet
        '''
    )

    parser.add_argument(
        'xml_file',
        help='Path to the exported Course.xml'
    )

    parser.add_argument(
        'output_dir',
        help='Output directory for the CSV and ZIP files'
    )

    outputs = parser.add_mutually_exclusive_group()
    outputs.add_argument(
        '--csv-only',
        action='store_true',
        help='Only write the screens CSV'
    )
    outputs.add_argument(
        '--zip-only',
        action='store_true',
        help='Only write the folder ZIP'
    )

    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Show detailed error information'
    )

    parser.add_argument(
        '-q', '--quiet',
        action='store_true',
        help='Suppress output messages'
    )

    args = parser.parse_args(argv)

    # Check input file exists
    xml_path = Path(args.xml_file)
    if not xml_path.exists():
        print(f"❌ Error: File not found: {xml_path}")
        return 1

    if xml_path.suffix.lower() != '.xml':
        print("⚠️  Warning: File does not have .xml extension")

    verbose = not args.quiet
    collator = ScreenCollator(verbose=verbose)

    try:
        report = collator.run(
            str(xml_path),
            args.output_dir,
            write_csv=not args.zip_only,
            write_zip=not args.csv_only
        )
    except ScreenCollatorError as e:
        print(f"\n{e.format_message() if args.verbose else '❌ ' + str(e)}")
        return 1

    if not args.quiet:
        print("\n📊 Collation Summary:")
        print(f"   Base Catalog ID: {report['catalog_id']}")
        print(f"   Unique Screens Found: {report['screens']}")
        for kind, path in report['outputs'].items():
            print(f"   {kind.upper()}: {path}")

    for message in report['errors'].values():
        print(f"❌ {message}")

    return 1 if report['errors'] else 0


if __name__ == '__main__':
    sys.exit(main())
