"""Command-line entry point for the screen collator"""

import sys
import argparse
from .collator import ScreenCollator
from .errors import ScreenCollatorError


def main():
    parser = argparse.ArgumentParser(
        description='Collate course XML screens into a CSV and folder ZIP'
    )
    parser.add_argument('xml_path', help='Path to Course.xml')
    parser.add_argument('output_dir', help='Output directory for CSV and ZIP')
    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Print verbose output'
    )

    args = parser.parse_args()

    collator = ScreenCollator(verbose=args.verbose)
    try:
        report = collator.run(args.xml_path, args.output_dir)
    except (ScreenCollatorError, FileNotFoundError) as e:
        print(f"❌ {e}")
        return 1

    if args.verbose:
        print("\nCollation Report:")
        print(f"  Catalog ID: {report['catalog_id']}")
        print(f"  Screens: {report['screens']}")
        print(f"  Pages: {report['statistics']['pages']}")
        print(f"  Adaptive lessons: {report['statistics']['adaptive_lessons']}")
        if report['skipped']:
            print(f"  Skipped items: {report['skipped']}")

    for message in report['errors'].values():
        print(f"❌ {message}")

    return 1 if report['errors'] else 0


if __name__ == '__main__':
    sys.exit(main())
