import argparse
import logging
import sys

from .pipeline import convert_to_csv


def main(argv=None):
    parser = argparse.ArgumentParser(description="Convert BIC directory PDF to CSV format")
    parser.add_argument("--source", "-s", default="ISOBIC.pdf", help="Path to the source PDF file (default: ISOBIC.pdf)")
    parser.add_argument("--destination", "-d", default="ISOBIC.csv", help="Path to the destination CSV file (default: ISOBIC.csv)")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log per-page progress")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    print(f"Converting {args.source} to {args.destination}...")
    try:
        count = convert_to_csv(args.source, args.destination)
    except Exception as e:
        print(f"Error: {e}")
        sys.exit(1)
    print(f"Extracted {count} records to {args.destination}")
    return 0


if __name__ == "__main__":
    main()
