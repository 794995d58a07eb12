#!/usr/bin/env python3
"""
Script to convert a saved Don't Starve wiki page into CSV and JSON data files.

Supported tables:
- crockpot: crock pot recipes (stats, requirements, filler restrictions)
- vegetable: vegetables and their cooked/dried forms
- meat: meats, merged across every place they can be obtained
"""

import argparse
import logging
from pathlib import Path

from food_tables import Category, FoodTableException, convert_csv_to_json, convert_html_to_json

logger = logging.getLogger(__name__)


def main(argv=None):
    """Main entry point for the script."""
    parser = argparse.ArgumentParser(
        description="Convert a Don't Starve wiki food table into CSV and JSON",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Convert the crock pot recipe page, writing crockpot.csv and crockpot.json
  python convert_food_tables.py crockpot crockpot.html

  # Choose the output paths
  python convert_food_tables.py meat meats.html --csv out/meats.csv --json out/meats.json

  # Rebuild the JSON from a CSV that was edited by hand
  python convert_food_tables.py vegetable vegetables.csv --from-csv
        """,
    )

    parser.add_argument(
        "category",
        type=str,
        choices=[category.value for category in Category],
        help="Table category",
    )

    parser.add_argument("input", type=str, help="Saved HTML page (or CSV file with --from-csv)")

    parser.add_argument("--csv", type=str, default=None, help="CSV output path (default: input path with .csv suffix)")

    parser.add_argument("--json", type=str, default=None, help="JSON output path (default: input path with .json suffix)")

    parser.add_argument(
        "--from-csv",
        action="store_true",
        help="Treat the input as a CSV written by a previous run and only produce the JSON",
    )

    parser.add_argument(
        "--verbose",
        action=argparse.BooleanOptionalAction,
        default=False,
        help="Log skipped rows and dropped duplicate values (default: False)",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if args.verbose:
        for name in ("food_tables.pipeline", "food_tables.grouping"):
            logging.getLogger(name).setLevel(logging.DEBUG)

    input_path = Path(args.input)
    if not input_path.exists():
        print(f"Error: Input file not found at {input_path}")
        return 1

    json_path = Path(args.json) if args.json else input_path.with_suffix(".json")

    try:
        if args.from_csv:
            count = convert_csv_to_json(input_path, json_path, args.category)
        else:
            csv_path = Path(args.csv) if args.csv else input_path.with_suffix(".csv")
            count = convert_html_to_json(input_path, json_path, args.category, csv_path=csv_path)
    except FoodTableException as e:
        logger.error(f"Conversion of {input_path} failed: {e}")
        print(f"Error: {e}")
        return 1

    print(f"Converted {count} {args.category} records to {json_path}")
    return 0


if __name__ == "__main__":
    exit(main())
