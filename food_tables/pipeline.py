"""
Convert wiki food tables into CSV and JSON.

The conversion runs in two steps, mirroring how the data is usually
refreshed by hand:

1. ``convert_html_to_csv`` pulls every table row out of a saved wiki
   page and writes one flat CSV row per record.
2. ``convert_csv_to_json`` reads the CSV back, applies the category's
   field coercions, sorts by name and writes ``{"data": [...]}``.

``convert_html_to_json`` runs both steps in memory.
"""

import csv
import io
import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Union

from bs4 import BeautifulSoup, Tag

from .categories import CategoryConfig, get_category
from .cells import extract_row, is_blank_row
from .errors import FoodTableException
from .grouping import group_merge
from .normalize import normalize_record

logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)

INPUT_ENCODING = "utf-8"
HTML_PARSER = "lxml"
ROW_SELECTOR = "table > tbody > tr"

# The published data files have always been Latin-1. JSON output escapes
# everything outside ASCII, so only the CSV can fail to encode.
OUTPUT_ENCODING = "iso-8859-1"

PathLike = Union[str, Path]
Record = Dict[str, Any]


def load_document(input_path: PathLike) -> BeautifulSoup:
    with open(input_path, "r", encoding=INPUT_ENCODING) as f:
        html_content = f.read()
    return BeautifulSoup(html_content, HTML_PARSER)


def iter_table_rows(soup: BeautifulSoup) -> Iterator[Tag]:
    """Yield every table body row in document order."""
    yield from soup.select(ROW_SELECTOR)


def extract_records(soup: BeautifulSoup, config: CategoryConfig) -> List[Record]:
    """
    Extract one flat record per table row, in document order.

    Blank rows are dropped. Categories with a grouping step are merged
    before the records are laid out in header order.
    """
    rows = []
    blank = 0
    for row in iter_table_rows(soup):
        if is_blank_row(row, config.columns):
            blank += 1
            continue
        record = extract_row(row, config.columns)
        for target, source in config.mirrored.items():
            record[target] = record.get(source, "")
        rows.append(record)

    if blank:
        logger.debug(f"Skipped {blank} blank rows")

    if config.group is not None:
        rows = group_merge(rows, config.group)

    records = [{name: row.get(name, "") for name in config.header} for row in rows]

    if config.known_names:
        for record in records:
            if record["name"] not in config.known_names:
                logger.warning(f"'{record['name']}' is not a known {config.category.value}")

    logger.info(f"Extracted {len(records)} {config.category.value} records")
    return records


def normalize_records(records: List[Record], config: CategoryConfig) -> List[Record]:
    """Apply the category's field coercions and sort by name."""
    normalized = [normalize_record(record, config.rules) for record in records]
    return sorted(normalized, key=lambda r: r["name"])


def _csv_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, list):
        return ", ".join(value)
    if value is None:
        return ""
    return str(value)


def write_csv(records: List[Record], output_path: PathLike, config: CategoryConfig) -> None:
    """
    Write records as a fully quoted CSV.

    Raises:
        FoodTableException: if a value cannot be written in the output encoding.
            The file is not created in that case.
    """
    buffer = io.StringIO()
    writer = csv.writer(buffer, quoting=csv.QUOTE_ALL)
    writer.writerow(config.header)
    for record in records:
        writer.writerow([_csv_value(record.get(name)) for name in config.header])

    try:
        content = buffer.getvalue().encode(OUTPUT_ENCODING)
    except UnicodeEncodeError as e:
        bad = e.object[e.start:e.end]
        raise FoodTableException(f"Cannot write {bad!r} as {OUTPUT_ENCODING} in {output_path}")

    with open(output_path, "wb") as f:
        f.write(content)


def read_csv(input_path: PathLike) -> List[Dict[str, str]]:
    with open(input_path, "r", encoding=OUTPUT_ENCODING, newline="") as f:
        return [dict(row) for row in csv.DictReader(f)]


def write_json(records: List[Record], output_path: PathLike) -> None:
    with open(output_path, "w", encoding=OUTPUT_ENCODING) as f:
        json.dump({"data": records}, f, indent=2, ensure_ascii=True)


def convert_html_to_csv(input_path: PathLike, output_path: PathLike, category) -> int:
    """
    Extract a category table from an HTML page into a CSV file.

    Returns:
        Number of records written
    """
    config = get_category(category)
    records = extract_records(load_document(input_path), config)
    write_csv(records, output_path, config)
    logger.info(f"Wrote {len(records)} records to {output_path}")
    return len(records)


def convert_csv_to_json(input_path: PathLike, output_path: PathLike, category) -> int:
    """
    Normalize a CSV produced by ``convert_html_to_csv`` into a JSON file.

    Raises:
        FoodTableParseException: if a requirements cell has a segment without a quantity.
            Nothing is written in that case.
    """
    config = get_category(category)
    records = normalize_records(read_csv(input_path), config)
    write_json(records, output_path)
    logger.info(f"Wrote {len(records)} records to {output_path}")
    return len(records)


def convert_html_to_json(
    input_path: PathLike,
    output_path: PathLike,
    category,
    csv_path: Optional[PathLike] = None,
) -> int:
    """
    Extract, normalize and write a category table in one pass.

    When ``csv_path`` is given the extracted (not yet normalized) records
    are also written there. Both files are only written once every record
    has been normalized successfully.
    """
    config = get_category(category)
    extracted = extract_records(load_document(input_path), config)
    records = normalize_records(extracted, config)

    if csv_path is not None:
        write_csv(extracted, csv_path, config)
        logger.info(f"Wrote {len(extracted)} records to {csv_path}")
    write_json(records, output_path)
    logger.info(f"Wrote {len(records)} records to {output_path}")
    return len(records)
