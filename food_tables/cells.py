"""
Cell extraction for wiki food tables.

Each category describes its table as a mapping from column index to a
field name and a ``CellRule``. ``extract_row`` walks the ``<td>`` cells
of a row and applies the rule for each index.
"""

from enum import Enum
from typing import Any, Dict, List, Tuple

from bs4 import Comment, NavigableString, Tag

from .normalize import to_float


class CellRule(Enum):
    SKIP = "skip"
    TEXT = "text"
    ANCHOR_TITLES = "anchor_titles"  # Icon links, e.g. DLC or food group badges
    BOOLEAN_FROM_YES = "boolean_from_yes"
    FLOAT = "float"
    FILTERED_JOIN = "filtered_join"  # Mixed links and text, e.g. ingredient lists


ColumnPolicy = Dict[int, Tuple[str, CellRule]]


def clean_text(text: str) -> str:
    if not text:
        return ""
    return text.replace("\xa0", " ").strip()


def iter_cells(row: Tag) -> List[Tag]:
    """Return the direct ``<td>`` children of a row."""
    return row.find_all("td", recursive=False)


def anchor_titles(cell: Tag) -> str:
    titles = []
    for link in cell.find_all("a", recursive=False):
        title = clean_text(str(link.get("title", "")).replace("icon", ""))
        if title:
            titles.append(title)
    return ", ".join(titles)


def filtered_join(cell: Tag) -> str:
    """
    Rebuild a natural-language list from a cell that interleaves links and text.

    Links contribute their title, every other node contributes its text
    followed by a comma. The result is split on commas and the non-empty
    pieces are joined with a single space.
    """
    pieces = []
    for child in cell.children:
        if isinstance(child, Comment):
            continue
        if isinstance(child, Tag) and child.name == "a":
            pieces.append(str(child.get("title", "")))
        else:
            text = str(child) if isinstance(child, NavigableString) else child.get_text()
            pieces.append(text)
            pieces.append(",")

    parts = [clean_text(part) for part in "".join(pieces).split(",")]
    return " ".join(part for part in parts if part)


def extract_cell(cell: Tag, rule: CellRule) -> Any:
    if rule == CellRule.TEXT:
        return clean_text(cell.get_text())
    if rule == CellRule.ANCHOR_TITLES:
        return anchor_titles(cell)
    if rule == CellRule.FILTERED_JOIN:
        return filtered_join(cell)
    if rule == CellRule.BOOLEAN_FROM_YES:
        return clean_text(cell.get_text()) == "Yes"
    if rule == CellRule.FLOAT:
        return to_float(clean_text(cell.get_text()))
    raise ValueError(f"Cannot extract a value with rule {rule}")


def is_blank_row(row: Tag, columns: ColumnPolicy) -> bool:
    """
    True when none of the extracted cells of a row carry text or titled links.

    Skipped columns (icons) are ignored, so a row holding only an icon is
    blank. Rows without ``<td>`` cells, such as header rows, are blank too.
    """
    for index, cell in enumerate(iter_cells(row)):
        if index not in columns or columns[index][1] == CellRule.SKIP:
            continue
        if clean_text(cell.get_text()):
            return False
        if any(link.get("title") for link in cell.find_all("a")):
            return False
    return True


def extract_row(row: Tag, columns: ColumnPolicy) -> Dict[str, Any]:
    record = {}
    for index, cell in enumerate(iter_cells(row)):
        if index not in columns:
            continue
        field, rule = columns[index]
        if rule == CellRule.SKIP:
            continue
        record[field] = extract_cell(cell, rule)
    return record
