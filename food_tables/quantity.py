"""
Quantity parsing for crock pot ingredient lists.

Wiki cells list ingredients as ``Name×Number`` segments joined by commas,
e.g. ``"Carrot×2.0, Potato×1"``. Each segment becomes a display string
``"Carrot (2.0)"``.
"""

import re
from dataclasses import dataclass
from typing import List, Union

from .errors import FoodTableParseException

QUANTITY_PATTERN = re.compile(r"(\b[\w\s]+\b)×([\d.]+)")


@dataclass(frozen=True)
class QuantityPair:
    name: str
    quantity: str

    def display(self) -> str:
        return f"{self.name} ({self.quantity})"


def split_segments(text: str, drop_blank: bool = True) -> List[str]:
    """
    Split a comma-joined string into trimmed segments.

    Trailing blank segments are always dropped; blank segments elsewhere
    are kept when ``drop_blank`` is False.
    """
    if not text or not text.strip():
        return []
    segments = [segment.strip() for segment in text.split(",")]
    while segments and not segments[-1]:
        segments.pop()
    if drop_blank:
        return [segment for segment in segments if segment]
    return segments


def parse_quantity(segment: str) -> Union[QuantityPair, FoodTableParseException]:
    """
    Parse a single ``Name×Number`` segment.

    The error is returned rather than raised so that the caller decides
    whether a mismatch is fatal or can fall back to the raw segment.
    """
    match = QUANTITY_PATTERN.search(segment)
    if match is None:
        return FoodTableParseException(f"No quantity found in segment '{segment}'")
    return QuantityPair(match.group(1), match.group(2))


def parse_requirements(text) -> List[str]:
    """
    Parse a requirements cell. Every segment must carry a quantity.

    Raises:
        FoodTableParseException: if any segment does not match
    """
    if isinstance(text, list):
        return list(text)

    results = []
    for segment in split_segments(text, drop_blank=False):
        parsed = parse_quantity(segment)
        if isinstance(parsed, FoodTableParseException):
            raise parsed
        results.append(parsed.display())
    return results


def parse_filler_restrictions(text) -> List[str]:
    """Parse a filler restrictions cell; plain segments such as 'Fresh' are kept as-is."""
    if isinstance(text, list):
        return list(text)

    results = []
    for segment in split_segments(text):
        parsed = parse_quantity(segment)
        if isinstance(parsed, FoodTableParseException):
            results.append(segment)
        else:
            results.append(parsed.display())
    return results
