"""
Field coercions applied to extracted records.

Every coercion accepts either the raw text read from a table or CSV cell,
or a value that has already been coerced, so normalizing a record twice
gives the same result.
"""

import re
from typing import Any, Callable, Dict, List

NUMERIC_PREFIX = re.compile(r"\s*([-+]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][-+]?\d+)?)")

TRUE_STRINGS = ("true", "yes")


def to_float(value: Any) -> float:
    """
    Permissive float coercion.

    Uses the leading numeric part of the text ("12.5 days" -> 12.5) and
    falls back to 0.0 for anything without one ("N/A", "", None).
    """
    if isinstance(value, bool):
        return float(value)
    if isinstance(value, (int, float)):
        return float(value)
    if not value:
        return 0.0

    match = NUMERIC_PREFIX.match(str(value))
    if match is None:
        return 0.0
    try:
        return float(match.group(1))
    except ValueError:
        return 0.0


def to_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    return str(value).strip().lower() in TRUE_STRINGS


def split_list(value: Any) -> List[str]:
    """Split a comma-joined string into a list of trimmed, non-empty items."""
    if isinstance(value, list):
        return list(value)
    if not value:
        return []
    return [item.strip() for item in str(value).split(",") if item.strip()]


def normalize_record(record: Dict[str, Any], rules: Dict[str, Callable[[Any], Any]]) -> Dict[str, Any]:
    """Return a new record with each field passed through its coercion rule, if any."""
    normalized = {}
    for key, value in record.items():
        rule = rules.get(key)
        normalized[key] = rule(value) if rule else value
    return normalized
