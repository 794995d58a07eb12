"""
Merge rows that describe the same entity.

The meat table lists one row per place a meat can be obtained, so the
same name shows up several times. Rows are grouped by name and their
sources are combined into a single record.
"""

import logging
from collections import defaultdict
from dataclasses import dataclass
from typing import Any, Dict, List

logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)

NOT_AVAILABLE = "N/A"


@dataclass(frozen=True)
class GroupSpec:
    key: str = "name"
    source: str = "source"
    target: str = "sources"
    sentinel: str = NOT_AVAILABLE


def group_merge(records: List[Dict[str, Any]], spec: GroupSpec) -> List[Dict[str, Any]]:
    """
    Collapse records sharing ``spec.key`` into one record per key.

    Groups are emitted in first-seen order. The merged record holds the
    key, the comma-joined sources of every member (sentinel sources are
    left out, and the key itself is used when none remain) and the
    remaining fields of the first member.
    """
    groups: Dict[Any, List[Dict[str, Any]]] = defaultdict(list)
    for record in records:
        groups[record.get(spec.key)].append(record)

    merged = []
    for key, members in groups.items():
        sources = [m.get(spec.source) for m in members if m.get(spec.source) != spec.sentinel]
        sources = [source for source in sources if source]

        first = members[0]
        for other in members[1:]:
            for field, value in other.items():
                if field not in (spec.key, spec.source) and first.get(field) != value:
                    logger.debug(f"Dropping {field}={value!r} from duplicate '{key}' row, keeping {first.get(field)!r}")

        record = {spec.key: key, spec.target: ",".join(sources) if sources else key}
        for field, value in first.items():
            if field not in (spec.key, spec.source, spec.target):
                record[field] = value
        merged.append(record)

    logger.info(f"Merged {len(records)} rows into {len(merged)} records")
    return merged
