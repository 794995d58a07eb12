"""
Per-category table layouts and field rules.

Each category is a ``CategoryConfig``: the output header, the column
policy used to pull fields out of a table row, the coercions applied to
each field, and an optional grouping step. The pipeline treats every
category the same way and only reads from this table.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, Optional, Tuple

from .catalog import MEATS, VEGETABLES
from .cells import CellRule, ColumnPolicy
from .errors import UnknownCategoryException
from .grouping import GroupSpec
from .normalize import split_list, to_bool, to_float
from .quantity import parse_filler_restrictions, parse_requirements


class Category(Enum):
    CROCKPOT = "crockpot"
    VEGETABLE = "vegetable"
    MEAT = "meat"


@dataclass(frozen=True)
class CategoryConfig:
    category: Category
    header: Tuple[str, ...]
    columns: ColumnPolicy
    rules: Dict[str, Callable[[Any], Any]]
    group: Optional[GroupSpec] = None
    # Output field -> field it is copied from right after extraction
    mirrored: Dict[str, str] = field(default_factory=dict)
    known_names: Tuple[str, ...] = ()


INGREDIENT_HEADER = ("name", "sources", "cooked", "dried", "dlc", "value", "crockpot")

INGREDIENT_RULES = {
    "value": to_float,
    "crockpot": to_bool,
}

CROCKPOT = CategoryConfig(
    category=Category.CROCKPOT,
    header=(
        "name",
        "dlc",
        "health",
        "hunger",
        "sanity",
        "perish_time",
        "cook_time",
        "priority",
        "requirements",
        "filler_restrictions",
    ),
    columns={
        0: ("icon", CellRule.SKIP),
        1: ("name", CellRule.TEXT),
        2: ("dlc", CellRule.ANCHOR_TITLES),
        3: ("health", CellRule.TEXT),
        4: ("hunger", CellRule.TEXT),
        5: ("sanity", CellRule.TEXT),
        6: ("perish_time", CellRule.TEXT),
        7: ("cook_time", CellRule.TEXT),
        8: ("priority", CellRule.TEXT),
        9: ("requirements", CellRule.FILTERED_JOIN),
        10: ("filler_restrictions", CellRule.FILTERED_JOIN),
    },
    rules={
        "dlc": split_list,
        "health": to_float,
        "hunger": to_float,
        "sanity": to_float,
        "requirements": parse_requirements,
        "filler_restrictions": parse_filler_restrictions,
    },
)

VEGETABLE = CategoryConfig(
    category=Category.VEGETABLE,
    header=INGREDIENT_HEADER,
    columns={
        0: ("icon", CellRule.SKIP),
        1: ("name", CellRule.TEXT),
        2: ("cooked_icon", CellRule.SKIP),
        3: ("cooked", CellRule.TEXT),
        4: ("dried_icon", CellRule.SKIP),
        5: ("dried", CellRule.TEXT),
        6: ("dlc", CellRule.ANCHOR_TITLES),
        7: ("value", CellRule.FLOAT),
        8: ("crockpot", CellRule.BOOLEAN_FROM_YES),
    },
    rules=INGREDIENT_RULES,
    mirrored={"sources": "name"},
    known_names=tuple(VEGETABLES),
)

MEAT = CategoryConfig(
    category=Category.MEAT,
    header=INGREDIENT_HEADER,
    columns={
        0: ("source_icon", CellRule.SKIP),
        1: ("source", CellRule.TEXT),
        2: ("icon", CellRule.SKIP),
        3: ("name", CellRule.TEXT),
        4: ("cooked_icon", CellRule.SKIP),
        5: ("cooked", CellRule.TEXT),
        6: ("dried_icon", CellRule.SKIP),
        7: ("dried", CellRule.TEXT),
        8: ("dlc", CellRule.ANCHOR_TITLES),
        9: ("value", CellRule.FLOAT),
        10: ("crockpot", CellRule.BOOLEAN_FROM_YES),
    },
    rules=INGREDIENT_RULES,
    group=GroupSpec(key="name", source="source", target="sources"),
    known_names=tuple(MEATS),
)

CATEGORIES: Dict[Category, CategoryConfig] = {
    Category.CROCKPOT: CROCKPOT,
    Category.VEGETABLE: VEGETABLE,
    Category.MEAT: MEAT,
}


def get_category(category) -> CategoryConfig:
    """
    Look up a category configuration by enum member or name (case-insensitive).

    Raises:
        UnknownCategoryException: if no such category exists
    """
    if isinstance(category, Category):
        return CATEGORIES[category]
    try:
        return CATEGORIES[Category(str(category).strip().lower())]
    except ValueError:
        choices = ", ".join(c.value for c in Category)
        raise UnknownCategoryException(f"Unknown category '{category}', expected one of: {choices}")
