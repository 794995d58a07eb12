"""
Food Tables - convert Don't Starve wiki food tables into CSV and JSON.
"""

from .categories import CATEGORIES, Category, CategoryConfig, get_category
from .errors import (
    FoodTableException,
    FoodTableParseException,
    UnknownCategoryException,
)
from .pipeline import (
    convert_csv_to_json,
    convert_html_to_csv,
    convert_html_to_json,
    extract_records,
    normalize_records,
)

__all__ = [
    "CATEGORIES",
    "Category",
    "CategoryConfig",
    "get_category",
    "FoodTableException",
    "FoodTableParseException",
    "UnknownCategoryException",
    "convert_csv_to_json",
    "convert_html_to_csv",
    "convert_html_to_json",
    "extract_records",
    "normalize_records",
]
