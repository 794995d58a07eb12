"""
Exceptions raised while converting food tables.
"""


class FoodTableException(Exception):
    pass


class FoodTableParseException(FoodTableException):
    pass


class UnknownCategoryException(FoodTableException):
    pass
