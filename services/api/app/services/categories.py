"""
Registry of measurement categories and their converters.
"""

from enum import Enum

from .length import length_converter
from .temperature import temperature_converter
from .unit_conversion import UnitConverter
from .weight import weight_converter


class Category(str, Enum):
    LENGTH = "length"
    WEIGHT = "weight"
    TEMPERATURE = "temperature"


CONVERTERS: dict[Category, UnitConverter] = {
    Category.LENGTH: length_converter,
    Category.WEIGHT: weight_converter,
    Category.TEMPERATURE: temperature_converter,
}


def get_converter(category: Category | str) -> UnitConverter:
    """Look up the converter for a category (enum member or its name)."""
    return CONVERTERS[Category(category)]
