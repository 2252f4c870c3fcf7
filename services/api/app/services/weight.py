"""
Weight conversions. Canonical unit: grams.
"""

from enum import Enum

from .unit_conversion import UnitConverter, scale


class WeightUnit(Enum):
    MILLIGRAMS = "milligrams"
    GRAMS = "grams"
    KILOGRAMS = "kilograms"
    OUNCES = "ounces"
    POUNDS = "pounds"


SYMBOLS = {
    WeightUnit.MILLIGRAMS: "mg",
    WeightUnit.GRAMS: "g",
    WeightUnit.KILOGRAMS: "kg",
    WeightUnit.OUNCES: "oz",
    WeightUnit.POUNDS: "lb",
}

# unit -> grams. Grams -> unit divides by the same factor, so results can
# differ in the last places from rounded published inverses
# (100 kg -> 220.4624 lb rather than 220.5 with x0.002205).
FACTORS = {
    WeightUnit.MILLIGRAMS: 0.001,
    WeightUnit.KILOGRAMS: 1000.0,
    WeightUnit.OUNCES: 28.3495,
    WeightUnit.POUNDS: 453.592,
}

weight_converter = UnitConverter(
    category="weight",
    units=WeightUnit,
    canonical=WeightUnit.GRAMS,
    symbols=SYMBOLS,
    transforms={unit: scale(factor) for unit, factor in FACTORS.items()},
)
