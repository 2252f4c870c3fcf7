"""
Length conversions. Canonical unit: meters.
"""

from enum import Enum

from .unit_conversion import UnitConverter, scale


class LengthUnit(Enum):
    MILLIMETERS = "millimeters"
    CENTIMETERS = "centimeters"
    METERS = "meters"
    KILOMETERS = "kilometers"
    INCHES = "inches"
    FEET = "feet"
    YARDS = "yards"
    MILES = "miles"


SYMBOLS = {
    LengthUnit.MILLIMETERS: "mm",
    LengthUnit.CENTIMETERS: "cm",
    LengthUnit.METERS: "m",
    LengthUnit.KILOMETERS: "km",
    LengthUnit.INCHES: "in",
    LengthUnit.FEET: "ft",
    LengthUnit.YARDS: "yd",
    LengthUnit.MILES: "mi",
}

# unit -> meters. Meters -> unit divides by the same factor, so results can
# differ in the last places from rounded published inverses
# (10000 m -> 6.2137 mi rather than 6.214 with x0.0006214).
FACTORS = {
    LengthUnit.MILLIMETERS: 0.001,
    LengthUnit.CENTIMETERS: 0.01,
    LengthUnit.KILOMETERS: 1000.0,
    LengthUnit.INCHES: 0.0254,
    LengthUnit.FEET: 0.3048,
    LengthUnit.YARDS: 0.9144,
    LengthUnit.MILES: 1609.34,
}

length_converter = UnitConverter(
    category="length",
    units=LengthUnit,
    canonical=LengthUnit.METERS,
    symbols=SYMBOLS,
    transforms={unit: scale(factor) for unit, factor in FACTORS.items()},
)
