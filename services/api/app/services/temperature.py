"""
Temperature conversions. Canonical unit: Celsius.

Temperature scales are affine, so each unit stores a pair of functions rather
than a single factor. Fahrenheit <-> Kelvin always passes through Celsius.
"""

from enum import Enum

from .unit_conversion import Transform, UnitConverter

ABSOLUTE_ZERO_C = 273.15


class TemperatureUnit(Enum):
    CELSIUS = "celsius"
    FAHRENHEIT = "fahrenheit"
    KELVIN = "kelvin"


SYMBOLS = {
    TemperatureUnit.CELSIUS: "°C",
    TemperatureUnit.FAHRENHEIT: "°F",
    TemperatureUnit.KELVIN: "K",
}

TRANSFORMS = {
    TemperatureUnit.FAHRENHEIT: Transform(
        to_base=lambda f: (f - 32) * (5.0 / 9.0),
        from_base=lambda c: c * (9.0 / 5.0) + 32,
    ),
    TemperatureUnit.KELVIN: Transform(
        to_base=lambda k: k - ABSOLUTE_ZERO_C,
        from_base=lambda c: c + ABSOLUTE_ZERO_C,
    ),
}

temperature_converter = UnitConverter(
    category="temperature",
    units=TemperatureUnit,
    canonical=TemperatureUnit.CELSIUS,
    symbols=SYMBOLS,
    transforms=TRANSFORMS,
)
