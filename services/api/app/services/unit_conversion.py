"""
Unit Conversion Service.

Every measurement category normalizes to a single canonical unit and converts
pairwise through it, so each category stores one transform per unit instead
of one per unit pair.
"""

import logging
from enum import Enum
from types import MappingProxyType
from typing import Callable, Mapping, NamedTuple, Type

logger = logging.getLogger(__name__)

# Results are rounded to this many decimal places, once, after both stages.
DECIMAL_PLACES = 4


class InvalidUnitError(ValueError):
    """Raised when a unit name or value is not part of a category."""

    def __init__(self, category: str, unit: object):
        self.category = category
        self.unit = unit
        super().__init__(f"Unsupported {category} unit: {unit!r}")


# --- Transforms ---

class Transform(NamedTuple):
    to_base: Callable[[float], float]
    from_base: Callable[[float], float]


def scale(factor: float) -> Transform:
    """Multiplicative transform: base = value * factor."""
    return Transform(
        to_base=lambda value: value * factor,
        from_base=lambda value: value / factor,
    )


# --- Converter ---

class UnitConverter:
    """
    Converts values between the members of one unit enumeration.

    `transforms` must cover every member except `canonical`; `symbols` must
    cover every member with distinct, non-empty strings. Both are checked on
    construction.
    """

    def __init__(
        self,
        category: str,
        units: Type[Enum],
        canonical: Enum,
        symbols: Mapping[Enum, str],
        transforms: Mapping[Enum, Transform],
    ):
        self.category = category
        self.units = units
        self.canonical = canonical

        if not isinstance(canonical, units):
            raise TypeError(f"{category}: canonical unit {canonical!r} is not a {units.__name__}")

        missing = [u for u in units if u is not canonical and u not in transforms]
        if missing:
            raise TypeError(f"{category}: no transform for {', '.join(u.value for u in missing)}")
        if canonical in transforms:
            raise TypeError(f"{category}: canonical unit must not carry a transform")

        missing = [u for u in units if not symbols.get(u)]
        if missing:
            raise TypeError(f"{category}: no symbol for {', '.join(u.value for u in missing)}")
        if len(set(symbols[u] for u in units)) != len(units):
            raise TypeError(f"{category}: unit symbols must be distinct")

        self._symbols = MappingProxyType({u: symbols[u] for u in units})
        self._transforms = MappingProxyType(dict(transforms))
        self._by_name = MappingProxyType({u.value.lower(): u for u in units})

    def __repr__(self) -> str:
        return f"UnitConverter({self.category!r}, canonical={self.canonical.value!r})"

    # Identity & parsing

    def parse_unit(self, name: str) -> Enum:
        """Case-insensitive exact match on the full unit name."""
        if not isinstance(name, str):
            raise InvalidUnitError(self.category, name)
        unit = self._by_name.get(name.lower())
        if unit is None:
            raise InvalidUnitError(self.category, name)
        return unit

    def unit_symbol(self, unit: Enum) -> str:
        try:
            return self._symbols[unit]
        except (KeyError, TypeError):
            raise InvalidUnitError(self.category, unit) from None

    def all_unit_names(self) -> list[str]:
        return [u.value for u in self.units]

    def all_unit_symbols(self) -> dict[str, str]:
        return {u.value: self._symbols[u] for u in self.units}

    # Canonical-form pipeline

    def _transform(self, unit: Enum) -> Transform:
        try:
            return self._transforms[unit]
        except (KeyError, TypeError):
            raise InvalidUnitError(self.category, unit) from None

    def to_base(self, value: float, unit: Enum) -> float:
        if unit is self.canonical:
            return value
        return self._transform(unit).to_base(value)

    def from_base(self, value: float, unit: Enum) -> float:
        if unit is self.canonical:
            return value
        return self._transform(unit).from_base(value)

    def convert(self, value: float, from_unit: Enum, to_unit: Enum) -> float:
        """
        Convert `value` from `from_unit` to `to_unit` through the canonical unit.
        The result is rounded to DECIMAL_PLACES.
        """
        if from_unit is to_unit and isinstance(from_unit, self.units):
            return round(value, DECIMAL_PLACES)

        base = self.to_base(value, from_unit)
        result = self.from_base(base, to_unit)
        logger.debug(
            f"{self.category}: {value} {from_unit.value} -> {base} {self.canonical.value} -> {result} {to_unit.value}"
        )
        return round(result, DECIMAL_PLACES)
