"""Units of measurement.

Unit codes follow the Unified Code for Units of Measure (UCUM), so that
"mW" is a milliwatt and "kW.h" a kilowatt-hour. A PrefixedUnit pairs a
base unit with a decimal scale prefix.
"""

from dataclasses import dataclass
from enum import Enum, StrEnum
from typing import Any


class Unit(StrEnum):
    """Base unit of a metric, stored as its UCUM code."""

    UNITY = "1"
    SECOND = "s"
    WATT = "W"
    JOULE = "J"
    VOLT = "V"
    AMPERE = "A"
    HERTZ = "Hz"
    DEGREE_CELSIUS = "Cel"
    DEGREE_FAHRENHEIT = "[degF]"
    WATT_HOUR = "W.h"
    BYTE = "By"
    PERCENT = "%"


_UNIT_CODES: frozenset[str] = frozenset(unit.value for unit in Unit)


class UnitPrefix(Enum):
    """Decimal scale prefix applied to a base unit.

    Each member's value is (symbol, power of ten).
    """

    NANO = ("n", -9)
    MICRO = ("u", -6)
    MILLI = ("m", -3)
    PLAIN = ("", 0)
    KILO = ("k", 3)
    MEGA = ("M", 6)
    GIGA = ("G", 9)

    @property
    def symbol(self) -> str:
        return self.value[0]

    @property
    def exponent(self) -> int:
        return self.value[1]

    @property
    def scale(self) -> float:
        """Multiplier from the prefixed unit to the base unit."""
        return 10.0**self.exponent

    @classmethod
    def from_symbol(cls, symbol: str) -> "UnitPrefix":
        for prefix in cls:
            if prefix.symbol == symbol:
                return prefix
        raise ValueError(f"Unknown unit prefix: {symbol!r}")


@dataclass(frozen=True)
class PrefixedUnit:
    """A base unit with a scale prefix, e.g. milliwatt or kilowatt-hour."""

    base_unit: Unit
    prefix: UnitPrefix = UnitPrefix.PLAIN

    def __str__(self) -> str:
        return f"{self.prefix.symbol}{self.base_unit.value}"

    @property
    def scale(self) -> float:
        return self.prefix.scale

    @classmethod
    def parse(cls, code: str) -> "PrefixedUnit":
        """Parse a UCUM unit code such as "W", "mW" or "kW.h".

        The whole code is tried as a base unit first, then the first
        character is read as a prefix.

        Raises:
            ValueError: If the code is not a known unit
        """
        if code in _UNIT_CODES:
            return cls(Unit(code))
        if len(code) > 1:
            symbol, rest = code[0], code[1:]
            if rest in _UNIT_CODES:
                try:
                    prefix = UnitPrefix.from_symbol(symbol)
                except ValueError:
                    pass
                else:
                    # "1" carries no dimension, a prefixed unity is meaningless
                    if rest != Unit.UNITY.value:
                        return cls(Unit(rest), prefix)
        raise ValueError(f"Unknown unit: {code!r}")

    @classmethod
    def coerce(cls, value: Any) -> "PrefixedUnit":
        """Convert a PrefixedUnit, Unit or unit code into a PrefixedUnit.

        Raises:
            ValueError: If the value cannot be read as a unit
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, Unit):
            return cls(value)
        if isinstance(value, str):
            return cls.parse(value)
        raise ValueError(f"Cannot convert {value!r} to a unit")
