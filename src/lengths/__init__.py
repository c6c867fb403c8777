"""Exact nanometer-based Length type with common metric and imperial units."""
from .exceptions import LengthError, LengthOverflowError, NegativeLengthError
from .length import (
    CENTIMETER,
    FOOT,
    INCH,
    KILOMETER,
    METER,
    MICROMETER,
    MILLIMETER,
    NANOMETER,
    FeetAndInches,
    Length,
    centimeters,
    feet,
    from_unit,
    from_whole_units,
    inches,
    kilometers,
    meters,
    millimeters,
    to_whole_units,
)
from .units import UINT64_MAX, UNIT_SPECS, LengthUnit, UnitSpec, nanometers_per

__all__ = [
    "CENTIMETER",
    "FOOT",
    "INCH",
    "KILOMETER",
    "METER",
    "MICROMETER",
    "MILLIMETER",
    "NANOMETER",
    "UINT64_MAX",
    "UNIT_SPECS",
    "FeetAndInches",
    "Length",
    "LengthError",
    "LengthOverflowError",
    "LengthUnit",
    "NegativeLengthError",
    "UnitSpec",
    "centimeters",
    "feet",
    "from_unit",
    "from_whole_units",
    "inches",
    "kilometers",
    "meters",
    "millimeters",
    "nanometers_per",
    "to_whole_units",
]
