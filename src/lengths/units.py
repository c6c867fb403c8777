# src/lengths/units.py
from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

# Largest nanometer count a Length can hold (unsigned 64-bit).
UINT64_MAX = 2**64 - 1


class UnitSpec(BaseModel):
    """
    Static description of one supported length unit.

    Attributes:
        symbol (str): Display suffix used when formatting (e.g., "mm").
        nanometers (int): Exact number of nanometers in one unit.
    """
    model_config = ConfigDict(frozen=True, extra="forbid")

    symbol: str = Field(..., min_length=1)
    nanometers: int = Field(..., gt=0, le=UINT64_MAX)


class LengthUnit(str, Enum):
    """
    Enumeration of supported length units.
    Internally, every Length is an integer count of nanometers.
    """
    NANOMETER = "nm"
    MICROMETER = "μm"
    MILLIMETER = "mm"
    CENTIMETER = "cm"
    METER = "m"
    KILOMETER = "km"
    INCH = "in"
    FOOT = "ft"

    @property
    def spec(self) -> UnitSpec:
        return UNIT_SPECS[self]

    @property
    def nanometers(self) -> int:
        return UNIT_SPECS[self].nanometers


# 1 in = 25.4 mm exactly.
UNIT_SPECS: dict[LengthUnit, UnitSpec] = {
    LengthUnit.NANOMETER: UnitSpec(symbol="nm", nanometers=1),
    LengthUnit.MICROMETER: UnitSpec(symbol="μm", nanometers=10**3),
    LengthUnit.MILLIMETER: UnitSpec(symbol="mm", nanometers=10**6),
    LengthUnit.CENTIMETER: UnitSpec(symbol="cm", nanometers=10**7),
    LengthUnit.METER: UnitSpec(symbol="m", nanometers=10**9),
    LengthUnit.KILOMETER: UnitSpec(symbol="km", nanometers=10**12),
    LengthUnit.INCH: UnitSpec(symbol="in", nanometers=25_400_000),
    LengthUnit.FOOT: UnitSpec(symbol="ft", nanometers=304_800_000),
}


def nanometers_per(unit: LengthUnit | str | int) -> int:
    """
    Return the number of nanometers in one `unit`.

    Args:
        unit (LengthUnit | str | int): A LengthUnit member or its symbol (e.g., "mm"),
            or a unit given directly as a nanometer count (e.g., the METER constant).

    Returns:
        int: The exact nanometer multiple of the unit.

    Raises:
        ValueError: If the provided unit is not supported.
    """
    if isinstance(unit, LengthUnit):
        return unit.nanometers
    if isinstance(unit, str):
        try:
            return LengthUnit(unit).nanometers
        except ValueError:
            raise ValueError(f"Unknown unit: {unit}") from None
    if isinstance(unit, int) and not isinstance(unit, bool) and unit > 0:
        return int(unit)
    raise ValueError(f"Unknown unit: {unit}")
