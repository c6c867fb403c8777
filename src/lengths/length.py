# src/lengths/length.py
from __future__ import annotations

import logging
import math
import numbers
import operator
from typing import Any, NamedTuple

import numpy as np
from pydantic_core import core_schema

from .exceptions import LengthError, LengthOverflowError, NegativeLengthError
from .units import UINT64_MAX, LengthUnit, nanometers_per

logger = logging.getLogger(__name__)


class FeetAndInches(NamedTuple):
    feet: float
    inches: float


class Length(int):
    """
    The extent of something from end to end, stored as a nanometer count.

    A Length is an unsigned integer: it is never negative and never exceeds
    UINT64_MAX nanometers (roughly 18 gigameters). Integer arithmetic with the
    unit constants is exact:

        10 * METER                 # ten meters
        METER // MILLIMETER        # 1000, a plain int count of whole units
        (5 * FOOT) % METER         # the part left over after whole meters

    Operations that would leave the representable range raise
    NegativeLengthError or LengthOverflowError instead of wrapping. Mixing a
    Length with floats falls back to ordinary float arithmetic; use the
    converting constructors (meters(), inches(), ...) to build a Length from
    a fractional unit count.

    str() picks the display unit (e.g. "1.5mm"). Format specs such as ">8"
    pad that text; numeric specs such as "," format the nanometer count.
    """
    __slots__ = ()

    def __new__(cls, nanometers: Any = 0) -> Length:
        try:
            value = operator.index(nanometers)
        except TypeError:
            raise TypeError(
                f"Length requires an integer nanometer count, got {type(nanometers).__name__}"
            ) from None
        if value < 0:
            raise NegativeLengthError(f"Length cannot be negative: {value}nm")
        if value > UINT64_MAX:
            raise LengthOverflowError(f"Length exceeds the largest representable value: {value}nm")
        return super().__new__(cls, value)

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: Any) -> core_schema.CoreSchema:
        # Lets config models declare Length fields; input is a nanometer count.
        return core_schema.no_info_after_validator_function(
            cls,
            core_schema.int_schema(ge=0, le=UINT64_MAX),
            serialization=core_schema.plain_serializer_function_ser_schema(int),
        )

    def __add__(self, other):
        if not isinstance(other, int):
            return NotImplemented
        return Length(int(self) + int(other))

    __radd__ = __add__

    def __sub__(self, other):
        if not isinstance(other, int):
            return NotImplemented
        return Length(int(self) - int(other))

    def __rsub__(self, other):
        if not isinstance(other, int):
            return NotImplemented
        return Length(int(other) - int(self))

    def __mul__(self, other):
        if not isinstance(other, int):
            return NotImplemented
        return Length(int(self) * int(other))

    __rmul__ = __mul__

    def __floordiv__(self, other):
        # Length // Length counts whole units; Length // int scales down.
        if isinstance(other, Length):
            return int(self) // int(other)
        if not isinstance(other, int):
            return NotImplemented
        return Length(int(self) // int(other))

    def __mod__(self, other):
        if not isinstance(other, int):
            return NotImplemented
        return Length(int(self) % int(other))

    def __divmod__(self, other):
        if not isinstance(other, int):
            return NotImplemented
        return self // other, self % other

    def __neg__(self) -> Length:
        return Length(-int(self))

    def __pos__(self) -> Length:
        return self

    def __abs__(self) -> Length:
        return self

    def to(self, unit: LengthUnit | str | int) -> float:
        """
        Return the length as a floating point number of `unit`.

        The whole units are computed exactly and only the sub-unit remainder
        goes through float division, so large counts keep their precision.

        Args:
            unit (LengthUnit | str | int): Target unit, as a LengthUnit or a unit constant.

        Returns:
            float: Non-negative count of `unit`; zero only for a zero length.
        """
        k = nanometers_per(unit)
        whole, rest = divmod(int(self), k)
        return float(whole) + rest / k

    def micrometers(self) -> float:
        return self.to(LengthUnit.MICROMETER)

    def millimeters(self) -> float:
        return self.to(LengthUnit.MILLIMETER)

    def centimeters(self) -> float:
        return self.to(LengthUnit.CENTIMETER)

    def meters(self) -> float:
        return self.to(LengthUnit.METER)

    def kilometers(self) -> float:
        return self.to(LengthUnit.KILOMETER)

    def inches(self) -> float:
        return self.to(LengthUnit.INCH)

    def feet_and_inches(self) -> FeetAndInches:
        """
        Split the length into whole feet and the remaining inches.

        Feet are always integral but returned as a float to match inches.
        Inches are in [0, 12).
        """
        feet, rest = divmod(int(self), int(FOOT))
        return FeetAndInches(float(feet), Length(rest).inches())

    def __str__(self) -> str:
        nanometers = int(self)
        if nanometers == 0:
            return "0nm"
        unit = _display_unit(nanometers)
        if unit is LengthUnit.NANOMETER:
            return f"{nanometers}{unit.spec.symbol}"
        return f"{_format_float(self.to(unit))}{unit.spec.symbol}"

    def __format__(self, format_spec: str) -> str:
        # Text specs (fill, align, width) pad str(self); numeric specs
        # such as "," or "d" format the nanometer count.
        try:
            return format(str(self), format_spec)
        except ValueError:
            return format(int(self), format_spec)

    def __repr__(self) -> str:
        return f"Length({int(self)})"


# Units str() may display, in ascending size.
_DISPLAY_TIERS = (
    LengthUnit.NANOMETER,
    LengthUnit.MICROMETER,
    LengthUnit.MILLIMETER,
    LengthUnit.CENTIMETER,
    LengthUnit.METER,
    LengthUnit.KILOMETER,
)


def _display_unit(nanometers: int) -> LengthUnit:
    # Largest tier not exceeding the length; a boundary belongs to the upper unit.
    chosen = _DISPLAY_TIERS[0]
    for unit in _DISPLAY_TIERS[1:]:
        if nanometers < unit.nanometers:
            break
        chosen = unit
    return chosen


def _format_float(value: float) -> str:
    # Shortest round-tripping digits, positional, no trailing zeros or dot.
    return np.format_float_positional(value, trim="-")


# Common length units. Count the units in a Length by dividing by the unit
# (METER // MILLIMETER == 1000); build a Length from an integer count by
# multiplying (10 * METER).
NANOMETER = Length(LengthUnit.NANOMETER.nanometers)
MICROMETER = Length(LengthUnit.MICROMETER.nanometers)
MILLIMETER = Length(LengthUnit.MILLIMETER.nanometers)
CENTIMETER = Length(LengthUnit.CENTIMETER.nanometers)
METER = Length(LengthUnit.METER.nanometers)
KILOMETER = Length(LengthUnit.KILOMETER.nanometers)
INCH = Length(LengthUnit.INCH.nanometers)
FOOT = Length(LengthUnit.FOOT.nanometers)


def from_whole_units(count: int, unit: LengthUnit | str | int) -> Length:
    """Return `count` whole units as a Length (same as `count * unit`)."""
    return Length(operator.index(count) * nanometers_per(unit))


def to_whole_units(length: int, unit: LengthUnit | str | int) -> int:
    """Return how many whole `unit`s fit in `length`, discarding the remainder."""
    return int(length) // nanometers_per(unit)


def from_unit(value: float, unit: LengthUnit | str | int) -> Length:
    """
    Convert a floating point number of `unit` into a Length.

    The result is floored to the closest nanometer; any fractional
    nanometer is dropped, never rounded.

    Args:
        value (float): Non-negative, finite count of `unit`.
        unit (LengthUnit | str | int): Source unit, as a LengthUnit or a unit constant.

    Returns:
        Length: The truncated nanometer count.

    Raises:
        TypeError: If `value` is not a real number (text is never parsed).
        LengthError: If `value` is NaN or infinite.
        NegativeLengthError: If `value` is negative.
        LengthOverflowError: If the result exceeds UINT64_MAX nanometers.
    """
    if isinstance(value, (str, bytes)) or not isinstance(value, numbers.Real):
        raise TypeError(f"Expected a real number of units, got {type(value).__name__}")
    k = nanometers_per(unit)
    try:
        value = float(value)
    except OverflowError:
        raise LengthOverflowError("Value exceeds the largest representable length") from None
    if not math.isfinite(value):
        raise LengthError(f"Cannot convert non-finite value {value} to a Length")
    if value < 0:
        raise NegativeLengthError(f"Cannot convert negative value {value} to a Length")

    scaled = value * float(k)
    nanometers = int(scaled)
    if scaled != nanometers and logger.isEnabledFor(logging.DEBUG):
        logger.debug(f"Dropped sub-nanometer precision: {scaled!r}nm -> {nanometers}nm")
    return Length(nanometers)


def millimeters(f: float) -> Length:
    """Return a length from a floating point number of millimeters, floored to the nanometer."""
    return from_unit(f, LengthUnit.MILLIMETER)


def centimeters(f: float) -> Length:
    """Return a length from a floating point number of centimeters, floored to the nanometer."""
    return from_unit(f, LengthUnit.CENTIMETER)


def meters(f: float) -> Length:
    """Return a length from a floating point number of meters, floored to the nanometer."""
    return from_unit(f, LengthUnit.METER)


def kilometers(f: float) -> Length:
    """Return a length from a floating point number of kilometers, floored to the nanometer."""
    return from_unit(f, LengthUnit.KILOMETER)


def inches(f: float) -> Length:
    """Return a length from a floating point number of inches, floored to the nanometer."""
    return from_unit(f, LengthUnit.INCH)


def feet(f: float) -> Length:
    """Return a length from a floating point number of feet, floored to the nanometer."""
    return from_unit(f, LengthUnit.FOOT)
