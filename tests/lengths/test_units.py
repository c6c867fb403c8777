# tests/lengths/test_units.py
import pytest
from pydantic import BaseModel, ValidationError

from lengths import (
    CENTIMETER,
    FOOT,
    INCH,
    KILOMETER,
    METER,
    MICROMETER,
    MILLIMETER,
    NANOMETER,
    UNIT_SPECS,
    Length,
    LengthUnit,
    UnitSpec,
    nanometers_per,
)


@pytest.mark.parametrize(
    "constant, unit, nanometers",
    [
        (NANOMETER, LengthUnit.NANOMETER, 1),
        (MICROMETER, LengthUnit.MICROMETER, 1_000),
        (MILLIMETER, LengthUnit.MILLIMETER, 1_000_000),
        (CENTIMETER, LengthUnit.CENTIMETER, 10_000_000),
        (METER, LengthUnit.METER, 1_000_000_000),
        (KILOMETER, LengthUnit.KILOMETER, 1_000_000_000_000),
        (INCH, LengthUnit.INCH, 25_400_000),
        (FOOT, LengthUnit.FOOT, 304_800_000),
    ],
)
def test_unit_table(constant, unit, nanometers):
    assert constant == nanometers
    assert isinstance(constant, Length)
    assert unit.nanometers == nanometers
    assert nanometers_per(unit) == nanometers
    assert nanometers_per(unit.value) == nanometers
    assert nanometers_per(constant) == nanometers


def test_imperial_units_derive_from_millimeters():
    # 1 in = 25.4 mm, 1 ft = 12 in
    assert 10 * INCH == 254 * MILLIMETER
    assert FOOT == 12 * INCH


def test_length_unit_lookup():
    assert LengthUnit("mm") is LengthUnit.MILLIMETER
    assert LengthUnit.INCH.spec.symbol == "in"
    assert LengthUnit.MICROMETER.spec.symbol == "μm"
    assert set(UNIT_SPECS) == set(LengthUnit)


@pytest.mark.parametrize("bad", [0, -5, True, "yd", 1.0])
def test_unknown_unit(bad):
    with pytest.raises(ValueError, match="Unknown unit"):
        nanometers_per(bad)


def test_unit_spec_validation():
    with pytest.raises(ValidationError):
        UnitSpec(symbol="x", nanometers=0)
    spec = LengthUnit.METER.spec
    with pytest.raises(ValidationError):
        spec.nanometers = 1


@pytest.mark.parametrize(
    "nanometers, unit",
    [
        (1, LengthUnit.NANOMETER),
        (999, LengthUnit.NANOMETER),
        (1_000, LengthUnit.MICROMETER),
        (999_999, LengthUnit.MICROMETER),
        (1_000_000, LengthUnit.MILLIMETER),
        (9_999_999, LengthUnit.MILLIMETER),
        (10_000_000, LengthUnit.CENTIMETER),
        (999_999_999, LengthUnit.CENTIMETER),
        (1_000_000_000, LengthUnit.METER),
        (999_999_999_999, LengthUnit.METER),
        (1_000_000_000_000, LengthUnit.KILOMETER),
    ],
)
def test_display_unit_thresholds(nanometers, unit):
    text = str(Length(nanometers))
    symbol = unit.spec.symbol
    assert text.endswith(symbol)
    assert text[: -len(symbol)][-1].isdigit()


def test_display_table_is_not_configurable():
    import lengths

    assert not hasattr(lengths, "FormatConfig")
    assert not hasattr(lengths, "DEFAULT_FORMAT")
    assert str(Length(0)) == "0nm"
    assert str(KILOMETER) == "1km"


def test_unit_spec_rejects_unknown_fields():
    with pytest.raises(ValidationError):
        UnitSpec(name="meter", symbol="m", nanometers=10**9)


class PartConfig(BaseModel):
    width: Length
    depth: Length = Length(0)


def test_length_as_model_field():
    part = PartConfig(width=1_500)
    assert part.width == Length(1_500)
    assert isinstance(part.width, Length)
    assert str(part.width) == "1.5μm"
    assert PartConfig(width=METER).width == METER
    assert part.model_dump() == {"width": 1_500, "depth": 0}


@pytest.mark.parametrize("bad", [-1, 2**64, "ten meters"])
def test_length_field_validation(bad):
    with pytest.raises(ValidationError):
        PartConfig(width=bad)
