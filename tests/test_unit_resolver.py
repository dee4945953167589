# tests/test_unit_resolver.py

import pytest

from unit_catalog import UnitFamily
from unit_resolver import UNKNOWN_UNIT, describe_unknown, display_name, resolve


@pytest.mark.parametrize(
    "name, family, key",
    [
        ("km", UnitFamily.DISTANCE, "kilometer"),
        ("yards", UnitFamily.DISTANCE, "yard"),
        ("mg", UnitFamily.WEIGHT, "milligram"),
        ("kilogram", UnitFamily.WEIGHT, "kilogram"),
        ("degree fahrenheit", UnitFamily.TEMPERATURE, "fahrenheit"),
        ("kelvins", UnitFamily.TEMPERATURE, "kelvin"),
    ],
)
def test_resolve(name, family, key):
    resolved = resolve(name)
    assert resolved.family is family
    assert resolved.unit.key == key


@pytest.mark.parametrize("name", ["parsec", "", "degrees rankine", "KM"])
def test_resolve_unknown(name):
    assert resolve(name) is None


def test_describe_unknown():
    assert describe_unknown("kg") == "kilograms"
    assert describe_unknown("dc") == "degrees Celsius"
    assert describe_unknown("furlong") == UNKNOWN_UNIT == "???"


def test_display_name_is_singular_only_for_exactly_one():
    inch = resolve("in").unit
    assert display_name(inch, 1.0) == "inch"
    assert display_name(inch, 1.5) == "inches"
    assert display_name(inch, 0.0) == "inches"
    assert display_name(inch, 0.9999999999999999) == "inches"

    fahrenheit = resolve("f").unit
    assert display_name(fahrenheit, 1.0) == "degree Fahrenheit"
    assert display_name(fahrenheit, -1.0) == "degrees Fahrenheit"
