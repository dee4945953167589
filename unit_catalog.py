"""
Static unit tables for the three supported families.

Distance units convert through meters and weight units through grams using a
plain multiplication factor. Temperature units have no factor; they convert
pairwise (see ``unit.convert_temperature``).
"""
import enum
from dataclasses import dataclass
from typing import Optional, Tuple

from converter_errors import CatalogError


class UnitFamily(enum.Enum):
    DISTANCE = "distance"
    WEIGHT = "weight"
    TEMPERATURE = "temperature"

    @property
    def quantity_name(self):
        """Word used in user-facing messages about this family"""
        return _QUANTITY_NAMES[self]

    @property
    def is_linear(self):
        return self is not UnitFamily.TEMPERATURE


_QUANTITY_NAMES = {
    UnitFamily.DISTANCE: "Length",
    UnitFamily.WEIGHT: "Weight",
    UnitFamily.TEMPERATURE: "Temperature",
}


@dataclass(frozen=True)
class UnitDefinition:
    key: str
    family: UnitFamily
    names: Tuple[str, ...]
    plural: str
    factor: Optional[float] = None

    @property
    def singular(self):
        # temperature spellings start with the long form ("degree Celsius")
        if self.family is UnitFamily.TEMPERATURE:
            return self.names[0]
        return self.names[1]

    def matches(self, name):
        if self.family is UnitFamily.TEMPERATURE:
            return name in (n.lower() for n in self.names)
        return name in self.names


DISTANCE_UNITS = (
    UnitDefinition("meter", UnitFamily.DISTANCE, ("m", "meter", "meters"), "meters", 1.0),
    UnitDefinition("kilometer", UnitFamily.DISTANCE, ("km", "kilometer", "kilometers"), "kilometers", 1000.0),
    UnitDefinition("centimeter", UnitFamily.DISTANCE, ("cm", "centimeter", "centimeters"), "centimeters", 0.01),
    UnitDefinition("millimeter", UnitFamily.DISTANCE, ("mm", "millimeter", "millimeters"), "millimeters", 0.001),
    UnitDefinition("mile", UnitFamily.DISTANCE, ("mi", "mile", "miles"), "miles", 1609.35),
    UnitDefinition("yard", UnitFamily.DISTANCE, ("yd", "yard", "yards"), "yards", 0.9144),
    UnitDefinition("foot", UnitFamily.DISTANCE, ("ft", "foot", "feet"), "feet", 0.3048),
    UnitDefinition("inch", UnitFamily.DISTANCE, ("in", "inch", "inches"), "inches", 0.0254),
)

WEIGHT_UNITS = (
    UnitDefinition("gram", UnitFamily.WEIGHT, ("g", "gram", "grams"), "grams", 1.0),
    UnitDefinition("kilogram", UnitFamily.WEIGHT, ("kg", "kilogram", "kilograms"), "kilograms", 1000.0),
    UnitDefinition("milligram", UnitFamily.WEIGHT, ("mg", "milligram", "milligrams"), "milligrams", 0.001),
    UnitDefinition("pound", UnitFamily.WEIGHT, ("lb", "pound", "pounds"), "pounds", 453.592),
    UnitDefinition("ounce", UnitFamily.WEIGHT, ("oz", "ounce", "ounces"), "ounces", 28.3495),
)

TEMPERATURE_UNITS = (
    UnitDefinition(
        "celsius", UnitFamily.TEMPERATURE,
        ("degree Celsius", "degrees Celsius", "celsius", "dc", "c"), "degrees Celsius",
    ),
    UnitDefinition(
        "fahrenheit", UnitFamily.TEMPERATURE,
        ("degree Fahrenheit", "degrees Fahrenheit", "fahrenheit", "df", "f"), "degrees Fahrenheit",
    ),
    UnitDefinition("kelvin", UnitFamily.TEMPERATURE, ("kelvin", "kelvins", "k"), "kelvins"),
)

# Lookup order matters: the resolver tries families in this order.
CATALOG = {
    UnitFamily.DISTANCE: DISTANCE_UNITS,
    UnitFamily.WEIGHT: WEIGHT_UNITS,
    UnitFamily.TEMPERATURE: TEMPERATURE_UNITS,
}

_BASE_UNITS = {
    UnitFamily.DISTANCE: "meter",
    UnitFamily.WEIGHT: "gram",
}


def units_of(family):
    return CATALOG[family]


def base_unit(family):
    """Return the hub unit of a linear family (meters, grams)"""
    if not family.is_linear:
        raise ValueError(f"{family.value} has no base unit")
    return find_unit_by_key(_BASE_UNITS[family])


def find_unit_by_key(key):
    for units in CATALOG.values():
        for unit in units:
            if unit.key == key:
                return unit
    raise KeyError(key)


def find_unit(family, name):
    """Return the unit of ``family`` that accepts ``name``, or None"""
    for unit in units_of(family):
        if unit.matches(name):
            return unit
    return None


def accepted_names(family):
    """All spellings of a family, in the form lowercased input is compared to"""
    names = []
    for unit in units_of(family):
        if family is UnitFamily.TEMPERATURE:
            names.extend(n.lower() for n in unit.names)
        else:
            names.extend(unit.names)
    return names


def check_catalog():
    for family, units in CATALOG.items():
        names = accepted_names(family)
        duplicates = sorted({n for n in names if names.count(n) > 1})
        if duplicates:
            raise CatalogError(f"{family.value} units share spellings: {', '.join(duplicates)}")

        keys = [unit.key for unit in units]
        if len(set(keys)) != len(keys):
            raise CatalogError(f"{family.value} units share a key")

        for unit in units:
            if unit.family is not family:
                raise CatalogError(f"{unit.key} is filed under {family.value}")
            if not unit.singular or not unit.plural:
                raise CatalogError(f"{unit.key} has no display name")
            if family.is_linear and not (unit.factor and unit.factor > 0):
                raise CatalogError(f"{unit.key} needs a positive conversion factor")
            if not family.is_linear and unit.factor is not None:
                raise CatalogError(f"{unit.key} can't use a linear factor")


check_catalog()
