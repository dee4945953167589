import logging
import math
from decimal import Decimal

import pint

from converter_errors import ConverterError, ImpossibleConversionError, NegativeMagnitudeError
from input_parser import parse
from unit_catalog import CATALOG, UnitFamily, base_unit
from unit_resolver import describe_unknown, display_name, resolve

logger = logging.getLogger(__name__)

PROMPT = "Enter what you want to convert (or exit): "
EXIT_COMMAND = "exit"

_TEMPERATURE_FORMULAS = {
    ("celsius", "fahrenheit"): lambda v: v * 9 / 5 + 32,
    ("fahrenheit", "celsius"): lambda v: (v - 32) * 5 / 9,
    ("celsius", "kelvin"): lambda v: v + 273.15,
    ("kelvin", "celsius"): lambda v: v - 273.15,
    ("fahrenheit", "kelvin"): lambda v: (v + 459.67) * 5 / 9,
    ("kelvin", "fahrenheit"): lambda v: v * 9 / 5 - 459.67,
}


def setup_converter():
    """Initialize a unit registry with one base unit per linear family"""
    ureg = pint.UnitRegistry(None)
    for family in CATALOG:
        if family.is_linear:
            ureg.define(f"{base_unit(family).key} = [{family.value}]")
    logger.debug("Unit registry ready")
    return ureg


def in_base_units(value, unit, ureg):
    """Express a distance or weight in meters or grams"""
    return value * unit.factor * ureg.Unit(base_unit(unit.family).key)


def convert_linear(value, source, destination, ureg):
    """Convert a distance or weight using Pint module"""
    if value < 0:
        raise NegativeMagnitudeError(source.family, value)
    if source.key == destination.key:
        return value
    result = in_base_units(value, source, ureg) / in_base_units(1, destination, ureg)
    if not result.dimensionless:
        raise ImpossibleConversionError(source.plural, destination.plural)
    return result.magnitude


def convert_distance(value, source, destination, ureg):
    return convert_linear(value, source, destination, ureg)


def convert_weight(value, source, destination, ureg):
    return convert_linear(value, source, destination, ureg)


def convert_temperature(value, source, destination):
    """Convert between Celsius, Fahrenheit and Kelvin; negative values are fine"""
    if source.family is not UnitFamily.TEMPERATURE or destination.family is not UnitFamily.TEMPERATURE:
        raise ImpossibleConversionError(source.plural, destination.plural)
    if source.key == destination.key:
        return value
    return _TEMPERATURE_FORMULAS[source.key, destination.key](value)


def format_number(value):
    """Plain decimal between 1e-3 and 1e7, scientific (1.5E-6) outside that range"""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0 or 1e-3 <= abs(value) < 1e7:
        return repr(value)

    sign, digits, exponent = Decimal(repr(value)).as_tuple()
    power = len(digits) - 1 + exponent
    digits = "".join(map(str, digits)).rstrip("0")
    mantissa = digits[0] + "." + (digits[1:] or "0")
    return ("-" if sign else "") + f"{mantissa}E{power}"


def convert_request(request, ureg):
    """Resolve both unit names, convert, and build the answer line"""
    source = resolve(request.source)
    destination = resolve(request.destination)

    if source is None or destination is None or source.family is not destination.family:
        raise ImpossibleConversionError(
            describe_unknown(request.source), describe_unknown(request.destination)
        )

    family = source.family
    if family is UnitFamily.DISTANCE:
        converted = convert_distance(request.value, source.unit, destination.unit, ureg)
    elif family is UnitFamily.WEIGHT:
        converted = convert_weight(request.value, source.unit, destination.unit, ureg)
    else:
        converted = convert_temperature(request.value, source.unit, destination.unit)

    return (
        f"{format_number(request.value)} {display_name(source.unit, request.value)} is "
        f"{format_number(converted)} {display_name(destination.unit, converted)}"
    )


def handle_line(line, ureg):
    """Answer one line of input. Returns None when the user asked to exit."""
    if line.lower() == EXIT_COMMAND:
        return None
    try:
        return convert_request(parse(line), ureg)
    except ConverterError as e:
        logger.debug("Rejected %r: %s", line, e)
        return str(e)


def main():
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")
    ureg = setup_converter()

    while True:
        try:
            line = input(PROMPT)
        except (EOFError, KeyboardInterrupt):
            print()
            break

        response = handle_line(line, ureg)
        if response is None:
            break
        print(response)
        print()


if __name__ == "__main__":
    main()
