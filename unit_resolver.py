import logging
from dataclasses import dataclass

from unit_catalog import CATALOG, UnitDefinition, UnitFamily, find_unit

logger = logging.getLogger(__name__)

UNKNOWN_UNIT = "???"


@dataclass(frozen=True)
class ResolvedUnit:
    family: UnitFamily
    unit: UnitDefinition


def resolve(name):
    """Find which family and unit a (lowercased) name refers to.

    Returns None when no family accepts the name.
    """
    for family in CATALOG:
        unit = find_unit(family, name)
        if unit is not None:
            logger.debug("Resolved %r to %s (%s)", name, unit.key, family.value)
            return ResolvedUnit(family, unit)
    logger.debug("No unit named %r", name)
    return None


def describe_unknown(name):
    """Plural name of the unit, or a placeholder when the name is unknown"""
    resolved = resolve(name)
    if resolved is None:
        return UNKNOWN_UNIT
    return resolved.unit.plural


def display_name(unit, value):
    if value == 1.0:
        return unit.singular
    return unit.plural
