"""
insights/data/units.py
──────────────────────
Unit normalization and explicit conversion for Quantity values.

Nothing here converts implicitly: callers ask for a target unit and get
either the converted value or a UnitMismatchError.
"""

from __future__ import annotations

from config.settings import settings
from config.units import CONVERSIONS, FIELD_UNITS, HOURS, UNIT_ALIASES
from insights.data.models import Quantity
from insights.errors import UnitMismatchError


def normalize_unit(unit: str | None) -> str:
    """Map a stored unit spelling ("hrs", "Hours", "kWh") to its canonical form."""
    if not unit:
        return ""
    key = unit.strip()
    return UNIT_ALIASES.get(key.lower(), key)


def canonical(q: Quantity) -> Quantity:
    return Quantity(value=q.value, unit=normalize_unit(q.unit))


def zero(field: str) -> Quantity:
    """The documented default for a field nobody recorded."""
    return Quantity(value=0.0, unit=FIELD_UNITS[field])


def convert(q: Quantity, unit: str) -> Quantity:
    """
    Express ``q`` in ``unit``.

    A quantity with no unit is taken to already be in ``unit``
    (records written before units were stored).

    Raises:
        UnitMismatchError: the two units are not in the same family.
    """
    src = normalize_unit(q.unit)
    dst = normalize_unit(unit)
    if not src or src == dst:
        return Quantity(value=q.value, unit=dst)
    factor = CONVERSIONS.get((src, dst))
    if factor is None:
        raise UnitMismatchError(q.unit, unit)
    return Quantity(value=q.value * factor, unit=dst)


def magnitude(x: Quantity | float | int, unit: str) -> float:
    """Plain number in ``unit``; bare numbers are assumed to be in ``unit`` already."""
    if isinstance(x, Quantity):
        return float(convert(x, unit).value)
    return float(x)


def hours(x: Quantity | float | int) -> float:
    return magnitude(x, HOURS)


def display_value(x: float, decimals: int | None = None) -> float | int:
    """Rounded to ``decimals``; integral results come back as int (no trailing zero)."""
    if decimals is None:
        decimals = settings.DISPLAY_DECIMALS
    x = round(float(x), decimals)
    if x.is_integer():
        return int(x)
    return x
