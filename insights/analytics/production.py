"""
insights/analytics/production.py
────────────────────────────────
Production volume from rated line capacity and the daily operating schedule.

  total_production = capacity / 24 × daily_running_hours    (TPD)
"""

from __future__ import annotations

from config.units import HOURS, HOURS_PER_DAY, TPD
from insights.data.models import EffectiveParameters, Quantity
from insights.data.units import display_value, magnitude


def estimate_production(
    capacity: Quantity | float,
    daily_running_hours: Quantity | float,
) -> Quantity:
    """
    Scale 24-hour rated capacity to the hours the line actually runs.

    Zero capacity or zero hours gives zero. Hours above 24 are not clamped.
    The result is rounded for display (see ``display_value``).
    """
    cap = magnitude(capacity, TPD)
    daily = magnitude(daily_running_hours, HOURS)
    return Quantity(value=display_value(cap / HOURS_PER_DAY * daily), unit=TPD)


def production_for(effective: EffectiveParameters) -> Quantity:
    return estimate_production(effective.capacity, effective.daily_running_hours)
