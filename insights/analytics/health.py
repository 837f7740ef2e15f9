"""
insights/analytics/health.py
────────────────────────────
Spare-part health classification from running hours vs rated lifetime.

Status:
  running  > lifetime  → ATTENTION
  running == lifetime  → MONITOR
  otherwise            → HEALTHY

Health percentage = round(clip((lifetime - running) / lifetime × 100, 0, 100)),
rounded half up. A part with no recorded lifetime (0) is HEALTHY at 100 %.
A negative lifetime is not masked: running hours at or above zero exceed it.
"""

from __future__ import annotations

import numpy as np

from config.status import FULL_HEALTH_PCT, STATUS_ORDER, HealthStatus
from config.units import HOURS
from insights.data.models import EffectiveParameters, HealthAssessment, LineHealth, Quantity
from insights.data.units import display_value, hours


def exceeded_life(total_running_hours: float, lifetime_hours: float) -> float:
    """Hours run past the rated lifetime; never negative."""
    return max(0.0, total_running_hours - lifetime_hours)


def health_percentage(total_running_hours: float, lifetime_hours: float) -> int:
    if lifetime_hours <= 0:
        return FULL_HEALTH_PCT
    remaining = (lifetime_hours - total_running_hours) / lifetime_hours * 100.0
    pct = float(np.clip(remaining, 0.0, 100.0))
    return int(np.floor(pct + 0.5))


def classify_status(total_running_hours: float, lifetime_hours: float) -> HealthStatus:
    if lifetime_hours == 0:
        return HealthStatus.HEALTHY
    if total_running_hours > lifetime_hours:
        return HealthStatus.ATTENTION
    if total_running_hours == lifetime_hours:
        return HealthStatus.MONITOR
    return HealthStatus.HEALTHY


def classify(
    total_running_hours: Quantity | float,
    lifetime_hours: Quantity | float,
) -> HealthAssessment:
    """
    Classify a part from its running hours and rated lifetime.

    Args:
        total_running_hours: Cumulative runtime (hours, or a Quantity in hours/days)
        lifetime_hours: Rated service life (hours, or a Quantity in hours/days)

    Negative inputs are not rejected; the arithmetic result is returned.
    """
    running = hours(total_running_hours)
    lifetime = hours(lifetime_hours)
    return HealthAssessment(
        status=classify_status(running, lifetime),
        health_percentage=health_percentage(running, lifetime),
        exceeded_life=Quantity(value=display_value(exceeded_life(running, lifetime)), unit=HOURS),
        total_running_hours=Quantity(value=running, unit=HOURS),
        lifetime=Quantity(value=lifetime, unit=HOURS),
    )


def assess(effective: EffectiveParameters) -> HealthAssessment:
    """Classify using the resolved lifetime (installation value when recorded)."""
    return classify(effective.total_running_hours, effective.life_time)


def worst_status(statuses: list[HealthStatus]) -> HealthStatus:
    if not statuses:
        return HealthStatus.HEALTHY
    return max(statuses, key=lambda s: STATUS_ORDER[s])


def compute_line_health(assessments: list[HealthAssessment]) -> LineHealth:
    """Line-level health: worst status and minimum percentage of its parts."""
    if not assessments:
        return LineHealth()
    return LineHealth(
        status=worst_status([a.status for a in assessments]),
        percentage=min(a.health_percentage for a in assessments),
    )
