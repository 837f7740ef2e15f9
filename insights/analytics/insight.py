"""
insights/analytics/insight.py
─────────────────────────────
One call from raw records to the full machine-insight panel:

  catalog + override (+ client) → resolve → assess / compute_losses / production
"""

from __future__ import annotations

from insights.analytics.health import assess
from insights.analytics.losses import compute_losses
from insights.analytics.production import production_for
from insights.analytics.resolution import resolve
from insights.data.models import CatalogEntry, ClientProfile, MachineInsight, Override


def build_insight(
    catalog: CatalogEntry,
    override: Override | None = None,
    client: ClientProfile | None = None,
    include_costs: bool = False,
    zero_is_unset: bool | None = None,
) -> MachineInsight:
    """Compute every derived value for one installed spare part."""
    effective = resolve(catalog, override, client, zero_is_unset=zero_is_unset)
    health = assess(effective)
    return MachineInsight(
        name=effective.name,
        capacity=effective.capacity,
        lifetime=effective.life_time,
        total_running_hours=effective.total_running_hours,
        exceeded_life=health.exceeded_life,
        daily_running_hours=effective.daily_running_hours,
        total_production=production_for(effective),
        health=health,
        losses=compute_losses(effective, include_costs=include_costs),
        effective=effective,
    )
