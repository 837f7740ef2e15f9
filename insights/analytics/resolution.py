"""
insights/analytics/resolution.py
────────────────────────────────
Merge a catalog entry with an installation override into EffectiveParameters.

Precedence, per field:
  override   — used when present and meaningfully set
  client     — site-wide costs and line capacity
  catalog    — spare-part-type defaults
  zero       — {0, <field unit>} when nobody recorded the field

"Meaningfully set" means value > 0 (cost records: amount > 0). With
``zero_is_unset=False`` any present override value wins, including zero.
Resolution never fails.
"""

from __future__ import annotations

import logging

from config.settings import settings
from insights.data.models import (
    CatalogEntry,
    ClientProfile,
    EffectiveParameters,
    FiberLossRange,
    FiberLossValue,
    Override,
    PartialStatePair,
    Price,
    Quantity,
    StatePair,
)
from insights.data.units import canonical, zero

logger = logging.getLogger(__name__)


# ── Presence helpers ──────────────────────────────────────────────────────────


def is_set(value: float | None, zero_is_unset: bool = True) -> bool:
    if value is None:
        return False
    return value > 0 if zero_is_unset else True


def pick_quantity(
    *candidates: Quantity | None,
    default: Quantity,
    zero_is_unset: bool = True,
) -> Quantity:
    """First candidate whose value is set, else ``default``."""
    for q in candidates:
        if q is not None and is_set(q.value, zero_is_unset):
            return canonical(q)
    return canonical(default)


def pick_price(*candidates: Price | None, default: Price, zero_is_unset: bool = True) -> Price:
    """First cost record whose amount is set; the whole record wins."""
    for p in candidates:
        if p is not None and is_set(p.amount, zero_is_unset):
            return p.model_copy()
    return default.model_copy()


def merge_fiber_loss_ranges(
    catalog_ranges: list[FiberLossRange],
    override_values: list[FiberLossValue] | None,
    zero_is_unset: bool = True,
) -> list[FiberLossRange]:
    """
    Apply override rates positionally onto the catalog brackets.

    Bracket bounds always come from the catalog; only the rate is replaced.
    """
    merged = [r.model_copy() for r in catalog_ranges]
    if not override_values:
        return merged

    if len(override_values) > len(catalog_ranges):
        logger.warning(
            f"Ignoring {len(override_values) - len(catalog_ranges)} fiber-loss override "
            f"value(s) beyond the {len(catalog_ranges)} catalog range(s)"
        )
    for i, ov in enumerate(override_values[: len(catalog_ranges)]):
        if is_set(ov.value, zero_is_unset):
            merged[i] = merged[i].model_copy(update={"loss_percent": float(ov.value)})
    return merged


def _pick_pair(
    override: PartialStatePair | None,
    catalog: StatePair,
    zero_is_unset: bool,
) -> StatePair:
    return StatePair(
        healthy=pick_quantity(
            override.healthy if override else None,
            default=catalog.healthy,
            zero_is_unset=zero_is_unset,
        ),
        wornout=pick_quantity(
            override.wornout if override else None,
            default=catalog.wornout,
            zero_is_unset=zero_is_unset,
        ),
    )


# ── Main API ──────────────────────────────────────────────────────────────────


def resolve(
    catalog: CatalogEntry,
    override: Override | None = None,
    client: ClientProfile | None = None,
    zero_is_unset: bool | None = None,
) -> EffectiveParameters:
    """Resolve the parameter set used for one installation."""
    if zero_is_unset is None:
        zero_is_unset = settings.OVERRIDE_ZERO_IS_UNSET
    ov = override or Override()
    cl = client or ClientProfile()
    z = zero_is_unset

    effective = EffectiveParameters(
        name=catalog.name,
        life_time=pick_quantity(
            ov.lifetime_of_rotor,
            catalog.life_time,
            default=zero("life_time"),
            zero_is_unset=z,
        ),
        total_running_hours=pick_quantity(
            ov.total_running_hours, default=zero("total_running_hours"), zero_is_unset=z
        ),
        daily_running_hours=pick_quantity(
            ov.daily_running_hours, default=zero("daily_running_hours"), zero_is_unset=z
        ),
        capacity=pick_quantity(
            cl.capacity, ov.capacity_of_line, default=zero("capacity"), zero_is_unset=z
        ),
        installed_motor_power=pick_quantity(
            ov.installed_motor_power, default=zero("installed_motor_power"), zero_is_unset=z
        ),
        total_production=pick_quantity(
            ov.total_production, default=zero("total_production"), zero_is_unset=z
        ),
        total_fiber_loss=pick_quantity(
            ov.total_fiber_loss, default=zero("total_fiber_loss"), zero_is_unset=z
        ),
        fiber_loss_ranges=merge_fiber_loss_ranges(
            catalog.fiber_loss_ranges, ov.fiber_loss_ranges, zero_is_unset=z
        ),
        fiber_cost=pick_price(ov.fiber_cost, cl.fiber_cost, default=catalog.fiber_cost, zero_is_unset=z),
        power_cost=pick_price(ov.power_cost, cl.power_cost, default=catalog.power_cost, zero_is_unset=z),
        actual_motor_power_consumption=_pick_pair(
            ov.actual_motor_power_consumption, catalog.actual_motor_power_consumption, z
        ),
        power_consumption=_pick_pair(ov.power_consumption, catalog.power_consumption, z),
    )

    if override is None:
        logger.debug(f"No override for '{catalog.name}', using catalog defaults")
    return effective
