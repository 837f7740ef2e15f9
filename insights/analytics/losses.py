"""
insights/analytics/losses.py
────────────────────────────
Fiber and power losses attributable to component wear.

Provides:
  - Fiber-loss bracket lookup: the [min, max) range holding the current
    running hours, and its loss rate (%)
  - Power consumption per wear state: installed kW × observed consumption %
  - Excess (worn-out minus healthy) consumption
  - Optional monetary totals

Computed quantities and totals are rounded with ``display_value``.

The authoritative total fiber loss is a recorded quantity and is passed
through untouched; it is not derived from the bracket rate.
"""
from __future__ import annotations

from config.units import HOURS, KW, KWH, PERCENT
from insights.data.models import (
    EffectiveParameters,
    FiberLossRange,
    FiberLossResult,
    FiberRangeView,
    LossResult,
    PowerLossResult,
    Quantity,
    StatePair,
)
from insights.data.units import display_value, hours, magnitude

# ── Fiber loss ────────────────────────────────────────────────────────────────


def _fmt(x: float) -> str:
    return f"{x:g}"


def range_label(r: FiberLossRange) -> str:
    """Display label, e.g. "240 - 480 Hrs" or "Above 720 Hrs"."""
    if r.max is None:
        return f"Above {_fmt(r.min)} {HOURS}"
    return f"{_fmt(r.min)} - {_fmt(r.max)} {HOURS}"


def select_fiber_loss_range(
    ranges: list[FiberLossRange],
    total_running_hours: Quantity | float,
) -> FiberLossRange | None:
    """
    Return the range whose [min, max) bracket holds the running hours.

    Below the lowest min → None. At or above the last bounded max with no
    open-ended range → the last range.
    """
    if not ranges:
        return None
    h = hours(total_running_hours)
    if h < ranges[0].min:
        return None
    for r in ranges:
        if h >= r.min and (r.max is None or h < r.max):
            return r
    return ranges[-1]


def fiber_loss_rate(ranges: list[FiberLossRange], total_running_hours: Quantity | float) -> float:
    r = select_fiber_loss_range(ranges, total_running_hours)
    return r.loss_percent if r is not None else 0.0


def _view(r: FiberLossRange) -> FiberRangeView:
    return FiberRangeView(min=r.min, max=r.max, loss_percent=r.loss_percent, label=range_label(r))


def compute_fiber_loss(effective: EffectiveParameters, include_costs: bool = False) -> FiberLossResult:
    current = select_fiber_loss_range(effective.fiber_loss_ranges, effective.total_running_hours)
    total = effective.total_fiber_loss
    return FiberLossResult(
        ranges=[_view(r) for r in effective.fiber_loss_ranges],
        current_range=_view(current) if current is not None else None,
        loss_percent=current.loss_percent if current is not None else 0.0,
        fiber_cost=effective.fiber_cost.model_copy(),
        total_fiber_loss=total.model_copy(),
        total_fiber_loss_cost=(
            display_value(total.value * effective.fiber_cost.amount) if include_costs else None
        ),
    )


# ── Power loss ────────────────────────────────────────────────────────────────


def power_consumption(installed_motor_power: Quantity | float, percent: Quantity | float) -> Quantity:
    """Draw of the motor in one wear state: installed kW × consumption % / 100."""
    kw = magnitude(installed_motor_power, KW)
    pct = magnitude(percent, PERCENT)
    return Quantity(value=display_value(kw * pct / 100.0), unit=KWH)


def compute_power_loss(effective: EffectiveParameters, include_costs: bool = False) -> PowerLossResult:
    installed = effective.installed_motor_power
    pct = effective.actual_motor_power_consumption
    consumption = StatePair(
        healthy=power_consumption(installed, pct.healthy),
        wornout=power_consumption(installed, pct.wornout),
    )
    excess = Quantity(value=display_value(consumption.wornout.value - consumption.healthy.value), unit=KWH)
    price = effective.power_cost.amount

    result = PowerLossResult(
        installed_motor_power=installed.model_copy(),
        actual_motor_power_consumption=pct.model_copy(deep=True),
        power_consumption=consumption,
        excess_consumption=excess,
        power_cost=effective.power_cost.model_copy(),
    )
    if include_costs:
        result.healthy_power_cost = display_value(consumption.healthy.value * price)
        result.wornout_power_cost = display_value(consumption.wornout.value * price)
        result.excess_power_cost = display_value(excess.value * price)
    return result


# ── Main API ──────────────────────────────────────────────────────────────────


def compute_losses(effective: EffectiveParameters, include_costs: bool = False) -> LossResult:
    """Fiber and power losses for one installation; no side effects."""
    return LossResult(
        fiber=compute_fiber_loss(effective, include_costs),
        power=compute_power_loss(effective, include_costs),
    )
