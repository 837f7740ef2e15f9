"""
insights/data/models.py
───────────────────────
Pydantic v2 models for catalog entries, installation overrides, resolved
parameters, and every result the engine returns.

Field names are snake_case; backend records are camelCase and are accepted
through aliases (``lifeTime``, ``fiberLossRanges``, ``priceUnit`` ...).
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from config.settings import settings
from config.status import FULL_HEALTH_PCT, HealthStatus
from config.units import FIBER_COST_PER_UNIT, FIELD_UNITS, POWER_COST_PER_UNIT
from insights.errors import MalformedFiberLossRanges


class _Record(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def _zero(field: str):
    return lambda: Quantity(value=0.0, unit=FIELD_UNITS[field])


# ── Shared value types ────────────────────────────────────────────────────────


class Quantity(_Record):
    # integral display values stay int
    value: int | float = 0.0
    unit: str = ""


class Price(_Record):
    """Unit cost, e.g. 200 EUR per Ton."""
    amount: float = Field(default=0.0, alias="value")
    currency: str = Field(default=settings.DEFAULT_CURRENCY, alias="priceUnit")
    per_unit: str = ""


class StatePair(_Record):
    """One quantity per wear state of the component."""
    healthy: Quantity
    wornout: Quantity


class PartialStatePair(_Record):
    healthy: Quantity | None = None
    wornout: Quantity | None = None


class FiberLossRange(_Record):
    """Running-hours bracket [min, max) and its fiber-loss rate in %."""
    min: float
    max: float | None = None  # None → unbounded ("Above min")
    loss_percent: float = Field(default=0.0, alias="value")


class FiberLossValue(_Record):
    """Installation-specific rate for the catalog range at the same position."""
    value: float | None = None
    min: float | None = None
    max: float | None = None


def _percent_pair() -> StatePair:
    return StatePair(healthy=_zero("motor_power_percent")(), wornout=_zero("motor_power_percent")())


def _energy_pair() -> StatePair:
    return StatePair(healthy=_zero("power_consumption")(), wornout=_zero("power_consumption")())


def _fiber_price() -> Price:
    return Price(per_unit=FIBER_COST_PER_UNIT)


def _power_price() -> Price:
    return Price(per_unit=POWER_COST_PER_UNIT)


# ── Inputs ────────────────────────────────────────────────────────────────────


class CatalogEntry(_Record):
    """Reference data for a spare-part type."""
    id: str | None = Field(default=None, alias="_id")
    name: str = ""
    life_time: Quantity = Field(default_factory=_zero("life_time"))
    fiber_loss_ranges: list[FiberLossRange] = Field(default_factory=list)
    fiber_cost: Price = Field(default_factory=_fiber_price)
    actual_motor_power_consumption: StatePair = Field(default_factory=_percent_pair)
    power_consumption: StatePair = Field(default_factory=_energy_pair)
    power_cost: Price = Field(default_factory=_power_price)

    @model_validator(mode="after")
    def _check_ranges(self) -> CatalogEntry:
        ranges = self.fiber_loss_ranges
        for i, r in enumerate(ranges):
            if r.max is None:
                if i != len(ranges) - 1:
                    raise MalformedFiberLossRanges(f"unbounded range at position {i} is not last")
            elif r.max <= r.min:
                raise MalformedFiberLossRanges(f"range {i} has max {r.max} <= min {r.min}")
            if i == 0:
                continue
            prev = ranges[i - 1]
            if r.min <= prev.min:
                raise MalformedFiberLossRanges(f"range {i} min {r.min} is not above {prev.min}")
            if prev.max != r.min:
                raise MalformedFiberLossRanges(
                    f"range {i} starts at {r.min} but range {i - 1} ends at {prev.max}"
                )
        return self


class Override(_Record):
    """
    Values recorded for one (client, machine, spare part) installation.

    ``None`` means the field was never recorded; see the resolution rules
    for how present-but-zero values are treated.
    """
    id: str | None = Field(default=None, alias="_id")
    client: str | None = None
    machine: str | None = None
    spare_part: str | None = None

    capacity_of_line: Quantity | None = None
    lifetime_of_rotor: Quantity | None = None
    total_running_hours: Quantity | None = None
    daily_running_hours: Quantity | None = None
    installed_motor_power: Quantity | None = None
    fiber_loss_ranges: list[FiberLossValue] | None = None
    fiber_cost: Price | None = None
    power_cost: Price | None = None
    actual_motor_power_consumption: PartialStatePair | None = None
    power_consumption: PartialStatePair | None = None

    # Last results written back by callers; may be stale
    exceeded_life: Quantity | None = None
    total_production: Quantity | None = None
    total_fiber_loss: Quantity | None = None


class ClientProfile(_Record):
    """Site-wide values recorded on the client."""
    id: str | None = Field(default=None, alias="_id")
    name: str = ""
    capacity: Quantity | None = None
    fiber_cost: Price | None = None
    power_cost: Price | None = None


class EffectiveParameters(_Record):
    """Fully resolved parameter set for one computation. Never persisted."""
    name: str = ""
    life_time: Quantity
    total_running_hours: Quantity
    daily_running_hours: Quantity
    capacity: Quantity
    installed_motor_power: Quantity
    total_production: Quantity
    total_fiber_loss: Quantity
    fiber_loss_ranges: list[FiberLossRange]
    fiber_cost: Price
    power_cost: Price
    actual_motor_power_consumption: StatePair
    power_consumption: StatePair

    def as_override(self) -> Override:
        """Re-express every effective value as an installation override."""
        return Override(
            capacity_of_line=self.capacity.model_copy(),
            lifetime_of_rotor=self.life_time.model_copy(),
            total_running_hours=self.total_running_hours.model_copy(),
            daily_running_hours=self.daily_running_hours.model_copy(),
            installed_motor_power=self.installed_motor_power.model_copy(),
            fiber_loss_ranges=[
                FiberLossValue(value=r.loss_percent, min=r.min, max=r.max)
                for r in self.fiber_loss_ranges
            ],
            fiber_cost=self.fiber_cost.model_copy(),
            power_cost=self.power_cost.model_copy(),
            actual_motor_power_consumption=PartialStatePair(
                healthy=self.actual_motor_power_consumption.healthy.model_copy(),
                wornout=self.actual_motor_power_consumption.wornout.model_copy(),
            ),
            power_consumption=PartialStatePair(
                healthy=self.power_consumption.healthy.model_copy(),
                wornout=self.power_consumption.wornout.model_copy(),
            ),
            total_production=self.total_production.model_copy(),
            total_fiber_loss=self.total_fiber_loss.model_copy(),
        )


# ── Results ───────────────────────────────────────────────────────────────────


class HealthAssessment(_Record):
    status: HealthStatus = HealthStatus.HEALTHY
    health_percentage: int = Field(default=FULL_HEALTH_PCT, ge=0, le=100)
    exceeded_life: Quantity = Field(default_factory=_zero("exceeded_life"))
    total_running_hours: Quantity = Field(default_factory=_zero("total_running_hours"))
    lifetime: Quantity = Field(default_factory=_zero("life_time"))


class FiberRangeView(FiberLossRange):
    label: str


class FiberLossResult(_Record):
    ranges: list[FiberRangeView]
    current_range: FiberRangeView | None = None
    loss_percent: float = 0.0
    fiber_cost: Price
    total_fiber_loss: Quantity
    total_fiber_loss_cost: int | float | None = None


class PowerLossResult(_Record):
    installed_motor_power: Quantity
    actual_motor_power_consumption: StatePair
    power_consumption: StatePair
    excess_consumption: Quantity
    power_cost: Price
    healthy_power_cost: int | float | None = None
    wornout_power_cost: int | float | None = None
    excess_power_cost: int | float | None = None


class LossResult(_Record):
    fiber: FiberLossResult
    power: PowerLossResult


class MachineInsight(_Record):
    """Everything the insight panel shows for one installed spare part."""
    name: str = ""
    capacity: Quantity
    lifetime: Quantity
    total_running_hours: Quantity
    exceeded_life: Quantity
    daily_running_hours: Quantity
    total_production: Quantity
    health: HealthAssessment
    losses: LossResult
    effective: EffectiveParameters


class Installation(_Record):
    """A spare part installed on a client machine."""
    name: str
    catalog: CatalogEntry
    override: Override | None = None


class LineHealth(_Record):
    status: HealthStatus = HealthStatus.HEALTHY
    percentage: int = Field(default=FULL_HEALTH_PCT, ge=0, le=100)
