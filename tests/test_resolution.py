"""
tests/test_resolution.py
────────────────────────
Tests for catalog / client / override resolution.
"""
import logging

import pytest

from insights.analytics.resolution import (
    is_set,
    merge_fiber_loss_ranges,
    pick_price,
    resolve,
)
from insights.data.models import (
    ClientProfile,
    FiberLossValue,
    Override,
    PartialStatePair,
    Price,
    Quantity,
)


class TestIsSet:
    def test_none_is_unset(self):
        assert not is_set(None)
        assert not is_set(None, zero_is_unset=False)

    def test_zero_depends_on_policy(self):
        assert not is_set(0.0)
        assert is_set(0.0, zero_is_unset=False)

    def test_positive_is_set(self):
        assert is_set(0.01)


class TestResolveWithoutOverride:
    def test_catalog_values_used(self, catalog):
        eff = resolve(catalog)
        assert eff.life_time.value == 3600.0
        assert eff.fiber_cost == catalog.fiber_cost
        assert eff.actual_motor_power_consumption.healthy.value == 80.0
        assert [r.loss_percent for r in eff.fiber_loss_ranges] == pytest.approx([0.15, 0.25, 0.40, 0.50])

    def test_counters_default_to_zero_with_units(self, catalog):
        eff = resolve(catalog, None)
        assert eff.total_running_hours == Quantity(value=0.0, unit="Hrs")
        assert eff.daily_running_hours == Quantity(value=0.0, unit="Hrs")
        assert eff.installed_motor_power == Quantity(value=0.0, unit="kW")
        assert eff.capacity == Quantity(value=0.0, unit="TPD")
        assert eff.total_fiber_loss == Quantity(value=0.0, unit="Tons")


class TestResolveOverride:
    def test_override_lifetime_wins(self, catalog):
        ov = Override(lifetime_of_rotor=Quantity(value=4000, unit="Hrs"))
        assert resolve(catalog, ov).life_time.value == 4000.0

    def test_zero_override_falls_back_to_catalog(self, catalog):
        ov = Override(lifetime_of_rotor=Quantity(value=0, unit="Hrs"))
        assert resolve(catalog, ov).life_time.value == 3600.0

    def test_negative_override_falls_back_to_catalog(self, catalog):
        ov = Override(lifetime_of_rotor=Quantity(value=-5, unit="Hrs"))
        assert resolve(catalog, ov).life_time.value == 3600.0

    def test_explicit_zero_kept_when_policy_allows(self, catalog):
        ov = Override(
            lifetime_of_rotor=Quantity(value=0, unit="Hrs"),
            actual_motor_power_consumption=PartialStatePair(healthy=Quantity(value=0, unit="%")),
        )
        eff = resolve(catalog, ov, zero_is_unset=False)
        assert eff.life_time.value == 0.0
        assert eff.actual_motor_power_consumption.healthy.value == 0.0
        # absent fields still fall back
        assert eff.actual_motor_power_consumption.wornout.value == 90.0

    def test_counters_taken_from_override(self, catalog, override):
        eff = resolve(catalog, override)
        assert eff.total_running_hours.value == 5040.0
        assert eff.daily_running_hours.value == 24.0
        assert eff.installed_motor_power.value == 500.0
        assert eff.total_fiber_loss.value == 92.0

    def test_partial_motor_power_override(self, catalog):
        ov = Override(
            actual_motor_power_consumption=PartialStatePair(healthy=Quantity(value=85, unit="%"))
        )
        eff = resolve(catalog, ov)
        assert eff.actual_motor_power_consumption.healthy.value == 85.0
        assert eff.actual_motor_power_consumption.wornout.value == 90.0

    def test_unit_spelling_normalized(self, catalog):
        ov = Override(total_running_hours=Quantity(value=10, unit="hours"))
        assert resolve(catalog, ov).total_running_hours.unit == "Hrs"


class TestCostPrecedence:
    def test_override_cost_replaces_whole_record(self, catalog):
        ov = Override(fiber_cost=Price(amount=250, currency="USD", per_unit="Ton"))
        eff = resolve(catalog, ov)
        assert eff.fiber_cost.amount == 250.0
        assert eff.fiber_cost.currency == "USD"

    def test_client_cost_used_when_override_unset(self, catalog):
        ov = Override(fiber_cost=Price(amount=0, per_unit="Ton"))
        client = ClientProfile(fiber_cost=Price(amount=210, per_unit="Ton"))
        assert resolve(catalog, ov, client).fiber_cost.amount == 210.0

    def test_catalog_cost_is_last_resort(self, catalog):
        client = ClientProfile(power_cost=Price(amount=0, per_unit="kWhr"))
        assert resolve(catalog, None, client).power_cost.amount == pytest.approx(0.09)

    def test_pick_price_returns_copy(self):
        default = Price(amount=1.0)
        picked = pick_price(None, default=default)
        assert picked == default
        assert picked is not default


class TestCapacity:
    def test_client_capacity_wins(self, catalog, client_profile):
        ov = Override(capacity_of_line=Quantity(value=600, unit="TPD"))
        assert resolve(catalog, ov, client_profile).capacity.value == 800.0

    def test_override_capacity_when_client_has_none(self, catalog):
        ov = Override(capacity_of_line=Quantity(value=600, unit="TPD"))
        assert resolve(catalog, ov).capacity.value == 600.0


class TestFiberLossRangeMerge:
    def test_positional_replacement_keeps_bounds(self, catalog):
        values = [FiberLossValue(value=0.2), FiberLossValue(value=0), FiberLossValue(), FiberLossValue(value=0.6)]
        merged = merge_fiber_loss_ranges(catalog.fiber_loss_ranges, values)
        assert [r.loss_percent for r in merged] == pytest.approx([0.2, 0.25, 0.40, 0.6])
        assert [(r.min, r.max) for r in merged] == [(24, 240), (240, 480), (480, 720), (720, None)]

    def test_empty_override_uses_catalog(self, catalog):
        merged = merge_fiber_loss_ranges(catalog.fiber_loss_ranges, [])
        assert merged == catalog.fiber_loss_ranges

    def test_catalog_not_mutated(self, catalog):
        merge_fiber_loss_ranges(catalog.fiber_loss_ranges, [FiberLossValue(value=0.9)])
        assert catalog.fiber_loss_ranges[0].loss_percent == pytest.approx(0.15)

    def test_extra_override_values_ignored(self, catalog, caplog):
        values = [FiberLossValue(value=0.3)] * 6
        with caplog.at_level(logging.WARNING, logger="insights.analytics.resolution"):
            merged = merge_fiber_loss_ranges(catalog.fiber_loss_ranges, values)
        assert len(merged) == 4
        assert "Ignoring 2" in caplog.text


class TestIdempotence:
    def test_resolving_effective_values_is_a_no_op(self, catalog, override, client_profile):
        eff = resolve(catalog, override, client_profile)
        again = resolve(catalog, eff.as_override())
        assert again == eff

    def test_as_override_round_trips_without_client(self, catalog):
        eff = resolve(catalog)
        assert resolve(catalog, eff.as_override()) == eff
