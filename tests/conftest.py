"""
tests/conftest.py
─────────────────
Shared pytest fixtures: the "Vokes rotor" sample installation on an
800 TPD line, as recorded by the monitoring backend.
"""
import os

import pytest

os.environ.setdefault("OVERRIDE_ZERO_IS_UNSET", "true")
os.environ.setdefault("LOG_LEVEL", "WARNING")


@pytest.fixture
def catalog():
    from insights.data.models import CatalogEntry
    return CatalogEntry.model_validate({
        "_id": "sp-1",
        "name": "Vokes rotor",
        "lifeTime": {"value": 3600, "unit": "Hrs"},
        "fiberLossRanges": [
            {"min": 24, "max": 240, "value": 0.15},
            {"min": 240, "max": 480, "value": 0.25},
            {"min": 480, "max": 720, "value": 0.40},
            {"min": 720, "max": None, "value": 0.50},
        ],
        "fiberCost": {"value": 200, "priceUnit": "EUR", "perUnit": "Ton"},
        "actualMotorPowerConsumption": {
            "healthy": {"value": 80, "unit": "%"},
            "wornout": {"value": 90, "unit": "%"},
        },
        "powerConsumption": {
            "healthy": {"value": 400, "unit": "kWhr"},
            "wornout": {"value": 450, "unit": "kWhr"},
        },
        "powerCost": {"value": 0.09, "priceUnit": "EUR", "perUnit": "kWhr"},
    })


@pytest.fixture
def override():
    from insights.data.models import Override, Quantity
    return Override(
        client="client-1",
        machine="mc-1",
        spare_part="sp-1",
        total_running_hours=Quantity(value=5040, unit="Hrs"),
        daily_running_hours=Quantity(value=24, unit="Hrs"),
        installed_motor_power=Quantity(value=500, unit="kW"),
        total_fiber_loss=Quantity(value=92, unit="Tons"),
    )


@pytest.fixture
def client_profile():
    from insights.data.models import ClientProfile, Quantity
    return ClientProfile(name="Mill A", capacity=Quantity(value=800, unit="TPD"))


@pytest.fixture
def bracket_ranges():
    from insights.data.models import FiberLossRange
    return [
        FiberLossRange(min=0, max=240, loss_percent=0.15),
        FiberLossRange(min=240, max=480, loss_percent=0.25),
        FiberLossRange(min=480, max=720, loss_percent=0.40),
        FiberLossRange(min=720, max=None, loss_percent=0.50),
    ]


@pytest.fixture
def backend_record():
    """Spare-part record as served by the backend, installation embedded."""
    return {
        "_id": "sp-1",
        "name": "Vokes rotor",
        "machine": {"_id": "mc-1", "name": "Hydrapulper 11 DR"},
        "lifeTime": {"value": 3600, "unit": "Hrs"},
        "fiberLossRanges": [
            {"_id": "fl-1", "min": 24, "max": 240, "value": 0.15},
            {"_id": "fl-2", "min": 240, "max": 480, "value": 0.25},
            {"_id": "fl-3", "min": 480, "max": 720, "value": 0.40},
            {"_id": "fl-4", "min": 720, "max": None, "value": 0.50},
        ],
        "fiberCost": {"value": 200, "priceUnit": "EUR", "perUnit": "Ton"},
        "actualMotorPowerConsumption": {
            "healthy": {"value": 80, "unit": "%"},
            "wornout": {"value": 90, "unit": "%"},
        },
        "powerConsumption": {
            "healthy": {"value": 400, "unit": "kWhr"},
            "wornout": {"value": 450, "unit": "kWhr"},
        },
        "powerCost": {"value": 0.09, "priceUnit": "EUR", "perUnit": "kWhr"},
        "clientMachineSparePart": {
            "_id": "cmsp-1",
            "client": "client-1",
            "machine": "mc-1",
            "sparePart": "sp-1",
            "capacityOfLine": {"value": 800, "unit": "TPD"},
            "lifetimeOfRotor": 3600,
            "totalRunningHours": {"value": 5040, "unit": "Hrs"},
            "dailyRunningHours": {"value": 24, "unit": "Hrs"},
            "totalFiberLoss": {"value": 92, "unit": "Tons"},
            "fiberLossRanges": [],
            "fiberCost": None,
            "powerCost": {"value": 0.09, "priceUnit": "EUR", "perUnit": "kWhr"},
            "installedMotorPower": {"value": 500, "unit": "kW"},
        },
    }
