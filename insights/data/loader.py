"""
insights/data/loader.py
───────────────────────
Parse backend records (camelCase JSON) into engine models.

Provides:
  - load_json()           : Read a JSON file
  - load_catalog_entry()  : Spare-part record → CatalogEntry
  - load_override()       : Client-machine-spare-part record → Override
  - load_client()         : Client record → ClientProfile
  - split_spare_part()    : Spare-part record with an embedded
                            ``clientMachineSparePart`` → (CatalogEntry, Override)

Stored records are not uniform: some quantities were saved as bare numbers
("lifetimeOfRotor": 3600), client capacity is a string ("800"), and unset
values may be null. These are normalized here, before validation, so the
models only ever see {value, unit} objects.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from config.units import FIELD_UNITS
from insights.data.models import CatalogEntry, ClientProfile, Override

logger = logging.getLogger(__name__)

# camelCase record key → FIELD_UNITS key
_QUANTITY_KEYS: dict[str, str] = {
    "lifeTime": "life_time",
    "lifetimeOfRotor": "lifetime_of_rotor",
    "totalRunningHours": "total_running_hours",
    "dailyRunningHours": "daily_running_hours",
    "exceededLife": "exceeded_life",
    "capacityOfLine": "capacity",
    "capacity": "capacity",
    "installedMotorPower": "installed_motor_power",
    "totalProduction": "total_production",
    "totalFiberLoss": "total_fiber_loss",
}

_PRICE_KEYS = ("fiberCost", "powerCost")

_PAIR_KEYS: dict[str, str] = {
    "actualMotorPowerConsumption": "motor_power_percent",
    "powerConsumption": "power_consumption",
}


# ── Helpers ───────────────────────────────────────────────────────────────────


def _coerce_float(x: Any) -> float | None:
    if x is None or isinstance(x, bool):
        return None
    try:
        return float(x)
    except (TypeError, ValueError):
        return None


def _coerce_quantity(x: Any, field: str) -> dict | None:
    if isinstance(x, dict):
        value = _coerce_float(x.get("value"))
        if value is None:
            return None
        return {**x, "value": value, "unit": x.get("unit") or FIELD_UNITS[field]}
    value = _coerce_float(x)
    if value is None:
        return None
    logger.debug(f"Coerced bare {field} value {x!r} to a {FIELD_UNITS[field]} quantity")
    return {"value": value, "unit": FIELD_UNITS[field]}


def _coerce_price(x: Any) -> dict | None:
    if isinstance(x, dict):
        value = _coerce_float(x.get("value", x.get("amount")))
        if value is None:
            return None
        return {**x, "value": value}
    value = _coerce_float(x)
    return None if value is None else {"value": value}


def _normalize(record: dict) -> dict:
    out = dict(record)
    for key, field in _QUANTITY_KEYS.items():
        if key in out:
            coerced = _coerce_quantity(out[key], field)
            if coerced is None:
                out.pop(key)
            else:
                out[key] = coerced
    for key in _PRICE_KEYS:
        if key in out:
            coerced = _coerce_price(out[key])
            if coerced is None:
                out.pop(key)
            else:
                out[key] = coerced
    for key, field in _PAIR_KEYS.items():
        pair = out.get(key)
        if isinstance(pair, dict):
            states = {}
            for state, q in pair.items():
                coerced = _coerce_quantity(q, field)
                if coerced is not None:
                    states[state] = coerced
            out[key] = states
        elif pair is None:
            out.pop(key, None)
    if out.get("fiberLossRanges") is None:
        out.pop("fiberLossRanges", None)
    for key in ("client", "machine", "sparePart"):
        if isinstance(out.get(key), dict):
            out[key] = out[key].get("_id")
    return out


# ── Public API ────────────────────────────────────────────────────────────────


def load_json(path: str | Path) -> Any:
    with open(path, encoding="utf-8") as f:
        return json.load(f)


def load_catalog_entry(record: dict) -> CatalogEntry:
    """
    Validate a spare-part record.

    Raises:
        pydantic.ValidationError: malformed fiber-loss ranges or wrong types.
    """
    data = _normalize(record)
    data.pop("clientMachineSparePart", None)
    for key, field in _PAIR_KEYS.items():
        pair = data.get(key)
        if isinstance(pair, dict):
            for state in ("healthy", "wornout"):
                pair.setdefault(state, {"value": 0.0, "unit": FIELD_UNITS[field]})
    return CatalogEntry.model_validate(data)


def load_override(record: dict | None) -> Override | None:
    if not record:
        return None
    return Override.model_validate(_normalize(record))


def load_client(record: dict | None) -> ClientProfile | None:
    if not record:
        return None
    return ClientProfile.model_validate(_normalize(record))


def split_spare_part(record: dict) -> tuple[CatalogEntry, Override | None]:
    """Spare-part record as served with its installation data embedded."""
    return load_catalog_entry(record), load_override(record.get("clientMachineSparePart"))
