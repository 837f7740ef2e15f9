"""
config/units.py
───────────────
Canonical unit strings and the default unit of every engine field.

Units follow the backend records: running hours are stored as "Hrs",
energy as "kWhr", line capacity as "TPD" (tonnes per day).
"""

HOURS = "Hrs"
DAYS = "Days"
PERCENT = "%"
KW = "kW"
KWH = "kWhr"
TPD = "TPD"
TONS = "Tons"
TON = "Ton"

HOURS_PER_DAY = 24.0

# Spellings seen in stored records → canonical unit
UNIT_ALIASES: dict[str, str] = {
    "hrs": HOURS,
    "hr": HOURS,
    "h": HOURS,
    "hour": HOURS,
    "hours": HOURS,
    "days": DAYS,
    "day": DAYS,
    "d": DAYS,
    "%": PERCENT,
    "percent": PERCENT,
    "kw": KW,
    "kwhr": KWH,
    "kwh": KWH,
    "tpd": TPD,
    "tons": TONS,
    "tonnes": TONS,
    "ton": TON,
    "tonne": TON,
}

# Multipliers into the base unit of each convertible family
CONVERSIONS: dict[tuple[str, str], float] = {
    (DAYS, HOURS): HOURS_PER_DAY,
    (HOURS, DAYS): 1.0 / HOURS_PER_DAY,
}

# ── Field defaults ────────────────────────────────────────────────────────────
FIELD_UNITS: dict[str, str] = {
    "life_time": HOURS,
    "lifetime_of_rotor": HOURS,
    "total_running_hours": HOURS,
    "daily_running_hours": HOURS,
    "exceeded_life": HOURS,
    "capacity": TPD,
    "total_production": TPD,
    "total_fiber_loss": TONS,
    "motor_power_percent": PERCENT,
    "power_consumption": KWH,
    "installed_motor_power": KW,
}

FIBER_COST_PER_UNIT = TON
POWER_COST_PER_UNIT = KWH
