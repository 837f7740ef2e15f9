"""
insights/analytics/fleet.py
───────────────────────────
Client overview: one row per installed spare part and the line-level health.
"""
from __future__ import annotations

import pandas as pd

from config.status import STATUS_ORDER, STATUS_WIRE_LABELS, HealthStatus
from insights.analytics.health import assess, compute_line_health
from insights.analytics.resolution import resolve
from insights.data.models import ClientProfile, HealthAssessment, Installation, LineHealth

SUMMARY_COLUMNS = [
    "name",
    "status",
    "status_label",
    "health_percentage",
    "lifetime_hours",
    "total_running_hours",
    "exceeded_life_hours",
]


def _row(name: str, a: HealthAssessment) -> dict:
    return {
        "name": name,
        "status": a.status,
        "status_label": STATUS_WIRE_LABELS[a.status],
        "health_percentage": a.health_percentage,
        "lifetime_hours": a.lifetime.value,
        "total_running_hours": a.total_running_hours.value,
        "exceeded_life_hours": a.exceeded_life.value,
    }


def summarize_installations(
    installations: list[Installation],
    client: ClientProfile | None = None,
) -> pd.DataFrame:
    """Health table for a client's installations, worst first."""
    if not installations:
        return pd.DataFrame(columns=SUMMARY_COLUMNS)

    rows = [
        _row(inst.name, assess(resolve(inst.catalog, inst.override, client)))
        for inst in installations
    ]
    df = pd.DataFrame(rows, columns=SUMMARY_COLUMNS)
    df["_order"] = df["status"].map(lambda s: STATUS_ORDER[HealthStatus(s)])
    df = df.sort_values(["_order", "health_percentage"], ascending=[False, True], kind="stable")
    return df.drop(columns="_order").reset_index(drop=True)


def line_health(summary: pd.DataFrame) -> LineHealth:
    """Worst status and lowest health percentage in the table."""
    if summary.empty:
        return LineHealth()
    assessments = [
        HealthAssessment(status=s, health_percentage=int(p))
        for s, p in zip(summary["status"], summary["health_percentage"])
    ]
    return compute_line_health(assessments)
