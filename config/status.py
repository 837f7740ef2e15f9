"""
config/status.py
────────────────
Spare-part health states and their display configuration.
"""

from enum import Enum


class HealthStatus(str, Enum):
    HEALTHY = "healthy"
    MONITOR = "monitor"
    ATTENTION = "attention"


# Labels used by the backend / overview tables
STATUS_WIRE_LABELS: dict[str, str] = {
    HealthStatus.HEALTHY: "healthy",
    HealthStatus.MONITOR: "warning",
    HealthStatus.ATTENTION: "critical",
}

STATUS_LABELS_EN: dict[str, str] = {
    HealthStatus.HEALTHY: "Healthy",
    HealthStatus.MONITOR: "Monitor",
    HealthStatus.ATTENTION: "Attention",
}

STATUS_COLORS: dict[str, str] = {
    HealthStatus.HEALTHY: "#2ea44f",
    HealthStatus.MONITOR: "#e8a020",
    HealthStatus.ATTENTION: "#da3633",
}

# Severity ordering for sorting (higher = worse)
STATUS_ORDER: dict[str, int] = {
    HealthStatus.ATTENTION: 3,
    HealthStatus.MONITOR: 2,
    HealthStatus.HEALTHY: 1,
}

FULL_HEALTH_PCT = 100
