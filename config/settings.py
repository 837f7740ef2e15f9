"""
config/settings.py
──────────────────
Engine configuration loaded from environment variables.
"""
import os
from dataclasses import dataclass


@dataclass
class Settings:
    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

    # Currency used when a cost record carries none
    DEFAULT_CURRENCY: str = os.getenv("DEFAULT_CURRENCY", "EUR")

    # Decimal places for non-integral displayed values
    DISPLAY_DECIMALS: int = int(os.getenv("DISPLAY_DECIMALS", "2"))

    # Overrides: an explicit zero falls back to the catalog default
    OVERRIDE_ZERO_IS_UNSET: bool = os.getenv("OVERRIDE_ZERO_IS_UNSET", "true").lower() == "true"


settings = Settings()
