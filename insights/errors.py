"""
insights/errors.py
──────────────────
Exception taxonomy.

Computation functions are total over their inputs; these are raised only at
boundaries: model construction and explicit unit conversion.
"""


class InsightError(Exception):
    """Base class for engine errors."""


class MalformedFiberLossRanges(InsightError, ValueError):
    """Fiber-loss ranges are not ascending, contiguous and non-overlapping."""


class UnitMismatchError(InsightError, ValueError):
    """A quantity cannot be expressed in the requested unit."""

    def __init__(self, unit: str, expected: str):
        self.unit = unit
        self.expected = expected
        super().__init__(f"cannot convert '{unit}' to '{expected}'")
