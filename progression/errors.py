"""Exception types raised by the progression core.

All errors derive from ``ProgressionError`` and carry structured attributes so
callers can report the failing value without parsing the message.
"""

from __future__ import annotations

from typing import Any, Optional


class ProgressionError(Exception):
    """Base class for progression failures."""


class InvalidCurveIdentifier(ProgressionError, ValueError):
    def __init__(self, curve_id: Any):
        super().__init__(f"invalid growth curve identifier: {curve_id!r}")
        self.curve_id = curve_id


class DegenerateCurveBand(ProgressionError, ArithmeticError):
    """Adjacent level thresholds are equal, so a level band has zero width."""

    def __init__(self, level: int, threshold: int, curve: str = ""):
        where = f" on curve {curve}" if curve else ""
        super().__init__(f"zero-width band between level {level} and {level + 1}{where} (threshold {threshold})")
        self.level = level
        self.threshold = threshold
        self.curve = curve


class InvalidGrowthTable(ProgressionError, ValueError):
    def __init__(self, message: str, code: str, index: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.index = index


__all__ = ["ProgressionError", "InvalidCurveIdentifier", "DegenerateCurveBand", "InvalidGrowthTable"]
