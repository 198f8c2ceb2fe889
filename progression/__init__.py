"""
project: Creature Progression
module: __init__.py
License: MIT

Experience and level conversion for creature progression.

Callers pick a growth curve through the registry (``lookup``) and pass it, or
its identifier, to the pure calculator functions. Nothing here holds mutable
state: tables are built once at import and every call is a plain read.
"""

from .errors import DegenerateCurveBand, InvalidCurveIdentifier, InvalidGrowthTable, ProgressionError
from .models import (
    GrowthCurveId,
    GrowthCurveTable,
    Nature,
    experience_at_level,
    experience_for_level,
    experience_to_next_level,
    iter_curves,
    level_from_experience,
    level_from_experience_bisect,
    lookup,
    max_experience,
    nature_from_experience,
    progress_fraction,
)
from .services import ProgressSnapshot, build_snapshot

__version__ = "0.1.0"

__all__ = [
    "DegenerateCurveBand",
    "GrowthCurveId",
    "GrowthCurveTable",
    "InvalidCurveIdentifier",
    "InvalidGrowthTable",
    "Nature",
    "ProgressSnapshot",
    "ProgressionError",
    "build_snapshot",
    "experience_at_level",
    "experience_for_level",
    "experience_to_next_level",
    "iter_curves",
    "level_from_experience",
    "level_from_experience_bisect",
    "lookup",
    "max_experience",
    "nature_from_experience",
    "progress_fraction",
]
