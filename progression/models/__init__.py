# Model package init
from .growth import GrowthCurveId, GrowthCurveTable, iter_curves, lookup, max_experience  # noqa: F401 re-export
from .nature import Nature, nature_from_experience  # noqa: F401 re-export
from .xp import (  # noqa: F401 re-export
    experience_at_level,
    experience_for_level,
    experience_to_next_level,
    level_from_experience,
    level_from_experience_bisect,
    progress_fraction,
)

__all__ = [
    "GrowthCurveId",
    "GrowthCurveTable",
    "Nature",
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
