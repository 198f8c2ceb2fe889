"""Progress snapshot for presentation layers.

Bundles every derived value a creature summary or progress bar needs from a
single ``(experience, curve_id)`` pair, so callers resolve the curve once and
never mix values computed against different tables.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from progression.models.growth import MAX_LEVEL, CurveLike, resolve
from progression.models.nature import Nature, nature_from_experience
from progression.models.xp import (
    clamp_experience,
    experience_for_level,
    experience_to_next_level,
    level_from_experience,
    progress_fraction,
)


@dataclass(frozen=True)
class ProgressSnapshot:
    curve: str
    experience: int
    level: int
    experience_required: int
    experience_next: int
    experience_to_next_level: int
    progress_fraction: float
    nature: Nature

    @property
    def is_max_level(self) -> bool:
        return self.level >= MAX_LEVEL

    def as_dict(self) -> Dict[str, Any]:
        return {
            "curve": self.curve,
            "experience": self.experience,
            "level": self.level,
            "experience_required": self.experience_required,
            "experience_next": self.experience_next,
            "experience_to_next_level": self.experience_to_next_level,
            "progress_fraction": self.progress_fraction,
            "nature": self.nature.name.lower(),
            "max_level": self.is_max_level,
        }


def build_snapshot(experience: int, curve_id: CurveLike, strict: Optional[bool] = None) -> ProgressSnapshot:
    """Derive level, thresholds, progress and nature for one creature.

    ``experience_next`` is the next level's threshold, or the level-100
    threshold once the cap is reached.
    """
    table = resolve(curve_id)
    exp = clamp_experience(experience)
    level = level_from_experience(exp, table)
    return ProgressSnapshot(
        curve=table.name,
        experience=exp,
        level=level,
        experience_required=experience_for_level(level, table),
        experience_next=experience_for_level(level + 1, table),
        experience_to_next_level=experience_to_next_level(level, table),
        progress_fraction=progress_fraction(level, exp, table, strict=strict),
        nature=nature_from_experience(exp),
    )


__all__ = ["ProgressSnapshot", "build_snapshot"]
