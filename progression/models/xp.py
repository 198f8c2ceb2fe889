"""
project: Creature Progression
module: xp.py
License: MIT

Experience <-> level conversion against a growth curve table.

Every function accepts either a ``GrowthCurveTable`` or a curve identifier
(resolved through ``growth.lookup``). All functions are pure; out-of-range
numeric input is clamped rather than rejected so UI update loops can pass
boundary values straight through:

  experience  clamped into [0, 2**32 - 1]
  level       values <= 1 read as level 1, values > 100 read as level 100
"""

from __future__ import annotations

from bisect import bisect_right
from typing import Optional

from ..config import get_config
from ..errors import DegenerateCurveBand
from ..logging_utils import get_logger
from .growth import MAX_EXPERIENCE, MAX_LEVEL, MIN_LEVEL, CurveLike, GrowthCurveTable, resolve

_log = get_logger("xp")


def clamp_experience(exp: int) -> int:
    exp = int(exp)
    if exp < 0:
        return 0
    if exp > MAX_EXPERIENCE:
        return MAX_EXPERIENCE
    return exp


def level_from_experience(exp: int, curve: CurveLike) -> int:
    """Return the level (1..100) held with ``exp`` experience.

    The answer is the greatest level whose threshold is <= ``exp``. Anything at
    or past the level-100 threshold returns 100 before the scan starts, which
    also keeps the scan inside the table.

    Scans upward from level 1: most creatures sit low on the curve and the
    table is only 100 entries, so this beats a binary search in practice.
    ``level_from_experience_bisect`` gives identical results.
    """
    table = resolve(curve)
    exp = clamp_experience(exp)
    if exp >= table[-1]:
        return MAX_LEVEL
    level = MIN_LEVEL
    while exp >= table[level]:
        level += 1
    return level


def level_from_experience_bisect(exp: int, curve: CurveLike) -> int:
    table = resolve(curve)
    exp = clamp_experience(exp)
    if exp >= table[-1]:
        return MAX_LEVEL
    # thresholds[0] == 0 <= exp, so the insertion point is always >= 1
    return bisect_right(table.thresholds, exp)


def experience_at_level(level: int, table: GrowthCurveTable) -> int:
    """Unchecked threshold read. Caller guarantees ``1 <= level <= 100``."""
    return table[level - 1]


def experience_for_level(level: int, curve: CurveLike) -> int:
    """Minimum experience for ``level``, clamped to the 1..100 range.

    Level 1 (and anything below it) is 0 by definition, so the curve is not
    consulted in that case; an invalid identifier still raises because the
    curve is resolved first.
    """
    table = resolve(curve)
    level = int(level)
    if level <= MIN_LEVEL:
        return 0
    if level > MAX_LEVEL:
        level = MAX_LEVEL
    return experience_at_level(level, table)


def experience_to_next_level(level: int, curve: CurveLike) -> int:
    """Width of the band between ``level`` and ``level + 1`` (0 at level 100).

    Levels below 1 read as level 1, so level 0 gets the level-1 band width.
    """
    table = resolve(curve)
    level = max(MIN_LEVEL, int(level))
    if level >= MAX_LEVEL:
        return 0
    current = experience_at_level(level, table)
    following = experience_at_level(level + 1, table)
    return following - current


def progress_fraction(level: int, exp: int, curve: CurveLike, strict: Optional[bool] = None) -> float:
    """Fraction of the current level band already earned, for progress bars.

    Returns a value in [0, 1) when ``level == level_from_experience(exp)``.
    That consistency is the caller's job: inconsistent input still gets the
    plain arithmetic result, which may fall outside [0, 1).

    A zero-width band (equal adjacent thresholds) logs
    ``degenerate_curve_band`` and returns 0.0, or raises
    ``DegenerateCurveBand`` when ``strict`` (default: config
    ``strict_curves``) is set.
    """
    table = resolve(curve)
    level = max(MIN_LEVEL, int(level))
    if level >= MAX_LEVEL:
        return 0.0
    current = experience_at_level(level, table)
    following = experience_at_level(level + 1, table)
    amount = following - current
    if amount == 0:
        if strict is None:
            strict = get_config().strict_curves
        _log.warn(event="degenerate_curve_band", curve=table.name, band_level=level, threshold=current)
        if strict:
            raise DegenerateCurveBand(level, current, table.name)
        return 0.0
    progress = clamp_experience(exp) - current
    return progress / amount


__all__ = [
    "clamp_experience",
    "level_from_experience",
    "level_from_experience_bisect",
    "experience_at_level",
    "experience_for_level",
    "experience_to_next_level",
    "progress_fraction",
]
