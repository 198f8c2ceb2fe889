"""Nature (personality) derived from experience.

In the two earliest generations a creature's nature is not stored; it is
``experience % 25`` mapped onto the canonical nature order below.
"""

from __future__ import annotations

from enum import IntEnum

NATURE_COUNT = 25


class Nature(IntEnum):
    HARDY = 0
    LONELY = 1
    BRAVE = 2
    ADAMANT = 3
    NAUGHTY = 4
    BOLD = 5
    DOCILE = 6
    RELAXED = 7
    IMPISH = 8
    LAX = 9
    TIMID = 10
    HASTY = 11
    SERIOUS = 12
    JOLLY = 13
    NAIVE = 14
    MODEST = 15
    MILD = 16
    QUIET = 17
    BASHFUL = 18
    RASH = 19
    CALM = 20
    GENTLE = 21
    SASSY = 22
    CAREFUL = 23
    QUIRKY = 24


def nature_from_experience(experience: int) -> Nature:
    """Return the legacy nature for ``experience`` (negative input treated as 0)."""
    return Nature(max(0, int(experience)) % NATURE_COUNT)


__all__ = ["NATURE_COUNT", "Nature", "nature_from_experience"]
