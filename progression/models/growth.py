"""
project: Creature Progression
module: growth.py
License: MIT

Growth curve tables and the curve registry.

Each growth curve maps levels 1..100 to the minimum cumulative experience
required to hold that level (index 0 = level 1, always 0). Tables are built
once at import and never mutated; ``lookup`` is a pure read of the registry.

The bundled data set supplies the same thresholds for all six identifiers.
They are still declared as separate literals: each curve is an independent
table and nothing may rely on two of them being equal.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Dict, Iterator, Tuple, Union

from ..errors import InvalidCurveIdentifier, InvalidGrowthTable
from ..logging_utils import get_logger

_log = get_logger("growth")

MIN_LEVEL = 1
MAX_LEVEL = 100
MAX_EXPERIENCE = 0xFFFFFFFF  # unsigned 32-bit counter


class GrowthCurveId(IntEnum):
    MEDIUM_FAST = 0
    ERRATIC = 1
    FLUCTUATING = 2
    MEDIUM_SLOW = 3
    FAST = 4
    SLOW = 5


@dataclass(frozen=True)
class GrowthCurveTable:
    """Immutable per-level experience thresholds for one curve.

    Validation rules (``InvalidGrowthTable.code``):
      length      exactly 100 entries
      type        every entry is an int (bools rejected)
      range       0 <= value <= 2**32 - 1
      origin      level 1 requires 0 experience
      order       thresholds never decrease
    """

    name: str
    thresholds: Tuple[int, ...]

    def __post_init__(self):
        values = tuple(self.thresholds)
        object.__setattr__(self, "thresholds", values)
        if len(values) != MAX_LEVEL:
            raise InvalidGrowthTable(f"{self.name}: expected {MAX_LEVEL} thresholds, got {len(values)}", "length")
        prev = 0
        for idx, value in enumerate(values):
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidGrowthTable(f"{self.name}: threshold {idx} is not an integer", "type", idx)
            if value < 0 or value > MAX_EXPERIENCE:
                raise InvalidGrowthTable(f"{self.name}: threshold {idx} out of uint32 range", "range", idx)
            if idx == 0 and value != 0:
                raise InvalidGrowthTable(f"{self.name}: level 1 must require 0 experience", "origin", 0)
            if value < prev:
                raise InvalidGrowthTable(f"{self.name}: threshold {idx} decreases ({value} < {prev})", "order", idx)
            prev = value

    def __len__(self) -> int:
        return len(self.thresholds)

    def __getitem__(self, index):
        return self.thresholds[index]

    def __iter__(self) -> Iterator[int]:
        return iter(self.thresholds)

    @property
    def cap(self) -> int:
        """Experience at which level 100 is reached."""
        return self.thresholds[-1]


CurveLike = Union[GrowthCurveTable, GrowthCurveId, int]

_GROWTH_0 = (
    0, 10, 33, 80, 156, 270, 428, 640, 911, 1250,
    1663, 2160, 2746, 3430, 4218, 5120, 6141, 7290, 8573, 10000,
    11576, 13310, 15208, 17280, 19531, 21970, 24603, 27440, 30486, 33750,
    37238, 40960, 44921, 49130, 53593, 58320, 63316, 68590, 74148, 80000,
    86151, 92610, 99383, 106480, 113906, 121670, 129778, 138240, 147061, 156250,
    165813, 175760, 186096, 196830, 207968, 219520, 231491, 243890, 256723, 270000,
    283726, 297910, 312558, 327680, 343281, 359370, 375953, 393040, 410636, 428750,
    447388, 466560, 486271, 506530, 527343, 548720, 570666, 593190, 616298, 640000,
    664301, 689210, 714733, 740880, 767656, 795070, 823128, 851840, 881211, 911250,
    941963, 973360, 1005446, 1038230, 1071718, 1105920, 1140841, 1176490, 1212873, 1250000,
)

_GROWTH_1 = (
    0, 10, 33, 80, 156, 270, 428, 640, 911, 1250,
    1663, 2160, 2746, 3430, 4218, 5120, 6141, 7290, 8573, 10000,
    11576, 13310, 15208, 17280, 19531, 21970, 24603, 27440, 30486, 33750,
    37238, 40960, 44921, 49130, 53593, 58320, 63316, 68590, 74148, 80000,
    86151, 92610, 99383, 106480, 113906, 121670, 129778, 138240, 147061, 156250,
    165813, 175760, 186096, 196830, 207968, 219520, 231491, 243890, 256723, 270000,
    283726, 297910, 312558, 327680, 343281, 359370, 375953, 393040, 410636, 428750,
    447388, 466560, 486271, 506530, 527343, 548720, 570666, 593190, 616298, 640000,
    664301, 689210, 714733, 740880, 767656, 795070, 823128, 851840, 881211, 911250,
    941963, 973360, 1005446, 1038230, 1071718, 1105920, 1140841, 1176490, 1212873, 1250000,
)

_GROWTH_2 = (
    0, 10, 33, 80, 156, 270, 428, 640, 911, 1250,
    1663, 2160, 2746, 3430, 4218, 5120, 6141, 7290, 8573, 10000,
    11576, 13310, 15208, 17280, 19531, 21970, 24603, 27440, 30486, 33750,
    37238, 40960, 44921, 49130, 53593, 58320, 63316, 68590, 74148, 80000,
    86151, 92610, 99383, 106480, 113906, 121670, 129778, 138240, 147061, 156250,
    165813, 175760, 186096, 196830, 207968, 219520, 231491, 243890, 256723, 270000,
    283726, 297910, 312558, 327680, 343281, 359370, 375953, 393040, 410636, 428750,
    447388, 466560, 486271, 506530, 527343, 548720, 570666, 593190, 616298, 640000,
    664301, 689210, 714733, 740880, 767656, 795070, 823128, 851840, 881211, 911250,
    941963, 973360, 1005446, 1038230, 1071718, 1105920, 1140841, 1176490, 1212873, 1250000,
)

_GROWTH_3 = (
    0, 10, 33, 80, 156, 270, 428, 640, 911, 1250,
    1663, 2160, 2746, 3430, 4218, 5120, 6141, 7290, 8573, 10000,
    11576, 13310, 15208, 17280, 19531, 21970, 24603, 27440, 30486, 33750,
    37238, 40960, 44921, 49130, 53593, 58320, 63316, 68590, 74148, 80000,
    86151, 92610, 99383, 106480, 113906, 121670, 129778, 138240, 147061, 156250,
    165813, 175760, 186096, 196830, 207968, 219520, 231491, 243890, 256723, 270000,
    283726, 297910, 312558, 327680, 343281, 359370, 375953, 393040, 410636, 428750,
    447388, 466560, 486271, 506530, 527343, 548720, 570666, 593190, 616298, 640000,
    664301, 689210, 714733, 740880, 767656, 795070, 823128, 851840, 881211, 911250,
    941963, 973360, 1005446, 1038230, 1071718, 1105920, 1140841, 1176490, 1212873, 1250000,
)

_GROWTH_4 = (
    0, 10, 33, 80, 156, 270, 428, 640, 911, 1250,
    1663, 2160, 2746, 3430, 4218, 5120, 6141, 7290, 8573, 10000,
    11576, 13310, 15208, 17280, 19531, 21970, 24603, 27440, 30486, 33750,
    37238, 40960, 44921, 49130, 53593, 58320, 63316, 68590, 74148, 80000,
    86151, 92610, 99383, 106480, 113906, 121670, 129778, 138240, 147061, 156250,
    165813, 175760, 186096, 196830, 207968, 219520, 231491, 243890, 256723, 270000,
    283726, 297910, 312558, 327680, 343281, 359370, 375953, 393040, 410636, 428750,
    447388, 466560, 486271, 506530, 527343, 548720, 570666, 593190, 616298, 640000,
    664301, 689210, 714733, 740880, 767656, 795070, 823128, 851840, 881211, 911250,
    941963, 973360, 1005446, 1038230, 1071718, 1105920, 1140841, 1176490, 1212873, 1250000,
)

_GROWTH_5 = (
    0, 10, 33, 80, 156, 270, 428, 640, 911, 1250,
    1663, 2160, 2746, 3430, 4218, 5120, 6141, 7290, 8573, 10000,
    11576, 13310, 15208, 17280, 19531, 21970, 24603, 27440, 30486, 33750,
    37238, 40960, 44921, 49130, 53593, 58320, 63316, 68590, 74148, 80000,
    86151, 92610, 99383, 106480, 113906, 121670, 129778, 138240, 147061, 156250,
    165813, 175760, 186096, 196830, 207968, 219520, 231491, 243890, 256723, 270000,
    283726, 297910, 312558, 327680, 343281, 359370, 375953, 393040, 410636, 428750,
    447388, 466560, 486271, 506530, 527343, 548720, 570666, 593190, 616298, 640000,
    664301, 689210, 714733, 740880, 767656, 795070, 823128, 851840, 881211, 911250,
    941963, 973360, 1005446, 1038230, 1071718, 1105920, 1140841, 1176490, 1212873, 1250000,
)

_REGISTRY: Dict[GrowthCurveId, GrowthCurveTable] = {
    GrowthCurveId.MEDIUM_FAST: GrowthCurveTable("medium_fast", _GROWTH_0),
    GrowthCurveId.ERRATIC: GrowthCurveTable("erratic", _GROWTH_1),
    GrowthCurveId.FLUCTUATING: GrowthCurveTable("fluctuating", _GROWTH_2),
    GrowthCurveId.MEDIUM_SLOW: GrowthCurveTable("medium_slow", _GROWTH_3),
    GrowthCurveId.FAST: GrowthCurveTable("fast", _GROWTH_4),
    GrowthCurveId.SLOW: GrowthCurveTable("slow", _GROWTH_5),
}


def lookup(curve_id: Any) -> GrowthCurveTable:
    """Return the table for ``curve_id``.

    Accepts a ``GrowthCurveId`` or a plain int in 0..5. Anything else (bools,
    floats, strings, unknown ints) raises ``InvalidCurveIdentifier``; there is
    no fallback curve.
    """
    if isinstance(curve_id, bool) or not isinstance(curve_id, int):
        _log.warn(event="invalid_curve_identifier", curve_id=repr(curve_id))
        raise InvalidCurveIdentifier(curve_id)
    try:
        key = GrowthCurveId(curve_id)
    except ValueError:
        _log.warn(event="invalid_curve_identifier", curve_id=curve_id)
        raise InvalidCurveIdentifier(curve_id) from None
    return _REGISTRY[key]


def resolve(curve: CurveLike) -> GrowthCurveTable:
    """Pass tables through untouched; look up identifiers."""
    if isinstance(curve, GrowthCurveTable):
        return curve
    return lookup(curve)


def iter_curves() -> Iterator[Tuple[GrowthCurveId, GrowthCurveTable]]:
    for key in GrowthCurveId:
        yield key, _REGISTRY[key]


def max_experience(curve: CurveLike) -> int:
    return resolve(curve).cap


__all__ = [
    "MIN_LEVEL",
    "MAX_LEVEL",
    "MAX_EXPERIENCE",
    "GrowthCurveId",
    "GrowthCurveTable",
    "CurveLike",
    "lookup",
    "resolve",
    "iter_curves",
    "max_experience",
]
