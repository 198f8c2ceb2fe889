import os
import sys

import pytest

# Ensure repository root importable early
ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

from progression.config import get_config  # noqa: E402
from progression.models.growth import GrowthCurveId, GrowthCurveTable, lookup  # noqa: E402

ENV_KEYS = ("PROGRESSION_STRICT_CURVES", "PROGRESSION_LOG_LEVEL", "PROGRESSION_LOG_JSON")


@pytest.fixture(autouse=True)
def _isolated_config(monkeypatch):
    """Drop any PROGRESSION_* values (e.g. from a local .env) and reset the cached config."""
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    get_config.cache_clear()
    yield
    get_config.cache_clear()


@pytest.fixture()
def slow_table():
    return lookup(GrowthCurveId.SLOW)


@pytest.fixture()
def scenario_table():
    """Medium-fast style curve with level 50 at 100000 and level 51 at 106480."""
    values = [(lvl**3 * 4) // 5 for lvl in range(1, 50)] + [100000, 106480]
    values += [lvl**3 for lvl in range(52, 101)]
    return GrowthCurveTable("scenario", tuple(values))


@pytest.fixture()
def flat_band_table():
    """Levels 2 and 3 share a threshold (zero-width band at level 2)."""
    values = list(range(0, 1000, 10))
    values[2] = values[1]
    return GrowthCurveTable("flat_band", tuple(values))
