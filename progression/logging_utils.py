"""Minimal structured logging helper.

Emits key=value pairs (or one JSON object per line) with a timestamp and
level. Threshold and output mode come from ``progression.config``.

Usage:
    from progression.logging_utils import get_logger
    log = get_logger("growth")
    log.warn(event="invalid_curve_identifier", curve_id=255)

Non-numeric values are str()'d with spaces replaced. Fields named level or ts
are emitted as field_level / field_ts.
"""

from __future__ import annotations

import json
import sys
import time

from .config import get_config

LEVELS = {"debug": 10, "info": 20, "warn": 30, "error": 40}
RESERVED = ("level", "ts")


def _format(lvl: str, fields: dict, json_mode: bool = False) -> str:
    # Caller fields never shadow the record's own level/ts
    fields = {(f"field_{k}" if k in RESERVED else k): v for k, v in fields.items() if v is not None}
    if json_mode:
        rec = dict(fields)
        rec["level"] = lvl
        rec["ts"] = int(time.time())
        return json.dumps(rec, separators=(",", ":"), default=str)
    parts = [f"level={lvl}", f"ts={int(time.time())}"]
    for k, v in fields.items():
        if isinstance(v, (int, float)):
            parts.append(f"{k}={v}")
        else:
            s = str(v).replace(" ", "_")
            parts.append(f"{k}={s}")
    return " ".join(parts)


class _Logger:
    def __init__(self, name: str | None = None):
        self.name = name or "progression"

    def _log(self, lvl: str, **fields):
        cfg = get_config()
        if LEVELS[lvl] < LEVELS.get(cfg.log_level, 20):
            return
        if "logger" not in fields:
            fields["logger"] = self.name
        stream = sys.stderr if lvl in ("warn", "error") else sys.stdout
        print(_format(lvl, fields, cfg.log_json), file=stream)

    def debug(self, **fields):
        self._log("debug", **fields)

    def info(self, **fields):
        self._log("info", **fields)

    def warn(self, **fields):
        self._log("warn", **fields)

    def error(self, **fields):
        self._log("error", **fields)


_LOGGER_CACHE: dict[str, _Logger] = {}


def get_logger(name: str) -> _Logger:
    if name not in _LOGGER_CACHE:
        _LOGGER_CACHE[name] = _Logger(name)
    return _LOGGER_CACHE[name]
