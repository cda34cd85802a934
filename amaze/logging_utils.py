"""Structured key=value logging for the maze game.

Records are single lines written to stderr, since stdout carries the maze
frames. Coordinates print as ``x,y`` and metric dicts are flattened into
dotted keys so a generation record stays one greppable line:

    level=debug ts=1700000000 logger=amaze.maze event=generated goal=17,3 metrics.max_depth=58

Set ``AMAZE_LOG_JSON=1`` for one JSON object per line instead. The threshold
comes from ``AMAZE_LOG_LEVEL`` (default ``warn``) or ``set_level()``.
"""

from __future__ import annotations

import json
import os
import sys
import time
from typing import Any, Dict

LEVELS = {"debug": 10, "info": 20, "warn": 30, "error": 40}
CURRENT_LEVEL = LEVELS.get(os.getenv("AMAZE_LOG_LEVEL", "warn"), 30)
JSON_MODE = os.getenv("AMAZE_LOG_JSON", "0") in ("1", "true", "TRUE", "yes", "on")


def set_level(name: str) -> None:
    global CURRENT_LEVEL
    if name not in LEVELS:
        raise ValueError(f"unknown log level {name!r}; expected one of {sorted(LEVELS)}")
    CURRENT_LEVEL = LEVELS[name]


def _flatten(fields: Dict[str, Any], prefix: str = "") -> Dict[str, Any]:
    flat: Dict[str, Any] = {}
    for k, v in fields.items():
        if v is None:
            continue
        if isinstance(v, dict):
            flat.update(_flatten(v, f"{prefix}{k}."))
        else:
            flat[prefix + k] = v
    return flat


def _text(v: Any) -> str:
    if isinstance(v, bool):
        return "true" if v else "false"
    if isinstance(v, (int, float)):
        return str(v)
    if isinstance(v, tuple):
        return ",".join(_text(part) for part in v)
    return str(v).replace(" ", "_")


def _format(level: str, fields: Dict[str, Any]) -> str:
    rec = _flatten(fields)
    ts = int(time.time())
    if JSON_MODE:
        return json.dumps({"level": level, "ts": ts, **rec}, separators=(",", ":"), default=str)
    return " ".join([f"level={level}", f"ts={ts}"] + [f"{k}={_text(v)}" for k, v in rec.items()])


class _Logger:
    def __init__(self, name: str, context: Dict[str, Any] | None = None):
        self.name = name
        self.context = dict(context or {})

    def bind(self, **fields) -> "_Logger":
        """Child logger that stamps ``fields`` on every record (e.g. the seed)."""
        return _Logger(self.name, {**self.context, **fields})

    def _log(self, lvl: str, fields: Dict[str, Any]) -> None:
        if LEVELS[lvl] < CURRENT_LEVEL:
            return
        print(_format(lvl, {"logger": self.name, **self.context, **fields}), file=sys.stderr)

    def debug(self, **fields):
        self._log("debug", fields)

    def info(self, **fields):
        self._log("info", fields)

    def warn(self, **fields):
        self._log("warn", fields)

    def error(self, **fields):
        self._log("error", fields)


_LOGGER_CACHE: Dict[str, _Logger] = {}


def get_logger(name: str) -> _Logger:
    if name not in _LOGGER_CACHE:
        _LOGGER_CACHE[name] = _Logger(name)
    return _LOGGER_CACHE[name]


log = get_logger("amaze")
