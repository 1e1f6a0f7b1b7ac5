"""
Runtime settings for ansipix, read from the environment.

Unset variables take their defaults; malformed values fall back to the
default with a warning rather than aborting the render.

    ANSIPIX_WORKERS     rows rendered concurrently (default: CPU count)
    ANSIPIX_BACKGROUND  "R,G,B" or "R,G,B,A" (default: 0,0,0,255)
    ANSIPIX_LOG_LEVEL   logging level name (default: WARNING)
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Mapping

from ansipix.model import BLACK, RGBA
from ansipix.scheduler import default_workers

log = logging.getLogger(__name__)

ENV_WORKERS = "ANSIPIX_WORKERS"
ENV_BACKGROUND = "ANSIPIX_BACKGROUND"
ENV_LOG_LEVEL = "ANSIPIX_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"


def parse_background(value: str) -> RGBA:
    parts = [int(p) for p in value.split(",")]
    if len(parts) == 3:
        parts.append(255)
    if len(parts) != 4 or not all(0 <= p <= 255 for p in parts):
        raise ValueError(f"Expected R,G,B or R,G,B,A with components 0-255: {value!r}")
    return tuple(parts)


def parse_workers(value: str) -> int:
    workers = int(value)
    if workers < 1:
        raise ValueError(f"Worker count must be at least 1: {value!r}")
    return workers


def parse_log_level(value: str) -> str:
    name = value.strip().upper()
    if not isinstance(logging.getLevelName(name), int):
        raise ValueError(f"Unknown log level: {value!r}")
    return name


@dataclass(frozen=True)
class Settings:
    workers: int = field(default_factory=default_workers)
    background: RGBA = BLACK
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        if environ is None:
            environ = os.environ
        defaults = cls()
        return cls(
            workers=_read(environ, ENV_WORKERS, parse_workers, defaults.workers),
            background=_read(environ, ENV_BACKGROUND, parse_background, defaults.background),
            log_level=_read(environ, ENV_LOG_LEVEL, parse_log_level, defaults.log_level),
        )


def _read(environ, name, parse, default):
    raw = environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return parse(raw)
    except ValueError as exc:
        log.warning("Ignoring %s: %s", name, exc)
        return default
