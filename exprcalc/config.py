"""Settings for exprcalc, read from EXPRCALC_* environment variables.

Self-contained, no config files. Unparseable values fall back to defaults.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

_TRUTHY = ("1", "true", "yes", "on")

DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_PRECISION = 12


@dataclass(frozen=True)
class Settings:
    """Runtime settings for the evaluator and CLI."""

    log_level: str = DEFAULT_LOG_LEVEL
    strict_brackets: bool = False
    precision: int = DEFAULT_PRECISION


def _parse_level(raw: Optional[str]) -> str:
    level = (raw or DEFAULT_LOG_LEVEL).strip().upper()
    if isinstance(logging.getLevelName(level), int):
        return level
    return DEFAULT_LOG_LEVEL


def _parse_precision(raw: Optional[str]) -> int:
    try:
        precision = int(raw) if raw else DEFAULT_PRECISION
    except ValueError:
        return DEFAULT_PRECISION
    return precision if precision > 0 else DEFAULT_PRECISION


def load_settings(env: Optional[Mapping[str, str]] = None) -> Settings:
    """Build Settings from ``env`` (defaults to os.environ).

    Args:
        env: Mapping to read EXPRCALC_LOG_LEVEL, EXPRCALC_STRICT_BRACKETS and
            EXPRCALC_PRECISION from.
    """
    env = os.environ if env is None else env
    return Settings(
        log_level=_parse_level(env.get("EXPRCALC_LOG_LEVEL")),
        strict_brackets=env.get("EXPRCALC_STRICT_BRACKETS", "").strip().lower() in _TRUTHY,
        precision=_parse_precision(env.get("EXPRCALC_PRECISION")),
    )
