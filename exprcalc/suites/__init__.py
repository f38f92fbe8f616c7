"""Reference case suite discovery and loading for exprcalc.

Each suite is a subdirectory of exprcalc/suites/ whose __init__.py defines:
    NAME         — suite name (defaults to the directory name)
    DESCRIPTION  — one-line summary
    CASES        — list of (expression, expected) pairs; math.nan for undefined
"""

from __future__ import annotations

import importlib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional


@dataclass
class SuiteInfo:
    """Metadata and cases of a discovered suite."""

    name: str
    description: str
    path: Path
    cases: list[tuple[str, float]] = field(default_factory=list)

    @property
    def total_cases(self) -> int:
        return len(self.cases)


def _suites_root() -> Path:
    """Absolute path to the suites/ directory."""
    return Path(__file__).parent


def list_suites() -> list[SuiteInfo]:
    """Discover all available suites, sorted by directory name."""
    suites = []
    for child in sorted(_suites_root().iterdir()):
        if not child.is_dir() or not (child / "__init__.py").exists():
            continue
        info = load_suite(child.name)
        if info:
            suites.append(info)
    return suites


def load_suite(name: str) -> Optional[SuiteInfo]:
    """Load a single suite by name.

    Args:
        name: Directory name under exprcalc/suites/ (e.g., 'precedence').

    Returns:
        SuiteInfo if the suite exists and defines CASES, None otherwise.
    """
    suite_dir = _suites_root() / name
    if not name.isidentifier() or not (suite_dir / "__init__.py").exists():
        return None

    try:
        mod = importlib.import_module(f"exprcalc.suites.{name}")
    except ImportError:
        return None

    cases = getattr(mod, "CASES", None)
    if cases is None:
        return None

    return SuiteInfo(
        name=getattr(mod, "NAME", name),
        description=getattr(mod, "DESCRIPTION", ""),
        path=suite_dir,
        cases=[(text, float(expected)) for text, expected in cases],
    )
