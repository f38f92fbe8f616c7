"""exprcalc runner — evaluates reference suites and batches of expressions.

Data flow per suite:
1. Load the suite's cases
2. Evaluate each case, timing it
3. Compare against the expected value (NaN matches NaN)
4. Assemble a SuiteReport, optionally saved as report.json
"""

from __future__ import annotations

import logging
import time
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterable, Optional

from rich.console import Console
from rich.markup import escape

from exprcalc.expression import evaluate, try_evaluate
from exprcalc.models import CaseResult, EvalResult, SuiteReport
from exprcalc.suites import list_suites, load_suite

logger = logging.getLogger(__name__)


def _timestamp() -> str:
    return datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def _run_case(expression: str, expected: float) -> CaseResult:
    start = time.monotonic()
    actual = evaluate(expression)
    elapsed = time.monotonic() - start
    return CaseResult(
        expression=expression,
        expected=expected,
        actual=actual,
        elapsed_ms=round(elapsed * 1000, 3),
    )


def run_suite(
    suite_name: str,
    console: Console,
    save_dir: Optional[Path] = None,
) -> SuiteReport:
    """Evaluate every case of one suite.

    Args:
        suite_name: Name of the suite (e.g., 'precedence').
        console: Rich Console for status output.
        save_dir: If set, report.json is written to save_dir/<suite>/<timestamp>/.

    Returns:
        SuiteReport with one CaseResult per case. Unknown suites give an
        empty report with the "no-cases" verdict.
    """
    suite = load_suite(suite_name)
    if not suite:
        console.print(f"[red]Error:[/red] Unknown suite: {escape(suite_name)}")
        return SuiteReport(suite=suite_name, timestamp="")

    timestamp = _timestamp()
    console.print(f"[bold]Running:[/bold] {suite.name} ({suite.total_cases} cases)")

    start = time.monotonic()
    cases = [_run_case(text, expected) for text, expected in suite.cases]
    wall_clock = time.monotonic() - start

    report = SuiteReport(
        suite=suite.name,
        timestamp=timestamp,
        wall_clock_s=round(wall_clock, 4),
        cases=cases,
    )
    logger.info("suite %s: %d/%d passed in %.4fs", suite.name, report.passed, report.total, wall_clock)

    if save_dir is not None:
        path = report.save(save_dir / suite.name / timestamp)
        console.print(f"  Report saved to {path}")
    return report


def run_all_suites(console: Console, save_dir: Optional[Path] = None) -> list[SuiteReport]:
    """Run every discovered suite in name order."""
    return [run_suite(suite.name, console, save_dir=save_dir) for suite in list_suites()]


def run_batch(lines: Iterable[str], strict_brackets: Optional[bool] = None) -> list[EvalResult]:
    """Evaluate one expression per line, skipping blanks and # comments."""
    results = []
    for line in lines:
        text = line.strip()
        if not text or text.startswith("#"):
            continue
        results.append(try_evaluate(text, strict_brackets=strict_brackets))
    return results
