"""exprcalc scorer — renders Rich tables for suite reports and batch results."""

from __future__ import annotations

import math

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from exprcalc.config import DEFAULT_PRECISION
from exprcalc.models import EvalResult, SuiteReport

_VERDICT_COLORS = {
    "pass": "green",
    "ok": "green",
    "partial": "yellow",
    "fail": "red",
    "undefined": "red",
    "unbalanced": "magenta",
}


def format_value(value: float, precision: int = DEFAULT_PRECISION) -> str:
    """Format a result with ``precision`` significant digits.

    '2.5' for 5/2, '369' for 123+246, 'NaN' for undefined results.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    return f"{value:.{precision}g}"


def _fmt_verdict(verdict: str) -> str:
    color = _VERDICT_COLORS.get(verdict, "white")
    return f"[{color}]{verdict}[/{color}]"


def render_scorecard(reports: list[SuiteReport], console: Console) -> None:
    """Render one row per suite: verdict, cases passed, wall clock."""
    if not reports:
        console.print("[yellow]No suite results.[/yellow]")
        return

    table = Table(title="exprcalc check", show_header=True, header_style="bold")
    table.add_column("Suite", style="green", min_width=12)
    table.add_column("Verdict")
    table.add_column("Passed", justify="right")
    table.add_column("Wall clock", justify="right")

    for r in reports:
        table.add_row(
            r.suite,
            _fmt_verdict(r.verdict),
            f"{r.passed}/{r.total}",
            f"{r.wall_clock_s * 1000:.2f}ms" if r.wall_clock_s else "--",
        )

    console.print()
    console.print(table)

    failures = [(r.suite, c) for r in reports for c in r.failures]
    if failures:
        console.print("\n[bold red]Failures[/bold red]")
        for suite, case in failures:
            console.print(
                f"  {suite:12s} {escape(repr(case.expression))}: expected {format_value(case.expected)}, "
                f"got {format_value(case.actual)}"
            )
    console.print()


def render_batch(results: list[EvalResult], console: Console, precision: int = DEFAULT_PRECISION) -> None:
    """Render a table of evaluated expressions."""
    if not results:
        console.print("[yellow]No expressions to evaluate.[/yellow]")
        return

    table = Table(title="exprcalc batch", show_header=True, header_style="bold")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Expression", min_width=20)
    table.add_column("Value", justify="right")
    table.add_column("Verdict")

    for i, r in enumerate(results, 1):
        table.add_row(str(i), escape(r.expression), format_value(r.value, precision), _fmt_verdict(r.verdict))

    console.print()
    console.print(table)
    console.print()
