"""CLI for the exprcalc expression evaluator.

Usage:
    python -m exprcalc eval "1+2*2^3"           # Evaluate one expression
    python -m exprcalc batch expressions.txt    # One expression per line
    python -m exprcalc suites                   # Show reference suites
    python -m exprcalc check                    # Run every reference suite
    python -m exprcalc check precedence         # Run one suite
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from exprcalc.config import load_settings
from exprcalc.expression import try_evaluate
from exprcalc.logging_config import configure_logging
from exprcalc.models import UndefinedResultError
from exprcalc.runner import run_all_suites, run_batch, run_suite
from exprcalc.scorer import format_value, render_batch, render_scorecard
from exprcalc.suites import list_suites, load_suite

app = typer.Typer(
    name="exprcalc",
    help="Arithmetic expression evaluator",
    no_args_is_help=True,
)
console = Console(stderr=True)


@app.callback()
def main() -> None:
    """Arithmetic expression evaluator."""
    configure_logging(load_settings().log_level, console=console)


@app.command("eval")
def cmd_eval(
    expression: str = typer.Argument(help="Expression to evaluate (e.g., '1+2*3')"),
    strict: bool = typer.Option(False, "--strict", "-s", help="Treat unclosed groups as undefined"),
    precision: Optional[int] = typer.Option(None, "--precision", "-p", min=1, help="Significant digits"),
) -> None:
    """Evaluate a single expression and print the result."""
    settings = load_settings()
    result = try_evaluate(expression, strict_brackets=strict or settings.strict_brackets)
    try:
        value = result.unwrap()
    except UndefinedResultError as e:
        console.print(f"[red]{e.verdict}:[/red] {escape(repr(result.expression))}")
        raise typer.Exit(1)
    typer.echo(format_value(value, precision or settings.precision))


@app.command("batch")
def cmd_batch(
    path: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True, help="File with one expression per line"),
    strict: bool = typer.Option(False, "--strict", "-s", help="Treat unclosed groups as undefined"),
) -> None:
    """Evaluate every expression in a file."""
    settings = load_settings()
    lines = path.read_text(encoding="utf-8").splitlines()
    results = run_batch(lines, strict_brackets=strict or settings.strict_brackets)
    render_batch(results, console, precision=settings.precision)
    if any(not r.ok for r in results):
        raise typer.Exit(1)


@app.command("suites")
def cmd_suites() -> None:
    """Show available reference suites."""
    suites = list_suites()
    if not suites:
        console.print("[yellow]No suites found.[/yellow]")
        raise typer.Exit(1)

    table = Table(title="Reference Suites", show_header=True, header_style="bold")
    table.add_column("Name", style="green", min_width=12)
    table.add_column("Description", min_width=30)
    table.add_column("Cases", justify="right")

    for s in suites:
        table.add_row(s.name, s.description, str(s.total_cases))

    console.print()
    console.print(table)
    console.print()


@app.command("check")
def cmd_check(
    suite: Optional[str] = typer.Argument(None, help="Suite name (default: all suites)"),
    save: Optional[Path] = typer.Option(None, "--save", help="Directory to write report.json files to"),
) -> None:
    """Run reference suites and show a scorecard."""
    if suite:
        if not load_suite(suite):
            console.print(f"[red]Unknown suite: {escape(suite)}[/red]. See 'exprcalc suites'.")
            raise typer.Exit(1)
        reports = [run_suite(suite, console, save_dir=save)]
    else:
        reports = run_all_suites(console, save_dir=save)

    render_scorecard(reports, console)
    if not reports or any(r.verdict != "pass" for r in reports):
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
