"""Tests for suite discovery, the runner and the scorer tables."""

import math

from exprcalc.models import CaseResult, EvalResult, SuiteReport
from exprcalc.runner import run_all_suites, run_batch, run_suite
from exprcalc.scorer import format_value, render_batch, render_scorecard
from exprcalc.suites import list_suites, load_suite

SHIPPED = ["negative", "nesting", "operators", "precedence", "simple"]


# --- Suite discovery ---

def test_list_suites_finds_shipped_suites():
    names = [s.name for s in list_suites()]
    assert names == SHIPPED


def test_load_suite():
    suite = load_suite("precedence")
    assert suite is not None
    assert suite.description
    assert ("1+2*2^3", 17.0) in suite.cases
    assert suite.total_cases == len(suite.cases)


def test_load_unknown_suite():
    assert load_suite("no_such_suite") is None
    assert load_suite("../etc") is None


def test_negative_suite_expects_nan():
    suite = load_suite("negative")
    assert all(math.isnan(expected) for _, expected in suite.cases)


# --- Runner ---

def test_run_suite_passes(console, console_text):
    report = run_suite("operators", console)
    assert report.verdict == "pass"
    assert report.total == len(load_suite("operators").cases)
    assert report.timestamp
    assert "operators" in console_text()


def test_every_shipped_suite_passes(console):
    reports = run_all_suites(console)
    assert [r.suite for r in reports] == SHIPPED
    assert all(r.verdict == "pass" for r in reports), [r.failures for r in reports]


def test_run_unknown_suite(console, console_text):
    report = run_suite("bogus", console)
    assert report.verdict == "no-cases"
    assert "Unknown suite" in console_text()


def test_run_suite_saves_report(console, tmp_path):
    report = run_suite("simple", console, save_dir=tmp_path)
    saved = SuiteReport.load(tmp_path / "simple" / report.timestamp)
    assert saved is not None
    assert saved.passed == report.passed


def test_run_batch_skips_blanks_and_comments():
    results = run_batch(["# header", "", "1+2", "  (3", "x"], strict_brackets=False)
    assert [r.expression for r in results] == ["1+2", "(3", "x"]
    assert [r.verdict for r in results] == ["ok", "ok", "undefined"]


def test_run_batch_strict():
    results = run_batch(["(3"], strict_brackets=True)
    assert results[0].verdict == "unbalanced"


# --- Scorer ---

def test_format_value():
    assert format_value(2.5) == "2.5"
    assert format_value(369.0) == "369"
    assert format_value(0.1 + 0.2) == "0.3"
    assert format_value(1 / 3, precision=3) == "0.333"
    assert format_value(math.nan) == "NaN"
    assert format_value(-math.inf) == "-inf"


def test_render_scorecard_lists_failures(console, console_text):
    report = SuiteReport(
        suite="demo",
        timestamp="t",
        wall_clock_s=0.002,
        cases=[CaseResult("1+1", 2.0, 2.0), CaseResult("2*2", 5.0, 4.0)],
    )
    render_scorecard([report], console)
    out = console_text()
    assert "demo" in out
    assert "partial" in out
    assert "1/2" in out
    assert "'2*2': expected 5, got 4" in out


def test_render_scorecard_empty(console, console_text):
    render_scorecard([], console)
    assert "No suite results" in console_text()


def test_render_batch(console, console_text):
    render_batch([EvalResult("5/2", 2.5), EvalResult("[1]", math.nan)], console)
    out = console_text()
    assert "2.5" in out
    assert "[1]" in out
    assert "undefined" in out
