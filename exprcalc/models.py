"""Data models for exprcalc.

Operator, Term, OperatorTerm for the reducer; EvalResult at the API
boundary; CaseResult and SuiteReport for the reference suites that flow
through runner → scorer → CLI.
"""

from __future__ import annotations

import json
import math
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from exprcalc.expression import ExpressionNode


class Operator(str, Enum):
    """Binary operators, each bound to a precedence tier."""

    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"
    MOD = "%"
    POW = "^"

    @property
    def precedence(self) -> int:
        """0 additive, 1 multiplicative, 2 power."""
        return _PRECEDENCE[self]

    def apply(self, v: float, b: float) -> float:
        """Apply ``v <op> b`` with IEEE-754 results instead of Python exceptions."""
        if self is Operator.ADD:
            return v + b
        if self is Operator.SUB:
            return v - b
        if self is Operator.MUL:
            return v * b
        if self is Operator.DIV:
            return _divide(v, b)
        if self is Operator.MOD:
            return _remainder(v, b)
        return _power(v, b)


_PRECEDENCE: dict[Operator, int] = {
    Operator.ADD: 0,
    Operator.SUB: 0,
    Operator.MUL: 1,
    Operator.DIV: 1,
    Operator.MOD: 1,
    Operator.POW: 2,
}

OPERATOR_CHARS = "".join(op.value for op in Operator)


def _divide(v: float, b: float) -> float:
    try:
        return v / b
    except ZeroDivisionError:
        if v == 0 or math.isnan(v):
            return math.nan
        return math.copysign(math.inf, v) * math.copysign(1.0, b)


def _remainder(v: float, b: float) -> float:
    # Sign follows the dividend, as with C fmod.
    try:
        return math.fmod(v, b)
    except ValueError:
        return math.nan


def _power(v: float, b: float) -> float:
    try:
        return math.pow(v, b)
    except OverflowError:
        negative = v < 0 and b.is_integer() and b % 2 == 1
        return -math.inf if negative else math.inf
    except ValueError:
        # pow(0, negative) is a pole; fractional powers of negatives are undefined
        if v == 0 and b < 0:
            odd = b.is_integer() and b % 2 == 1
            return math.copysign(math.inf, v) if odd else math.inf
        return math.nan


@dataclass
class Term:
    """A single operand: a literal, or a parenthesized group's resolved value.

    ``value`` stays mutable because contraction folds later terms into it.
    """

    value: Optional[float] = None
    node: Optional[ExpressionNode] = None


@dataclass
class OperatorTerm:
    """One reduction step: an operator applied with a term against a running value."""

    operator: Optional[Operator]
    term: Term

    @property
    def precedence(self) -> int:
        if self.operator is None:
            return -1
        return self.operator.precedence

    def apply(self, running: float) -> float:
        if self.operator is None or self.term.value is None:
            return math.nan
        return self.operator.apply(running, self.term.value)

    def __str__(self) -> str:
        symbol = self.operator.value if self.operator else "?"
        return f"{symbol}{self.term.value}"


class UndefinedResultError(ValueError):
    """Raised by EvalResult.unwrap() when an expression has no defined value."""

    def __init__(self, expression: str, verdict: str) -> None:
        self.expression = expression
        self.verdict = verdict
        super().__init__(f"{verdict} result for expression: {expression!r}")


@dataclass
class EvalResult:
    """Tagged result of evaluating one expression."""

    expression: str
    value: float
    balanced: bool = True

    @property
    def verdict(self) -> str:
        if not self.balanced:
            return "unbalanced"
        if math.isnan(self.value):
            return "undefined"
        return "ok"

    @property
    def ok(self) -> bool:
        return self.verdict == "ok"

    def unwrap(self) -> float:
        """Return the value, or raise UndefinedResultError."""
        if not self.ok:
            raise UndefinedResultError(self.expression, self.verdict)
        return self.value

    def to_dict(self) -> dict:
        return {
            "expression": self.expression,
            "value": _float_to_json(self.value),
            "verdict": self.verdict,
        }


def _float_to_json(value: float):
    # JSON has no NaN/inf literals; keep them readable as strings
    if math.isnan(value) or math.isinf(value):
        return str(value)
    return value


def _float_from_json(value) -> float:
    # float() parses the "nan"/"inf" strings written by _float_to_json
    return float(value)


@dataclass
class CaseResult:
    """Outcome of a single reference case."""

    expression: str
    expected: float
    actual: float
    elapsed_ms: float = 0.0

    @property
    def passed(self) -> bool:
        if math.isnan(self.expected):
            return math.isnan(self.actual)
        return self.actual == self.expected

    def to_dict(self) -> dict:
        return {
            "expression": self.expression,
            "expected": _float_to_json(self.expected),
            "actual": _float_to_json(self.actual),
            "elapsed_ms": self.elapsed_ms,
            "passed": self.passed,
        }

    @classmethod
    def from_dict(cls, d: dict) -> CaseResult:
        return cls(
            expression=d.get("expression", ""),
            expected=_float_from_json(d.get("expected", "nan")),
            actual=_float_from_json(d.get("actual", "nan")),
            elapsed_ms=d.get("elapsed_ms", 0.0),
        )


@dataclass
class SuiteReport:
    """Complete result of running one reference suite."""

    suite: str
    timestamp: str
    wall_clock_s: float = 0.0
    cases: list[CaseResult] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.cases)

    @property
    def passed(self) -> int:
        return sum(1 for c in self.cases if c.passed)

    @property
    def failed(self) -> int:
        return self.total - self.passed

    @property
    def failures(self) -> list[CaseResult]:
        return [c for c in self.cases if not c.passed]

    @property
    def verdict(self) -> str:
        if self.total == 0:
            return "no-cases"
        if self.passed == self.total:
            return "pass"
        if self.passed > 0:
            return "partial"
        return "fail"

    def to_dict(self) -> dict:
        """Serialize to a JSON-compatible dict."""
        return {
            "suite": self.suite,
            "timestamp": self.timestamp,
            "wall_clock_s": self.wall_clock_s,
            "passed": self.passed,
            "failed": self.failed,
            "total": self.total,
            "verdict": self.verdict,
            "cases": [c.to_dict() for c in self.cases],
        }

    @classmethod
    def from_dict(cls, d: dict) -> SuiteReport:
        """Deserialize from a JSON dict (report.json)."""
        return cls(
            suite=d.get("suite", ""),
            timestamp=d.get("timestamp", ""),
            wall_clock_s=d.get("wall_clock_s", 0.0),
            cases=[CaseResult.from_dict(c) for c in d.get("cases", [])],
        )

    def save(self, result_dir: Path) -> Path:
        """Write report.json to the result directory."""
        result_dir.mkdir(parents=True, exist_ok=True)
        path = result_dir / "report.json"
        path.write_text(json.dumps(self.to_dict(), indent=2), encoding="utf-8")
        return path

    @classmethod
    def load(cls, result_dir: Path) -> Optional[SuiteReport]:
        """Load report.json from a result directory."""
        p = result_dir / "report.json"
        if not p.exists():
            return None
        try:
            return cls.from_dict(json.loads(p.read_text(encoding="utf-8")))
        except (json.JSONDecodeError, OSError, ValueError):
            return None
