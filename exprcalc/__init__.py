"""exprcalc — arithmetic expression evaluator.

Evaluates text such as ``-(2 + 3) * 2^3 % 7`` to a single float. Malformed
input yields NaN rather than an exception; try_evaluate() wraps the value in
a tagged EvalResult for callers that prefer explicit signalling.

Usage:
    python -m exprcalc eval "1+2*3"     # 7
    python -m exprcalc check            # Run the reference suites
"""

from exprcalc.cursor import Cursor
from exprcalc.expression import ExpressionNode, evaluate, try_evaluate
from exprcalc.models import EvalResult, Operator, UndefinedResultError

__all__ = [
    "Cursor",
    "EvalResult",
    "ExpressionNode",
    "Operator",
    "UndefinedResultError",
    "evaluate",
    "try_evaluate",
]
