"""Parse-and-reduce evaluator.

An ExpressionNode scans its scope of the shared Cursor into a flat list of
OperatorTerms, opening a child node for every ``(``, then reduces the
list to one float by repeated contraction in precedence order:

1. ``^`` terms are folded into the term on their left,
2. then ``* / %`` (one symbol per pass, first one seen wins the tie),
3. then the additive remainder is summed left to right from 0.

There is no error channel. Every malformed path ends in NaN, and NaN taints
whatever arithmetic it enters.
"""

from __future__ import annotations

import logging
import math
from typing import Optional

from exprcalc.config import load_settings
from exprcalc.cursor import Cursor
from exprcalc.models import OPERATOR_CHARS, EvalResult, Operator, OperatorTerm, Term

logger = logging.getLogger(__name__)

NUMBER_CHARS = "0123456789."


class ExpressionNode:
    """One expression scope: the top level, or a parenthesized group."""

    def __init__(self, cursor: Cursor, closes_group: bool = False) -> None:
        self.cursor = cursor
        self.closes_group = closes_group
        self.closed = False
        self.operations: list[OperatorTerm] = []
        self.children: list[ExpressionNode] = []
        self.value: Optional[float] = None
        self._evaluated = False
        self._seen = -1
        self._pending: Optional[Operator] = None

    @classmethod
    def from_text(cls, text: str) -> ExpressionNode:
        return cls(Cursor(text.strip()))

    def __repr__(self) -> str:
        ops = " ".join(str(op) for op in self.operations)
        return f"ExpressionNode([{ops}], value={self.value})"

    def evaluate(self) -> float:
        """Scan and reduce this node once; later calls return the cached value.

        Open groups are kept on an explicit stack rather than the call stack,
        so nesting depth is bounded only by memory.
        """
        if not self._evaluated:
            stack = [self]
            while stack:
                node = stack[-1]
                child = node._scan()
                if child is not None:
                    stack.append(child)
                    continue
                stack.pop()
                node._evaluated = True
                node.value = node._reduce()
                if stack:
                    stack[-1]._attach(node)
        return math.nan if self.value is None else self.value

    def is_balanced(self) -> bool:
        """True if every group in this tree consumed its closing ``)``."""
        pending = [self]
        while pending:
            node = pending.pop()
            if node.closes_group and not node.closed:
                return False
            pending.extend(node.children)
        return True

    # ------------------------------------------------------------------
    # Scanning
    # ------------------------------------------------------------------

    def _scan(self) -> Optional[ExpressionNode]:
        """Scan until this scope ends, or until a ``(`` opens a child group.

        Returns the new child, which must be evaluated and attached before
        scanning resumes; None once this scope is finished.
        """
        cursor = self.cursor
        while cursor.has_more:
            # Stop on a stall: the previous pass added nothing.
            if len(self.operations) > self._seen:
                self._seen = len(self.operations)
            else:
                logger.debug("scan stalled at %d: %r", cursor.position, cursor.remaining)
                break
            cursor.consume_while(" ")
            if cursor.peek("("):
                cursor.advance()
                return self._open_group(Operator.ADD)
            elif cursor.peek(OPERATOR_CHARS):
                operator = Operator(cursor.next_char)
                cursor.advance()
                cursor.consume_while(" ")
                if cursor.peek("("):
                    cursor.advance()
                    return self._open_group(operator)
                self.operations.append(OperatorTerm(operator, Term(value=self._read_number())))
            elif cursor.peek(NUMBER_CHARS):
                self.operations.append(OperatorTerm(Operator.ADD, Term(value=self._read_number())))
            elif cursor.peek(")") and self.closes_group:
                cursor.advance()
                self.closed = True
                break
        logger.debug("scanned %s", self)
        return None

    def _open_group(self, operator: Operator) -> ExpressionNode:
        self._pending = operator
        child = ExpressionNode(self.cursor, closes_group=True)
        self.children.append(child)
        return child

    def _attach(self, child: ExpressionNode) -> None:
        """Append a finished child group as a term under the pending operator."""
        value = math.nan if child.value is None else child.value
        self.operations.append(OperatorTerm(self._pending, Term(value=value, node=child)))
        self._pending = None

    def _read_number(self) -> float:
        cursor = self.cursor
        sign = 1.0
        if cursor.peek("-"):
            sign = -1.0
            cursor.advance()
        elif cursor.peek("+"):
            cursor.advance()
        digits = cursor.consume_while(NUMBER_CHARS)
        try:
            return sign * float(digits)
        except ValueError:
            logger.debug("malformed number literal %r", digits)
            return math.nan

    # ------------------------------------------------------------------
    # Reduction
    # ------------------------------------------------------------------

    def _reduce(self) -> Optional[float]:
        operations = self.operations
        if not operations:
            logger.debug("empty expression")
            return math.nan

        first = operations[0]
        if first.operator is None:
            first.operator = Operator.ADD
        elif first.operator is Operator.SUB:
            # Absorb a leading unary minus into the literal.
            first.operator = Operator.ADD
            first.term.value = -1.0 * (math.nan if first.term.value is None else first.term.value)

        if len(operations) == 1:
            value = first.term.value
            if value is None:
                return None
            return -value if first.operator is Operator.SUB else value

        if len(operations) == 2:
            return operations[1].apply(first.apply(0.0))

        if first.precedence > 0:
            logger.debug("leading %s cannot start a sum", first.operator.value)
            return math.nan

        while len(operations) > 1:
            highest = max(operations, key=lambda op: op.precedence).operator
            if highest.precedence == 0:
                return _fold(operations)
            operations = _contract(operations, highest)
            logger.debug("contracted %s: %s", highest.value, " ".join(str(op) for op in operations))
        return operations[0].apply(0.0)


def _contract(operations: list[OperatorTerm], operator: Operator) -> list[OperatorTerm]:
    """Fold every ``operator`` term into the nearest retained term on its left."""
    retained: list[OperatorTerm] = []
    for op in operations:
        if op.operator is operator:
            left = retained[-1]
            left.term.value = op.apply(math.nan if left.term.value is None else left.term.value)
            continue
        retained.append(op)
    return retained


def _fold(operations: list[OperatorTerm]) -> float:
    total = 0.0
    for op in operations:
        total = op.apply(total)
    return total


def evaluate(text: str) -> float:
    """Evaluate an arithmetic expression; NaN when it has no defined value.

    >>> evaluate("1+2*2^3")
    17.0
    >>> evaluate("-(-(-(77)))")
    -77.0
    """
    return ExpressionNode.from_text(text).evaluate()


def try_evaluate(text: str, strict_brackets: Optional[bool] = None) -> EvalResult:
    """Evaluate ``text`` into a tagged EvalResult.

    With ``strict_brackets`` an unclosed group, or input left over after the
    top-level scan stalls, gives an "unbalanced" result instead of whatever
    value the truncated input produced. ``None`` reads the setting from the
    environment.
    """
    if strict_brackets is None:
        strict_brackets = load_settings().strict_brackets

    expression = text.strip()
    node = ExpressionNode.from_text(expression)
    value = node.evaluate()
    if strict_brackets and (node.cursor.has_more or not node.is_balanced()):
        logger.debug("unbalanced input %r stopped at %d", expression, node.cursor.position)
        return EvalResult(expression=expression, value=math.nan, balanced=False)
    return EvalResult(expression=expression, value=value)
