"""Operator-precedence parser building a binary expression tree."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from .lexer import Token, TokenType


class ParseError(ValueError):
    """Raised when the token stream cannot form an expression tree."""


@dataclass
class Node:
    """A node of the expression tree; leaves hold numbers or variables."""

    value: str
    left: Optional[Node] = None
    right: Optional[Node] = None

    def is_leaf(self) -> bool:
        """Return True if the node has no children."""
        return self.left is None and self.right is None


def precedence(op: str) -> int:
    """Binding strength of ``op``; 0 for anything that is not arithmetic."""
    if op == "^":
        return 4
    if op in ("*", "/"):
        return 3
    if op in ("+", "-"):
        return 2
    return 0


def is_right_associative(op: str) -> bool:
    """Return True for operators that group from the right."""
    return op == "^"


def _pops_before(incoming: str, top: str) -> bool:
    if is_right_associative(incoming):
        return precedence(incoming) < precedence(top)
    return precedence(incoming) <= precedence(top)


def parse(tokens: Iterable[Token]) -> Optional[Node]:
    """Build an expression tree from ``tokens``.

    Returns None if there are no operands. Raises :class:`ParseError`
    when an operator lacks operands or a ``(`` is never closed.
    """
    operands: list[Node] = []
    operators: list[str] = []

    def apply_operator() -> None:
        op = operators.pop()
        if op == "(":
            raise ParseError("unbalanced '('")
        if len(operands) < 2:
            raise ParseError(f"operator {op!r} is missing an operand")
        right = operands.pop()
        left = operands.pop()
        operands.append(Node(op, left, right))

    for tok in tokens:
        if tok.type in (TokenType.NUMBER, TokenType.VARIABLE):
            operands.append(Node(tok.value))
        elif tok.type is TokenType.LPAREN:
            operators.append("(")
        elif tok.type is TokenType.RPAREN:
            while operators and operators[-1] != "(":
                apply_operator()
            if operators:
                operators.pop()
        elif tok.type in (TokenType.OPERATOR, TokenType.ASSIGN):
            while (
                operators
                and operators[-1] != "("
                and _pops_before(tok.value, operators[-1])
            ):
                apply_operator()
            operators.append(tok.value)

    while operators:
        apply_operator()

    return operands[-1] if operands else None