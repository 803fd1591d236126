"""Semantic checks over an expression tree."""

from __future__ import annotations

import string
from typing import AbstractSet, Iterator, Optional

from .parser import Node


class SemanticError(ValueError):
    """Raised when an expression tree fails a semantic check."""


def _preorder(node: Optional[Node]) -> Iterator[Node]:
    stack = [node] if node is not None else []
    while stack:
        current = stack.pop()
        yield current
        if current.right is not None:
            stack.append(current.right)
        if current.left is not None:
            stack.append(current.left)


def _is_variable(node: Node) -> bool:
    return node.is_leaf() and node.value[:1] in string.ascii_letters and node.value != ""


def collect_declared_variables(node: Optional[Node]) -> set[str]:
    """Return the names of all variable leaves in the tree."""
    return {n.value for n in _preorder(node) if _is_variable(n)}


def check_semantic_errors(node: Optional[Node], declared: AbstractSet[str]) -> None:
    """Raise :class:`SemanticError` on division by literal zero or an undeclared variable."""
    for current in _preorder(node):
        if (
            current.value == "/"
            and current.right is not None
            and current.right.value == "0"
        ):
            raise SemanticError("Division by zero.")
        if _is_variable(current) and current.value not in declared:
            raise SemanticError(f"Undeclared variable used -> {current.value}")


def semantic_check(root: Optional[Node]) -> None:
    """Run all semantic checks on ``root``."""
    check_semantic_errors(root, collect_declared_variables(root))