"""Three-address code generation from an expression tree."""

from __future__ import annotations

from itertools import count
from typing import Optional

from .parser import Node


def _taylor_operands(node: Node) -> Optional[tuple[str, str]]:
    """Return ``(x, y)`` if ``node`` has the shape ``(2*x*y)/(x+y)``."""
    mult = node.left
    if mult is None or mult.value != "*":
        return None

    if (
        mult.left is not None
        and mult.left.value == "2"
        and mult.right is not None
        and mult.right.value == "*"
    ):
        # 2 * (x * y)
        inner = mult.right
        if inner.left is None or inner.right is None:
            return None
        x, y = inner.left.value, inner.right.value
    elif (
        mult.left is not None
        and mult.left.value == "*"
        and mult.left.left is not None
        and mult.left.left.value == "2"
        and mult.left.right is not None
        and mult.right is not None
    ):
        # (2 * x) * y
        x, y = mult.left.right.value, mult.right.value
    else:
        return None

    denominator = node.right
    if (
        denominator is not None
        and denominator.value == "+"
        and denominator.left is not None
        and denominator.right is not None
        and (denominator.left.value, denominator.right.value) in ((x, y), (y, x))
    ):
        return x, y
    return None


def generate_3ac(root: Optional[Node]) -> list[str]:
    """Translate an expression tree into three-address code lines.

    Temporaries are named ``t1``, ``t2``, ... in order of creation. The
    pattern ``(2*x*y)/(x+y)`` collapses into a single ``TAYLOR x y``
    instruction, and an assignment always stores its value into ``y``.
    """
    code: list[str] = []
    temps = (f"t{n}" for n in count(1))

    def visit(node: Optional[Node]) -> str:
        if node is None:
            return ""
        if node.is_leaf():
            return node.value

        if node.value == "/":
            operands = _taylor_operands(node)
            if operands is not None:
                temp = next(temps)
                code.append(f"{temp} = TAYLOR {operands[0]} {operands[1]}")
                return temp
            numerator = visit(node.left)
            denominator = visit(node.right)
            temp = next(temps)
            code.append(f"{temp} = {numerator} / {denominator}")
            return temp

        if node.right is None:
            operand = visit(node.left)
            temp = next(temps)
            code.append(f"{temp} = {node.value} {operand}")
            return temp

        left = visit(node.left)
        right = visit(node.right)
        temp = next(temps)

        if node.value == "=":
            code.append(f"y = {right}")
            return left

        code.append(f"{temp} = {left} {node.value} {right}")
        return temp

    visit(root)
    return code