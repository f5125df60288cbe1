"""Evaluation of integer arithmetic expression trees."""

from __future__ import annotations

import sys
from dataclasses import dataclass


@dataclass
class ExprNode:
    """An expression tree node: an operator with two children or an integer leaf."""

    token: str
    left: ExprNode | None = None
    right: ExprNode | None = None


def _truncating_div(a: int, b: int) -> int:
    if b == 0:
        raise ZeroDivisionError("division by zero in expression")
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


_OPERATORS = {
    "+": lambda a, b: a + b,
    "-": lambda a, b: a - b,
    "*": lambda a, b: a * b,
    "/": _truncating_div,
}


def evaluate(node: ExprNode) -> int:
    """Evaluate the tree; division truncates toward zero."""
    if node.left is None and node.right is None:
        return int(node.token)
    if node.left is None or node.right is None:
        raise ValueError(f"operator node {node.token!r} needs two operands")
    try:
        operation = _OPERATORS[node.token]
    except KeyError:
        raise ValueError(f"Operador inválido: {node.token}") from None
    return operation(evaluate(node.left), evaluate(node.right))


def example_tree() -> ExprNode:
    """Build the tree for ((5+3)/4)*(6-1)."""
    total = ExprNode("+", ExprNode("5"), ExprNode("3"))
    quotient = ExprNode("/", total, ExprNode("4"))
    difference = ExprNode("-", ExprNode("6"), ExprNode("1"))
    return ExprNode("*", quotient, difference)


def main(argv: list[str] | None = None) -> int:
    """Evaluate the example expression and print the result."""
    try:
        result = evaluate(example_tree())
    except (ValueError, ZeroDivisionError) as error:
        print(error, file=sys.stderr)
        return 1
    print(f"Resultado da expressão: {result}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())