"""Evaluation of arithmetic expression trees over integers."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Union


class DivideByZeroError(ArithmeticError):
    """Raised when an expression divides by zero."""


class Operation(enum.Enum):
    """An operation to perform on two subexpressions."""

    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"

    def apply(self, left: int, right: int) -> int:
        """Apply the operation; division truncates toward zero."""
        match self:
            case Operation.ADD:
                return left + right
            case Operation.SUB:
                return left - right
            case Operation.MUL:
                return left * right
            case Operation.DIV:
                if right == 0:
                    raise DivideByZeroError("cannot divide by zero")
                quotient = abs(left) // abs(right)
                return quotient if (left < 0) == (right < 0) else -quotient
        raise AssertionError(f"unhandled operation {self!r}")


@dataclass(frozen=True)
class Value:
    """A literal value."""

    value: int


@dataclass(frozen=True)
class BinaryOp:
    """An operation on two subexpressions."""

    op: Operation
    left: Expression
    right: Expression


Expression = Union[Value, BinaryOp]


def evaluate(expression: Expression) -> int:
    """Evaluate an expression tree, left subexpression first."""
    match expression:
        case Value(value=value):
            return value
        case BinaryOp(op=op, left=left, right=right):
            left_value = evaluate(left)
            right_value = evaluate(right)
            return op.apply(left_value, right_value)
    raise TypeError(f"not an expression: {expression!r}")