from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from ..runtime.core import Context, RuntimeContext
from ..runtime.evaluator import evaluate
from .ast_expressions import Expression, Literal, Variable, add, sub
from .renderer import render

Operand = Union[Expression, int, "ExpressionBuilder"]


@dataclass(frozen=True, slots=True)
class ExpressionBuilder:
    """Grows an expression left to right.

    Each step wraps everything built so far as the left child of a new binary
    node, so the resulting tree leans left:

        start(5).plus(3).plus_var("x")  ->  ((5 + 3) + x)

    Builders are immutable. Every step returns a new builder, which means a
    tree obtained from `build()` is never affected by steps taken later.
    """

    current: Expression

    @classmethod
    def start(cls, value: int) -> ExpressionBuilder:
        return cls(Literal(_require_int(value)))

    def plus(self, operand: Operand) -> ExpressionBuilder:
        return ExpressionBuilder(add(self.current, _as_expression(operand)))

    def plus_var(self, name: str) -> ExpressionBuilder:
        return ExpressionBuilder(add(self.current, Variable(name)))

    def minus(self, operand: Operand) -> ExpressionBuilder:
        return ExpressionBuilder(sub(self.current, _as_expression(operand)))

    def minus_var(self, name: str) -> ExpressionBuilder:
        return ExpressionBuilder(sub(self.current, Variable(name)))

    def build(self) -> Expression:
        return self.current

    expression = build

    def evaluate(
        self, context: Context, runtime: RuntimeContext | None = None
    ) -> int:
        return evaluate(self.current, context, runtime)

    def __str__(self) -> str:
        return render(self.current)


def start(value: int) -> ExpressionBuilder:
    return ExpressionBuilder.start(value)


def _as_expression(operand: Operand) -> Expression:
    if isinstance(operand, ExpressionBuilder):
        return operand.current
    if isinstance(operand, Expression):
        return operand
    return Literal(_require_int(operand))


def _require_int(value: object) -> int:
    # bool is rejected even though it subclasses int
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(
            f"expected an int or an expression, got {type(value).__name__}"
        )
    return value
