import operator
from typing import Callable

from ..frontend.ast_expressions import Binary, BinaryOp, Expression, Literal, Variable
from ..frontend.renderer import render
from .core import Context, RuntimeContext

INT_BITS = 32
INT_MIN = -(2 ** (INT_BITS - 1))
INT_MAX = 2 ** (INT_BITS - 1) - 1

_binary_ops: dict[BinaryOp, Callable[[int, int], int]] = {
    "+": operator.add,
    "-": operator.sub,
}


def wrap_int(value: int) -> int:
    """Reduce `value` to a signed 32-bit two's complement integer.

    Applied to literals and bound values when they are read, not when they
    are stored, so `render(literal(2**31))` shows `2147483648` while
    evaluating the same literal gives `-2147483648`.
    """
    return (value - INT_MIN) % (1 << INT_BITS) + INT_MIN


def evaluate(
    expr: Expression, context: Context, runtime: RuntimeContext | None = None
) -> int:
    runtime = runtime or RuntimeContext()
    writer = runtime.writer

    # Post-order over an explicit stack; left subtrees are finished before
    # right ones are started.
    pending: list[tuple[Expression, bool]] = [(expr, False)]
    values: list[int] = []
    open_nodes = 0

    try:
        while pending:
            node, children_done = pending.pop()

            if isinstance(node, Literal):
                values.append(wrap_int(node.value))
                continue

            if isinstance(node, Variable):
                values.append(wrap_int(context.lookup(node.name)))
                continue

            if isinstance(node, Binary):
                if not children_done:
                    writer.indent()
                    open_nodes += 1
                    pending.append((node, True))
                    pending.append((node.right, False))
                    pending.append((node.left, False))
                    continue

                writer.dedent()
                open_nodes -= 1
                right_value = values.pop()
                left_value = values.pop()
                result = wrap_int(_binary_ops[node.op](left_value, right_value))
                if writer.debug_enabled:
                    left, right = render(node.left), render(node.right)
                    writer.debugln(f"[{left} {node.op} {right} => {result}]")
                values.append(result)
                continue

            raise TypeError(f"Unsupported expression type: {type(node).__name__}")
    finally:
        for _ in range(open_nodes):
            writer.dedent()

    [value] = values
    return value
