from .ast_expressions import Binary, Expression, Literal, Variable


def render(expr: Expression) -> str:
    """Render `expr` as fully parenthesized infix text.

    Every binary node gets its own pair of parentheses, so the output mirrors
    the tree shape exactly: `((5 + 3) + x)` and `(5 + (3 + x))` are different
    trees and render differently.

    The walk keeps its own stack, so tree depth is not bounded by the
    interpreter's recursion limit.
    """
    pending: list[tuple[Expression, bool]] = [(expr, False)]
    rendered: list[str] = []

    while pending:
        node, children_done = pending.pop()

        if isinstance(node, Literal):
            rendered.append(str(node.value))
            continue

        if isinstance(node, Variable):
            rendered.append(node.name)
            continue

        if isinstance(node, Binary):
            if children_done:
                right = rendered.pop()
                left = rendered.pop()
                rendered.append(f"({left} {node.op} {right})")
            else:
                pending.append((node, True))
                pending.append((node.right, False))
                pending.append((node.left, False))
            continue

        raise TypeError(f"Unsupported expression type: {type(node).__name__}")

    [result] = rendered
    return result
