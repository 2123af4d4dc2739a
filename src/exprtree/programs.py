from .frontend.ast_expressions import Expression
from .frontend.builder import start

SAMPLE_BINDINGS = """
x = 3;
y = 6;
"""


def build_sample_expression() -> Expression:
    # (((5 + 3) + x) + ((((4 + 7) - y) + (((2 + 3) - 4) + x)) + 12))
    innermost = start(2).plus(3).minus(4).plus_var("x").build()
    inner = start(4).plus(7).minus_var("y").plus(innermost).plus(12).build()
    return start(5).plus(3).plus_var("x").plus(inner).build()
