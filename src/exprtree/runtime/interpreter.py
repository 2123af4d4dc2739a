import sys
from dataclasses import dataclass
from typing import Mapping, TextIO

from lark.exceptions import LarkError

from ..frontend.ast_expressions import Expression
from ..frontend.bindings import load_bindings
from ..frontend.renderer import render
from ..writer import IndentingWriter
from .core import Context, RuntimeContext, UndefinedVariableError
from .evaluator import evaluate

Bindings = Context | Mapping[str, int] | str


@dataclass(frozen=True, slots=True)
class EvaluationResult:
    rendering: str
    value: int


def run_for_cli(
    expr: Expression,
    bindings_source: str = "",
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> EvaluationResult | None:
    stream = stderr if stderr is not None else sys.stderr

    try:
        context = load_bindings(bindings_source)
    except LarkError as error:
        print(f"Syntax error: {error}", file=stream)
        return None

    writer = IndentingWriter(stream=stdout)
    try:
        result = run(expr, context, RuntimeContext(writer=writer))
    except UndefinedVariableError as error:
        print(f"Runtime error: {error}", file=stream)
        return None

    writer.println(result.rendering)
    writer.println(str(result.value))
    return result


def run(
    expr: Expression,
    bindings: Bindings | None = None,
    runtime: RuntimeContext | None = None,
) -> EvaluationResult:
    context = _as_context(bindings)
    rendering = render(expr)
    value = evaluate(expr, context, runtime)
    return EvaluationResult(rendering=rendering, value=value)


def _as_context(bindings: Bindings | None) -> Context:
    if bindings is None:
        return Context()
    if isinstance(bindings, Context):
        return bindings
    if isinstance(bindings, str):
        return load_bindings(bindings)
    return Context(bindings)
