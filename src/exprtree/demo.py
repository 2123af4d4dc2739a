from .programs import SAMPLE_BINDINGS, build_sample_expression
from .frontend.bindings import load_bindings
from .frontend.renderer import render
from .runtime.core import RuntimeContext
from .runtime.evaluator import evaluate
from .writer import surrounding_box_title, IndentingWriter


def run_demo(writer: IndentingWriter | None = None) -> None:
    writer = writer or IndentingWriter()
    expression = build_sample_expression()
    context = load_bindings(SAMPLE_BINDINGS)

    with surrounding_box_title(writer, omit_lower_line=True):
        writer.println("EXPRESSION TREE")

    with surrounding_box_title(writer, omit_lower_line=True):
        writer.println(f"render(expression) -> {render(expression)}")

    with surrounding_box_title(writer):
        writer.println(f"evaluate(expression, {context.all_vars()})")
        writer.newline(on_debug_only=True)
        value = evaluate(expression, context, RuntimeContext(writer=writer))
        writer.println(f" -> {value}")


if __name__ == "__main__":
    run_demo()
