from functools import lru_cache
from importlib.resources import files
from typing import Any, cast

from lark import Lark, Token, Transformer, Tree

from ..runtime.core import Context


class BindingsTransformer(Transformer[Token, object]):
    def start(self, children: list[object]) -> dict[str, int]:
        bindings: dict[str, int] = {}
        for child in children:
            assert isinstance(child, tuple)
            name, value = child
            bindings[name] = value
        return bindings

    def binding(self, children: list[object]) -> tuple[str, int]:
        [name, value] = children
        assert isinstance(name, Token)
        assert isinstance(value, Token)
        return str(name), int(str(value))


def _load_grammar_text() -> str:
    grammar_file = files("exprtree.frontend").joinpath("bindings.lark")
    return grammar_file.read_text(encoding="utf-8")


@lru_cache(maxsize=1)
def get_parser() -> Lark:
    grammar = _load_grammar_text()
    return Lark(grammar, start="start", parser="lalr")


def parse_tree(source: str) -> Tree[Token]:
    parser: Any = get_parser()
    tree = parser.parse(source)
    return cast(Tree[Token], tree)


def parse_bindings(source: str) -> dict[str, int]:
    """Read `name = integer;` statements; later statements win."""
    parsed = parse_tree(source)
    bindings = BindingsTransformer().transform(parsed)
    assert isinstance(bindings, dict)
    return cast(dict[str, int], bindings)


def load_bindings(source: str, context: Context | None = None) -> Context:
    context = context if context is not None else Context()
    for name, value in parse_bindings(source).items():
        context.bind(name, value)
    return context
