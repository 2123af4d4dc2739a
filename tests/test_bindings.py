import pytest
from lark import UnexpectedInput

from exprtree.frontend.bindings import load_bindings, parse_bindings
from exprtree.runtime.core import Context


# ===== Statement Syntax =====
def test_parse_empty_source() -> None:
    assert parse_bindings("") == {}


def test_parse_bindings_with_comments_and_negatives() -> None:
    source = """
    # sample values
    x = 3;
    y = -6;  # trailing comment
    _tmp2 = 0;
    """

    assert parse_bindings(source) == {"x": 3, "y": -6, "_tmp2": 0}


def test_later_statement_overwrites_earlier_one() -> None:
    assert parse_bindings("x = 1; x = 2;") == {"x": 2}


def test_semicolon_is_required() -> None:
    with pytest.raises(UnexpectedInput):
        parse_bindings("x = 1")


@pytest.mark.parametrize("source", ["x = 1.5;", "x = y;", "1 = 2;", "x = + 1;"])
def test_only_integer_values_are_accepted(source: str) -> None:
    with pytest.raises(UnexpectedInput):
        parse_bindings(source)


# ===== Loading Into Contexts =====
def test_load_bindings_creates_context() -> None:
    context = load_bindings("x = 3; y = 6;")

    assert context.all_vars() == {"x": 3, "y": 6}


def test_load_bindings_updates_existing_context() -> None:
    context = Context({"x": 1, "z": 9})

    returned = load_bindings("x = 3;", context)

    assert returned is context
    assert context.all_vars() == {"x": 3, "z": 9}
