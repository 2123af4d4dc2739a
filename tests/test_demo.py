import pytest

from exprtree import writer as writer_module
from exprtree.demo import run_demo
from exprtree.writer import IndentingWriter, indented_output


# ===== Demo Output =====
def test_demo_prints_rendering_and_result(capsys: pytest.CaptureFixture[str]) -> None:
    run_demo()

    output = capsys.readouterr().out
    assert "EXPRESSION TREE" in output
    assert "(((5 + 3) + x) + ((((4 + 7) - y) + (((2 + 3) - 4) + x)) + 12))" in output
    assert "evaluate(expression, {'x': 3, 'y': 6})" in output
    assert " -> 32" in output


# ===== Writer =====
def test_debug_flag_controls_default_writers(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    writer = IndentingWriter()

    writer.debugln("hidden")
    monkeypatch.setattr(writer_module, "DEBUG", True)
    with indented_output(writer):
        writer.debugln("shown")

    assert capsys.readouterr().out == "   shown\n"


def test_title_box_surrounds_message(capsys: pytest.CaptureFixture[str]) -> None:
    IndentingWriter().println("TITLE", with_title_box=True)

    line = "-" * 80
    assert capsys.readouterr().out == f"{line}\nTITLE\n{line}\n"
