from __future__ import annotations

import sys
from contextlib import contextmanager
from typing import Iterator, TextIO

# DEBUG = True
DEBUG = False


class IndentingWriter:
    def __init__(
        self,
        indent_size: int = 3,
        stream: TextIO | None = None,
        debug_enabled: bool | None = None,
    ) -> None:
        self._indent_size = indent_size
        self._indents = 0
        self._stream = stream
        self._debug_enabled = debug_enabled

    @property
    def debug_enabled(self) -> bool:
        if self._debug_enabled is None:
            return DEBUG
        return self._debug_enabled

    def debug(self, message: str) -> None:
        if self.debug_enabled:
            self._print_indentation()
            self._write(message)

    def debugln(self, message: str) -> None:
        if self.debug_enabled:
            self.debug(message)
            self._write("\n")

    def print(self, message: str, with_title_box: bool = False) -> None:
        if with_title_box:
            self.print_division_line()

        self._print_indentation()
        self._write(message)

        if with_title_box:
            self.print_division_line()

    def println(self, message: str, with_title_box: bool = False) -> None:
        self.print(message + "\n", with_title_box)

    def indent(self) -> None:
        if self.debug_enabled:
            self._indents += 1

    def dedent(self) -> None:
        if self.debug_enabled:
            self._indents -= 1

    def newline(self, on_debug_only: bool = False) -> None:
        if on_debug_only:
            if self.debug_enabled:
                self._write("\n")
        else:
            self._write("\n")

    def print_division_line(self, size: int = 80) -> None:
        self._write("-" * size + "\n")

    def _print_indentation(self) -> None:
        if self.debug_enabled:
            self._write(" " * self._indent_size * self._indents)

    def _write(self, text: str) -> None:
        stream = self._stream if self._stream is not None else sys.stdout
        stream.write(text)


@contextmanager
def indented_output(output_writer: IndentingWriter) -> Iterator[None]:
    output_writer.indent()
    try:
        yield
    finally:
        output_writer.dedent()


@contextmanager
def surrounding_box_title(
    output_writer: IndentingWriter, omit_lower_line: bool = False
) -> Iterator[None]:
    output_writer.print_division_line()
    try:
        yield
    finally:
        if not omit_lower_line:
            output_writer.print_division_line()
