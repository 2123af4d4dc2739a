from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping

from ..writer import IndentingWriter


class UndefinedVariableError(LookupError):
    """A variable was evaluated but has no binding in the context."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"undefined variable '{self.name}'"


@dataclass
class RuntimeContext:
    writer: IndentingWriter = field(default_factory=IndentingWriter)


class Context:
    """Variable bindings consulted while evaluating an expression.

    Not synchronized: a context must only be mutated by the thread that owns
    it. Expressions never hold a reference to a context, so the same tree can
    be evaluated against any number of contexts.
    """

    def __init__(self, bindings: Mapping[str, int] | None = None) -> None:
        self._key_values: dict[str, int] = {}

        if bindings is not None:
            for name, value in bindings.items():
                self.bind(name, value)

    def bind(self, name: str, value: int) -> None:
        self._key_values[name] = value

    def lookup(self, name: str) -> int:
        if name in self._key_values:
            return self._key_values[name]

        raise UndefinedVariableError(name)

    def get(self, name: str, default: int | None = None) -> int | None:
        return self._key_values.get(name, default)

    def __getitem__(self, name: str) -> int:
        return self.lookup(name)

    def __contains__(self, name: object) -> bool:
        return name in self._key_values

    def all_vars(self) -> dict[str, int]:
        return dict(self._key_values)

    def __repr__(self) -> str:
        return f"Context({self._key_values!r})"
