from dataclasses import dataclass
from typing import Literal as TypingLiteral

BinaryOp = TypingLiteral["+", "-"]


class Expression:
    pass


@dataclass(frozen=True, slots=True)
class Literal(Expression):
    value: int


@dataclass(frozen=True, slots=True)
class Variable(Expression):
    name: str


@dataclass(frozen=True, slots=True)
class Binary(Expression):
    left: Expression
    right: Expression
    op: BinaryOp


def literal(value: int) -> Literal:
    return Literal(value)


def variable(name: str) -> Variable:
    return Variable(name)


def add(left: Expression, right: Expression) -> Binary:
    return Binary(left, right, "+")


def sub(left: Expression, right: Expression) -> Binary:
    return Binary(left, right, "-")
