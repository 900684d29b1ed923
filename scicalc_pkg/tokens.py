"""Token definitions shared by the lexer, the converter and the evaluator.

A token is a small immutable tagged value. ``TokenType`` names the variant and
``value`` holds the payload: a float for numbers, or a member of one of the
enums below for operators, brackets, functions and constants.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Union


class TokenType(Enum):
    """Variants a token can take."""

    NUMBER = "number"
    OPERATOR = "operator"
    BRACKET = "bracket"
    FUNCTION = "function"
    CONSTANT = "constant"


class Operator(Enum):
    """Binary infix operators, valued by their source symbol."""

    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"
    POW = "^"
    MOD = "%"

    @property
    def precedence(self) -> int:
        return OPERATOR_PRECEDENCE[self]


# Higher binds tighter. The converter relies on this order.
OPERATOR_PRECEDENCE = {
    Operator.ADD: 1,
    Operator.SUB: 1,
    Operator.MUL: 2,
    Operator.DIV: 2,
    Operator.MOD: 2,
    Operator.POW: 3,
}


class Bracket(Enum):
    OPEN = "("
    CLOSE = ")"


class Function(Enum):
    """Single-argument functions, valued by their keyword."""

    SIN = "sin"
    COS = "cos"
    TAN = "tan"
    SQRT = "sqrt"
    CBRT = "cbrt"
    LOG = "log"
    LOG10 = "log10"
    ABS = "abs"
    FLOOR = "floor"
    CEIL = "ceil"
    ROUND = "round"


class Constant(Enum):
    PI = "pi"
    E = "e"

    @property
    def numeric_value(self) -> float:
        return CONSTANT_VALUES[self]


CONSTANT_VALUES = {
    Constant.PI: math.pi,
    Constant.E: math.e,
}

TokenValue = Union[float, Operator, Bracket, Function, Constant]


@dataclass(frozen=True)
class Token:
    """A single lexical unit.

    ``position`` is the index of the token's first character in the
    case-folded input, or -1 for tokens the lexer synthesizes. It does not
    take part in equality so tokens compare by content only.
    """

    type: TokenType
    value: TokenValue
    position: int = field(default=-1, compare=False)

    @classmethod
    def number(cls, value: float, position: int = -1) -> Token:
        return cls(TokenType.NUMBER, float(value), position)

    @classmethod
    def operator(cls, op: Operator, position: int = -1) -> Token:
        return cls(TokenType.OPERATOR, op, position)

    @classmethod
    def bracket(cls, bracket: Bracket, position: int = -1) -> Token:
        return cls(TokenType.BRACKET, bracket, position)

    @classmethod
    def function(cls, func: Function, position: int = -1) -> Token:
        return cls(TokenType.FUNCTION, func, position)

    @classmethod
    def constant(cls, const: Constant, position: int = -1) -> Token:
        return cls(TokenType.CONSTANT, const, position)

    @property
    def is_open_bracket(self) -> bool:
        return self.type is TokenType.BRACKET and self.value is Bracket.OPEN

    def __str__(self) -> str:
        if self.type is TokenType.NUMBER:
            value = float(self.value)
            if value.is_integer() and abs(value) < 1e16:
                return str(int(value))
            return repr(value)
        return str(self.value.value)

    def __repr__(self) -> str:
        if self.type is TokenType.NUMBER:
            return f"Token(NUMBER, {self.value!r})"
        return f"Token({self.type.name}, {self.value.name})"
