"""Lexer: turns an expression string into a list of tokens.

This module handles:
- Case folding and whitespace skipping
- Numeric literals, including scientific notation
- Operators, with the contextual unary minus rewrite
- Function and constant keywords
- Parenthesis balancing
"""

from __future__ import annotations

from . import config
from .logging_config import get_logger
from .tokens import Bracket, Constant, Function, Operator, Token, TokenType
from .types import (
    BadTokenError,
    InputTooLongError,
    InvalidNumberError,
    MismatchedParensError,
    UnknownFunctionError,
)

logger = get_logger("lexer")

_DIGITS = frozenset("0123456789")
_WHITESPACE = frozenset(" \n")

_SIMPLE_OPERATORS = {
    "+": Operator.ADD,
    "*": Operator.MUL,
    "/": Operator.DIV,
    "^": Operator.POW,
    "%": Operator.MOD,
}

# Longest names first so that "log10" is tried before "log".
# The bare constant "e" is not listed; it needs a lookahead of its own.
KEYWORDS: tuple[tuple[str, TokenType, Function | Constant], ...] = tuple(
    sorted(
        [(func.value, TokenType.FUNCTION, func) for func in Function]
        + [(Constant.PI.value, TokenType.CONSTANT, Constant.PI)],
        key=lambda entry: len(entry[0]),
        reverse=True,
    )
)

# Letters that begin a function name. A word starting with one of these that
# is not a known function is reported as an unknown function, anything else
# as a bad token.
FUNCTION_INITIALS = frozenset(func.value[0] for func in Function)


def _scan_number(source: str, start: int) -> int:
    """Return the end index of the numeric literal starting at ``start``."""
    pos = start + 1
    end = len(source)
    while pos < end:
        char = source[pos]
        if char in _DIGITS or char == ".":
            pos += 1
        elif char == "e":
            pos += 1
            if pos < end and source[pos] in "+-":
                pos += 1
        else:
            break
    return pos


def _scan_identifier(source: str, pos: int) -> tuple[Token, int]:
    """Match a keyword at ``pos``. Returns the token and the characters consumed."""
    for name, token_type, value in KEYWORDS:
        if source.startswith(name, pos):
            return Token(token_type, value, pos), len(name)

    char = source[pos]
    if char == Constant.E.value:
        following = source[pos + 1] if pos + 1 < len(source) else ""
        if following.isalpha():
            raise UnknownFunctionError(char, pos)
        return Token.constant(Constant.E, pos), 1
    if char in FUNCTION_INITIALS:
        raise UnknownFunctionError(char, pos)
    raise BadTokenError(char, pos)


def _minus_is_unary(tokens: list[Token]) -> bool:
    if not tokens:
        return True
    last = tokens[-1]
    return last.type is TokenType.OPERATOR or last.is_open_bracket


def tokenize(expression: str) -> list[Token]:
    """Split an expression into tokens.

    A ``-`` at the start of the input, after an operator or after ``(`` is
    rewritten as ``-1 *`` so the following operand is negated by
    multiplication; everywhere else it is subtraction.

    Args:
        expression: Expression text, e.g. ``"2 + sin(pi/2)"``

    Returns:
        List of tokens in source order

    Raises:
        InputTooLongError: The input exceeds ``config.MAX_INPUT_LENGTH``
        InvalidNumberError: A numeric literal does not parse as a float
        MismatchedParensError: A ``)`` without a ``(``, or an unclosed ``(``
        UnknownFunctionError: A function-like word that is not a known function
        BadTokenError: Any other unexpected character
    """
    if len(expression) > config.MAX_INPUT_LENGTH:
        raise InputTooLongError(len(expression), config.MAX_INPUT_LENGTH)

    source = expression.lower()
    tokens: list[Token] = []
    open_parens: list[int] = []
    pos = 0
    end = len(source)

    while pos < end:
        char = source[pos]

        if char in _WHITESPACE:
            pos += 1
        elif char in _DIGITS or char == ".":
            stop = _scan_number(source, pos)
            literal = source[pos:stop]
            try:
                value = float(literal)
            except ValueError:
                raise InvalidNumberError(literal, pos) from None
            tokens.append(Token.number(value, pos))
            pos = stop
        elif char == "(":
            tokens.append(Token.bracket(Bracket.OPEN, pos))
            open_parens.append(pos)
            pos += 1
        elif char == ")":
            if not open_parens:
                raise MismatchedParensError(pos)
            open_parens.pop()
            tokens.append(Token.bracket(Bracket.CLOSE, pos))
            pos += 1
        elif char == "-":
            if _minus_is_unary(tokens):
                tokens.append(Token.number(-1.0, pos))
                tokens.append(Token.operator(Operator.MUL, pos))
            else:
                tokens.append(Token.operator(Operator.SUB, pos))
            pos += 1
        elif char in _SIMPLE_OPERATORS:
            tokens.append(Token.operator(_SIMPLE_OPERATORS[char], pos))
            pos += 1
        elif char.isalpha():
            token, length = _scan_identifier(source, pos)
            tokens.append(token)
            pos += length
        else:
            raise BadTokenError(char, pos)

    if open_parens:
        raise MismatchedParensError(open_parens[-1])

    logger.debug("Tokenized %r into %d tokens", expression, len(tokens))
    return tokens
