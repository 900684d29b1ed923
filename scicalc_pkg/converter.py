"""Infix to postfix conversion (shunting-yard)."""

from __future__ import annotations

from collections.abc import Sequence

from .logging_config import get_logger
from .tokens import Bracket, Token, TokenType

logger = get_logger("converter")


def to_postfix(tokens: Sequence[Token]) -> list[Token]:
    """Reorder infix tokens into postfix (reverse Polish) order.

    Operators of equal precedence resolve left to right, ``^`` included, so
    ``2^3^2`` becomes ``2 3 ^ 2 ^``. A function waits on the stack until the
    ``)`` closing its argument and is emitted right after it.

    Parenthesis balance is the lexer's job; a stray ``)`` here just drains
    the stack and a leftover ``(`` is dropped.
    """
    output: list[Token] = []
    stack: list[Token] = []

    for token in tokens:
        if token.type in (TokenType.NUMBER, TokenType.CONSTANT):
            output.append(token)
        elif token.type is TokenType.OPERATOR:
            precedence = token.value.precedence
            while (
                stack
                and stack[-1].type is TokenType.OPERATOR
                and stack[-1].value.precedence >= precedence
            ):
                output.append(stack.pop())
            stack.append(token)
        elif token.type is TokenType.FUNCTION:
            stack.append(token)
        elif token.value is Bracket.OPEN:
            stack.append(token)
        else:
            while stack:
                top = stack.pop()
                if top.is_open_bracket:
                    if stack and stack[-1].type is TokenType.FUNCTION:
                        output.append(stack.pop())
                    break
                output.append(top)

    while stack:
        token = stack.pop()
        if not token.is_open_bracket:
            output.append(token)

    logger.debug("Postfix: %s", " ".join(str(token) for token in output))
    return output
