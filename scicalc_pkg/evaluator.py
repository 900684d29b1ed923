"""Postfix evaluation on a float operand stack."""

from __future__ import annotations

import math
from collections.abc import Sequence

import numpy as np

from . import config
from .logging_config import get_logger
from .tokens import Function, Operator, Token, TokenType
from .types import DivisionByZeroError, InvalidOperationError

logger = get_logger("evaluator")


def round_half_away(value: float) -> float:
    """Round to the nearest integer, ties away from zero (2.5 -> 3, -2.5 -> -3)."""
    if not math.isfinite(value) or abs(value) >= 2.0**52:
        # Already integral, or nothing to round
        return value
    magnitude = abs(value)
    rounded = math.floor(magnitude)
    if magnitude - rounded >= 0.5:
        rounded += 1
    return math.copysign(rounded, value)


def apply_operator(op: Operator, left: float, right: float) -> float:
    """Apply a binary operator.

    Raises:
        DivisionByZeroError: ``/`` or ``%`` with a zero right operand
        InvalidOperationError: The result is undefined or overflows
    """
    if op is Operator.ADD:
        return left + right
    if op is Operator.SUB:
        return left - right
    if op is Operator.MUL:
        return left * right
    if op is Operator.DIV:
        if right == 0.0:
            raise DivisionByZeroError()
        return left / right
    if op is Operator.MOD:
        if right == 0.0:
            raise DivisionByZeroError()
        try:
            return math.fmod(left, right)
        except ValueError:
            raise InvalidOperationError(f"{left:g} % {right:g} is undefined") from None
    try:
        return math.pow(left, right)
    except ValueError:
        raise InvalidOperationError(f"{left:g} ^ {right:g} is undefined") from None
    except OverflowError:
        raise InvalidOperationError(f"{left:g} ^ {right:g} is too large") from None


def apply_function(func: Function, value: float) -> float:
    """Apply a single-argument function.

    Raises:
        InvalidOperationError: The argument is outside the function's domain
    """
    if func is Function.SQRT:
        if value < 0.0:
            raise InvalidOperationError("Cannot take the square root of a negative number")
        return math.sqrt(value)
    if func in (Function.LOG, Function.LOG10):
        if value <= 0.0:
            raise InvalidOperationError("Cannot take the logarithm of a non-positive number")
        return math.log(value) if func is Function.LOG else math.log10(value)
    if func is Function.CBRT:
        return float(np.cbrt(value))
    if func is Function.ABS:
        return abs(value)
    if func is Function.ROUND:
        return round_half_away(value)
    if func in (Function.FLOOR, Function.CEIL):
        if not math.isfinite(value):
            return value
        return float(math.floor(value) if func is Function.FLOOR else math.ceil(value))
    trig = {Function.SIN: math.sin, Function.COS: math.cos, Function.TAN: math.tan}[func]
    try:
        return trig(value)
    except ValueError:
        raise InvalidOperationError(f"{func.value}({value:g}) is undefined") from None


def evaluate(postfix: Sequence[Token]) -> float:
    """Reduce a postfix token sequence to a single number.

    Args:
        postfix: Tokens in postfix order, as produced by ``to_postfix``

    Returns:
        The value of the expression

    Raises:
        DivisionByZeroError: Division or remainder by zero
        InvalidOperationError: Missing operands, a domain error, a stack that
            does not end with exactly one value, or (unless
            ``config.ALLOW_NON_FINITE``) a result that is inf or nan
    """
    stack: list[float] = []

    for token in postfix:
        if token.type is TokenType.NUMBER:
            stack.append(token.value)
        elif token.type is TokenType.CONSTANT:
            stack.append(token.value.numeric_value)
        elif token.type is TokenType.OPERATOR:
            if len(stack) < 2:
                raise InvalidOperationError(
                    f"Not enough operands for operator {token.value.value!r}"
                )
            right = stack.pop()
            left = stack.pop()
            stack.append(apply_operator(token.value, left, right))
        elif token.type is TokenType.FUNCTION:
            if not stack:
                raise InvalidOperationError(
                    f"Not enough operands for function {token.value.value!r}"
                )
            stack.append(apply_function(token.value, stack.pop()))
        # brackets never reach a well-formed postfix sequence; skip them

    if len(stack) != 1:
        raise InvalidOperationError("Invalid expression")

    result = stack[0]
    if not config.ALLOW_NON_FINITE and not math.isfinite(result):
        raise InvalidOperationError("Result is not a finite number")
    logger.debug("Evaluated %d tokens to %r", len(postfix), result)
    return result
