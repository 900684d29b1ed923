"""Public API for scicalc - runs the lexer, converter and evaluator in sequence."""

from __future__ import annotations

from collections.abc import Sequence

from . import config
from .converter import to_postfix
from .evaluator import evaluate
from .lexer import tokenize
from .logging_config import get_logger
from .tokens import Token
from .types import CalculatorError, EvalResult, LexError

logger = get_logger("api")


def format_number(value: float, precision: int | None = None) -> str:
    """Format a result for display.

    Args:
        value: Number to format
        precision: Significant digits; 0 or None uses ``config.OUTPUT_PRECISION``,
            and if that is 0 too the shortest round-trip form is used

    Returns:
        Formatted string, without a trailing ``.0`` for whole numbers

    Example:
        >>> format_number(14.0)
        '14'
        >>> format_number(0.1 + 0.2, precision=6)
        '0.3'
    """
    if not precision:
        precision = config.OUTPUT_PRECISION
    if precision and precision > 0:
        return "{:.{}g}".format(value, int(precision))
    if value.is_integer() and abs(value) < 1e16:
        return str(int(value))
    return repr(value)


def format_postfix(tokens: Sequence[Token]) -> str:
    """Render tokens space separated, e.g. ``"2 3 4 * +"``."""
    return " ".join(str(token) for token in tokens)


def calculate(expression: str) -> float:
    """Evaluate an expression and return its value.

    Args:
        expression: Expression string (e.g., "2+3*4", "sqrt(16)")

    Returns:
        The numeric result

    Raises:
        LexError: The expression could not be tokenized
        EvalError: The expression could not be evaluated

    Example:
        >>> calculate("2+3*4")
        14.0
        >>> calculate("2^3^2")
        64.0
    """
    return evaluate(to_postfix(tokenize(expression)))


def evaluate_expression(expression: str, precision: int | None = None) -> EvalResult:
    """Evaluate an expression without raising.

    Args:
        expression: Expression string (e.g., "2+2", "sin(pi/2)")
        precision: Significant digits for the formatted result (optional)

    Returns:
        EvalResult with the formatted result, raw value and postfix form, or
        the error message and code
    """
    postfix_text = None
    try:
        postfix = to_postfix(tokenize(expression))
        postfix_text = format_postfix(postfix)
        value = evaluate(postfix)
    except CalculatorError as e:
        logger.info("Evaluation of %r failed: %s", expression, e, extra={"error_code": e.code})
        return EvalResult(
            ok=False,
            postfix=postfix_text,
            error=f"{e.kind}: {e.message}",
            error_code=e.code,
        )
    return EvalResult(
        ok=True,
        result=format_number(value, precision),
        value=value,
        postfix=postfix_text,
    )


def validate_expression(expression: str) -> tuple[bool, str | None]:
    """Check that an expression tokenizes, without evaluating it.

    Args:
        expression: Expression string to validate

    Returns:
        Tuple of (is_valid, error_message)

    Example:
        >>> validate_expression("2 + 2")
        (True, None)
        >>> validate_expression("2 + 3)")
        (False, 'Mismatched parentheses')
    """
    try:
        tokenize(expression)
        return True, None
    except LexError as e:
        return False, str(e)
