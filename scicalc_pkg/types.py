"""Error types and result dataclasses for consistent API responses."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class EvalResult:
    """Result of evaluating an arithmetic expression."""

    ok: bool
    result: str | None = None
    value: float | None = None
    postfix: str | None = None
    error: str | None = None
    error_code: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        result_dict: dict[str, Any] = {"ok": self.ok}
        if self.result is not None:
            result_dict["result"] = self.result
        if self.value is not None:
            result_dict["value"] = self.value
        if self.postfix is not None:
            result_dict["postfix"] = self.postfix
        if self.error is not None:
            result_dict["error"] = self.error
        if self.error_code is not None:
            result_dict["error_code"] = self.error_code
        return result_dict

    def __repr__(self) -> str:
        """Return string representation of the result."""
        if not self.ok:
            return f"EvalResult(ok=False, error={self.error!r}, error_code={self.error_code!r})"
        parts = [f"ok={self.ok}"]
        if self.result is not None:
            parts.append(f"result={self.result!r}")
        if self.postfix is not None:
            parts.append(f"postfix={self.postfix!r}")
        return f"EvalResult({', '.join(parts)})"


class CalculatorError(Exception):
    """Base class for every error the engine raises."""

    def __init__(self, message: str, code: str = "CALCULATOR_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message

    @property
    def kind(self) -> str:
        """Short error name without the ``Error`` suffix, e.g. ``BadToken``."""
        name = type(self).__name__
        return name[: -len("Error")] if name.endswith("Error") else name


class LexError(CalculatorError):
    """Raised when the input string cannot be tokenized."""

    def __init__(self, message: str, code: str = "LEX_ERROR", position: int | None = None):
        self.position = position
        super().__init__(message, code)


class BadTokenError(LexError):
    """Unrecognized character."""

    def __init__(self, char: str, position: int | None = None):
        self.char = char
        super().__init__(f"Unexpected character {char!r}", "BAD_TOKEN", position)


class MismatchedParensError(LexError):
    def __init__(self, position: int | None = None):
        super().__init__("Mismatched parentheses", "MISMATCHED_PARENS", position)


class InvalidNumberError(LexError):
    """A numeric literal that float() rejects, e.g. ``1.2.3``."""

    def __init__(self, literal: str, position: int | None = None):
        self.literal = literal
        super().__init__(f"Invalid number {literal!r}", "INVALID_NUMBER", position)


class UnknownFunctionError(LexError):
    """A letter that starts a function name but does not complete one."""

    def __init__(self, letter: str, position: int | None = None):
        self.letter = letter
        super().__init__(f"Unknown function starting with {letter!r}", "UNKNOWN_FUNCTION", position)


class InputTooLongError(LexError):
    def __init__(self, length: int, limit: int):
        self.length = length
        self.limit = limit
        super().__init__(
            f"Input too long ({length} characters, limit is {limit})", "TOO_LONG"
        )


class EvalError(CalculatorError):
    """Raised when a postfix sequence cannot be reduced to a number."""

    def __init__(self, message: str, code: str = "EVAL_ERROR"):
        super().__init__(message, code)


class DivisionByZeroError(EvalError):
    def __init__(self) -> None:
        super().__init__("Division by zero", "DIVISION_BY_ZERO")


class InvalidOperationError(EvalError):
    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(reason, "INVALID_OPERATION")
