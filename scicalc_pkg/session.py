"""Headless calculator front panel.

Holds the display text, the last result and the last error, and reacts to
keypad presses and keyboard shortcuts the way the on-screen calculator does.
Any front end (the CLI REPL, a GUI) only needs to forward keys and render
``display``, ``result`` and ``error``.
"""

from __future__ import annotations

from . import config
from .api import calculate, format_number
from .logging_config import get_logger
from .types import CalculatorError

logger = get_logger("session")

CLEAR_KEY = "C"
EQUALS_KEY = "="
MOD_KEY = "mod"


class CalculatorSession:
    """State of one calculator panel."""

    def __init__(self, precision: int | None = None) -> None:
        self.display = ""
        self.result = ""
        self.error: str | None = None
        self.precision = precision

    def clear(self) -> None:
        self.display = ""
        self.result = ""
        self.error = None

    def press(self, key: str) -> None:
        """Handle a keypad button.

        ``C`` clears, ``=`` calculates, ``mod`` inserts ``%`` and function
        buttons insert their name followed by an opening parenthesis.
        """
        if key == CLEAR_KEY:
            self.clear()
        elif key == EQUALS_KEY:
            self.calculate()
        elif key == MOD_KEY:
            self.display += "%"
        elif key in config.FUNCTION_KEYS:
            self.display += key + "("
        else:
            self.display += key

    def key_event(self, name: str) -> None:
        """Handle a keyboard shortcut: Enter, Escape or BackSpace."""
        if name == "Enter":
            self.calculate()
        elif name == "Escape":
            self.clear()
        elif name == "BackSpace":
            self.display = self.display[:-1]
        else:
            logger.debug("Ignoring key %r", name)

    def calculate(self) -> bool:
        """Evaluate the display text.

        On success ``result`` holds the formatted value. On failure ``error``
        holds ``"<Kind>: <detail>"`` and ``display`` and ``result`` keep
        their previous text.

        Returns:
            True if the evaluation succeeded
        """
        self.error = None
        try:
            value = calculate(self.display)
        except CalculatorError as e:
            self.error = f"{e.kind}: {e.message}"
            return False
        self.result = format_number(value, self.precision)
        return True

    def render(self) -> str:
        """Text of the result line: ``= <result>``, the error, or nothing."""
        if self.error is not None:
            return self.error
        if self.result:
            return f"= {self.result}"
        return ""


def keypad_rows() -> list[tuple[str, ...]]:
    """The keypad buttons grouped into rows."""
    width = config.BUTTONS_PER_ROW
    return [
        tuple(config.BUTTONS[i : i + width])
        for i in range(0, len(config.BUTTONS), width)
    ]
