"""Centralized configuration for scicalc.

This module defines:
- Input validation limits
- Numeric result policy
- Output formatting defaults
- The keypad layout used by the calculator session

Configuration can be overridden via:
- CLI flags (see cli.py)
- Environment variables (prefixed with SCICALC_)
"""

import os

# Version is defined in pyproject.toml [project] section
try:
    import importlib.metadata

    VERSION = importlib.metadata.version("scicalc")
except importlib.metadata.PackageNotFoundError:
    # Fallback if package not installed
    VERSION = "1.0.0"

# Input validation limits
MAX_INPUT_LENGTH = int(os.getenv("SCICALC_MAX_INPUT_LENGTH", "10000"))  # characters

# Numeric policy: when false, inf/nan final results are reported as errors
ALLOW_NON_FINITE = os.getenv("SCICALC_ALLOW_NON_FINITE", "false").lower() == "true"

# Output formatting: 0 means shortest round-trip representation
OUTPUT_PRECISION = int(os.getenv("SCICALC_OUTPUT_PRECISION", "0"))

LOG_LEVEL = os.getenv("SCICALC_LOG_LEVEL", "WARNING").upper()

# Keypad layout, five keys per row
BUTTONS = (
    "C", "(", ")", "^", "mod",
    "7", "8", "9", "/", "*",
    "4", "5", "6", "+", "-",
    "1", "2", "3", ".", "=",
    "0", "pi", "e", "abs", "sqrt",
    "sin", "cos", "tan", "cbrt", "round",
    "log", "log10", "floor", "ceil", "=",
)
BUTTONS_PER_ROW = 5

# Keys that insert a function call; the session appends "(" after them
FUNCTION_KEYS = frozenset(
    {"sin", "cos", "tan", "sqrt", "cbrt", "log", "log10", "abs", "floor", "ceil", "round"}
)
CONSTANT_KEYS = frozenset({"pi", "e"})
