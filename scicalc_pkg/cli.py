from __future__ import annotations

import argparse
import json
import math
import sys
from typing import Any

from . import config
from .api import evaluate_expression, format_postfix
from .config import VERSION
from .converter import to_postfix
from .lexer import tokenize
from .logging_config import get_logger, setup_logging
from .session import CalculatorSession, keypad_rows
from .types import LexError

logger = get_logger("cli")


def _health_check() -> int:
    """Run health check to verify dependencies and basic operations.

    Returns:
        Exit code (0 for success, non-zero for failures)
    """
    checks_passed = 0
    checks_failed = 0

    print("Running scicalc health check...")
    print("-" * 50)

    try:
        import numpy

        print(f"[OK] NumPy {numpy.__version__} imported successfully")
        checks_passed += 1
    except ImportError as e:
        print(f"[FAIL] NumPy import failed: {e}")
        print("  To install: pip install numpy")
        checks_failed += 1

    samples = [
        ("2+3*4", "14"),
        ("(2+3)*4", "20"),
        ("2^3^2", "64"),
        ("3--2", "5"),
        ("cbrt(-27)", "-3"),
        ("abs(-7)", "7"),
    ]
    for expression, expected in samples:
        result = evaluate_expression(expression)
        if result.ok and result.result == expected:
            print(f"[OK] {expression} = {expected}")
            checks_passed += 1
        else:
            print(f"[FAIL] {expression}: expected {expected}, got {result}")
            checks_failed += 1

    result = evaluate_expression("5/0")
    if not result.ok and result.error_code == "DIVISION_BY_ZERO":
        print("[OK] Division by zero is reported")
        checks_passed += 1
    else:
        print(f"[FAIL] Division by zero check failed: {result}")
        checks_failed += 1

    print("-" * 50)
    print(f"Results: {checks_passed} passed, {checks_failed} failed")

    if checks_failed > 0:
        print("\n[WARN] Some health checks failed. Core functionality may be impaired.")
        return 1

    print("\n[OK] All health checks passed!")
    return 0


def print_result_pretty(
    res: dict[str, Any], output_format: str = "human", show_postfix: bool = False
) -> None:
    """Print result in specified format.

    Args:
        res: Result dictionary
        output_format: "json" for JSON output, "human" for human-readable
        show_postfix: Also print the postfix form (human format only)
    """
    if output_format == "json":
        value = res.get("value")
        if value is not None and not math.isfinite(value):
            # JSON has no inf/nan literal; "result" still carries the text
            res = {key: item for key, item in res.items() if key != "value"}
        print(json.dumps(res, indent=2, ensure_ascii=False, allow_nan=False))
        return
    if show_postfix and res.get("postfix"):
        print("Postfix:", res["postfix"])
    if not res.get("ok"):
        print("Error:", res.get("error"))
        return
    print(res.get("result"))


def print_help_text() -> None:
    """Print help text for REPL commands."""
    keypad = "\n".join("  " + "  ".join(f"{key:>5}" for key in row) for row in keypad_rows())
    help_text = f"""scicalc version {VERSION}

Type an expression and press Enter to evaluate it.

Operators:    +  -  *  /  ^ (power, left-associative)  % (remainder)
Functions:    sin(x) cos(x) tan(x)     radians
              sqrt(x) cbrt(x)          roots
              log(x) log10(x)          natural and base-10 logarithm
              floor(x) ceil(x) round(x) abs(x)
Constants:    pi, e
Numbers:      42, 3.5, .5, 1e-3, 2.5E+4

Commands:
  C, clear    Clear display, result and error
  keys        Show the keypad layout
  help        Show this help
  quit, exit  Leave

Keypad:
{keypad}
"""
    print(help_text)


def repl_loop(precision: int | None = None, show_postfix: bool = False) -> None:
    """Interactive REPL loop feeding a calculator session."""
    try:
        import readline  # noqa: F401
    except ImportError:
        # readline not available on Windows - that's fine
        pass

    session = CalculatorSession(precision=precision)
    print("scicalc - type 'help' for commands, 'quit' to exit.")

    while True:
        try:
            raw = input(">>> ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\nGoodbye.")
            break
        if not raw:
            continue

        command = raw.lower()
        if command in ("quit", "exit"):
            print("Goodbye.")
            break
        if command == "help":
            print_help_text()
            continue
        if command == "keys":
            for row in keypad_rows():
                print("  ".join(f"{key:>5}" for key in row))
            continue
        if raw == "C" or command == "clear":
            session.press("C")
            print("Cleared.")
            continue

        if show_postfix:
            try:
                print("Postfix:", format_postfix(to_postfix(tokenize(raw))))
            except LexError:
                pass  # reported by the session below
        session.display = raw
        session.calculate()
        print(session.render())
        logger.debug("REPL evaluated %r", raw)


def main_entry(argv: list[str] | None = None) -> int:
    """
    Main entry point for scicalc CLI.

    Args:
        argv: Optional command-line arguments (defaults to sys.argv)

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    parser = argparse.ArgumentParser(prog="scicalc")
    parser.add_argument(
        "-e",
        "--eval",
        type=str,
        help="Evaluate one expression and exit (non-interactive)",
        dest="eval_expr",
    )
    parser.add_argument(
        "--format",
        type=str,
        choices=["json", "human"],
        default="human",
        help="Output format: json (machine-readable) or human (human-readable)",
    )
    parser.add_argument(
        "--postfix",
        action="store_true",
        help="Also print the expression in postfix (RPN) order",
    )
    parser.add_argument(
        "-p", "--precision", type=int, help="Set output precision (significant digits)"
    )
    parser.add_argument(
        "--allow-non-finite",
        action="store_true",
        help="Report inf/nan results instead of treating them as errors",
    )
    parser.add_argument(
        "-v", "--version", action="store_true", help="Show program version"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Set logging level (default: SCICALC_LOG_LEVEL or WARNING)",
    )
    parser.add_argument("--log-file", type=str, help="Write logs to file")
    parser.add_argument(
        "--health-check",
        action="store_true",
        help="Run health check and verify dependencies",
    )
    args = parser.parse_args(argv)

    setup_logging(level=args.log_level or config.LOG_LEVEL, log_file=args.log_file)

    # Apply CLI configuration overrides
    if args.precision and args.precision > 0:
        config.OUTPUT_PRECISION = int(args.precision)
    if args.allow_non_finite:
        config.ALLOW_NON_FINITE = True

    if args.version:
        print(VERSION)
        return 0
    if args.health_check:
        return _health_check()
    if args.eval_expr is not None:
        expr = args.eval_expr.strip()
        if not expr:
            print("Error: Empty input. Please enter a valid expression.")
            return 1
        res = evaluate_expression(expr)
        print_result_pretty(res.to_dict(), args.format, show_postfix=args.postfix)
        return 0 if res.ok else 1

    repl_loop(show_postfix=args.postfix)
    return 0


if __name__ == "__main__":
    sys.exit(main_entry())
