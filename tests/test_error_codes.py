"""Test error codes and error names returned for each failure."""

import unittest

from scicalc_pkg.api import calculate, evaluate_expression
from scicalc_pkg.types import (
    BadTokenError,
    CalculatorError,
    DivisionByZeroError,
    EvalError,
    InvalidNumberError,
    InvalidOperationError,
    LexError,
    MismatchedParensError,
    UnknownFunctionError,
)


class TestErrorCodes(unittest.TestCase):
    """Test that each failure maps to its error type and code."""

    CASES = [
        ("2 $ 3", BadTokenError, "BAD_TOKEN", "BadToken"),
        ("(2+3", MismatchedParensError, "MISMATCHED_PARENS", "MismatchedParens"),
        ("2+3)", MismatchedParensError, "MISMATCHED_PARENS", "MismatchedParens"),
        ("1.2.3", InvalidNumberError, "INVALID_NUMBER", "InvalidNumber"),
        ("sec(1)", UnknownFunctionError, "UNKNOWN_FUNCTION", "UnknownFunction"),
        ("5/0", DivisionByZeroError, "DIVISION_BY_ZERO", "DivisionByZero"),
        ("5%0", DivisionByZeroError, "DIVISION_BY_ZERO", "DivisionByZero"),
        ("sqrt(-4)", InvalidOperationError, "INVALID_OPERATION", "InvalidOperation"),
        ("log(0)", InvalidOperationError, "INVALID_OPERATION", "InvalidOperation"),
        ("2*", InvalidOperationError, "INVALID_OPERATION", "InvalidOperation"),
        ("()", InvalidOperationError, "INVALID_OPERATION", "InvalidOperation"),
    ]

    def test_error_types(self):
        for expression, error_type, code, kind in self.CASES:
            with self.subTest(expression=expression):
                with self.assertRaises(error_type) as ctx:
                    calculate(expression)
                self.assertEqual(ctx.exception.code, code)
                self.assertEqual(ctx.exception.kind, kind)

    def test_error_codes_in_results(self):
        for expression, _, code, kind in self.CASES:
            with self.subTest(expression=expression):
                result = evaluate_expression(expression)
                self.assertFalse(result.ok)
                self.assertEqual(result.error_code, code)
                self.assertTrue(result.error.startswith(kind + ":"))

    def test_hierarchy(self):
        for error_type in (BadTokenError, MismatchedParensError, InvalidNumberError, UnknownFunctionError):
            self.assertTrue(issubclass(error_type, LexError))
        for error_type in (DivisionByZeroError, InvalidOperationError):
            self.assertTrue(issubclass(error_type, EvalError))
        self.assertTrue(issubclass(LexError, CalculatorError))
        self.assertTrue(issubclass(EvalError, CalculatorError))

    def test_unknown_identifier_depends_on_first_letter(self):
        with self.assertRaises(BadTokenError) as ctx:
            calculate("xyz")
        self.assertEqual(ctx.exception.char, "x")
        with self.assertRaises(UnknownFunctionError) as ctx:
            calculate("tau")
        self.assertEqual(ctx.exception.letter, "t")

    def test_invalid_operation_carries_reason(self):
        with self.assertRaises(InvalidOperationError) as ctx:
            calculate("sqrt(-4)")
        self.assertIn("negative", ctx.exception.reason)


if __name__ == "__main__":
    unittest.main()
