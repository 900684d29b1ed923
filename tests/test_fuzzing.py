"""Fuzzing and property-based tests for the lexer and the full pipeline."""

import math
import random
import string
import unittest

from hypothesis import given, settings
from hypothesis import strategies as st

from scicalc_pkg.api import calculate
from scicalc_pkg.converter import to_postfix
from scicalc_pkg.evaluator import evaluate
from scicalc_pkg.lexer import tokenize
from scicalc_pkg.tokens import TokenType
from scicalc_pkg.types import CalculatorError

NUMERIC_LITERALS = st.from_regex(
    r"\A([0-9]+(\.[0-9]*)?|\.[0-9]+)([eE][+-]?[0-9]+)?\Z", fullmatch=True
)

FRAGMENTS = [
    "0", "1", "2", "7", "0.5", "1e3", "2.5e-1", ".25",
    "+", "-", "*", "/", "^", "%",
    "(", ")", " ",
    "pi", "e",
    "sin(", "cos(", "tan(", "sqrt(", "cbrt(", "log(", "log10(",
    "abs(", "floor(", "ceil(", "round(",
]


def _balance(expression: str) -> str:
    """Drop unmatched ")" and close any "(" left open."""
    depth = 0
    kept = []
    for char in expression:
        if char == "(":
            depth += 1
        elif char == ")":
            if depth == 0:
                continue
            depth -= 1
        kept.append(char)
    return "".join(kept) + ")" * depth


class TestLexerProperties(unittest.TestCase):
    """Property-based tests for numeric literals."""

    @given(NUMERIC_LITERALS)
    def test_numeric_literal_is_single_number(self, literal):
        tokens = tokenize(literal)
        self.assertEqual(len(tokens), 1)
        self.assertIs(tokens[0].type, TokenType.NUMBER)
        self.assertEqual(tokens[0].value, float(literal))

    @given(st.integers(min_value=0, max_value=10**12))
    def test_integer_literal_evaluates_to_itself(self, number):
        self.assertEqual(calculate(str(number)), float(number))


class TestPipelineProperties(unittest.TestCase):
    """The pipeline only ever fails with a CalculatorError."""

    @settings(max_examples=300)
    @given(st.lists(st.sampled_from(FRAGMENTS), max_size=25))
    def test_well_formed_expressions_never_crash(self, fragments):
        expression = _balance("".join(fragments))
        try:
            result = evaluate(to_postfix(tokenize(expression)))
        except CalculatorError:
            return
        self.assertTrue(math.isfinite(result))

    @given(st.text(alphabet=string.printable, max_size=40))
    def test_arbitrary_text_never_crashes(self, text):
        try:
            calculate(text)
        except CalculatorError:
            pass

    @given(
        st.floats(min_value=-1e6, max_value=1e6, allow_nan=False),
        st.floats(min_value=-1e6, max_value=1e6, allow_nan=False),
    )
    def test_addition_matches_python(self, left, right):
        expression = f"({left!r})+({right!r})"
        self.assertEqual(calculate(expression), left + right)


class TestRandomStrings(unittest.TestCase):
    """Fuzz test with random garbage, in the style of the other fuzz tests."""

    def test_random_strings(self):
        rng = random.Random(1234)
        for _ in range(200):
            length = rng.randint(1, 60)
            random_str = "".join(rng.choices("0123456789.+-*/^%() episqrtcbrtlog", k=length))
            try:
                calculate(random_str)
            except CalculatorError:
                pass  # Expected

    def test_malformed_expressions(self):
        malformed = ["(((", ")))", "++", "*/", "", "   ", "sin", "sin()", "2..3", "e e"]
        for expression in malformed:
            with self.subTest(expression=expression):
                with self.assertRaises(CalculatorError):
                    calculate(expression)


if __name__ == "__main__":
    unittest.main()
