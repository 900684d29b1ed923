"""Performance tests for the tokenizer and evaluator.

These tests are marked as 'slow' and can be skipped with: pytest -m "not slow"
"""

import time

import pytest

from scicalc_pkg.api import calculate
from scicalc_pkg.converter import to_postfix
from scicalc_pkg.lexer import tokenize


@pytest.mark.slow
class TestPipelinePerformance:
    """Benchmark the three stages."""

    def test_simple_expression_time(self):
        expr = "2+3*4-sqrt(16)/2"
        start = time.time()
        for _ in range(1000):
            calculate(expr)
        elapsed = time.time() - start
        assert elapsed < 2.0, f"Evaluation too slow: {elapsed}s"

    def test_long_expression_is_linear(self):
        expr = "+".join(["sin(1)*2"] * 1000)
        start = time.time()
        tokens = tokenize(expr)
        postfix = to_postfix(tokens)
        elapsed = time.time() - start
        assert len(postfix) == len(tokens) - 2000  # brackets dropped
        assert elapsed < 2.0, f"Conversion too slow: {elapsed}s"

    def test_deep_nesting(self):
        depth = 2000
        expr = "(" * depth + "1" + ")" * depth
        start = time.time()
        assert calculate(expr) == 1.0
        elapsed = time.time() - start
        assert elapsed < 2.0, f"Nested evaluation too slow: {elapsed}s"
