"""scicalc package: tokenizer, shunting-yard converter, evaluator, session and CLI."""

__all__ = [
    "config",
    "tokens",
    "lexer",
    "converter",
    "evaluator",
    "api",
    "session",
    "cli",
    "types",
    "logging_config",
]

# Public API exports

__api_exports__ = [
    "tokenize",
    "to_postfix",
    "evaluate",
    "calculate",
    "evaluate_expression",
    "validate_expression",
    "format_number",
    "format_postfix",
]
