"""wirestr package: symbol interpolation, arithmetic evaluation and CLI."""

__all__ = [
    "config",
    "conversion",
    "symbols",
    "interpolator",
    "evaluator",
    "cli",
    "types",
    "api",
    "logging_config",
]

# Public API exports

__api_exports__ = [
    "set_symbol",
    "get_symbol",
    "interpolate",
    "extract_symbols",
    "evaluate",
    "interpolate_and_evaluate",
    "validate_expression",
]
