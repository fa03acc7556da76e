"""Centralized configuration for wirestr.

This module defines:
- Input validation limits (length, nesting depth)
- Expansion limits for symbol interpolation
- Cache sizes for evaluation
- Character classes and regex patterns for parsing

Configuration can be overridden via:
- CLI flags (see cli.py)
- Environment variables (prefixed with WIRESTR_)
"""

import os
import re
import string

# Version is defined in pyproject.toml [project] section
try:
    import importlib.metadata

    VERSION = importlib.metadata.version("wirestr")
except Exception:
    # Fallback if package not installed
    VERSION = "1.0.0"

# Input validation limits
MAX_INPUT_LENGTH = int(os.getenv("WIRESTR_MAX_INPUT_LENGTH", "10000"))  # characters
MAX_EXPRESSION_DEPTH = int(
    os.getenv("WIRESTR_MAX_EXPRESSION_DEPTH", "100")
)  # parenthesis nesting

# Interpolation limits
MAX_EXPANSION_DEPTH = int(
    os.getenv("WIRESTR_MAX_EXPANSION_DEPTH", "64")
)  # nested symbol expansions

# Largest decimal exponent accepted by exact (rational) evaluation
MAX_EXACT_EXPONENT = int(os.getenv("WIRESTR_MAX_EXACT_EXPONENT", "4000"))

# Output formatting
OUTPUT_PRECISION = int(os.getenv("WIRESTR_OUTPUT_PRECISION", "6"))

# Cache configuration
CACHE_SIZE_EVAL = int(os.getenv("WIRESTR_CACHE_SIZE_EVAL", "2048"))

# Symbol references
SIGIL = "$"
IDENTIFIER_CHARS = frozenset(string.ascii_letters + string.digits + "-_")
SYMBOL_NAME_RE = re.compile(r"\$?[A-Za-z0-9_-]+")

# Words that convert to false/zero when no number can be read
FALSY_WORDS = ("0", "false")

# Numeric prefixes read by typed conversions (leading whitespace is skipped first)
INT_PREFIX_REGEX = re.compile(r"[+-]?\d+")
FLOAT_PREFIX_REGEX = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

# Unsigned decimal literal read by the expression evaluator
NUMBER_REGEX = re.compile(
    r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE](?P<exponent>[+-]?\d+))?"
)

# Precision used by precise(): digits10 + 1 for an IEEE double
PRECISE_DIGITS = 16
