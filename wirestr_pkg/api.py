"""Public API for wirestr - returns plain text and structured objects.

Symbol functions take an optional ``table``; without one they work on the
process-wide table from ``symbols.default_table()``.
"""

from __future__ import annotations

from typing import Any

from .evaluator import evaluate as _evaluate
from .evaluator import evaluate_or_raise
from .interpolator import extract
from .interpolator import interpolate as _interpolate
from .logging_config import get_logger
from .symbols import SymbolTable, default_table
from .types import EvalResult, EvaluationError, ValidationError

logger = get_logger("api")


def _table(table: SymbolTable | None) -> SymbolTable:
    return table if table is not None else default_table()


def set_symbol(name: str, value: Any, table: SymbolTable | None = None) -> None:
    """Define or redefine a symbol.

    Args:
        name: Symbol name without the sigil (e.g., "PLAYER_1")
        value: bool, int, float or str; stored as text
        table: Symbol table to update (default: process-wide table)

    Raises:
        ValidationError: If the name contains characters a reference cannot hold

    Example:
        >>> from wirestr_pkg.api import set_symbol, interpolate
        >>> set_symbol("PLAYER_1", "Mark")
        >>> interpolate("Hi $PLAYER_1")
        'Hi Mark'
    """
    _table(table).set(name, value)


def get_symbol(name: str, table: SymbolTable | None = None) -> str:
    """Return the text of a symbol, or "" when it is undefined."""
    return _table(table).get(name)


def interpolate(text: str, table: SymbolTable | None = None) -> str:
    """Expand ``$name`` references in ``text``.

    Args:
        text: Template text
        table: Symbol table to resolve against (default: process-wide table)

    Returns:
        Expanded text; undefined and self-referencing symbols stay literal

    Example:
        >>> from wirestr_pkg.api import interpolate
        >>> interpolate("Hi $PLAYER_3")
        'Hi $PLAYER_3'
    """
    return _interpolate(text, _table(table))


def extract_symbols(text: str) -> list[str]:
    """List the ``$name`` references found in ``text``."""
    return extract(text)


def evaluate(expression: str, exact: bool = False) -> EvalResult:
    """Evaluate an arithmetic expression.

    Args:
        expression: Expression using numbers, + - * / and parentheses
        exact: Compute with exact rationals (result also in ``EvalResult.exact``)

    Returns:
        EvalResult; on failure ``kind`` and ``position`` tell what went wrong and
        where, or ``code`` names the size limit that was exceeded

    Example:
        >>> from wirestr_pkg.api import evaluate
        >>> result = evaluate("5*((1+3)*2+1)")
        >>> print(result.value)
        45.0
        >>> result = evaluate("(1+2")
        >>> print(result.kind.name, result.position)
        PARENTHESIS_MISMATCH 4
    """
    try:
        return _evaluate(expression, exact=exact)
    except ValidationError as e:
        return EvalResult(ok=False, error=str(e), code=e.code)


def interpolate_and_evaluate(
    text: str, table: SymbolTable | None = None, exact: bool = False
) -> EvalResult:
    """Expand symbols in ``text`` and evaluate the resulting expression.

    Example:
        >>> from wirestr_pkg.symbols import SymbolTable
        >>> table = SymbolTable({"items": 100})
        >>> interpolate_and_evaluate("$items * 2", table).value
        200.0
    """
    return evaluate(interpolate(text, table), exact=exact)


def validate_expression(expression: str) -> tuple[bool, str | None]:
    """Validate an expression by evaluating it.

    Args:
        expression: Expression string to validate

    Returns:
        Tuple of (is_valid, error_message)

    Example:
        >>> from wirestr_pkg.api import validate_expression
        >>> validate_expression("2 + 2")
        (True, None)
        >>> validate_expression("1@2")
        (False, 'invalid character at position 1')
    """
    try:
        evaluate_or_raise(expression)
        return True, None
    except (EvaluationError, ValidationError) as e:
        return False, str(e)
