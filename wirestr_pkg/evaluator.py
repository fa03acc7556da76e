"""Recursive-descent evaluator for arithmetic expressions.

Grammar, from loosest to tightest binding::

    Summand := Factor (('+' | '-') Factor)*
    Factor  := Atom (('*' | '/') Atom)*
    Atom    := ['-'] ['+'] ( '(' Summand ')' | Number )

Both binary levels are left-associative. Whitespace may precede any atom,
operator or parenthesis. Numbers are plain decimal literals with an optional
exponent. Evaluation stops at the first failure, reported with its kind and
the character offset where it was detected.
"""

from __future__ import annotations

import math
from decimal import Decimal
from fractions import Fraction
from functools import lru_cache
from typing import Any

import sympy as sp

from . import config
from .config import NUMBER_REGEX, PRECISE_DIGITS
from .conversion import format_number
from .logging_config import get_logger
from .types import EvalErrorKind, EvalResult, EvaluationError, ValidationError

logger = get_logger("evaluator")


class ExpressionEvaluator:
    """Evaluates one expression string.

    With ``exact=True`` numbers are read as ``sympy.Rational`` and the result
    is an exact rational instead of a float.
    """

    def __init__(self, expression: str, exact: bool = False):
        self.expression = expression
        self.exact = exact
        self._pos = 0
        self._depth = 0

    def evaluate(self) -> Any:
        """Evaluate the whole expression.

        Returns:
            The value as a float, or a ``sympy.Rational`` in exact mode

        Raises:
            EvaluationError: On mismatched parentheses, an unexpected character
                or division by zero
            ValidationError: If the input is too long, nested too deeply or, in
                exact mode, has an exponent above ``MAX_EXACT_EXPONENT``
        """
        if len(self.expression) > config.MAX_INPUT_LENGTH:
            raise ValidationError(
                f"Input too long (>{config.MAX_INPUT_LENGTH} characters)", "TOO_LONG"
            )
        self._pos = 0
        self._depth = 0
        value = self._parse_summands()
        if self._peek() == ")":
            raise EvaluationError(EvalErrorKind.PARENTHESIS_MISMATCH, self._pos)
        if self._pos < len(self.expression):
            raise EvaluationError(EvalErrorKind.WRONG_CHARACTER, self._pos)
        return value

    def _peek(self) -> str:
        return self.expression[self._pos : self._pos + 1]

    def _skip_whitespace(self) -> None:
        while self._pos < len(self.expression) and self.expression[self._pos].isspace():
            self._pos += 1

    def _number(self, literal: str, exponent: str | None) -> Any:
        if self.exact:
            # 10**exponent is built in full, so its size is bounded up front
            digits = exponent.lstrip("+-").lstrip("0") if exponent else ""
            if len(digits) > len(str(config.MAX_EXACT_EXPONENT)) or (
                digits and int(digits) > config.MAX_EXACT_EXPONENT
            ):
                raise ValidationError(
                    f"Exponent too large for exact evaluation (>{config.MAX_EXACT_EXPONENT})",
                    "TOO_LARGE",
                )
            fraction = Fraction(Decimal(literal))
            return sp.Rational(fraction.numerator, fraction.denominator)
        return float(literal)

    def _parse_atom(self) -> Any:
        self._skip_whitespace()

        # Sign before a parenthesis or a number
        negative = False
        if self._peek() == "-":
            negative = True
            self._pos += 1
        if self._peek() == "+":
            self._pos += 1
        self._skip_whitespace()

        if self._peek() == "(":
            self._pos += 1
            self._depth += 1
            if self._depth > config.MAX_EXPRESSION_DEPTH:
                raise ValidationError(
                    f"Expression nested too deeply (>{config.MAX_EXPRESSION_DEPTH} levels)",
                    "TOO_DEEP",
                )
            value = self._parse_summands()
            if self._peek() != ")":
                # Unmatched opening parenthesis
                raise EvaluationError(EvalErrorKind.PARENTHESIS_MISMATCH, self._pos)
            self._pos += 1
            self._depth -= 1
            return -value if negative else value

        match = NUMBER_REGEX.match(self.expression, self._pos)
        if match is None:
            raise EvaluationError(EvalErrorKind.WRONG_CHARACTER, self._pos)
        self._pos = match.end()
        value = self._number(match.group(0), match.group("exponent"))
        return -value if negative else value

    def _parse_factors(self) -> Any:
        left = self._parse_atom()
        while True:
            self._skip_whitespace()
            op = self._peek()
            op_pos = self._pos
            if op not in ("*", "/"):
                return left
            self._pos += 1
            right = self._parse_atom()
            if op == "/":
                if right == 0:
                    raise EvaluationError(EvalErrorKind.DIVIDE_BY_ZERO, op_pos)
                left = left / right
            else:
                left = left * right

    def _parse_summands(self) -> Any:
        left = self._parse_factors()
        while True:
            self._skip_whitespace()
            op = self._peek()
            if op not in ("+", "-"):
                return left
            self._pos += 1
            right = self._parse_factors()
            if op == "-":
                left = left - right
            else:
                left = left + right


def evaluate_or_raise(expression: str, exact: bool = False) -> Any:
    """Evaluate ``expression`` and return its value, raising on failure.

    Raises:
        EvaluationError: Carrying the failure kind and position
        ValidationError: If the input breaks a size limit (TOO_LONG, TOO_DEEP, TOO_LARGE)

    Example:
        >>> evaluate_or_raise("5*(4+4+1)")
        45.0
    """
    return ExpressionEvaluator(expression, exact=exact).evaluate()


@lru_cache(maxsize=config.CACHE_SIZE_EVAL)
def _evaluate_cached(
    expression: str, exact: bool
) -> tuple[Any, EvalErrorKind | None, int | None]:
    try:
        return evaluate_or_raise(expression, exact=exact), None, None
    except EvaluationError as e:
        logger.debug("Evaluation of %r failed: %s", expression, e)
        return None, e.kind, e.position


def evaluate(expression: str, exact: bool = False) -> EvalResult:
    """Evaluate an arithmetic expression.

    Args:
        expression: Expression string (e.g., "5*(4+4+1)")
        exact: Compute with exact rationals instead of floats

    Returns:
        EvalResult with the value, or with the error kind and position

    Raises:
        ValidationError: If the input breaks a size limit (TOO_LONG, TOO_DEEP, TOO_LARGE)

    Example:
        >>> evaluate("-5*(2*(1+3)+1)").value
        -45.0
        >>> evaluate("1/0").kind
        <EvalErrorKind.DIVIDE_BY_ZERO: 'division by zero'>
    """
    value, kind, position = _evaluate_cached(expression, exact)
    if kind is not None:
        return EvalResult(
            ok=False,
            error=f"{kind.message} at position {position}",
            kind=kind,
            position=position,
        )
    number = _to_float(value)
    return EvalResult(
        ok=True,
        value=number,
        exact=_exact_text(value) if exact else None,
        approx=format_number(number),
    )


def _to_float(value: Any) -> float:
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf


def _exact_text(value: Any) -> str:
    try:
        return str(value)
    except ValueError:
        # Integer part longer than the interpreter will render as decimal text
        return str(sp.Float(value, PRECISE_DIGITS))


def clear_cache() -> None:
    """Drop memoized evaluation results."""
    _evaluate_cached.cache_clear()
