"""Test error codes returned by various functions."""

import unittest

from wirestr_pkg.evaluator import evaluate, evaluate_or_raise
from wirestr_pkg.interpolator import interpolate
from wirestr_pkg.symbols import SymbolTable
from wirestr_pkg.types import EvalErrorKind, EvaluationError, ValidationError


class TestErrorCodes(unittest.TestCase):
    """Test that functions return appropriate error codes."""

    def test_invalid_name_error_code(self):
        """Test that unusable symbol names return INVALID_NAME error code."""
        try:
            SymbolTable().set("two words", "x")
            self.fail("Should have raised ValidationError")
        except ValidationError as e:
            self.assertEqual(e.code, "INVALID_NAME", f"Expected INVALID_NAME, got {e.code}")
            self.assertIn("invalid", str(e).lower())

    def test_too_long_error_code(self):
        """Test that overly long input returns TOO_LONG error code."""
        try:
            evaluate("1" * 10001)  # Exceeds MAX_INPUT_LENGTH
            self.fail("Should have raised ValidationError")
        except ValidationError as e:
            self.assertEqual(e.code, "TOO_LONG", f"Expected TOO_LONG, got {e.code}")
            self.assertIn("too long", str(e).lower())

    def test_too_deep_error_code(self):
        """Test that deeply nested input returns TOO_DEEP error code."""
        with self.assertRaises(ValidationError) as ctx:
            evaluate_or_raise("(" * 101 + "1" + ")" * 101)
        self.assertEqual(ctx.exception.code, "TOO_DEEP")

    def test_error_kinds_are_distinct(self):
        """Test that each failure cause maps to its own kind."""
        kinds = {
            evaluate("1/0").kind,
            evaluate("(1+2").kind,
            evaluate("1+").kind,
        }
        self.assertEqual(
            kinds,
            {
                EvalErrorKind.DIVIDE_BY_ZERO,
                EvalErrorKind.PARENTHESIS_MISMATCH,
                EvalErrorKind.WRONG_CHARACTER,
            },
        )

    def test_error_messages(self):
        self.assertEqual(EvalErrorKind.WRONG_CHARACTER.message, "invalid character")
        self.assertEqual(
            EvalErrorKind.PARENTHESIS_MISMATCH.message, "parentheses don't match"
        )
        self.assertEqual(EvalErrorKind.DIVIDE_BY_ZERO.message, "division by zero")

    def test_evaluation_error_attributes(self):
        error = EvaluationError(EvalErrorKind.DIVIDE_BY_ZERO, 7)
        self.assertEqual(error.kind, EvalErrorKind.DIVIDE_BY_ZERO)
        self.assertEqual(error.position, 7)
        self.assertEqual(str(error), "division by zero at position 7")

    def test_interpolation_never_raises(self):
        """Test that interpolation degrades to literal text instead of failing."""
        table = SymbolTable({"A": "$B", "B": "$A", "SELF": "$SELF"})
        for text in ("$A", "$B", "$SELF", "$", "$$", "$-", "$UNDEFINED"):
            self.assertIsInstance(interpolate(text, table), str)


if __name__ == "__main__":
    unittest.main()
