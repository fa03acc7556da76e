"""Type definitions and result dataclasses for consistent API responses."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any

from .conversion import precise


class EvalErrorKind(Enum):
    """Why an arithmetic expression could not be evaluated."""

    PARENTHESIS_MISMATCH = "parentheses don't match"
    WRONG_CHARACTER = "invalid character"
    DIVIDE_BY_ZERO = "division by zero"

    @property
    def message(self) -> str:
        return self.value


@dataclass
class EvalResult:
    """Result of evaluating an arithmetic expression.

    Failures carry either ``kind`` and ``position`` (the expression is
    malformed) or ``code`` (a size limit such as TOO_LONG was exceeded).
    """

    ok: bool
    value: float | None = None
    exact: str | None = None
    approx: str | None = None
    error: str | None = None
    kind: EvalErrorKind | None = None
    position: int | None = None
    code: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        result_dict: dict[str, Any] = {"ok": self.ok}
        if self.value is not None:
            # JSON has no literal for non-finite numbers
            result_dict["value"] = (
                self.value if math.isfinite(self.value) else precise(self.value)
            )
        if self.exact is not None:
            result_dict["exact"] = self.exact
        if self.approx is not None:
            result_dict["approx"] = self.approx
        if self.error is not None:
            result_dict["error"] = self.error
        if self.kind is not None:
            result_dict["kind"] = self.kind.name
        if self.position is not None:
            result_dict["position"] = self.position
        if self.code is not None:
            result_dict["code"] = self.code
        return result_dict

    def __repr__(self) -> str:
        """Return string representation of the result."""
        if not self.ok:
            return (
                f"EvalResult(ok=False, kind={self.kind!r}, position={self.position!r}, "
                f"code={self.code!r}, error={self.error!r})"
            )
        parts = [f"ok={self.ok}", f"value={self.value!r}"]
        if self.exact is not None:
            parts.append(f"exact={self.exact!r}")
        if self.approx is not None:
            parts.append(f"approx={self.approx!r}")
        return f"EvalResult({', '.join(parts)})"


class ValidationError(Exception):
    """Raised when input validation fails."""

    def __init__(self, message: str, code: str = "VALIDATION_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class EvaluationError(Exception):
    """Raised when an arithmetic expression fails to evaluate.

    Carries the failure kind and the character offset where it was detected.
    """

    def __init__(self, kind: EvalErrorKind, position: int):
        self.kind = kind
        self.position = position
        self.message = f"{kind.message} at position {position}"
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message
