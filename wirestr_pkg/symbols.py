"""Symbol table: named text values referenced from templates as ``$name``."""

from __future__ import annotations

from typing import Any, Iterator

from .config import SIGIL, SYMBOL_NAME_RE
from .conversion import CHAR, as_type, to_text
from .logging_config import get_logger
from .types import ValidationError

logger = get_logger("symbols")


def symbol_key(name: str) -> str:
    """Return the sigil-prefixed key for ``name`` ("PLAYER_1" -> "$PLAYER_1")."""
    return name if name.startswith(SIGIL) else SIGIL + name


def _checked_key(name: str) -> str:
    # Only names a template can reference may be stored
    if not SYMBOL_NAME_RE.fullmatch(name):
        raise ValidationError(f"Invalid symbol name: {name!r}", "INVALID_NAME")
    return symbol_key(name)


class SymbolTable:
    """Maps sigil-prefixed symbol keys to their current text.

    Values of any scalar type are stored as text and converted back on read.
    Entries are overwritten in place and never removed. A table is not
    synchronized; give each thread or task its own instance.

    Example:
        >>> table = SymbolTable()
        >>> table.set("items", 100)
        >>> table.get("items")
        '100'
        >>> table.as_int("items") * 2
        200
    """

    def __init__(self, symbols: dict[str, Any] | None = None) -> None:
        self._symbols: dict[str, str] = {}
        for name, value in (symbols or {}).items():
            self.set(name, value)

    def set(self, name: str, value: Any) -> None:
        """Store ``value`` as text under ``$name``.

        Raises:
            ValidationError: If ``name`` could never be referenced from a template
        """
        key = _checked_key(name)
        self._symbols[key] = to_text(value)
        logger.debug("Defined %s", key)

    def get(self, name: str) -> str:
        """Current text of ``$name``, or "" when undefined. Never creates an entry."""
        return self._symbols.get(symbol_key(name), "")

    def lookup(self, key: str) -> str | None:
        """Text stored under the exact sigil-prefixed ``key``, or None."""
        return self._symbols.get(key)

    def define(self, name: str) -> str:
        """Create ``$name`` with empty text if it is absent; return its current text."""
        return self._symbols.setdefault(_checked_key(name), "")

    def as_(self, name: str, target: Any) -> Any:
        """Typed read of ``$name``; see ``conversion.as_type``."""
        return as_type(self.get(name), target)

    def as_bool(self, name: str) -> bool:
        return self.as_(name, bool)

    def as_int(self, name: str) -> int:
        return self.as_(name, int)

    def as_float(self, name: str) -> float:
        return self.as_(name, float)

    def as_char(self, name: str) -> str:
        return self.as_(name, CHAR)

    def keys(self) -> list[str]:
        return list(self._symbols)

    def as_dict(self) -> dict[str, str]:
        return dict(self._symbols)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and symbol_key(name) in self._symbols

    def __getitem__(self, name: str) -> str:
        return self.get(name)

    def __setitem__(self, name: str, value: Any) -> None:
        self.set(name, value)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._symbols))

    def __len__(self) -> int:
        return len(self._symbols)

    def __repr__(self) -> str:
        return f"SymbolTable({self._symbols!r})"


_DEFAULT_TABLE: SymbolTable | None = None


def default_table() -> SymbolTable:
    """Process-wide table used when callers do not pass their own; created on first use."""
    global _DEFAULT_TABLE
    if _DEFAULT_TABLE is None:
        _DEFAULT_TABLE = SymbolTable()
    return _DEFAULT_TABLE


def reset_default_table() -> None:
    """Discard the process-wide table (the next ``default_table()`` call starts empty)."""
    global _DEFAULT_TABLE
    _DEFAULT_TABLE = None
