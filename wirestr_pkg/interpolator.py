"""Symbol interpolation for ``$name`` references inside text.

Scanning is a single left-to-right pass. A sigil opens a reference, which
runs over identifier characters (ASCII letters, digits, ``-`` and ``_``).
The first other character closes it: the reference is replaced by the
recursively interpolated value of the symbol, or emitted literally when the
symbol is undefined or is already being expanded. The closing character is
copied as is and is not scanned again, so ``"$A$B"`` never expands ``$B``.

Values are resolved at interpolation time, so redefining a symbol changes
the expansion of every symbol that refers to it.
"""

from __future__ import annotations

import sys

from . import config
from .config import IDENTIFIER_CHARS, SIGIL
from .logging_config import get_logger
from .symbols import SymbolTable, default_table

logger = get_logger("interpolator")


def is_identifier_char(char: str) -> bool:
    """True for characters that continue a ``$identifier`` reference."""
    return char in IDENTIFIER_CHARS


def interpolate(text: str, table: SymbolTable | None = None, parent: str = "") -> str:
    """Expand every ``$name`` reference in ``text``.

    Args:
        text: Template text
        table: Symbol table to resolve against (default: the process-wide table)
        parent: Sigil-prefixed symbol currently being expanded, quoted if met again

    Returns:
        Expanded text. Never raises: undefined symbols, self references and
        references beyond ``MAX_EXPANSION_DEPTH`` are emitted literally.

    Example:
        >>> table = SymbolTable({"HEY": "Hello stranger", "GREETING": "$HEY! How are you?"})
        >>> interpolate("$GREETING", table)
        'Hello stranger! How are you?'
    """
    if table is None:
        table = default_table()
    ancestors = frozenset([parent]) if parent else frozenset()
    return _expand(text, table, ancestors)


def max_expansion_depth() -> int:
    """Effective expansion bound: ``MAX_EXPANSION_DEPTH``, capped so the
    recursive expansion (two frames per level) stays within the interpreter's
    recursion limit."""
    return min(config.MAX_EXPANSION_DEPTH, sys.getrecursionlimit() // 4)


def _expand(text: str, table: SymbolTable, ancestors: frozenset[str]) -> str:
    out: list[str] = []
    ident = ""
    for char in text:
        if ident:
            if is_identifier_char(char):
                ident += char
                continue
            out.append(_resolve(ident, table, ancestors))
            out.append(char)
            ident = ""
        elif char == SIGIL:
            ident = char
        else:
            out.append(char)
    if ident:
        out.append(_resolve(ident, table, ancestors))
    return "".join(out)


def _resolve(ident: str, table: SymbolTable, ancestors: frozenset[str]) -> str:
    value = table.lookup(ident)
    if value is None or ident in ancestors:
        return ident
    limit = max_expansion_depth()
    if len(ancestors) >= limit:
        logger.warning(
            "Expansion depth %d reached at %s; emitting it literally",
            limit,
            ident,
        )
        return ident
    return _expand(value, table, ancestors | {ident})


def extract(text: str, sigils: str = SIGIL) -> list[str]:
    """List the references in ``text`` in order of appearance, sigil included.

    Args:
        text: Template text
        sigils: Characters that open a reference

    Returns:
        References such as ``["$PLAYER_1", "$PLAYER_2"]``; duplicates are kept

    Example:
        >>> extract("Hi $PLAYER_1 and $PLAYER_2")
        ['$PLAYER_1', '$PLAYER_2']
    """
    found: list[str] = []
    ident = ""
    for char in text:
        if ident:
            if is_identifier_char(char):
                ident += char
            else:
                found.append(ident)
                ident = ""
        elif char in sigils:
            ident = char
    if ident:
        found.append(ident)
    return found
