"""Shared fixtures: every test starts from a clean process-wide state."""

import logging

import pytest

from wirestr_pkg import config
from wirestr_pkg.evaluator import clear_cache
from wirestr_pkg.symbols import SymbolTable, reset_default_table


@pytest.fixture(autouse=True)
def clean_state(monkeypatch):
    # CLI flags overwrite these module attributes; monkeypatch restores them
    monkeypatch.setattr(config, "OUTPUT_PRECISION", config.OUTPUT_PRECISION)
    monkeypatch.setattr(config, "MAX_EXPANSION_DEPTH", config.MAX_EXPANSION_DEPTH)
    reset_default_table()
    clear_cache()
    yield
    reset_default_table()
    clear_cache()
    root = logging.getLogger("wirestr")
    root.handlers.clear()
    root.propagate = True
    root.setLevel(logging.NOTSET)


@pytest.fixture
def players():
    """Two players, a greeting chain and a self-referencing symbol."""
    return SymbolTable(
        {
            "PLAYER_1": "Mark",
            "PLAYER_2": "John",
            "HEY": "Hello stranger",
            "GREETING": "$HEY! How are you?",
            "LOOPBACK": "$LOOPBACK is quoted.",
        }
    )
