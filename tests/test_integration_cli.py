"""Integration tests for CLI functionality."""

import json
import subprocess
import sys

import pytest

from wirestr_pkg.cli import handle_line, main_entry
from wirestr_pkg.symbols import SymbolTable


def test_cli_version():
    """Test --version flag."""
    result = subprocess.run(
        [sys.executable, "-m", "wirestr_pkg.cli", "--version"],
        capture_output=True,
        text=True,
        timeout=10,
    )
    assert result.returncode == 0
    assert result.stdout.strip() != ""


def test_cli_health_check(capsys):
    """Test --health-check command."""
    assert main_entry(["--health-check"]) == 0
    out = capsys.readouterr().out
    assert "health check" in out.lower()
    assert "0 failed" in out


def test_cli_interpolate(capsys):
    code = main_entry(
        ["-D", "PLAYER_1=Mark", "-D", "PLAYER_2=John", "-i", "Hi $PLAYER_1 and $PLAYER_2"]
    )
    assert code == 0
    assert capsys.readouterr().out.strip() == "Hi Mark and John"


def test_cli_interpolate_json(capsys):
    assert main_entry(["-i", "Hi $PLAYER_3", "--format", "json"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data == {"ok": True, "text": "Hi $PLAYER_3"}


def test_cli_eval_human(capsys):
    assert main_entry(["--eval", "5*(4+4+1)"]) == 0
    assert capsys.readouterr().out.strip() == "45"


def test_cli_eval_with_symbols(capsys):
    assert main_entry(["-D", "items=100", "-e", "$items * 2"]) == 0
    assert capsys.readouterr().out.strip() == "200"


def test_cli_eval_json_error(capsys):
    assert main_entry(["-e", "1/0", "--format", "json"]) == 1
    data = json.loads(capsys.readouterr().out)
    assert data["ok"] is False
    assert data["kind"] == "DIVIDE_BY_ZERO"
    assert data["position"] == 1


def test_cli_eval_json_infinity_is_valid_json(capsys):
    assert main_entry(["-e", "1e308*10", "--format", "json"]) == 0
    out = capsys.readouterr().out
    assert "Infinity" not in out
    data = json.loads(out, parse_constant=_reject_constant)
    assert data["ok"] is True
    assert data["value"] == "INF"


def test_cli_eval_json_limit_code(capsys):
    assert main_entry(["--exact", "-e", "1e99999999", "--format", "json"]) == 1
    data = json.loads(capsys.readouterr().out)
    assert data["ok"] is False
    assert data["code"] == "TOO_LARGE"


def _reject_constant(name):
    raise ValueError(f"non-standard JSON constant {name}")


def test_cli_eval_exact(capsys):
    assert main_entry(["--exact", "-e", "1/3"]) == 0
    out = capsys.readouterr().out
    assert "Exact: 1/3" in out
    assert "Decimal: 0.333333" in out


def test_cli_precision(capsys):
    assert main_entry(["-p", "3", "-e", "2/3"]) == 0
    assert capsys.readouterr().out.strip() == "0.667"


def test_cli_empty_eval(capsys):
    assert main_entry(["-e", "   "]) == 1
    assert "Empty input" in capsys.readouterr().out


def test_cli_bad_define():
    with pytest.raises(SystemExit) as exc_info:
        main_entry(["-D", "novalue", "-i", "x"])
    assert exc_info.value.code == 2


def test_cli_invalid_symbol_name(capsys):
    assert main_entry(["-D", "two words=1", "-i", "x"]) == 2
    assert "Invalid symbol name" in capsys.readouterr().out


def test_cli_repl(monkeypatch, capsys):
    lines = iter(["PLAYER_1 = Mark", "Hi $PLAYER_1", "", "= 2*(1+2)", "vars", "quit"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(lines))
    assert main_entry([]) == 0
    out = capsys.readouterr().out
    assert "Hi Mark" in out
    assert "6" in out
    assert "$PLAYER_1 = Mark" in out


def test_cli_repl_eof(monkeypatch, capsys):
    def raise_eof(prompt=""):
        raise EOFError

    monkeypatch.setattr("builtins.input", raise_eof)
    assert main_entry([]) == 0
    assert "Goodbye" in capsys.readouterr().out


class TestHandleLine:
    def test_assignment_then_expansion(self, capsys):
        table = SymbolTable()
        assert handle_line("$HEY = Hello stranger", table) is True
        assert handle_line("GREETING = $HEY! How are you?", table) is True
        handle_line("$GREETING", table)
        assert capsys.readouterr().out.strip() == "Hello stranger! How are you?"

    def test_evaluation_error(self, capsys):
        handle_line("= (1+2", SymbolTable())
        assert "parentheses don't match" in capsys.readouterr().out

    def test_quit(self):
        assert handle_line("exit", SymbolTable()) is False

    def test_help(self, capsys):
        handle_line("help", SymbolTable())
        assert "Commands" in capsys.readouterr().out
