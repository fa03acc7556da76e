"""Command-line interface for wirestr.

Symbols are defined with ``-D NAME=VALUE`` and then used by ``--interpolate``
and ``--eval``. Without either flag an interactive session starts.
"""

from __future__ import annotations

import argparse
import json
import re
import sys

from . import config
from .api import interpolate_and_evaluate
from .config import VERSION
from .interpolator import interpolate
from .logging_config import get_logger, setup_logging
from .symbols import SymbolTable
from .types import EvalResult, ValidationError

logger = get_logger("cli")

ASSIGNMENT_RE = re.compile(r"^\$?([A-Za-z0-9_-]+)\s*=\s*(.*)$")


def _parse_define(item: str) -> tuple[str, str]:
    """Split a ``NAME=VALUE`` definition given on the command line."""
    name, sep, value = item.partition("=")
    if not sep or not name:
        raise argparse.ArgumentTypeError(f"expected NAME=VALUE, got {item!r}")
    return name.strip(), value


def print_result_pretty(result: EvalResult, output_format: str = "human") -> None:
    """Print an evaluation result in the specified format.

    Args:
        result: Evaluation result
        output_format: "json" for JSON output, "human" for human-readable
    """
    if output_format == "json":
        print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False, allow_nan=False))
        return
    if not result.ok:
        print("Error:", result.error)
        return
    if result.exact is not None and result.exact != result.approx:
        print("Exact:", result.exact)
        print("Decimal:", result.approx)
    else:
        print(result.approx)


def print_text(text: str, output_format: str = "human") -> None:
    if output_format == "json":
        print(json.dumps({"ok": True, "text": text}, indent=2, ensure_ascii=False))
    else:
        print(text)


def print_help_text() -> None:
    print("Commands:")
    print("  NAME = value   define or redefine $NAME")
    print("  = expression   interpolate, then evaluate arithmetic")
    print("  vars           list defined symbols")
    print("  help           show this text")
    print("  quit, exit     leave")
    print("Anything else is printed with its $symbols expanded.")


def _health_check() -> int:
    """Run health check to verify dependencies and basic operations.

    Returns:
        Exit code (0 for success, non-zero for failures)
    """
    checks_passed = 0
    checks_failed = 0

    print("Running wirestr health check...")
    print("-" * 50)

    try:
        import sympy as sp

        print(f"[OK] SymPy {sp.__version__} imported successfully")
        checks_passed += 1
    except ImportError as e:
        print(f"[FAIL] SymPy import failed: {e}")
        checks_failed += 1

    try:
        from .evaluator import evaluate

        result = evaluate("5*(4+4+1)")
        if result.ok and result.value == 45:
            print("[OK] Expression evaluation works")
            checks_passed += 1
        else:
            print(f"[FAIL] Evaluation check failed: {result}")
            checks_failed += 1
    except Exception as e:
        print(f"[FAIL] Evaluation check failed: {e}")
        checks_failed += 1

    try:
        table = SymbolTable({"HEY": "Hello", "GREETING": "$HEY!"})
        text = interpolate("$GREETING", table)
        if text == "Hello!":
            print("[OK] Symbol interpolation works")
            checks_passed += 1
        else:
            print(f"[FAIL] Interpolation check failed: {text!r}")
            checks_failed += 1
    except Exception as e:
        print(f"[FAIL] Interpolation check failed: {e}")
        checks_failed += 1

    print("-" * 50)
    print(f"{checks_passed} passed, {checks_failed} failed")
    return 0 if checks_failed == 0 else 1


def handle_line(
    raw: str, table: SymbolTable, output_format: str = "human", exact: bool = False
) -> bool:
    """Handle one interactive input line. Returns False when the session should end."""
    command = raw.strip().lower()
    if command in ("quit", "exit"):
        return False
    if command == "help":
        print_help_text()
        return True
    if command == "vars":
        for key, value in table.as_dict().items():
            print(f"{key} = {value}")
        return True
    if raw.startswith("="):
        print_result_pretty(
            interpolate_and_evaluate(raw[1:], table, exact=exact), output_format
        )
        return True
    match = ASSIGNMENT_RE.match(raw)
    if match:
        name, value = match.groups()
        table.set(name, value)
        return True
    print_text(interpolate(raw, table), output_format)
    return True


def repl_loop(
    table: SymbolTable, output_format: str = "human", exact: bool = False
) -> None:
    """Interactive session reading lines until EOF or ``quit``."""
    try:
        import readline  # noqa: F401
    except (ImportError, ModuleNotFoundError):
        # readline not available on Windows - that's fine
        pass

    print("wirestr - type 'help' for commands, 'quit' to exit.")
    while True:
        try:
            raw = input(">>> ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\nGoodbye.")
            break
        if not raw:
            continue
        if not handle_line(raw, table, output_format, exact):
            break


def main_entry(argv: list[str] | None = None) -> int:
    """
    Main entry point for the wirestr CLI.

    Args:
        argv: Optional command-line arguments (defaults to sys.argv)

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    parser = argparse.ArgumentParser(prog="wirestr")
    parser.add_argument(
        "-D",
        "--define",
        type=_parse_define,
        action="append",
        default=[],
        metavar="NAME=VALUE",
        help="Define a symbol (repeatable)",
    )
    parser.add_argument(
        "-i",
        "--interpolate",
        type=str,
        help="Print TEXT with its $symbols expanded and exit",
        dest="template",
    )
    parser.add_argument(
        "-e",
        "--eval",
        type=str,
        help="Evaluate one arithmetic expression (after expanding symbols) and exit",
        dest="eval_expr",
    )
    parser.add_argument(
        "--exact", action="store_true", help="Evaluate with exact rational arithmetic"
    )
    parser.add_argument(
        "--format",
        type=str,
        choices=["json", "human"],
        default="human",
        help="Output format: json (machine-readable) or human (human-readable)",
    )
    parser.add_argument(
        "-p", "--precision", type=int, help="Set output precision (significant digits)"
    )
    parser.add_argument(
        "--max-depth", type=int, help="Set maximum nested symbol expansions"
    )
    parser.add_argument(
        "-v", "--version", action="store_true", help="Show program version"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Set logging level",
    )
    parser.add_argument("--log-file", type=str, help="Write logs to file")
    parser.add_argument(
        "--health-check",
        action="store_true",
        help="Run health check and verify dependencies",
    )
    args = parser.parse_args(argv)

    setup_logging(level=args.log_level, log_file=args.log_file)

    # Apply CLI configuration overrides
    if args.precision and args.precision > 0:
        config.OUTPUT_PRECISION = int(args.precision)
    if args.max_depth and args.max_depth > 0:
        config.MAX_EXPANSION_DEPTH = int(args.max_depth)

    if args.version:
        print(VERSION)
        return 0
    if args.health_check:
        return _health_check()

    table = SymbolTable()
    try:
        for name, value in args.define:
            table.set(name, value)
    except ValidationError as e:
        print(f"Error: {e}")
        return 2

    if args.template is None and args.eval_expr is None:
        repl_loop(table, output_format=args.format, exact=args.exact)
        return 0

    exit_code = 0
    if args.template is not None:
        print_text(interpolate(args.template, table), args.format)
    if args.eval_expr is not None:
        expr = args.eval_expr.strip()
        if not expr:
            print("Error: Empty input. Please enter an arithmetic expression.")
            return 1
        result = interpolate_and_evaluate(expr, table, exact=args.exact)
        print_result_pretty(result, output_format=args.format)
        if not result.ok:
            logger.info("Evaluation failed: %s", result.error)
            exit_code = 1
    return exit_code


if __name__ == "__main__":
    """Allow running the CLI module directly with python -m wirestr_pkg.cli"""
    sys.exit(main_entry())
