#!/usr/bin/env python3
"""
wirestr - symbol interpolation and arithmetic evaluation

Main entry point for the wirestr command-line tool.
This file serves as a thin wrapper that delegates all functionality
to the wirestr_pkg package.

Usage:
    python wirestr.py                                  # Interactive session
    python wirestr.py -D PLAYER_1=Mark -i "Hi \$PLAYER_1"
    python wirestr.py -e "5*(4+4+1)"                   # Evaluate expression
    python wirestr.py --help                           # Show help
"""

from __future__ import annotations

import sys


def main() -> int:
    """
    Main entry point for wirestr.

    Delegates all functionality to the wirestr_pkg.cli module,
    which handles argument parsing, interpolation, evaluation and output formatting.

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    from wirestr_pkg.cli import main_entry

    try:
        return main_entry(sys.argv[1:])
    except KeyboardInterrupt:
        print("\nInterrupted.")
        return 130


if __name__ == "__main__":
    sys.exit(main())
