"""Main entry point for running wirestr_pkg as a module.

This allows running wirestr with:
    python -m wirestr_pkg
    python -m wirestr_pkg --health-check
    python -m wirestr_pkg -D items=100 -e "$items * 2"

This is equivalent to running:
    python -m wirestr_pkg.cli
    python wirestr.py
"""

from __future__ import annotations

import sys

from .cli import main_entry

if __name__ == "__main__":
    sys.exit(main_entry())
