from __future__ import annotations

"""
Main Entry Point.

Makes the package importable when this file is executed directly from a
source checkout and delegates to the CLI controller.
"""

import os
import sys

BASE_DIR = os.path.dirname(os.path.abspath(__file__))
if not getattr(sys, "frozen", False):
    SRC_DIR = os.path.dirname(BASE_DIR)
    if SRC_DIR not in sys.path:
        sys.path.insert(0, SRC_DIR)


def main() -> int:
    from codebase_scanner.interface.cli.app import main as cli_main
    return cli_main()


if __name__ == "__main__":
    sys.exit(main())
