"""Entry point for running mikado as a module.

Usage:
    python -m mikado goal.mikado
"""

import sys

from mikado.cli import main

if __name__ == "__main__":
    sys.exit(main())
