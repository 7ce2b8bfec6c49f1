"""
Pour Puzzle CLI entry point.

Usage:
    python -m pourpuzzle.cli
    python -m pourpuzzle.cli play --capacities 12 7 5 --targets 6 6 0
    python -m pourpuzzle.cli show
"""

import sys
from .main import main

if __name__ == "__main__":
    sys.exit(main())
