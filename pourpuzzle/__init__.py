# Pour Puzzle
# Core: Container and PuzzleState

"""
Core invariant: every container holds a volume in [0, capacity], and
pouring moves water without creating or destroying any of it.

This package implements the classic water pouring puzzle and a small
interactive shell that lets a human play it.
"""

from .container import Container
from .errors import PuzzleError, PuzzleErrorKind
from .puzzle import PuzzleState

__all__ = [
    "Container",
    "PuzzleError",
    "PuzzleErrorKind",
    "PuzzleState",
]
