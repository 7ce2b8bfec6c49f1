"""
Error kinds for the pouring puzzle.

The core performs its checks at the API boundary and raises a single
exception type tagged with the rule that was broken. Valid input never
raises.
"""

from __future__ import annotations

from enum import Enum


class PuzzleErrorKind(Enum):
    """
    Invalid-input rules.

    INVALID_CAPACITY:       capacity is negative or not an integer
    INVALID_INDEX:          container index outside [0, size)
    TARGET_LENGTH_MISMATCH: target count differs from container count
    INVALID_TARGET:         target outside [0, capacity] of its container
    NO_CONTAINERS:          a puzzle needs at least one container
    """
    INVALID_CAPACITY = "invalid_capacity"
    INVALID_INDEX = "invalid_index"
    TARGET_LENGTH_MISMATCH = "target_length_mismatch"
    INVALID_TARGET = "invalid_target"
    NO_CONTAINERS = "no_containers"


class PuzzleError(Exception):
    """Raised when a puzzle operation is called with invalid input."""

    def __init__(self, kind: PuzzleErrorKind, reason: str):
        self.kind = kind
        self.reason = reason
        super().__init__(f"[{kind.value}] {reason}")
