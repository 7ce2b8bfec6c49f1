"""
Boundary validation for the pouring puzzle.

Every check here is binary: the input is either accepted as-is or
rejected with a PuzzleError naming the broken rule. Nothing is clamped
or silently repaired.

Two calling styles are offered:
    validate_*      raise PuzzleError on invalid input
    attempt_pour    returns a tagged PourResult instead of raising
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Sequence

from .errors import PuzzleError, PuzzleErrorKind

if TYPE_CHECKING:
    from .puzzle import PuzzleState

logger = logging.getLogger(__name__)


def _is_int(value) -> bool:
    # bool is an int subclass but never a meaningful capacity or index
    return isinstance(value, int) and not isinstance(value, bool)


# =============================================================================
# CAPACITY VALIDATION
# =============================================================================

def validate_capacity(capacity) -> None:
    """
    Validate a single container capacity.

    Raises:
        PuzzleError: If capacity is not a non-negative int (INVALID_CAPACITY)
    """
    if not _is_int(capacity):
        raise PuzzleError(
            PuzzleErrorKind.INVALID_CAPACITY,
            f"Capacity must be an integer, got {capacity!r}",
        )
    if capacity < 0:
        raise PuzzleError(
            PuzzleErrorKind.INVALID_CAPACITY,
            f"Capacity must be non-negative, got {capacity}",
        )


def validate_capacities(capacities: Sequence[int]) -> None:
    """
    Validate the capacity list a puzzle is built from.

    Raises:
        PuzzleError: If the list is empty (NO_CONTAINERS) or any
            capacity is invalid (INVALID_CAPACITY)
    """
    if len(capacities) == 0:
        raise PuzzleError(
            PuzzleErrorKind.NO_CONTAINERS,
            "A puzzle needs at least one container",
        )
    for capacity in capacities:
        validate_capacity(capacity)


# =============================================================================
# INDEX VALIDATION
# =============================================================================

def validate_index(index, size: int) -> None:
    """
    Validate a 0-based container index.

    Negative indices are rejected rather than counted from the end.

    Raises:
        PuzzleError: If index is not an int in [0, size) (INVALID_INDEX)
    """
    if not _is_int(index):
        raise PuzzleError(
            PuzzleErrorKind.INVALID_INDEX,
            f"Index must be an integer, got {index!r}",
        )
    if index < 0 or index >= size:
        raise PuzzleError(
            PuzzleErrorKind.INVALID_INDEX,
            f"Index {index} is outside [0, {size})",
        )


# =============================================================================
# TARGET VALIDATION
# =============================================================================

def validate_target(target, capacity: int, index: int) -> None:
    """
    Validate one target against its container's capacity.

    Raises:
        PuzzleError: If target is outside [0, capacity] (INVALID_TARGET)
    """
    if not _is_int(target) or target < 0 or target > capacity:
        raise PuzzleError(
            PuzzleErrorKind.INVALID_TARGET,
            f"Target {target!r} for container {index} is outside [0, {capacity}]",
        )


def validate_targets(targets: Sequence[int], capacities: Sequence[int]) -> None:
    """
    Validate a full target list against the container capacities.

    Raises:
        PuzzleError: If the lengths differ (TARGET_LENGTH_MISMATCH) or
            any target is out of range (INVALID_TARGET)
    """
    if len(targets) != len(capacities):
        raise PuzzleError(
            PuzzleErrorKind.TARGET_LENGTH_MISMATCH,
            f"Got {len(targets)} targets for {len(capacities)} containers",
        )
    for index, (target, capacity) in enumerate(zip(targets, capacities)):
        validate_target(target, capacity, index)


# =============================================================================
# TAGGED POUR
# =============================================================================

@dataclass(frozen=True)
class PourResult:
    """Result of a pour attempt."""
    accepted: bool
    moved: int = 0
    volumes: tuple[int, ...] = ()
    error: Optional[PuzzleError] = None


def attempt_pour(state: PuzzleState, from_index, to_index) -> PourResult:
    """
    Pour between two containers without raising on bad indices.

    Returns:
        PourResult with accepted=True and the units moved, or
        accepted=False and the PuzzleError that rejected the call
    """
    try:
        moved = state.pour(from_index, to_index)
    except PuzzleError as e:
        logger.debug("Pour %r -> %r rejected: %s", from_index, to_index, e)
        return PourResult(
            accepted=False,
            volumes=state.get_current_volume(),
            error=e,
        )

    return PourResult(
        accepted=True,
        moved=moved,
        volumes=state.get_current_volume(),
    )
