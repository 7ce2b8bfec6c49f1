"""
PuzzleState — the game board of the pouring puzzle.

Owns an ordered list of Containers and a parallel list of target
volumes. The puzzle is won when every container holds exactly its
target.

State machine:
    state       tuple of all container volumes
    transition  pour(from_index, to_index)
    initial     container 0 full, all others empty (canonical start)
    terminal    any state where is_over() holds; reset() starts again

Indices are 0-based. Invalid indices, capacities and targets raise
PuzzleError before any container is touched.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from .config import PuzzleConfig
from .container import Container
from .validation import validate_index, validate_target, validate_targets

logger = logging.getLogger(__name__)


class PuzzleState:
    """
    A set of containers plus the volumes each one should end up holding.

    Built from explicit capacities and targets, or the canonical
    8/5/3 puzzle with targets 4/4/0 when both are omitted.
    """

    def __init__(
        self,
        capacities: Optional[Sequence[int]] = None,
        targets: Optional[Sequence[int]] = None,
    ):
        config = PuzzleConfig.from_options(capacities, targets)

        self._containers = [Container(capacity) for capacity in config.capacities]
        self._targets = list(config.targets)
        self.reset()

    @classmethod
    def from_config(cls, config: PuzzleConfig) -> PuzzleState:
        return cls(config.capacities, config.targets)

    def __len__(self) -> int:
        return len(self._containers)

    def __repr__(self) -> str:
        return (
            f"PuzzleState(volumes={list(self.get_current_volume())}, "
            f"capacities={list(self.get_capacity())}, "
            f"targets={self._targets})"
        )

    # =========================================================================
    # COMMANDS
    # =========================================================================

    def pour(self, from_index: int, to_index: int) -> int:
        """
        Pour one container into another.

        Returns:
            Number of units moved

        Raises:
            PuzzleError: If either index is out of range (INVALID_INDEX)
        """
        validate_index(from_index, self.get_size())
        validate_index(to_index, self.get_size())

        moved = self._containers[from_index].pour(self._containers[to_index])
        logger.debug(
            "Poured %d unit(s) %d -> %d, now holding %d and %d",
            moved, from_index, to_index,
            self._containers[from_index].volume, self._containers[to_index].volume,
        )
        return moved

    def fill(self, index: int) -> None:
        """Fill one container to capacity."""
        validate_index(index, self.get_size())
        self._containers[index].fill()

    def reset(self) -> None:
        """Empty every container, then fill container 0."""
        for container in self._containers:
            container.empty()
        self._containers[0].fill()
        logger.debug("Puzzle reset to %s", self.get_current_volume())

    def set_targets(self, targets: Sequence[int]) -> None:
        """
        Replace every target at once.

        Raises:
            PuzzleError: On a length mismatch or an out-of-range target
        """
        validate_targets(targets, self.get_capacity())
        self._targets = list(targets)

    def set_target(self, index: int, target: int) -> None:
        """Replace the target of a single container."""
        validate_index(index, self.get_size())
        validate_target(target, self._containers[index].capacity, index)
        self._targets[index] = target

    # =========================================================================
    # QUERIES
    # =========================================================================

    def is_over(self) -> bool:
        """Check if every container holds exactly its target."""
        return all(
            container.volume == target
            for container, target in zip(self._containers, self._targets)
        )

    def get_size(self) -> int:
        return len(self._containers)

    def get_current_volume(self, index: Optional[int] = None):
        """
        Current volume of one container, or of all of them as a tuple.
        """
        if index is None:
            return tuple(container.volume for container in self._containers)
        validate_index(index, self.get_size())
        return self._containers[index].volume

    def get_capacity(self, index: Optional[int] = None):
        """Capacity of one container, or of all of them as a tuple."""
        if index is None:
            return tuple(container.capacity for container in self._containers)
        validate_index(index, self.get_size())
        return self._containers[index].capacity

    def get_target(self, index: Optional[int] = None):
        """Target of one container, or all targets as a tuple."""
        if index is None:
            return tuple(self._targets)
        validate_index(index, self.get_size())
        return self._targets[index]
