"""
Container — one bucket of the pouring puzzle.

A Container is a capacity-bounded volume counter. Water only moves in
whole units, and every operation leaves 0 <= volume <= capacity.

Operations:
    fill / empty             saturate to capacity / zero
    add_unit / remove_unit   move a single unit in or out
    pour                     transfer into another container until the
                             source is empty or the destination is full
"""

from __future__ import annotations

import logging

from .config import DEFAULT_CONTAINER_CAPACITY
from .validation import validate_capacity

logger = logging.getLogger(__name__)


class Container:
    """
    A bucket with a fixed capacity and a current volume.

    New containers start empty. Capacity only changes through resize().
    """

    def __init__(self, capacity: int = DEFAULT_CONTAINER_CAPACITY):
        validate_capacity(capacity)
        self._capacity = capacity
        self._volume = 0

    def __repr__(self) -> str:
        return f"Container(volume={self._volume}, capacity={self._capacity})"

    @property
    def volume(self) -> int:
        return self._volume

    @property
    def capacity(self) -> int:
        return self._capacity

    def is_empty(self) -> bool:
        return self._volume == 0

    def is_full(self) -> bool:
        return self._volume == self._capacity

    def add_unit(self) -> bool:
        """Add one unit. Returns False if the container is already full."""
        if self.is_full():
            return False
        self._volume += 1
        return True

    def remove_unit(self) -> bool:
        """Remove one unit. Returns False if the container is already empty."""
        if self.is_empty():
            return False
        self._volume -= 1
        return True

    def fill(self) -> None:
        """Fill to capacity."""
        self._volume = self._capacity

    def empty(self) -> None:
        """Drain to zero."""
        self._volume = 0

    def pour(self, other: Container) -> int:
        """
        Pour this container into another.

        Pours until this container is empty or the other is full,
        whichever happens first. Pouring a container into itself does
        nothing.

        Returns:
            Number of units moved (0 for a self-pour, an empty source,
            or a full destination)
        """
        if other is self:
            return 0

        moved = min(self._volume, other._capacity - other._volume)
        self._volume -= moved
        other._volume += moved
        return moved

    def resize(self, new_capacity: int) -> None:
        """
        Change the capacity.

        Volume above a smaller capacity is dropped.

        Raises:
            PuzzleError: If new_capacity is negative (INVALID_CAPACITY)
        """
        validate_capacity(new_capacity)

        if self._volume > new_capacity:
            logger.warning(
                "Resize to %d drops %d units", new_capacity, self._volume - new_capacity
            )
            self._volume = new_capacity
        self._capacity = new_capacity
