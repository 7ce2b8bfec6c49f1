"""
Configuration for the pouring puzzle.

Module constants hold the canonical puzzle and the shell's fixed
strings. PuzzleConfig bundles a capacity/target pair and checks it once,
at creation.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from .validation import validate_capacities, validate_targets


# =============================================================================
# CONFIGURATION CONSTANTS
# =============================================================================

# Canonical puzzle: 8 units in the first bucket, split into 4 and 4
DEFAULT_CAPACITIES = (8, 5, 3)
DEFAULT_TARGETS = (4, 4, 0)

# Capacity of a Container built without one
DEFAULT_CONTAINER_CAPACITY = 10

# Shell strings
POUR_PROMPT = "pour > "
REPLAY_PROMPT = "play again? y/n: "
INVALID_INPUT_MESSAGE = "invalid input."
OUT_OF_BOUNDS_MESSAGE = "input out of bounds."
WIN_MESSAGE = "you win!"


@dataclass(frozen=True)
class PuzzleConfig:
    """
    Capacities and targets for one puzzle.

    Both tuples have the same length and every target fits its
    container. Violations raise PuzzleError on creation.
    """
    capacities: tuple[int, ...] = DEFAULT_CAPACITIES
    targets: tuple[int, ...] = DEFAULT_TARGETS

    def __post_init__(self):
        # Accept any sequence but store tuples
        object.__setattr__(self, "capacities", tuple(self.capacities))
        object.__setattr__(self, "targets", tuple(self.targets))
        validate_capacities(self.capacities)
        validate_targets(self.targets, self.capacities)

    @classmethod
    def from_options(
        cls,
        capacities: Optional[Sequence[int]] = None,
        targets: Optional[Sequence[int]] = None,
    ) -> PuzzleConfig:
        """
        Build a config from optional overrides.

        Each missing half falls back to the canonical puzzle, so custom
        capacities of a different length need their own targets.

        Raises:
            PuzzleError: If the resulting pair is invalid
        """
        if capacities is None:
            capacities = DEFAULT_CAPACITIES
        if targets is None:
            targets = DEFAULT_TARGETS

        return cls(capacities=tuple(capacities), targets=tuple(targets))
