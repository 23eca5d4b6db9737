"""Replication fork progression along a linear template."""

from __future__ import annotations

import math
from typing import Any

from replilab.exceptions import ForkError
from replilab.models import OrganismProfile


class ReplicationFork:
    """Tracks the fork position on a template of ``total_length`` bp.

    The position only ever moves forward and never passes the template end.
    """

    def __init__(self, total_length: int, organism: OrganismProfile, position: int = 0) -> None:
        if position < 0:
            raise ForkError(f"Position must be non-negative. Provided: {position}")
        if total_length <= 0:
            raise ForkError(f"DNA length must be positive. Provided: {total_length}")
        if position > total_length:
            raise ForkError(f"Position ({position}) cannot exceed DNA length ({total_length})")
        self._position = position
        self.total_length = total_length
        self.organism = organism

    @property
    def position(self) -> int:
        return self._position

    @property
    def remaining_distance(self) -> int:
        return max(0, self.total_length - self._position)

    def can_advance(self) -> bool:
        return self._position < self.total_length

    def is_complete(self) -> bool:
        return self._position >= self.total_length

    def get_completion_percentage(self) -> float:
        return min(100.0, self._position / self.total_length * 100)

    def advance(self, base_pairs: int) -> int:
        """Strict advance; raises instead of clamping. Returns the new position."""
        if base_pairs < 0:
            raise ForkError(f"Cannot advance by negative amount: {base_pairs}")
        new_position = self._position + base_pairs
        if new_position > self.total_length:
            raise ForkError(
                f"Advancement would exceed DNA length: {new_position} > {self.total_length}"
            )
        self._position = new_position
        return self._position

    def safe_advance(self, base_pairs: int) -> int:
        """Advance by at most the remaining distance. Returns the bp actually advanced."""
        if base_pairs < 0:
            raise ForkError(f"Cannot advance by negative amount: {base_pairs}")
        actual = min(base_pairs, self.remaining_distance)
        self._position += actual
        return actual

    # -- organism-derived heuristics ----------------------------------------

    def get_expected_fragment_size(self) -> int:
        low, high = self.organism.fragment_size_range
        return (low + high) // 2

    def get_expected_primer_length(self) -> int:
        low, high = self.organism.primer_length_range
        return (low + high) // 2

    def get_expected_fragment_count(self) -> int:
        low, high = self.organism.fragment_size_range
        return math.ceil(self.remaining_distance / ((low + high) / 2))

    def get_current_speed(self) -> float:
        return self.organism.base_speed

    def get_estimated_completion_time(self) -> float:
        """Simulated seconds to finish at base speed."""
        return self.remaining_distance / self.organism.base_speed

    def get_statistics(self) -> dict[str, Any]:
        return {
            "position": self._position,
            "total_length": self.total_length,
            "completion_percentage": self.get_completion_percentage(),
            "remaining_distance": self.remaining_distance,
            "estimated_time_remaining": self.get_estimated_completion_time(),
            "expected_fragments_remaining": self.get_expected_fragment_count(),
            "organism": self.organism.label,
            "organism_type": self.organism.kind,
            "speed": self.get_current_speed(),
        }

    def is_consistent_with(self, fragment_end: int) -> bool:
        return self._position >= fragment_end

    def copy(self) -> ReplicationFork:
        return ReplicationFork(self.total_length, self.organism, self._position)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ReplicationFork):
            return NotImplemented
        return (
            self._position == other._position
            and self.total_length == other.total_length
            and self.organism == other.organism
        )

    def __repr__(self) -> str:
        return (
            f"ReplicationFork(pos={self._position}/{self.total_length}, "
            f"{self.get_completion_percentage():.1f}% complete, {self.organism.kind})"
        )
