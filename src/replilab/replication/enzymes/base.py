"""Base enzyme interface."""

from __future__ import annotations

from abc import ABC, abstractmethod

from replilab.exceptions import InvalidArgumentError
from replilab.models import EnzymeKind, OrganismProfile


class Enzyme(ABC):
    """Abstract base class for all replisome enzymes.

    An enzyme sits at a non-negative template position and is either active
    or idle. Subclasses implement one biologically named action that moves
    the enzyme (or not) and returns the resulting event.
    """

    kind: EnzymeKind

    def __init__(self, position: int, active: bool = True) -> None:
        if position < 0:
            raise InvalidArgumentError(f"Enzyme position must be non-negative: {position}")
        self._position = position
        self.active = active

    @property
    def position(self) -> int:
        return self._position

    @abstractmethod
    def get_speed(self, organism: OrganismProfile) -> float:
        """Relative throughput of this enzyme for ``organism``."""
        ...

    def can_operate(self, position: int) -> bool:
        return position >= 0

    def advance(self, distance: int) -> int:
        if distance < 0:
            raise InvalidArgumentError(f"Cannot advance by negative distance: {distance}")
        self._position += distance
        return self._position

    def move_to(self, position: int) -> None:
        if position < 0:
            raise InvalidArgumentError(f"Position must be non-negative: {position}")
        self._position = position

    def set_active(self, active: bool) -> None:
        self.active = active

    def __repr__(self) -> str:
        status = "active" if self.active else "inactive"
        return f"{type(self).__name__}(pos={self._position}, {status})"
