"""RNA primers for Okazaki fragment initiation."""

from __future__ import annotations

import numpy as np

from replilab.exceptions import FragmentStateError, InvalidSequenceError, PrimerError
from replilab.models import MAX_PRIMER_LENGTH, MIN_PRIMER_LENGTH
from replilab.sequences import RNA

_RIBONUCLEOTIDES = np.array(list("AUGC"))


def _check_length(length: int) -> None:
    if not MIN_PRIMER_LENGTH <= length <= MAX_PRIMER_LENGTH:
        raise PrimerError(
            f"RNA primers must be {MIN_PRIMER_LENGTH}-{MAX_PRIMER_LENGTH} nucleotides long. "
            f"Provided: {length} nucleotides"
        )


class RNAPrimer:
    """A short RNA primer at a template position.

    ``removed`` goes from False to True exactly once; marking an already
    removed primer raises FragmentStateError.
    """

    def __init__(self, rna: RNA, position: int, removed: bool = False) -> None:
        self._rna = rna
        self._position = position
        self._removed = removed

    @classmethod
    def create(cls, sequence: str, position: int, removed: bool = False) -> RNAPrimer:
        _check_length(len(sequence.strip()))
        if position < 0:
            raise PrimerError(f"Primer position must be non-negative. Provided: {position}")
        try:
            rna = RNA(sequence)
        except InvalidSequenceError as exc:
            raise PrimerError(f"Invalid RNA sequence: {exc}") from exc
        return cls(rna, position, removed)

    @classmethod
    def generate_random(
        cls,
        length: int,
        position: int,
        rng: np.random.Generator | None = None,
    ) -> RNAPrimer:
        """Draw ``length`` ribonucleotides uniformly from AUGC."""
        _check_length(length)
        rng = rng if rng is not None else np.random.default_rng()
        sequence = "".join(rng.choice(_RIBONUCLEOTIDES, size=length))
        return cls.create(sequence, position)

    @property
    def sequence(self) -> str:
        return self._rna.get_sequence()

    @property
    def position(self) -> int:
        return self._position

    @property
    def removed(self) -> bool:
        return self._removed

    def __len__(self) -> int:
        return len(self._rna)

    def get_rna(self) -> RNA:
        return self._rna

    def mark_as_removed(self) -> None:
        if self._removed:
            raise FragmentStateError(f"Primer at position {self._position} was already removed")
        self._removed = True

    def copy_to_position(self, position: int) -> RNAPrimer:
        """Return a new primer with the same sequence and state at ``position``."""
        if position < 0:
            raise PrimerError(f"Primer position must be non-negative. Provided: {position}")
        return RNAPrimer(self._rna, position, self._removed)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RNAPrimer):
            return NotImplemented
        return (
            self.sequence == other.sequence
            and self._position == other._position
            and self._removed == other._removed
        )

    def __repr__(self) -> str:
        status = "removed" if self._removed else "active"
        return f"RNAPrimer({self.sequence}, pos={self._position}, {status})"
