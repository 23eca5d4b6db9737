"""Okazaki fragments on the lagging strand.

Lifecycle: synthesizing -> primer removed -> ligated (complete). Each
transition happens once and in that order; the flags are exposed read-only
and change only through remove_primer() and ligate().
"""

from __future__ import annotations

from typing import Any

import numpy as np

from replilab.exceptions import FragmentError, FragmentStateError, InvalidSequenceError
from replilab.models import MAX_FRAGMENT_LENGTH, MIN_FRAGMENT_LENGTH, OrganismProfile
from replilab.replication.primer import RNAPrimer
from replilab.sequences import DNA


class OkazakiFragment:
    """A half-open interval ``[start, end)`` of lagging strand seeded by one primer."""

    def __init__(
        self,
        fragment_id: str,
        start: int,
        end: int,
        primer: RNAPrimer,
        primer_removed: bool = False,
        ligated: bool = False,
    ) -> None:
        self._id = fragment_id
        self._start = start
        self._end = end
        self._primer = primer
        self._primer_removed = primer_removed
        self._ligated = ligated
        self._sequence: DNA | None = None

    @classmethod
    def create(
        cls,
        fragment_id: str,
        start: int,
        end: int,
        primer: RNAPrimer,
        primer_removed: bool = False,
        ligated: bool = False,
    ) -> OkazakiFragment:
        if not fragment_id or not fragment_id.strip():
            raise FragmentError("Fragment ID cannot be empty")
        if start < 0:
            raise FragmentError(f"Start position must be non-negative. Provided: {start}")
        if end <= start:
            raise FragmentError(
                f"End position ({end}) must be greater than start position ({start})"
            )
        length = end - start
        if length < MIN_FRAGMENT_LENGTH:
            raise FragmentError(f"Fragment too short: {length} bp. Minimum: {MIN_FRAGMENT_LENGTH} bp")
        if length > MAX_FRAGMENT_LENGTH:
            raise FragmentError(f"Fragment too long: {length} bp. Maximum: {MAX_FRAGMENT_LENGTH} bp")
        if ligated and not primer_removed:
            raise FragmentError(
                f"Fragment {fragment_id} cannot be ligated before its primer is removed"
            )
        if primer.removed and not primer_removed:
            raise FragmentError(
                f"Fragment {fragment_id} was given a primer that is already removed"
            )
        if primer_removed and not primer.removed:
            # The attached primer must agree with the fragment's flag.
            primer.mark_as_removed()
        return cls(fragment_id, start, end, primer, primer_removed, ligated)

    @classmethod
    def generate_random(
        cls,
        fragment_id: str,
        start: int,
        organism: OrganismProfile,
        rng: np.random.Generator | None = None,
    ) -> OkazakiFragment:
        """Fragment with a uniformly drawn length and primer length from the organism ranges."""
        rng = rng if rng is not None else np.random.default_rng()
        min_size, max_size = organism.fragment_size_range
        size = int(rng.integers(min_size, max_size, endpoint=True))
        min_primer, max_primer = organism.primer_length_range
        primer_length = int(rng.integers(min_primer, max_primer, endpoint=True))
        primer = RNAPrimer.generate_random(primer_length, start, rng)
        return cls.create(fragment_id, start, start + size, primer)

    # -- read-only state ----------------------------------------------------

    @property
    def id(self) -> str:
        return self._id

    @property
    def start(self) -> int:
        return self._start

    @property
    def end(self) -> int:
        return self._end

    @property
    def primer(self) -> RNAPrimer:
        return self._primer

    @property
    def primer_removed(self) -> bool:
        return self._primer_removed

    @property
    def ligated(self) -> bool:
        return self._ligated

    @property
    def length(self) -> int:
        return self._end - self._start

    def is_complete(self) -> bool:
        return self._primer_removed and self._ligated

    def needs_processing(self) -> bool:
        return not self._primer_removed or not self._ligated

    # -- sequence -----------------------------------------------------------

    def set_sequence(self, sequence: str | DNA) -> None:
        if len(sequence) != self.length:
            raise FragmentError(
                f"Sequence length ({len(sequence)}) doesn't match fragment length ({self.length})"
            )
        if isinstance(sequence, DNA):
            self._sequence = sequence
            return
        try:
            self._sequence = DNA(sequence)
        except InvalidSequenceError as exc:
            raise FragmentError(f"Invalid fragment sequence for {self._id}: {exc}") from exc

    def get_sequence(self) -> str | None:
        return self._sequence.get_sequence() if self._sequence is not None else None

    def get_dna(self) -> DNA | None:
        return self._sequence

    # -- lifecycle ----------------------------------------------------------

    def remove_primer(self) -> None:
        if self._primer_removed:
            raise FragmentStateError(f"Primer of {self._id} was already removed")
        self._primer.mark_as_removed()
        self._primer_removed = True

    def ligate(self) -> None:
        if not self._primer_removed:
            raise FragmentStateError(f"Cannot ligate {self._id} before its primer is removed")
        if self._ligated:
            raise FragmentStateError(f"{self._id} was already ligated")
        self._ligated = True

    def get_processing_status(self) -> dict[str, Any]:
        next_step = None
        if not self._primer_removed:
            next_step = "remove_primer"
        elif not self._ligated:
            next_step = "ligate"
        return {
            "primer_removed": self._primer_removed,
            "ligated": self._ligated,
            "complete": self.is_complete(),
            "next_step": next_step,
        }

    # -- geometry -----------------------------------------------------------

    def overlaps_with(self, other: OkazakiFragment) -> bool:
        return not (self._end <= other._start or other._end <= self._start)

    def is_adjacent_to(self, other: OkazakiFragment) -> bool:
        return self._end == other._start

    def validate_for_organism(self, organism: OrganismProfile) -> None:
        """Raise FragmentError if the length is outside the organism's typical range."""
        min_size, max_size = organism.fragment_size_range
        if not min_size <= self.length <= max_size:
            raise FragmentError(
                f"Fragment length ({self.length}) outside expected range for "
                f"{organism.label}: {min_size}-{max_size} bp"
            )

    def __repr__(self) -> str:
        status = "complete" if self.is_complete() else "processing"
        return f"OkazakiFragment({self._id}, {self._start}-{self._end}, {self.length}bp, {status})"
