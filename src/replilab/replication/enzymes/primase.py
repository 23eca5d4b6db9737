"""Primase: lays down the RNA primers that seed Okazaki fragments."""

from __future__ import annotations

from replilab.exceptions import InvalidArgumentError
from replilab.models import (
    MAX_PRIMER_LENGTH,
    MIN_PRIMER_LENGTH,
    PRIMASE_SPEED_FACTOR,
    EnzymeKind,
    OrganismProfile,
    Strand,
)
from replilab.replication.enzymes.base import Enzyme
from replilab.replication.events import PrimerSynthesisEvent


class Primase(Enzyme):
    kind = EnzymeKind.PRIMASE

    def get_speed(self, organism: OrganismProfile) -> float:
        return organism.base_speed * PRIMASE_SPEED_FACTOR

    def synthesize_primer(
        self,
        primer_length: int,
        strand: Strand | str,
        fragment_id: str | None = None,
    ) -> PrimerSynthesisEvent:
        if not MIN_PRIMER_LENGTH <= primer_length <= MAX_PRIMER_LENGTH:
            raise InvalidArgumentError(
                f"Invalid primer length: {primer_length}. "
                f"Must be {MIN_PRIMER_LENGTH}-{MAX_PRIMER_LENGTH} nucleotides"
            )
        return PrimerSynthesisEvent(
            position=self.position,
            enzyme=self.kind,
            strand=Strand(strand),
            base_pairs_added=primer_length,
            fragment_id=fragment_id,
            primer_length=primer_length,
        )
