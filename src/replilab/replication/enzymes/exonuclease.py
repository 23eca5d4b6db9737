"""5'->3' exonuclease that strips RNA primers from finished fragments."""

from __future__ import annotations

from replilab.models import EXONUCLEASE_SPEED_FACTOR, EnzymeKind, OrganismProfile, Strand
from replilab.replication.enzymes.base import Enzyme
from replilab.replication.events import PrimerRemovalEvent


class Exonuclease(Enzyme):
    kind = EnzymeKind.EXONUCLEASE

    def get_speed(self, organism: OrganismProfile) -> float:
        return organism.base_speed * EXONUCLEASE_SPEED_FACTOR

    def remove_primer(self, primer_length: int, fragment_id: str) -> PrimerRemovalEvent:
        # Negative base_pairs_added: nucleotides leave the strand.
        return PrimerRemovalEvent(
            position=self.position,
            enzyme=self.kind,
            strand=Strand.LAGGING,
            base_pairs_added=-primer_length,
            fragment_id=fragment_id,
            primer_length=primer_length,
            removal_site=self.position,
        )
