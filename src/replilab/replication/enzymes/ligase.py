"""DNA ligase."""

from __future__ import annotations

from replilab.models import LIGASE_SPEED_FACTOR, EnzymeKind, OrganismProfile, Strand
from replilab.replication.enzymes.base import Enzyme
from replilab.replication.events import LigationEvent


class DNALigase(Enzyme):
    kind = EnzymeKind.LIGASE

    def get_speed(self, organism: OrganismProfile) -> float:
        return organism.base_speed * LIGASE_SPEED_FACTOR

    def ligate(self, fragment_id: str) -> LigationEvent:
        return LigationEvent(
            position=self.position,
            enzyme=self.kind,
            strand=Strand.LAGGING,
            fragment_id=fragment_id,
            ligation_site=self.position,
        )
