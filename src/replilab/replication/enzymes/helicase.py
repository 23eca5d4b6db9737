"""DNA helicase — unwinds the duplex ahead of the fork."""

from __future__ import annotations

from replilab.models import HELICASE_SPEED_FACTOR, EnzymeKind, OrganismProfile, Strand
from replilab.replication.enzymes.base import Enzyme
from replilab.replication.events import UnwindEvent


class Helicase(Enzyme):
    kind = EnzymeKind.HELICASE

    def get_speed(self, organism: OrganismProfile) -> float:
        return organism.base_speed * HELICASE_SPEED_FACTOR

    def unwind(self, base_pairs: int) -> UnwindEvent:
        start = self.position
        self.advance(base_pairs)
        # Helicase opens both strands; events are reported on the leading side.
        return UnwindEvent(
            position=start,
            enzyme=self.kind,
            strand=Strand.LEADING,
            base_pairs_added=base_pairs,
            end_position=self.position,
        )
