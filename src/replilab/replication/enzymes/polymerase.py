"""DNA polymerase (Pol I, II and III)."""

from __future__ import annotations

from replilab.exceptions import InvalidArgumentError
from replilab.models import (
    POLYMERASE_SPEED_FACTORS,
    EnzymeKind,
    OrganismProfile,
    PolymeraseVariant,
    Strand,
)
from replilab.replication.enzymes.base import Enzyme
from replilab.replication.events import DnaSynthesisEvent, ProofreadingEvent


class DNAPolymerase(Enzyme):
    """Polymerase of a given variant.

    Pol III is the processive replicative enzyme; Pol I and Pol II run at a
    small fraction of its speed.
    """

    kind = EnzymeKind.POLYMERASE

    def __init__(
        self,
        position: int,
        variant: PolymeraseVariant | str = PolymeraseVariant.POL_III,
        active: bool = True,
    ) -> None:
        super().__init__(position, active)
        self.variant = PolymeraseVariant(variant)

    def get_speed(self, organism: OrganismProfile) -> float:
        return organism.base_speed * POLYMERASE_SPEED_FACTORS[self.variant]

    def synthesize(
        self,
        base_pairs: int,
        strand: Strand | str,
        fragment_id: str | None = None,
    ) -> DnaSynthesisEvent:
        if base_pairs <= 0:
            raise InvalidArgumentError(f"Invalid synthesis length: {base_pairs}")
        start = self.position
        self.advance(base_pairs)
        return DnaSynthesisEvent(
            position=start,
            enzyme=self.kind,
            strand=Strand(strand),
            base_pairs_added=base_pairs,
            fragment_id=fragment_id,
            polymerase_variant=self.variant,
            end_position=self.position,
        )

    def proofread(self, strand: Strand | str, fragment_id: str | None = None) -> ProofreadingEvent:
        """3'->5' exonuclease check of the last stretch; does not move the enzyme."""
        return ProofreadingEvent(
            position=self.position,
            enzyme=self.kind,
            strand=Strand(strand),
            fragment_id=fragment_id,
            polymerase_variant=self.variant,
        )

    def __repr__(self) -> str:
        status = "active" if self.active else "inactive"
        return f"DNAPolymerase({self.variant.value}, pos={self.position}, {status})"
