"""The replisome: enzymes coordinated at one replication fork.

``advance_fork`` is the only state transition. Each call runs the same fixed
sequence: helicase unwinding, leading-strand synthesis, lagging-strand
priming and extension, then primer removal and ligation of finished Okazaki
fragments. Events come back in that order.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

import numpy as np

from replilab.config import ReplisomeConfig
from replilab.exceptions import EnzymeConstructionError, ReplisomeInitializationError
from replilab.models import (
    FRAGMENT_START_THRESHOLD,
    MAX_FRAGMENT_LENGTH,
    MAX_PRIMER_LENGTH,
    MIN_FRAGMENT_LENGTH,
    MIN_PRIMER_LENGTH,
    EnzymeKind,
    OrganismProfile,
    Strand,
)
from replilab.replication.enzymes import (
    DNALigase,
    DNAPolymerase,
    Enzyme,
    EnzymeFactory,
    Exonuclease,
    Helicase,
    Primase,
)
from replilab.replication.events import BaseEvent
from replilab.replication.fork import ReplicationFork
from replilab.replication.fragment import OkazakiFragment
from replilab.replication.primer import RNAPrimer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EnzymePosition:
    type: EnzymeKind
    position: int
    strand: Strand
    active: bool


@dataclass(frozen=True)
class ReplicationState:
    """Read-only snapshot of a replisome."""

    fork_position: int
    completion_percentage: float
    leading_strand_progress: int
    lagging_strand_progress: int
    active_fragments: tuple[OkazakiFragment, ...] = field(default_factory=tuple)
    active_enzymes: tuple[EnzymePosition, ...] = field(default_factory=tuple)


class Replisome:
    """Coordinated replication machinery for one fork.

    Owns one helicase, one primase, a leading and a lagging polymerase, one
    ligase and one exonuclease, plus the fork and its Okazaki fragments.
    Construction is all-or-nothing: if any enzyme cannot be built,
    ReplisomeInitializationError is raised.
    """

    def __init__(
        self,
        fork: ReplicationFork,
        organism: OrganismProfile | None = None,
        config: ReplisomeConfig | None = None,
        rng: np.random.Generator | None = None,
    ) -> None:
        self.fork = fork
        self.organism = organism if organism is not None else fork.organism
        self.config = config if config is not None else ReplisomeConfig()
        self._rng = rng if rng is not None else np.random.default_rng()
        self._check_fragment_geometry()

        start = fork.position
        try:
            self.helicase: Helicase = EnzymeFactory.create_helicase(start)
            self.primase: Primase = EnzymeFactory.create_primase(start)
            self.leading_polymerase: DNAPolymerase = EnzymeFactory.create_polymerase(
                start, self.config.leading_polymerase
            )
            self.lagging_polymerase: DNAPolymerase = EnzymeFactory.create_polymerase(
                start, self.config.lagging_polymerase
            )
            self.ligase: DNALigase = EnzymeFactory.create_ligase(start)
            self.exonuclease: Exonuclease = EnzymeFactory.create_exonuclease(start)
        except EnzymeConstructionError as exc:
            raise ReplisomeInitializationError(f"Failed to create replisome: {exc}") from exc

        self._active_fragments: dict[str, OkazakiFragment] = {}
        self._completed_fragments: list[OkazakiFragment] = []
        self._event_log: list[BaseEvent] = []
        self._fragment_counter = 0

        logger.info(
            "Replisome assembled at %d/%d for %s (leading %s, lagging %s)",
            start,
            fork.total_length,
            self.organism.label,
            self.config.leading_polymerase.value,
            self.config.lagging_polymerase.value,
        )

    def _check_fragment_geometry(self) -> None:
        # Fragments and primers are sized from these midpoints.
        size = self.fork.get_expected_fragment_size()
        if not MIN_FRAGMENT_LENGTH <= size <= MAX_FRAGMENT_LENGTH:
            raise ReplisomeInitializationError(
                f"Failed to create replisome: expected fragment size {size} bp for "
                f"{self.fork.organism.label} is outside {MIN_FRAGMENT_LENGTH}-{MAX_FRAGMENT_LENGTH} bp"
            )
        primer_length = self.fork.get_expected_primer_length()
        if not MIN_PRIMER_LENGTH <= primer_length <= MAX_PRIMER_LENGTH:
            raise ReplisomeInitializationError(
                f"Failed to create replisome: expected primer length {primer_length} nt for "
                f"{self.fork.organism.label} is outside {MIN_PRIMER_LENGTH}-{MAX_PRIMER_LENGTH} nt"
            )

    # -- step ---------------------------------------------------------------

    def advance_fork(self, base_pairs: int) -> list[BaseEvent]:
        """Advance the fork by up to ``base_pairs`` and return the events produced.

        A non-positive request, or a fork already at the template end, is a
        no-op returning an empty list.
        """
        if not self.fork.can_advance() or base_pairs <= 0:
            return []

        actual = self.fork.safe_advance(base_pairs)

        # Helicase starts at the fork and moves with it, so unwinding `actual` bp
        # leaves it at the new fork position.
        events: list[BaseEvent] = [self.helicase.unwind(actual)]
        events.extend(self._synthesize_leading_strand(actual))
        events.extend(self._synthesize_lagging_strand(actual))
        events.extend(self._process_completed_fragments())

        if self.config.enable_detailed_logging:
            self._event_log.extend(events)
        return events

    def _synthesize_leading_strand(self, base_pairs: int) -> list[BaseEvent]:
        self.leading_polymerase.move_to(self.fork.position - base_pairs)
        events: list[BaseEvent] = [self.leading_polymerase.synthesize(base_pairs, Strand.LEADING)]
        if self.config.enable_proofreading:
            events.append(self.leading_polymerase.proofread(Strand.LEADING))
        return events

    def _synthesize_lagging_strand(self, base_pairs: int) -> list[BaseEvent]:
        events: list[BaseEvent] = []
        if self._should_start_new_fragment():
            events.extend(self._initiate_fragment())

        for fragment in list(self._active_fragments.values()):
            if fragment.is_complete() or fragment.end <= self.fork.position:
                continue
            extend_by = min(base_pairs, fragment.end - self.fork.position)
            if extend_by <= 0:
                continue
            events.append(
                self.lagging_polymerase.synthesize(extend_by, Strand.LAGGING, fragment.id)
            )
            if self.config.enable_proofreading:
                events.append(self.lagging_polymerase.proofread(Strand.LAGGING, fragment.id))
        return events

    def _should_start_new_fragment(self) -> bool:
        if not self._active_fragments:
            return True
        # Most recent = numerically largest end; ties keep the earliest started.
        latest = max(self._active_fragments.values(), key=lambda frag: frag.end)
        distance = self.fork.position - latest.end
        return distance >= FRAGMENT_START_THRESHOLD * self.fork.get_expected_fragment_size()

    def _initiate_fragment(self) -> list[BaseEvent]:
        self._fragment_counter += 1
        fragment_id = f"okazaki_{self._fragment_counter}"
        start = self.fork.position
        size = self.fork.get_expected_fragment_size()
        primer_length = self.fork.get_expected_primer_length()

        self.primase.move_to(start)
        event = self.primase.synthesize_primer(primer_length, Strand.LAGGING, fragment_id)
        primer = RNAPrimer.generate_random(primer_length, start, self._rng)
        fragment = OkazakiFragment.create(fragment_id, start, start + size, primer)
        self._active_fragments[fragment_id] = fragment

        logger.debug(
            "Primed %s at %d (%d bp expected, primer %s)", fragment_id, start, size, primer.sequence
        )
        return [event]

    def _process_completed_fragments(self) -> list[BaseEvent]:
        events: list[BaseEvent] = []
        finished: list[str] = []
        fork_done = self.fork.is_complete()

        for fragment_id, fragment in self._active_fragments.items():
            if fragment.is_complete():
                continue
            if not (fragment.end <= self.fork.position or fork_done):
                continue
            if not fragment.primer_removed:
                events.append(self.exonuclease.remove_primer(len(fragment.primer), fragment_id))
                fragment.remove_primer()
            if not fragment.ligated:
                events.append(self.ligase.ligate(fragment_id))
                fragment.ligate()
            if fragment.is_complete():
                finished.append(fragment_id)

        for fragment_id in finished:
            self._completed_fragments.append(self._active_fragments.pop(fragment_id))
            logger.debug("Completed %s", fragment_id)
        return events

    # -- queries ------------------------------------------------------------

    def is_complete(self) -> bool:
        return self.fork.is_complete() and not self._active_fragments

    def get_active_fragments(self) -> list[OkazakiFragment]:
        return list(self._active_fragments.values())

    def get_completed_fragments(self) -> list[OkazakiFragment]:
        return list(self._completed_fragments)

    def get_event_log(self) -> list[BaseEvent]:
        return list(self._event_log)

    def get_lagging_strand_progress(self) -> int:
        if not self._completed_fragments:
            return 0
        return self._completed_fragments[-1].end

    def get_enzyme_positions(self) -> list[EnzymePosition]:
        placements: list[tuple[Enzyme, Strand]] = [
            (self.helicase, Strand.LEADING),
            (self.primase, Strand.LAGGING),
            (self.leading_polymerase, Strand.LEADING),
            (self.lagging_polymerase, Strand.LAGGING),
            (self.ligase, Strand.LAGGING),
            (self.exonuclease, Strand.LAGGING),
        ]
        return [
            EnzymePosition(type=enzyme.kind, position=enzyme.position, strand=strand, active=enzyme.active)
            for enzyme, strand in placements
        ]

    def get_current_state(self) -> ReplicationState:
        return ReplicationState(
            fork_position=self.fork.position,
            completion_percentage=self.fork.get_completion_percentage(),
            leading_strand_progress=self.fork.position,
            lagging_strand_progress=self.get_lagging_strand_progress(),
            active_fragments=tuple(self._active_fragments.values()),
            active_enzymes=tuple(self.get_enzyme_positions()),
        )

    def get_statistics(self) -> dict[str, Any]:
        fragments = self._completed_fragments + list(self._active_fragments.values())
        average = sum(f.length for f in fragments) / len(fragments) if fragments else 0.0
        return {
            **self.fork.get_statistics(),
            "active_fragments": len(self._active_fragments),
            "completed_fragments": len(self._completed_fragments),
            "average_fragment_size": average,
            "total_fragments_synthesized": len(fragments),
            "events_generated": len(self._event_log),
            "lagging_strand_progress": self.get_lagging_strand_progress(),
        }
