"""Fork coordinator — drives a replisome across a whole template."""

from __future__ import annotations

import logging
import math
from typing import Any

import numpy as np

from replilab.config import ReplicationConfig
from replilab.exceptions import CoordinatorError, ReplicationError, StepBudgetExceededError
from replilab.models import EventType, OrganismProfile, Strand
from replilab.replication.events import BaseEvent
from replilab.replication.fork import ReplicationFork
from replilab.replication.replisome import ReplicationState, Replisome
from replilab.sequences import DNA

logger = logging.getLogger(__name__)


class ForkCoordinator:
    """Repeatedly advances one replisome until replication finishes.

    Each step moves the fork by ``step_size`` bp (1% of the template, at
    least 1 bp). Every event produced is kept, independent of the
    replisome's own detailed-logging setting.
    """

    def __init__(
        self,
        dna: DNA,
        config: ReplicationConfig | None = None,
        organism: OrganismProfile | None = None,
        rng: np.random.Generator | None = None,
    ) -> None:
        self.dna = dna
        self.config = config if config is not None else ReplicationConfig()
        self.organism = organism if organism is not None else self.config.organism
        self._rng = rng if rng is not None else np.random.default_rng(self.config.seed)

        self.fork = ReplicationFork(len(dna), self.organism, self.config.start_position)
        self.replisome = Replisome(
            self.fork, self.organism, self.config.to_replisome_config(), self._rng
        )
        self.step_size = max(1, math.ceil(len(dna) / 100))
        self._events: list[BaseEvent] = []
        self._steps = 0

    @property
    def steps(self) -> int:
        return self._steps

    def advance_fork(self, base_pairs: int) -> list[BaseEvent]:
        if base_pairs <= 0:
            raise CoordinatorError("Base pairs to advance must be positive")
        if self.fork.is_complete():
            raise CoordinatorError("Replication is already complete")
        events = self.replisome.advance_fork(base_pairs)
        self._events.extend(events)
        self._steps += 1
        return events

    def complete_replication(self, max_steps: int | None = None) -> ReplicationState:
        """Step until the replisome is complete.

        Raises StepBudgetExceededError after ``max_steps`` steps in this call;
        the run can be resumed by calling again.
        """
        budget = max_steps if max_steps is not None else self.config.max_steps
        if budget <= 0:
            raise CoordinatorError(f"max_steps must be positive, got {budget}")

        logger.info(
            "Replicating %d bp from %d (%s, step %d bp, budget %d steps)",
            self.fork.total_length,
            self.fork.position,
            self.organism.label,
            self.step_size,
            budget,
        )
        taken = 0
        while not self.replisome.is_complete():
            if taken >= budget:
                logger.warning(
                    "Step budget of %d exhausted at %.1f%%",
                    budget,
                    self.fork.get_completion_percentage(),
                )
                raise StepBudgetExceededError(taken, budget)
            advance_by = min(self.step_size, self.fork.remaining_distance)
            try:
                self.advance_fork(advance_by)
            except ReplicationError as exc:
                raise CoordinatorError(f"Replication failed at step {self._steps}: {exc}") from exc
            taken += 1

        logger.info(
            "Replication complete after %d steps, %d events, %d fragments",
            self._steps,
            len(self._events),
            len(self.replisome.get_completed_fragments()),
        )
        return self.get_current_state()

    def is_complete(self) -> bool:
        return self.replisome.is_complete()

    def get_current_state(self) -> ReplicationState:
        return self.replisome.get_current_state()

    def get_all_events(self) -> list[BaseEvent]:
        return list(self._events)

    def get_events_by_type(self, event_type: EventType | str) -> list[BaseEvent]:
        wanted = EventType(event_type).value
        return [e for e in self._events if e.type == wanted]

    def get_statistics(self) -> dict[str, Any]:
        counts = {t.value: 0 for t in EventType}
        lagging_synthesized = 0
        for event in self._events:
            counts[event.type] += 1
            if event.type == EventType.DNA_SYNTHESIS.value and event.strand is Strand.LAGGING:
                lagging_synthesized += event.base_pairs_added

        replisome = self.replisome
        active = len(replisome.get_active_fragments())
        completed = len(replisome.get_completed_fragments())
        return {
            "total_events": len(self._events),
            "steps": self._steps,
            "fork": {
                "position": self.fork.position,
                "completion": self.fork.get_completion_percentage(),
                "is_complete": self.fork.is_complete(),
            },
            "leading_strand": {
                "position": replisome.leading_polymerase.position,
                "synthesized_length": self.fork.position - self.config.start_position,
                "is_active": replisome.leading_polymerase.active and not self.fork.is_complete(),
                "speed": replisome.leading_polymerase.get_speed(self.organism),
            },
            "lagging_strand": {
                "total_fragments": active + completed,
                "completed_fragments": completed,
                "active_fragments": active,
                "synthesized_length": lagging_synthesized,
                "is_active": replisome.lagging_polymerase.active and not replisome.is_complete(),
            },
            "fragments": {
                "active": active,
                "completed": completed,
            },
            "event_counts": counts,
        }
