"""One-call replication helpers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import numpy as np

from replilab.config import ReplicationConfig
from replilab.exceptions import ReplicationError, ReplicationFailedError
from replilab.models import E_COLI, OrganismProfile
from replilab.replication.coordinator import ForkCoordinator
from replilab.sequences import DNA


@dataclass
class ReplicationResult:
    replicated_strands: tuple[DNA, DNA]
    steps: int
    event_count: int
    completion_percentage: float
    base_pairs_processed: int
    statistics: dict[str, Any] = field(default_factory=dict)


def replicate_dna(
    dna: DNA,
    config: ReplicationConfig | None = None,
    rng: np.random.Generator | None = None,
) -> ReplicationResult:
    """Replicate ``dna`` to completion.

    Both daughter strands equal the template; mutation is not modelled.
    Raises ReplicationFailedError whose message names the failing phase.
    """
    config = config if config is not None else ReplicationConfig()
    if config.start_position >= len(dna):
        raise ReplicationFailedError(
            f"Invalid start position: {config.start_position}. "
            f"Must be between 0 and {len(dna) - 1}"
        )

    try:
        coordinator = ForkCoordinator(dna, config, rng=rng)
    except ReplicationError as exc:
        raise ReplicationFailedError(f"Replication initialization failed: {exc}") from exc

    try:
        state = coordinator.complete_replication(config.max_steps)
    except ReplicationError as exc:
        raise ReplicationFailedError(f"Replication failed: {exc}") from exc

    return ReplicationResult(
        replicated_strands=(DNA(dna.get_sequence()), DNA(dna.get_sequence())),
        steps=coordinator.steps,
        event_count=len(coordinator.get_all_events()),
        completion_percentage=state.completion_percentage,
        base_pairs_processed=state.fork_position - config.start_position,
        statistics={
            **coordinator.get_statistics(),
            "replisome": coordinator.replisome.get_statistics(),
        },
    )


def replicate_dna_simple(dna: DNA, organism: OrganismProfile = E_COLI) -> tuple[DNA, DNA]:
    """Replicate with default settings and return only the two daughter strands."""
    return replicate_dna(dna, ReplicationConfig(organism=organism)).replicated_strands
