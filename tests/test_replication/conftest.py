"""Shared test fixtures for replication tests."""

from __future__ import annotations

import numpy as np
import pytest

from replilab.config import ReplicationConfig, ReplisomeConfig
from replilab.models import OrganismProfile
from replilab.replication.fork import ReplicationFork
from replilab.replication.replisome import Replisome
from replilab.sequences import DNA

# 69 bp template used for the deterministic short-template scenarios.
SHORT_TEMPLATE = "ATGAAACGCATTAGCACCACCATTACCACCACCATCACCATTACCACAGGTAACGGTGCGGGCTGACGC"


@pytest.fixture
def short_organism() -> OrganismProfile:
    """E. coli-like parameters whose fragment range covers the short template.

    Expected fragment size 55 bp, expected primer length 6 nt.
    """
    return OrganismProfile(
        label="E. coli (short template)",
        kind="prokaryotic",
        base_speed=1000.0,
        fragment_size_range=(10, 100),
        primer_length_range=(3, 10),
    )


@pytest.fixture
def fixed_organism() -> OrganismProfile:
    """Fragments of exactly 100 bp; new-fragment threshold at 80 bp."""
    return OrganismProfile(
        label="fixed",
        base_speed=100.0,
        fragment_size_range=(100, 100),
        primer_length_range=(5, 5),
    )


@pytest.fixture
def short_dna() -> DNA:
    return DNA(SHORT_TEMPLATE)


@pytest.fixture
def short_config(short_organism: OrganismProfile) -> ReplicationConfig:
    return ReplicationConfig(organism=short_organism, seed=7)


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(1234)


@pytest.fixture
def make_replisome(rng: np.random.Generator):
    """Factory: replisome over a fresh fork of ``length`` bp."""

    def _make(
        organism: OrganismProfile,
        length: int,
        start: int = 0,
        **config,
    ) -> Replisome:
        fork = ReplicationFork(length, organism, start)
        return Replisome(fork, organism, ReplisomeConfig(**config), rng)

    return _make
