"""Tests for ForkCoordinator."""

from __future__ import annotations

import logging

import numpy as np
import pytest

from replilab.config import ReplicationConfig
from replilab.exceptions import (
    CoordinatorError,
    InvalidArgumentError,
    ReplicationError,
    ReplisomeInitializationError,
    StepBudgetExceededError,
)
from replilab.models import E_COLI, EventType, OrganismProfile
from replilab.replication.coordinator import ForkCoordinator
from replilab.sequences import DNA


def test_step_size_is_one_percent() -> None:
    assert ForkCoordinator(DNA("A" * 1000)).step_size == 10
    assert ForkCoordinator(DNA("A" * 1001)).step_size == 11
    assert ForkCoordinator(DNA("A" * 50)).step_size == 1


def test_short_template_scenario(short_dna, short_config) -> None:
    coordinator = ForkCoordinator(short_dna, short_config)
    state = coordinator.complete_replication()

    assert coordinator.is_complete()
    assert coordinator.steps == 69
    assert state.fork_position == 69
    assert state.completion_percentage == pytest.approx(100.0)
    assert state.active_fragments == ()
    assert state.lagging_strand_progress == 112

    completed = coordinator.replisome.get_completed_fragments()
    assert [(f.id, f.start, f.end) for f in completed] == [
        ("okazaki_1", 1, 56),
        ("okazaki_2", 57, 112),
    ]

    stats = coordinator.get_statistics()
    assert stats["total_events"] == 212
    assert stats["steps"] == 69
    assert stats["fork"] == {"position": 69, "completion": 100.0, "is_complete": True}
    assert stats["fragments"] == {"active": 0, "completed": 2}
    assert stats["leading_strand"] == {
        "position": 69,
        "synthesized_length": 69,
        "is_active": False,
        "speed": 1000.0,
    }
    assert stats["lagging_strand"] == {
        "total_fragments": 2,
        "completed_fragments": 2,
        "active_fragments": 0,
        "synthesized_length": 68,
        "is_active": False,
    }
    assert stats["event_counts"] == {
        "unwind": 69,
        "primer_synthesis": 2,
        "dna_synthesis": 137,
        "proofreading": 0,
        "ligation": 2,
        "primer_removal": 2,
    }


def test_events_recorded_without_detailed_logging(short_dna, short_config) -> None:
    assert not short_config.enable_detailed_logging
    coordinator = ForkCoordinator(short_dna, short_config)
    coordinator.complete_replication()
    assert len(coordinator.get_all_events()) == 212
    assert coordinator.replisome.get_event_log() == []


def test_events_by_type(short_dna, short_config) -> None:
    coordinator = ForkCoordinator(short_dna, short_config)
    coordinator.complete_replication()
    ligations = coordinator.get_events_by_type(EventType.LIGATION)
    assert [e.fragment_id for e in ligations] == ["okazaki_1", "okazaki_2"]
    assert coordinator.get_events_by_type("primer_removal")[0].fragment_id == "okazaki_1"
    with pytest.raises(ValueError):
        coordinator.get_events_by_type("replication")


def test_proofreading_doubles_synthesis_events(short_dna, short_organism) -> None:
    config = ReplicationConfig(organism=short_organism, enable_proofreading=True)
    coordinator = ForkCoordinator(short_dna, config)
    coordinator.complete_replication()
    counts = coordinator.get_statistics()["event_counts"]
    assert counts["proofreading"] == counts["dna_synthesis"] == 137


def test_start_position(short_dna, short_organism) -> None:
    config = ReplicationConfig(organism=short_organism, start_position=50)
    coordinator = ForkCoordinator(short_dna, config)
    assert coordinator.fork.position == 50
    state = coordinator.complete_replication()
    assert state.fork_position == 69
    assert coordinator.steps == 19


class TestManualAdvance:
    def test_rejects_non_positive(self, short_dna, short_config):
        coordinator = ForkCoordinator(short_dna, short_config)
        with pytest.raises(CoordinatorError, match="must be positive"):
            coordinator.advance_fork(0)
        assert coordinator.steps == 0

    def test_rejects_after_completion(self, short_dna, short_config):
        coordinator = ForkCoordinator(short_dna, short_config)
        coordinator.advance_fork(100)
        assert coordinator.fork.is_complete()
        with pytest.raises(CoordinatorError, match="already complete"):
            coordinator.advance_fork(1)

    def test_counts_steps_and_keeps_events(self, short_dna, short_config):
        coordinator = ForkCoordinator(short_dna, short_config)
        first = coordinator.advance_fork(5)
        second = coordinator.advance_fork(5)
        assert coordinator.steps == 2
        assert coordinator.get_all_events() == first + second


class TestStepBudget:
    def test_budget_exhausted_is_resumable(self, short_dna, short_config):
        coordinator = ForkCoordinator(short_dna, short_config)
        with pytest.raises(StepBudgetExceededError) as excinfo:
            coordinator.complete_replication(max_steps=10)
        assert excinfo.value.steps == 10
        assert excinfo.value.max_steps == 10
        assert "within 10 steps" in str(excinfo.value)
        assert coordinator.fork.position == 10
        assert not coordinator.is_complete()

        coordinator.complete_replication(max_steps=100)
        assert coordinator.is_complete()
        assert coordinator.steps == 69
        assert coordinator.get_statistics()["total_events"] == 212

    def test_budget_defaults_to_config(self, short_dna, short_organism):
        config = ReplicationConfig(organism=short_organism, max_steps=5)
        coordinator = ForkCoordinator(short_dna, config)
        with pytest.raises(StepBudgetExceededError):
            coordinator.complete_replication()
        assert coordinator.steps == 5

    def test_budget_error_is_a_coordinator_error(self):
        assert issubclass(StepBudgetExceededError, CoordinatorError)
        assert issubclass(StepBudgetExceededError, ReplicationError)

    def test_non_positive_budget(self, short_dna, short_config):
        coordinator = ForkCoordinator(short_dna, short_config)
        with pytest.raises(CoordinatorError, match="max_steps must be positive"):
            coordinator.complete_replication(max_steps=0)

    def test_budget_warning_logged(self, short_dna, short_config, caplog):
        coordinator = ForkCoordinator(short_dna, short_config)
        with caplog.at_level(logging.WARNING, logger="replilab.replication.coordinator"):
            with pytest.raises(StepBudgetExceededError):
                coordinator.complete_replication(max_steps=3)
        assert "Step budget of 3 exhausted" in caplog.text


def test_step_failure_is_wrapped(monkeypatch, short_dna, short_config) -> None:
    coordinator = ForkCoordinator(short_dna, short_config)
    coordinator.advance_fork(1)
    coordinator.advance_fork(1)

    def broken(*args, **kwargs):
        raise InvalidArgumentError("Invalid synthesis length: 0")

    monkeypatch.setattr(coordinator.replisome.leading_polymerase, "synthesize", broken)
    with pytest.raises(CoordinatorError, match="Replication failed at step 2: Invalid synthesis length"):
        coordinator.complete_replication()


def test_unusable_profile_fails_at_construction(short_dna) -> None:
    organism = OrganismProfile(
        label="tiny", base_speed=1.0, fragment_size_range=(4, 6), primer_length_range=(3, 5)
    )
    with pytest.raises(ReplisomeInitializationError, match="expected fragment size 5 bp"):
        ForkCoordinator(short_dna, ReplicationConfig(organism=organism))


def test_explicit_organism_overrides_config(short_dna, short_organism) -> None:
    coordinator = ForkCoordinator(short_dna, ReplicationConfig(organism=E_COLI), organism=short_organism)
    assert coordinator.fork.organism == short_organism
    assert coordinator.replisome.organism == short_organism


def test_same_seed_same_primers(short_dna, short_config) -> None:
    def primers(rng):
        coordinator = ForkCoordinator(short_dna, short_config, rng=rng)
        coordinator.complete_replication()
        return [f.primer.sequence for f in coordinator.replisome.get_completed_fragments()]

    assert primers(np.random.default_rng(3)) == primers(np.random.default_rng(3))
    assert primers(None) == primers(None)  # falls back to config.seed


def test_strand_statistics_mid_run(short_dna, short_organism) -> None:
    config = ReplicationConfig(organism=short_organism, start_position=10)
    coordinator = ForkCoordinator(short_dna, config)
    coordinator.advance_fork(5)  # okazaki_1 spans [15, 70)
    stats = coordinator.get_statistics()
    assert stats["leading_strand"]["position"] == 15
    assert stats["leading_strand"]["synthesized_length"] == 5
    assert stats["leading_strand"]["is_active"]
    assert stats["lagging_strand"]["total_fragments"] == 1
    assert stats["lagging_strand"]["active_fragments"] == 1
    assert stats["lagging_strand"]["synthesized_length"] == 5
    assert stats["lagging_strand"]["is_active"]
