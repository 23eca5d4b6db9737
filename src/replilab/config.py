"""Replication configuration — run settings plus environment-backed app config."""

from __future__ import annotations

import os

from pydantic import BaseModel, Field, field_validator

from replilab.models import E_COLI, OrganismProfile, PolymeraseVariant, get_organism


class ReplisomeConfig(BaseModel):
    """How a single replisome assembles and reports."""

    leading_polymerase: PolymeraseVariant = PolymeraseVariant.POL_III
    lagging_polymerase: PolymeraseVariant = PolymeraseVariant.POL_III
    enable_proofreading: bool = False
    enable_detailed_logging: bool = False


class ReplicationConfig(BaseModel):
    """Caller-facing options for one replication run."""

    organism: OrganismProfile = E_COLI
    start_position: int = 0
    max_steps: int = 10_000
    enable_detailed_logging: bool = False
    enable_proofreading: bool = False
    leading_polymerase: PolymeraseVariant = PolymeraseVariant.POL_III
    lagging_polymerase: PolymeraseVariant = PolymeraseVariant.POL_III
    seed: int | None = 42  # None draws fresh OS entropy
    log_level: str = "INFO"

    @field_validator("start_position")
    @classmethod
    def _non_negative_start(cls, value: int) -> int:
        if value < 0:
            raise ValueError(f"start_position must be non-negative, got {value}")
        return value

    @field_validator("max_steps")
    @classmethod
    def _positive_budget(cls, value: int) -> int:
        if value <= 0:
            raise ValueError(f"max_steps must be positive, got {value}")
        return value

    def to_replisome_config(self) -> ReplisomeConfig:
        return ReplisomeConfig(
            leading_polymerase=self.leading_polymerase,
            lagging_polymerase=self.lagging_polymerase,
            enable_proofreading=self.enable_proofreading,
            enable_detailed_logging=self.enable_detailed_logging,
        )


class AppConfig(BaseModel):
    replication: ReplicationConfig = Field(default_factory=ReplicationConfig)
    debug: bool = False


def _env_flag(name: str, default: str = "") -> bool:
    return os.environ.get(name, default).lower() in ("1", "true", "yes")


def _build_config() -> AppConfig:
    """Build config from environment variables."""
    seed = os.environ.get("REPLILAB_SEED", "42")
    return AppConfig(
        replication=ReplicationConfig(
            organism=get_organism(os.environ.get("REPLILAB_ORGANISM", "e_coli")),
            max_steps=int(os.environ.get("REPLILAB_MAX_STEPS", "10000")),
            seed=None if seed.lower() in ("", "none", "random") else int(seed),
            enable_proofreading=_env_flag("REPLILAB_PROOFREADING"),
            enable_detailed_logging=_env_flag("REPLILAB_DETAILED_LOGGING"),
            log_level=os.environ.get("REPLILAB_LOG_LEVEL", "INFO").upper(),
        ),
        debug=_env_flag("DEBUG"),
    )


config = _build_config()
