"""Core data models for the replication simulator."""

from __future__ import annotations

from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

from replilab.exceptions import UnknownOrganismError


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class EnzymeKind(str, Enum):
    HELICASE = "helicase"          # unwinds the double helix
    PRIMASE = "primase"            # lays down RNA primers
    POLYMERASE = "polymerase"      # extends primers with DNA
    LIGASE = "ligase"              # seals nicks between fragments
    EXONUCLEASE = "exonuclease"    # strips RNA primers 5'->3'


class PolymeraseVariant(str, Enum):
    POL_I = "PolI"        # primer removal / gap filling
    POL_II = "PolII"      # repair
    POL_III = "PolIII"    # main replicative polymerase


class Strand(str, Enum):
    LEADING = "leading"
    LAGGING = "lagging"


class EventType(str, Enum):
    UNWIND = "unwind"
    PRIMER_SYNTHESIS = "primer_synthesis"
    DNA_SYNTHESIS = "dna_synthesis"
    PROOFREADING = "proofreading"
    LIGATION = "ligation"
    PRIMER_REMOVAL = "primer_removal"


# ---------------------------------------------------------------------------
# Biological constants
# ---------------------------------------------------------------------------

MIN_PRIMER_LENGTH = 3
MAX_PRIMER_LENGTH = 10

MIN_FRAGMENT_LENGTH = 10
MAX_FRAGMENT_LENGTH = 10_000

# Relative to OrganismProfile.base_speed
POLYMERASE_SPEED_FACTORS: dict[PolymeraseVariant, float] = {
    PolymeraseVariant.POL_I: 0.05,
    PolymeraseVariant.POL_II: 0.04,
    PolymeraseVariant.POL_III: 1.0,
}
HELICASE_SPEED_FACTOR = 1.0
PRIMASE_SPEED_FACTOR = 0.1
EXONUCLEASE_SPEED_FACTOR = 0.1
LIGASE_SPEED_FACTOR = 2.0

# A new Okazaki fragment is primed once the fork has moved this fraction of
# the expected fragment size past the most recent fragment's end.
FRAGMENT_START_THRESHOLD = 0.8


# ---------------------------------------------------------------------------
# Organism profiles
# ---------------------------------------------------------------------------

class OrganismProfile(BaseModel):
    """Replication parameters for one organism.

    ``base_speed`` is a relative throughput in bp per simulated second; the
    ranges are inclusive ``(min, max)`` pairs.
    """

    model_config = ConfigDict(frozen=True)

    label: str
    kind: Literal["prokaryotic", "eukaryotic"] = "prokaryotic"
    base_speed: float = Field(gt=0)
    fragment_size_range: tuple[int, int]
    primer_length_range: tuple[int, int]
    has_nucleosomes: bool = False

    @model_validator(mode="after")
    def _check_ranges(self) -> OrganismProfile:
        for name in ("fragment_size_range", "primer_length_range"):
            low, high = getattr(self, name)
            if low < 0:
                raise ValueError(f"{name} bounds must be non-negative, got ({low}, {high})")
            if low > high:
                raise ValueError(f"{name} minimum exceeds maximum: ({low}, {high})")
        return self


E_COLI = OrganismProfile(
    label="E. coli",
    kind="prokaryotic",
    base_speed=1000.0,
    fragment_size_range=(1000, 2000),
    primer_length_range=(3, 10),
    has_nucleosomes=False,
)

HUMAN = OrganismProfile(
    label="Homo sapiens",
    kind="eukaryotic",
    base_speed=50.0,
    fragment_size_range=(100, 200),
    primer_length_range=(3, 10),
    has_nucleosomes=True,
)

ORGANISM_PROFILES: dict[str, OrganismProfile] = {
    "e_coli": E_COLI,
    "human": HUMAN,
}


def get_organism(name: str) -> OrganismProfile:
    """Look up a preset profile by name (case-insensitive)."""
    key = name.strip().lower().replace(" ", "_").replace(".", "").replace("-", "_")
    try:
        return ORGANISM_PROFILES[key]
    except KeyError:
        known = ", ".join(sorted(ORGANISM_PROFILES))
        raise UnknownOrganismError(f"Unknown organism '{name}'. Known: {known}") from None
