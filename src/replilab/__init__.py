"""replilab: DNA replication fork simulator."""

from replilab.config import ReplicationConfig, ReplisomeConfig
from replilab.models import E_COLI, HUMAN, ORGANISM_PROFILES, OrganismProfile, get_organism
from replilab.replication import ForkCoordinator, Replisome, replicate_dna, replicate_dna_simple
from replilab.sequences import DNA, RNA

__version__ = "0.1.0"

__all__ = [
    "DNA",
    "E_COLI",
    "HUMAN",
    "ORGANISM_PROFILES",
    "ForkCoordinator",
    "OrganismProfile",
    "RNA",
    "ReplicationConfig",
    "ReplisomeConfig",
    "Replisome",
    "get_organism",
    "replicate_dna",
    "replicate_dna_simple",
]
