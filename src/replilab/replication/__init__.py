"""DNA replication fork simulation."""

from replilab.replication.coordinator import ForkCoordinator
from replilab.replication.enzymes import (
    DNALigase,
    DNAPolymerase,
    Enzyme,
    EnzymeFactory,
    Exonuclease,
    Helicase,
    Primase,
)
from replilab.replication.events import (
    BaseEvent,
    DnaSynthesisEvent,
    LigationEvent,
    PrimerRemovalEvent,
    PrimerSynthesisEvent,
    ProofreadingEvent,
    ReplicationEvent,
    UnwindEvent,
    dump_events,
    load_events,
)
from replilab.replication.fork import ReplicationFork
from replilab.replication.fragment import OkazakiFragment
from replilab.replication.primer import RNAPrimer
from replilab.replication.replisome import EnzymePosition, ReplicationState, Replisome
from replilab.replication.simple import ReplicationResult, replicate_dna, replicate_dna_simple

__all__ = [
    "BaseEvent",
    "DNALigase",
    "DNAPolymerase",
    "DnaSynthesisEvent",
    "Enzyme",
    "EnzymeFactory",
    "EnzymePosition",
    "Exonuclease",
    "ForkCoordinator",
    "Helicase",
    "LigationEvent",
    "OkazakiFragment",
    "Primase",
    "PrimerRemovalEvent",
    "PrimerSynthesisEvent",
    "ProofreadingEvent",
    "RNAPrimer",
    "ReplicationEvent",
    "ReplicationFork",
    "ReplicationResult",
    "ReplicationState",
    "Replisome",
    "UnwindEvent",
    "dump_events",
    "load_events",
    "replicate_dna",
    "replicate_dna_simple",
]
