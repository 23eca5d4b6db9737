"""Replisome enzyme actors."""

from replilab.replication.enzymes.base import Enzyme
from replilab.replication.enzymes.exonuclease import Exonuclease
from replilab.replication.enzymes.factory import EnzymeFactory
from replilab.replication.enzymes.helicase import Helicase
from replilab.replication.enzymes.ligase import DNALigase
from replilab.replication.enzymes.polymerase import DNAPolymerase
from replilab.replication.enzymes.primase import Primase

__all__ = [
    "DNALigase",
    "DNAPolymerase",
    "Enzyme",
    "EnzymeFactory",
    "Exonuclease",
    "Helicase",
    "Primase",
]
