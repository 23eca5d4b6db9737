"""Validated enzyme construction."""

from __future__ import annotations

from replilab.exceptions import EnzymeConstructionError, InvalidArgumentError
from replilab.models import PolymeraseVariant
from replilab.replication.enzymes.exonuclease import Exonuclease
from replilab.replication.enzymes.helicase import Helicase
from replilab.replication.enzymes.ligase import DNALigase
from replilab.replication.enzymes.polymerase import DNAPolymerase
from replilab.replication.enzymes.primase import Primase


class EnzymeFactory:
    """Builds enzymes, re-raising constructor failures as EnzymeConstructionError.

    The error message names the enzyme ("Failed to create ligase: ...") and
    the original exception is kept as ``__cause__``.
    """

    @staticmethod
    def create_helicase(position: int) -> Helicase:
        try:
            return Helicase(position)
        except InvalidArgumentError as exc:
            raise EnzymeConstructionError(f"Failed to create helicase: {exc}") from exc

    @staticmethod
    def create_primase(position: int) -> Primase:
        try:
            return Primase(position)
        except InvalidArgumentError as exc:
            raise EnzymeConstructionError(f"Failed to create primase: {exc}") from exc

    @staticmethod
    def create_polymerase(
        position: int,
        variant: PolymeraseVariant | str = PolymeraseVariant.POL_III,
    ) -> DNAPolymerase:
        try:
            return DNAPolymerase(position, variant)
        except (InvalidArgumentError, ValueError) as exc:
            raise EnzymeConstructionError(f"Failed to create polymerase: {exc}") from exc

    @staticmethod
    def create_ligase(position: int) -> DNALigase:
        try:
            return DNALigase(position)
        except InvalidArgumentError as exc:
            raise EnzymeConstructionError(f"Failed to create ligase: {exc}") from exc

    @staticmethod
    def create_exonuclease(position: int) -> Exonuclease:
        try:
            return Exonuclease(position)
        except InvalidArgumentError as exc:
            raise EnzymeConstructionError(f"Failed to create exonuclease: {exc}") from exc
