"""Replication events emitted by enzyme actions.

One frozen model per event type, each carrying only the fields that type
needs. ``ReplicationEvent`` is the discriminated union over all of them.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Iterable, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from replilab.models import EnzymeKind, PolymeraseVariant, Strand


class BaseEvent(BaseModel):
    """Fields shared by every replication event."""

    model_config = ConfigDict(frozen=True)

    position: int
    enzyme: EnzymeKind
    strand: Strand
    base_pairs_added: int = 0
    fragment_id: str | None = None


class UnwindEvent(BaseEvent):
    type: Literal["unwind"] = "unwind"
    end_position: int


class PrimerSynthesisEvent(BaseEvent):
    type: Literal["primer_synthesis"] = "primer_synthesis"
    primer_length: int


class DnaSynthesisEvent(BaseEvent):
    type: Literal["dna_synthesis"] = "dna_synthesis"
    polymerase_variant: PolymeraseVariant
    end_position: int


class ProofreadingEvent(BaseEvent):
    type: Literal["proofreading"] = "proofreading"
    polymerase_variant: PolymeraseVariant


class LigationEvent(BaseEvent):
    type: Literal["ligation"] = "ligation"
    ligation_site: int


class PrimerRemovalEvent(BaseEvent):
    type: Literal["primer_removal"] = "primer_removal"
    primer_length: int
    removal_site: int


ReplicationEvent = Annotated[
    Union[
        UnwindEvent,
        PrimerSynthesisEvent,
        DnaSynthesisEvent,
        ProofreadingEvent,
        LigationEvent,
        PrimerRemovalEvent,
    ],
    Field(discriminator="type"),
]

_event_adapter: TypeAdapter[ReplicationEvent] = TypeAdapter(ReplicationEvent)


def event_to_json(event: BaseEvent) -> str:
    return event.model_dump_json()


def event_from_json(data: str | bytes) -> BaseEvent:
    return _event_adapter.validate_json(data)


def dump_events(events: Iterable[BaseEvent], path: str | Path) -> int:
    """Write events as JSON lines. Returns the number written."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    count = 0
    with path.open("w", encoding="utf-8") as f:
        for event in events:
            f.write(event_to_json(event))
            f.write("\n")
            count += 1
    return count


def load_events(path: str | Path) -> list[BaseEvent]:
    """Read a JSON-lines event log written by dump_events."""
    events = []
    with Path(path).open(encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if line:
                events.append(event_from_json(line))
    return events
