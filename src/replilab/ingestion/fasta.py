"""FASTA template loading -- pure functions, no simulation state."""

from dataclasses import dataclass
from pathlib import Path

from Bio import SeqIO

from replilab.exceptions import InvalidSequenceError
from replilab.sequences import DNA


@dataclass
class FastaEntry:
    id: str
    description: str
    sequence: str
    length: int


def parse_fasta(path: Path | str) -> list[FastaEntry]:
    """Parse a FASTA file and return list of entries."""
    path = Path(path)
    entries = []
    for record in SeqIO.parse(path, "fasta"):
        entries.append(
            FastaEntry(
                id=record.id,
                description=record.description,
                sequence=str(record.seq),
                length=len(record.seq),
            )
        )
    return entries


def load_template(path: Path | str, record_id: str | None = None) -> tuple[str, DNA]:
    """Return ``(record id, DNA)`` for the first record, or the one named ``record_id``."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"FASTA file not found: {path}")
    entries = parse_fasta(path)
    if not entries:
        raise InvalidSequenceError(f"No FASTA records in {path}")
    if record_id is not None:
        matches = [e for e in entries if e.id == record_id]
        if not matches:
            raise InvalidSequenceError(f"Record '{record_id}' not found in {path}")
        entry = matches[0]
    else:
        entry = entries[0]
    return entry.id, DNA(entry.sequence)
