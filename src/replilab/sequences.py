"""Nucleic acid value types.

Only what the replication engine needs: validated construction, length and
the raw string.
"""

from __future__ import annotations

from replilab.exceptions import InvalidSequenceError

DNA_ALPHABET = frozenset("ATGC")
RNA_ALPHABET = frozenset("AUGC")


class _NucleicAcid:
    alphabet: frozenset[str] = frozenset()
    kind = "nucleic acid"

    def __init__(self, sequence: str) -> None:
        normalized = sequence.strip().upper()
        if not normalized:
            raise InvalidSequenceError(f"{self.kind} sequence cannot be empty")
        bad = [(i, ch) for i, ch in enumerate(normalized) if ch not in self.alphabet]
        if bad:
            shown = ", ".join(f"'{ch}' at {i}" for i, ch in bad[:5])
            more = f" (+{len(bad) - 5} more)" if len(bad) > 5 else ""
            raise InvalidSequenceError(f"Invalid {self.kind} symbols: {shown}{more}")
        self._sequence = normalized

    def get_sequence(self) -> str:
        return self._sequence

    def __len__(self) -> int:
        return len(self._sequence)

    def __str__(self) -> str:
        return self._sequence

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._sequence == other._sequence

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._sequence))

    def __repr__(self) -> str:
        preview = self._sequence if len(self._sequence) <= 20 else self._sequence[:17] + "..."
        return f"{type(self).__name__}('{preview}', {len(self._sequence)} nt)"


class DNA(_NucleicAcid):
    alphabet = DNA_ALPHABET
    kind = "DNA"


class RNA(_NucleicAcid):
    alphabet = RNA_ALPHABET
    kind = "RNA"
