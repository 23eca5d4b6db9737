import pytest

from replilab.exceptions import InvalidSequenceError
from replilab.sequences import DNA, RNA


def test_dna_normalizes_case_and_whitespace():
    dna = DNA("  atgc\n")
    assert dna.get_sequence() == "ATGC"
    assert len(dna) == 4
    assert str(dna) == "ATGC"


def test_rna_alphabet():
    assert RNA("augc").get_sequence() == "AUGC"
    with pytest.raises(InvalidSequenceError, match="'T' at 1"):
        RNA("ATG")


def test_invalid_dna_reports_positions():
    with pytest.raises(InvalidSequenceError) as excinfo:
        DNA("ATGUXN")
    message = str(excinfo.value)
    assert "'U' at 3" in message
    assert "'X' at 4" in message
    assert "'N' at 5" in message


def test_empty_sequence():
    with pytest.raises(InvalidSequenceError, match="cannot be empty"):
        DNA("   ")


def test_equality_is_per_type():
    assert DNA("ATGC") == DNA("atgc")
    assert hash(DNA("ATGC")) == hash(DNA("ATGC"))
    assert DNA("AGC") != RNA("AGC")
