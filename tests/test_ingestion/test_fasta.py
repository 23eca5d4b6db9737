import pytest

from replilab.exceptions import InvalidSequenceError
from replilab.ingestion.fasta import load_template, parse_fasta


def test_parse_fasta(templates_fasta):
    entries = parse_fasta(templates_fasta)
    assert [e.id for e in entries] == ["ori_short", "lac_fragment"]
    assert entries[0].length == 69
    assert entries[1].length == 120
    assert "oriC" in entries[0].description


def test_load_first_record(templates_fasta):
    record_id, dna = load_template(templates_fasta)
    assert record_id == "ori_short"
    assert len(dna) == 69


def test_load_named_record(templates_fasta):
    record_id, dna = load_template(templates_fasta, "lac_fragment")
    assert record_id == "lac_fragment"
    assert dna.get_sequence().startswith("ATGACCATGATTACG")


def test_missing_record(templates_fasta):
    with pytest.raises(InvalidSequenceError, match="Record 'nope' not found"):
        load_template(templates_fasta, "nope")


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_template(tmp_path / "absent.fasta")


def test_empty_file(tmp_path):
    path = tmp_path / "empty.fasta"
    path.write_text("")
    with pytest.raises(InvalidSequenceError, match="No FASTA records"):
        load_template(path)


def test_ambiguous_bases_rejected(tmp_path):
    path = tmp_path / "amb.fasta"
    path.write_text(">amb\nATGNNNATG\n")
    with pytest.raises(InvalidSequenceError, match="'N' at 3"):
        load_template(path)
