from pathlib import Path

import pytest

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def templates_fasta() -> Path:
    """Two-record FASTA: ori_short (69 bp) and lac_fragment (120 bp)."""
    return FIXTURES / "templates.fasta"
