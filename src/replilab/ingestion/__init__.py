"""Template ingestion."""

from replilab.ingestion.fasta import FastaEntry, load_template, parse_fasta

__all__ = ["FastaEntry", "load_template", "parse_fasta"]
