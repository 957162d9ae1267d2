# File: gwprimer/app/core/records/models.py
# Version: v0.1.0
"""
Structured records handed to the designer by the record provider.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List


@dataclass(frozen=True)
class CodingTranscript:
    protein_id:  str
    gene:        str
    sequence:    str               # spliced CDS, 5'->3'


@dataclass(frozen=True)
class GeneRecord:
    accession:     str
    gene:          str
    gene_sequence: str
    transcripts:   List[CodingTranscript] = field(default_factory=list)
