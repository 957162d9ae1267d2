# File: gwprimer/tests/conftest.py
# Version: v0.2.0
"""
Test bootstrap: ensure project root is on sys.path so 'gwprimer.*' imports work,
and share a small synthetic gene (5' UTR + CDS + 3' UTR) across tests.
"""
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[2]  # repo root (../.. from this file)
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

UTR5 = "cgcaccagaattgtccaaccgttgagaaagctaccggctgtagcgctaagagacgtgcaa"
CDS = (
    "ATGAGATGTAAACGTGCCGTAACATTAGCATAAGTATACAGGAAATATGATGGGACCAGGCTACCGTTGAC"
    "ACCCACCTACCGTTAGCTGGTAAAGCCGTGCACGGCTGAGTGTGTCGCAGTGGGTAGGGACCCCCCTCTAG"
    "CAATAACATACTCTATCGAGCTTACGCAACTGTAA"
)
UTR3 = "tattcctacatcgcgacccgatctgctgaattaaagcctgactgtacgtcactgcactaa"


@pytest.fixture
def cds() -> str:
    return CDS


@pytest.fixture
def gene_seq() -> str:
    return UTR5 + CDS + UTR3
