# File: gwprimer/tests/test_amplicon.py
# Version: v0.1.0
"""Cloned product reconstruction and ORF translation."""
from __future__ import annotations

from gwprimer.app.core.primer.amplicon import build_amplicon, translate_amplicon, translate_orf
from gwprimer.app.core.primer.designer import design_cds
from gwprimer.app.core.primer.parameters import GatewayDesignParameters

NATIVE_CLONE = (
    "ggggacaagtttgtacaaaaaagcaggcttcgaaggagatagaaccatgg"
    "GATGTAAACGTGCCGTAACATTAGCATAAGTATACAGGAAATATGATGGGACCAGGCTACCGTTGACACCCACCTACCGTTAGCTGG"
    "TAAAGCCGTGCACGGCTGAGTGTGTCGCAGTGGGTAGGGACCCCCCTCTAGCAATAACATACTCTATCGAGCTTACGCAACTGTAA"
    "taggacccagctttcttgtacaaagtggtcccc"
)


def test_translate_orf_stops_at_first_stop():
    assert translate_orf("ATGGCCTAAGGG") == "MA*"
    assert translate_orf("atgNNNtgg") == "M?W"
    # trailing partial codon ignored
    assert translate_orf("ATGGC") == "M"


def test_native_amplicon(gene_seq, cds):
    params = GatewayDesignParameters(closestTmOnly=True)
    gw = design_cds("NM_TEST/NP_1", gene_seq, cds, params).pairs[0]
    amp = build_amplicon(gene_seq, gw, params)
    assert amp.sequence == NATIVE_CLONE
    assert len(amp.sequence) == 256
    assert amp.translation_start == 46
    assert amp.forward_start == 64
    assert amp.target_length == 173
    assert translate_amplicon(amp) == "MGCKRAVTLA*"


def test_fusion_amplicon(gene_seq, cds):
    params = GatewayDesignParameters(closestTmOnly=True, nTerminalFusion=True, cTerminalFusion=True)
    gw = design_cds("NM_TEST/NP_1", gene_seq, cds, params).pairs[0]
    amp = build_amplicon(gene_seq, gw, params)
    assert len(amp.sequence) == 232
    assert amp.sequence.endswith("CAACTGgacccagctttcttgtacaaagtggtcccc")
    assert amp.translation_start == 4
    assert amp.target_length == 171
    assert translate_amplicon(amp) == "TSLYKKAGFRCKRAVTLA*"
