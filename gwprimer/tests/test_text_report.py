# File: gwprimer/tests/test_text_report.py
# Version: v0.1.0
"""Plain-text rendering of a primer pair (header, alignment, translation)."""
from __future__ import annotations

from gwprimer.app.core.primer.amplicon import build_amplicon
from gwprimer.app.core.primer.designer import design_cds, design_record
from gwprimer.app.core.primer.parameters import GatewayDesignParameters
from gwprimer.app.core.records.models import CodingTranscript, GeneRecord
from gwprimer.app.core.visualization.text_report import (
    BOLD,
    RED,
    render_alignment,
    render_pair,
    render_pair_header,
    render_record,
    render_translation,
)


def _first_pair(gene_seq, cds, **kw):
    params = GatewayDesignParameters(closestTmOnly=True, **kw)
    gw = design_cds("NM_TEST/NP_1", gene_seq, cds, params).pairs[0]
    return params, gw, build_amplicon(gene_seq, gw, params)


def test_header(gene_seq, cds):
    _, gw, _ = _first_pair(gene_seq, cds)
    text = render_pair_header(gw)
    assert text.splitlines() == [
        "",
        "NM_TEST/NP_1 pair 1",
        "Forward: ggggacaagtttgtacaaaaaagcaggcttcgaaggagatagaaccatggGATGTAAACGTGCCGTAACATTA",
        "Reverse: ggggaccactttgtacaagaaagctgggtcctaTTACAGTTGCGTAAGCTCGA",
        "Targetting primers: GATGTAAACGTGCCGTAACATTA/TTACAGTTGCGTAAGCTCGA (TM 59.88/59.88)",
    ]


def test_alignment(gene_seq, cds):
    _, gw, amp = _first_pair(gene_seq, cds)
    text = render_alignment(gene_seq, gw, amp, line_length=60)
    lines = text.split("\n")
    assert lines[0] == "Target Length: 173"
    assert lines[1] == ""
    seq_lines = lines[2:-2:2]
    assert "".join(seq_lines) == gene_seq[:60].lower() + cds + gene_seq[237:].lower()
    assert len(seq_lines) == 5
    assert text.count(">") == 23
    assert text.count("<") == 20
    # forward primer starts at gene position 64 -> column 4 of the second line
    assert lines[5].startswith("    >>>>")
    assert text.endswith("\n\n")


def test_alignment_colour(gene_seq, cds):
    _, gw, amp = _first_pair(gene_seq, cds)
    text = render_alignment(gene_seq, gw, amp, colour=True)
    assert BOLD in text
    assert text.count(RED) == 2


def test_translation_plain(gene_seq, cds):
    _, _, amp = _first_pair(gene_seq, cds)
    text = render_translation(amp, line_length=60)
    lines = text.split("\n")
    assert lines[0] == "PCR Product Length: 256"
    assert lines[1] == "Translation Length: 11"
    assert lines[3] == amp.sequence[:60]
    assert lines[4] == "-" * 46 + "-M--G--C--K--R"


def test_translation_numbered(gene_seq, cds):
    _, _, amp = _first_pair(gene_seq, cds)
    text = render_translation(amp, line_length=60, numbered=True)
    lines = text.split("\n")
    assert lines[3].startswith("  1: gggg")
    assert lines[4].startswith("  1: ---")
    assert lines[6].startswith(" 61: ")
    # line 2 opens 14 nt into the ORF, on the last base of codon 5
    assert lines[7].startswith("  6: ")


def test_render_pair_and_record(gene_seq, cds):
    params = GatewayDesignParameters(closestTmOnly=True, lineLength=80)
    gw = design_cds("NM_TEST/NP_1", gene_seq, cds, params).pairs[0]
    block = render_pair(gene_seq, gw, params)
    assert "NM_TEST/NP_1 pair 1" in block
    assert "Target Length: 173" in block
    assert "PCR Product Length: 256" in block

    record = GeneRecord("NM_TEST", "TST1", gene_seq, [CodingTranscript("NP_1", "TST1", cds)])
    text = render_record(design_record(record, params), params)
    assert text.count("PCR Product Length:") == 2
    assert "NM_TEST/NP_1 pair 2" in text
