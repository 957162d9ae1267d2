# File: gwprimer/app/core/visualization/text_report.py
# Version: v0.2.0
"""
Plain-text report for Gateway primer pairs.

Per pair:
- header (identifier, full primers, targeting primers and Tms)
- gene sequence with the CDS upper-cased and '>'/'<' arrows under the primers
- cloned product with its translation (optionally numbered)

Colour is plain ANSI escapes: bold headers, red primer bases.
"""

from __future__ import annotations

from typing import List, Optional

from gwprimer.app.core.primer.amplicon import Amplicon, build_amplicon, translate_amplicon
from gwprimer.app.core.primer.designer import GatewayPrimerPair, RecordDesign
from gwprimer.app.core.primer.parameters import GatewayDesignParameters

BOLD = "\033[1m"
RED = "\033[31m"
RESET = "\033[0m"


def _bold(text: str, colour: bool) -> str:
    return f"{BOLD}{text}{RESET}" if colour else text


def _highlight(line: str, mask: List[bool]) -> str:
    """Wrap runs of masked characters in red."""
    out: List[str] = []
    inside = False
    for ch, m in zip(line, mask):
        if m and not inside:
            out.append(RED)
            inside = True
        elif not m and inside:
            out.append(RESET)
            inside = False
        out.append(ch)
    if inside:
        out.append(RESET)
    return "".join(out)


def render_pair_header(gw_pair: GatewayPrimerPair, colour: bool = False) -> str:
    p = gw_pair.pair
    header = (
        f"\n{gw_pair.identifier} pair {gw_pair.number}\n"
        f"Forward: {gw_pair.full_forward}\n"
        f"Reverse: {gw_pair.full_reverse}\n"
        f"Targetting primers: {p.forward.seq}/{p.reverse.seq} (TM {p.forward.tm:.2f}/{p.reverse.tm:.2f})\n"
    )
    return _bold(header, colour)


def render_alignment(
    gene_seq: str,
    gw_pair: GatewayPrimerPair,
    amplicon: Amplicon,
    line_length: int = 60,
    colour: bool = False,
) -> str:
    cds_start, cds_end = gw_pair.cds_start, gw_pair.cds_end
    coding = gene_seq[:cds_start].lower() + gene_seq[cds_start:cds_end].upper() + gene_seq[cds_end:].lower()

    f_len = len(gw_pair.pair.forward.seq)
    r_len = len(gw_pair.pair.reverse.seq)
    f_start = amplicon.forward_start
    r_start = amplicon.reverse_end - r_len

    arrows = [" "] * len(coding)
    mask = [False] * len(coding)
    for i in range(f_start, f_start + f_len):
        arrows[i] = ">"
        mask[i] = True
    for i in range(r_start, r_start + r_len):
        arrows[i] = "<"
        mask[i] = True
    arrow_line = "".join(arrows)

    lines = [_bold(f"Target Length: {amplicon.target_length}", colour), ""]
    for i in range(0, len(coding), line_length):
        s = coding[i : i + line_length]
        if colour:
            s = _highlight(s, mask[i : i + line_length])
        lines.append(s)
        ar = arrow_line[i : i + line_length]
        lines.append(ar if ar.strip() else "")
    lines.append("")
    return "\n".join(lines) + "\n"


def render_translation(
    amplicon: Amplicon,
    line_length: int = 60,
    colour: bool = False,
    numbered: bool = False,
) -> str:
    dna = amplicon.sequence
    start = amplicon.translation_start
    protein = translate_amplicon(amplicon)
    # one residue centred under each codon
    protein_line = "-" * start + "".join(f"-{aa}-" for aa in protein)

    out = [_bold(f"PCR Product Length: {len(dna)}\nTranslation Length: {len(protein)}\n\n", colour)]
    width = len(str(len(dna)))
    for i in range(0, len(dna), line_length):
        d = dna[i : i + line_length]
        p = protein_line[i : i + line_length] if i < len(protein_line) else ""
        if numbered:
            d = f"{i + 1:>{width}d}: {d}"
            pn = 1
            if i > 0:
                cn = i - start
                pn = int(cn / 3) + 1
                if cn % 3 == 2:
                    # line opens on the last base of a codon: label the next residue
                    pn += 1
            pn = min(pn, len(protein))
            p = f"{pn:>{width}d}: {p}"
        out.append(f"{d}\n{p}\n\n")
    return "".join(out)


def render_pair(
    gene_seq: str,
    gw_pair: GatewayPrimerPair,
    params: Optional[GatewayDesignParameters] = None,
) -> str:
    p = params or GatewayDesignParameters()
    amplicon = build_amplicon(gene_seq, gw_pair, p)
    return (
        render_pair_header(gw_pair, p.colour)
        + render_alignment(gene_seq, gw_pair, amplicon, p.lineLength, p.colour)
        + render_translation(amplicon, p.lineLength, p.colour, p.numberTranslation)
    )


def render_record(result: RecordDesign, params: Optional[GatewayDesignParameters] = None) -> str:
    """All pairs of a record, in transcript order."""
    return "".join(
        render_pair(result.gene_sequence, gw_pair, params)
        for design in result.designs
        for gw_pair in design.pairs
    )
