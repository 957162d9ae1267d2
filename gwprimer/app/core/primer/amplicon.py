# File: gwprimer/app/core/primer/amplicon.py
# Version: v0.1.0
"""
Reconstruct the cloned PCR product of a Gateway primer pair and translate it.

The product is: forward attB tail + forward primer ... reverse primer site +
reverse-complemented reverse attB tail.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from Bio.Data import CodonTable

from .constants import TRANSLATION_START_FUSION, TRANSLATION_START_NATIVE
from .designer import GatewayPrimerPair
from .parameters import GatewayDesignParameters
from .sequence import reverse_complement, search_sequence

_STANDARD = CodonTable.unambiguous_dna_by_id[1]


@dataclass(frozen=True)
class Amplicon:
    sequence: str              # full cloned product, 5'->3'
    translation_start: int     # first in-frame base of the ORF in `sequence`
    forward_start: int         # forward primer start in the gene (0-based)
    reverse_end: int           # reverse primer site end in the gene (exclusive)

    @property
    def target_length(self) -> int:
        return self.reverse_end - self.forward_start


def translate_orf(dna: str) -> str:
    """Translate complete codons until (and including) the first stop; '?' for unknown codons."""
    protein = []
    for i in range(0, len(dna) - 2, 3):
        codon = dna[i : i + 3].upper()
        if codon in _STANDARD.stop_codons:
            protein.append("*")
            break
        protein.append(_STANDARD.forward_table.get(codon, "?"))
    return "".join(protein)


def build_amplicon(
    gene_seq: str,
    gw_pair: GatewayPrimerPair,
    params: Optional[GatewayDesignParameters] = None,
) -> Amplicon:
    p = params or GatewayDesignParameters()
    f = gw_pair.pair.forward.seq
    r_site = reverse_complement(gw_pair.pair.reverse.seq)

    # both primers were checked to bind exactly once during candidate filtering
    f_hits = search_sequence(gene_seq, f)
    r_hits = search_sequence(gene_seq, r_site)
    if len(f_hits) != 1 or len(r_hits) != 1:
        raise ValueError(f"{gw_pair.identifier}: primers do not map uniquely to the gene sequence")
    f_hit = f_hits[0]
    r_hit = r_hits[0]

    insert = gene_seq[f_hit : r_hit - len(r_site)]
    clone = gw_pair.full_forward + insert + reverse_complement(gw_pair.full_reverse)
    start = TRANSLATION_START_FUSION if p.nTerminalFusion else TRANSLATION_START_NATIVE
    return Amplicon(
        sequence=clone,
        translation_start=start,
        forward_start=f_hit - len(f),
        reverse_end=r_hit,
    )


def translate_amplicon(amplicon: Amplicon) -> str:
    return translate_orf(amplicon.sequence[amplicon.translation_start :])
