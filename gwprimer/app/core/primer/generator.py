# File: gwprimer/app/core/primer/generator.py
# Version: v0.4.0
"""
Candidate primer generator.

- Seed windows: fixed 25-nt windows at the 5' end (forward) and 3' end (reverse,
  reverse-complemented) of the CDS; offsets depend on the fusion mode.
- Candidates: prefixes of each seed with length in [18, 25], kept only if they
  contain only A/C/G/T, bind exactly once to the target (either strand)
  and have their Tm in range.
- Output: Tm (rounded to 2 decimals) -> unique primer sequences.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional

from .constants import DEFAULT_MAX_LEN, DEFAULT_MIN_LEN, SEED_WINDOW_LEN
from .parameters import ReactionConditions
from .sequence import count_both_strands, reverse_complement
from .thermodynamics import calculate_tm, is_valid_oligo

log = logging.getLogger(__name__)


def forward_seed_windows(cds: str, nterm_fusion: bool) -> List[str]:
    if nterm_fusion:
        # keep the first codon in frame with the N-terminal tag
        return [cds[0 : SEED_WINDOW_LEN], cds[3 : 3 + SEED_WINDOW_LEN]]
    # native: the adapter supplies the Kozak ATGG context
    return [cds[1 : 1 + SEED_WINDOW_LEN], cds[4 : 4 + SEED_WINDOW_LEN]]


def reverse_seed_windows(cds: str, cterm_fusion: bool) -> List[str]:
    L = len(cds)
    if cterm_fusion:
        # stop codon excluded
        return [reverse_complement(cds[max(0, L - 28) : L - 3])]
    return [reverse_complement(cds[max(0, L - SEED_WINDOW_LEN) :])]


def generate_candidates(
    seed_windows: Iterable[str],
    target_seq: str,
    min_tm: float,
    max_tm: float,
    conditions: Optional[ReactionConditions] = None,
    min_len: int = DEFAULT_MIN_LEN,
    max_len: int = DEFAULT_MAX_LEN,
) -> Dict[float, List[str]]:
    """
    Build the Tm -> primers table for one side.

    An empty result means no usable primer on this side.
    """
    cond = conditions or ReactionConditions()
    tm_to_primers: Dict[float, List[str]] = {}
    seen = set()
    for seed in seed_windows:
        for length in range(min_len, max_len + 1):
            if length > len(seed):
                break
            p = seed[:length]
            if p in seen:
                continue
            if not is_valid_oligo(p):
                log.debug("reject %s: ambiguous base", p)
                continue
            sites = count_both_strands(target_seq, p)
            if sites != 1:
                log.debug("reject %s: %d binding sites", p, sites)
                continue
            tm = calculate_tm(p, cond)
            if tm < min_tm or tm > max_tm:
                log.debug("reject %s: Tm %.2f not in [%g, %g]", p, tm, min_tm, max_tm)
                continue
            seen.add(p)
            tm_to_primers.setdefault(round(tm, 2), []).append(p)
    return tm_to_primers
