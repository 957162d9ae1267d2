# File: gwprimer/app/core/primer/sequence.py
# Version: v0.2.0
"""
Sequence utilities shared by the mapper, the candidate filter and the renderer.

- reverse_complement: case-preserving A<->T, C<->G
- search_sequence: exact, case-insensitive, non-overlapping hits (end offsets)
"""

from __future__ import annotations

from typing import List

_RC_MAP = str.maketrans("ACGTacgt", "TGCAtgca")


def reverse_complement(seq: str) -> str:
    """Reverse-complement, keeping the case of every base."""
    return seq.translate(_RC_MAP)[::-1]


def search_sequence(dna: str, needle: str) -> List[int]:
    """
    Return the end offset of every occurrence of `needle` in `dna`.

    Matching is literal and case-insensitive; hits are reported left to right
    and never overlap. An end offset is the index just past the match, so the
    hit starts at `offset - len(needle)`.
    """
    if not needle:
        return []
    hay = dna.upper()
    pat = needle.upper()
    found: List[int] = []
    pos = hay.find(pat)
    while pos != -1:
        end = pos + len(pat)
        found.append(end)
        pos = hay.find(pat, end)
    return found


def count_both_strands(dna: str, primer: str) -> int:
    """Number of binding sites of `primer` on either strand of `dna`."""
    return len(search_sequence(dna, primer)) + len(search_sequence(dna, reverse_complement(primer)))
